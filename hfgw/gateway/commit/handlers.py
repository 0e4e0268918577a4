import asyncio
import logging

from hfgw.gateway.event_hub import VALID
from hfgw.gateway.exceptions import CommitError, CommitTimeoutError

_logger = logging.getLogger(__name__)


class CommitHandler(object):
    """Waits for one submitted transaction to be committed.

    ``start_listening`` must be called before the transaction is sent to the
    orderer, and ``cancel_listening`` once the wait is over, whatever the
    outcome.
    """

    def start_listening(self):
        raise NotImplementedError

    async def wait_for_events(self, timeout):
        raise NotImplementedError

    def cancel_listening(self):
        raise NotImplementedError


class NoCommitHandler(CommitHandler):

    def start_listening(self):
        pass

    async def wait_for_events(self, timeout):
        pass

    def cancel_listening(self):
        pass


class AllForTx(object):
    """Complete once every event hub has reported; at least one must succeed."""

    def __init__(self, hub_names):
        self._pending = set(hub_names)
        self._succeeded = 0

    def event_received(self, hub_name):
        self._pending.discard(hub_name)
        self._succeeded += 1

    def error_received(self, hub_name):
        self._pending.discard(hub_name)

    def is_complete(self):
        return not self._pending and self._succeeded > 0

    def is_failed(self):
        return not self._pending and self._succeeded == 0


class AnyForTx(AllForTx):
    """Complete on the first successful report."""

    def is_complete(self):
        return self._succeeded > 0


class TransactionEventHandler(CommitHandler):

    def __init__(self, transaction_id, event_hubs, strategy_class):
        self._transaction_id = transaction_id
        self._event_hubs = list(event_hubs)
        self._strategy = strategy_class([hub.name for hub in self._event_hubs])
        self._registered = []
        self._loop = None
        self._future = None

    @property
    def transaction_id(self):
        return self._transaction_id

    def start_listening(self):
        method = 'start_listening'
        _logger.debug(f'{method} - start tx {self._transaction_id}')

        if not self._event_hubs:
            raise CommitError(f'No event hubs available to observe commit of transaction {self._transaction_id}')

        self._loop = asyncio.get_running_loop()
        self._future = self._loop.create_future()

        for hub in self._event_hubs:
            hub.register_tx_event(self._transaction_id, self._on_event, self._on_error)
            self._registered.append(hub)

    def _on_event(self, hub_name, validation_code):
        self._loop.call_soon_threadsafe(self._event_received, hub_name, validation_code)

    def _on_error(self, hub_name, error):
        self._loop.call_soon_threadsafe(self._error_received, hub_name, error)

    def _event_received(self, hub_name, validation_code):
        if self._future.done():
            return

        _logger.debug(f'_event_received - tx {self._transaction_id} from {hub_name}: {validation_code}')
        if validation_code != VALID:
            self._future.set_exception(CommitError(
                f'Commit of transaction {self._transaction_id} failed on {hub_name} with status {validation_code}'))
            return

        self._strategy.event_received(hub_name)
        self._check_strategy()

    def _error_received(self, hub_name, error):
        if self._future.done():
            return

        _logger.warning(f'_error_received - event hub {hub_name} failed for tx {self._transaction_id}: {error}')
        self._strategy.error_received(hub_name)
        self._check_strategy()

    def _check_strategy(self):
        if self._strategy.is_complete():
            self._future.set_result(None)
        elif self._strategy.is_failed():
            self._future.set_exception(CommitError(
                f'No event hub reported the commit of transaction {self._transaction_id}'))

    async def wait_for_events(self, timeout):
        _logger.debug(f'wait_for_events - tx {self._transaction_id} timeout {timeout}')
        try:
            await asyncio.wait_for(asyncio.shield(self._future), timeout.total_seconds())
        except asyncio.TimeoutError:
            _logger.error(f'wait_for_events - tx {self._transaction_id} not committed within {timeout}')
            raise CommitTimeoutError(self._transaction_id, timeout) from None

    def cancel_listening(self):
        _logger.debug(f'cancel_listening - tx {self._transaction_id}')

        for hub in self._registered:
            hub.unregister_tx_event(self._transaction_id)
        self._registered = []

        if self._future is None:
            return
        if not self._future.done():
            self._future.cancel()
        elif not self._future.cancelled():
            # mark any unawaited error as retrieved
            self._future.exception()


def _hubs_for(network, scope_mspid):
    if scope_mspid:
        return network.get_event_hubs(mspid=network.gateway.identity.mspid)
    return network.get_event_hubs()


def no_commit(transaction_id, network):
    return NoCommitHandler()


def mspid_scope_allfortx(transaction_id, network):
    return TransactionEventHandler(transaction_id, _hubs_for(network, True), AllForTx)


def mspid_scope_anyfortx(transaction_id, network):
    return TransactionEventHandler(transaction_id, _hubs_for(network, True), AnyForTx)


def network_scope_allfortx(transaction_id, network):
    return TransactionEventHandler(transaction_id, _hubs_for(network, False), AllForTx)


def network_scope_anyfortx(transaction_id, network):
    return TransactionEventHandler(transaction_id, _hubs_for(network, False), AnyForTx)


class DefaultCommitHandlers(object):
    NONE = staticmethod(no_commit)
    MSPID_SCOPE_ALLFORTX = staticmethod(mspid_scope_allfortx)
    MSPID_SCOPE_ANYFORTX = staticmethod(mspid_scope_anyfortx)
    NETWORK_SCOPE_ALLFORTX = staticmethod(network_scope_allfortx)
    NETWORK_SCOPE_ANYFORTX = staticmethod(network_scope_anyfortx)

    @staticmethod
    def get(name):
        if not name.isupper() or not hasattr(DefaultCommitHandlers, name):
            raise ValueError(f'Unknown commit handler: {name}')
        return getattr(DefaultCommitHandlers, name)
