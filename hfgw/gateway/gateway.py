import logging

from hfgw.gateway.commit.handlers import DefaultCommitHandlers
from hfgw.gateway.config.config import Config, COMMIT_TIMEOUT, COMMIT_HANDLER, QUERY_HANDLER, ENDORSEMENT_POLICY
from hfgw.gateway.exceptions import ConstructionError, GatewayError
from hfgw.gateway.network import Network
from hfgw.gateway.policy import get_policy
from hfgw.gateway.query.handlers import DefaultQueryHandlers
from hfgw.gateway.transaction.time_period import TimePeriod

_logger = logging.getLogger(__name__)


def _resolve_factory(value, defaults):
    if callable(value):
        return value
    if isinstance(value, str):
        return defaults.get(value)
    raise ValueError(f'Invalid handler: {value}')


class Gateway(object):
    """
        Entry point for an application.
        A gateway holds the signing identity and the defaults applied to
        every network and transaction reached through it.
    """

    def __init__(self, identity, commit_handler=None, query_handler=None, commit_timeout=None,
                 endorsement_policy=None, config=None):
        if identity is None:
            raise ConstructionError('Missing identity parameter')

        self._config = config if config is not None else Config()
        self._identity = identity

        try:
            self._commit_handler = _resolve_factory(
                commit_handler if commit_handler is not None else self._config.get(COMMIT_HANDLER),
                DefaultCommitHandlers)
            self._query_handler = _resolve_factory(
                query_handler if query_handler is not None else self._config.get(QUERY_HANDLER),
                DefaultQueryHandlers)
            self._commit_timeout = TimePeriod.from_setting(
                commit_timeout if commit_timeout is not None else self._config.get(COMMIT_TIMEOUT))
            self._endorsement_policy = get_policy(
                endorsement_policy if endorsement_policy is not None else self._config.get(ENDORSEMENT_POLICY))
        except ValueError as e:
            raise ConstructionError(f'Invalid gateway options: {e}') from e

        self._networks = {}

        _logger.debug(f'Gateway.const - mspid: {identity.mspid} commit timeout: {self._commit_timeout}')

    @staticmethod
    def from_wallet(wallet, label, **kwargs):
        identity = wallet.get(label)
        if identity is None:
            raise GatewayError(f'Identity {label} not found in wallet')
        return Gateway(identity, **kwargs)

    @property
    def identity(self):
        return self._identity

    @property
    def config(self):
        return self._config

    @property
    def commit_handler(self):
        """Factory ``(transaction_id, network) -> CommitHandler``."""
        return self._commit_handler

    @property
    def query_handler(self):
        """Factory ``(network) -> QueryHandler``."""
        return self._query_handler

    @property
    def commit_timeout(self):
        return self._commit_timeout

    @property
    def endorsement_policy(self):
        return self._endorsement_policy

    def new_network(self, name, peers, orderers, event_hubs=None):
        if name in self._networks:
            raise GatewayError(f'Network {name} already exists')
        network = Network(self, name, peers, orderers, event_hubs)
        self._networks[name] = network
        return network

    def get_network(self, name):
        network = self._networks.get(name)
        if network is None:
            error_message = f'Network not found for name {name}'
            _logger.error(error_message)
            raise GatewayError(error_message)
        return network

    def close(self):
        for network in self._networks.values():
            network.close()
        self._networks = {}

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        self.close()
