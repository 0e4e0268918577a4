import logging

from hfgw.gateway.exceptions import ConstructionError, EvaluationError
from hfgw.gateway.peer import CHAINCODE_QUERY
from hfgw.util.utils import AtomicIndex

_logger = logging.getLogger(__name__)


class QueryHandler(object):

    def __init__(self, peers):
        self._peers = list(peers)
        if len(self._peers) < 1:
            raise ConstructionError('No peers provided')

    @property
    def peers(self):
        return list(self._peers)

    async def evaluate(self, proposal):
        raise NotImplementedError

    async def _evaluate_from(self, proposal, start_index):
        """Try peers in order from ``start_index``, wrapping around.

        Returns ``(peer_index, response)`` for the first successful response.
        """
        method = '_evaluate_from'
        messages = []

        for i in range(len(self._peers)):
            peer_index = (start_index + i) % len(self._peers)
            peer = self._peers[peer_index]
            try:
                response = await peer.send_proposal(proposal)
            except Exception as e:
                _logger.warning(f'{method} - peer {peer.name} failed: {e}')
                messages.append(str(e))
                continue

            if response.is_successful:
                _logger.debug(f'{method} - successful response from {peer.name}')
                return peer_index, response

            _logger.warning(f'{method} - peer {peer.name} responded {response.status.value}: {response.message}')
            messages.append(response.message)

        raise EvaluationError(messages)


class SingleQueryHandler(QueryHandler):
    """Sends each query to one peer, sticking with the last peer that answered."""

    def __init__(self, peers):
        super(SingleQueryHandler, self).__init__(peers)
        self._current_peer_index = AtomicIndex(0)

    async def evaluate(self, proposal):
        start = self._current_peer_index.get()
        peer_index, response = await self._evaluate_from(proposal, start)
        self._current_peer_index.set(peer_index)
        return response


class RoundRobinQueryHandler(QueryHandler):
    """Starts each query on the next peer in turn, failing over to the others."""

    def __init__(self, peers):
        super(RoundRobinQueryHandler, self).__init__(peers)
        self._next_peer_index = AtomicIndex(0)

    async def evaluate(self, proposal):
        start = self._next_peer_index.get_and_increment() % len(self._peers)
        _, response = await self._evaluate_from(proposal, start)
        return response


def _org_query_peers(network):
    mspid = network.gateway.identity.mspid
    return network.get_peers(role=CHAINCODE_QUERY, mspid=mspid)


def mspid_scope_single(network):
    return SingleQueryHandler(_org_query_peers(network))


def mspid_scope_round_robin(network):
    return RoundRobinQueryHandler(_org_query_peers(network))


class DefaultQueryHandlers(object):
    MSPID_SCOPE_SINGLE = staticmethod(mspid_scope_single)
    MSPID_SCOPE_ROUND_ROBIN = staticmethod(mspid_scope_round_robin)

    @staticmethod
    def get(name):
        if not name.isupper() or not hasattr(DefaultQueryHandlers, name):
            raise ValueError(f'Unknown query handler: {name}')
        return getattr(DefaultQueryHandlers, name)
