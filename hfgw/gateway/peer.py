import logging

_logger = logging.getLogger(__name__)

ENDORSING_PEER = 'endorsingPeer'
CHAINCODE_QUERY = 'chaincodeQuery'
LEDGER_QUERY = 'ledgerQuery'
EVENT_SOURCE = 'eventSource'

ALL_ROLES = (ENDORSING_PEER, CHAINCODE_QUERY, LEDGER_QUERY, EVENT_SOURCE)


class Peer(object):
    """A ledger peer as seen by the gateway.

    Transport implementations subclass this and provide ``send_proposal``.
    """

    def __init__(self, name, mspid, roles=None):
        if not name:
            raise ValueError('Missing name parameter')
        if not mspid:
            raise ValueError('Missing mspid parameter')

        self._name = name
        self._mspid = mspid
        self._roles = set(ALL_ROLES if roles is None else roles)

        _logger.debug(f'Peer.const - name: {name} mspid: {mspid} roles: {sorted(self._roles)}')

    @property
    def name(self):
        return self._name

    @property
    def mspid(self):
        return self._mspid

    def is_in_role(self, role):
        return role in self._roles

    def is_in_org(self, mspid):
        return self._mspid == mspid

    async def send_proposal(self, proposal, timeout=None):
        """Send a signed proposal and return its ProposalResponse."""
        raise NotImplementedError

    def close(self):
        pass

    def __str__(self):
        return f'Peer: {self._name}'
