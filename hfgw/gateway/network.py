import json
import logging
import re

from hfgw.gateway.contract import Contract
from hfgw.gateway.exceptions import GatewayError
from hfgw.gateway.peer import ENDORSING_PEER

_logger = logging.getLogger(__name__)

CHANNEL_NAME_PATTERN = '^[a-z][a-z0-9.-]*$'


class Network(object):
    """One channel of the ledger network as reached through a gateway.

    Holds the channel's peers, orderers and event hubs, and the query
    handler used by every contract of this network.
    """

    def __init__(self, gateway, name, peers, orderers, event_hubs=None):
        """Construct network instance

        Args:
            gateway (Gateway): the gateway providing identity and defaults
            name (str): channel name
            peers (list): Peer objects of the channel
            orderers (list): Orderer objects of the channel
            event_hubs (list): EventHub objects used to observe commits
        """
        if not re.match(CHANNEL_NAME_PATTERN, name or ''):
            raise ValueError(f'Failed to create Network. channel name should'
                             f' match Regex {CHANNEL_NAME_PATTERN}, but got {name}')

        if not gateway:
            raise ValueError('Failed to create Network. Missing requirement "gateway" parameter.')

        self._gateway = gateway
        self._name = name
        self._peers = list(peers or [])
        self._orderers = list(orderers or [])
        self._event_hubs = list(event_hubs or [])
        self._contracts = {}
        self._query_handler = gateway.query_handler(self)

        _logger.debug(f'Constructed Network instance name - {self._name}')

    @property
    def name(self):
        return self._name

    @property
    def gateway(self):
        return self._gateway

    @property
    def query_handler(self):
        return self._query_handler

    def get_peers(self, role=None, mspid=None):
        return [peer for peer in self._peers
                if (role is None or peer.is_in_role(role)) and (mspid is None or peer.is_in_org(mspid))]

    def get_endorsing_peers(self):
        return self.get_peers(role=ENDORSING_PEER)

    def get_orderers(self):
        return list(self._orderers)

    def get_orderer(self):
        if not self._orderers:
            raise GatewayError(f'No orderers assigned to network {self._name}')
        return self._orderers[0]

    def get_event_hubs(self, mspid=None):
        return [hub for hub in self._event_hubs if mspid is None or hub.mspid == mspid]

    def get_contract(self, chaincode_id, name=''):
        key = (chaincode_id, name)
        contract = self._contracts.get(key)
        if contract is None:
            contract = Contract(self, chaincode_id, name)
            self._contracts[key] = contract
        return contract

    def close(self):
        _logger.debug(f'close - closing connections of network {self._name}')
        for peer in self._peers:
            peer.close()

        for orderer in self._orderers:
            orderer.close()

        for hub in self._event_hubs:
            hub.close()

    def __str__(self):
        state = {
            'name': self._name,
            'orderers': [str(o) for o in self._orderers] or 'N/A',
            'peers': [str(p) for p in self._peers] or 'N/A',
        }

        return json.dumps(state)
