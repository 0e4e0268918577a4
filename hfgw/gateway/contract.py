import logging

from hfgw.gateway.transaction.transaction import Transaction

_logger = logging.getLogger(__name__)


class Contract(object):

    def __init__(self, network, chaincode_id, name=''):
        if not chaincode_id:
            raise ValueError('Missing chaincode_id parameter')

        self._network = network
        self._chaincode_id = chaincode_id
        self._name = name or ''

    @property
    def network(self):
        return self._network

    @property
    def chaincode_id(self):
        return self._chaincode_id

    @property
    def name(self):
        return self._name

    def _qualified_name(self, name):
        if self._name:
            return f'{self._name}:{name}'
        return name

    def create_transaction(self, name):
        _logger.debug(f'create_transaction - {name} on {self._chaincode_id}')
        return Transaction(self, self._qualified_name(name))

    async def submit_transaction(self, name, *args):
        return await self.create_transaction(name).submit(*args)

    async def evaluate_transaction(self, name, *args):
        return await self.create_transaction(name).evaluate(*args)

    def __str__(self):
        return f'Contract: {self._network.name}/{self._chaincode_id}/{self._name}'
