import logging

from hfgw.util import crypto

_logger = logging.getLogger(__name__)


class TransactionID(object):

    def __init__(self, identity):
        _logger.debug('constructor - start')

        if not identity:
            raise ValueError('Missing identity parameter')

        self._nonce = crypto.generate_nonce()
        creator_bytes = identity.serialize()
        trans_bytes = self._nonce + creator_bytes
        trans_hash = crypto.hash(trans_bytes)
        self._transaction_id = trans_hash.hexdigest()
        _logger.debug(f'const - transaction_id {self._transaction_id}')

    @property
    def transaction_id(self):
        return self._transaction_id

    @property
    def nonce(self):
        return self._nonce

    def __str__(self):
        return self._transaction_id
