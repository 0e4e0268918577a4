import logging

_logger = logging.getLogger(__name__)

VALID = 'VALID'


class EventHub(object):
    """Source of transaction commit events from one peer.

    Implementations call ``on_event(hub_name, validation_code)`` once the
    transaction is in a block, or ``on_error(hub_name, error)`` when the
    connection fails. Either callback may be invoked from another thread.
    """

    def __init__(self, name, mspid):
        if not name:
            raise ValueError('Missing name parameter')

        self._name = name
        self._mspid = mspid

        _logger.debug(f'EventHub.const - name: {name} mspid: {mspid}')

    @property
    def name(self):
        return self._name

    @property
    def mspid(self):
        return self._mspid

    def register_tx_event(self, transaction_id, on_event, on_error):
        raise NotImplementedError

    def unregister_tx_event(self, transaction_id):
        raise NotImplementedError

    def close(self):
        pass

    def __str__(self):
        return f'EventHub: {self._name}'
