import logging

_logger = logging.getLogger(__name__)


class Orderer(object):
    """An ordering service node. Transport implementations provide ``broadcast``."""

    def __init__(self, name):
        if not name:
            raise ValueError('Missing name parameter')

        self._name = name

        _logger.debug(f'Orderer.const - name: {name}')

    @property
    def name(self):
        return self._name

    async def broadcast(self, envelope, timeout=None):
        """Send a signed envelope and return the orderer acknowledgment."""
        raise NotImplementedError

    def close(self):
        pass

    def __str__(self):
        return f'Orderer: {self._name}'
