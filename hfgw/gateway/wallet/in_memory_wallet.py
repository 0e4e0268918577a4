import logging

from hfgw.gateway.wallet.wallet import Wallet, check_label, encode_private_key, identity_to_json, identity_from_json

_logger = logging.getLogger(__name__)


class InMemoryWallet(Wallet):
    """Process-local wallet. Metadata and PEM keys are kept in separate maps."""

    def __init__(self):
        self._metadata = {}
        self._keys = {}

    def put(self, label, identity):
        check_label(label)
        _logger.debug(f'put - label: {label}')
        key_pem = encode_private_key(label, identity)
        metadata = identity_to_json(label, identity)
        self._keys[label] = {label: key_pem}
        self._metadata[label] = metadata

    def get(self, label):
        check_label(label)
        contents = self._metadata.get(label)
        if contents is None:
            return None

        keys = self._keys.get(label, {})
        return identity_from_json(contents, keys.get)

    def list(self):
        return set(self._metadata)

    def remove(self, label):
        check_label(label)
        self._metadata.pop(label, None)
        self._keys.pop(label, None)

    def exists(self, label):
        check_label(label)
        return label in self._metadata
