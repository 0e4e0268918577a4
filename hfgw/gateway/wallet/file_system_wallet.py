import logging
import os
import shutil

from hfgw.gateway.exceptions import StorageError
from hfgw.gateway.wallet.wallet import Wallet, PRIVATE_KEY_SUFFIX, check_label, encode_private_key, identity_to_json, \
    identity_from_json

_logger = logging.getLogger(__name__)


class FileSystemWallet(Wallet):
    """Wallet keeping each identity in its own directory under ``path``.

    ``<path>/<label>/<label>`` holds the single-line JSON metadata and
    ``<path>/<label>/<signingIdentity>-priv`` the PKCS#8 PEM private key.
    """

    def __init__(self, path):
        self._base_path = os.path.abspath(path)
        try:
            os.makedirs(self._base_path, exist_ok=True)
        except OSError as e:
            raise StorageError(f'Unable to create wallet directory {self._base_path}') from e

        _logger.debug(f'FileSystemWallet.const - path: {self._base_path}')

    @property
    def path(self):
        return self._base_path

    def _id_dir(self, label):
        return os.path.join(self._base_path, label)

    def _id_file(self, label):
        return os.path.join(self._base_path, label, label)

    def _key_file(self, label, signing_identity):
        return os.path.join(self._base_path, label, signing_identity + PRIVATE_KEY_SUFFIX)

    def put(self, label, identity):
        check_label(label)
        _logger.debug(f'put - label: {label}')

        key_pem = encode_private_key(label, identity)
        metadata = identity_to_json(label, identity)

        id_dir = self._id_dir(label)
        try:
            os.makedirs(id_dir, exist_ok=True)
            self._remove_keys(id_dir)

            fd = os.open(self._key_file(label, label), os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o600)
            with os.fdopen(fd, 'wb') as f:
                f.write(key_pem)

            # metadata last: exists() and get() only see complete entries
            with open(self._id_file(label), 'w') as f:
                f.write(metadata)
        except OSError as e:
            if os.path.isdir(id_dir):
                shutil.rmtree(id_dir, ignore_errors=True)
            raise StorageError(f'Unable to store identity {label}') from e

    def _remove_keys(self, id_dir):
        with os.scandir(id_dir) as entries:
            for entry in entries:
                if entry.is_file() and entry.name.endswith(PRIVATE_KEY_SUFFIX):
                    os.remove(entry.path)

    def get(self, label):
        check_label(label)
        id_file = self._id_file(label)
        if not os.path.isfile(id_file):
            _logger.debug(f'get - no identity for label {label}')
            return None

        try:
            with open(id_file, 'r') as f:
                contents = f.readline()
        except OSError as e:
            raise StorageError(f'Unable to read identity {label}') from e

        # the key is looked up inside this label's entry only
        return identity_from_json(contents, lambda signing_identity: self._read_key(label, signing_identity))

    def _read_key(self, label, signing_identity):
        key_file = self._key_file(label, signing_identity)
        if not os.path.isfile(key_file):
            return None
        try:
            with open(key_file, 'rb') as f:
                return f.read()
        except OSError as e:
            raise StorageError(f'Unable to read private key for {label}') from e

    def list(self):
        try:
            with os.scandir(self._base_path) as entries:
                return {entry.name for entry in entries if entry.is_dir()}
        except OSError as e:
            raise StorageError(f'Unable to list wallet directory {self._base_path}') from e

    def remove(self, label):
        check_label(label)
        id_dir = self._id_dir(label)
        if not os.path.exists(id_dir):
            return

        _logger.debug(f'remove - label: {label}')
        try:
            shutil.rmtree(id_dir)
        except OSError as e:
            raise StorageError(f'Unable to remove identity {label}') from e

    def exists(self, label):
        check_label(label)
        return os.path.isfile(self._id_file(label))
