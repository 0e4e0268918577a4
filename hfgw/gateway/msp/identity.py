import logging

from hfgw.util import crypto
from hfgw.util.utils import canonical_json

_logger = logging.getLogger(__name__)


class Identity(object):
    """A signing identity: MSP id, PEM certificate and the matching private key.

    The private key is a key object from the ``cryptography`` package. Whether
    it actually belongs to the certificate is not checked here.
    """

    def __init__(self, mspid, certificate, private_key):

        if not mspid:
            raise ValueError('Missing required parameter "mspid".')

        if not certificate:
            raise ValueError('Missing required parameter "certificate".')

        if private_key is None:
            raise ValueError('Missing required parameter "private_key".')

        self._mspid = mspid
        self._certificate = certificate
        self._private_key = private_key

    @property
    def mspid(self):
        return self._mspid

    @property
    def certificate(self):
        return self._certificate

    @property
    def private_key(self):
        return self._private_key

    def serialize(self):
        return canonical_json({'mspid': self._mspid, 'id_bytes': self._certificate})

    def __eq__(self, other):
        if not isinstance(other, Identity):
            return NotImplemented
        return self._mspid == other._mspid \
            and self._certificate == other._certificate \
            and crypto.private_key_to_pem(self._private_key) == crypto.private_key_to_pem(other._private_key)

    def __hash__(self):
        return hash((self._mspid, self._certificate))

    def __repr__(self):
        return f'Identity(mspid={self._mspid})'


class Signer(object):

    def __init__(self, identity):
        if not identity:
            raise ValueError('Missing required parameter "identity"')

        self._identity = identity

    @property
    def identity(self):
        return self._identity

    def get_public_key(self):
        return self._identity.private_key.public_key()

    def sign(self, msg):
        _logger.debug(f'sign - signing {len(msg)} bytes for mspid {self._identity.mspid}')
        return crypto.sign(self._identity.private_key, msg)
