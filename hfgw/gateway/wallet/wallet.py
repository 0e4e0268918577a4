import json

from hfgw.gateway.exceptions import MalformedIdentity
from hfgw.gateway.msp.identity import Identity
from hfgw.util import crypto

IDENTITY_TYPE = 'X509'
PRIVATE_KEY_SUFFIX = '-priv'


class Wallet(object):
    """Labeled store of signing identities.

    Identity metadata and private keys are stored as separate pieces, so the
    metadata can be read or copied without touching key material.
    """

    def put(self, label, identity):
        raise NotImplementedError

    def get(self, label):
        """Return the Identity stored under ``label``, or None."""
        raise NotImplementedError

    def list(self):
        raise NotImplementedError

    def remove(self, label):
        raise NotImplementedError

    def exists(self, label):
        raise NotImplementedError


def check_label(label):
    if not label or not isinstance(label, str):
        raise ValueError('Missing label parameter')
    if label in ('.', '..') or '/' in label or '\\' in label or '\0' in label:
        raise ValueError(f'Invalid label: {label!r}')


def identity_to_json(label, identity):
    data = {
        'name': label,
        'type': IDENTITY_TYPE,
        'mspid': identity.mspid,
        'enrollment': {
            'signingIdentity': label,
            'identity': {
                'certificate': identity.certificate,
            },
        },
    }
    return json.dumps(data, separators=(',', ':'))


def encode_private_key(label, identity):
    try:
        return crypto.private_key_to_pem(identity.private_key)
    except (AttributeError, TypeError, ValueError) as e:
        raise MalformedIdentity(f'Unable to encode private key of identity {label}') from e


def parse_identity_json(contents):
    """Return ``(mspid, signing_identity, certificate)`` from stored metadata."""
    try:
        data = json.loads(contents)
        mspid = data['mspid']
        enrollment = data['enrollment']
        signing_identity = enrollment['signingIdentity']
        certificate = enrollment['identity']['certificate']
    except (ValueError, KeyError, TypeError) as e:
        raise MalformedIdentity(f'Invalid identity metadata: {e!r}') from e

    for field, value in (('mspid', mspid), ('signingIdentity', signing_identity), ('certificate', certificate)):
        if not value or not isinstance(value, str):
            raise MalformedIdentity(f'Identity metadata has an invalid "{field}" field')

    try:
        check_label(signing_identity)
    except ValueError as e:
        raise MalformedIdentity(f'Invalid signingIdentity in identity metadata: {signing_identity!r}') from e

    return mspid, signing_identity, certificate


def identity_from_json(contents, key_loader):
    """Build an Identity from metadata; ``key_loader(signing_identity)`` returns key bytes."""
    mspid, signing_identity, certificate = parse_identity_json(contents)

    key_bytes = key_loader(signing_identity)
    if key_bytes is None:
        raise MalformedIdentity(f'No private key found for signing identity {signing_identity}')

    try:
        private_key = crypto.load_private_key(key_bytes)
    except ValueError as e:
        raise MalformedIdentity(f'Unable to decode private key for signing identity {signing_identity}') from e

    return Identity(mspid, certificate, private_key)
