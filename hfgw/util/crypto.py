import os
from hashlib import sha256

from cryptography.exceptions import UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import ec, ed448, ed25519, padding, rsa

NONCE_LENGTH = 24


def generate_nonce(size=NONCE_LENGTH):
    return os.urandom(size)


def hash(msg):
    return sha256(msg)


def sign(private_key, msg):
    """Sign ``msg`` with a private key object from the cryptography package.

    EC keys sign ECDSA over SHA-256, RSA keys PKCS#1 v1.5 over SHA-256 and
    Edwards keys sign the raw message.
    """
    if isinstance(private_key, ec.EllipticCurvePrivateKey):
        return private_key.sign(msg, ec.ECDSA(hashes.SHA256()))
    if isinstance(private_key, rsa.RSAPrivateKey):
        return private_key.sign(msg, padding.PKCS1v15(), hashes.SHA256())
    if isinstance(private_key, (ed25519.Ed25519PrivateKey, ed448.Ed448PrivateKey)):
        return private_key.sign(msg)

    raise TypeError(f'Unsupported private key type: {type(private_key).__name__}')


def verify(public_key, signature, msg):
    # raises cryptography.exceptions.InvalidSignature on mismatch
    if isinstance(public_key, ec.EllipticCurvePublicKey):
        public_key.verify(signature, msg, ec.ECDSA(hashes.SHA256()))
    elif isinstance(public_key, rsa.RSAPublicKey):
        public_key.verify(signature, msg, padding.PKCS1v15(), hashes.SHA256())
    else:
        public_key.verify(signature, msg)


def load_private_key(data):
    """Decode an unencrypted private key.

    Accepts PKCS#8 and traditional OpenSSL PEM, or DER. Raises ``ValueError``
    when the bytes hold no usable key.
    """
    if isinstance(data, str):
        data = data.encode()

    try:
        if data.lstrip().startswith(b'-----BEGIN'):
            return serialization.load_pem_private_key(data, password=None)
        return serialization.load_der_private_key(data, password=None)
    except (TypeError, UnsupportedAlgorithm) as e:
        raise ValueError(f'Unable to decode private key: {e}') from e


def private_key_to_pem(private_key):
    return private_key.private_bytes(encoding=serialization.Encoding.PEM,
                                     format=serialization.PrivateFormat.PKCS8,
                                     encryption_algorithm=serialization.NoEncryption())
