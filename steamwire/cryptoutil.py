"""Symmetric channel encryption and RSA helpers."""

from __future__ import annotations

import os

from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa
from cryptography.hazmat.primitives.ciphers import Cipher, algorithms, modes

__all__ = [
    "BLOCK_SIZE",
    "pad_pkcs7_with_iv",
    "unpad_pkcs7",
    "symmetric_encrypt",
    "symmetric_decrypt",
    "parse_asn1_rsa_public_key",
    "rsa_encrypt",
]

BLOCK_SIZE = 16


def pad_pkcs7_with_iv(src: bytes) -> bytes:
    """Pad ``src`` with PKCS7 and prepend one zeroed block reserved for the IV."""
    missing = BLOCK_SIZE - (len(src) % BLOCK_SIZE)
    return bytes(BLOCK_SIZE) + bytes(src) + bytes([missing]) * missing


def unpad_pkcs7(src: bytes) -> bytes:
    """Strip PKCS7 padding, trusting the final byte as the pad length."""
    if not src:
        raise ValueError("cannot unpad empty bytes")
    pad_len = src[-1]
    if len(src) - pad_len < 0:
        raise ValueError("negative pkcs7 size")
    return bytes(src[: len(src) - pad_len])


def _ecb(key: bytes) -> Cipher:
    return Cipher(algorithms.AES(key), modes.ECB())


def symmetric_encrypt(key: bytes, src: bytes) -> bytes:
    """Encrypt with AES/CBC/PKCS7, prefixing the IV encrypted with AES/ECB."""
    iv = os.urandom(BLOCK_SIZE)
    ecb = _ecb(key).encryptor()
    encrypted_iv = ecb.update(iv) + ecb.finalize()

    padded = pad_pkcs7_with_iv(src)
    cbc = Cipher(algorithms.AES(key), modes.CBC(iv)).encryptor()
    body = cbc.update(padded[BLOCK_SIZE:]) + cbc.finalize()
    return encrypted_iv + body


def symmetric_decrypt(key: bytes, src: bytes) -> bytes:
    """Reverse :func:`symmetric_encrypt`."""
    if len(src) < BLOCK_SIZE or len(src) % BLOCK_SIZE != 0:
        raise ValueError("input not full blocks")
    ecb = _ecb(key).decryptor()
    iv = ecb.update(src[:BLOCK_SIZE]) + ecb.finalize()

    cbc = Cipher(algorithms.AES(key), modes.CBC(iv)).decryptor()
    data = cbc.update(src[BLOCK_SIZE:]) + cbc.finalize()
    return unpad_pkcs7(data)


def parse_asn1_rsa_public_key(der_bytes: bytes) -> rsa.RSAPublicKey:
    """Parse a DER encoded SubjectPublicKeyInfo holding an RSA key."""
    key = serialization.load_der_public_key(bytes(der_bytes))
    if not isinstance(key, rsa.RSAPublicKey):
        raise ValueError("not an RSA public key")
    return key


def rsa_encrypt(public_key: rsa.RSAPublicKey, message: bytes) -> bytes:
    """Encrypt ``message`` with RSA-OAEP using SHA-1."""
    return public_key.encrypt(
        bytes(message),
        padding.OAEP(
            mgf=padding.MGF1(algorithm=hashes.SHA1()),
            algorithm=hashes.SHA1(),
            label=None,
        ),
    )