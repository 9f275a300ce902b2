# estate_http_api/crypto.py

"""
estate_http_api.crypto
----------------------
Hash and sign primitives for the document-integrity services:

- SHA-256 content digests rendered as base64 strings
- RSA PKCS#1 v1.5 / SHA-256 sign and verify over a digest
- Key-pair generation helper (base64 PKCS#8 / X.509 DER encodings)

Keys are always supplied by the caller; nothing here holds key state.
"""

from __future__ import annotations

import base64
import binascii
import hashlib
from dataclasses import dataclass
from typing import Union

from cryptography.exceptions import InvalidSignature, UnsupportedAlgorithm
from cryptography.hazmat.primitives import hashes, serialization
from cryptography.hazmat.primitives.asymmetric import padding, rsa

from estate_http_api.errors import CryptoError

Payload = Union[bytes, str]


@dataclass(frozen=True)
class KeyPair:
    private_key_b64: str
    public_key_b64: str


def b64e(b: bytes) -> str:
    return base64.b64encode(b).decode("ascii")


def b64d(s: str) -> bytes:
    """Strict base64 decode; raises CryptoError on malformed input."""
    if not isinstance(s, str) or not s:
        raise CryptoError("Expected a non-empty base64 string.")
    try:
        return base64.b64decode(s.encode("ascii"), validate=True)
    except (binascii.Error, UnicodeEncodeError) as exc:
        raise CryptoError("Malformed base64 input.") from exc


# --------- Digest ----------
def hash_payload(payload: Payload) -> str:
    """
    SHA-256 of ``payload`` as a base64 string. Text is UTF-8 encoded first.
    """
    data = payload.encode("utf-8") if isinstance(payload, str) else payload
    return b64e(hashlib.sha256(data).digest())


# --------- RSA (sign/verify) ----------
def _load_private_key(private_key_b64: str) -> rsa.RSAPrivateKey:
    raw = b64d(private_key_b64)
    try:
        key = serialization.load_der_private_key(raw, password=None)
    except (ValueError, TypeError, UnsupportedAlgorithm) as exc:
        raise CryptoError("Private key is not valid PKCS#8 DER.") from exc
    if not isinstance(key, rsa.RSAPrivateKey):
        raise CryptoError(f"Expected an RSA private key, got {type(key).__name__}.")
    return key


def _load_public_key(public_key_b64: str) -> rsa.RSAPublicKey:
    raw = b64d(public_key_b64)
    try:
        key = serialization.load_der_public_key(raw)
    except (ValueError, UnsupportedAlgorithm) as exc:
        raise CryptoError("Public key is not valid X.509 DER.") from exc
    if not isinstance(key, rsa.RSAPublicKey):
        raise CryptoError(f"Expected an RSA public key, got {type(key).__name__}.")
    return key


def sign_digest(digest: str, private_key_b64: str) -> str:
    """
    Sign the UTF-8 bytes of ``digest``; returns the signature as base64.
    """
    key = _load_private_key(private_key_b64)
    sig = key.sign(digest.encode("utf-8"), padding.PKCS1v15(), hashes.SHA256())
    return b64e(sig)


def verify_digest(digest: str, signature_b64: str, public_key_b64: str) -> bool:
    """
    True iff ``signature_b64`` is a valid signature of ``digest``.

    A well-formed but wrong signature returns False; malformed key or
    signature encodings raise CryptoError.
    """
    key = _load_public_key(public_key_b64)
    sig = b64d(signature_b64)
    try:
        key.verify(sig, digest.encode("utf-8"), padding.PKCS1v15(), hashes.SHA256())
        return True
    except InvalidSignature:
        return False


def generate_key_pair(key_size: int = 2048) -> KeyPair:
    sk = rsa.generate_private_key(public_exponent=65537, key_size=key_size)
    priv = sk.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    pub = sk.public_key().public_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PublicFormat.SubjectPublicKeyInfo,
    )
    return KeyPair(private_key_b64=b64e(priv), public_key_b64=b64e(pub))


__all__ = [
    "KeyPair",
    "b64e",
    "b64d",
    "hash_payload",
    "sign_digest",
    "verify_digest",
    "generate_key_pair",
]
