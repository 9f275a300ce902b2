# tests/test_crypto.py
import base64

import pytest
from cryptography.hazmat.primitives import serialization
from cryptography.hazmat.primitives.asymmetric import ec

from estate_http_api.crypto import (
    b64d,
    generate_key_pair,
    hash_payload,
    sign_digest,
    verify_digest,
)
from estate_http_api.errors import CryptoError


def test_hash_payload_known_vectors() -> None:
    assert hash_payload(b"") == "47DEQpj8HBSa+/TImW+5JCeuQeRkm5NMpJWZG3hSuFU="
    assert hash_payload("abc") == "ungWv48Bz+pBQUDeXa4iI7ADYaOWF3qctBD/YfIAFa0="


def test_hash_payload_is_deterministic_and_encoding_agnostic() -> None:
    text = "Lease agreement for 12 Quay Street"
    assert hash_payload(text) == hash_payload(text)
    assert hash_payload(text) == hash_payload(text.encode("utf-8"))
    assert hash_payload(text) != hash_payload(text + " ")


def test_generated_keys_are_der_encoded() -> None:
    pair = generate_key_pair()
    serialization.load_der_private_key(base64.b64decode(pair.private_key_b64), password=None)
    serialization.load_der_public_key(base64.b64decode(pair.public_key_b64))


def test_sign_then_verify_with_matching_key(key_pair) -> None:
    digest = hash_payload("contract body")
    signature = sign_digest(digest, key_pair.private_key_b64)

    assert verify_digest(digest, signature, key_pair.public_key_b64) is True


def test_verify_rejects_other_key_and_other_digest(key_pair, other_key_pair) -> None:
    digest = hash_payload("contract body")
    signature = sign_digest(digest, key_pair.private_key_b64)

    assert verify_digest(digest, signature, other_key_pair.public_key_b64) is False
    assert verify_digest(hash_payload("tampered"), signature, key_pair.public_key_b64) is False


def test_signatures_are_deterministic(key_pair) -> None:
    digest = hash_payload("same document")
    assert sign_digest(digest, key_pair.private_key_b64) == sign_digest(
        digest, key_pair.private_key_b64
    )


@pytest.mark.parametrize("bad", ["", "not base64!!", "Zm9v"])
def test_malformed_private_key_raises(bad) -> None:
    with pytest.raises(CryptoError):
        sign_digest("digest", bad)


def test_malformed_public_key_raises(key_pair) -> None:
    signature = sign_digest("digest", key_pair.private_key_b64)
    with pytest.raises(CryptoError):
        verify_digest("digest", signature, "Zm9vYmFy")


def test_malformed_signature_raises(key_pair) -> None:
    with pytest.raises(CryptoError):
        verify_digest("digest", "***", key_pair.public_key_b64)


def test_non_rsa_key_is_rejected() -> None:
    ec_key = ec.generate_private_key(ec.SECP256R1())
    der = ec_key.private_bytes(
        encoding=serialization.Encoding.DER,
        format=serialization.PrivateFormat.PKCS8,
        encryption_algorithm=serialization.NoEncryption(),
    )
    with pytest.raises(CryptoError):
        sign_digest("digest", base64.b64encode(der).decode("ascii"))


def test_b64d_is_strict() -> None:
    assert b64d("Zm9v") == b"foo"
    with pytest.raises(CryptoError):
        b64d("Zm9v!")
