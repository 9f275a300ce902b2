# tests/test_signature_service.py
from datetime import timedelta

import pytest

from estate_http_api.clock import add_years, utcnow
from estate_http_api.crypto import hash_payload
from estate_http_api.db.models import SignatureDocumentType, SignatureStatus
from estate_http_api.errors import CryptoError, DuplicateError, SigningError, ValidationError
from estate_http_api.repositories.signatures import SignaturesRepository
from estate_http_api.services.signature_service import SignatureService

DOCUMENT = "Rental agreement RENT-2024-0001 between Harbour Estates and H. Sato."


@pytest.fixture
def service(session):
    return SignatureService(SignaturesRepository(session), validity_years=10)


@pytest.fixture
def signed(service, key_pair):
    return service.create_signature(
        7, "Hana Sato", 101, SignatureDocumentType.CONTRACT, DOCUMENT, key_pair.private_key_b64
    )


def test_create_signature_populates_record(signed) -> None:
    assert signed.id is not None
    assert signed.status == SignatureStatus.SIGNED
    assert signed.signature_hash == hash_payload(signed.signature_data)
    assert signed.expires_at == add_years(signed.signed_at, 10)
    assert signed.verification_result is None


def test_create_signature_accepts_enum_names(service, key_pair) -> None:
    record = service.create_signature(1, "Marco Rossi", 5, "AGREEMENT", "text", key_pair.private_key_b64)
    assert record.document_type == SignatureDocumentType.AGREEMENT


def test_same_document_and_key_is_a_duplicate(service, signed, key_pair) -> None:
    with pytest.raises(DuplicateError) as info:
        service.create_signature(
            8, "Someone Else", 102, SignatureDocumentType.CONTRACT, DOCUMENT, key_pair.private_key_b64
        )
    assert info.value.field == "signature_hash"


def test_create_signature_with_bad_key_raises_signing_error(service) -> None:
    with pytest.raises(SigningError) as info:
        service.create_signature(1, "A", 1, SignatureDocumentType.NOTICE, "text", "Zm9vYmFy")
    assert isinstance(info.value.__cause__, CryptoError)


@pytest.mark.parametrize(
    "kwargs",
    [
        {"signer_name": ""},
        {"document_content": ""},
        {"private_key_b64": ""},
        {"document_type": "INVOICE"},
    ],
)
def test_create_signature_validates_input(service, key_pair, kwargs) -> None:
    args = {
        "signer_id": 1,
        "signer_name": "A",
        "contract_id": 1,
        "document_type": SignatureDocumentType.CONTRACT,
        "document_content": "text",
        "private_key_b64": key_pair.private_key_b64,
    }
    args.update(kwargs)
    with pytest.raises(ValidationError):
        service.create_signature(**args)


def test_verify_with_matching_key_marks_verified(service, signed, key_pair) -> None:
    result = service.verify_signature(signed.id, DOCUMENT, key_pair.public_key_b64)

    assert result.ok
    assert result.value is True
    record = service.get_signature(signed.id)
    assert record.status == SignatureStatus.VERIFIED
    assert record.verification_result == "VERIFIED"


def test_verify_can_be_repeated_once_verified(service, signed, key_pair) -> None:
    service.verify_signature(signed.id, DOCUMENT, key_pair.public_key_b64)
    assert service.verify_signature(signed.id, DOCUMENT, key_pair.public_key_b64).value is True


def test_verify_with_other_key_keeps_status(service, signed, other_key_pair) -> None:
    result = service.verify_signature(signed.id, DOCUMENT, other_key_pair.public_key_b64)

    assert result.ok
    assert result.value is False
    record = service.get_signature(signed.id)
    assert record.status == SignatureStatus.SIGNED
    assert record.verification_result == "INVALID"


def test_verify_with_altered_document_fails(service, signed, key_pair) -> None:
    result = service.verify_signature(signed.id, DOCUMENT + " (amended)", key_pair.public_key_b64)
    assert result.value is False


def test_verify_expired_record_skips_crypto(service, signed, session) -> None:
    signed.expires_at = utcnow() - timedelta(days=1)
    session.commit()

    # malformed key material would fail the call if it were ever parsed
    result = service.verify_signature(signed.id, DOCUMENT, "not base64!!")

    assert result.ok
    assert result.value is False
    assert result.reason == "expired"
    assert service.get_signature(signed.id).status == SignatureStatus.EXPIRED


def test_verify_unknown_id_fails_closed(service, key_pair) -> None:
    result = service.verify_signature(9999, DOCUMENT, key_pair.public_key_b64)
    assert result.ok
    assert result.value is False
    assert result.reason == "not_found"


def test_verify_with_malformed_key_returns_failed_result(service, signed) -> None:
    result = service.verify_signature(signed.id, DOCUMENT, "Zm9vYmFy")

    assert not result.ok
    assert result.value is False
    assert isinstance(result.error, CryptoError)
    assert service.get_signature(signed.id).status == SignatureStatus.SIGNED


def test_revoke_unknown_returns_false(service) -> None:
    result = service.revoke_signature(424242)
    assert result.ok
    assert result.value is False


def test_revoke_blocks_later_verification(service, signed, key_pair) -> None:
    assert service.revoke_signature(signed.id).value is True
    assert service.revoke_signature(signed.id).value is True

    result = service.verify_signature(signed.id, DOCUMENT, key_pair.public_key_b64)
    assert result.value is False
    assert service.get_signature(signed.id).status == SignatureStatus.REVOKED


def test_listing_by_signer_contract_and_status(service, signed, key_pair) -> None:
    other = service.create_signature(
        8, "Marco Rossi", 101, SignatureDocumentType.CONSENT, "consent text", key_pair.private_key_b64
    )

    assert [s.id for s in service.list_by_signer(7)] == [signed.id]
    assert {s.id for s in service.list_by_contract(101)} == {signed.id, other.id}
    assert service.list_by_contract(999) == []
    assert len(service.list_by_status(SignatureStatus.SIGNED)) == 2


def test_queries_return_empty_when_database_fails(unavailable_session) -> None:
    service = SignatureService(SignaturesRepository(unavailable_session), validity_years=10)

    assert service.list_by_signer(7) == []
    assert service.list_by_contract(101) == []
    assert service.list_by_status(SignatureStatus.SIGNED) == []
    assert service.get_signature(1) is None
    assert unavailable_session.rollbacks == 4
