# tests/test_timestamp_service.py
from datetime import datetime, timedelta, timezone

import pytest

from estate_http_api.clock import add_years, utcnow
from estate_http_api.crypto import hash_payload
from estate_http_api.db.models import TimestampDocumentType, TimestampStatus
from estate_http_api.errors import DuplicateError, ValidationError
from estate_http_api.repositories.timestamps import TimestampsRepository
from estate_http_api.services.timestamp_service import TimestampService


@pytest.fixture
def service(session):
    return TimestampService(TimestampsRepository(session), validity_years=10)


def _issue(service, document_id=1, **kwargs):
    return service.create_timestamp(
        document_id,
        kwargs.pop("document_type", TimestampDocumentType.CONTRACT),
        kwargs.pop("certificate", "MIIC-certificate"),
        kwargs.pop("authority", "Example TSA"),
        **kwargs,
    )


def test_create_timestamp_defaults(service) -> None:
    ts = _issue(service)

    assert ts.id is not None
    assert ts.status == TimestampStatus.ACTIVE
    assert ts.expires_at == add_years(ts.timestamp_at, 10)
    assert ts.authority_certificate is None
    assert ts.timestamp_hash == hash_payload(
        f"1|CONTRACT|MIIC-certificate|Example TSA|{ts.timestamp_at.isoformat()}"
    )


def test_create_timestamp_keeps_explicit_expiry(service) -> None:
    expiry = utcnow() + timedelta(days=30)
    ts = _issue(service, authority_certificate="authority-cert", expires_at=expiry)

    assert ts.expires_at == expiry
    assert ts.authority_certificate == "authority-cert"


def test_create_timestamp_rejects_past_expiry(service) -> None:
    with pytest.raises(ValidationError):
        _issue(service, expires_at=utcnow() - timedelta(seconds=1))


@pytest.mark.parametrize("field", ["certificate", "authority"])
def test_create_timestamp_requires_certificate_and_authority(service, field) -> None:
    with pytest.raises(ValidationError):
        _issue(service, **{field: ""})


def test_same_inputs_at_same_instant_is_a_duplicate(service, monkeypatch) -> None:
    frozen = datetime(2025, 1, 2, 3, 4, 5)
    monkeypatch.setattr("estate_http_api.services.timestamp_service.utcnow", lambda: frozen)

    _issue(service)
    with pytest.raises(DuplicateError):
        _issue(service)


def test_verify_follows_status(service) -> None:
    ts = _issue(service)
    assert service.verify_timestamp(ts.id).value is True

    assert service.update_status(ts.id, TimestampStatus.REVOKED).value is True
    result = service.verify_timestamp(ts.id)
    assert result.ok
    assert result.value is False


def test_verify_unknown_id(service) -> None:
    result = service.verify_timestamp(12345)
    assert result.value is False
    assert result.reason == "not_found"


def test_update_status_rejects_unknown_status(service) -> None:
    ts = _issue(service)
    result = service.update_status(ts.id, "ARCHIVED")

    assert not result.ok
    assert isinstance(result.error, ValidationError)
    assert service.get_timestamp(ts.id).status == TimestampStatus.ACTIVE


def test_update_status_unknown_id(service) -> None:
    assert service.update_status(999, TimestampStatus.EXPIRED).value is False


def test_delete_removes_record(service) -> None:
    ts = _issue(service)

    assert service.delete_timestamp(ts.id).value is True
    assert service.get_timestamp(ts.id) is None
    assert service.delete_timestamp(ts.id).value is False


def test_list_queries(service) -> None:
    first = _issue(service, document_id=10)
    second = _issue(service, document_id=10, document_type=TimestampDocumentType.SIGNATURE)
    third = _issue(service, document_id=11, authority="Other TSA")

    assert {t.id for t in service.list_all()} == {first.id, second.id, third.id}
    assert {t.id for t in service.list_by_document(10)} == {first.id, second.id}
    assert [t.id for t in service.list_by_type(TimestampDocumentType.SIGNATURE)] == [second.id]
    assert [t.id for t in service.list_by_authority("Other TSA")] == [third.id]
    assert len(service.list_by_status(TimestampStatus.ACTIVE)) == 3


def test_offset_aware_expiry_is_stored_as_naive_utc(service) -> None:
    expiry = datetime(2035, 1, 1, 2, 0, tzinfo=timezone(timedelta(hours=2)))

    ts = _issue(service, expires_at=expiry)

    assert ts.expires_at == datetime(2035, 1, 1, 0, 0)
    assert ts.expires_at.tzinfo is None


def test_offset_aware_past_expiry_is_rejected(service) -> None:
    with pytest.raises(ValidationError):
        _issue(service, expires_at=datetime(2020, 1, 1, tzinfo=timezone.utc))


def test_queries_return_empty_when_database_fails(unavailable_session) -> None:
    service = TimestampService(TimestampsRepository(unavailable_session), validity_years=10)

    assert service.list_all() == []
    assert service.list_by_document(1) == []
    assert service.list_by_type(TimestampDocumentType.CONTRACT) == []
    assert service.list_by_authority("Example TSA") == []
    assert service.list_by_status(TimestampStatus.ACTIVE) == []
    assert service.get_timestamp(1) is None
    assert unavailable_session.rollbacks == 6
