# estate_http_api/services/timestamp_service.py

from __future__ import annotations

from datetime import datetime
from typing import Any, Callable, List, Optional, Union

from estate_http_api.clock import add_years, to_naive_utc, utcnow
from estate_http_api.config import get_settings
from estate_http_api.crypto import hash_payload
from estate_http_api.db.models import DigitalTimestamp, TimestampDocumentType, TimestampStatus
from estate_http_api.errors import DuplicateError, Result, ServiceError, ValidationError
from estate_http_api.logging import get_logger
from estate_http_api.repositories.timestamps import TimestampsRepository

log = get_logger(__name__)


class TimestampService:
    """
    Issues and tracks timestamp tokens for documents.

    Verification only looks at the record status; certificate chains and
    the issuing authority are not checked.
    """

    def __init__(
        self,
        repo: TimestampsRepository,
        *,
        validity_years: Optional[int] = None,
    ) -> None:
        self._repo = repo
        if validity_years is None:
            validity_years = get_settings().TIMESTAMP_VALIDITY_YEARS
        self._validity_years = validity_years

    def create_timestamp(
        self,
        document_id: int,
        document_type: Union[TimestampDocumentType, str],
        certificate: str,
        authority: str,
        authority_certificate: Optional[str] = None,
        expires_at: Optional[datetime] = None,
    ) -> DigitalTimestamp:
        if document_id is None:
            raise ValidationError("document_id is required.")
        if not certificate:
            raise ValidationError("A timestamp certificate is required.")
        if not authority or not authority.strip():
            raise ValidationError("A timestamp authority is required.")
        try:
            doc_type = TimestampDocumentType(document_type)
        except ValueError as exc:
            raise ValidationError(f"Unknown document type: {document_type!r}") from exc

        now = utcnow()
        expires_at = to_naive_utc(expires_at)
        if expires_at is None:
            expires_at = add_years(now, self._validity_years)
        elif expires_at <= now:
            raise ValidationError("expires_at must lie in the future.")

        timestamp_hash = hash_payload(
            f"{document_id}|{doc_type.value}|{certificate}|{authority}|{now.isoformat()}"
        )
        if self._repo.exists_by_hash(timestamp_hash):
            raise DuplicateError("timestamp_hash", timestamp_hash)

        record = DigitalTimestamp(
            document_id=document_id,
            document_type=doc_type,
            timestamp_at=now,
            timestamp_certificate=certificate,
            timestamp_hash=timestamp_hash,
            timestamp_authority=authority,
            authority_certificate=authority_certificate,
            expires_at=expires_at,
            status=TimestampStatus.ACTIVE,
        )
        self._repo.save(record)
        self._repo.session.commit()

        log.info("timestamp_created", timestamp_id=record.id, document_id=document_id)
        return record

    def verify_timestamp(self, timestamp_id: int) -> Result[bool]:
        try:
            record = self._repo.get_by_id(timestamp_id)
        except Exception as exc:
            log.exception("timestamp_lookup_failed", timestamp_id=timestamp_id)
            return Result.failure(False, ServiceError(str(exc)))

        if record is None:
            return Result.success(False, reason="not_found")
        if record.status != TimestampStatus.ACTIVE:
            return Result.success(False, reason=f"status_{record.status.value.lower()}")
        return Result.success(True)

    def update_status(
        self,
        timestamp_id: int,
        status: Union[TimestampStatus, str],
    ) -> Result[bool]:
        try:
            new_status = TimestampStatus(status)
        except ValueError:
            return Result.failure(False, ValidationError(f"Unknown status: {status!r}"))

        try:
            record = self._repo.get_by_id(timestamp_id)
            if record is None:
                return Result.success(False, reason="not_found")

            record.status = new_status
            self._repo.save(record)
            self._repo.session.commit()
        except Exception as exc:
            self._repo.session.rollback()
            log.exception("timestamp_status_update_failed", timestamp_id=timestamp_id)
            return Result.failure(False, ServiceError(str(exc)))

        log.info("timestamp_status_updated", timestamp_id=timestamp_id, status=new_status.value)
        return Result.success(True)

    def delete_timestamp(self, timestamp_id: int) -> Result[bool]:
        """
        Remove the record outright.
        """
        try:
            deleted = self._repo.delete_by_id(timestamp_id)
            if not deleted:
                return Result.success(False, reason="not_found")
            self._repo.session.commit()
        except Exception as exc:
            self._repo.session.rollback()
            log.exception("timestamp_delete_failed", timestamp_id=timestamp_id)
            return Result.failure(False, ServiceError(str(exc)))

        log.info("timestamp_deleted", timestamp_id=timestamp_id)
        return Result.success(True)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_timestamp(self, timestamp_id: int) -> Optional[DigitalTimestamp]:
        try:
            return self._repo.get_by_id(timestamp_id)
        except Exception:
            self._repo.session.rollback()
            log.exception("timestamp_lookup_failed", timestamp_id=timestamp_id)
            return None

    def list_all(self) -> List[DigitalTimestamp]:
        return self._query("all", self._repo.list_all)

    def list_by_document(self, document_id: int) -> List[DigitalTimestamp]:
        return self._query("document", self._repo.list_by_document, document_id)

    def list_by_type(self, document_type: TimestampDocumentType) -> List[DigitalTimestamp]:
        return self._query("type", self._repo.list_by_type, document_type)

    def list_by_authority(self, authority: str) -> List[DigitalTimestamp]:
        return self._query("authority", self._repo.list_by_authority, authority)

    def list_by_status(self, status: TimestampStatus) -> List[DigitalTimestamp]:
        return self._query("status", self._repo.list_by_status, status)

    def _query(
        self,
        view: str,
        fetch: Callable[..., List[DigitalTimestamp]],
        *args: Any,
    ) -> List[DigitalTimestamp]:
        # read endpoints stay total: a failed query lists nothing
        try:
            return fetch(*args)
        except Exception:
            self._repo.session.rollback()
            log.exception("timestamp_query_failed", view=view)
            return []
