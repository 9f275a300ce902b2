# estate_http_api/services/biometric_service.py

from __future__ import annotations

from typing import List, Optional, Union

from estate_http_api.clock import add_years, utcnow
from estate_http_api.config import get_settings
from estate_http_api.crypto import b64d, hash_payload
from estate_http_api.db.models import BiometricData, BiometricStatus, BiometricType
from estate_http_api.errors import (
    CryptoError,
    DuplicateError,
    Result,
    ServiceError,
    ValidationError,
)
from estate_http_api.logging import get_logger
from estate_http_api.repositories.biometrics import BiometricsRepository

log = get_logger(__name__)

# (threshold, label), highest first
QUALITY_LEVELS = (
    (80, "EXCELLENT"),
    (60, "GOOD"),
    (40, "FAIR"),
    (20, "POOR"),
)

MIN_CONSISTENT_SIZE = 100


def quality_level(score: int) -> str:
    """
    Human-readable band for a quality score.
    """
    for threshold, label in QUALITY_LEVELS:
        if score >= threshold:
            return label
    return "UNACCEPTABLE"


class BiometricService:
    """
    Enrolls biometric samples and authenticates users against them.

    A sample's identity is the digest of its base64 text and matching is
    exact: the same capture must be presented again to authenticate.
    """

    def __init__(
        self,
        repo: BiometricsRepository,
        *,
        validity_years: Optional[int] = None,
    ) -> None:
        self._repo = repo
        if validity_years is None:
            validity_years = get_settings().BIOMETRIC_VALIDITY_YEARS
        self._validity_years = validity_years

    # -------------------------------------------------------------------------
    # Quality
    # -------------------------------------------------------------------------

    def evaluate_quality(self, raw_b64: str) -> Result[int]:
        """
        Score a sample from 0 to 100 based on its decoded size.
        """
        try:
            data = b64d(raw_b64)
        except CryptoError as exc:
            log.warning("biometric_quality_undecodable", error=str(exc))
            return Result.failure(0, exc)

        size = len(data)
        score = 0
        if size > 1000:
            score += 30
        if size > 5000:
            score += 20
        if size >= MIN_CONSISTENT_SIZE:
            score += 50
        return Result.success(min(100, score))

    quality_level = staticmethod(quality_level)

    # -------------------------------------------------------------------------
    # Enrollment / authentication
    # -------------------------------------------------------------------------

    def register(
        self,
        user_id: int,
        user_name: str,
        biometric_type: Union[BiometricType, str],
        raw_b64: str,
        quality_score: int,
    ) -> BiometricData:
        """
        Store a new sample. Raises ValidationError or DuplicateError.
        """
        if user_id is None:
            raise ValidationError("user_id is required.")
        if not user_name or not user_name.strip():
            raise ValidationError("user_name is required.")
        if not raw_b64:
            raise ValidationError("Biometric data is required.")
        if quality_score is None or not 0 <= quality_score <= 100:
            raise ValidationError("quality_score must lie between 0 and 100.")
        try:
            bio_type = BiometricType(biometric_type)
        except ValueError as exc:
            raise ValidationError(f"Unknown biometric type: {biometric_type!r}") from exc

        biometric_hash = hash_payload(raw_b64)
        if self._repo.exists_by_hash(biometric_hash):
            raise DuplicateError("biometric_hash", biometric_hash)

        now = utcnow()
        record = BiometricData(
            user_id=user_id,
            user_name=user_name,
            biometric_type=bio_type,
            biometric_data=raw_b64,
            biometric_hash=biometric_hash,
            quality_score=quality_score,
            registered_at=now,
            expires_at=add_years(now, self._validity_years),
            status=BiometricStatus.ACTIVE,
        )
        self._repo.save(record)
        self._repo.session.commit()

        log.info(
            "biometric_registered",
            biometric_id=record.id,
            user_id=user_id,
            biometric_type=bio_type.value,
            quality_score=quality_score,
        )
        return record

    def authenticate(
        self,
        user_id: int,
        biometric_type: Union[BiometricType, str],
        raw_b64: str,
    ) -> Result[bool]:
        """
        True iff ``raw_b64`` matches an ACTIVE enrollment of this user and type.
        """
        try:
            bio_type = BiometricType(biometric_type)
        except ValueError:
            return Result.failure(
                False, ValidationError(f"Unknown biometric type: {biometric_type!r}")
            )

        try:
            candidates = self._repo.list_by_user_and_type(
                user_id, bio_type, status=BiometricStatus.ACTIVE
            )
            if not candidates:
                return Result.success(False, reason="no_enrollment")

            probe = hash_payload(raw_b64)
            match = next((c for c in candidates if c.biometric_hash == probe), None)
            if match is None:
                log.info("biometric_auth_rejected", user_id=user_id, biometric_type=bio_type.value)
                return Result.success(False, reason="no_match")

            match.last_used_at = utcnow()
            self._repo.save(match)
            self._repo.session.commit()
        except Exception as exc:
            self._repo.session.rollback()
            log.exception("biometric_auth_failed", user_id=user_id)
            return Result.failure(False, ServiceError(str(exc)))

        log.info("biometric_auth_succeeded", user_id=user_id, biometric_id=match.id)
        return Result.success(True)

    # -------------------------------------------------------------------------
    # Lifecycle
    # -------------------------------------------------------------------------

    def deactivate(self, biometric_id: int) -> Result[bool]:
        return self._transition(biometric_id, BiometricStatus.INACTIVE)

    def delete(self, biometric_id: int) -> Result[bool]:
        """
        Soft delete: the row stays, its status becomes DELETED.
        """
        return self._transition(biometric_id, BiometricStatus.DELETED)

    def _transition(self, biometric_id: int, status: BiometricStatus) -> Result[bool]:
        try:
            record = self._repo.get_by_id(biometric_id)
            if record is None:
                return Result.success(False, reason="not_found")

            record.status = status
            self._repo.save(record)
            self._repo.session.commit()
        except Exception as exc:
            self._repo.session.rollback()
            log.exception("biometric_transition_failed", biometric_id=biometric_id, status=status.value)
            return Result.failure(False, ServiceError(str(exc)))

        log.info("biometric_status_changed", biometric_id=biometric_id, status=status.value)
        return Result.success(True)

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_record(self, biometric_id: int) -> Optional[BiometricData]:
        try:
            return self._repo.get_by_id(biometric_id)
        except Exception:
            self._repo.session.rollback()
            log.exception("biometric_lookup_failed", biometric_id=biometric_id)
            return None

    def list_by_user(self, user_id: int) -> List[BiometricData]:
        try:
            return self._repo.list_by_user(user_id)
        except Exception:
            self._repo.session.rollback()
            log.exception("biometric_query_failed", user_id=user_id)
            return []
