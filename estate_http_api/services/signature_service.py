# estate_http_api/services/signature_service.py

from __future__ import annotations

from typing import Any, Callable, List, Optional, Union

from estate_http_api.clock import add_years, utcnow
from estate_http_api.config import get_settings
from estate_http_api.crypto import hash_payload, sign_digest, verify_digest
from estate_http_api.db.models import DigitalSignature, SignatureDocumentType, SignatureStatus
from estate_http_api.errors import (
    CryptoError,
    DuplicateError,
    Result,
    ServiceError,
    SigningError,
    ValidationError,
)
from estate_http_api.logging import get_logger
from estate_http_api.repositories.signatures import SignaturesRepository

log = get_logger(__name__)

_VERIFIABLE = (SignatureStatus.SIGNED, SignatureStatus.VERIFIED)


class SignatureService:
    """
    Signs contract documents and verifies those signatures later on.

    Responsibilities:
    - Digest the document, sign the digest with a caller-supplied key.
    - Reject duplicate signature blobs.
    - Drive the status lifecycle (SIGNED -> VERIFIED, EXPIRED, REVOKED).

    Private keys are used for a single call and never persisted.
    """

    def __init__(
        self,
        repo: SignaturesRepository,
        *,
        validity_years: Optional[int] = None,
    ) -> None:
        self._repo = repo
        if validity_years is None:
            validity_years = get_settings().SIGNATURE_VALIDITY_YEARS
        self._validity_years = validity_years

    # -------------------------------------------------------------------------
    # Creation
    # -------------------------------------------------------------------------

    def create_signature(
        self,
        signer_id: int,
        signer_name: str,
        contract_id: int,
        document_type: Union[SignatureDocumentType, str],
        document_content: str,
        private_key_b64: str,
    ) -> DigitalSignature:
        """
        Sign ``document_content`` and store the resulting signature record.

        Raises ValidationError, SigningError or DuplicateError.
        """
        if signer_id is None or contract_id is None:
            raise ValidationError("signer_id and contract_id are required.")
        if not signer_name or not signer_name.strip():
            raise ValidationError("signer_name is required.")
        if not document_content:
            raise ValidationError("document_content is required.")
        if not private_key_b64:
            raise ValidationError("A private key is required to sign.")
        try:
            doc_type = SignatureDocumentType(document_type)
        except ValueError as exc:
            raise ValidationError(f"Unknown document type: {document_type!r}") from exc

        digest = hash_payload(document_content)
        try:
            signature_data = sign_digest(digest, private_key_b64)
        except CryptoError as exc:
            log.warning("signature_signing_failed", contract_id=contract_id, error=str(exc))
            raise SigningError("Could not sign the document.") from exc

        signature_hash = hash_payload(signature_data)
        if self._repo.exists_by_hash(signature_hash):
            raise DuplicateError("signature_hash", signature_hash)

        now = utcnow()
        record = DigitalSignature(
            signer_id=signer_id,
            signer_name=signer_name,
            contract_id=contract_id,
            document_type=doc_type,
            signature_data=signature_data,
            signature_hash=signature_hash,
            signed_at=now,
            expires_at=add_years(now, self._validity_years),
            status=SignatureStatus.SIGNED,
        )
        self._repo.save(record)
        self._repo.session.commit()

        log.info(
            "signature_created",
            signature_id=record.id,
            contract_id=contract_id,
            signer_id=signer_id,
        )
        return record

    # -------------------------------------------------------------------------
    # Verification / lifecycle
    # -------------------------------------------------------------------------

    def verify_signature(
        self,
        signature_id: int,
        document_content: str,
        public_key_b64: str,
    ) -> Result[bool]:
        """
        Check ``document_content`` against the stored signature.

        Fails closed: a missing, non-verifiable or expired record yields
        ``False``. An expired record is moved to EXPIRED without touching
        any key material.
        """
        try:
            record = self._repo.get_by_id(signature_id)
            if record is None:
                return Result.success(False, reason="not_found")
            if record.status not in _VERIFIABLE:
                return Result.success(False, reason=f"status_{record.status.value.lower()}")

            if utcnow() > record.expires_at:
                record.status = SignatureStatus.EXPIRED
                self._repo.save(record)
                self._repo.session.commit()
                log.info("signature_expired", signature_id=signature_id)
                return Result.success(False, reason="expired")

            digest = hash_payload(document_content)
            valid = verify_digest(digest, record.signature_data, public_key_b64)

            if valid:
                record.status = SignatureStatus.VERIFIED
                record.verification_result = "VERIFIED"
            else:
                record.verification_result = "INVALID"
            self._repo.save(record)
            self._repo.session.commit()

            log.info("signature_verified", signature_id=signature_id, valid=valid)
            return Result.success(valid, reason=None if valid else "invalid_signature")
        except CryptoError as exc:
            self._repo.session.rollback()
            log.warning("signature_verification_rejected", signature_id=signature_id, error=str(exc))
            return Result.failure(False, exc)
        except Exception as exc:
            self._repo.session.rollback()
            log.exception("signature_verification_failed", signature_id=signature_id)
            return Result.failure(False, ServiceError(str(exc)))

    def revoke_signature(self, signature_id: int) -> Result[bool]:
        """
        Move a signature to REVOKED. Revoking twice is harmless.
        """
        try:
            record = self._repo.get_by_id(signature_id)
            if record is None:
                return Result.success(False, reason="not_found")

            record.status = SignatureStatus.REVOKED
            self._repo.save(record)
            self._repo.session.commit()

            log.info("signature_revoked", signature_id=signature_id)
            return Result.success(True)
        except Exception as exc:
            self._repo.session.rollback()
            log.exception("signature_revoke_failed", signature_id=signature_id)
            return Result.failure(False, ServiceError(str(exc)))

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def get_signature(self, signature_id: int) -> Optional[DigitalSignature]:
        try:
            return self._repo.get_by_id(signature_id)
        except Exception:
            self._repo.session.rollback()
            log.exception("signature_lookup_failed", signature_id=signature_id)
            return None

    def list_by_signer(self, signer_id: int) -> List[DigitalSignature]:
        return self._query("signer", self._repo.list_by_signer, signer_id)

    def list_by_contract(self, contract_id: int) -> List[DigitalSignature]:
        return self._query("contract", self._repo.list_by_contract, contract_id)

    def list_by_status(self, status: SignatureStatus) -> List[DigitalSignature]:
        return self._query("status", self._repo.list_by_status, status)

    def _query(
        self,
        view: str,
        fetch: Callable[..., List[DigitalSignature]],
        *args: Any,
    ) -> List[DigitalSignature]:
        try:
            return fetch(*args)
        except Exception:
            self._repo.session.rollback()
            log.exception("signature_query_failed", view=view)
            return []
