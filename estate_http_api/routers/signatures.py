# estate_http_api/routers/signatures.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from estate_http_api.db.session import get_session
from estate_http_api.errors import EstateError
from estate_http_api.repositories.signatures import SignaturesRepository
from estate_http_api.schemas.common import OperationResponse
from estate_http_api.schemas.signatures import (
    SignatureCreate,
    SignatureRead,
    SignatureVerification,
    SignatureVerifyRequest,
)
from estate_http_api.services.signature_service import SignatureService

router = APIRouter(prefix="/signatures", tags=["signatures"])

BAD_REQUEST = "Bad request"


def get_signature_service(session: Session = Depends(get_session)) -> SignatureService:
    """
    Dependency-injected factory for SignatureService.
    """
    return SignatureService(SignaturesRepository(session))


@router.post(
    "",
    response_model=SignatureRead,
    status_code=status.HTTP_201_CREATED,
    summary="Sign a document",
    description=(
        "Digest the document content and sign it with the supplied RSA private key. "
        "The key is used for this call only and is never stored."
    ),
)
def create_signature(
    *,
    service: SignatureService = Depends(get_signature_service),
    payload: SignatureCreate,
) -> SignatureRead:
    try:
        record = service.create_signature(
            payload.signer_id,
            payload.signer_name,
            payload.contract_id,
            payload.document_type,
            payload.document_content,
            payload.private_key_base64,
        )
    except EstateError as exc:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST) from exc
    return SignatureRead.model_validate(record)


@router.get(
    "/signer/{signer_id}",
    response_model=List[SignatureRead],
    summary="List signatures by signer",
)
def list_by_signer(
    signer_id: int,
    service: SignatureService = Depends(get_signature_service),
) -> List[SignatureRead]:
    return [SignatureRead.model_validate(s) for s in service.list_by_signer(signer_id)]


@router.get(
    "/contract/{contract_id}",
    response_model=List[SignatureRead],
    summary="List signatures for a contract",
)
def list_by_contract(
    contract_id: int,
    service: SignatureService = Depends(get_signature_service),
) -> List[SignatureRead]:
    return [SignatureRead.model_validate(s) for s in service.list_by_contract(contract_id)]


@router.get(
    "/{signature_id}",
    response_model=SignatureRead,
    summary="Get a single signature",
)
def get_signature(
    signature_id: int,
    service: SignatureService = Depends(get_signature_service),
) -> SignatureRead:
    record = service.get_signature(signature_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Signature not found")
    return SignatureRead.model_validate(record)


@router.post(
    "/{signature_id}/verify",
    response_model=SignatureVerification,
    summary="Verify a signature",
    description="Check the document content against the stored signature using a public key.",
)
def verify_signature(
    signature_id: int,
    payload: SignatureVerifyRequest,
    service: SignatureService = Depends(get_signature_service),
) -> SignatureVerification:
    result = service.verify_signature(
        signature_id,
        payload.document_content,
        payload.public_key_base64,
    )
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST)

    record = service.get_signature(signature_id)
    return SignatureVerification(
        valid=result.value,
        message="Signature is valid" if result.value else "Signature is not valid",
        status=record.status if record is not None else None,
    )


@router.post(
    "/{signature_id}/revoke",
    response_model=OperationResponse,
    summary="Revoke a signature",
)
def revoke_signature(
    signature_id: int,
    service: SignatureService = Depends(get_signature_service),
) -> OperationResponse:
    result = service.revoke_signature(signature_id)
    if not result.ok:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST)
    return OperationResponse(
        success=result.value,
        message="Signature revoked" if result.value else "Signature could not be revoked",
    )
