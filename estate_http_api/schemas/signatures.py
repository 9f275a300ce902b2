# estate_http_api/schemas/signatures.py

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from estate_http_api.db.models import SignatureDocumentType, SignatureStatus
from estate_http_api.schemas.common import APIModel


class SignatureCreate(APIModel):
    signer_id: int
    signer_name: str = Field(..., min_length=1, max_length=255)
    contract_id: int
    document_type: SignatureDocumentType
    document_content: str = Field(..., min_length=1)
    private_key_base64: str = Field(
        ...,
        min_length=1,
        description="Base64 PKCS#8 DER RSA private key. Used once and never stored.",
    )


class SignatureVerifyRequest(APIModel):
    document_content: str = Field(..., min_length=1)
    public_key_base64: str = Field(
        ...,
        min_length=1,
        description="Base64 X.509 SubjectPublicKeyInfo DER RSA public key.",
    )


class SignatureRead(APIModel):
    id: int
    signer_id: int
    signer_name: str
    contract_id: int
    document_type: SignatureDocumentType
    signature_data: str
    signature_hash: str
    signed_at: datetime
    expires_at: datetime
    status: SignatureStatus
    verification_result: Optional[str] = None
    created_at: datetime
    updated_at: datetime


class SignatureVerification(APIModel):
    valid: bool
    message: str
    status: Optional[SignatureStatus] = None
