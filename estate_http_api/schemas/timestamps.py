# estate_http_api/schemas/timestamps.py

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from estate_http_api.db.models import TimestampDocumentType, TimestampStatus
from estate_http_api.schemas.common import APIModel


class TimestampCreate(APIModel):
    """
    Request body for issuing a document timestamp.

    ``expires_at`` is optional; the configured validity window applies when
    it is omitted.
    """

    document_id: int
    document_type: TimestampDocumentType
    timestamp_certificate: str = Field(..., min_length=1)
    timestamp_authority: str = Field(..., min_length=1, max_length=255)
    authority_certificate: Optional[str] = None
    expires_at: Optional[datetime] = None


class TimestampStatusUpdate(APIModel):
    status: TimestampStatus


class TimestampRead(APIModel):
    id: int
    document_id: int
    document_type: TimestampDocumentType
    timestamp_at: datetime
    timestamp_certificate: str
    timestamp_hash: str
    timestamp_authority: str
    authority_certificate: Optional[str] = None
    expires_at: datetime
    status: TimestampStatus
    verification_result: Optional[str] = None


class TimestampVerification(APIModel):
    valid: bool
    message: str
