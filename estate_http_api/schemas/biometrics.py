# estate_http_api/schemas/biometrics.py

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from estate_http_api.db.models import BiometricStatus, BiometricType
from estate_http_api.schemas.common import APIModel


class BiometricRegisterRequest(APIModel):
    user_id: int
    user_name: str = Field(..., min_length=1, max_length=255)
    biometric_type: BiometricType
    biometric_data_base64: str = Field(..., min_length=1)


class BiometricAuthenticateRequest(APIModel):
    user_id: int
    biometric_type: BiometricType
    biometric_data_base64: str = Field(..., min_length=1)


class QualityEvaluationRequest(APIModel):
    biometric_data_base64: str = Field(..., min_length=1)


class BiometricRead(APIModel):
    """
    Enrollment as returned to clients. The raw sample is not echoed back.
    """

    id: int
    user_id: int
    user_name: str
    biometric_type: BiometricType
    biometric_hash: str
    quality_score: int
    registered_at: datetime
    last_used_at: Optional[datetime] = None
    expires_at: datetime
    status: BiometricStatus
    verification_result: Optional[str] = None


class AuthenticationResponse(APIModel):
    authenticated: bool
    message: str


class QualityEvaluationResponse(APIModel):
    quality_score: int
    quality_level: str
    message: str
