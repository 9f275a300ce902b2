# estate_http_api/routers/biometric.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from estate_http_api.db.session import get_session
from estate_http_api.errors import EstateError
from estate_http_api.repositories.biometrics import BiometricsRepository
from estate_http_api.schemas.biometrics import (
    AuthenticationResponse,
    BiometricAuthenticateRequest,
    BiometricRead,
    BiometricRegisterRequest,
    QualityEvaluationRequest,
    QualityEvaluationResponse,
)
from estate_http_api.schemas.common import OperationResponse
from estate_http_api.services.biometric_service import BiometricService, quality_level

router = APIRouter(prefix="/biometric", tags=["biometric"])

BAD_REQUEST = "Bad request"


def get_biometric_service(session: Session = Depends(get_session)) -> BiometricService:
    return BiometricService(BiometricsRepository(session))


def _bad_request() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST)


@router.post(
    "/register",
    response_model=BiometricRead,
    status_code=status.HTTP_201_CREATED,
    summary="Enroll a biometric sample",
    description="The sample is scored first; the score is stored with the enrollment.",
)
def register(
    *,
    service: BiometricService = Depends(get_biometric_service),
    payload: BiometricRegisterRequest,
) -> BiometricRead:
    quality = service.evaluate_quality(payload.biometric_data_base64)
    if not quality.ok:
        raise _bad_request()

    try:
        record = service.register(
            payload.user_id,
            payload.user_name,
            payload.biometric_type,
            payload.biometric_data_base64,
            quality.value,
        )
    except EstateError as exc:
        raise _bad_request() from exc
    return BiometricRead.model_validate(record)


@router.post("/authenticate", response_model=AuthenticationResponse, summary="Authenticate a user")
def authenticate(
    payload: BiometricAuthenticateRequest,
    service: BiometricService = Depends(get_biometric_service),
) -> AuthenticationResponse:
    result = service.authenticate(
        payload.user_id,
        payload.biometric_type,
        payload.biometric_data_base64,
    )
    if not result.ok:
        raise _bad_request()
    return AuthenticationResponse(
        authenticated=result.value,
        message="Authentication succeeded" if result.value else "Authentication failed",
    )


@router.post(
    "/evaluate-quality",
    response_model=QualityEvaluationResponse,
    summary="Score a biometric sample",
)
def evaluate_quality(
    payload: QualityEvaluationRequest,
    service: BiometricService = Depends(get_biometric_service),
) -> QualityEvaluationResponse:
    result = service.evaluate_quality(payload.biometric_data_base64)
    if not result.ok:
        raise _bad_request()
    return QualityEvaluationResponse(
        quality_score=result.value,
        quality_level=quality_level(result.value),
        message="Quality evaluation completed",
    )


@router.get("/user/{user_id}", response_model=List[BiometricRead])
def list_by_user(
    user_id: int,
    service: BiometricService = Depends(get_biometric_service),
) -> List[BiometricRead]:
    return [BiometricRead.model_validate(r) for r in service.list_by_user(user_id)]


@router.post("/{biometric_id}/deactivate", response_model=OperationResponse)
def deactivate(
    biometric_id: int,
    service: BiometricService = Depends(get_biometric_service),
) -> OperationResponse:
    result = service.deactivate(biometric_id)
    if not result.ok:
        raise _bad_request()
    return OperationResponse(
        success=result.value,
        message="Biometric data deactivated" if result.value else "Biometric data could not be deactivated",
    )


@router.delete("/{biometric_id}", response_model=OperationResponse)
def delete(
    biometric_id: int,
    service: BiometricService = Depends(get_biometric_service),
) -> OperationResponse:
    result = service.delete(biometric_id)
    if not result.ok:
        raise _bad_request()
    return OperationResponse(
        success=result.value,
        message="Biometric data deleted" if result.value else "Biometric data could not be deleted",
    )
