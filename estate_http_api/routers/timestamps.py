# estate_http_api/routers/timestamps.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session

from estate_http_api.db.models import TimestampDocumentType, TimestampStatus
from estate_http_api.db.session import get_session
from estate_http_api.errors import EstateError
from estate_http_api.repositories.timestamps import TimestampsRepository
from estate_http_api.schemas.common import OperationResponse
from estate_http_api.schemas.timestamps import (
    TimestampCreate,
    TimestampRead,
    TimestampStatusUpdate,
    TimestampVerification,
)
from estate_http_api.services.timestamp_service import TimestampService

router = APIRouter(prefix="/timestamps", tags=["timestamps"])

BAD_REQUEST = "Bad request"


def get_timestamp_service(session: Session = Depends(get_session)) -> TimestampService:
    return TimestampService(TimestampsRepository(session))


def _bad_request() -> HTTPException:
    return HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=BAD_REQUEST)


@router.post(
    "",
    response_model=TimestampRead,
    status_code=status.HTTP_201_CREATED,
    summary="Issue a timestamp",
)
def create_timestamp(
    *,
    service: TimestampService = Depends(get_timestamp_service),
    payload: TimestampCreate,
) -> TimestampRead:
    try:
        record = service.create_timestamp(
            payload.document_id,
            payload.document_type,
            payload.timestamp_certificate,
            payload.timestamp_authority,
            authority_certificate=payload.authority_certificate,
            expires_at=payload.expires_at,
        )
    except EstateError as exc:
        raise _bad_request() from exc
    return TimestampRead.model_validate(record)


@router.get("", response_model=List[TimestampRead], summary="List timestamps")
def list_timestamps(
    service: TimestampService = Depends(get_timestamp_service),
) -> List[TimestampRead]:
    return [TimestampRead.model_validate(t) for t in service.list_all()]


@router.get("/document/{document_id}", response_model=List[TimestampRead])
def list_by_document(
    document_id: int,
    service: TimestampService = Depends(get_timestamp_service),
) -> List[TimestampRead]:
    return [TimestampRead.model_validate(t) for t in service.list_by_document(document_id)]


@router.get("/type/{document_type}", response_model=List[TimestampRead])
def list_by_type(
    document_type: TimestampDocumentType,
    service: TimestampService = Depends(get_timestamp_service),
) -> List[TimestampRead]:
    return [TimestampRead.model_validate(t) for t in service.list_by_type(document_type)]


@router.get("/authority/{authority}", response_model=List[TimestampRead])
def list_by_authority(
    authority: str,
    service: TimestampService = Depends(get_timestamp_service),
) -> List[TimestampRead]:
    return [TimestampRead.model_validate(t) for t in service.list_by_authority(authority)]


@router.get("/status/{timestamp_status}", response_model=List[TimestampRead])
def list_by_status(
    timestamp_status: TimestampStatus,
    service: TimestampService = Depends(get_timestamp_service),
) -> List[TimestampRead]:
    return [TimestampRead.model_validate(t) for t in service.list_by_status(timestamp_status)]


@router.get("/{timestamp_id}", response_model=TimestampRead, summary="Get a single timestamp")
def get_timestamp(
    timestamp_id: int,
    service: TimestampService = Depends(get_timestamp_service),
) -> TimestampRead:
    record = service.get_timestamp(timestamp_id)
    if record is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Timestamp not found")
    return TimestampRead.model_validate(record)


@router.post(
    "/{timestamp_id}/verify",
    response_model=TimestampVerification,
    summary="Verify a timestamp",
    description="A timestamp is valid while its status is ACTIVE.",
)
def verify_timestamp(
    timestamp_id: int,
    service: TimestampService = Depends(get_timestamp_service),
) -> TimestampVerification:
    result = service.verify_timestamp(timestamp_id)
    if not result.ok:
        raise _bad_request()
    return TimestampVerification(
        valid=result.value,
        message="Timestamp is valid" if result.value else "Timestamp is not valid",
    )


@router.put(
    "/{timestamp_id}/status",
    response_model=OperationResponse,
    summary="Change the status of a timestamp",
)
def update_status(
    timestamp_id: int,
    payload: TimestampStatusUpdate,
    service: TimestampService = Depends(get_timestamp_service),
) -> OperationResponse:
    result = service.update_status(timestamp_id, payload.status)
    if not result.ok:
        raise _bad_request()
    return OperationResponse(
        success=result.value,
        message="Status updated" if result.value else "Timestamp not found",
    )


@router.delete("/{timestamp_id}", response_model=OperationResponse, summary="Delete a timestamp")
def delete_timestamp(
    timestamp_id: int,
    service: TimestampService = Depends(get_timestamp_service),
) -> OperationResponse:
    result = service.delete_timestamp(timestamp_id)
    if not result.ok:
        raise _bad_request()
    return OperationResponse(
        success=result.value,
        message="Timestamp deleted" if result.value else "Timestamp not found",
    )
