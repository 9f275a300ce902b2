# estate_http_api/routers/contracts.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from fastapi import APIRouter, Depends, HTTPException, Query, Response, status
from sqlalchemy.orm import Session

from estate_http_api.db.models import ContractStatus, ContractType
from estate_http_api.db.session import get_session
from estate_http_api.repositories.clients import ClientsRepository
from estate_http_api.repositories.contracts import ContractsRepository
from estate_http_api.repositories.properties import PropertiesRepository
from estate_http_api.schemas.contracts import ContractCreate, ContractRead, ContractUpdate
from estate_http_api.services.contract_service import ContractService

router = APIRouter(prefix="/contracts", tags=["contracts"])


def get_contract_service(session: Session = Depends(get_session)) -> ContractService:
    return ContractService(
        ContractsRepository(session),
        PropertiesRepository(session),
        ClientsRepository(session),
    )


@router.get("", response_model=List[ContractRead], summary="List contracts")
def list_contracts(service: ContractService = Depends(get_contract_service)) -> List[ContractRead]:
    return service.list_all()


@router.get("/type/{contract_type}", response_model=List[ContractRead])
def list_by_type(
    contract_type: ContractType,
    service: ContractService = Depends(get_contract_service),
) -> List[ContractRead]:
    return service.list_by_type(contract_type)


@router.get("/status/{contract_status}", response_model=List[ContractRead])
def list_by_status(
    contract_status: ContractStatus,
    service: ContractService = Depends(get_contract_service),
) -> List[ContractRead]:
    return service.list_by_status(contract_status)


@router.get("/property/{property_id}", response_model=List[ContractRead])
def list_by_property(
    property_id: int,
    service: ContractService = Depends(get_contract_service),
) -> List[ContractRead]:
    return service.list_by_property(property_id)


@router.get("/client/{client_id}", response_model=List[ContractRead])
def list_by_client(
    client_id: int,
    service: ContractService = Depends(get_contract_service),
) -> List[ContractRead]:
    return service.list_by_client(client_id)


@router.get(
    "/expiring",
    response_model=List[ContractRead],
    summary="Active contracts ending soon",
)
def list_expiring(
    before: Optional[datetime] = Query(None, description="Cut-off; defaults to now."),
    service: ContractService = Depends(get_contract_service),
) -> List[ContractRead]:
    return service.list_expiring(before)


@router.get("/{contract_id}", response_model=ContractRead, summary="Get a single contract")
def get_contract(
    contract_id: int,
    service: ContractService = Depends(get_contract_service),
) -> ContractRead:
    return service.get(contract_id)


@router.post(
    "",
    response_model=ContractRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create a contract",
)
def create_contract(
    *,
    service: ContractService = Depends(get_contract_service),
    payload: ContractCreate,
) -> ContractRead:
    return service.create(payload)


@router.put("/{contract_id}", response_model=ContractRead, summary="Update a contract")
def update_contract(
    contract_id: int,
    payload: ContractUpdate,
    service: ContractService = Depends(get_contract_service),
) -> ContractRead:
    return service.update(contract_id, payload)


@router.delete(
    "/{contract_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a contract",
)
def delete_contract(
    contract_id: int,
    service: ContractService = Depends(get_contract_service),
) -> Response:
    if not service.delete(contract_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Contract not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
