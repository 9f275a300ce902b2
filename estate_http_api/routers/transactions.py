# estate_http_api/routers/transactions.py

from __future__ import annotations

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response, status
from sqlalchemy.orm import Session

from estate_http_api.db.models import TransactionStatus, TransactionType
from estate_http_api.db.session import get_session
from estate_http_api.repositories.contracts import ContractsRepository
from estate_http_api.repositories.transactions import TransactionsRepository
from estate_http_api.schemas.transactions import (
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)
from estate_http_api.services.transaction_service import TransactionService

router = APIRouter(prefix="/transactions", tags=["transactions"])


def get_transaction_service(session: Session = Depends(get_session)) -> TransactionService:
    return TransactionService(TransactionsRepository(session), ContractsRepository(session))


@router.get("", response_model=List[TransactionRead], summary="List transactions")
def list_transactions(
    service: TransactionService = Depends(get_transaction_service),
) -> List[TransactionRead]:
    return service.list_all()


@router.get("/contract/{contract_id}", response_model=List[TransactionRead])
def list_by_contract(
    contract_id: int,
    service: TransactionService = Depends(get_transaction_service),
) -> List[TransactionRead]:
    return service.list_by_contract(contract_id)


@router.get("/type/{transaction_type}", response_model=List[TransactionRead])
def list_by_type(
    transaction_type: TransactionType,
    service: TransactionService = Depends(get_transaction_service),
) -> List[TransactionRead]:
    return service.list_by_type(transaction_type)


@router.get("/status/{transaction_status}", response_model=List[TransactionRead])
def list_by_status(
    transaction_status: TransactionStatus,
    service: TransactionService = Depends(get_transaction_service),
) -> List[TransactionRead]:
    return service.list_by_status(transaction_status)


@router.get("/{transaction_id}", response_model=TransactionRead)
def get_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionRead:
    return service.get(transaction_id)


@router.post(
    "",
    response_model=TransactionRead,
    status_code=status.HTTP_201_CREATED,
    summary="Record a transaction",
)
def create_transaction(
    *,
    service: TransactionService = Depends(get_transaction_service),
    payload: TransactionCreate,
) -> TransactionRead:
    return service.create(payload)


@router.put("/{transaction_id}", response_model=TransactionRead)
def update_transaction(
    transaction_id: int,
    payload: TransactionUpdate,
    service: TransactionService = Depends(get_transaction_service),
) -> TransactionRead:
    return service.update(transaction_id, payload)


@router.delete(
    "/{transaction_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete a transaction",
)
def delete_transaction(
    transaction_id: int,
    service: TransactionService = Depends(get_transaction_service),
) -> Response:
    if not service.delete(transaction_id):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Transaction not found")
    return Response(status_code=status.HTTP_204_NO_CONTENT)
