# estate_http_api/services/transaction_service.py

from __future__ import annotations

from typing import List

from estate_http_api.clock import normalize_datetimes
from estate_http_api.db.models import Transaction, TransactionStatus, TransactionType
from estate_http_api.errors import NotFoundError, ValidationError
from estate_http_api.logging import get_logger
from estate_http_api.repositories.contracts import ContractsRepository
from estate_http_api.repositories.transactions import TransactionsRepository
from estate_http_api.schemas.transactions import (
    TransactionCreate,
    TransactionRead,
    TransactionUpdate,
)

log = get_logger(__name__)


class TransactionService:
    """
    Money movements recorded against a contract.
    """

    def __init__(self, repo: TransactionsRepository, contracts: ContractsRepository) -> None:
        self._repo = repo
        self._contracts = contracts

    def _require(self, transaction_id: int) -> Transaction:
        record = self._repo.get_by_id(transaction_id)
        if record is None:
            raise NotFoundError("Transaction", transaction_id)
        return record

    def _check_contract(self, contract_id: int) -> None:
        if not self._contracts.exists_by_id(contract_id):
            raise ValidationError(f"Contract with id={contract_id} does not exist.")

    def list_all(self) -> List[TransactionRead]:
        return [TransactionRead.model_validate(t) for t in self._repo.list_all()]

    def get(self, transaction_id: int) -> TransactionRead:
        return TransactionRead.model_validate(self._require(transaction_id))

    def list_by_contract(self, contract_id: int) -> List[TransactionRead]:
        return [TransactionRead.model_validate(t) for t in self._repo.list_by_contract(contract_id)]

    def list_by_type(self, transaction_type: TransactionType) -> List[TransactionRead]:
        return [TransactionRead.model_validate(t) for t in self._repo.list_by_type(transaction_type)]

    def list_by_status(self, status: TransactionStatus) -> List[TransactionRead]:
        return [TransactionRead.model_validate(t) for t in self._repo.list_by_status(status)]

    def create(self, payload: TransactionCreate) -> TransactionRead:
        self._check_contract(payload.contract_id)

        record = Transaction(**normalize_datetimes(payload.model_dump()))
        self._repo.save(record)
        self._repo.session.commit()

        log.info(
            "transaction_created",
            transaction_id=record.id,
            contract_id=record.contract_id,
            type=record.type.value,
        )
        return TransactionRead.model_validate(record)

    def update(self, transaction_id: int, payload: TransactionUpdate) -> TransactionRead:
        record = self._require(transaction_id)
        updates = normalize_datetimes(payload.model_dump(exclude_unset=True))

        if updates.get("contract_id") is not None:
            self._check_contract(updates["contract_id"])

        for field, value in updates.items():
            setattr(record, field, value)
        self._repo.save(record)
        self._repo.session.commit()

        log.info("transaction_updated", transaction_id=transaction_id)
        return TransactionRead.model_validate(record)

    def delete(self, transaction_id: int) -> bool:
        if not self._repo.delete_by_id(transaction_id):
            return False
        self._repo.session.commit()
        log.info("transaction_deleted", transaction_id=transaction_id)
        return True
