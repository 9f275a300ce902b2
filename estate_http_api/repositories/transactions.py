# estate_http_api/repositories/transactions.py

from __future__ import annotations

from typing import List

from estate_http_api.db.models import Transaction, TransactionStatus, TransactionType
from estate_http_api.repositories.base import BaseRepository


class TransactionsRepository(BaseRepository[Transaction]):
    model = Transaction

    def list_by_contract(self, contract_id: int) -> List[Transaction]:
        stmt = (
            self._base_select()
            .where(Transaction.contract_id == contract_id)
            .order_by(Transaction.transaction_date.desc())
        )
        return self._all(stmt)

    def list_by_type(self, transaction_type: TransactionType) -> List[Transaction]:
        return self._all(self._base_select().where(Transaction.type == transaction_type))

    def list_by_status(self, status: TransactionStatus) -> List[Transaction]:
        return self._all(self._base_select().where(Transaction.status == status))
