# estate_http_api/repositories/contracts.py

from __future__ import annotations

from datetime import datetime
from typing import List, Optional

from estate_http_api.db.models import Contract, ContractStatus, ContractType
from estate_http_api.repositories.base import BaseRepository


class ContractsRepository(BaseRepository[Contract]):
    model = Contract
    unique_field = "contract_number"

    def get_by_number(self, contract_number: str) -> Optional[Contract]:
        stmt = self._base_select().where(Contract.contract_number == contract_number)
        return self.session.execute(stmt).scalar_one_or_none()

    def exists_by_number(self, contract_number: str) -> bool:
        return self.get_by_number(contract_number) is not None

    def list_by_type(self, contract_type: ContractType) -> List[Contract]:
        return self._all(self._base_select().where(Contract.type == contract_type))

    def list_by_status(self, status: ContractStatus) -> List[Contract]:
        return self._all(self._base_select().where(Contract.status == status))

    def list_by_property(self, property_id: int) -> List[Contract]:
        return self._all(self._base_select().where(Contract.property_id == property_id))

    def list_by_client(self, client_id: int) -> List[Contract]:
        return self._all(self._base_select().where(Contract.client_id == client_id))

    def list_expiring(self, before: datetime) -> List[Contract]:
        """
        Active contracts whose end date falls on or before ``before``.
        """
        stmt = (
            self._base_select()
            .where(
                Contract.status == ContractStatus.ACTIVE,
                Contract.end_date.is_not(None),
                Contract.end_date <= before,
            )
            .order_by(Contract.end_date)
        )
        return self._all(stmt)
