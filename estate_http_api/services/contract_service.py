# estate_http_api/services/contract_service.py

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from estate_http_api.clock import normalize_datetimes, to_naive_utc, utcnow
from estate_http_api.db.models import Contract, ContractStatus, ContractType
from estate_http_api.errors import DuplicateError, NotFoundError, ValidationError
from estate_http_api.logging import get_logger
from estate_http_api.repositories.clients import ClientsRepository
from estate_http_api.repositories.contracts import ContractsRepository
from estate_http_api.repositories.properties import PropertiesRepository
from estate_http_api.schemas.contracts import ContractCreate, ContractRead, ContractUpdate

log = get_logger(__name__)


class ContractService:
    """
    Contracts bind a property to a client.

    Responsibilities:
    - Check that the referenced property and client exist.
    - Keep contract numbers unique.
    - Expose the expiring-soon view used by the dashboard.
    """

    def __init__(
        self,
        repo: ContractsRepository,
        properties: PropertiesRepository,
        clients: ClientsRepository,
    ) -> None:
        self._repo = repo
        self._properties = properties
        self._clients = clients

    def _require(self, contract_id: int) -> Contract:
        record = self._repo.get_by_id(contract_id)
        if record is None:
            raise NotFoundError("Contract", contract_id)
        return record

    def _check_references(self, fields: Dict[str, Any]) -> None:
        property_id = fields.get("property_id")
        if property_id is not None and not self._properties.exists_by_id(property_id):
            raise ValidationError(f"Property with id={property_id} does not exist.")
        client_id = fields.get("client_id")
        if client_id is not None and not self._clients.exists_by_id(client_id):
            raise ValidationError(f"Client with id={client_id} does not exist.")

    @staticmethod
    def _check_dates(start: Optional[datetime], end: Optional[datetime]) -> None:
        if start is not None and end is not None and end < start:
            raise ValidationError("end_date must not precede start_date.")

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_all(self) -> List[ContractRead]:
        return [ContractRead.model_validate(c) for c in self._repo.list_all()]

    def get(self, contract_id: int) -> ContractRead:
        return ContractRead.model_validate(self._require(contract_id))

    def list_by_type(self, contract_type: ContractType) -> List[ContractRead]:
        return [ContractRead.model_validate(c) for c in self._repo.list_by_type(contract_type)]

    def list_by_status(self, status: ContractStatus) -> List[ContractRead]:
        return [ContractRead.model_validate(c) for c in self._repo.list_by_status(status)]

    def list_by_property(self, property_id: int) -> List[ContractRead]:
        return [ContractRead.model_validate(c) for c in self._repo.list_by_property(property_id)]

    def list_by_client(self, client_id: int) -> List[ContractRead]:
        return [ContractRead.model_validate(c) for c in self._repo.list_by_client(client_id)]

    def list_expiring(self, before: Optional[datetime] = None) -> List[ContractRead]:
        """
        Active contracts ending on or before ``before`` (default: now).
        """
        cutoff = to_naive_utc(before) or utcnow()
        return [ContractRead.model_validate(c) for c in self._repo.list_expiring(cutoff)]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, payload: ContractCreate) -> ContractRead:
        fields = normalize_datetimes(payload.model_dump())
        self._check_references(fields)
        self._check_dates(fields["start_date"], fields.get("end_date"))
        if self._repo.exists_by_number(payload.contract_number):
            raise DuplicateError("contract_number", payload.contract_number)

        record = Contract(**fields)
        self._repo.save(record)
        self._repo.session.commit()

        log.info(
            "contract_created",
            contract_id=record.id,
            property_id=record.property_id,
            client_id=record.client_id,
        )
        return ContractRead.model_validate(record)

    def update(self, contract_id: int, payload: ContractUpdate) -> ContractRead:
        record = self._require(contract_id)
        updates = normalize_datetimes(payload.model_dump(exclude_unset=True))

        self._check_references(updates)
        self._check_dates(
            updates.get("start_date", record.start_date),
            updates.get("end_date", record.end_date),
        )

        new_number = updates.get("contract_number")
        if new_number and new_number != record.contract_number:
            if self._repo.exists_by_number(new_number):
                raise DuplicateError("contract_number", new_number)

        for field, value in updates.items():
            setattr(record, field, value)
        self._repo.save(record)
        self._repo.session.commit()
        # relationships follow the new foreign keys
        self._repo.session.refresh(record)

        log.info("contract_updated", contract_id=contract_id)
        return ContractRead.model_validate(record)

    def delete(self, contract_id: int) -> bool:
        if not self._repo.delete_by_id(contract_id):
            return False
        self._repo.session.commit()
        log.info("contract_deleted", contract_id=contract_id)
        return True
