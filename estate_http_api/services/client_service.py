# estate_http_api/services/client_service.py

from __future__ import annotations

from typing import List, Optional

from estate_http_api.db.models import Client, ClientStatus, ClientType
from estate_http_api.errors import DuplicateError, NotFoundError
from estate_http_api.logging import get_logger
from estate_http_api.repositories.clients import ClientsRepository
from estate_http_api.schemas.clients import ClientCreate, ClientRead, ClientUpdate

log = get_logger(__name__)


class ClientService:
    """
    Client directory.

    Business rule: e-mail addresses are unique (case-insensitive).
    """

    def __init__(self, repo: ClientsRepository) -> None:
        self._repo = repo

    def _require(self, client_id: int) -> Client:
        record = self._repo.get_by_id(client_id)
        if record is None:
            raise NotFoundError("Client", client_id)
        return record

    def list_all(self) -> List[ClientRead]:
        return [ClientRead.model_validate(c) for c in self._repo.list_all()]

    def get(self, client_id: int) -> ClientRead:
        return ClientRead.model_validate(self._require(client_id))

    def list_by_type(self, client_type: ClientType) -> List[ClientRead]:
        return [ClientRead.model_validate(c) for c in self._repo.list_by_type(client_type)]

    def search(self, query: str) -> List[ClientRead]:
        query = (query or "").strip()
        if not query:
            return self.list_all()
        return [ClientRead.model_validate(c) for c in self._repo.search(query)]

    def advanced_search(
        self,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        client_type: Optional[ClientType] = None,
        status: Optional[ClientStatus] = None,
    ) -> List[ClientRead]:
        found = self._repo.advanced_search(
            name=name,
            email=email,
            client_type=client_type,
            status=status,
        )
        return [ClientRead.model_validate(c) for c in found]

    def create(self, payload: ClientCreate) -> ClientRead:
        if self._repo.exists_by_email(payload.email):
            raise DuplicateError("email", payload.email)

        record = Client(**payload.model_dump())
        self._repo.save(record)
        self._repo.session.commit()

        log.info("client_created", client_id=record.id)
        return ClientRead.model_validate(record)

    def update(self, client_id: int, payload: ClientUpdate) -> ClientRead:
        record = self._require(client_id)
        updates = payload.model_dump(exclude_unset=True)

        new_email = updates.get("email")
        if new_email and new_email.lower() != record.email.lower():
            existing = self._repo.get_by_email(new_email)
            if existing is not None and existing.id != client_id:
                raise DuplicateError("email", new_email)

        for field, value in updates.items():
            setattr(record, field, value)
        self._repo.save(record)
        self._repo.session.commit()

        log.info("client_updated", client_id=client_id)
        return ClientRead.model_validate(record)

    def delete(self, client_id: int) -> bool:
        if not self._repo.delete_by_id(client_id):
            return False
        self._repo.session.commit()
        log.info("client_deleted", client_id=client_id)
        return True
