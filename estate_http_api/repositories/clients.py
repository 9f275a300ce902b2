# estate_http_api/repositories/clients.py

from __future__ import annotations

from typing import List, Optional

from sqlalchemy import func, or_

from estate_http_api.db.models import Client, ClientStatus, ClientType
from estate_http_api.repositories.base import BaseRepository


class ClientsRepository(BaseRepository[Client]):
    model = Client
    unique_field = "email"

    def get_by_email(self, email: str) -> Optional[Client]:
        stmt = self._base_select().where(func.lower(Client.email) == email.lower())
        return self.session.execute(stmt).scalar_one_or_none()

    def exists_by_email(self, email: str) -> bool:
        return self.get_by_email(email) is not None

    def list_by_type(self, client_type: ClientType) -> List[Client]:
        return self._all(self._base_select().where(Client.type == client_type))

    def list_by_status(self, status: ClientStatus) -> List[Client]:
        return self._all(self._base_select().where(Client.status == status))

    def search(self, query: str) -> List[Client]:
        pattern = f"%{query.lower()}%"
        stmt = (
            self._base_select()
            .where(
                or_(
                    func.lower(Client.first_name).like(pattern),
                    func.lower(Client.last_name).like(pattern),
                    func.lower(Client.email).like(pattern),
                    Client.phone.like(f"%{query}%"),
                )
            )
            .order_by(Client.id)
        )
        return self._all(stmt)

    def advanced_search(
        self,
        *,
        name: Optional[str] = None,
        email: Optional[str] = None,
        client_type: Optional[ClientType] = None,
        status: Optional[ClientStatus] = None,
    ) -> List[Client]:
        stmt = self._base_select()

        if name:
            pattern = f"%{name.lower()}%"
            stmt = stmt.where(
                or_(
                    func.lower(Client.first_name).like(pattern),
                    func.lower(Client.last_name).like(pattern),
                )
            )
        if email:
            stmt = stmt.where(func.lower(Client.email).like(f"%{email.lower()}%"))
        if client_type is not None:
            stmt = stmt.where(Client.type == client_type)
        if status is not None:
            stmt = stmt.where(Client.status == status)

        return self._all(stmt.order_by(Client.id))
