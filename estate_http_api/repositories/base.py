# estate_http_api/repositories/base.py

from __future__ import annotations

from typing import Any, Generic, List, Optional, Type, TypeVar

from sqlalchemy import Select, select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from estate_http_api.db.models import Base
from estate_http_api.errors import DuplicateError

ModelT = TypeVar("ModelT", bound=Base)


class BaseRepository(Generic[ModelT]):
    """
    Thin data-access layer shared by every record store.

    Subclasses set ``model`` and, where the table carries a unique business
    key, ``unique_field`` (used to label DuplicateError).
    """

    model: Type[ModelT]
    unique_field: str = "id"

    def __init__(self, session: Session) -> None:
        self._session = session

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------

    @property
    def session(self) -> Session:
        return self._session

    def _base_select(self) -> Select[Any]:
        return select(self.model)

    def _all(self, stmt: Select[Any]) -> List[ModelT]:
        result = self.session.execute(stmt)
        return list(result.scalars().all())

    # ------------------------------------------------------------------
    # Read operations
    # ------------------------------------------------------------------

    def get_by_id(self, record_id: int) -> Optional[ModelT]:
        """
        Fetch a single record by primary key, or None if it does not exist.
        """
        return self.session.get(self.model, record_id)

    def exists_by_id(self, record_id: int) -> bool:
        return self.get_by_id(record_id) is not None

    def list_all(self) -> List[ModelT]:
        return self._all(self._base_select().order_by(self.model.id))

    # ------------------------------------------------------------------
    # Write operations
    # ------------------------------------------------------------------

    def save(self, record: ModelT) -> ModelT:
        """
        Add or update ``record`` and flush so the id is assigned.

        A unique-constraint violation rolls the session back and surfaces as
        DuplicateError.
        """
        self.session.add(record)
        try:
            self.session.flush()
        except IntegrityError as exc:
            self.session.rollback()
            raise DuplicateError(self.unique_field) from exc
        return record

    def delete_by_id(self, record_id: int) -> bool:
        """
        Delete a record by id. Returns True if a record was deleted.
        """
        record = self.get_by_id(record_id)
        if record is None:
            return False

        self.session.delete(record)
        self.session.flush()
        return True
