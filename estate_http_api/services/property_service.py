# estate_http_api/services/property_service.py

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from estate_http_api.db.models import Property, PropertyStatus, PropertyType
from estate_http_api.errors import NotFoundError
from estate_http_api.logging import get_logger
from estate_http_api.repositories.properties import PropertiesRepository
from estate_http_api.schemas.properties import PropertyCreate, PropertyRead, PropertyUpdate

log = get_logger(__name__)


class PropertyService:
    """
    CRUD and search over the property catalogue.
    """

    def __init__(self, repo: PropertiesRepository) -> None:
        self._repo = repo

    def _require(self, property_id: int) -> Property:
        record = self._repo.get_by_id(property_id)
        if record is None:
            raise NotFoundError("Property", property_id)
        return record

    # -------------------------------------------------------------------------
    # Queries
    # -------------------------------------------------------------------------

    def list_all(self) -> List[PropertyRead]:
        return [PropertyRead.model_validate(p) for p in self._repo.list_all()]

    def get(self, property_id: int) -> PropertyRead:
        return PropertyRead.model_validate(self._require(property_id))

    def list_by_type(self, property_type: PropertyType) -> List[PropertyRead]:
        return [PropertyRead.model_validate(p) for p in self._repo.list_by_type(property_type)]

    def list_by_status(self, status: PropertyStatus) -> List[PropertyRead]:
        return [PropertyRead.model_validate(p) for p in self._repo.list_by_status(status)]

    def search(self, query: str) -> List[PropertyRead]:
        """
        Match ``query`` against name or address, ignoring case.
        """
        query = (query or "").strip()
        if not query:
            return self.list_all()
        return [PropertyRead.model_validate(p) for p in self._repo.search(query)]

    def search_by_criteria(
        self,
        *,
        property_type: Optional[PropertyType] = None,
        status: Optional[PropertyStatus] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        min_area: Optional[Decimal] = None,
        max_area: Optional[Decimal] = None,
    ) -> List[PropertyRead]:
        found = self._repo.search_by_criteria(
            property_type=property_type,
            status=status,
            min_price=min_price,
            max_price=max_price,
            min_area=min_area,
            max_area=max_area,
        )
        return [PropertyRead.model_validate(p) for p in found]

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------

    def create(self, payload: PropertyCreate) -> PropertyRead:
        record = Property(**payload.model_dump())
        self._repo.save(record)
        self._repo.session.commit()

        log.info("property_created", property_id=record.id)
        return PropertyRead.model_validate(record)

    def update(self, property_id: int, payload: PropertyUpdate) -> PropertyRead:
        """
        Apply only the fields present in ``payload``.
        """
        record = self._require(property_id)

        for field, value in payload.model_dump(exclude_unset=True).items():
            setattr(record, field, value)
        self._repo.save(record)
        self._repo.session.commit()

        log.info("property_updated", property_id=property_id)
        return PropertyRead.model_validate(record)

    def delete(self, property_id: int) -> bool:
        if not self._repo.delete_by_id(property_id):
            return False
        self._repo.session.commit()
        log.info("property_deleted", property_id=property_id)
        return True
