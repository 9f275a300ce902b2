# estate_http_api/repositories/properties.py

from __future__ import annotations

from decimal import Decimal
from typing import List, Optional

from sqlalchemy import func, or_

from estate_http_api.db.models import Property, PropertyStatus, PropertyType
from estate_http_api.repositories.base import BaseRepository


class PropertiesRepository(BaseRepository[Property]):
    model = Property

    def list_by_type(self, property_type: PropertyType) -> List[Property]:
        return self._all(self._base_select().where(Property.type == property_type))

    def list_by_status(self, status: PropertyStatus) -> List[Property]:
        return self._all(self._base_select().where(Property.status == status))

    def search(self, query: str) -> List[Property]:
        """
        Case-insensitive substring match on name or address.
        """
        pattern = f"%{query.lower()}%"
        stmt = (
            self._base_select()
            .where(
                or_(
                    func.lower(Property.name).like(pattern),
                    func.lower(Property.address).like(pattern),
                )
            )
            .order_by(Property.id)
        )
        return self._all(stmt)

    def search_by_criteria(
        self,
        *,
        property_type: Optional[PropertyType] = None,
        status: Optional[PropertyStatus] = None,
        min_price: Optional[Decimal] = None,
        max_price: Optional[Decimal] = None,
        min_area: Optional[Decimal] = None,
        max_area: Optional[Decimal] = None,
    ) -> List[Property]:
        stmt = self._base_select()

        if property_type is not None:
            stmt = stmt.where(Property.type == property_type)
        if status is not None:
            stmt = stmt.where(Property.status == status)
        if min_price is not None:
            stmt = stmt.where(Property.price >= min_price)
        if max_price is not None:
            stmt = stmt.where(Property.price <= max_price)
        if min_area is not None:
            stmt = stmt.where(Property.area >= min_area)
        if max_area is not None:
            stmt = stmt.where(Property.area <= max_area)

        return self._all(stmt.order_by(Property.id))
