# estate_http_api/schemas/properties.py

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from estate_http_api.db.models import PropertyStatus, PropertyType
from estate_http_api.schemas.common import APIModel


class PropertyBase(APIModel):
    name: str = Field(..., min_length=1, max_length=255)
    address: str = Field(..., min_length=1, max_length=500)
    description: Optional[str] = None
    type: PropertyType
    status: PropertyStatus = PropertyStatus.AVAILABLE
    price: Decimal = Field(..., ge=0)
    area: Optional[Decimal] = Field(default=None, ge=0)
    rooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    parking_spaces: Optional[int] = Field(default=None, ge=0)
    year_built: Optional[int] = None


class PropertyCreate(PropertyBase):
    pass


class PropertyUpdate(APIModel):
    """
    Partial update; only the fields present in the body are applied.
    """

    name: Optional[str] = Field(default=None, min_length=1, max_length=255)
    address: Optional[str] = Field(default=None, min_length=1, max_length=500)
    description: Optional[str] = None
    type: Optional[PropertyType] = None
    status: Optional[PropertyStatus] = None
    price: Optional[Decimal] = Field(default=None, ge=0)
    area: Optional[Decimal] = Field(default=None, ge=0)
    rooms: Optional[int] = Field(default=None, ge=0)
    bathrooms: Optional[int] = Field(default=None, ge=0)
    parking_spaces: Optional[int] = Field(default=None, ge=0)
    year_built: Optional[int] = None


class PropertyRead(PropertyBase):
    id: int
    created_at: datetime
    updated_at: datetime
