# estate_http_api/schemas/contracts.py

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from estate_http_api.db.models import ContractStatus, ContractType
from estate_http_api.schemas.common import APIModel


class ContractBase(APIModel):
    contract_number: str = Field(..., min_length=1, max_length=64)
    property_id: int
    client_id: int
    type: ContractType
    status: ContractStatus = ContractStatus.DRAFT
    amount: Decimal = Field(..., ge=0)
    monthly_rent: Optional[Decimal] = Field(default=None, ge=0)
    start_date: datetime
    end_date: Optional[datetime] = None
    terms: Optional[str] = None


class ContractCreate(ContractBase):
    pass


class ContractUpdate(APIModel):
    contract_number: Optional[str] = Field(default=None, min_length=1, max_length=64)
    property_id: Optional[int] = None
    client_id: Optional[int] = None
    type: Optional[ContractType] = None
    status: Optional[ContractStatus] = None
    amount: Optional[Decimal] = Field(default=None, ge=0)
    monthly_rent: Optional[Decimal] = Field(default=None, ge=0)
    start_date: Optional[datetime] = None
    end_date: Optional[datetime] = None
    terms: Optional[str] = None


class ContractRead(ContractBase):
    """
    Contract view with denormalized property and client names.
    """

    id: int
    property_id: Optional[int] = None
    client_id: Optional[int] = None
    property_name: Optional[str] = None
    client_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime
