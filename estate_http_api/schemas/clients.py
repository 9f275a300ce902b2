# estate_http_api/schemas/clients.py

from __future__ import annotations

from datetime import datetime
from typing import Optional

from pydantic import Field

from estate_http_api.db.models import ClientStatus, ClientType
from estate_http_api.schemas.common import APIModel


class ClientBase(APIModel):
    first_name: str = Field(..., min_length=1, max_length=100)
    last_name: str = Field(..., min_length=1, max_length=100)
    email: str = Field(..., min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$")
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)
    type: ClientType
    status: ClientStatus = ClientStatus.ACTIVE


class ClientCreate(ClientBase):
    pass


class ClientUpdate(APIModel):
    first_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    last_name: Optional[str] = Field(default=None, min_length=1, max_length=100)
    email: Optional[str] = Field(
        default=None, min_length=3, max_length=255, pattern=r"^[^@\s]+@[^@\s]+$"
    )
    phone: Optional[str] = Field(default=None, max_length=50)
    address: Optional[str] = Field(default=None, max_length=500)
    type: Optional[ClientType] = None
    status: Optional[ClientStatus] = None


class ClientRead(ClientBase):
    id: int
    full_name: str
    created_at: datetime
    updated_at: datetime
