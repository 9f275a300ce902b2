# estate_http_api/schemas/transactions.py

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from typing import Optional

from pydantic import Field

from estate_http_api.db.models import TransactionStatus, TransactionType
from estate_http_api.schemas.common import APIModel


class TransactionBase(APIModel):
    contract_id: int
    type: TransactionType
    amount: Decimal
    transaction_date: datetime
    description: Optional[str] = None
    status: TransactionStatus = TransactionStatus.PENDING


class TransactionCreate(TransactionBase):
    pass


class TransactionUpdate(APIModel):
    contract_id: Optional[int] = None
    type: Optional[TransactionType] = None
    amount: Optional[Decimal] = None
    transaction_date: Optional[datetime] = None
    description: Optional[str] = None
    status: Optional[TransactionStatus] = None


class TransactionRead(TransactionBase):
    id: int
    contract_id: Optional[int] = None
    created_at: datetime
    updated_at: datetime
