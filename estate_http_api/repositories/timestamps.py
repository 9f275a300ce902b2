# estate_http_api/repositories/timestamps.py

from __future__ import annotations

from typing import List

from estate_http_api.db.models import (
    DigitalTimestamp,
    TimestampDocumentType,
    TimestampStatus,
)
from estate_http_api.repositories.base import BaseRepository


class TimestampsRepository(BaseRepository[DigitalTimestamp]):
    """
    Record store for document timestamps.
    """

    model = DigitalTimestamp
    unique_field = "timestamp_hash"

    def list_by_document(self, document_id: int) -> List[DigitalTimestamp]:
        stmt = (
            self._base_select()
            .where(DigitalTimestamp.document_id == document_id)
            .order_by(DigitalTimestamp.timestamp_at.desc())
        )
        return self._all(stmt)

    def list_by_type(self, document_type: TimestampDocumentType) -> List[DigitalTimestamp]:
        return self._all(
            self._base_select().where(DigitalTimestamp.document_type == document_type)
        )

    def list_by_authority(self, authority: str) -> List[DigitalTimestamp]:
        return self._all(
            self._base_select().where(DigitalTimestamp.timestamp_authority == authority)
        )

    def list_by_status(self, status: TimestampStatus) -> List[DigitalTimestamp]:
        return self._all(self._base_select().where(DigitalTimestamp.status == status))

    def exists_by_hash(self, timestamp_hash: str) -> bool:
        stmt = self._base_select().where(DigitalTimestamp.timestamp_hash == timestamp_hash)
        return self.session.execute(stmt).first() is not None
