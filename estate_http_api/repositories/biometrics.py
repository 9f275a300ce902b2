# estate_http_api/repositories/biometrics.py

from __future__ import annotations

from typing import List, Optional

from estate_http_api.db.models import BiometricData, BiometricStatus, BiometricType
from estate_http_api.repositories.base import BaseRepository


class BiometricsRepository(BaseRepository[BiometricData]):
    """
    Record store for biometric enrollments.
    """

    model = BiometricData
    unique_field = "biometric_hash"

    def list_by_user(self, user_id: int) -> List[BiometricData]:
        stmt = (
            self._base_select()
            .where(BiometricData.user_id == user_id)
            .order_by(BiometricData.registered_at.desc())
        )
        return self._all(stmt)

    def list_by_user_and_type(
        self,
        user_id: int,
        biometric_type: BiometricType,
        *,
        status: Optional[BiometricStatus] = None,
    ) -> List[BiometricData]:
        stmt = self._base_select().where(
            BiometricData.user_id == user_id,
            BiometricData.biometric_type == biometric_type,
        )
        if status is not None:
            stmt = stmt.where(BiometricData.status == status)
        return self._all(stmt)

    def list_by_status(self, status: BiometricStatus) -> List[BiometricData]:
        return self._all(self._base_select().where(BiometricData.status == status))

    def get_by_hash(self, biometric_hash: str) -> Optional[BiometricData]:
        stmt = self._base_select().where(BiometricData.biometric_hash == biometric_hash)
        return self.session.execute(stmt).scalar_one_or_none()

    def exists_by_hash(self, biometric_hash: str) -> bool:
        return self.get_by_hash(biometric_hash) is not None
