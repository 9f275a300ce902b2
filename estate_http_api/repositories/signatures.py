# estate_http_api/repositories/signatures.py

from __future__ import annotations

from typing import List, Optional

from estate_http_api.db.models import DigitalSignature, SignatureStatus
from estate_http_api.repositories.base import BaseRepository


class SignaturesRepository(BaseRepository[DigitalSignature]):
    """
    Record store for digital signatures.
    """

    model = DigitalSignature
    unique_field = "signature_hash"

    def list_by_signer(self, signer_id: int) -> List[DigitalSignature]:
        stmt = (
            self._base_select()
            .where(DigitalSignature.signer_id == signer_id)
            .order_by(DigitalSignature.signed_at.desc())
        )
        return self._all(stmt)

    def list_by_contract(self, contract_id: int) -> List[DigitalSignature]:
        stmt = (
            self._base_select()
            .where(DigitalSignature.contract_id == contract_id)
            .order_by(DigitalSignature.signed_at.desc())
        )
        return self._all(stmt)

    def list_by_status(self, status: SignatureStatus) -> List[DigitalSignature]:
        return self._all(self._base_select().where(DigitalSignature.status == status))

    def get_by_hash(self, signature_hash: str) -> Optional[DigitalSignature]:
        stmt = self._base_select().where(DigitalSignature.signature_hash == signature_hash)
        return self.session.execute(stmt).scalar_one_or_none()

    def exists_by_hash(self, signature_hash: str) -> bool:
        return self.get_by_hash(signature_hash) is not None
