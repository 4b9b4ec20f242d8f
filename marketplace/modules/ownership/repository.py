"""Repository protocol for the ownership ledger."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import OwnedBenefit, OwnedBenefitInput


class OwnedBenefitRepository(Protocol):
    async def add(self, record: OwnedBenefitInput) -> OwnedBenefit:
        ...

    async def list_by_owner(self, owner_id: str) -> Sequence[OwnedBenefit]:
        ...

    async def get_by_idempotency_key(self, owner_id: str, idempotency_key: str) -> OwnedBenefit | None:
        ...
