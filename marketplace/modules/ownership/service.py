"""Read side of the ownership ledger."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.modules.common import ensure_identity

from .models import OwnedBenefit
from .repository import OwnedBenefitRepository


@dataclass(slots=True)
class OwnershipService:
    repository: OwnedBenefitRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "OwnershipService":
        # deferred: the SQL repository imports this package's models
        from marketplace.infrastructure.database.repositories.owned_benefit_repository import (
            SqlOwnedBenefitRepository,
        )

        return cls(SqlOwnedBenefitRepository(session))

    async def list_owned_benefits(self, user_id: str) -> Sequence[OwnedBenefit]:
        return await self.repository.list_by_owner(ensure_identity(user_id, "user_id"))
