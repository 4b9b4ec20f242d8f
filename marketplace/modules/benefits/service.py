"""Catalog management use cases."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.modules.common import InvalidInputError, NotFoundError, ensure_identity

from .filters import BenefitFilter
from .models import Benefit, BenefitInput
from .repository import BenefitRepository

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class BenefitService:
    repository: BenefitRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "BenefitService":
        # deferred: the SQL repository imports this package's models
        from marketplace.infrastructure.database.repositories.benefit_repository import SqlBenefitRepository

        return cls(SqlBenefitRepository(session))

    async def get_benefit(self, benefit_id: str) -> Benefit:
        benefit_id = ensure_identity(benefit_id, "benefit_id")
        benefit = await self.repository.get_by_id(benefit_id)
        if benefit is None:
            raise NotFoundError("benefit", benefit_id)
        return benefit

    async def list_benefits(self, criteria: Optional[BenefitFilter] = None) -> Sequence[Benefit]:
        if criteria is None or criteria.is_empty:
            return await self.repository.list_all()
        return await self.repository.list_filtered(criteria)

    async def add_benefit(self, payload: BenefitInput) -> Benefit:
        payload.validate()
        benefit = await self.repository.create(payload)
        logger.info("Benefit %s added (%s, price %s)", benefit.id, benefit.name, benefit.price)
        return benefit

    async def update_benefit(
        self,
        benefit_id: str,
        payload: BenefitInput,
        *,
        body_id: Optional[str] = None,
    ) -> Benefit:
        benefit_id = ensure_identity(benefit_id, "benefit_id")
        if body_id is not None and ensure_identity(body_id, "id") != benefit_id:
            raise InvalidInputError("Benefit ID in URL does not match ID in request body")
        payload.validate()
        benefit = await self.repository.replace(benefit_id, payload)
        if benefit is None:
            raise NotFoundError("benefit", benefit_id)
        logger.info("Benefit %s updated", benefit_id)
        return benefit

    async def delete_benefit(self, benefit_id: str) -> None:
        benefit_id = ensure_identity(benefit_id, "benefit_id")
        if not await self.repository.delete(benefit_id):
            raise NotFoundError("benefit", benefit_id)
        logger.info("Benefit %s deleted", benefit_id)
