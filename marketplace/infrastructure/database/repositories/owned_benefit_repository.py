"""SQLAlchemy implementation of the ownership ledger"""

from __future__ import annotations

from typing import Sequence

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.infrastructure.database.models import OwnedBenefit as OwnedBenefitModel
from marketplace.modules.common.datetimes import as_utc
from marketplace.modules.ownership.models import OwnedBenefit, OwnedBenefitInput


class SqlOwnedBenefitRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def add(self, record: OwnedBenefitInput) -> OwnedBenefit:
        model = OwnedBenefitModel(
            owner_id=record.owner_id,
            benefit_id=record.benefit_id,
            purchased_at=as_utc(record.purchased_at),
            content=record.content,
            expiration_date=as_utc(record.expiration_date),
            price_paid=record.price_paid,
            idempotency_key=record.idempotency_key,
        )
        self.session.add(model)
        await self.session.flush()
        return self._to_domain(model)

    async def list_by_owner(self, owner_id: str) -> Sequence[OwnedBenefit]:
        stmt = (
            select(OwnedBenefitModel)
            .where(OwnedBenefitModel.owner_id == owner_id)
            .order_by(OwnedBenefitModel.purchased_at, OwnedBenefitModel.id)
        )
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def get_by_idempotency_key(self, owner_id: str, idempotency_key: str) -> OwnedBenefit | None:
        stmt = select(OwnedBenefitModel).where(
            OwnedBenefitModel.owner_id == owner_id,
            OwnedBenefitModel.idempotency_key == idempotency_key,
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    @staticmethod
    def _to_domain(model: OwnedBenefitModel) -> OwnedBenefit:
        return OwnedBenefit(
            id=str(model.id),
            owner_id=model.owner_id,
            benefit_id=model.benefit_id,
            purchased_at=as_utc(model.purchased_at),
            content=model.content,
            expiration_date=as_utc(model.expiration_date),
            price_paid=int(model.price_paid),
            idempotency_key=model.idempotency_key,
        )
