"""SQLAlchemy implementation of the benefit catalog repository."""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.infrastructure.database.models import Benefit as BenefitModel
from marketplace.modules.benefits.filters import BenefitFilter
from marketplace.modules.benefits.models import Benefit, BenefitCategory, BenefitInput
from marketplace.modules.common.datetimes import as_utc


class SqlBenefitRepository:
    """Benefit repository backed by SQLAlchemy models."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def get_by_id(self, benefit_id: str) -> Benefit | None:
        model = await self._session.get(BenefitModel, benefit_id, populate_existing=True)
        return self._to_domain(model) if model else None

    async def list_all(self) -> Sequence[Benefit]:
        stmt = select(BenefitModel).order_by(BenefitModel.name, BenefitModel.id)
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def list_filtered(self, criteria: BenefitFilter) -> Sequence[Benefit]:
        stmt = (
            select(BenefitModel)
            .where(*criteria.clauses())
            .order_by(BenefitModel.name, BenefitModel.id)
        )
        result = await self._session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, payload: BenefitInput) -> Benefit:
        model = BenefitModel()
        self._apply(model, payload)
        self._session.add(model)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def replace(self, benefit_id: str, payload: BenefitInput) -> Benefit | None:
        model = await self._session.get(BenefitModel, benefit_id)
        if model is None:
            return None
        self._apply(model, payload)
        await self._session.flush()
        await self._session.refresh(model)
        return self._to_domain(model)

    async def delete(self, benefit_id: str) -> bool:
        stmt = delete(BenefitModel).where(BenefitModel.id == benefit_id)
        result = await self._session.execute(stmt)
        return result.rowcount > 0

    @staticmethod
    def _apply(model: BenefitModel, payload: BenefitInput) -> None:
        model.name = payload.name.strip()
        model.category = payload.category.value
        model.description = payload.description
        model.image_url = payload.image_url
        model.price = payload.price
        model.in_stock = payload.in_stock
        model.expiration_date = as_utc(payload.expiration_date)

    @staticmethod
    def _to_domain(model: BenefitModel) -> Benefit:
        return Benefit(
            id=str(model.id),
            name=model.name,
            category=BenefitCategory(model.category),
            description=model.description or "",
            image_url=model.image_url or "",
            price=Decimal(model.price),
            in_stock=int(model.in_stock or 0),
            expiration_date=as_utc(model.expiration_date),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
