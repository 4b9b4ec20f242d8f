"""SQLAlchemy implementation for wallet domain"""

from __future__ import annotations

from decimal import Decimal
from typing import Sequence

from sqlalchemy import select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.infrastructure.database.models import Wallet as WalletModel
from marketplace.modules.common.datetimes import as_utc
from marketplace.modules.wallets.models import Wallet


class SqlWalletRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def get_by_user(self, user_id: str) -> Wallet | None:
        stmt = (
            select(WalletModel)
            .where(WalletModel.user_id == user_id)
            .execution_options(populate_existing=True)
        )
        result = await self.session.execute(stmt)
        model = result.scalars().first()
        return self._to_domain(model) if model else None

    async def list_all(self) -> Sequence[Wallet]:
        stmt = select(WalletModel).order_by(WalletModel.created_at, WalletModel.user_id)
        result = await self.session.execute(stmt)
        return [self._to_domain(model) for model in result.scalars().all()]

    async def create(self, user_id: str, token_balance: int) -> Wallet:
        """Insert a wallet unless one already exists for ``user_id``."""
        model = WalletModel(user_id=user_id, token_balance=token_balance, money_balance=Decimal("0"))
        self.session.add(model)
        try:
            await self.session.flush()
        except IntegrityError:
            await self.session.rollback()
            existing = await self.get_by_user(user_id)
            if existing is None:
                raise
            return existing
        await self.session.refresh(model)
        return self._to_domain(model)

    async def update_balance(self, user_id: str, token_balance: int, *, expected_version: int) -> Wallet | None:
        """Replace the balance only if nobody wrote the wallet since ``expected_version`` was read."""
        stmt = (
            update(WalletModel)
            .where(WalletModel.user_id == user_id, WalletModel.version == expected_version)
            .values(token_balance=token_balance, version=expected_version + 1)
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_user(user_id)

    async def increment_balance(self, user_id: str, amount: int) -> Wallet | None:
        stmt = (
            update(WalletModel)
            .where(WalletModel.user_id == user_id)
            .values(
                token_balance=WalletModel.token_balance + amount,
                version=WalletModel.version + 1,
            )
            .execution_options(synchronize_session=False)
        )
        result = await self.session.execute(stmt)
        if result.rowcount == 0:
            return None
        return await self.get_by_user(user_id)

    @staticmethod
    def _to_domain(model: WalletModel) -> Wallet:
        return Wallet(
            id=str(model.id),
            user_id=model.user_id,
            token_balance=int(model.token_balance),
            money_balance=Decimal(model.money_balance if model.money_balance is not None else 0),
            version=int(model.version),
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
        )
