"""Wallet domain service"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Sequence

from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.modules.common import InvalidInputError, NotFoundError, ensure_identity

from .models import Wallet
from .repository import WalletRepository

logger = logging.getLogger(__name__)


def _ensure_token_amount(value: object, field: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or value < 0:
        raise InvalidInputError(f"{field} must be a non-negative integer")
    return value


@dataclass(slots=True)
class WalletService:
    repository: WalletRepository

    @classmethod
    def with_session(cls, session: AsyncSession) -> "WalletService":
        # deferred: the SQL repository imports this package's models
        from marketplace.infrastructure.database.repositories.wallet_repository import SqlWalletRepository

        return cls(SqlWalletRepository(session))

    async def get_wallet(self, user_id: str) -> Wallet:
        user_id = ensure_identity(user_id, "user_id")
        wallet = await self.repository.get_by_user(user_id)
        if wallet is None:
            raise NotFoundError("wallet", user_id)
        return wallet

    async def list_wallets(self) -> Sequence[Wallet]:
        return await self.repository.list_all()

    async def open_wallet(self, user_id: str, token_balance: int = 0) -> Wallet:
        """Return the user's wallet, creating it with ``token_balance`` if absent."""
        user_id = ensure_identity(user_id, "user_id")
        token_balance = _ensure_token_amount(token_balance, "token_balance")
        wallet = await self.repository.get_by_user(user_id)
        if wallet is None:
            wallet = await self.repository.create(user_id, token_balance)
            logger.info("Wallet opened for user %s with %s tokens", user_id, wallet.token_balance)
        return wallet

    async def grant_tokens(self, user_id: str, amount: int) -> Wallet:
        user_id = ensure_identity(user_id, "user_id")
        amount = _ensure_token_amount(amount, "amount")
        wallet = await self.repository.increment_balance(user_id, amount)
        if wallet is None:
            raise NotFoundError("wallet", user_id)
        logger.info("Granted %s tokens to user %s (balance %s)", amount, user_id, wallet.token_balance)
        return wallet
