"""Purchase coordinator.

A purchase reads the benefit and the buyer's wallet, checks funds, debits the
wallet and appends an ownership record. All of it runs inside one store
transaction opened here, so either both writes commit or neither does.

The wallet debit is a compare-and-swap on the wallet ``version`` read earlier
in the same transaction. A concurrent writer (another purchase, a grant)
bumps the version, the swap matches no row and the attempt is aborted with
``TransactionFailedError`` instead of committing a balance computed from a
stale read. Nothing is retried here; resubmitting is the caller's decision.
Under contention on one wallet expect most concurrent attempts to fail with
``TransactionFailedError`` rather than ``InsufficientFundsError``; callers
resubmit them (with an idempotency key to make resubmission safe).
"""

from __future__ import annotations

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from decimal import Decimal
from typing import Optional

from sqlalchemy.exc import IntegrityError, OperationalError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm.exc import StaleDataError

from marketplace.core.config import Settings
from marketplace.infrastructure.database import Database
from marketplace.infrastructure.database.repositories.benefit_repository import SqlBenefitRepository
from marketplace.infrastructure.database.repositories.owned_benefit_repository import SqlOwnedBenefitRepository
from marketplace.infrastructure.database.repositories.wallet_repository import SqlWalletRepository
from marketplace.modules.common import (
    InsufficientFundsError,
    InternalStoreError,
    InvalidInputError,
    MarketplaceError,
    NotFoundError,
    TransactionFailedError,
    ensure_identity,
    utcnow,
)
from marketplace.modules.ownership import OwnedBenefit, OwnedBenefitInput

logger = logging.getLogger(__name__)

MAX_IDEMPOTENCY_KEY_LENGTH = 64


def token_price(price: Decimal) -> int:
    """Price of a benefit in whole tokens."""
    if price != price.to_integral_value():
        raise InvalidInputError(f"price {price} is not a whole number of tokens")
    return int(price)


def _clean_idempotency_key(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    if not value or len(value) > MAX_IDEMPOTENCY_KEY_LENGTH:
        raise InvalidInputError(
            f"idempotency_key must be 1-{MAX_IDEMPOTENCY_KEY_LENGTH} characters"
        )
    return value


@asynccontextmanager
async def translate_store_errors(action: str) -> AsyncIterator[None]:
    try:
        yield
    except MarketplaceError:
        raise
    except (OperationalError, StaleDataError) as exc:
        logger.warning("%s aborted by the store: %s", action, exc)
        raise TransactionFailedError(f"{action} was aborted by the store, please retry") from exc
    except SQLAlchemyError as exc:
        logger.exception("%s failed on a store error", action)
        raise InternalStoreError(f"{action} failed: unexpected store error") from exc


class PurchaseService:
    """Runs purchases as single units of work against the injected store."""

    def __init__(self, database: Database, *, content: str = "TODO") -> None:
        self._database = database
        self._content = content

    @classmethod
    def from_settings(cls, database: Database, settings: Settings) -> "PurchaseService":
        return cls(database, content=settings.marketplace.owned_benefit_content)

    async def purchase(
        self,
        buyer_id: str,
        benefit_id: str,
        idempotency_key: Optional[str] = None,
    ) -> OwnedBenefit:
        buyer_id = ensure_identity(buyer_id, "buyer_id")
        benefit_id = ensure_identity(benefit_id, "benefit_id")
        idempotency_key = _clean_idempotency_key(idempotency_key)

        try:
            return await self._run(buyer_id, benefit_id, idempotency_key)
        except TransactionFailedError:
            if idempotency_key is None:
                raise
            # the attempt that beat us may have committed this very purchase
            committed = await self._find_committed(buyer_id, benefit_id, idempotency_key)
            if committed is None:
                raise
            logger.info(
                "Purchase with key %s by user %s resolved to committed record %s",
                idempotency_key,
                buyer_id,
                committed.id,
            )
            return committed

    async def _run(self, buyer_id: str, benefit_id: str, idempotency_key: Optional[str]) -> OwnedBenefit:
        async with translate_store_errors("purchase"):
            try:
                async with self._database.session_factory() as session, session.begin():
                    return await self._purchase_in(session, buyer_id, benefit_id, idempotency_key)
            except IntegrityError as exc:
                if idempotency_key is None:
                    raise
                raise TransactionFailedError(
                    f"concurrent purchase with idempotency key {idempotency_key!r}"
                ) from exc

    async def _purchase_in(
        self,
        session: AsyncSession,
        buyer_id: str,
        benefit_id: str,
        idempotency_key: Optional[str],
    ) -> OwnedBenefit:
        benefits = SqlBenefitRepository(session)
        wallets = SqlWalletRepository(session)
        ledger = SqlOwnedBenefitRepository(session)

        if idempotency_key is not None:
            existing = await ledger.get_by_idempotency_key(buyer_id, idempotency_key)
            if existing is not None:
                return self._replay(existing, benefit_id)

        benefit = await benefits.get_by_id(benefit_id)
        if benefit is None:
            logger.info("Purchase rejected: benefit %s not found", benefit_id)
            raise NotFoundError("benefit", benefit_id)

        wallet = await wallets.get_by_user(buyer_id)
        if wallet is None:
            logger.info("Purchase rejected: no wallet for user %s", buyer_id)
            raise NotFoundError("wallet", buyer_id)

        price = token_price(benefit.price)
        if wallet.token_balance < price:
            logger.info(
                "Purchase rejected: user %s has %s tokens, benefit %s costs %s",
                buyer_id,
                wallet.token_balance,
                benefit_id,
                price,
            )
            raise InsufficientFundsError(wallet.token_balance, benefit.price)

        debited = await wallets.update_balance(
            buyer_id,
            wallet.token_balance - price,
            expected_version=wallet.version,
        )
        if debited is None:
            logger.warning("Wallet of user %s changed during purchase of %s", buyer_id, benefit_id)
            raise TransactionFailedError(f"wallet of user {buyer_id} was modified concurrently, please retry")

        owned = await ledger.add(
            OwnedBenefitInput(
                owner_id=buyer_id,
                benefit_id=benefit_id,
                purchased_at=utcnow(),
                content=self._content,
                expiration_date=benefit.expiration_date,
                price_paid=price,
                idempotency_key=idempotency_key,
            )
        )
        logger.info(
            "User %s bought benefit %s for %s tokens (balance %s -> %s)",
            buyer_id,
            benefit_id,
            price,
            wallet.token_balance,
            debited.token_balance,
        )
        return owned

    async def _find_committed(
        self,
        buyer_id: str,
        benefit_id: str,
        idempotency_key: str,
    ) -> OwnedBenefit | None:
        async with translate_store_errors("purchase lookup"):
            async with self._database.session_factory() as session:
                existing = await SqlOwnedBenefitRepository(session).get_by_idempotency_key(
                    buyer_id, idempotency_key
                )
        if existing is None:
            return None
        return self._replay(existing, benefit_id)

    @staticmethod
    def _replay(existing: OwnedBenefit, benefit_id: str) -> OwnedBenefit:
        if existing.benefit_id != benefit_id:
            raise InvalidInputError("idempotency key was already used for a different benefit")
        return existing
