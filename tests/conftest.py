"""Shared fixtures: a throwaway SQLite store per test and small factories."""

from __future__ import annotations

import uuid
from datetime import datetime, timezone
from decimal import Decimal

import pytest
import pytest_asyncio

from marketplace.core.config import DatabaseSettings, Settings
from marketplace.infrastructure.database import Database
from marketplace.modules.benefits import BenefitCategory, BenefitInput, BenefitService
from marketplace.modules.ownership import OwnershipService
from marketplace.modules.purchases import PurchaseService
from marketplace.modules.wallets import WalletService

EXPIRES = datetime(2030, 1, 1, tzinfo=timezone.utc)


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        environment="test",
        database=DatabaseSettings(url=f"sqlite+aiosqlite:///{tmp_path / 'marketplace.db'}"),
    )


@pytest_asyncio.fixture
async def database(settings):
    db = Database.from_settings(settings)
    await db.create_all()
    yield db
    await db.dispose()


@pytest.fixture
def purchase_service(database) -> PurchaseService:
    return PurchaseService(database)


@pytest.fixture
def make_benefit(database):
    async def _make(
        *,
        name: str = "Monthly metro pass",
        category: BenefitCategory = BenefitCategory.TRANSPORT,
        price: str = "60",
        in_stock: int = 10,
        expiration_date: datetime = EXPIRES,
    ):
        async with database.session() as db:
            return await BenefitService.with_session(db).add_benefit(
                BenefitInput(
                    name=name,
                    category=category,
                    price=Decimal(price),
                    expiration_date=expiration_date,
                    in_stock=in_stock,
                )
            )

    return _make


@pytest.fixture
def make_wallet(database):
    async def _make(tokens: int = 100, user_id: str | None = None):
        async with database.session() as db:
            return await WalletService.with_session(db).open_wallet(user_id or str(uuid.uuid4()), tokens)

    return _make


@pytest.fixture
def read_wallet(database):
    async def _read(user_id: str):
        async with database.session() as db:
            return await WalletService.with_session(db).get_wallet(user_id)

    return _read


@pytest.fixture
def read_owned(database):
    async def _read(user_id: str):
        async with database.session() as db:
            return list(await OwnershipService.with_session(db).list_owned_benefits(user_id))

    return _read

