"""Service dependency providers."""

from fastapi import Depends
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.container import ApplicationContainer
from marketplace.modules.benefits import BenefitService
from marketplace.modules.ownership import OwnershipService
from marketplace.modules.purchases import PurchaseService
from marketplace.modules.wallets import WalletService

from .database import get_container, get_db_session


def get_benefit_service(db: AsyncSession = Depends(get_db_session)) -> BenefitService:
    return BenefitService.with_session(db)


def get_wallet_service(db: AsyncSession = Depends(get_db_session)) -> WalletService:
    return WalletService.with_session(db)


def get_ownership_service(db: AsyncSession = Depends(get_db_session)) -> OwnershipService:
    return OwnershipService.with_session(db)


def get_purchase_service(container: ApplicationContainer = Depends(get_container)) -> PurchaseService:
    return PurchaseService.from_settings(container.database, container.settings)


__all__ = [
    "get_benefit_service",
    "get_wallet_service",
    "get_ownership_service",
    "get_purchase_service",
]
