"""Reusable FastAPI dependencies."""

from .database import get_container, get_database, get_db_session
from .services import (
    get_benefit_service,
    get_ownership_service,
    get_purchase_service,
    get_wallet_service,
)

__all__ = [
    "get_container",
    "get_database",
    "get_db_session",
    "get_benefit_service",
    "get_ownership_service",
    "get_purchase_service",
    "get_wallet_service",
]
