"""Shared abstractions used across marketplace modules."""

from .datetimes import as_utc, utcnow
from .exceptions import (
    InsufficientFundsError,
    InternalStoreError,
    InvalidInputError,
    MarketplaceError,
    NotFoundError,
    TransactionFailedError,
)
from .identity import ensure_identity

__all__ = [
    "as_utc",
    "utcnow",
    "ensure_identity",
    "MarketplaceError",
    "NotFoundError",
    "InsufficientFundsError",
    "InvalidInputError",
    "TransactionFailedError",
    "InternalStoreError",
]
