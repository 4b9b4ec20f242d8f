"""Error taxonomy shared by every marketplace module.

Each error carries a stable machine ``code`` and the HTTP status the boundary
layer renders it with. Client-caused errors map to 4xx, store-caused errors
to 5xx.
"""

from __future__ import annotations

from decimal import Decimal


class MarketplaceError(Exception):
    """Base class for marketplace domain errors."""

    code = "marketplace_error"
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class NotFoundError(MarketplaceError):
    """Raised when a benefit or wallet does not exist."""

    code = "not_found"
    status_code = 404

    def __init__(self, entity: str, identity: str) -> None:
        super().__init__(f"{entity} not found: {identity}")
        self.entity = entity
        self.identity = identity


class InsufficientFundsError(MarketplaceError):
    """Raised when a wallet cannot cover a benefit's price."""

    code = "insufficient_funds"
    status_code = 409

    def __init__(self, balance: int, price: Decimal | int) -> None:
        super().__init__(f"insufficient funds: balance {balance} is below price {price}")
        self.balance = balance
        self.price = price


class InvalidInputError(MarketplaceError, ValueError):
    """Raised for malformed identities, filters or request bodies."""

    code = "invalid_input"
    status_code = 400


class TransactionFailedError(MarketplaceError):
    """Raised when the store aborts a unit of work (conflict, lock timeout, connectivity)."""

    code = "transaction_failed"
    status_code = 503


class InternalStoreError(MarketplaceError):
    """Raised for unexpected store failures."""

    code = "internal_store_error"
    status_code = 500


__all__ = [
    "MarketplaceError",
    "NotFoundError",
    "InsufficientFundsError",
    "InvalidInputError",
    "TransactionFailedError",
    "InternalStoreError",
]
