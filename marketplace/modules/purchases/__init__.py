"""Purchase coordinator exports"""

from .service import PurchaseService, token_price

__all__ = ["PurchaseService", "token_price"]
