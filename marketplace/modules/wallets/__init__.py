"""Wallet domain exports"""

from .models import Wallet
from .service import WalletService

__all__ = [
    "Wallet",
    "WalletService",
]
