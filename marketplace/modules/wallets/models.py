"""Domain models for wallet operations."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from typing import Optional


@dataclass(slots=True)
class Wallet:
    id: str
    user_id: str
    token_balance: int
    money_balance: Decimal
    version: int
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
