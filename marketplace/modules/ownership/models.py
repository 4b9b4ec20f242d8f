"""Domain models for the ownership ledger."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(slots=True)
class OwnedBenefit:
    id: str
    owner_id: str
    benefit_id: str
    purchased_at: datetime
    content: str
    expiration_date: datetime
    price_paid: int
    idempotency_key: Optional[str] = None


@dataclass(slots=True)
class OwnedBenefitInput:
    owner_id: str
    benefit_id: str
    purchased_at: datetime
    content: str
    expiration_date: datetime
    price_paid: int
    idempotency_key: Optional[str] = None
