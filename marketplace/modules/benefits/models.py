"""Domain models for the benefit catalog."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from decimal import Decimal
from enum import Enum
from typing import Optional

from marketplace.modules.common import InvalidInputError


class BenefitCategory(str, Enum):
    TRANSPORT = "Transport"
    HEALTH = "Health"
    ENTERTAINMENT = "Entertainment"
    CULTURE = "Culture"


@dataclass(slots=True)
class Benefit:
    id: str
    name: str
    category: BenefitCategory
    description: str
    image_url: str
    price: Decimal
    in_stock: int
    expiration_date: datetime
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


@dataclass(slots=True)
class BenefitInput:
    name: str
    category: BenefitCategory
    price: Decimal
    expiration_date: datetime
    description: str = ""
    image_url: str = ""
    in_stock: int = 0

    def validate(self) -> None:
        if not self.name or not self.name.strip():
            raise InvalidInputError("name must not be empty")
        if not isinstance(self.category, BenefitCategory):
            raise InvalidInputError(f"unknown category: {self.category!r}")
        if not self.price.is_finite() or self.price < 0:
            raise InvalidInputError("price must be a non-negative number")
        if self.in_stock < 0:
            raise InvalidInputError("in_stock must not be negative")
