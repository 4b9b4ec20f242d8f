"""Translation of catalog listing criteria into store predicates.

Criteria arrive as optional text (straight from a query string). Parsing
happens up front so a malformed bound is rejected before the store is
touched; absent criteria impose no constraint and present ones are ANDed.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Optional

from sqlalchemy import ColumnElement

from marketplace.infrastructure.database.models import Benefit as BenefitModel
from marketplace.modules.common import InvalidInputError


def _clean(value: Optional[str]) -> Optional[str]:
    if value is None:
        return None
    value = value.strip()
    return value or None


def parse_price_bound(value: Optional[str], field: str) -> Optional[Decimal]:
    text = _clean(value)
    if text is None:
        return None
    try:
        bound = Decimal(text)
    except InvalidOperation as exc:
        raise InvalidInputError(f"Invalid {field}: {value!r}") from exc
    if not bound.is_finite() or bound < 0:
        raise InvalidInputError(f"Invalid {field}: {value!r}")
    return bound


@dataclass(frozen=True, slots=True)
class BenefitFilter:
    category: Optional[str] = None
    min_price: Optional[Decimal] = None
    max_price: Optional[Decimal] = None
    search: Optional[str] = None

    @classmethod
    def parse(
        cls,
        *,
        category: Optional[str] = None,
        min_price: Optional[str] = None,
        max_price: Optional[str] = None,
        search: Optional[str] = None,
    ) -> "BenefitFilter":
        lower = parse_price_bound(min_price, "min_price")
        upper = parse_price_bound(max_price, "max_price")
        if lower is not None and upper is not None and lower > upper:
            raise InvalidInputError("min_price must not exceed max_price")
        return cls(
            category=_clean(category),
            min_price=lower,
            max_price=upper,
            search=_clean(search),
        )

    @property
    def is_empty(self) -> bool:
        return (
            self.category is None
            and self.min_price is None
            and self.max_price is None
            and self.search is None
        )

    def clauses(self) -> list[ColumnElement[bool]]:
        clauses: list[ColumnElement[bool]] = []
        if self.category is not None:
            clauses.append(BenefitModel.category.icontains(self.category, autoescape=True))
        if self.min_price is not None:
            clauses.append(BenefitModel.price >= self.min_price)
        if self.max_price is not None:
            clauses.append(BenefitModel.price <= self.max_price)
        if self.search is not None:
            clauses.append(BenefitModel.name.icontains(self.search, autoescape=True))
        return clauses


__all__ = ["BenefitFilter", "parse_price_bound"]
