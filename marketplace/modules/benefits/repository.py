"""Repository protocol for the benefit catalog."""

from __future__ import annotations

from typing import Protocol, Sequence

from .filters import BenefitFilter
from .models import Benefit, BenefitInput


class BenefitRepository(Protocol):
    async def get_by_id(self, benefit_id: str) -> Benefit | None:
        ...

    async def list_all(self) -> Sequence[Benefit]:
        ...

    async def list_filtered(self, criteria: BenefitFilter) -> Sequence[Benefit]:
        ...

    async def create(self, payload: BenefitInput) -> Benefit:
        ...

    async def replace(self, benefit_id: str, payload: BenefitInput) -> Benefit | None:
        ...

    async def delete(self, benefit_id: str) -> bool:
        ...
