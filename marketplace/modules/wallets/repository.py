"""Repository protocol for wallet operations."""

from __future__ import annotations

from typing import Protocol, Sequence

from .models import Wallet


class WalletRepository(Protocol):
    async def get_by_user(self, user_id: str) -> Wallet | None:
        ...

    async def list_all(self) -> Sequence[Wallet]:
        ...

    async def create(self, user_id: str, token_balance: int) -> Wallet:
        ...

    async def update_balance(self, user_id: str, token_balance: int, *, expected_version: int) -> Wallet | None:
        ...

    async def increment_balance(self, user_id: str, amount: int) -> Wallet | None:
        ...
