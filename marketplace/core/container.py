"""Simple dependency container for wiring core services."""

from __future__ import annotations

from dataclasses import dataclass

from marketplace.core.config import Settings
from marketplace.infrastructure.database import Database


@dataclass(slots=True)
class ApplicationContainer:
    settings: Settings
    database: Database

    @classmethod
    def build(cls, settings: Settings) -> "ApplicationContainer":
        return cls(settings=settings, database=Database.from_settings(settings))

    async def init_infrastructure(self) -> None:
        """Ensure the schema exists before the first request."""
        await self.database.create_all()

    async def shutdown(self) -> None:
        await self.database.dispose()


__all__ = ["ApplicationContainer"]
