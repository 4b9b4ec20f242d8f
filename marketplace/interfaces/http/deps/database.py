"""Database dependency providers."""

from collections.abc import AsyncIterator

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from marketplace.core.container import ApplicationContainer
from marketplace.infrastructure.database import Database


def get_container(request: Request) -> ApplicationContainer:
    return request.app.state.container


def get_database(container: ApplicationContainer = Depends(get_container)) -> Database:
    return container.database


async def get_db_session(database: Database = Depends(get_database)) -> AsyncIterator[AsyncSession]:
    async with database.session() as session:
        yield session


__all__ = [
    "get_container",
    "get_database",
    "get_db_session",
]
