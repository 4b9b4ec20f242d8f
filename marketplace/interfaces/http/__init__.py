from fastapi import APIRouter

from marketplace.interfaces.http.routers import benefits, users, wallets


def create_api_router(prefix: str = "") -> APIRouter:
    router = APIRouter(prefix=prefix)
    router.include_router(benefits.router, prefix="/benefits", tags=["benefits"])
    router.include_router(wallets.router, prefix="/wallets", tags=["wallets"])
    router.include_router(users.router, prefix="/users", tags=["users"])
    return router


__all__ = [
    "create_api_router",
]
