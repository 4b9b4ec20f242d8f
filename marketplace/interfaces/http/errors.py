"""Rendering of domain and store errors as HTTP responses."""

from __future__ import annotations

import logging

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy.exc import OperationalError, SQLAlchemyError

from marketplace.modules.common import InternalStoreError, MarketplaceError, TransactionFailedError

logger = logging.getLogger(__name__)


def _error_response(status_code: int, code: str, detail) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": code, "detail": detail})


async def marketplace_error_handler(request: Request, exc: MarketplaceError) -> JSONResponse:
    if exc.status_code >= 500:
        logger.warning("%s %s failed: %s", request.method, request.url.path, exc.message)
    return _error_response(exc.status_code, exc.code, exc.message)


async def store_error_handler(request: Request, exc: SQLAlchemyError) -> JSONResponse:
    if isinstance(exc, OperationalError):
        logger.warning("%s %s aborted by the store: %s", request.method, request.url.path, exc)
        return _error_response(
            TransactionFailedError.status_code,
            TransactionFailedError.code,
            "the store aborted the operation, please retry",
        )
    logger.exception("%s %s failed on a store error", request.method, request.url.path, exc_info=exc)
    return _error_response(
        InternalStoreError.status_code,
        InternalStoreError.code,
        "unexpected store error",
    )


async def validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    return _error_response(status.HTTP_400_BAD_REQUEST, "invalid_input", jsonable_encoder(exc.errors()))


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(MarketplaceError, marketplace_error_handler)
    app.add_exception_handler(SQLAlchemyError, store_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)


__all__ = ["register_exception_handlers"]
