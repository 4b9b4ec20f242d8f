"""Identity parsing for ids supplied by callers."""

from __future__ import annotations

import uuid

from .exceptions import InvalidInputError


def ensure_identity(value: object, field: str = "id") -> str:
    """Return ``value`` as a canonical UUID string or raise ``InvalidInputError``."""
    if not isinstance(value, (str, uuid.UUID)):
        raise InvalidInputError(f"{field} must be a UUID string")
    try:
        return str(uuid.UUID(str(value)))
    except ValueError as exc:
        raise InvalidInputError(f"{field} is not a valid identifier: {value!r}") from exc


__all__ = ["ensure_identity"]
