from __future__ import annotations
from typing import Any, Optional

from pydantic import ValidationError


__all__ = [
    "FlotError",
    "InvalidArgument",
    "CoercionError",
    "WriteError",
    "invalid_from_validation",
]


class FlotError(Exception): ...
class InvalidArgument(FlotError, ValueError): ...
class CoercionError(FlotError, TypeError): ...


class WriteError(FlotError, OSError):
    """Raised when a rendered page cannot be written to its destination."""

    def __init__(self, message: str, destination: Optional[Any] = None):
        super().__init__(message)
        self.destination = destination


def invalid_from_validation(ve: ValidationError) -> InvalidArgument:
    """Flatten a pydantic ValidationError into a single-line InvalidArgument."""
    parts = []
    for err in ve.errors():
        loc = ".".join(str(p) for p in err.get("loc", ())) or ve.title
        parts.append(f"{loc}: {err.get('msg')}")
    return InvalidArgument("; ".join(parts))
