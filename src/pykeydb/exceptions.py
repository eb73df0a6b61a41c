"""Custom exception hierarchy for pykeydb."""

from __future__ import annotations

from typing import Any


class KeyedDbError(Exception):
    """Base exception for all pykeydb errors."""


class DbConfigError(KeyedDbError):
    """Invalid or missing configuration."""


class IdDecodeError(KeyedDbError, ValueError):
    """Identifier decoding failed.

    Raised when the serialized value is not a JSON string.  Lookups of
    missing identifiers never raise; they return ``None`` instead.
    """

    def __init__(self, message: str, *, value: Any = None) -> None:
        self.value = value
        super().__init__(message)
