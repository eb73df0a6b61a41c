"""Success/failure values used by :func:`pykeydb.db.all_present`."""

from __future__ import annotations

import dataclasses
from typing import Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


@dataclasses.dataclass(frozen=True, slots=True)
class Ok(Generic[T]):
    value: T

    @property
    def is_ok(self) -> bool:
        return True

    @property
    def is_err(self) -> bool:
        return False


@dataclasses.dataclass(frozen=True, slots=True)
class Err(Generic[E]):
    error: E

    @property
    def is_ok(self) -> bool:
        return False

    @property
    def is_err(self) -> bool:
        return True


Result = Ok[T] | Err[E]
