"""Loading status of a remotely fetched value.

A value is in exactly one of four states: :class:`NotAsked`,
:class:`Loading`, :class:`Success` or :class:`Failure`.
"""

from __future__ import annotations

import dataclasses
from collections.abc import Callable
from typing import Any, Generic, TypeVar

T = TypeVar("T")
E = TypeVar("E")


class _State:
    __slots__ = ()

    @property
    def is_not_asked(self) -> bool:
        return isinstance(self, NotAsked)

    @property
    def is_loading(self) -> bool:
        return isinstance(self, Loading)

    @property
    def is_success(self) -> bool:
        return isinstance(self, Success)

    @property
    def is_failure(self) -> bool:
        return isinstance(self, Failure)

    def map(self, fn: Callable[[Any], Any]) -> RemoteData[Any, Any]:
        """Transform a :class:`Success` payload; other states are returned as-is."""
        if isinstance(self, Success):
            return Success(fn(self.value))
        return self  # type: ignore[return-value]

    def map_error(self, fn: Callable[[Any], Any]) -> RemoteData[Any, Any]:
        """Transform a :class:`Failure` payload; other states are returned as-is."""
        if isinstance(self, Failure):
            return Failure(fn(self.error))
        return self  # type: ignore[return-value]

    def with_default(self, default: Any) -> Any:
        if isinstance(self, Success):
            return self.value
        return default


@dataclasses.dataclass(frozen=True, slots=True)
class NotAsked(_State):
    """Nothing has been requested yet."""


@dataclasses.dataclass(frozen=True, slots=True)
class Loading(_State):
    """A request is in flight."""


@dataclasses.dataclass(frozen=True, slots=True)
class Success(_State, Generic[T]):
    value: T


@dataclasses.dataclass(frozen=True, slots=True)
class Failure(_State, Generic[E]):
    error: E


RemoteData = NotAsked | Loading | Failure[E] | Success[T]
"""Any of the four states, parameterised by error ``E`` and value ``T``."""

NOT_ASKED = NotAsked()
LOADING = Loading()
