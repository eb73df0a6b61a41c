"""Immutable keyed store of remote loading states.

Each key holds :class:`Loading`, :class:`Success` or :class:`Failure`.
:class:`NotAsked` is never stored: it is what :meth:`Db.get` reports for
an absent key, and writing it removes the key.
"""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Generic, TypeVar

from pykeydb.remote.data import LOADING, NOT_ASKED, Failure, Loading, NotAsked, RemoteData, Success
from pykeydb.remote.id import Id

E = TypeVar("E")
T = TypeVar("T")
F = TypeVar("F")
B = TypeVar("B")

Stored = Loading | Success[T] | Failure[E]


def _put(rows: dict[Id[E, T], Stored[T, E]], id_: Id[E, T], state: RemoteData[E, T]) -> None:
    if isinstance(state, NotAsked):
        rows.pop(id_, None)
    elif isinstance(state, (Loading, Success, Failure)):
        rows[id_] = state
    else:
        raise TypeError(f"expected a remote state for {id_!r}, got {type(state).__name__}")


class Db(Generic[E, T]):
    """Mapping from ``Id`` to the loading state of a ``T``."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Mapping[Id[E, T], Stored[T, E]] | None = None) -> None:
        self._rows: dict[Id[E, T], Stored[T, E]] = {}
        for id_, state in (rows or {}).items():
            _put(self._rows, id_, state)

    @classmethod
    def empty(cls) -> Db[E, T]:
        return cls()

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert(self, id_: Id[E, T], state: RemoteData[E, T]) -> Db[E, T]:
        """Set the state of *id_*.  Inserting :class:`NotAsked` removes it."""
        rows = dict(self._rows)
        _put(rows, id_, state)
        return Db(rows)

    def succeed(self, id_: Id[E, T], item: T) -> Db[E, T]:
        return self.insert(id_, Success(item))

    def loading(self, id_: Id[E, T]) -> Db[E, T]:
        return self.insert(id_, LOADING)

    def fail(self, id_: Id[E, T], error: E) -> Db[E, T]:
        return self.insert(id_, Failure(error))

    def _insert_many(self, states: Iterable[tuple[Id[E, T], RemoteData[E, T]]]) -> Db[E, T]:
        rows = dict(self._rows)
        for id_, state in states:
            _put(rows, id_, state)
        return Db(rows)

    def succeed_many(self, rows: Iterable[tuple[Id[E, T], T]]) -> Db[E, T]:
        return self._insert_many((id_, Success(item)) for id_, item in rows)

    def loading_many(self, ids: Iterable[Id[E, T]]) -> Db[E, T]:
        return self._insert_many((id_, LOADING) for id_ in ids)

    def fail_many(self, rows: Iterable[tuple[Id[E, T], E]]) -> Db[E, T]:
        return self._insert_many((id_, Failure(error)) for id_, error in rows)

    def remove(self, id_: Id[E, T]) -> Db[E, T]:
        return self.insert(id_, NOT_ASKED)

    def update(self, id_: Id[E, T], fn: Callable[[RemoteData[E, T]], RemoteData[E, T]]) -> Db[E, T]:
        """Replace the state of *id_* with ``fn(current)``.

        ``current`` is :class:`NotAsked` when *id_* is absent; returning
        :class:`NotAsked` removes the key.
        """
        return self.insert(id_, fn(self.get(id_)))

    def map(self, fn: Callable[[T], B]) -> Db[E, B]:
        """Transform every :class:`Success` payload; other states are kept."""
        return Db({id_: state.map(fn) for id_, state in self._rows.items()})  # type: ignore[misc]

    def map_error(self, fn: Callable[[E], F]) -> Db[F, T]:
        """Transform every :class:`Failure` payload; other states are kept."""
        return Db({id_: state.map_error(fn) for id_, state in self._rows.items()})  # type: ignore[misc]

    def map_item(self, id_: Id[E, T], fn: Callable[[T], T]) -> Db[E, T]:
        """Transform the payload at *id_* only if it is a :class:`Success`."""
        state = self._rows.get(id_)
        if not isinstance(state, Success):
            return self
        return self.insert(id_, Success(fn(state.value)))

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, id_: Id[E, T]) -> RemoteData[E, T]:
        state = self._rows.get(id_)
        if state is None:
            return NOT_ASKED
        return state

    def get_with_id(self, id_: Id[E, T]) -> tuple[Id[E, T], RemoteData[E, T]]:
        return (id_, self.get(id_))

    def get_many(self, ids: Iterable[Id[E, T]]) -> list[tuple[Id[E, T], RemoteData[E, T]]]:
        return [self.get_with_id(id_) for id_ in ids]

    def ids(self) -> list[Id[E, T]]:
        return list(self._rows)

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, id_: object) -> bool:
        return id_ in self._rows

    def __iter__(self) -> Iterator[Id[E, T]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Db):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"remote.Db({self._rows!r})"
