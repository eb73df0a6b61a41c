"""Immutable keyed store of items.

A :class:`Db` maps :class:`~pykeydb.id.Id` values to items.  It is a
value: every "mutating" method returns a new ``Db`` and leaves the
receiver untouched, so a store held in application state can be
replaced wholesale after each transition.

``None`` is the absence marker throughout (:meth:`Db.get`,
:meth:`Db.update`, :func:`filter_missing`, :func:`all_present`), so
``None`` itself cannot be stored as an item.  Every write except
:meth:`Db.update` raises :class:`TypeError` when handed ``None``.
"""

from __future__ import annotations

import logging
from collections.abc import Callable, Iterable, Iterator, Mapping
from typing import Generic, TypeVar

from pykeydb.id import Id
from pykeydb.result import Err, Ok

_logger = logging.getLogger(__name__)

T = TypeVar("T")
B = TypeVar("B")

Row = tuple[Id[T], T]
MaybeRow = tuple[Id[T], T | None]


class Db(Generic[T]):
    """Mapping from ``Id[T]`` to ``T`` with copy-on-write updates."""

    __slots__ = ("_rows",)

    def __init__(self, rows: Mapping[Id[T], T] | None = None) -> None:
        self._rows: dict[Id[T], T] = dict(rows) if rows else {}
        for id_, item in self._rows.items():
            if item is None:
                raise TypeError(f"cannot store None for {id_!r}: None marks an absent item")

    @classmethod
    def empty(cls) -> Db[T]:
        return cls()

    @classmethod
    def from_list(cls, rows: Iterable[Row[T]]) -> Db[T]:
        """Build a store; later rows win over earlier rows with the same id."""
        data: dict[Id[T], T] = {}
        count = 0
        for id_, item in rows:
            data[id_] = item
            count += 1
        if count != len(data):
            _logger.debug("Collapsed %d duplicate ids while building store", count - len(data))
        return cls(data)

    def to_list(self) -> list[Row[T]]:
        """Return every row in the store's iteration order."""
        return list(self._rows.items())

    items = to_list

    def ids(self) -> list[Id[T]]:
        return list(self._rows)

    # ------------------------------------------------------------------
    # Writes
    # ------------------------------------------------------------------

    def insert(self, id_: Id[T], item: T) -> Db[T]:
        rows = dict(self._rows)
        rows[id_] = item
        return Db(rows)

    def insert_many(self, rows: Iterable[Row[T]]) -> Db[T]:
        data = dict(self._rows)
        for id_, item in rows:
            data[id_] = item
        return Db(data)

    def update(self, id_: Id[T], fn: Callable[[T | None], T | None]) -> Db[T]:
        """Replace the item at *id_* with ``fn(current)``.

        ``current`` is ``None`` when *id_* is absent.  If *fn* returns
        ``None`` the id is removed.
        """
        result = fn(self._rows.get(id_))
        rows = dict(self._rows)
        if result is None:
            rows.pop(id_, None)
        else:
            rows[id_] = result
        return Db(rows)

    def remove(self, id_: Id[T]) -> Db[T]:
        if id_ not in self._rows:
            return self
        rows = dict(self._rows)
        del rows[id_]
        return Db(rows)

    def map_item(self, id_: Id[T], fn: Callable[[T], T]) -> Db[T]:
        """Apply *fn* to the item at *id_*; no-op when *id_* is absent."""
        if id_ not in self._rows:
            return self
        rows = dict(self._rows)
        rows[id_] = fn(rows[id_])
        return Db(rows)

    def map(self, fn: Callable[[T], B]) -> Db[B]:
        return Db({id_: fn(item) for id_, item in self._rows.items()})  # type: ignore[misc]

    def filter(self, predicate: Callable[[Id[T], T], bool]) -> Db[T]:
        return Db({id_: item for id_, item in self._rows.items() if predicate(id_, item)})

    # ------------------------------------------------------------------
    # Reads
    # ------------------------------------------------------------------

    def get(self, id_: Id[T]) -> T | None:
        return self._rows.get(id_)

    def get_with_id(self, id_: Id[T]) -> MaybeRow[T]:
        return (id_, self._rows.get(id_))

    def get_many(self, ids: Iterable[Id[T]]) -> list[MaybeRow[T]]:
        """Look up every id, preserving input order and duplicates."""
        return [self.get_with_id(id_) for id_ in ids]

    def __len__(self) -> int:
        return len(self._rows)

    def __contains__(self, id_: object) -> bool:
        return id_ in self._rows

    def __iter__(self) -> Iterator[Id[T]]:
        return iter(self._rows)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Db):
            return NotImplemented
        return self._rows == other._rows

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Db({self._rows!r})"


def filter_missing(rows: Iterable[MaybeRow[T]]) -> list[Row[T]]:
    """Drop rows whose item is ``None``, keeping order."""
    return [(id_, item) for id_, item in rows if item is not None]


def all_present(rows: Iterable[MaybeRow[T]]) -> Ok[list[Row[T]]] | Err[list[Id[T]]]:
    """Unwrap every row, or report every id whose item is missing.

    The whole input is scanned; missing ids are returned in input order.
    """
    found: list[Row[T]] = []
    missing: list[Id[T]] = []
    for id_, item in rows:
        if item is None:
            missing.append(id_)
        else:
            found.append((id_, item))
    if missing:
        _logger.debug("%d of %d ids missing", len(missing), len(missing) + len(found))
        return Err(missing)
    return Ok(found)
