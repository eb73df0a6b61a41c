"""Identifiers for entities loaded into a :class:`pykeydb.remote.db.Db`."""

from __future__ import annotations

from typing import Generic, TypeVar

from pykeydb.id import Id as _BaseId

E = TypeVar("E")
T = TypeVar("T")


class Id(_BaseId[T], Generic[E, T]):
    """Identifier typed by both the load error ``E`` and the entity ``T``.

    Behaves exactly like :class:`pykeydb.id.Id` at runtime and compares
    equal to any identifier holding the same string.
    """

    __slots__ = ()
