"""Phantom-typed identifiers.

An :class:`Id` wraps a string and is parameterised by the entity type it
names, so ``Id[User]`` and ``Id[Team]`` are distinct to a type checker.
The parameter has no runtime representation: two identifiers are equal
whenever their strings are equal.  The guarantee is therefore static
only; nothing stops a caller from building an ``Id[Team]`` out of a
user's string at runtime.
"""

from __future__ import annotations

import json
import logging
import random
import secrets
from typing import Any, Generic, Self, TypeVar

from pydantic import GetCoreSchemaHandler, TypeAdapter, ValidationError
from pydantic_core import core_schema

from pykeydb._constants import ID_ALPHABET, ID_LENGTH
from pykeydb.config import DbConfig
from pykeydb.exceptions import IdDecodeError

_logger = logging.getLogger(__name__)

T = TypeVar("T")

_STRICT_STR: TypeAdapter[str] = TypeAdapter(str)


class Id(Generic[T]):
    """Opaque identifier for an entity of type ``T``."""

    __slots__ = ("_value",)

    def __init__(self, value: str) -> None:
        object.__setattr__(self, "_value", value)

    def __setattr__(self, name: str, value: Any) -> None:
        raise AttributeError(f"{type(self).__name__} is immutable")

    def __reduce__(self) -> tuple[type[Self], tuple[str]]:
        return (type(self), (self._value,))

    def __copy__(self) -> Self:
        return self

    def __deepcopy__(self, memo: dict[int, Any]) -> Self:
        return self

    @property
    def value(self) -> str:
        return self._value

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Wrap *value* verbatim.  Any string, including ``""``, is accepted."""
        return cls(value)

    def __str__(self) -> str:
        return self.value

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.value!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Id):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash(self.value)

    # ------------------------------------------------------------------
    # JSON
    # ------------------------------------------------------------------

    def encode(self) -> str:
        """Return the JSON value for this identifier (the raw string)."""
        return self.value

    def to_json(self) -> str:
        """Return the serialized JSON text, e.g. ``'"abc"'``."""
        return json.dumps(self.value)

    @classmethod
    def decode(cls, value: Any) -> Self:
        """Wrap an already-parsed JSON value.

        Raises :class:`~pykeydb.exceptions.IdDecodeError` if *value* is
        not a string.
        """
        if not isinstance(value, str):
            _logger.debug("Rejecting non-string identifier value of type %s", type(value).__name__)
            raise IdDecodeError(f"expected a string identifier, got {type(value).__name__}", value=value)
        return cls(value)

    @classmethod
    def from_json(cls, text: str | bytes) -> Self:
        """Parse JSON text holding a single string value."""
        try:
            value = _STRICT_STR.validate_json(text, strict=True)
        except ValidationError as exc:
            _logger.debug("Identifier JSON failed validation: %s", exc.errors(include_url=False))
            raise IdDecodeError("expected a JSON string identifier", value=text) from exc
        return cls(value)

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------

    @classmethod
    def generate(
        cls,
        rng: random.Random | None = None,
        *,
        length: int | None = None,
        config: DbConfig | None = None,
    ) -> Self:
        """Generate a random base-62 identifier.

        Draws *length* independent integers in ``[0, 61]`` from *rng* and
        maps ``0-9`` to digits, ``10-35`` to ``A-Z`` and ``36-61`` to
        ``a-z``.  The same seeded ``random.Random`` always yields the same
        identifier.

        Without *rng* the source comes from *config* (``config.rng()``),
        and failing that from the operating system.  *length* defaults to
        ``config.id_length`` or 64.  A seeded *config* builds a fresh
        source on every call, so pass ``rng=config.rng()`` to draw a
        sequence of distinct ids.
        """
        if rng is not None:
            source = rng
        elif config is not None:
            source = config.rng()
        else:
            source = secrets.SystemRandom()
        if length is None:
            length = config.id_length if config is not None else ID_LENGTH
        last = len(ID_ALPHABET) - 1
        return cls("".join(ID_ALPHABET[source.randint(0, last)] for _ in range(length)))

    # ------------------------------------------------------------------
    # pydantic integration
    # ------------------------------------------------------------------

    @classmethod
    def __get_pydantic_core_schema__(cls, source_type: Any, handler: GetCoreSchemaHandler) -> core_schema.CoreSchema:
        from_str = core_schema.no_info_after_validator_function(cls, core_schema.str_schema(strict=True))
        return core_schema.json_or_python_schema(
            json_schema=from_str,
            python_schema=core_schema.union_schema([core_schema.is_instance_schema(cls), from_str]),
            serialization=core_schema.plain_serializer_function_ser_schema(lambda ident: ident.value),
        )
