"""Library configuration for pykeydb."""

from __future__ import annotations

import dataclasses
import os
import random
import secrets
from typing import Any

from pykeydb._constants import ENV_ID_LENGTH, ENV_SEED, ID_LENGTH
from pykeydb.exceptions import DbConfigError


def _env_int(name: str, value: str) -> int:
    try:
        return int(value.strip())
    except ValueError as exc:
        raise DbConfigError(f"{name} must be an integer, got {value!r}") from exc


@dataclasses.dataclass(frozen=True)
class DbConfig:
    """Identifier generation settings.

    Pass an instance to :meth:`pykeydb.id.Id.generate` as ``config=``.

    Parameters
    ----------
    id_length : int
        Number of base-62 characters in generated identifiers.
        Defaults to 64.
    seed : int or None
        Seed for a deterministic random source.  When ``None`` the
        operating system's random source is used.
    """

    id_length: int = ID_LENGTH
    seed: int | None = None

    def __post_init__(self) -> None:
        if self.id_length <= 0:
            raise DbConfigError(f"id_length must be positive, got {self.id_length}")

    def rng(self) -> random.Random:
        """Return a random source for :meth:`pykeydb.id.Id.generate`."""
        if self.seed is None:
            return secrets.SystemRandom()
        return random.Random(self.seed)

    @classmethod
    def from_env(cls, **overrides: Any) -> DbConfig:
        """Create configuration from environment variables.

        Reads ``PYKEYDB_ID_LENGTH`` and ``PYKEYDB_SEED``.  Explicit
        keyword arguments override environment values.
        """
        env = os.environ
        config_kwargs: dict[str, Any] = {}

        length_env = env.get(ENV_ID_LENGTH)
        if length_env is not None and "id_length" not in overrides:
            config_kwargs["id_length"] = _env_int(ENV_ID_LENGTH, length_env)

        seed_env = env.get(ENV_SEED)
        if seed_env is not None and seed_env.strip() and "seed" not in overrides:
            config_kwargs["seed"] = _env_int(ENV_SEED, seed_env)

        config_kwargs.update(overrides)

        return cls(**config_kwargs)
