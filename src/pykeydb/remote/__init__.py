"""Remote-state store.

Tracks entities that are fetched from elsewhere: each identifier is
either not yet requested, loading, loaded, or failed.
"""

from pykeydb.remote.data import LOADING, NOT_ASKED, Failure, Loading, NotAsked, RemoteData, Success
from pykeydb.remote.db import Db
from pykeydb.remote.id import Id

__all__ = [
    "LOADING",
    "NOT_ASKED",
    "Db",
    "Failure",
    "Id",
    "Loading",
    "NotAsked",
    "RemoteData",
    "Success",
]
