"""pykeydb - Immutable keyed stores for entities fetched from a remote source."""

from importlib.metadata import PackageNotFoundError, version

try:
    __version__ = version("pykeydb")
except PackageNotFoundError:
    __version__ = "0+local"
from pykeydb import remote
from pykeydb.config import DbConfig
from pykeydb.db import Db, all_present, filter_missing
from pykeydb.exceptions import DbConfigError, IdDecodeError, KeyedDbError
from pykeydb.id import Id
from pykeydb.result import Err, Ok, Result

__all__ = [
    "__version__",
    "Db",
    "DbConfig",
    "DbConfigError",
    "Err",
    "Id",
    "IdDecodeError",
    "KeyedDbError",
    "Ok",
    "Result",
    "all_present",
    "filter_missing",
    "remote",
]
