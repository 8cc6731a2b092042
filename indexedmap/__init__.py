"""
indexedmap: a dictionary with named secondary indexes.
"""

from .indexed_map import IndexedMap
from .core.exceptions import (
    IndexedMapError,
    DuplicateIndexError,
    InvalidArgumentError,
    IndexNotFoundError,
    KeyNotFoundError,
)
from .core.results import LookupResult
from .catalog.index_info import IndexInfo

__all__ = [
    "IndexedMap",
    "IndexedMapError",
    "DuplicateIndexError",
    "InvalidArgumentError",
    "IndexNotFoundError",
    "KeyNotFoundError",
    "LookupResult",
    "IndexInfo",
]
