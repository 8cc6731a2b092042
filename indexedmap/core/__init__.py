from .exceptions import (
    IndexedMapError,
    DuplicateIndexError,
    InvalidArgumentError,
    IndexNotFoundError,
    KeyNotFoundError,
)
from .results import LookupResult, NOT_FOUND

__all__ = [
    "IndexedMapError",
    "DuplicateIndexError",
    "InvalidArgumentError",
    "IndexNotFoundError",
    "KeyNotFoundError",
    "LookupResult",
    "NOT_FOUND",
]
