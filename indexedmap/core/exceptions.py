"""Custom exceptions for the indexed map."""

from typing import Optional


class IndexedMapError(Exception):
    """Base exception for indexed map errors."""
    pass


class DuplicateIndexError(IndexedMapError, ValueError):
    """Raised when an index is registered under a name already in use."""

    def __init__(self, index_name: str):
        super().__init__(f"Index '{index_name}' already exists")
        self.index_name = index_name


class InvalidArgumentError(IndexedMapError, ValueError):
    """Raised when an index name, key factory or derived key is invalid."""
    pass


class IndexNotFoundError(IndexedMapError, KeyError):
    """Raised when a strict accessor names an index that is not registered."""

    def __init__(self, index_name: str):
        super().__init__(f"Index '{index_name}' not found")
        self.index_name = index_name

    def __str__(self) -> str:
        return self.args[0]


class KeyNotFoundError(IndexedMapError, KeyError):
    """Raised when a primary key or index key is absent."""

    def __init__(self, key, index_name: Optional[str] = None):
        super().__init__(key)
        self.key = key
        self.index_name = index_name

    def __str__(self) -> str:
        if self.index_name is not None:
            return f"Key {self.key!r} not found in index '{self.index_name}'"
        return f"Key {self.key!r} not found"
