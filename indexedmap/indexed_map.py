from __future__ import annotations

import logging
from collections.abc import MutableMapping
from typing import Generic, Hashable, Iterable, Iterator, Mapping, Optional, TypeVar, Union

from .catalog.index_info import IndexInfo
from .core.exceptions import KeyNotFoundError
from .core.results import LookupResult, NOT_FOUND
from .storage.index import IndexManager, KeyFactory

logger = logging.getLogger(__name__)

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")


class IndexedMap(MutableMapping, Generic[K, V]):
    """
    A dictionary with any number of named secondary indexes.

    The map has two parts:

    1. **Primary store**: a plain dict from primary key to value, the
       single source of truth.
    2. **Index manager**: named indexes, each partitioning the entries into
       buckets keyed by a string derived from the value.

    Every mutation of the primary store is mirrored into every index, and
    registering an index backfills it from the entries already present::

        products = IndexedMap()
        products["a"] = {"cat": "X"}
        products.add_index("by_cat", lambda v: v["cat"])
        products.lookup("by_cat", "X")   # {"a": {"cat": "X"}}

    Values are shared by reference between the primary store and the
    buckets. Treat them as immutable once stored: mutating a value in place
    does not move it between buckets. Re-insert it under the same key
    instead.

    Not thread-safe. Concurrent callers must guard the whole map with one
    exclusive lock; even reads touch bucket bookkeeping.
    """

    def __init__(self, data: Union[Mapping[K, V], Iterable, None] = None, *,
                 prune_empty_buckets: bool = True):
        """
        Create an indexed map.

        Args:
            data: Optional mapping or iterable of (key, value) pairs to start with
            prune_empty_buckets: Drop a bucket once its last entry leaves.
                When False, emptied buckets linger (and keep showing up in
                get_index_keys) until the map is cleared or the index dropped.
        """
        self._data: dict[K, V] = {}
        self._indexes = IndexManager(prune_empty_buckets=prune_empty_buckets)

        if data is not None:
            self.update(data)

    @property
    def prune_empty_buckets(self) -> bool:
        return self._indexes.prune_empty_buckets

    # =================== PRIMARY STORE ===================

    def set(self, key: K, value: V) -> None:
        """
        Insert or overwrite an entry and re-file it in every index.

        Derived keys are computed before anything changes, so a key factory
        that raises leaves both the primary store and the indexes untouched.
        """
        derived_keys = self._indexes.derive_keys(value)
        self._data[key] = value
        self._indexes.update_indexes_on_set(key, value, derived_keys)

    def remove(self, key: K) -> bool:
        """
        Remove an entry from the primary store and every index.

        Returns:
            True if the key was present
        """
        if key not in self._data:
            return False

        del self._data[key]
        self._indexes.update_indexes_on_delete(key)
        return True

    def clear(self) -> None:
        """Remove every entry and empty every index. Indexes stay registered."""
        self._data.clear()
        self._indexes.clear_all_indexes()
        logger.debug("🧹 Cleared map and %d indexes", len(self._indexes))

    def try_get(self, key: K) -> LookupResult:
        """Look up a primary key without raising."""
        try:
            return LookupResult(True, self._data[key])
        except KeyError:
            return NOT_FOUND

    def contains_key(self, key: K) -> bool:
        return key in self._data

    def __getitem__(self, key: K) -> V:
        try:
            return self._data[key]
        except KeyError:
            raise KeyNotFoundError(key) from None

    def __setitem__(self, key: K, value: V) -> None:
        self.set(key, value)

    def __delitem__(self, key: K) -> None:
        if not self.remove(key):
            raise KeyNotFoundError(key)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def __iter__(self) -> Iterator[K]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)

    # =================== INDEX REGISTRY ===================

    @property
    def index_count(self) -> int:
        """Number of registered indexes."""
        return len(self._indexes)

    def add_index(self, index_name: str, key_factory: KeyFactory) -> None:
        """
        Register a new index and backfill it from the current entries.

        Args:
            index_name: Unique, non-blank name
            key_factory: Pure callable deriving a string key from a value

        Raises:
            InvalidArgumentError: If the name is blank or the factory is not callable
            DuplicateIndexError: If an index with this name already exists
        """
        self._indexes.create_index(index_name, key_factory, self._data.items())

    def remove_index(self, index_name: str) -> bool:
        """
        Drop an index and all of its buckets.

        Returns:
            True if the index existed
        """
        return self._indexes.drop_index(index_name)

    def contains_index(self, index_name: str) -> bool:
        return self._indexes.has_index(index_name)

    def list_indexes(self) -> list[str]:
        """Get list of all index names."""
        return self._indexes.list_indexes()

    def get_index_info(self, index_name: str) -> IndexInfo:
        """
        Statistics for one index.

        Raises:
            IndexNotFoundError: If the index is not registered
        """
        return self._indexes.get_index_statistics(index_name)

    # =================== INDEX QUERIES ===================

    def lookup(self, index_name: str, index_key: str) -> Mapping[K, V]:
        """
        Get the entries filed under ``index_key`` in an index.

        Returns:
            A live read-only view of the bucket

        Raises:
            IndexNotFoundError: If the index is not registered
            KeyNotFoundError: If no bucket exists for ``index_key``
        """
        view = self._indexes.get_index(index_name).bucket_view(index_key)
        if view is None:
            raise KeyNotFoundError(index_key, index_name=index_name)
        return view

    def try_lookup(self, index_name: str, index_key: str) -> LookupResult:
        """Non-raising variant of lookup()."""
        return self.try_get_index_values(index_name, index_key)

    def contains_index_key(self, index_name: str, index_key: str) -> bool:
        """
        Check whether an index has a bucket for ``index_key``.

        Raises:
            IndexNotFoundError: If the index is not registered
        """
        return self._indexes.get_index(index_name).has_bucket(index_key)

    def get_index_keys(self, index_name: str) -> set[str]:
        """
        Get every derived key that has a bucket in an index.

        Raises:
            IndexNotFoundError: If the index is not registered
        """
        return set(self._indexes.get_index(index_name).keys())

    def get_index_values(self, index_name: str) -> list[Mapping[K, V]]:
        """
        Get one read-only view per bucket of an index.

        Raises:
            IndexNotFoundError: If the index is not registered
        """
        return self._indexes.get_index(index_name).bucket_views()

    def try_get_index_values(self, index_name: str,
                             index_key: Optional[str] = None) -> LookupResult:
        """
        Non-raising access to an index.

        With only ``index_name``, the result carries the list of bucket
        views. With ``index_key`` as well, it carries the single bucket view,
        and ``found`` is False when that bucket does not exist.
        """
        index = self._indexes.find_index(index_name)
        if index is None:
            return NOT_FOUND

        if index_key is None:
            return LookupResult(True, index.bucket_views())

        view = index.bucket_view(index_key)
        if view is None:
            return NOT_FOUND
        return LookupResult(True, view)

    def __str__(self) -> str:
        return f"IndexedMap({len(self._data)} entries, {len(self._indexes)} indexes)"

    def __repr__(self) -> str:
        return self.__str__()
