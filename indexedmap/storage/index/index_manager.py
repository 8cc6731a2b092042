import logging
from typing import Any, Hashable, Iterable, Optional

from ...catalog.index_validator import IndexValidator
from ...catalog.index_info import IndexInfo
from ...core.exceptions import DuplicateIndexError, IndexNotFoundError, InvalidArgumentError
from .index import Index, KeyFactory

logger = logging.getLogger(__name__)


class IndexManager:
    """
    Manages all secondary indexes of an indexed map.

    Responsibilities:
    1. Create/drop indexes
    2. Backfill new indexes from existing entries
    3. Update indexes when primary data changes
    4. Report index statistics

    The manager never touches primary data itself; the owning map hands it
    entries and asks it to mirror each mutation.
    """

    def __init__(self, prune_empty_buckets: bool = True):
        """
        Create an index manager.

        Args:
            prune_empty_buckets: Drop buckets as soon as they become empty
        """
        self.prune_empty_buckets = prune_empty_buckets
        self.validator = IndexValidator()

        # Map: index_name -> Index
        self.named_indexes: dict[str, Index] = {}

    def create_index(self, index_name: str, key_factory: KeyFactory,
                     entries: Iterable[tuple[Hashable, Any]] = ()) -> Index:
        """
        Create a new index and backfill it from ``entries``.

        The index is built off to the side and only registered once every
        entry has been classified, so a failing key factory leaves the
        registry exactly as it was.

        Args:
            index_name: Name for the index
            key_factory: Callable deriving a string key from a value
            entries: Existing (key, value) pairs to backfill

        Returns:
            The created Index

        Raises:
            InvalidArgumentError: If the name or key factory is invalid
            DuplicateIndexError: If the name is already registered
        """
        if not self.validator.validate_index_creation(index_name, key_factory):
            errors = self.validator.get_validation_errors()
            raise InvalidArgumentError(
                f"Index creation failed: {'; '.join(errors)}")

        if index_name in self.named_indexes:
            raise DuplicateIndexError(index_name)

        index = Index(index_name, key_factory,
                      prune_empty_buckets=self.prune_empty_buckets)
        try:
            for key, value in entries:
                index.insert(key, value, self._derive(index, value))
        except Exception:
            logger.warning("Backfill of index '%s' failed; index not registered", index_name)
            raise

        self.named_indexes[index_name] = index

        stats = index.get_statistics()
        logger.info("📊 Added index '%s' (%d entries in %d buckets)",
                    index_name, stats.entry_count, stats.bucket_count)
        return index

    def drop_index(self, index_name: str) -> bool:
        """
        Drop an index.

        Returns:
            True if index was dropped, False if not found
        """
        index = self.named_indexes.pop(index_name, None)
        if index is None:
            return False

        index.clear()
        logger.info("🗑️  Dropped index '%s'", index_name)
        return True

    def get_index(self, index_name: str) -> Index:
        """
        Get index by name.

        Raises:
            IndexNotFoundError: If no index has that name
        """
        index = self.named_indexes.get(index_name)
        if index is None:
            raise IndexNotFoundError(index_name)
        return index

    def find_index(self, index_name: str) -> Optional[Index]:
        """Get index by name, or None."""
        return self.named_indexes.get(index_name)

    def has_index(self, index_name: str) -> bool:
        """Check if an index with this name exists."""
        return index_name in self.named_indexes

    def list_indexes(self) -> list[str]:
        """Get list of all index names."""
        return list(self.named_indexes.keys())

    def derive_keys(self, value: Any) -> dict[str, str]:
        """
        Compute the derived key of ``value`` for every index.

        Called before any mutation so a failing key factory aborts the
        whole update.
        """
        return {name: self._derive(index, value)
                for name, index in self.named_indexes.items()}

    def update_indexes_on_set(self, key: Hashable, value: Any,
                              derived_keys: dict[str, str]) -> None:
        """
        Update all indexes when an entry is inserted or overwritten.

        Args:
            key: Primary key
            value: New value
            derived_keys: Output of derive_keys() for the same value
        """
        for name, index in self.named_indexes.items():
            index.insert(key, value, derived_keys[name])

    def update_indexes_on_delete(self, key: Hashable) -> None:
        """Update all indexes when an entry is deleted."""
        for index in self.named_indexes.values():
            index.discard(key)

    def clear_all_indexes(self) -> None:
        """Empty every index, keeping registrations."""
        for index in self.named_indexes.values():
            index.clear()

    def get_index_statistics(self, index_name: str) -> IndexInfo:
        """
        Get statistics about an index.

        Raises:
            IndexNotFoundError: If no index has that name
        """
        return self.get_index(index_name).get_statistics()

    def _derive(self, index: Index, value: Any) -> str:
        derived_key = index.derive(value)
        if not self.validator.validate_derived_key(index.name, derived_key):
            raise InvalidArgumentError(
                "; ".join(self.validator.get_validation_errors()))
        return derived_key

    def __len__(self) -> int:
        return len(self.named_indexes)

    def __str__(self) -> str:
        return f"IndexManager({len(self.named_indexes)} indexes)"

    def __repr__(self) -> str:
        return self.__str__()
