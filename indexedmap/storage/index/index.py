import time
from types import MappingProxyType
from typing import Callable, Generic, Hashable, Iterator, Mapping, Optional, TypeVar

from ...catalog.index_info import IndexInfo

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

KeyFactory = Callable[[V], str]


class Index(Generic[K, V]):
    """
    A named partition of the map's entries into buckets.

    Each bucket is a dict (primary key -> value) holding every entry whose
    value derives the bucket's key under ``key_factory``. A reverse map
    remembers which bucket each primary key sits in, so removals never need
    to call the key factory again.

    Buckets are created lazily on first insert. When ``prune_empty_buckets``
    is set, a bucket is dropped as soon as its last member leaves; otherwise
    it lingers empty until the index is cleared.
    """

    def __init__(self, name: str, key_factory: KeyFactory,
                 prune_empty_buckets: bool = True):
        self.name = name
        self.key_factory = key_factory
        self.prune_empty_buckets = prune_empty_buckets
        self.created_at = time.time()

        # derived key -> {primary key -> value}
        self.buckets: dict[str, dict[K, V]] = {}

        # primary key -> derived key
        self._bucket_of: dict[K, str] = {}

    def derive(self, value: V) -> str:
        """Run the key factory against a value."""
        return self.key_factory(value)

    # =================== MUTATION ===================

    def insert(self, key: K, value: V, derived_key: str) -> None:
        """
        Place ``key`` in the bucket for ``derived_key``.

        If the key was previously classified under a different derived key
        it is moved out of that bucket first. An unchanged derived key only
        refreshes the stored value.
        """
        previous = self._bucket_of.get(key)
        if previous is not None and previous != derived_key:
            self._detach(previous, key)

        bucket = self.buckets.get(derived_key)
        if bucket is None:
            bucket = {}
            self.buckets[derived_key] = bucket

        bucket[key] = value
        self._bucket_of[key] = derived_key

    def discard(self, key: K) -> bool:
        """
        Remove ``key`` from whichever bucket holds it.

        Returns:
            True if the key was classified by this index
        """
        derived_key = self._bucket_of.pop(key, None)
        if derived_key is None:
            return False

        self._detach(derived_key, key)
        return True

    def clear(self) -> None:
        """Drop every bucket. Name and key factory are kept."""
        # views handed out earlier must not keep showing removed entries
        for bucket in self.buckets.values():
            bucket.clear()
        self.buckets.clear()
        self._bucket_of.clear()

    def _detach(self, derived_key: str, key: K) -> None:
        bucket = self.buckets[derived_key]
        del bucket[key]
        if self.prune_empty_buckets and not bucket:
            del self.buckets[derived_key]

    # =================== QUERIES ===================

    def bucket_view(self, derived_key: str) -> Optional[Mapping[K, V]]:
        """Read-only live view of one bucket, or None if it does not exist."""
        bucket = self.buckets.get(derived_key)
        if bucket is None:
            return None
        return MappingProxyType(bucket)

    def bucket_views(self) -> list[Mapping[K, V]]:
        """Read-only live views of every bucket."""
        return [MappingProxyType(bucket) for bucket in self.buckets.values()]

    def derived_key_of(self, key: K) -> Optional[str]:
        """The derived key ``key`` is currently filed under, if any."""
        return self._bucket_of.get(key)

    def has_bucket(self, derived_key: str) -> bool:
        return derived_key in self.buckets

    def keys(self) -> Iterator[str]:
        return iter(self.buckets)

    def get_statistics(self) -> IndexInfo:
        """
        Summarize the index.

        Returns:
            IndexInfo snapshot of bucket and entry counts
        """
        sizes = [len(bucket) for bucket in self.buckets.values()]
        return IndexInfo(
            index_name=self.name,
            bucket_count=len(sizes),
            entry_count=len(self._bucket_of),
            largest_bucket=max(sizes, default=0),
            empty_buckets=sizes.count(0),
            created_at=self.created_at,
        )

    def __len__(self) -> int:
        return len(self.buckets)

    def __str__(self) -> str:
        return f"Index({self.name!r}, {len(self.buckets)} buckets, {len(self._bucket_of)} entries)"

    def __repr__(self) -> str:
        return self.__str__()
