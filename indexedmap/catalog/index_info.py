import time
from dataclasses import dataclass, asdict


@dataclass
class IndexInfo:
    """
    Statistics snapshot of one secondary index.

    🏷️ Captured on demand from a live index; it does not track later
    mutations of the map.
    """

    """🏷️ Unique name identifying this index"""
    index_name: str

    """🪣 Number of buckets (distinct derived keys) currently held"""
    bucket_count: int = 0

    """📊 Number of entries classified by this index"""
    entry_count: int = 0

    """📈 Size of the largest bucket"""
    largest_bucket: int = 0

    """🫙 Buckets kept around with no members"""
    empty_buckets: int = 0

    """⏰ Unix timestamp when the index was registered"""
    created_at: float = 0.0

    def __post_init__(self):
        """
        🎬 Initialize creation timestamp if not provided.
        """
        if self.created_at == 0:
            self.created_at = time.time()

    @property
    def average_bucket_size(self) -> float:
        """Mean number of entries per bucket."""
        return self.entry_count / max(1, self.bucket_count)

    def to_dict(self) -> dict:
        """
        📦 Convert index info to dictionary format.

        Returns:
            dict: Dictionary representation of the index statistics
        """
        return asdict(self)

    @classmethod
    def from_dict(cls, data: dict) -> 'IndexInfo':
        """
        📥 Create index info from dictionary representation.

        Args:
            data: Dictionary containing index attributes

        Returns:
            IndexInfo: New index info instance
        """
        return cls(**data)
