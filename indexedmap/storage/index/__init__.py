"""
Secondary index storage for the indexed map.

Layout:
    IndexManager
    ├── "by_category" -> Index
    │       buckets: {"X": {"a": va, "c": vc}, "Y": {"b": vb}}
    └── "by_owner"    -> Index
            buckets: {"alice": {...}, "bob": {...}}

Every Index keeps a reverse map (primary key -> derived key) alongside its
buckets so an entry can be moved or removed without re-running the key
factory.
"""

from .index import Index, KeyFactory
from .index_manager import IndexManager

__all__ = [
    "Index",
    "KeyFactory",
    "IndexManager",
]
