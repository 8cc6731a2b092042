from .index import Index, IndexManager, KeyFactory

__all__ = [
    "Index",
    "IndexManager",
    "KeyFactory",
]
