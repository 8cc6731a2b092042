from .index_validator import IndexValidator
from .index_info import IndexInfo

__all__ = [
    "IndexValidator",
    "IndexInfo",
]
