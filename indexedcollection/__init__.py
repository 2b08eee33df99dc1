"""
In-memory indexed collection with query by example.
"""

from .collection import IndexedCollection
from .config import IndexConfig, IndexMode
from .errors import (
    ConfigurationError,
    IndexConsistencyError,
    IndexedCollectionError,
    RecordValidationError,
)
from .index import FieldIndex

__all__ = [
    "ConfigurationError",
    "FieldIndex",
    "IndexConfig",
    "IndexConsistencyError",
    "IndexMode",
    "IndexedCollection",
    "IndexedCollectionError",
    "RecordValidationError",
]
