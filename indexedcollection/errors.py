class IndexedCollectionError(Exception):
    """Base error for the project."""


class ConfigurationError(IndexedCollectionError):
    """Raised when a collection is built with an unusable index configuration."""


class RecordValidationError(IndexedCollectionError):
    """Raised when a record or patch cannot be stored in the collection."""


class IndexConsistencyError(IndexedCollectionError, AssertionError):
    """Raised when a field index no longer agrees with the stored records."""
