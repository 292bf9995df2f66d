"""Errors raised by the cache itself.

Storage failures are not wrapped: they surface as the ``StorageError``
hierarchy from ``object_store_cache.storage``.
"""


class CacheError(Exception):
    """Base exception for cache contract violations."""


class InvalidKeyError(CacheError, ValueError):
    """Raised when a key does not match the allowed key format."""

    def __init__(self, key: object):
        self.key = key
        super().__init__(f"Invalid cache key: {key!r}")


class UnsupportedOperationError(CacheError, NotImplementedError):
    """Raised for cache operations this backend does not implement."""
