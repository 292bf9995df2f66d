"""String cache backed by an object storage bucket (S3, GCS, Azure Blob Storage)."""

from .cache import ObjectStoreCache
from .clock import Clock, FrozenClock, SystemClock
from .config import CacheConfig
from .exceptions import CacheError, InvalidKeyError, UnsupportedOperationError
from .factory import create_cache

__all__ = [
    "ObjectStoreCache",
    "Clock",
    "SystemClock",
    "FrozenClock",
    "CacheConfig",
    "CacheError",
    "InvalidKeyError",
    "UnsupportedOperationError",
    "create_cache",
]
