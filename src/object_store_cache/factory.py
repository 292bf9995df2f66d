"""Build a ready-to-use cache from configuration."""

import logging
from typing import Optional

from .cache import ObjectStoreCache
from .clock import Clock
from .config import CacheConfig
from .storage import create_storage_client

log = logging.getLogger(__name__)


def create_cache(
    config: Optional[CacheConfig] = None,
    clock: Optional[Clock] = None,
) -> ObjectStoreCache:
    """Create an ObjectStoreCache backed by the configured bucket.

    Falls back to ``CacheConfig.from_env()`` when no config is given.
    """
    config = config or CacheConfig.from_env()
    log.info("Using %s bucket %s for cache storage", config.storage_type, config.bucket_name)
    storage = create_storage_client(config)
    return ObjectStoreCache(storage, clock=clock)
