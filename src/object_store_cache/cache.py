"""String cache stored as objects in a bucket.

Each cache entry is one object: the body holds the value and an optional
``expires_at`` metadata field holds the absolute Unix timestamp (seconds)
after which reads treat the entry as absent. Expired objects are never
deleted here; removing them is left to the bucket's lifecycle rules.
"""

import logging
import re
from collections.abc import Iterable, Mapping
from datetime import timedelta
from typing import Any, NoReturn

from .clock import Clock, SystemClock
from .exceptions import InvalidKeyError, UnsupportedOperationError
from .storage import ObjectStorageClient, StorageError, StorageNotFoundError

log = logging.getLogger(__name__)

KEY_PATTERN = re.compile(r"[A-Za-z0-9\-_.]{1,64}")
EXPIRES_AT_METADATA_KEY = "expires_at"
ACCESS_POLICY = "private"
CONTENT_TYPE = "application/json"

TTL = timedelta | int


class ObjectStoreCache:
    """Cache whose entries live in an object storage bucket.

    Reads and deletes surface storage failures to the caller, except for a
    missing object which is a plain miss. Writes never raise for storage
    failures: they log and return ``False`` so batch writes can stop early.
    """

    def __init__(self, storage: ObjectStorageClient, clock: Clock | None = None):
        self._storage = storage
        self._clock = clock or SystemClock()

    def get(self, key: str, default: Any = None) -> Any:
        self._validate_key(key)

        try:
            stored = self._storage.get_object(key)
        except StorageNotFoundError:
            log.debug("Cache miss for %r", key)
            return default

        expires_at = stored.metadata.get(EXPIRES_AT_METADATA_KEY)
        if expires_at and self._now() >= _parse_timestamp(expires_at):
            log.debug("Cache entry %r expired at %s", key, expires_at)
            return default

        # Objects written by other clients may hold arbitrary bytes.
        return stored.content.decode("utf-8", errors="replace")

    def set(self, key: str, value: str, ttl: TTL | None = None) -> bool:
        self._validate_key(key)

        if not isinstance(value, str):
            log.debug("Refusing to cache %s value under %r", type(value).__name__, key)
            return False

        try:
            body = value.encode("utf-8")
        except UnicodeEncodeError:
            log.debug("Refusing to cache value under %r that cannot be encoded as UTF-8", key)
            return False

        metadata: dict[str, str] = {}
        if ttl is not None:
            metadata[EXPIRES_AT_METADATA_KEY] = str(self._expires_at(ttl))

        try:
            self._storage.put_object(
                key,
                body,
                CONTENT_TYPE,
                metadata=metadata,
                access_policy=ACCESS_POLICY,
            )
        except StorageError:
            log.warning("Failed to write cache entry %r", key, exc_info=True)
            return False
        return True

    def delete(self, key: str) -> bool:
        self._validate_key(key)

        try:
            self._storage.delete_object(key)
        except StorageNotFoundError:
            return False
        return True

    def has(self, key: str) -> bool:
        """Return whether an object exists for *key*.

        Expiry metadata is not consulted, so an entry that ``get`` already
        treats as expired is still reported present until it is deleted.
        """
        self._validate_key(key)
        return self._storage.object_exists(key)

    def clear(self) -> NoReturn:
        # The bucket may hold objects that were never written through this cache.
        raise UnsupportedOperationError("Clearing an object storage cache is not supported")

    def get_multiple(self, keys: Iterable[str], default: Any = None) -> dict[str, Any]:
        if isinstance(keys, str):
            raise InvalidKeyError(keys)
        return {key: self.get(key, default) for key in keys}

    def set_multiple(
        self,
        values: Mapping[str, str] | Iterable[tuple[str, str]],
        ttl: TTL | None = None,
    ) -> bool:
        """Write each entry in order, stopping at the first failure.

        Entries written before the failure are kept.
        """
        items = values.items() if isinstance(values, Mapping) else values
        for key, value in items:
            if not self.set(key, value, ttl):
                log.debug("set_multiple stopped at %r", key)
                return False
        return True

    def delete_multiple(self, keys: Iterable[str]) -> bool:
        if isinstance(keys, str):
            raise InvalidKeyError(keys)
        for key in keys:
            if not self.delete(key):
                log.debug("delete_multiple stopped at %r", key)
                return False
        return True

    def _now(self) -> int:
        return int(self._clock.now().timestamp())

    def _expires_at(self, ttl: TTL) -> int:
        if isinstance(ttl, bool) or not isinstance(ttl, (timedelta, int)):
            raise TypeError(f"ttl must be a timedelta or an int number of seconds, got {type(ttl).__name__}")
        # Integer seconds; datetime arithmetic overflows past year 9999.
        seconds = ttl if isinstance(ttl, int) else ttl // timedelta(seconds=1)
        return self._now() + seconds

    @staticmethod
    def _validate_key(key: str) -> None:
        if not isinstance(key, str) or not KEY_PATTERN.fullmatch(key):
            raise InvalidKeyError(key)


def _parse_timestamp(value: str) -> int:
    # Unparseable values count as already expired.
    try:
        return int(value)
    except ValueError:
        return 0
