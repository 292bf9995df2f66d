from datetime import datetime, timezone

import pytest

from object_store_cache.clock import FrozenClock
from object_store_cache.storage.base import ObjectStorageClient, StorageObject
from object_store_cache.storage.exceptions import StorageNotFoundError


class InMemoryStorageClient(ObjectStorageClient):
    """Dict-backed storage client that records every call."""

    def __init__(self):
        self.objects: dict[str, StorageObject] = {}
        self.access_policies: dict[str, str | None] = {}
        self.calls: list[tuple[str, str]] = []

    def put_object(self, key, content, content_type, metadata=None, access_policy=None):
        self.calls.append(("put_object", key))
        self.objects[key] = StorageObject(content=content, content_type=content_type, metadata=dict(metadata or {}))
        self.access_policies[key] = access_policy
        return key

    def get_object(self, key):
        self.calls.append(("get_object", key))
        if key not in self.objects:
            raise StorageNotFoundError(f"{key} not found", key=key)
        return self.objects[key]

    def delete_object(self, key):
        self.calls.append(("delete_object", key))
        if key not in self.objects:
            raise StorageNotFoundError(f"{key} not found", key=key)
        del self.objects[key]
        self.access_policies.pop(key, None)

    def object_exists(self, key):
        self.calls.append(("object_exists", key))
        return key in self.objects


@pytest.fixture()
def storage():
    return InMemoryStorageClient()


@pytest.fixture()
def clock():
    return FrozenClock(datetime(2024, 1, 1, 12, 0, 0, tzinfo=timezone.utc))
