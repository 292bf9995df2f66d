"""Abstract base class for the object stores a cache can sit on."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field

DEFAULT_CONTENT_TYPE = "application/octet-stream"


@dataclass
class StorageObject:
    """Body of a stored object together with its content type and metadata."""

    content: bytes
    content_type: str = DEFAULT_CONTENT_TYPE
    metadata: dict[str, str] = field(default_factory=dict)


class ObjectStorageClient(ABC):
    """Backend-agnostic interface for a single bucket or container.

    Every method raises a subclass of ``StorageError`` on failure; SDK
    specific exceptions never escape an implementation.
    """

    @abstractmethod
    def put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: dict[str, str] | None = None,
        access_policy: str | None = None,
    ) -> str:
        """Upload content under *key* and return the key."""

    @abstractmethod
    def get_object(self, key: str) -> StorageObject:
        """Download an object. Raises StorageNotFoundError if missing."""

    @abstractmethod
    def delete_object(self, key: str) -> None:
        """Delete an object. Raises StorageNotFoundError if the backend reports it missing."""

    @abstractmethod
    def object_exists(self, key: str) -> bool:
        """Return whether an object is stored under *key*."""
