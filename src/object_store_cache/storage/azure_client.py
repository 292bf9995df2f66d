"""Azure Blob Storage client."""

import logging

from azure.core.exceptions import HttpResponseError, ResourceNotFoundError
from azure.storage.blob import BlobServiceClient, ContentSettings

from .base import DEFAULT_CONTENT_TYPE, ObjectStorageClient, StorageObject
from .exceptions import (
    StorageConnectionError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)

log = logging.getLogger(__name__)

# Blob visibility is a container setting; individual uploads can only stay private.
_SUPPORTED_ACCESS_POLICIES = (None, "private")


class AzureBlobStorageClient(ObjectStorageClient):
    """Azure Blob Storage client bound to one container."""

    def __init__(
        self,
        container_name: str,
        connection_string: str | None = None,
        account_name: str | None = None,
        account_key: str | None = None,
    ):
        self._container_name = container_name

        if connection_string:
            self._service_client = BlobServiceClient.from_connection_string(connection_string)
        elif account_name and account_key:
            account_url = f"https://{account_name}.blob.core.windows.net"
            self._service_client = BlobServiceClient(account_url=account_url, credential=account_key)
        else:
            raise ValueError("Azure Blob Storage requires either connection_string or account_name + account_key")

        self._container_client = self._service_client.get_container_client(container_name)

    def put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: dict[str, str] | None = None,
        access_policy: str | None = None,
    ) -> str:
        if access_policy not in _SUPPORTED_ACCESS_POLICIES:
            raise ValueError(f"Unsupported access policy for Azure Blob Storage: {access_policy!r}")
        try:
            blob_client = self._container_client.get_blob_client(key)
            blob_client.upload_blob(
                content,
                overwrite=True,
                content_settings=ContentSettings(content_type=content_type),
                metadata=metadata,
            )
            return key
        except Exception as e:
            raise self._translate_error(e, key) from e

    def get_object(self, key: str) -> StorageObject:
        try:
            blob_client = self._container_client.get_blob_client(key)
            download = blob_client.download_blob()
            properties = download.properties
            return StorageObject(
                content=download.readall(),
                content_type=properties.content_settings.content_type or DEFAULT_CONTENT_TYPE,
                metadata=properties.metadata or {},
            )
        except Exception as e:
            raise self._translate_error(e, key) from e

    def delete_object(self, key: str) -> None:
        try:
            self._container_client.get_blob_client(key).delete_blob()
        except Exception as e:
            raise self._translate_error(e, key) from e

    def object_exists(self, key: str) -> bool:
        try:
            return self._container_client.get_blob_client(key).exists()
        except Exception as e:
            raise self._translate_error(e, key) from e

    def _translate_error(self, error: Exception, key: str | None = None) -> StorageError:
        if isinstance(error, ResourceNotFoundError):
            return StorageNotFoundError(str(error), key=key, cause=error)
        if isinstance(error, HttpResponseError) and error.status_code == 403:
            return StoragePermissionError(str(error), key=key, cause=error)
        if isinstance(error, ConnectionError):
            return StorageConnectionError(str(error), key=key, cause=error)
        return StorageError(str(error), key=key, cause=error)
