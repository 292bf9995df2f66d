"""Build the storage client a CacheConfig describes."""

import logging

from ..config import CacheConfig
from .base import ObjectStorageClient

log = logging.getLogger(__name__)


def create_storage_client(config: CacheConfig) -> ObjectStorageClient:
    """Create the ObjectStorageClient for ``config.storage_type``.

    Backend SDKs are imported lazily, so only the extra for the configured
    backend needs to be installed.

    Raises:
        ImportError: If the optional dependency for the configured backend is not installed.
        ValueError: If the Azure settings carry neither a connection string nor an account key.
    """
    log.debug("Creating %s storage client for %s", config.storage_type, config.bucket_name)

    if config.storage_type == "gcs":
        from .gcs_client import GcsStorageClient

        return GcsStorageClient(
            bucket_name=config.bucket_name,
            project=config.gcs_project,
            credentials_path=config.gcs_credentials_path,
        )

    if config.storage_type == "azure":
        from .azure_client import AzureBlobStorageClient

        return AzureBlobStorageClient(
            container_name=config.bucket_name,
            connection_string=config.azure_connection_string,
            account_name=config.azure_account_name,
            account_key=config.azure_account_key,
        )

    from .s3_client import S3StorageClient

    return S3StorageClient(
        bucket_name=config.bucket_name,
        region=config.s3_region,
        endpoint_url=config.s3_endpoint_url,
        aws_access_key_id=config.aws_access_key_id,
        aws_secret_access_key=config.aws_secret_access_key,
        aws_session_token=config.aws_session_token,
    )
