"""S3-compatible storage client (AWS S3, SeaweedFS, MinIO)."""

import logging

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError, EndpointConnectionError

from .base import DEFAULT_CONTENT_TYPE, ObjectStorageClient, StorageObject
from .exceptions import (
    StorageConnectionError,
    StorageError,
    StorageNotFoundError,
    StoragePermissionError,
)

log = logging.getLogger(__name__)

_ERROR_CODE_MAP = {
    "NoSuchKey": StorageNotFoundError,
    "NotFound": StorageNotFoundError,
    "404": StorageNotFoundError,
    "AccessDenied": StoragePermissionError,
    "403": StoragePermissionError,
    "InvalidAccessKeyId": StoragePermissionError,
    "SignatureDoesNotMatch": StoragePermissionError,
    "EndpointConnectionError": StorageConnectionError,
}


class S3StorageClient(ObjectStorageClient):
    """S3-compatible object storage client bound to one bucket."""

    def __init__(
        self,
        bucket_name: str,
        region: str = "us-east-1",
        endpoint_url: str | None = None,
        aws_access_key_id: str | None = None,
        aws_secret_access_key: str | None = None,
        aws_session_token: str | None = None,
    ):
        self._bucket = bucket_name
        self._region = region
        self._endpoint_url = endpoint_url

        kwargs: dict = {
            "config": Config(
                region_name=region,
                signature_version="s3v4",
                retries={"max_attempts": 3, "mode": "standard"},
            ),
        }
        if aws_access_key_id and aws_secret_access_key:
            kwargs["aws_access_key_id"] = aws_access_key_id
            kwargs["aws_secret_access_key"] = aws_secret_access_key
        if aws_session_token:
            kwargs["aws_session_token"] = aws_session_token
        if endpoint_url:
            kwargs["endpoint_url"] = endpoint_url

        self._client = boto3.client("s3", **kwargs)

    def put_object(
        self,
        key: str,
        content: bytes,
        content_type: str,
        metadata: dict[str, str] | None = None,
        access_policy: str | None = None,
    ) -> str:
        params: dict = {
            "Bucket": self._bucket,
            "Key": key,
            "Body": content,
            "ContentType": content_type,
        }
        if metadata:
            params["Metadata"] = metadata
        if access_policy:
            params["ACL"] = access_policy
        try:
            self._client.put_object(**params)
            return key
        except (ClientError, BotoCoreError) as e:
            raise self._translate_error(e, key) from e

    def get_object(self, key: str) -> StorageObject:
        try:
            response = self._client.get_object(Bucket=self._bucket, Key=key)
            return StorageObject(
                content=response["Body"].read(),
                content_type=response.get("ContentType", DEFAULT_CONTENT_TYPE),
                metadata=response.get("Metadata", {}),
            )
        except (ClientError, BotoCoreError) as e:
            raise self._translate_error(e, key) from e

    def delete_object(self, key: str) -> None:
        try:
            self._client.delete_object(Bucket=self._bucket, Key=key)
        except (ClientError, BotoCoreError) as e:
            raise self._translate_error(e, key) from e

    def object_exists(self, key: str) -> bool:
        try:
            self._client.head_object(Bucket=self._bucket, Key=key)
            return True
        except (ClientError, BotoCoreError) as e:
            translated = self._translate_error(e, key)
            if isinstance(translated, StorageNotFoundError):
                return False
            raise translated from e

    def _translate_error(self, error: Exception, key: str | None = None) -> StorageError:
        if isinstance(error, ClientError):
            code = error.response.get("Error", {}).get("Code", "")
            exc_cls = _ERROR_CODE_MAP.get(code, StorageError)
        elif isinstance(error, EndpointConnectionError):
            exc_cls = StorageConnectionError
        else:
            exc_cls = StorageError
        log.debug("S3 request for %r in bucket %s failed: %s", key, self._bucket, error)
        return exc_cls(str(error), key=key, cause=error)
