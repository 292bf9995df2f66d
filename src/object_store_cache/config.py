"""
Configuration for an object storage backed cache.

This module defines:
- The bucket and backend type holding cache entries
- Endpoint and credential settings for each backend
- Resolution of all of the above from environment variables
"""

import os
from typing import Literal, Optional

from pydantic import BaseModel, Field, field_validator

_BUCKET_ENV_VARS = {
    "s3": "S3_BUCKET_NAME",
    "gcs": "GCS_BUCKET_NAME",
    "azure": "AZURE_CONTAINER_NAME",
}

# Field name -> environment variable read by CacheConfig.from_env.
_SETTING_ENV_VARS = {
    "s3_region": "S3_REGION",
    "s3_endpoint_url": "S3_ENDPOINT_URL",
    "aws_access_key_id": "AWS_ACCESS_KEY_ID",
    "aws_secret_access_key": "AWS_SECRET_ACCESS_KEY",
    "aws_session_token": "AWS_SESSION_TOKEN",
    "gcs_project": "GCS_PROJECT",
    "gcs_credentials_path": "GOOGLE_APPLICATION_CREDENTIALS",
    "azure_connection_string": "AZURE_STORAGE_CONNECTION_STRING",
    "azure_account_name": "AZURE_STORAGE_ACCOUNT_NAME",
    "azure_account_key": "AZURE_STORAGE_ACCOUNT_KEY",
}


class CacheConfig(BaseModel):
    """Where cache entries are stored and how to reach the store."""

    bucket_name: str = Field(
        description="Bucket (S3/GCS) or container (Azure) holding the cache entries"
    )
    storage_type: Literal["s3", "gcs", "azure"] = Field(
        default="s3",
        description="Object storage backend: s3, gcs, azure"
    )

    s3_region: str = Field(
        default="us-east-1",
        description="S3 region"
    )
    s3_endpoint_url: Optional[str] = Field(
        default=None,
        description="Custom endpoint for S3-compatible stores (MinIO, SeaweedFS)"
    )
    aws_access_key_id: Optional[str] = Field(
        default=None,
        description="AWS access key (boto3 credential chain if not set)"
    )
    aws_secret_access_key: Optional[str] = Field(
        default=None,
        description="AWS secret key"
    )
    aws_session_token: Optional[str] = Field(
        default=None,
        description="AWS session token for temporary credentials"
    )

    gcs_project: Optional[str] = Field(
        default=None,
        description="GCP project (application default if not set)"
    )
    gcs_credentials_path: Optional[str] = Field(
        default=None,
        description="Service account JSON file"
    )

    azure_connection_string: Optional[str] = Field(
        default=None,
        description="Azure Storage connection string"
    )
    azure_account_name: Optional[str] = Field(
        default=None,
        description="Azure Storage account name, used with azure_account_key"
    )
    azure_account_key: Optional[str] = Field(
        default=None,
        description="Azure Storage account key"
    )

    @field_validator("bucket_name")
    @classmethod
    def validate_bucket_name(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("bucket_name must not be blank")
        return value

    @field_validator("storage_type", mode="before")
    @classmethod
    def normalize_storage_type(cls, value):
        if isinstance(value, str):
            return value.strip().lower()
        return value

    @classmethod
    def from_env(
        cls,
        bucket_name: Optional[str] = None,
        storage_type: Optional[str] = None,
    ) -> "CacheConfig":
        """Build a config from explicit values, falling back to environment variables.

        The bucket is taken from *bucket_name*, then OBJECT_STORAGE_BUCKET_NAME,
        then the backend specific variable (S3_BUCKET_NAME, GCS_BUCKET_NAME or
        AZURE_CONTAINER_NAME). The backend is taken from *storage_type*, then
        OBJECT_STORAGE_TYPE, defaulting to "s3". Endpoint and credential
        settings come from S3_REGION, S3_ENDPOINT_URL, AWS_*, GCS_PROJECT,
        GOOGLE_APPLICATION_CREDENTIALS and AZURE_STORAGE_*.

        Raises:
            ValueError: If no bucket name can be resolved.
        """
        backend = (storage_type or os.getenv("OBJECT_STORAGE_TYPE", "s3")).strip().lower()
        backend_var = _BUCKET_ENV_VARS.get(backend)

        resolved_bucket = bucket_name or os.getenv("OBJECT_STORAGE_BUCKET_NAME")
        if not resolved_bucket and backend_var:
            resolved_bucket = os.getenv(backend_var)
        if not resolved_bucket:
            names = ", ".join(v for v in ("OBJECT_STORAGE_BUCKET_NAME", backend_var) if v)
            raise ValueError(f"Bucket name required: set {names}, or pass bucket_name")

        settings = {
            field: os.environ[env_var]
            for field, env_var in _SETTING_ENV_VARS.items()
            if os.getenv(env_var)
        }
        return cls(bucket_name=resolved_bucket, storage_type=backend, **settings)
