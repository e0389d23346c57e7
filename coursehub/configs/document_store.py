"""
Document store configuration.

Settings for the denormalized platform projection: which backend holds the
PlatformDocuments and where the S3 backend writes them.

Dependencies: pydantic_settings
System role: Document store selection and S3 bucket configuration
"""

from pydantic import Field
from pydantic_settings import BaseSettings

from coursehub.configs.base import settings_config


class DocumentStoreSettings(BaseSettings):
    """Settings for the platform document store."""

    model_config = settings_config("DOCUMENT_STORE_")

    store_type: str = Field(
        default="memory",
        description="Document store type: 'memory' for local dev, 's3' for production",
    )
    bucket: str = Field(
        default="coursehub-dev-platform-documents",
        description="S3 bucket holding platform documents",
    )
    region: str = Field(
        default="ap-southeast-2",
        description="AWS region for the S3 bucket",
    )
    key_prefix: str = Field(
        default="platforms/",
        description="Object key prefix; documents live at {prefix}{id}.json",
    )
