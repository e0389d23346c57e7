"""
Document store factory for selecting between memory (dev) and S3 (prod).

Depends on DOCUMENT_STORE_STORE_TYPE environment variable.
Provides consistent interface regardless of underlying implementation.

Dependencies: coursehub.boundary.docstore, coursehub.configs
System role: Document store instantiation and selection
"""

import logging

from coursehub.boundary.docstore.base import PlatformDocumentStore
from coursehub.boundary.docstore.memory_store import InMemoryPlatformDocumentStore
from coursehub.boundary.docstore.s3_store import S3PlatformDocumentStore
from coursehub.configs import get_settings

logger = logging.getLogger(__name__)


def get_document_store() -> PlatformDocumentStore:
    """
    Factory function to get document store based on environment configuration.

    Returns:
        InMemoryPlatformDocumentStore or S3PlatformDocumentStore

    Raises:
        ValueError: If DOCUMENT_STORE_STORE_TYPE is invalid
    """
    config = get_settings().document_store
    store_type = config.store_type.lower()

    if store_type == "memory":
        logger.info(
            f"{__name__}:get_document_store - Creating in-memory document store (local dev mode)"
        )
        return InMemoryPlatformDocumentStore()

    elif store_type == "s3":
        logger.info(
            f"{__name__}:get_document_store - Creating S3 document store (production mode)"
        )
        return S3PlatformDocumentStore(
            bucket=config.bucket,
            region=config.region,
            key_prefix=config.key_prefix,
        )

    else:
        raise ValueError(
            f"Invalid DOCUMENT_STORE_STORE_TYPE: {store_type}. "
            f"Must be 'memory' (dev) or 's3' (production)."
        )
