"""
Platform document store boundary.

- PlatformDocumentStore: interface (upsert / delete_by_id / get_by_id)
- InMemoryPlatformDocumentStore: dict-backed store for dev and tests
- S3PlatformDocumentStore: JSON objects in S3 for production
- get_document_store(): configuration-driven factory

Dependencies: boto3
System role: Storage for the denormalized platform projection
"""

from coursehub.boundary.docstore.base import PlatformDocumentStore
from coursehub.boundary.docstore.memory_store import InMemoryPlatformDocumentStore
from coursehub.boundary.docstore.s3_store import S3PlatformDocumentStore
from coursehub.boundary.docstore.store_factory import get_document_store

__all__ = [
    "PlatformDocumentStore",
    "InMemoryPlatformDocumentStore",
    "S3PlatformDocumentStore",
    "get_document_store",
]
