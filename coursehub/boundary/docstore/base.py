"""
Platform document store interface.

String-keyed persistence for PlatformDocuments. Writes are full
replacements; deletes of absent documents are no-ops.

Dependencies: coursehub.models.platform_document
System role: Contract shared by the memory and S3 document stores
"""

from abc import ABC, abstractmethod

from coursehub.models.platform_document import PlatformDocument


class PlatformDocumentStore(ABC):
    """Abstract document store holding one PlatformDocument per platform."""

    @abstractmethod
    async def upsert(self, document: PlatformDocument) -> None:
        """
        Insert or fully replace the document stored under ``document.id``.

        Raises:
            SyncFailureError: If the write fails
        """

    @abstractmethod
    async def delete_by_id(self, document_id: str) -> bool:
        """
        Delete the document stored under ``document_id``.

        Returns:
            bool: True if a document was removed, False if none existed

        Raises:
            SyncFailureError: If the delete fails
        """

    @abstractmethod
    async def get_by_id(self, document_id: str) -> PlatformDocument | None:
        """
        Load one document.

        Returns:
            PlatformDocument if present, None otherwise

        Raises:
            DocumentStoreError: If the read fails
        """
