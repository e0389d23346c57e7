"""
In-process platform document store.

Keeps serialized documents in a dict. Used for local development and tests;
documents do not survive a process restart.

Dependencies: coursehub.boundary.docstore.base
System role: Development document store
"""

import logging

from coursehub.boundary.docstore.base import PlatformDocumentStore
from coursehub.models.platform_document import PlatformDocument

logger = logging.getLogger(__name__)


class InMemoryPlatformDocumentStore(PlatformDocumentStore):
    """Dict-backed document store storing plain JSON-compatible payloads."""

    def __init__(self) -> None:
        self._documents: dict[str, dict] = {}

    async def upsert(self, document: PlatformDocument) -> None:
        """
        Store a serialized copy of the document, replacing any previous one.

        Args:
            document: Document keyed by its id
        """
        self._documents[document.id] = document.model_dump(mode="json")
        logger.debug(
            f"{__name__}:upsert - Stored platform document",
            extra={"document_id": document.id, "course_count": len(document.courses)},
        )

    async def delete_by_id(self, document_id: str) -> bool:
        """
        Drop the document stored under ``document_id``.

        Returns:
            bool: True if a document was removed, False if none existed
        """
        removed = self._documents.pop(document_id, None) is not None
        logger.debug(
            f"{__name__}:delete_by_id - Delete platform document",
            extra={"document_id": document_id, "removed": removed},
        )
        return removed

    async def get_by_id(self, document_id: str) -> PlatformDocument | None:
        """
        Load a fresh model from the stored payload.

        Returns:
            PlatformDocument if present, None otherwise
        """
        payload = self._documents.get(document_id)
        if payload is None:
            return None
        return PlatformDocument.model_validate(payload)

    def document_ids(self) -> set[str]:
        """Return the ids of every stored document."""
        return set(self._documents)
