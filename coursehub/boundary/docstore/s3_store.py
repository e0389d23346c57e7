"""
S3-backed platform document store.

Each PlatformDocument is one JSON object at ``{key_prefix}{id}.json``.
put_object is a full replace, which matches the projection's write
semantics; boto3 calls run in a worker thread so the event loop is not
blocked.

Dependencies: boto3, botocore
System role: Production document store
"""

import asyncio
import logging

import boto3
from botocore.exceptions import BotoCoreError, ClientError

from coursehub.boundary.docstore.base import PlatformDocumentStore
from coursehub.core.exceptions import DocumentStoreError, SyncFailureError
from coursehub.models.platform_document import PlatformDocument

logger = logging.getLogger(__name__)

_MISSING_CODES = {"404", "NoSuchKey", "NotFound"}


def _is_missing(error: Exception) -> bool:
    if not isinstance(error, ClientError):
        return False
    return error.response.get("Error", {}).get("Code", "") in _MISSING_CODES


class S3PlatformDocumentStore(PlatformDocumentStore):
    """Document store writing PlatformDocuments as JSON objects in one bucket."""

    def __init__(
        self,
        bucket: str,
        region: str = "ap-southeast-2",
        key_prefix: str = "platforms/",
        s3_client=None,
    ) -> None:
        """
        Initialize S3 document store.

        Args:
            bucket: S3 bucket holding platform documents
            region: AWS region for the bucket
            key_prefix: Prefix prepended to every object key
            s3_client: Preconfigured boto3 S3 client (created from region if None)
        """
        if not bucket:
            raise ValueError("bucket is required")
        self._bucket = bucket
        self._key_prefix = key_prefix
        self._s3_client = s3_client or boto3.client("s3", region_name=region)

    def object_key(self, document_id: str) -> str:
        """Return the S3 key for a document id."""
        return f"{self._key_prefix}{document_id}.json"

    async def upsert(self, document: PlatformDocument) -> None:
        """
        Write the document as JSON, replacing any previous object.

        Raises:
            SyncFailureError: On any S3 client or transport failure
        """
        key = self.object_key(document.id)
        try:
            await asyncio.to_thread(
                self._s3_client.put_object,
                Bucket=self._bucket,
                Key=key,
                Body=document.model_dump_json().encode("utf-8"),
                ContentType="application/json",
            )
        except (ClientError, BotoCoreError) as e:
            raise SyncFailureError(
                document.id,
                "upsert",
                details={"s3_key": key, "error": str(e)},
            ) from e

        logger.info(
            f"{__name__}:upsert - Platform document written",
            extra={"document_id": document.id, "s3_key": key},
        )

    async def delete_by_id(self, document_id: str) -> bool:
        """
        Delete the document object if it exists.

        Returns:
            bool: True if an object was removed, False if none existed

        Raises:
            SyncFailureError: On any S3 client or transport failure
        """
        key = self.object_key(document_id)
        try:
            await asyncio.to_thread(
                self._s3_client.head_object, Bucket=self._bucket, Key=key
            )
        except (ClientError, BotoCoreError) as e:
            if _is_missing(e):
                logger.debug(
                    f"{__name__}:delete_by_id - Nothing to delete",
                    extra={"document_id": document_id, "s3_key": key},
                )
                return False
            raise SyncFailureError(
                document_id, "delete", details={"s3_key": key, "error": str(e)}
            ) from e

        try:
            await asyncio.to_thread(
                self._s3_client.delete_object, Bucket=self._bucket, Key=key
            )
        except (ClientError, BotoCoreError) as e:
            raise SyncFailureError(
                document_id, "delete", details={"s3_key": key, "error": str(e)}
            ) from e

        logger.info(
            f"{__name__}:delete_by_id - Platform document deleted",
            extra={"document_id": document_id, "s3_key": key},
        )
        return True

    async def get_by_id(self, document_id: str) -> PlatformDocument | None:
        """
        Read and parse one document.

        Returns:
            PlatformDocument if the object exists, None otherwise

        Raises:
            DocumentStoreError: On any other S3 failure
        """
        key = self.object_key(document_id)
        try:
            response = await asyncio.to_thread(
                self._s3_client.get_object, Bucket=self._bucket, Key=key
            )
        except (ClientError, BotoCoreError) as e:
            if _is_missing(e):
                return None
            raise DocumentStoreError(
                f"Failed to read platform document {document_id}",
                operation="get",
                details={"s3_key": key, "error": str(e)},
            ) from e

        body = await asyncio.to_thread(response["Body"].read)
        return PlatformDocument.model_validate_json(body)
