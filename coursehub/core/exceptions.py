"""
Exception hierarchy for the coursehub application.

Provides layered exception structure for domain-specific errors.
All exceptions include context for observability and debugging.

Dependencies: None (pure domain layer)
System role: Centralized exception handling across the application
"""

from typing import Any


class CourseHubException(Exception):
    """Base exception for all coursehub application errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        """
        Initialize base exception with message and optional context.

        Args:
            message: Human-readable error message
            details: Optional dictionary of additional context for debugging
        """
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def __str__(self) -> str:
        """Return string representation including details."""
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class NotFoundError(CourseHubException):
    """Raised when a platform, course, user or document does not exist."""

    def __init__(
        self,
        entity: str,
        entity_id: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize not found error.

        Args:
            entity: Entity kind (platform, course, user, document)
            entity_id: Identifier (or collection of identifiers) that was missing
            details: Additional context
        """
        details = details or {}
        details["entity"] = entity
        details["entity_id"] = entity_id
        self.entity = entity
        self.entity_id = entity_id
        super().__init__(f"{entity.capitalize()} not found with id: {entity_id}", details)


class ValidationConflictError(CourseHubException):
    """Raised when a write would violate a uniqueness constraint."""

    def __init__(
        self,
        entity: str,
        field: str,
        value: Any,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize validation conflict error.

        Args:
            entity: Entity kind whose uniqueness rule is violated
            field: Unique field name (name, title, email)
            value: Conflicting value
            details: Additional context
        """
        details = details or {}
        details.update({"entity": entity, "field": field})
        self.entity = entity
        self.field = field
        self.value = value
        super().__init__(f"{entity.capitalize()} already exists: {value}", details)


class DocumentStoreError(CourseHubException):
    """Raised when a document store operation fails."""

    def __init__(
        self,
        message: str,
        operation: str | None = None,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize document store error.

        Args:
            message: Error message
            operation: Operation that failed (upsert, delete, get)
            details: Additional context
        """
        details = details or {}
        if operation:
            details["operation"] = operation
        super().__init__(message, details)


class SyncFailureError(DocumentStoreError):
    """Raised when a projection write or delete fails after the relational commit."""

    def __init__(
        self,
        document_id: str,
        operation: str,
        details: dict[str, Any] | None = None,
    ) -> None:
        """
        Initialize sync failure error.

        Args:
            document_id: PlatformDocument id that could not be written
            operation: Operation that failed (upsert, delete)
            details: Additional context
        """
        details = details or {}
        details["document_id"] = document_id
        self.document_id = document_id
        super().__init__(
            f"Failed to {operation} platform document {document_id}",
            operation=operation,
            details=details,
        )
