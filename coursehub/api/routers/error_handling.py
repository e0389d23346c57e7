"""
Service error handling utilities.

Provides a decorator that maps domain exceptions raised by the service layer
to HTTP responses, uniformly across the platform, course and user routers.
"""

import functools
import logging
from typing import Any, Callable, TypeVar

from fastapi import HTTPException, status
from pydantic import ValidationError

from coursehub.core.exceptions import NotFoundError, ValidationConflictError

logger = logging.getLogger(__name__)

# Type for the decorated function
F = TypeVar("F", bound=Callable[..., Any])


def handle_service_errors(func: F) -> F:
    """
    Decorator to transform service-layer errors into HTTPExceptions.

    - NotFoundError -> 404
    - ValidationConflictError -> 400
    - pydantic ValidationError -> 422
    - anything else -> 500
    """
    @functools.wraps(func)
    async def wrapper(*args: Any, **kwargs: Any) -> Any:
        try:
            return await func(*args, **kwargs)

        except HTTPException:
            raise

        except NotFoundError as e:
            logger.warning(
                "Resource not found",
                extra={"entity": e.entity, "entity_id": str(e.entity_id)},
            )
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=e.message)

        except ValidationConflictError as e:
            logger.warning(
                "Conflicting request",
                extra={"entity": e.entity, "field": e.field},
            )
            raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail=e.message)

        except ValidationError as e:
            logger.warning("Pydantic validation error", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
                detail=e.errors(),
            )

        except Exception as e:
            logger.exception("Unexpected failure in service operation", extra={"error": str(e)})
            raise HTTPException(
                status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
                detail=f"An internal error occurred: {str(e)}",
            )

    return wrapper  # type: ignore
