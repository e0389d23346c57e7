"""
Correlation ID context.

Holds the correlation id of the current request in a contextvar so log
records emitted anywhere below the middleware carry it. Incoming ids are
only trusted when they look like an id; anything else is replaced.

Dependencies: contextvars
System role: Request tracing across service boundaries
"""

import re
import uuid
from contextlib import contextmanager
from contextvars import ContextVar
from typing import Iterator

CORRELATION_HEADER = "X-Correlation-ID"

_VALID_ID = re.compile(r"^[A-Za-z0-9._:-]{1,128}$")

_correlation_id: ContextVar[str | None] = ContextVar("correlation_id", default=None)


def new_correlation_id() -> str:
    return uuid.uuid4().hex


def accept_correlation_id(candidate: str | None) -> str:
    """
    Return ``candidate`` if it is usable as a correlation id, else a new one.

    Header values end up verbatim in log lines, so whitespace, control
    characters and oversized values are rejected.
    """
    if candidate and _VALID_ID.match(candidate):
        return candidate
    return new_correlation_id()


def get_correlation_id() -> str | None:
    """Current correlation id, None outside a correlation scope."""
    return _correlation_id.get()


@contextmanager
def correlation_scope(correlation_id: str | None = None) -> Iterator[str]:
    """
    Bind a correlation id for the duration of the block.

    The previous value is restored on exit, so nested scopes and
    concurrent tasks do not leak ids into each other.

    Args:
        correlation_id: Incoming id (e.g. the request header), validated

    Yields:
        str: The id bound inside the block
    """
    value = accept_correlation_id(correlation_id)
    token = _correlation_id.set(value)
    try:
        yield value
    finally:
        _correlation_id.reset(token)
