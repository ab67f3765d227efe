"""Shared helpers for API routes (error status mapping)."""

from ..errors import (
    InvalidKey,
    IOFailure,
    KeyNotFound,
    MalformedQuotedValue,
    ParseError,
    PropertiesError,
)

ERROR_STATUS = (
    (InvalidKey, 400),
    (KeyNotFound, 404),
    (MalformedQuotedValue, 422),
    (ParseError, 422),
    (IOFailure, 503),
)


def status_for(error: PropertiesError) -> int:
    """HTTP status code for a lookup failure; 500 for anything unmapped."""
    for kind, status in ERROR_STATUS:
        if isinstance(error, kind):
            return status
    return 500
