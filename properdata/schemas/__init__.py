"""Pydantic schemas for API responses."""

from .responses import (
    ErrorBody,
    PropertyKeys,
    PropertyValue,
    ValueType,
)

__all__ = [
    "ErrorBody",
    "PropertyKeys",
    "PropertyValue",
    "ValueType",
]
