"""
Error kinds raised by property lookups.
Every failure is local to one lookup and propagates to the caller; nothing is retried.
"""

from pathlib import Path
from typing import Optional, Union


class PropertiesError(Exception):
    """Base for property-file failures with a short machine-readable code."""
    def __init__(self, message: str, code: str = "properties_error"):
        self.message = message
        self.code = code
        super().__init__(message)


class InvalidKey(PropertiesError, ValueError):
    """Key is empty or starts with a space."""
    def __init__(self, message: str):
        super().__init__(message, code="invalid_key")


class KeyNotFound(PropertiesError, KeyError):
    """No line starts with the key, or the matching line lacks the separator."""
    def __init__(self, key: str, separator: str):
        self.key = key
        self.separator = separator
        super().__init__(
            f"Invalid key: '{key}' or key value separator '{separator}'.",
            code="key_not_found",
        )

    def __str__(self) -> str:
        # KeyError would repr() the message otherwise
        return self.message


class MalformedQuotedValue(PropertiesError, ValueError):
    def __init__(self, key: str, value: str):
        self.key = key
        self.value = value
        super().__init__(
            f"Value of '{key}' must start and end with '\"', got {value!r}.",
            code="malformed_quoted_value",
        )


class ParseError(PropertiesError, ValueError):
    """Raw value could not be converted to the requested type."""
    def __init__(self, key: str, value: str, target: str):
        self.key = key
        self.value = value
        self.target = target
        super().__init__(
            f"Value of '{key}' is not a valid {target}: {value!r}.",
            code="parse_error",
        )


class NoListenersRegistered(PropertiesError):
    def __init__(self, message: str = "You must register a listener before using one."):
        super().__init__(message, code="no_listeners")


class IOFailure(PropertiesError, OSError):
    """Backing file (or its directory) could not be created, opened or read."""
    def __init__(self, message: str, path: Optional[Union[str, Path]] = None):
        self.path = str(path) if path is not None else None
        super().__init__(message, code="io_failure")

    def __str__(self) -> str:
        return self.message
