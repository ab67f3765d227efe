"""
Store handle over a line-oriented `.proper` file.

Each line is `<key><separator><value>`. Every lookup scans the file from the
top and rewinds the stream afterwards, whatever the outcome, so no lookup
sees a cursor left over by a previous one. The core never writes.

A handle is not safe for concurrent lookups: share it across threads only
behind a lock, or open one handle per thread.
"""

import logging
import re
import struct
from enum import Enum
from pathlib import Path
from typing import IO, Any, Callable, Iterator, Optional, TypeVar, Union

from .errors import (
    InvalidKey,
    IOFailure,
    KeyNotFound,
    MalformedQuotedValue,
    ParseError,
)
from .listeners import ListenerKind, ListenerRegistry
from .repositories.base import LifecycleProtocol
from .repositories.file_lifecycle import (
    DirectoryCreation,
    FileCreation,
    FileLifecycle,
    properties_path,
)
from .separators import KeyValueSeparator

logger = logging.getLogger(__name__)

T = TypeVar("T")

QUOTE = '"'
INT_MIN = -(2 ** 31)
INT_MAX = 2 ** 31 - 1
_INTEGER = re.compile(r"[+-]?[0-9]+")
_BOM = "\ufeff"


class KeyMatch(Enum):
    """How a line is matched against a requested key."""

    # Line text starts with the key ("host" also matches "hostname=...")
    PREFIX = "prefix"
    # Text before the first separator equals the key
    EXACT = "exact"


def parse_boolean(text: str) -> bool:
    """Case-insensitive "true" is True; any other text is False."""
    return text.lower() == "true"


def parse_int32(text: str) -> int:
    """Optionally signed decimal digits within the 32-bit signed range, nothing else."""
    if not _INTEGER.fullmatch(text):
        raise ValueError(f"invalid integer literal: {text!r}")
    value = int(text)
    if not INT_MIN <= value <= INT_MAX:
        raise ValueError(f"integer out of 32-bit range: {text!r}")
    return value


def parse_double(text: str) -> float:
    """float() without digit-grouping underscores."""
    if "_" in text:
        raise ValueError(f"invalid floating point literal: {text!r}")
    return float(text)


def parse_float32(text: str) -> float:
    """parse_double() rounded to IEEE single precision."""
    value = parse_double(text)
    try:
        return struct.unpack("f", struct.pack("f", value))[0]
    except OverflowError:
        return float("inf") if value > 0 else float("-inf")


class PropertiesFile:
    """Read-only, file-backed key/value lookups with typed extraction and listeners."""

    def __init__(
        self,
        path: Union[str, Path],
        separator: KeyValueSeparator = KeyValueSeparator.EQUALS,
        registry: Optional[ListenerRegistry] = None,
        key_match: KeyMatch = KeyMatch.PREFIX,
        encoding: str = "utf-8",
    ):
        self._path = Path(path)
        self._separator = separator
        self._key_match = key_match
        self._encoding = encoding
        self.registry = registry if registry is not None else ListenerRegistry()
        self._stream: Optional[IO[str]] = None
        self._open()

    @classmethod
    def create(
        cls,
        directory: Union[str, Path],
        name: str,
        separator: KeyValueSeparator = KeyValueSeparator.EQUALS,
        file_creation: FileCreation = FileCreation.PLAIN_ONLY,
        directory_creation: DirectoryCreation = DirectoryCreation.CREATE,
        lifecycle: Optional[LifecycleProtocol] = None,
        **kwargs: Any,
    ) -> "PropertiesFile":
        """
        Make sure `<directory>/<name>.proper` exists (plus its backup copy when
        requested), then open a handle on it.
        """
        if lifecycle is None:
            lifecycle = FileLifecycle(directory_creation, file_creation)
        path = lifecycle.ensure_file(properties_path(directory, name))
        return cls(path, separator=separator, **kwargs)

    @classmethod
    def from_settings(cls, settings, registry: Optional[ListenerRegistry] = None) -> "PropertiesFile":
        return cls.create(
            settings.PROPERDATA_DIR,
            settings.PROPERDATA_NAME,
            separator=settings.PROPERDATA_SEPARATOR,
            file_creation=settings.PROPERDATA_FILE_CREATION,
            directory_creation=settings.PROPERDATA_DIRECTORY_CREATION,
            registry=registry,
            key_match=KeyMatch(settings.PROPERDATA_KEY_MATCH),
        )

    # ── Handle ────────────────────────────────────────────────────────────

    @property
    def path(self) -> Path:
        return self._path

    @property
    def name(self) -> str:
        return self._path.name

    @property
    def separator(self) -> KeyValueSeparator:
        return self._separator

    @property
    def key_match(self) -> KeyMatch:
        return self._key_match

    @property
    def closed(self) -> bool:
        return self._stream is None

    def _open(self) -> None:
        try:
            self._stream = open(self._path, "r", encoding=self._encoding, newline="")
        except OSError as exc:
            raise IOFailure(f"Could not open {self._path}: {exc}", self._path) from exc
        logger.info("Opened properties file %s (separator %r)", self._path, self._separator.token)

    def _rewind(self) -> None:
        if self._stream is None:
            return
        try:
            self._stream.seek(0)
        except OSError as exc:
            raise IOFailure(f"Could not rewind {self._path}: {exc}", self._path) from exc

    def close(self) -> None:
        if self._stream is not None:
            self._stream.close()
            self._stream = None
            logger.info("Closed properties file %s", self._path)

    def __enter__(self) -> "PropertiesFile":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def __repr__(self) -> str:
        return f"PropertiesFile({str(self._path)!r}, separator={self._separator.name})"

    # ── Line scanning ─────────────────────────────────────────────────────

    def _lines(self) -> Iterator[str]:
        """Lines from the top of the file, line endings stripped. Always rewinds."""
        if self._stream is None:
            raise IOFailure(f"Properties file {self._path} is closed.", self._path)
        try:
            first = True
            while True:
                try:
                    line = self._stream.readline()
                except (OSError, UnicodeDecodeError) as exc:
                    raise IOFailure(f"Could not read {self._path}: {exc}", self._path) from exc
                if not line:
                    return
                line = line.rstrip("\r\n")
                if first:
                    line = line.lstrip(_BOM)
                    first = False
                yield line
        finally:
            self._rewind()

    @staticmethod
    def _check_key(key: str) -> None:
        if key == "":
            raise InvalidKey("You must set a valid key.")
        if key.startswith(" "):
            raise InvalidKey("Your key can't start with ' '.")

    def _matches(self, line: str, key: str) -> bool:
        token = self._separator.token
        if self._key_match is KeyMatch.EXACT:
            return line.partition(token)[0] == key
        return line.startswith(key)

    def find_line(self, key: str) -> str:
        """
        Raw value of the first line matching `key`: everything after the first
        separator, separators inside the value included.
        Raises KeyNotFound when no line starting with the key holds the separator.
        """
        self._check_key(key)
        token = self._separator.token
        lines = self._lines()
        try:
            for line in lines:
                if not self._matches(line, key) or token not in line:
                    continue
                _, _, value = line.partition(token)
                logger.debug("Found '%s' in %s", key, self._path)
                return value
        finally:
            lines.close()
        logger.debug("Key '%s' not found in %s", key, self._path)
        raise KeyNotFound(key, token)

    def keys(self) -> list[str]:
        """Key part of every line holding the separator, in file order."""
        token = self._separator.token
        return [line.partition(token)[0] for line in self._lines() if token in line]

    def contains(self, key: str) -> bool:
        try:
            self.find_line(key)
        except KeyNotFound:
            return False
        return True

    def __contains__(self, key: str) -> bool:
        return self.contains(key)

    def is_empty(self) -> bool:
        """True when the file holds no non-blank line."""
        lines = self._lines()
        try:
            return not any(line.strip() for line in lines)
        finally:
            lines.close()

    # ── Typed getters ─────────────────────────────────────────────────────

    def get_string_raw(self, key: str) -> str:
        return self.find_line(key)

    def get_string(self, key: str) -> str:
        """Value wrapped in double quotes, returned with one quote stripped at each end."""
        value = self.find_line(key)
        if len(value) >= 2 and value.startswith(QUOTE) and value.endswith(QUOTE):
            return value[1:-1]
        raise MalformedQuotedValue(key, value)

    def _parse(self, key: str, convert: Callable[[str], T], target: str) -> T:
        value = self.find_line(key)
        try:
            return convert(value)
        except ValueError as exc:
            raise ParseError(key, value, target) from exc

    def get_integer(self, key: str) -> int:
        return self._parse(key, parse_int32, "integer")

    def get_double(self, key: str) -> float:
        return self._parse(key, parse_double, "double")

    def get_float(self, key: str) -> float:
        return self._parse(key, parse_float32, "float")

    def get_boolean(self, key: str) -> bool:
        return parse_boolean(self.find_line(key))

    # ── Reads with listener dispatch ──────────────────────────────────────

    def _read_and_dispatch(self, key: str, kind: ListenerKind, getter: Callable[[str], Any]) -> None:
        self.registry.ensure_not_empty()
        value = getter(key)
        self.registry.dispatch(kind, key, value)

    def get_string_with_listener(self, key: str) -> None:
        self._read_and_dispatch(key, ListenerKind.STRING, self.get_string)

    def get_integer_with_listener(self, key: str) -> None:
        self._read_and_dispatch(key, ListenerKind.INTEGER, self.get_integer)

    def get_double_with_listener(self, key: str) -> None:
        self._read_and_dispatch(key, ListenerKind.DOUBLE, self.get_double)

    def get_float_with_listener(self, key: str) -> None:
        self._read_and_dispatch(key, ListenerKind.FLOAT, self.get_float)

    def get_boolean_with_listener(self, key: str) -> None:
        self._read_and_dispatch(key, ListenerKind.BOOLEAN, self.get_boolean)
