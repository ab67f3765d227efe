"""
Typed read listeners and the registry that dispatches to them.

A listener declares the kind of value it handles. After a successful
`get_*_with_listener` read the registry invokes, in registration order,
every listener whose kind matches the value just read.
"""

import logging
import threading
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterator, Optional

from .errors import NoListenersRegistered

logger = logging.getLogger(__name__)


class ListenerKind(Enum):
    STRING = "string"
    INTEGER = "integer"
    DOUBLE = "double"
    FLOAT = "float"
    BOOLEAN = "boolean"


@dataclass(frozen=True)
class Listener:
    kind: ListenerKind
    callback: Callable[[str, Any], None]
    name: Optional[str] = None

    def __call__(self, key: str, value: Any) -> None:
        self.callback(key, value)

    @property
    def label(self) -> str:
        return self.name or getattr(self.callback, "__name__", repr(self.callback))


def string_listener(fn: Callable[[str, str], None], name: Optional[str] = None) -> Listener:
    return Listener(ListenerKind.STRING, fn, name)


def integer_listener(fn: Callable[[str, int], None], name: Optional[str] = None) -> Listener:
    return Listener(ListenerKind.INTEGER, fn, name)


def double_listener(fn: Callable[[str, float], None], name: Optional[str] = None) -> Listener:
    return Listener(ListenerKind.DOUBLE, fn, name)


def float_listener(fn: Callable[[str, float], None], name: Optional[str] = None) -> Listener:
    return Listener(ListenerKind.FLOAT, fn, name)


def boolean_listener(fn: Callable[[str, bool], None], name: Optional[str] = None) -> Listener:
    return Listener(ListenerKind.BOOLEAN, fn, name)


class ListenerRegistry:
    """Ordered, append-only collection of typed listeners."""

    def __init__(self):
        self._listeners: list[Listener] = []
        self._lock = threading.Lock()

    def register(self, listener: Listener) -> Listener:
        if not isinstance(listener, Listener):
            raise TypeError(f"Expected a Listener, got {type(listener).__name__}")
        with self._lock:
            self._listeners.append(listener)
        logger.debug("Registered %s listener %s", listener.kind.value, listener.label)
        return listener

    def on(self, kind: ListenerKind) -> Callable[[Callable[[str, Any], None]], Callable[[str, Any], None]]:
        """Decorator form of register(): @registry.on(ListenerKind.INTEGER)."""
        def decorator(fn: Callable[[str, Any], None]) -> Callable[[str, Any], None]:
            self.register(Listener(kind, fn))
            return fn
        return decorator

    @property
    def listeners(self) -> tuple[Listener, ...]:
        with self._lock:
            return tuple(self._listeners)

    def __len__(self) -> int:
        return len(self._listeners)

    def __bool__(self) -> bool:
        return bool(self._listeners)

    def __iter__(self) -> Iterator[Listener]:
        return iter(self.listeners)

    def clear(self) -> None:
        with self._lock:
            self._listeners.clear()

    def ensure_not_empty(self) -> None:
        if not self._listeners:
            raise NoListenersRegistered()

    def dispatch(self, kind: ListenerKind, key: str, value: Any) -> int:
        """
        Invoke every listener tagged `kind` with (key, value), in registration order.
        Listener exceptions propagate and stop the remaining invocations.
        Returns the number of listeners invoked.
        """
        invoked = 0
        for listener in self.listeners:
            if listener.kind is not kind:
                continue
            listener(key, value)
            invoked += 1
        logger.debug("Dispatched %s '%s' to %d listener(s)", kind.value, key, invoked)
        return invoked
