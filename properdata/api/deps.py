"""FastAPI dependencies for routes."""

import threading
from typing import Optional

from ..config import get_settings
from ..properties_file import PropertiesFile

_handle: Optional[PropertiesFile] = None
_handle_lock = threading.Lock()

# Sync endpoints run in a thread pool; one handle has one cursor.
lookup_lock = threading.Lock()


def get_properties_file() -> PropertiesFile:
    """Return the app-wide properties handle, opening it on first use. Use in Depends()."""
    global _handle
    with _handle_lock:
        if _handle is None or _handle.closed:
            _handle = PropertiesFile.from_settings(get_settings())
        return _handle


def close_properties_file() -> None:
    global _handle
    with _handle_lock:
        if _handle is not None:
            _handle.close()
            _handle = None
