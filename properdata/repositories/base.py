"""Abstract interface for the file lifecycle collaborator."""

from pathlib import Path
from typing import Protocol, runtime_checkable


@runtime_checkable
class LifecycleProtocol(Protocol):
    """Makes sure the backing file (and optionally its backup copy) exists on disk."""

    def ensure_directory(self, directory: Path) -> Path: ...

    def ensure_file(self, path: Path) -> Path: ...

    def ensure_backup(self, path: Path) -> Path: ...
