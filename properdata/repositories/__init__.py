"""File lifecycle layer: abstract interface and implementation."""

from .base import LifecycleProtocol
from .file_lifecycle import (
    BACKUP_PREFIX,
    FILE_EXTENSION,
    DirectoryCreation,
    FileCreation,
    FileLifecycle,
    backup_path,
    properties_path,
)

__all__ = [
    "LifecycleProtocol",
    "FileLifecycle",
    "DirectoryCreation",
    "FileCreation",
    "FILE_EXTENSION",
    "BACKUP_PREFIX",
    "properties_path",
    "backup_path",
]
