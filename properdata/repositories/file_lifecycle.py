"""
File-based implementation of LifecycleProtocol.
Creates the data directory, the `.proper` file and its `copy-` sibling before any read.
"""

import logging
import threading
from enum import Enum
from pathlib import Path
from typing import Union

from ..errors import IOFailure

logger = logging.getLogger(__name__)

FILE_EXTENSION = ".proper"
BACKUP_PREFIX = "copy-"


class DirectoryCreation(Enum):
    CREATE = "create"
    SKIP = "skip"


class FileCreation(Enum):
    PLAIN_ONLY = "plain"
    WITH_BACKUP_COPY = "copy"


def properties_path(directory: Union[str, Path], name: str) -> Path:
    """`<directory>/<name>.proper`"""
    return Path(directory) / f"{name}{FILE_EXTENSION}"


def backup_path(path: Union[str, Path]) -> Path:
    path = Path(path)
    return path.with_name(f"{BACKUP_PREFIX}{path.name}")


class FileLifecycle:
    """Directory, file and backup creation bookkeeping."""

    def __init__(
        self,
        directory_creation: DirectoryCreation = DirectoryCreation.CREATE,
        file_creation: FileCreation = FileCreation.PLAIN_ONLY,
    ):
        self.directory_creation = directory_creation
        self.file_creation = file_creation
        self._lock = threading.Lock()

    def ensure_directory(self, directory: Union[str, Path]) -> Path:
        directory = Path(directory)
        if directory.is_dir():
            logger.info("No directory created, %s already exists.", directory)
            return directory
        if self.directory_creation is DirectoryCreation.SKIP:
            raise IOFailure(
                f"Directory {directory} does not exist and directory creation is skipped.",
                directory,
            )
        try:
            directory.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            raise IOFailure(f"Could not create directory {directory}: {exc}", directory) from exc
        logger.info("The directory %s has been created.", directory)
        return directory

    def ensure_file(self, path: Union[str, Path]) -> Path:
        path = Path(path)
        self.ensure_directory(path.parent)
        self._touch(path, "file")
        if self.file_creation is FileCreation.WITH_BACKUP_COPY:
            self.ensure_backup(path)
        return path

    def ensure_backup(self, path: Union[str, Path]) -> Path:
        copy = backup_path(path)
        self._touch(copy, "copy file")
        return copy

    def _touch(self, path: Path, what: str) -> None:
        with self._lock:
            if path.exists():
                logger.info("No %s created, %s already exists.", what, path)
                return
            try:
                path.touch(exist_ok=True)
            except OSError as exc:
                raise IOFailure(f"Could not create {what} {path}: {exc}", path) from exc
        logger.info("The %s %s has been created.", what, path)
