"""
properdata configuration.
Single source of truth for environment and app settings.
"""

import os
from pathlib import Path
from typing import Literal

from dotenv import load_dotenv

from .repositories.file_lifecycle import DirectoryCreation, FileCreation, properties_path
from .separators import KeyValueSeparator

load_dotenv()


def get_settings():
    """Return app settings (use as FastAPI Depends or call directly)."""
    return Settings()


class Settings:
    """Application settings loaded from environment."""

    # App
    APP_TITLE: str = "properdata API"
    APP_VERSION: str = "1.0.0"
    LOG_LEVEL: str = "INFO"

    # Backing file: <PROPERDATA_DIR>/<PROPERDATA_NAME>.proper
    PROPERDATA_DIR: Path
    PROPERDATA_NAME: str = "properties"
    PROPERDATA_SEPARATOR: KeyValueSeparator = KeyValueSeparator.EQUALS

    # Lifecycle: "create" | "skip" and "plain" | "copy"
    PROPERDATA_DIRECTORY_CREATION: DirectoryCreation = DirectoryCreation.CREATE
    PROPERDATA_FILE_CREATION: FileCreation = FileCreation.PLAIN_ONLY

    # Key matching: "prefix" (line starts with key) | "exact" (key token before separator)
    PROPERDATA_KEY_MATCH: Literal["prefix", "exact"] = "prefix"

    def __init__(self):
        self.LOG_LEVEL = (os.environ.get("LOG_LEVEL") or "INFO").strip().upper()
        self.PROPERDATA_DIR = Path(os.environ.get("PROPERDATA_DIR", "data"))
        self.PROPERDATA_NAME = (os.environ.get("PROPERDATA_NAME") or "properties").strip()
        try:
            self.PROPERDATA_SEPARATOR = KeyValueSeparator.from_name(
                os.environ.get("PROPERDATA_SEPARATOR") or "EQUALS"
            )
        except ValueError:
            self.PROPERDATA_SEPARATOR = KeyValueSeparator.EQUALS
        dir_creation = (os.environ.get("PROPERDATA_DIRECTORY_CREATION") or "create").lower()
        self.PROPERDATA_DIRECTORY_CREATION = (
            DirectoryCreation.SKIP if dir_creation == "skip" else DirectoryCreation.CREATE
        )
        file_creation = (os.environ.get("PROPERDATA_FILE_CREATION") or "plain").lower()
        self.PROPERDATA_FILE_CREATION = (
            FileCreation.WITH_BACKUP_COPY if file_creation == "copy" else FileCreation.PLAIN_ONLY
        )
        key_match = (os.environ.get("PROPERDATA_KEY_MATCH") or "prefix").lower()
        self.PROPERDATA_KEY_MATCH = "exact" if key_match == "exact" else "prefix"

    @property
    def properties_path(self) -> Path:
        """Full path of the backing `.proper` file."""
        return properties_path(self.PROPERDATA_DIR, self.PROPERDATA_NAME)
