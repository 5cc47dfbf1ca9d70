"""
Configuration settings for the dev kit dispenser.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path


class Config:
    """Central configuration class for all system settings."""

    def __init__(self) -> None:
        # Storage layout
        self.BASE_DIR: Path = Path(
            os.getenv("KITDISPENSER_BASE_DIR", str(Path.cwd()))
        )
        self.AVAILABLE_DIR: Path = self.BASE_DIR / "available"
        self.USED_DIR: Path = self.BASE_DIR / "used"
        self.BUILDS_DIR: Path = self.BASE_DIR / "builds"
        self.DEVKIT_DIR: Path = self.BASE_DIR / "dev-kit"
        self.DIR_MODE: int = 0o775

        # Identifier rules
        self.MAX_IDENTIFIER_LENGTH: int = 200  # Leaves room for ".zip" under NAME_MAX

        # License pool
        self.LICENSE_GLOB: str = os.getenv("KITDISPENSER_LICENSE_GLOB", "*")
        self.CANDIDATE_ORDER: str = os.getenv(
            "KITDISPENSER_CANDIDATE_ORDER", "lexical"
        )  # "lexical" or "random"

        # Build archives
        self.ARCHIVE_PREFIX: str = "devkit"
        self.DEVKIT_ARCHIVE_ROOT: str = "dev-kit"
        self.LICENSE_ARCHIVE_ROOT: str = "license"

        # Server settings
        self.SERVER_HOST: str = os.getenv("KITDISPENSER_SERVER_HOST", "127.0.0.1")
        self.SERVER_PORT: int = int(os.getenv("KITDISPENSER_SERVER_PORT", "8000"))
        self.SERVER_URL: str = f"http://{self.SERVER_HOST}:{self.SERVER_PORT}"
        self.REQUEST_TIMEOUT: float = 30.0

        # Logging
        self.LOG_LEVEL: int = logging.INFO
