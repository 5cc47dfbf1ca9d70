"""
Directory layout shared by the pool, the payload resolver and the builds.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kitdispenser.common.config import Config

logger = logging.getLogger(__name__)


class StorageLayout:
    """Concrete directories for one dispenser deployment."""

    def __init__(
        self,
        config: Config | None = None,
        base_dir: Path | None = None,
    ):
        self.config = config or Config()
        base = Path(base_dir) if base_dir is not None else self.config.BASE_DIR
        if base_dir is None:
            self.available_dir = self.config.AVAILABLE_DIR
            self.used_dir = self.config.USED_DIR
            self.builds_dir = self.config.BUILDS_DIR
            self.devkit_dir = self.config.DEVKIT_DIR
        else:
            self.available_dir = base / "available"
            self.used_dir = base / "used"
            self.builds_dir = base / "builds"
            self.devkit_dir = base / "dev-kit"
        self.base_dir = base

    def directories(self) -> list[Path]:
        return [self.available_dir, self.used_dir, self.builds_dir, self.devkit_dir]

    def ensure(self) -> None:
        """Create any missing layout directory."""
        for directory in self.directories():
            if not directory.is_dir():
                directory.mkdir(mode=self.config.DIR_MODE, parents=True, exist_ok=True)
                logger.info("Created %s", directory)
