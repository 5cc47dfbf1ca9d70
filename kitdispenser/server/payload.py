"""
Dev kit payload lookup.
"""

from __future__ import annotations

import logging
from pathlib import Path

from kitdispenser.common.exceptions import NotFound
from kitdispenser.common.models import ArchiveDevKit, DevKit, DirectoryDevKit


class PayloadResolver:
    """Finds the payload for a validated identifier under the dev kit root."""

    def __init__(self, devkit_dir: Path):
        self.devkit_dir = Path(devkit_dir)
        self.logger = logging.getLogger(__name__)

    def candidates(self, identifier: str) -> tuple[Path, Path]:
        """Directory and prebuilt archive locations for ``identifier``."""
        return (
            self.devkit_dir / identifier,
            self.devkit_dir / f"{identifier}.zip",
        )

    def resolve(self, identifier: str) -> DevKit:
        directory, archive = self.candidates(identifier)
        if directory.is_dir():
            self.logger.debug("Dev kit %s resolved to folder %s", identifier, directory)
            return DirectoryDevKit(identifier=identifier, root=directory)
        if archive.is_file():
            self.logger.debug("Dev kit %s resolved to zip %s", identifier, archive)
            return ArchiveDevKit(identifier=identifier, path=archive)
        self.logger.info("Dev kit %s not found", identifier)
        msg = f"Dev kit not found as folder ({directory}) or zip ({archive})"
        raise NotFound(msg, (directory, archive))
