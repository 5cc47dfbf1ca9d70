"""
Build archive assembly.
"""

from __future__ import annotations

import logging
import uuid
import zipfile
from pathlib import Path

from kitdispenser.common.config import Config
from kitdispenser.common.exceptions import BuildFailed
from kitdispenser.common.models import (
    ArchiveHandle,
    DevKit,
    DirectoryDevKit,
    License,
)


class ArchiveAssembler:
    """Packs a dev kit payload and one reserved license into a new zip."""

    def __init__(
        self,
        builds_dir: Path,
        config: Config | None = None,
        compression: int = zipfile.ZIP_DEFLATED,
    ):
        self.config = config or Config()
        self.builds_dir = Path(builds_dir)
        self.compression = compression
        self.devkit_root = self.config.DEVKIT_ARCHIVE_ROOT
        self.license_root = self.config.LICENSE_ARCHIVE_ROOT
        self.logger = logging.getLogger(__name__)

    def generate_name(self, identifier: str) -> str:
        """Unique archive name; uuid4 keeps concurrent requests apart."""
        return f"{self.config.ARCHIVE_PREFIX}_{identifier}_{uuid.uuid4().hex}.zip"

    def _payload_entries(self, devkit: DevKit) -> list[tuple[Path, str]]:
        if isinstance(devkit, DirectoryDevKit):
            files = sorted(p for p in devkit.root.rglob("*") if not p.is_dir())
            return [
                (p, f"{self.devkit_root}/{p.relative_to(devkit.root).as_posix()}")
                for p in files
            ]
        # Prebuilt archives are embedded as a single opaque entry
        return [(devkit.path, f"{self.devkit_root}/{devkit.path.name}")]

    def assemble(
        self, devkit: DevKit, lic: License, output_dir: Path | None = None
    ) -> ArchiveHandle:
        """Write the build archive and return a handle to it."""
        out_dir = Path(output_dir) if output_dir is not None else self.builds_dir
        name = self.generate_name(devkit.identifier)
        path = out_dir / name

        try:
            archive = zipfile.ZipFile(path, "x", compression=self.compression)
        except (OSError, zipfile.BadZipFile) as err:
            msg = "Could not create ZIP file."
            raise BuildFailed(msg, path) from err

        entries: list[str] = []
        try:
            with archive:
                for source, arcname in self._payload_entries(devkit):
                    archive.write(source, arcname)
                    entries.append(arcname)
                arcname = f"{self.license_root}/{lic.filename}"
                archive.write(lic.path, arcname)
                entries.append(arcname)
        except (OSError, ValueError, zipfile.BadZipFile, zipfile.LargeZipFile) as err:
            self.logger.error("Build of %s failed, partial archive left in place", name)
            msg = f"Could not write ZIP file {name}."
            raise BuildFailed(msg, path) from err

        self.logger.info(
            "Built %s with %d dev kit entries and license %s",
            name,
            len(entries) - 1,
            lic.filename,
        )
        return ArchiveHandle(
            name=name, path=path, entries=entries, license_filename=lic.filename
        )
