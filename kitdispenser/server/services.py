"""Business logic services for the dispenser server.
"""

from __future__ import annotations

import time
from pathlib import Path
from typing import TYPE_CHECKING, Any

from kitdispenser.common.exceptions import BuildFailed, NotFound
from kitdispenser.common.models import DispenseResponse

if TYPE_CHECKING:
    import logging

    from kitdispenser.common.interfaces import (
        IArchiveAssembler,
        ILicensePool,
        IPayloadResolver,
    )
    from kitdispenser.common.models import ArchiveHandle, PoolStatus
    from kitdispenser.server.identifier import IdentifierValidator


class DispenserService:
    """Runs the validate, resolve, reserve, assemble pipeline per request."""

    def __init__(
        self,
        validator: IdentifierValidator,
        resolver: IPayloadResolver,
        pool: ILicensePool,
        assembler: IArchiveAssembler,
        builds_dir: Path,
        logger: logging.Logger,
    ):
        self.validator = validator
        self.resolver = resolver
        self.pool = pool
        self.assembler = assembler
        self.builds_dir = Path(builds_dir)
        self.logger = logger

    def health(self) -> dict[str, Any]:
        """Health check endpoint."""
        return {"status": "ok", "timestamp": int(time.time())}

    def build(self, raw: str | None) -> ArchiveHandle:
        """Dispense one bundle and return the handle of the built archive."""
        identifier = self.validator.validate(raw)
        platform = self.validator.derive_platform(identifier)

        # Payload first, so a missing kit never consumes a license
        devkit = self.resolver.resolve(identifier)
        lic = self.pool.reserve(platform)

        try:
            handle = self.assembler.assemble(devkit, lic)
        except BuildFailed:
            self.logger.warning(
                "License %s stays used without a delivered archive for %s",
                lic.filename,
                identifier,
            )
            raise

        self.logger.info("Dispensed %s to %s", handle.name, identifier)
        return handle

    def dispense(self, raw: str | None) -> DispenseResponse:
        return DispenseResponse(zip_name=self.build(raw).name)

    def pool_status(self) -> PoolStatus:
        return self.pool.status()

    def build_path(self, zip_name: str) -> Path:
        """Location of a finished build; only plain archive names are served."""
        if not self.validator.is_safe_name(zip_name) or not zip_name.endswith(".zip"):
            raise NotFound(f"Build {zip_name} not found.")
        path = self.builds_dir / zip_name
        if not path.is_file():
            raise NotFound(f"Build {zip_name} not found.", (path,))
        return path
