"""
Dispenser server wiring using FastAPI.
"""

from __future__ import annotations

from pathlib import Path

from fastapi import FastAPI

from kitdispenser.common.config import Config
from kitdispenser.common.logging_utils import get_logger

from .assembler import ArchiveAssembler
from .identifier import IdentifierValidator
from .layout import StorageLayout
from .license_pool import FilesystemLicenseStore, LicensePool
from .payload import PayloadResolver
from .routes import DispenserRoutes
from .services import DispenserService


class DispenserServer:
    """Builds the dispenser components and exposes them as a FastAPI app."""

    def __init__(
        self,
        config: Config | None = None,
        log_level: int | None = None,
        server_host: str | None = None,
        server_port: int | None = None,
        base_dir: Path | None = None,
        candidate_order: str | None = None,
        ensure_layout: bool = True,  # noqa: FBT001, FBT002
    ):
        self.config = config or Config()
        self.logger = get_logger(
            __name__, log_level if log_level is not None else self.config.LOG_LEVEL
        )
        self.server_host = server_host or self.config.SERVER_HOST
        self.server_port = server_port or self.config.SERVER_PORT

        self.layout = StorageLayout(self.config, base_dir)
        if ensure_layout:
            self.layout.ensure()

        # Initialize components
        self.validator = IdentifierValidator(self.config)
        self.resolver = PayloadResolver(self.layout.devkit_dir)
        self.store = FilesystemLicenseStore(
            self.layout.available_dir,
            self.layout.used_dir,
            pattern=self.config.LICENSE_GLOB,
        )
        self.pool = LicensePool(
            self.store, order=candidate_order or self.config.CANDIDATE_ORDER
        )
        self.assembler = ArchiveAssembler(self.layout.builds_dir, self.config)
        self.service = DispenserService(
            validator=self.validator,
            resolver=self.resolver,
            pool=self.pool,
            assembler=self.assembler,
            builds_dir=self.layout.builds_dir,
            logger=self.logger,
        )

        self.app = FastAPI(title="kitdispenser")
        DispenserRoutes(self.service).setup_routes(self.app)

        self.logger.info("Dispenser serving from %s", self.layout.base_dir)
