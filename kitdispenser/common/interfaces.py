"""
Interfaces and protocols for dependency injection.
"""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Protocol

from kitdispenser.common.models import ArchiveHandle, DevKit, License, PoolStatus


class ClaimOutcome(enum.Enum):
    """Result of a single atomic claim attempt."""

    CLAIMED = "claimed"
    LOST_RACE = "lost_race"


class ILicenseStore(Protocol):
    """Protocol for the shared storage behind the license pool.

    ``claim`` is the only concurrency primitive: it either moves the
    candidate into the used bucket or reports that another caller got
    there first. Faults are raised as ``ReservationFailed``.
    """

    def list_available(self, platform: str) -> list[Path]: ...

    def list_platforms(self) -> list[str]: ...

    def list_used(self) -> list[Path]: ...

    def used_path(self, filename: str) -> Path: ...

    def claim(self, candidate: Path) -> ClaimOutcome: ...

    def unclaim(self, filename: str, platform: str) -> Path: ...


class ILicensePool(Protocol):
    """Protocol for license reservation."""

    def reserve(self, platform: str) -> License: ...

    def release(self, lic: License) -> Path: ...

    def status(self) -> PoolStatus: ...


class IPayloadResolver(Protocol):
    """Protocol for locating dev kit payloads."""

    def resolve(self, identifier: str) -> DevKit: ...


class IArchiveAssembler(Protocol):
    """Protocol for building output archives."""

    def assemble(
        self, devkit: DevKit, lic: License, output_dir: Path | None = None
    ) -> ArchiveHandle: ...
