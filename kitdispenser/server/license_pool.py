"""
Platform-scoped license pool backed by the filesystem.

Licenses live in ``available/<platform>/`` until claimed, then in the flat
``used/`` directory. A claim is a single ``os.rename`` from one to the
other; that rename is the only coordination point between concurrent
reservations, which may run in different threads, processes or hosts
sharing the same directories.
"""

from __future__ import annotations

import logging
import os
import random
from pathlib import Path

from kitdispenser.common.exceptions import (
    PoolExhausted,
    ReleaseFailed,
    ReservationFailed,
)
from kitdispenser.common.interfaces import ClaimOutcome, ILicenseStore
from kitdispenser.common.models import License, PoolStatus

CANDIDATE_ORDERS = ("lexical", "random")


class FilesystemLicenseStore:
    """Available/used buckets as directories, claims as atomic renames."""

    def __init__(self, available_dir: Path, used_dir: Path, pattern: str = "*"):
        self.available_dir = Path(available_dir)
        self.used_dir = Path(used_dir)
        self.pattern = pattern
        self.logger = logging.getLogger(__name__)

    def bucket(self, platform: str) -> Path:
        """Available bucket for ``platform``; "" is the available root."""
        return self.available_dir / platform if platform else self.available_dir

    def list_available(self, platform: str) -> list[Path]:
        """Unordered license files currently in the platform bucket."""
        bucket = self.bucket(platform)
        try:
            return [path for path in bucket.glob(self.pattern) if path.is_file()]
        except FileNotFoundError:
            return []
        except OSError as err:
            msg = f"Could not list license files in {bucket}."
            raise ReservationFailed(msg) from err

    def list_platforms(self) -> list[str]:
        if not self.available_dir.is_dir():
            return []
        return sorted(p.name for p in self.available_dir.iterdir() if p.is_dir())

    def list_used(self) -> list[Path]:
        if not self.used_dir.is_dir():
            return []
        return [p for p in self.used_dir.iterdir() if p.is_file()]

    def used_path(self, filename: str) -> Path:
        return self.used_dir / filename

    def claim(self, candidate: Path) -> ClaimOutcome:
        """Move ``candidate`` into the used bucket.

        Returns ``LOST_RACE`` when the candidate disappeared before the
        rename, which means another reservation claimed it.
        """
        target = self.used_path(candidate.name)
        if target.exists():
            if not candidate.exists():
                return ClaimOutcome.LOST_RACE
            # os.rename would silently replace the existing used entry
            msg = f"License {candidate.name} is already in the used directory."
            raise ReservationFailed(msg)
        try:
            os.rename(candidate, target)
        except FileNotFoundError as err:
            if not candidate.exists():
                return ClaimOutcome.LOST_RACE
            msg = "Could not move license to used directory."
            raise ReservationFailed(msg) from err
        except OSError as err:
            msg = "Could not move license to used directory."
            raise ReservationFailed(msg) from err
        return ClaimOutcome.CLAIMED

    def unclaim(self, filename: str, platform: str) -> Path:
        """Move a used license back into its platform bucket."""
        source = self.used_path(filename)
        target = self.bucket(platform) / filename
        if target.exists():
            msg = f"License {filename} is already available for '{platform}'."
            raise ReleaseFailed(msg)
        try:
            os.rename(source, target)
        except OSError as err:
            msg = f"Could not return license {filename} to the available directory."
            raise ReleaseFailed(msg) from err
        return target


class LicensePool:
    """Race-safe reservation of single-use licenses."""

    def __init__(
        self,
        store: ILicenseStore,
        order: str = "lexical",
        rng: random.Random | None = None,
    ):
        if order not in CANDIDATE_ORDERS:
            msg = f"Unknown candidate order '{order}', expected one of {CANDIDATE_ORDERS}"
            raise ValueError(msg)
        self.store = store
        self.order = order
        self.rng = rng or random.Random()
        self.logger = logging.getLogger(__name__)

    def candidates(self, platform: str) -> list[Path]:
        """Claim order for the platform bucket.

        Directory listings carry no meaningful order, so one is imposed
        here: ``lexical`` sorts by filename, ``random`` shuffles per call.
        Under ``lexical`` every concurrent caller starts on the same file and
        all but one lose that race; ``random`` spreads callers across the
        bucket at the cost of a reproducible claim order.
        """
        found = self.store.list_available(platform)
        if self.order == "random":
            self.rng.shuffle(found)
            return found
        return sorted(found, key=lambda p: p.name)

    def reserve(self, platform: str) -> License:
        """Claim one available license for ``platform``."""
        candidates = self.candidates(platform)
        self.logger.debug(
            "%d license candidate(s) for platform '%s'", len(candidates), platform
        )
        for candidate in candidates:
            if self.store.claim(candidate) is ClaimOutcome.LOST_RACE:
                self.logger.debug("Lost race for %s, trying next", candidate.name)
                continue
            used = self.store.used_path(candidate.name)
            try:
                content = used.read_bytes()
            except OSError as err:
                self.logger.error(
                    "License %s claimed but unreadable at %s", candidate.name, used
                )
                msg = "Could not read license file."
                raise ReservationFailed(msg) from err
            self.logger.info(
                "Reserved license %s for platform '%s'", candidate.name, platform
            )
            return License(
                filename=candidate.name,
                platform=platform,
                content=content,
                path=used,
            )
        self.logger.warning("License pool exhausted for platform '%s'", platform)
        raise PoolExhausted(platform)

    def release(self, lic: License) -> Path:
        """Return a claimed license to the available bucket it came from."""
        path = self.store.unclaim(lic.filename, lic.platform)
        self.logger.info(
            "Released license %s back to platform '%s'", lic.filename, lic.platform
        )
        return path

    def status(self) -> PoolStatus:
        available = {"": len(self.store.list_available(""))}
        for platform in self.store.list_platforms():
            available[platform] = len(self.store.list_available(platform))
        return PoolStatus(available=available, used=len(self.store.list_used()))
