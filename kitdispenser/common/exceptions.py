"""
Custom exceptions for the dev kit dispenser.
"""

from __future__ import annotations

from pathlib import Path


class DispenserError(Exception):
    """Base exception for failures surfaced to the requester."""

    status_code: int = 500
    code: str = "error"

    def __init__(self, message: str, status_code: int | None = None) -> None:
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class InvalidInput(DispenserError):
    """The identifier is missing or fails the character-class check."""

    status_code = 400
    code = "invalid_input"

    def __init__(self, message: str, reason: str = "malformed") -> None:
        super().__init__(message)
        self.reason = reason


class NotFound(DispenserError):
    """The requested dev kit or build does not exist."""

    status_code = 404
    code = "not_found"

    def __init__(self, message: str, paths: tuple[Path, ...] = ()) -> None:
        super().__init__(message)
        self.paths = paths


class PoolExhausted(DispenserError):
    """No claimable license remains for the platform."""

    code = "pool_exhausted"

    def __init__(self, platform: str) -> None:
        super().__init__("No available license files.")
        self.platform = platform


class ReservationFailed(DispenserError):
    """A non-race I/O fault happened while claiming a license."""

    code = "reservation_failed"


class ReleaseFailed(DispenserError):
    """A used license could not be returned to its available bucket."""

    code = "release_failed"


class BuildFailed(DispenserError):
    """The output archive could not be created, populated or finalized."""

    code = "build_failed"

    def __init__(self, message: str, path: Path | None = None) -> None:
        super().__init__(message)
        self.path = path
