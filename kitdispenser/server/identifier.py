"""
Validation of requested kit identifiers.

The identifier is the only untrusted value that ever reaches path
construction, so every path join downstream must use the value returned
by ``IdentifierValidator.validate``.
"""

from __future__ import annotations

import logging
import re

from kitdispenser.common.config import Config
from kitdispenser.common.exceptions import InvalidInput

SAFE_NAME = re.compile(r"[A-Za-z0-9._-]+")
DOT_SEGMENTS = frozenset({".", ".."})


class IdentifierValidator:
    """Validates identifiers and derives their platform tag."""

    def __init__(self, config: Config | None = None):
        self.config = config or Config()
        self.max_length = self.config.MAX_IDENTIFIER_LENGTH
        self.logger = logging.getLogger(__name__)

    @staticmethod
    def is_safe_name(name: str | None) -> bool:
        """True when ``name`` is usable as a single path component."""
        return (
            bool(name)
            and SAFE_NAME.fullmatch(name) is not None
            and name not in DOT_SEGMENTS
        )

    @staticmethod
    def derive_platform(identifier: str) -> str:
        """Second hyphen-delimited segment, or "" when there is none."""
        parts = identifier.split("-")
        return parts[1] if len(parts) > 1 else ""

    def validate(self, raw: str | None) -> str:
        if not raw:
            raise InvalidInput("Missing slug parameter.", reason="missing")
        if (
            not self.is_safe_name(raw)
            or len(raw) > self.max_length
            or self.derive_platform(raw) in DOT_SEGMENTS
        ):
            self.logger.info("Rejected identifier %r", raw)
            raise InvalidInput("Invalid slug format.", reason="malformed")
        return raw
