"""
HTTP client for the dispenser server.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any

import requests

from kitdispenser.common.config import Config
from kitdispenser.common.logging_utils import get_logger
from kitdispenser.common.models import DispenseResponse, ErrorResponse

CHUNK_SIZE = 64 * 1024


class DispenserClientError(Exception):
    """Raised when the server answers a request with an error."""

    def __init__(self, message: str, status_code: int, code: str = "error") -> None:
        super().__init__(message)
        self.status_code = status_code
        self.code = code


class DispenserClient:
    """Requests dev kit bundles from a dispenser server."""

    def __init__(
        self,
        server_url: str | None = None,
        timeout: float | None = None,
        log_level: int | None = None,
        session: requests.Session | None = None,
    ):
        config = Config()
        self.server_url = (server_url or config.SERVER_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else config.REQUEST_TIMEOUT
        self.session = session or requests.Session()
        self.logger = get_logger(
            __name__, log_level if log_level is not None else config.LOG_LEVEL
        )

    @staticmethod
    def _raise_for_error(r: requests.Response) -> None:
        if r.status_code < 400:
            return
        try:
            body = ErrorResponse.model_validate(r.json())
        except ValueError:
            raise DispenserClientError(
                f"{r.status_code} error from server", r.status_code
            ) from None
        raise DispenserClientError(body.error, r.status_code, body.code)

    def health(self) -> dict[str, Any]:
        r = self.session.get(f"{self.server_url}/health", timeout=self.timeout)
        r.raise_for_status()
        return r.json()

    def dispense(self, slug: str) -> DispenseResponse:
        """Ask the server to build a bundle for ``slug``."""
        self.logger.info("Requesting dev kit %s", slug)
        r = self.session.get(
            f"{self.server_url}/dispense",
            params={"slug": slug},
            timeout=self.timeout,
        )
        self._raise_for_error(r)
        resp = DispenseResponse.model_validate(r.json())
        self.logger.info("Server built %s", resp.zip_name)
        return resp

    def download(self, zip_name: str, dest_dir: Path) -> Path:
        """Stream a finished build into ``dest_dir``."""
        dest = Path(dest_dir) / zip_name
        with self.session.get(
            f"{self.server_url}/builds/{zip_name}",
            stream=True,
            timeout=self.timeout,
        ) as r:
            self._raise_for_error(r)
            dest.parent.mkdir(parents=True, exist_ok=True)
            with dest.open("wb") as f:
                for chunk in r.iter_content(chunk_size=CHUNK_SIZE):
                    f.write(chunk)
        self.logger.info("Downloaded %s to %s", zip_name, dest)
        return dest

    def fetch(self, slug: str, dest_dir: Path) -> Path:
        """Dispense and download in one step."""
        return self.download(self.dispense(slug).zip_name, dest_dir)
