"""
Routes for the dispenser server.
"""

from typing import Any

from fastapi import FastAPI
from fastapi.responses import FileResponse, JSONResponse

from kitdispenser.common.exceptions import DispenserError
from kitdispenser.common.models import DispenseResponse, ErrorResponse, PoolStatus

from .services import DispenserService


def error_response(error: DispenserError) -> JSONResponse:
    """Structured JSON body for a failed request."""
    body = ErrorResponse(error=str(error), code=error.code)
    return JSONResponse(status_code=error.status_code, content=body.model_dump())


class DispenserRoutes:
    """Handles FastAPI routes for the dispenser server."""

    def __init__(self, service: DispenserService):
        self.service = service

    def setup_routes(self, app: FastAPI) -> None:
        """Setup API routes on the FastAPI app."""

        app.get("/health")(self.health)
        app.get(
            "/dispense",
            response_model=DispenseResponse,
            responses={400: {"model": ErrorResponse}, 404: {"model": ErrorResponse}},
        )(self.dispense)
        app.get("/builds/{zip_name}")(self.download)
        app.get("/pool", response_model=PoolStatus)(self.pool)

    # Blocking filesystem I/O: handlers stay sync.
    def health(self) -> dict[str, Any]:
        """Handle /health endpoint."""
        return self.service.health()

    def dispense(self, slug: str = "") -> Any:
        """Handle /dispense endpoint."""
        try:
            return self.service.dispense(slug)
        except DispenserError as e:
            return error_response(e)

    def download(self, zip_name: str) -> Any:
        """Handle /builds/{zip_name} endpoint."""
        try:
            path = self.service.build_path(zip_name)
        except DispenserError as e:
            return error_response(e)
        return FileResponse(path, media_type="application/zip", filename=zip_name)

    def pool(self) -> Any:
        """Handle /pool endpoint."""
        try:
            return self.service.pool_status()
        except DispenserError as e:
            return error_response(e)
