"""Error handlers for the REST API."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from floorplan.application.config import ConfigError
from floorplan.infrastructure.exporters import UnsupportedFormatError


def register_exception_handlers(app: FastAPI) -> None:
    """Register custom exception handlers with the FastAPI app."""

    @app.exception_handler(ConfigError)
    async def config_error_handler(request: Request, exc: ConfigError) -> JSONResponse:
        return JSONResponse(
            status_code=422,
            content={
                "error": exc.message,
                "error_type": exc.error_type,
                "details": exc.details or None,
            },
        )

    @app.exception_handler(UnsupportedFormatError)
    async def unsupported_format_handler(
        request: Request, exc: UnsupportedFormatError
    ) -> JSONResponse:
        return JSONResponse(
            status_code=400,
            content={
                "error": str(exc),
                "error_type": "unsupported_format",
                "details": {"format": exc.format_name, "available": exc.available},
            },
        )
