"""
Error handlers for the FastAPI application behind FastMCP.
"""
from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from fastapi import Request
from fastapi.responses import JSONResponse
from pydantic import ValidationError

from okazje.errors.exceptions import ClientError, LimitExceededError, OkazjeError

if TYPE_CHECKING:
    from fastapi import FastAPI

log = logging.getLogger("okazje.mcp")

CLIENT_SIDE_ERRORS = (ClientError, LimitExceededError)


def status_for(exc: OkazjeError) -> int:
    """HTTP status for an error: 400 for client-side errors, 500 otherwise."""
    return 400 if isinstance(exc, CLIENT_SIDE_ERRORS) else 500


async def okazje_error_handler(request: Request, exc: OkazjeError) -> JSONResponse:
    """
    Convert OkazjeError exceptions to JSON responses.

    Args:
        request: The HTTP request that triggered the error
        exc: The raised error

    Returns:
        JSONResponse with {"error", "details"}
    """
    status_code = status_for(exc)
    log.error(
        "Error handling request: %s",
        exc.details,
        extra={
            "error_type": exc.error_type,
            "path": request.url.path,
            "method": request.method,
            "status": status_code,
        },
    )
    return JSONResponse(status_code=status_code, content=exc.to_dict())


async def pydantic_validation_error_handler(request: Request, exc: ValidationError) -> JSONResponse:
    """Convert pydantic validation errors to a 400 client_error response."""
    log.warning(
        "Validation error: %s",
        str(exc),
        extra={"path": request.url.path, "method": request.method},
    )
    return JSONResponse(
        status_code=400,
        content=ClientError(f"Validation error: {exc}").to_dict(),
    )


def register_error_handlers(app: FastAPI) -> None:
    """Register all error handlers with the FastAPI application."""
    app.add_exception_handler(OkazjeError, okazje_error_handler)
    app.add_exception_handler(ValidationError, pydantic_validation_error_handler)
