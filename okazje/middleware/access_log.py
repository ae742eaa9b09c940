"""
HTTP access log middleware with request id propagation.
"""
from __future__ import annotations

import logging
import time
import uuid

from fastapi import Request
from fastmcp import FastMCP

from okazje.config import config

log = logging.getLogger("okazje.mcp")

REQUEST_ID_HEADER = "x-request-id"


async def access_log_middleware(request: Request, call_next):
    """
    Log every HTTP request with status and duration, tagged with a request id.

    The id comes from the incoming x-request-id header or is generated, and is
    echoed back on the response.
    """
    rid = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex[:12]
    start = time.perf_counter()
    status = 500
    try:
        response = await call_next(request)
        status = getattr(response, "status_code", 0)
    except Exception:
        log.exception("Unhandled exception during request",
                      extra={"request_id": rid, "path": request.url.path, "method": request.method})
        raise
    finally:
        dur_ms = round((time.perf_counter() - start) * 1000, 2)
        if config.uvicorn_access_log:
            log.info("HTTP %s %s -> %s in %.2fms",
                     request.method, request.url.path, status, dur_ms,
                     extra={
                         "request_id": rid,
                         "path": request.url.path,
                         "method": request.method,
                         "status": status,
                         "duration_ms": dur_ms,
                         "client": request.client.host if request.client else None,
                     })
    response.headers[REQUEST_ID_HEADER] = rid
    return response


def register_middleware(mcp: FastMCP) -> None:
    """Attach the access log middleware to the FastMCP HTTP app, when it has one."""
    if hasattr(mcp, "app") and mcp.app:
        mcp.app.middleware("http")(access_log_middleware)
