"""
Logging decorators for MCP tools.
"""
from __future__ import annotations

import logging
import time
import uuid
from functools import wraps
from typing import Any, Callable, Optional

log = logging.getLogger("okazje.mcp")


def _request_id(args: tuple, kwargs: dict) -> str:
    ctx = args[0] if args else kwargs.get("ctx")
    request = getattr(ctx, "request", None)
    headers = getattr(request, "headers", None)
    rid = headers.get("x-request-id") if headers is not None else None
    return rid or kwargs.get("toolCallId") or kwargs.get("tool_call_id") or uuid.uuid4().hex[:12]


def _result_size(result: Any) -> Optional[int]:
    if isinstance(result, list):
        return len(result)
    if isinstance(result, dict):
        items = result.get("items")
        return len(items) if isinstance(items, list) else len(result)
    return None


def tool_logger(tool_name: str, table: Optional[str] = None) -> Callable:
    """
    Wrap an async MCP tool with start/done/error logging and timing.

    Args:
        tool_name: Name used in log records
        table: Catalog table the tool reads, if any

    Returns:
        Decorator for async tool functions
    """
    def _wrap(fn):
        @wraps(fn)  # FastMCP reads the signature and docstring
        async def _async_wrapper(*args, **kwargs):
            rid = _request_id(args, kwargs)
            extra = {"tool": tool_name, "request_id": rid}
            if table:
                extra["table"] = table

            start = time.perf_counter()
            log.info("Tool start", extra=extra)
            try:
                result = await fn(*args, **kwargs)
            except Exception:
                dur_ms = round((time.perf_counter() - start) * 1000, 2)
                log.exception("Tool error after %.2fms", dur_ms, extra={**extra, "duration_ms": dur_ms})
                raise
            dur_ms = round((time.perf_counter() - start) * 1000, 2)
            log.info("Tool done in %.2fms (size=%s)", dur_ms, _result_size(result),
                     extra={**extra, "duration_ms": dur_ms})
            return result
        return _async_wrapper
    return _wrap
