#!/usr/bin/env python3
"""
Okazje+ MCP Server

Exposes the Okazje+ catalog tables (deals, products, users) as LLM-accessible
tools. Every tool returns one page of a table sorted by a single column,
together with the navigation and sort state needed to render table controls.

Key Features:
- Background refresh of the catalog snapshot from a JSON document
- Polish-collation, type-aware single-column sorting with toggle semantics
- Clamped pagination that never rejects a page number
- Structured logging with request tracing
"""
from __future__ import annotations

import logging
import os
from pathlib import Path

from fastmcp import FastMCP

# Configuration first
from okazje.config import config
from okazje.log_helper.config import configure_logging

# Logging before the remaining imports
configure_logging()
log = logging.getLogger("okazje.mcp")

from okazje.catalog import CatalogCache
from okazje.dependencies import catalog_source_factory
from okazje.errors.handlers import register_error_handlers
from okazje.middleware.access_log import register_middleware
from okazje.tools import ALL_TOOLS, common

config.print_startup_info()

# ---------------------------------------
# MCP App Initialization
# ---------------------------------------
mcp = FastMCP(
    name="okazje-plus",
    instructions="Browse Okazje+ deals, products and users as sorted, paginated tables.",
    version="1.0.0",
)

# ---------------------------------------
# Middleware & Error Handlers
# ---------------------------------------
register_middleware(mcp)

if hasattr(mcp, "app") and mcp.app:
    register_error_handlers(mcp.app)

# ---------------------------------------
# Background Catalog Cache
# ---------------------------------------
CACHE = CatalogCache(interval_seconds=config.refresh_interval_seconds)
common.set_cache(CACHE)


async def _on_startup():
    """Start the background catalog refresher."""
    log.info(
        "Starting catalog refresher (path=%s, interval=%ss)",
        config.catalog_path,
        config.refresh_interval_seconds,
    )
    CACHE.wire_loader(catalog_source_factory.create_loader())
    await CACHE.start()


async def _on_shutdown():
    """Stop the background catalog refresher."""
    log.info("Stopping catalog refresher")
    await CACHE.stop()


if hasattr(mcp, "app") and mcp.app:
    mcp.app.add_event_handler("startup", _on_startup)
    mcp.app.add_event_handler("shutdown", _on_shutdown)

# ---------------------------------------
# MCP Tools
# ---------------------------------------
for tool in ALL_TOOLS:
    mcp.tool(tool)

# ---------------------------------------
# MCP Prompt: okazje-system
# ---------------------------------------
SYSTEM_TEXT = Path(__file__).resolve().parent.joinpath("system.md").read_text(encoding="utf-8").strip()


@mcp.prompt(name="okazje-system")
def okazje_system_prompt():
    """Expose the Okazje+ assistant instructions as an MCP prompt."""
    return SYSTEM_TEXT


# ---------------------------------------
# Server Entry Point
# ---------------------------------------
if __name__ == "__main__":
    if config.uvicorn_access_log:
        os.environ.setdefault("UVICORN_ACCESS_LOG", "true")
    log.info("Starting Okazje+ MCP (FastMCP) on http://%s:%s", config.host, config.port)
    mcp.run(transport="http", host=config.host, port=config.port)
