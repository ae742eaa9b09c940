"""
Logging setup for the Okazje+ server.
"""
from __future__ import annotations

import logging
import sys
from typing import Optional

from okazje.config import config
from okazje.log_helper.formatters import JsonFormatter

TEXT_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"


def configure_logging(level: Optional[str] = None, fmt: Optional[str] = None) -> None:
    """
    Configure the root logger with a text or JSON formatter on stdout.

    Args:
        level: Log level name (defaults to LOG_LEVEL)
        fmt: "text" or "json" (defaults to LOG_FORMAT)
    """
    level = (level or config.log_level).upper()
    fmt = (fmt or config.log_format).lower()

    root = logging.getLogger()
    root.setLevel(level)

    # Drop existing handlers so reloads do not duplicate output
    for h in list(root.handlers):
        root.removeHandler(h)

    handler = logging.StreamHandler(sys.stdout)
    if fmt == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(fmt=TEXT_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root.addHandler(handler)

    for name in ("uvicorn", "uvicorn.error", "uvicorn.access", "fastapi", "fastmcp"):
        logging.getLogger(name).setLevel(level)
        logging.getLogger(name).propagate = True
