"""
Logging helpers for the Okazje+ server.
"""
from okazje.log_helper.config import configure_logging
from okazje.log_helper.decorators import tool_logger
from okazje.log_helper.formatters import JsonFormatter

__all__ = [
    "configure_logging",
    "tool_logger",
    "JsonFormatter",
]
