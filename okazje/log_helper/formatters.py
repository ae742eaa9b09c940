"""
Log formatters for structured output.
"""
from __future__ import annotations

import json
import logging

# Extra attributes copied into JSON records when a log call provides them
TRACE_FIELDS = (
    "request_id",
    "tool",
    "table",
    "path",
    "method",
    "status",
    "duration_ms",
    "client",
    "error_type",
)


class JsonFormatter(logging.Formatter):
    """
    One JSON object per line: timestamp, level, logger, message, plus any
    tracing extras (request id, tool, table, timing) set on the record.
    """

    def format(self, record: logging.LogRecord) -> str:
        base = {
            "ts": self.formatTime(record, datefmt="%Y-%m-%dT%H:%M:%S%z"),
            "level": record.levelname,
            "logger": record.name,
            "msg": record.getMessage(),
        }
        for k in TRACE_FIELDS:
            if hasattr(record, k):
                base[k] = getattr(record, k)
        if record.exc_info:
            base["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(base, ensure_ascii=False, default=str)
