"""
Configuration module for the Okazje+ MCP server.

Centralizes all environment variable reading and configuration management.
"""
from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Literal


@dataclass
class AppConfig:
    """Server configuration loaded from environment variables."""

    # Server settings
    port: int
    host: str

    # Logging configuration
    log_level: str
    log_format: Literal["text", "json"]
    uvicorn_access_log: bool

    # Catalog settings
    catalog_path: str
    refresh_interval_seconds: int

    # Table settings
    default_page_size: int
    max_page_size: int
    sort_cycle_policy: Literal["cycle", "clear"]

    @classmethod
    def from_env(cls) -> "AppConfig":
        """Load configuration from environment variables with sensible defaults."""
        return cls(
            # Server settings
            port=int(os.environ.get("PORT", "8000")),
            host=os.environ.get("HOST", "0.0.0.0"),

            # Logging configuration
            log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
            log_format=os.environ.get("LOG_FORMAT", "text").lower(),  # "text" | "json"
            uvicorn_access_log=os.environ.get("UVICORN_ACCESS_LOG", "1") not in ("0", "false", "False"),

            # Catalog settings
            catalog_path=os.environ.get("CATALOG_PATH", "catalog.json"),
            refresh_interval_seconds=int(os.environ.get("REFRESH_INTERVAL_SECONDS", "300")),  # 5 minutes

            # Table settings
            default_page_size=int(os.environ.get("DEFAULT_PAGE_SIZE", "10")),
            max_page_size=int(os.environ.get("MAX_PAGE_SIZE", "100")),
            sort_cycle_policy=os.environ.get("SORT_CYCLE_POLICY", "cycle").lower(),  # "cycle" | "clear"
        )

    def print_startup_info(self) -> None:
        """Print configuration on startup for debugging/verification."""
        print(f"Catalog PATH: {self.catalog_path}")
        print(f"Refresh interval: {self.refresh_interval_seconds}s")
        print(f"Page size: default={self.default_page_size} max={self.max_page_size}")


# Global configuration instance
config = AppConfig.from_env()
