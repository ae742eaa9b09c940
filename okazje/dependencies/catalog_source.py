"""
Dependency injection for the catalog source.
"""
from __future__ import annotations

import logging
from functools import partial
from typing import Any, Callable, Dict, List

from okazje.catalog import load_catalog_file
from okazje.config import config
from okazje.utils.async_helpers import call_threadsafe

log = logging.getLogger("okazje.mcp")

Tables = Dict[str, List[Dict[str, Any]]]


class CatalogSourceFactory:
    """Factory for blocking catalog loaders."""

    def __init__(self, app_config=None):
        """
        Args:
            app_config: Optional configuration (defaults to the global config)
        """
        self.config = app_config or config

    def create_loader(self) -> Callable[[], Tables]:
        """Loader reading the configured CATALOG_PATH."""
        return partial(load_catalog_file, self.config.catalog_path)


# Global factory instance
catalog_source_factory = CatalogSourceFactory()


async def load_catalog_tables() -> Tables:
    """
    Load the catalog directly, bypassing the cache.

    Used by tools when the background cache has not produced a snapshot yet.
    """
    log.info("Catalog cache empty; loading %s directly", catalog_source_factory.config.catalog_path)
    return await call_threadsafe(catalog_source_factory.create_loader())
