"""
Dependency injection for the Okazje+ server.
"""
from okazje.dependencies.catalog_source import CatalogSourceFactory, catalog_source_factory, \
    load_catalog_tables

__all__ = [
    "CatalogSourceFactory",
    "catalog_source_factory",
    "load_catalog_tables",
]
