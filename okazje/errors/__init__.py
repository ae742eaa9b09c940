"""
Error handling for the Okazje+ server.
"""
from okazje.errors.exceptions import (
    CatalogError,
    ClientError,
    LimitExceededError,
    OkazjeError,
    ServerError,
)
from okazje.errors.handlers import register_error_handlers

__all__ = [
    "OkazjeError",
    "ClientError",
    "LimitExceededError",
    "CatalogError",
    "ServerError",
    "register_error_handlers",
]
