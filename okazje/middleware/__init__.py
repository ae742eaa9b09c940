"""
HTTP middleware for the Okazje+ server.
"""
from okazje.middleware.access_log import access_log_middleware, register_middleware

__all__ = [
    "access_log_middleware",
    "register_middleware",
]
