"""
Exception hierarchy for the Okazje+ server.
"""
from __future__ import annotations

from typing import Dict


class OkazjeError(Exception):
    """
    Base exception for all server errors.

    Serialized as {"error": "<type>", "details": "<message>"}.
    """

    def __init__(self, error_type: str, details: str):
        self.error_type = error_type
        self.details = details
        super().__init__(details)

    def to_dict(self) -> Dict[str, str]:
        return {"error": self.error_type, "details": self.details}


class ClientError(OkazjeError):
    """Invalid tool arguments (unknown column, bad direction, bad page size)."""

    def __init__(self, details: str):
        super().__init__("client_error", details)


class LimitExceededError(OkazjeError):
    """Request exceeds a configured limit, e.g. MAX_PAGE_SIZE."""

    def __init__(self, details: str):
        super().__init__("limit_exceeded", details)


class CatalogError(OkazjeError):
    """The catalog document could not be read or parsed."""

    def __init__(self, details: str):
        super().__init__("catalog_error", details)


class ServerError(OkazjeError):
    def __init__(self, details: str):
        super().__init__("server_error", details)
