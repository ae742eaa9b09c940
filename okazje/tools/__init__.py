"""
MCP tools for the Okazje+ server.

Each module exposes a `TOOLS` list; `ALL_TOOLS` collects them for
registration in __main__.py.
"""
from okazje.tools import common, deals, products, users

# List of all tool callables that should be registered with FastMCP
ALL_TOOLS = [
    *deals.TOOLS,
    *products.TOOLS,
    *users.TOOLS,
]

__all__ = [
    "common",
    "deals",
    "products",
    "users",
    "ALL_TOOLS",
]
