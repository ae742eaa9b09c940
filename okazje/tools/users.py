"""
User table tools for the Okazje+ server.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from okazje.log_helper.decorators import tool_logger
from okazje.table import SortDirection, SortDirective
from okazje.tools.common import TableSpec, column, render_table

USERS = TableSpec(
    name="users",
    columns={
        "displayName": column("displayName"),
        "email": column("email"),
        "role": column("role"),
        "disabled": column("disabled"),
    },
    default_sort=SortDirective("displayName", SortDirection.ASC),
    filters={"role": column("role")},
)


@tool_logger("list-users", table="users")
async def list_users(
    toolCallId: Optional[str] = None,
    tool_call_id: Optional[str] = None,
    sort_field: Optional[str] = None,
    sort_direction: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
    role: Optional[str] = None,
) -> Dict[str, Any]:
    """
    List users one page at a time.

    Args:
        sort_field: displayName, email, role or disabled (default: displayName ascending).
                    "disabled" is a boolean column and keeps the current order.
        sort_direction: "asc" or "desc"
        page: 1-based page number, clamped to the available pages
        page_size: Rows per page (default 10)
        role: Only users with this role (admin | user)

    Returns:
        Page state with items and navigation/sort controls.
    """
    return await render_table(
        USERS,
        sort_field=sort_field,
        sort_direction=sort_direction,
        page=page,
        page_size=page_size,
        role=role,
    )


TOOLS = [list_users]
