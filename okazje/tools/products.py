"""
Product table tools for the Okazje+ server.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from okazje.log_helper.decorators import tool_logger
from okazje.table import SortDirection, SortDirective
from okazje.tools.common import TableSpec, column, render_table

PRODUCTS = TableSpec(
    name="products",
    columns={
        "name": column("name"),
        # older records only carry the legacy "category" field
        "category": column("category", "mainCategorySlug"),
        "price": column("price"),
        "status": column("status"),
    },
    default_sort=SortDirective("name", SortDirection.ASC),
    filters={
        "status": column("status"),
        "category": column("mainCategorySlug", "category"),
    },
)


@tool_logger("list-products", table="products")
async def list_products(
    toolCallId: Optional[str] = None,
    tool_call_id: Optional[str] = None,
    sort_field: Optional[str] = None,
    sort_direction: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
    status: Optional[str] = None,
    category: Optional[str] = None,
) -> Dict[str, Any]:
    """
    List products one page at a time, sorted by a single column.

    Args:
        sort_field: name, category, price or status (default: name ascending)
        sort_direction: "asc" or "desc"
        page: 1-based page number, clamped to the available pages
        page_size: Rows per page (default 10)
        status: Only products with this moderation status
        category: Only products in this main category slug

    Returns:
        Page state with items and navigation/sort controls.
    """
    return await render_table(
        PRODUCTS,
        sort_field=sort_field,
        sort_direction=sort_direction,
        page=page,
        page_size=page_size,
        status=status,
        category=category,
    )


TOOLS = [list_products]
