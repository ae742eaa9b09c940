"""
Deal table tools for the Okazje+ server.
"""
from __future__ import annotations

from typing import Any, Dict, Optional

from okazje.log_helper.decorators import tool_logger
from okazje.table import SortDirection, SortDirective
from okazje.tools.common import TableSpec, column, render_table

DEALS = TableSpec(
    name="deals",
    columns={
        "title": column("title"),
        "status": column("status"),
        "price": column("price"),
        "originalPrice": column("originalPrice"),
        "temperature": column("temperature"),
        "postedAt": column("postedAt"),
        "discountPercent": column("discountPercent"),
        "commentsCount": column("commentsCount"),
        "voteCount": column("voteCount"),
    },
    default_sort=SortDirective("temperature", SortDirection.DESC),
    filters={
        "status": column("status"),
        "category": column("mainCategorySlug", "category"),
    },
)


@tool_logger("list-deals", table="deals")
async def list_deals(
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
    List deals one page at a time, sorted by a single column.

    Deal Record Fields:
        - id, title, description, link, merchant (str)
        - price, originalPrice, shippingCost (float): PLN
        - discountPercent (int): computed from originalPrice and price
        - temperature, voteCount, commentsCount (int)
        - postedAt (str): ISO-8601 timestamp
        - status (str): draft | approved | rejected
        - mainCategorySlug, subCategorySlug (str)

    Args:
        sort_field: Column to sort by (title, status, price, originalPrice, temperature,
                    postedAt, discountPercent, commentsCount, voteCount).
                    Default: temperature, descending.
        sort_direction: "asc" or "desc" (default "asc" when sort_field is given)
        page: 1-based page number; out-of-range values are clamped
        page_size: Rows per page (default 10)
        status: Only deals with this moderation status
        category: Only deals in this main category slug

    Returns:
        Page state: items, page, total_pages, total_items, can_go_next,
        can_go_prev, range, sort, and per column the header icon and the
        sort a click on that header would apply (next_sort).
    """
    return await render_table(
        DEALS,
        sort_field=sort_field,
        sort_direction=sort_direction,
        page=page,
        page_size=page_size,
        status=status,
        category=category,
    )


TOOLS = [list_deals]
