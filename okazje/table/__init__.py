"""
Generic table layer: sorting, pagination and the controller composing them.
"""
from okazje.table.collation import PolishCollator, polish_collator
from okazje.table.pagination import DEFAULT_PAGE_SIZE, PAGE_SIZE_OPTIONS, PageSlicer
from okazje.table.sorting import (
    SortCyclePolicy,
    SortDirection,
    SortDirective,
    TableSort,
    field_value,
    next_directive,
    sort_icon,
    sort_records,
)
from okazje.table.view import TableView

__all__ = [
    "PolishCollator",
    "polish_collator",
    "DEFAULT_PAGE_SIZE",
    "PAGE_SIZE_OPTIONS",
    "PageSlicer",
    "SortCyclePolicy",
    "SortDirection",
    "SortDirective",
    "TableSort",
    "field_value",
    "next_directive",
    "sort_icon",
    "sort_records",
    "TableView",
]
