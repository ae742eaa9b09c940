"""
Shared plumbing for the catalog table tools: cache access, argument
validation and TableView construction.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Callable, Dict, List, Optional

from okazje.config import config
from okazje.dependencies.catalog_source import load_catalog_tables
from okazje.errors.exceptions import ClientError, LimitExceededError
from okazje.table import SortCyclePolicy, SortDirection, SortDirective, TableView

# Reference to the global catalog cache (set by __main__.py)
CACHE = None

Record = Dict[str, Any]


def set_cache(cache):
    """Set the catalog cache used by the table tools."""
    global CACHE
    CACHE = cache


def column(name: str, *fallbacks: str) -> Callable[[Record], Any]:
    """Accessor reading ``name``, then each fallback key while the value is missing."""
    keys = (name, *fallbacks)

    def _get(record: Record) -> Any:
        for key in keys:
            value = record.get(key)
            if value is not None:
                return value
        return None

    return _get


@dataclass(frozen=True)
class TableSpec:
    """Sortable columns and default ordering of one catalog table."""
    name: str
    columns: Dict[str, Callable[[Record], Any]]
    default_sort: Optional[SortDirective] = None
    filters: Dict[str, Callable[[Record], Any]] = field(default_factory=dict)


async def get_table(name: str) -> List[Record]:
    """Rows of a catalog table from the cache, or loaded directly on a cache miss."""
    if CACHE is not None and CACHE.has_data():
        return list(CACHE.snapshot().table(name))
    tables = await load_catalog_tables()
    return list(tables.get(name, []))


def resolve_page_size(page_size: Optional[int]) -> int:
    if page_size is None:
        return config.default_page_size
    if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
        raise ClientError(f"page_size must be a positive integer, got {page_size!r}")
    if page_size > config.max_page_size:
        raise LimitExceededError(f"page_size {page_size} exceeds the maximum of {config.max_page_size}")
    return page_size


def resolve_sort(spec: TableSpec, sort_field: Optional[str], sort_direction: Optional[str]) -> Optional[SortDirective]:
    """
    Build the directive requested by a tool call.

    Without a field the table default applies; a direction alone re-orients
    the default column.
    """
    direction = None
    if sort_direction is not None:
        try:
            direction = SortDirection(str(sort_direction).strip().lower())
        except ValueError:
            raise ClientError(f"sort_direction must be 'asc' or 'desc', got {sort_direction!r}") from None

    if not sort_field:
        if spec.default_sort is None or direction is None:
            return spec.default_sort
        return SortDirective(spec.default_sort.field, direction)

    if sort_field not in spec.columns:
        allowed = ", ".join(sorted(spec.columns))
        raise ClientError(f"Cannot sort {spec.name} by '{sort_field}'. Sortable columns: {allowed}")
    return SortDirective(sort_field, direction or SortDirection.ASC)


def apply_filters(spec: TableSpec, rows: List[Record], **criteria: Optional[str]) -> List[Record]:
    """Keep rows whose filter column equals each given criterion (case-insensitive)."""
    for key, wanted in criteria.items():
        if wanted is None:
            continue
        getter = spec.filters[key]
        needle = str(wanted).strip().lower()
        rows = [r for r in rows if str(getter(r) or "").lower() == needle]
    return rows


async def render_table(
    spec: TableSpec,
    sort_field: Optional[str] = None,
    sort_direction: Optional[str] = None,
    page: int = 1,
    page_size: Optional[int] = None,
    **criteria: Optional[str],
) -> Dict[str, Any]:
    """
    Sort, filter and slice one catalog table and return its rendered state.
    """
    size = resolve_page_size(page_size)
    directive = resolve_sort(spec, sort_field, sort_direction)
    if isinstance(page, bool) or not isinstance(page, int):
        raise ClientError(f"page must be an integer, got {page!r}")

    rows = apply_filters(spec, await get_table(spec.name), **criteria)
    view: TableView[Record] = TableView(
        rows,
        page_size=size,
        initial_sort=directive,
        columns=spec.columns,
        policy=SortCyclePolicy(config.sort_cycle_policy),
    )
    view.go_to_page(page)
    state = view.state()
    state["table"] = spec.name
    return state
