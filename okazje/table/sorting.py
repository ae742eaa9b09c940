"""
Single-column table sorting.

Provides the sort directive model, the header "toggle" contract used when the
same column is requested repeatedly, and a stable type-aware sort over
arbitrary records. Records are never mutated; every sort returns a new list.
"""
from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from functools import cmp_to_key
from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar

from okazje.table.collation import polish_collator
from okazje.table.values import classify, compare_values

T = TypeVar("T")
Accessor = Callable[[Any, str], Any]


class SortDirection(str, Enum):
    ASC = "asc"
    DESC = "desc"


class SortCyclePolicy(str, Enum):
    """What a request on a column already sorted descending does."""

    CYCLE = "cycle"  # back to ascending
    CLEAR = "clear"  # drop the sort


@dataclass(frozen=True)
class SortDirective:
    field: str
    direction: SortDirection = SortDirection.ASC

    def __post_init__(self) -> None:
        # Accept plain "asc"/"desc" strings.
        object.__setattr__(self, "direction", SortDirection(self.direction))

    @property
    def descending(self) -> bool:
        return self.direction is SortDirection.DESC

    def to_dict(self) -> Dict[str, str]:
        return {"field": self.field, "direction": self.direction.value}


def field_value(record: Any, field: str) -> Any:
    """
    Default accessor: mapping key first, then attribute. Missing fields are None.
    """
    if isinstance(record, Mapping):
        return record.get(field)
    return getattr(record, field, None)


def sort_records(
    records: Iterable[T],
    directive: Optional[SortDirective],
    accessor: Optional[Accessor] = None,
    collator=None,
) -> List[T]:
    """
    Return a new list of records ordered by the directive.

    Args:
        records: Records to sort (not modified)
        directive: Field and direction, or None to keep the input order
        accessor: ``(record, field) -> value``; defaults to ``field_value``
        collator: Text comparator; defaults to Polish collation

    Returns:
        Sorted copy of the records (stable; missing values last)
    """
    items = list(records)
    if directive is None:
        return items

    get = accessor or field_value
    coll = collator or polish_collator
    descending = directive.descending

    decorated = [(classify(get(r, directive.field)), r) for r in items]
    decorated.sort(key=cmp_to_key(lambda x, y: compare_values(x[0], y[0], coll, descending)))
    return [r for _, r in decorated]


def next_directive(
    current: Optional[SortDirective],
    field: str,
    policy: SortCyclePolicy = SortCyclePolicy.CYCLE,
) -> Optional[SortDirective]:
    """
    Compute the directive after a sort request on ``field``.

    none / other column -> ascending; ascending -> descending;
    descending -> ascending (CYCLE) or no sort (CLEAR).
    """
    if current is None or current.field != field:
        return SortDirective(field, SortDirection.ASC)
    if current.direction is SortDirection.ASC:
        return SortDirective(field, SortDirection.DESC)
    if policy is SortCyclePolicy.CLEAR:
        return None
    return SortDirective(field, SortDirection.ASC)


def sort_icon(current: Optional[SortDirective], field: str) -> Optional[str]:
    """Tri-state header indicator: "asc", "desc" or None when the column is not sorted."""
    if current is None or current.field != field:
        return None
    return current.direction.value


class TableSort(Generic[T]):
    """
    Holds the active sort directive of one table.

    Usage:
        sorter = TableSort(initial=SortDirective("temperature", SortDirection.DESC))
        sorter.request_sort("price")     # price asc
        rows = sorter.apply(deals)
    """

    def __init__(
        self,
        initial: Optional[SortDirective] = None,
        columns: Optional[Mapping[str, Callable[[T], Any]]] = None,
        policy: SortCyclePolicy = SortCyclePolicy.CYCLE,
        collator=None,
    ):
        self._columns = dict(columns) if columns is not None else None
        if initial is not None:
            self._check_column(initial.field)
        self._initial = initial
        self._directive = initial
        self.policy = SortCyclePolicy(policy)
        self.collator = collator or polish_collator

    @property
    def directive(self) -> Optional[SortDirective]:
        return self._directive

    @property
    def columns(self) -> Optional[List[str]]:
        return list(self._columns) if self._columns is not None else None

    def _check_column(self, field: str) -> None:
        if self._columns is not None and field not in self._columns:
            raise KeyError(field)

    def _accessor(self) -> Accessor:
        if self._columns is None:
            return field_value
        columns = self._columns
        return lambda record, field: columns[field](record)

    def peek(self, field: str) -> Optional[SortDirective]:
        """Directive that ``request_sort(field)`` would produce, without applying it."""
        self._check_column(field)
        return next_directive(self._directive, field, self.policy)

    def request_sort(self, field: str) -> Optional[SortDirective]:
        self._directive = self.peek(field)
        return self._directive

    def set_directive(self, directive: Optional[SortDirective]) -> None:
        if directive is not None:
            self._check_column(directive.field)
        self._directive = directive

    def reset(self) -> None:
        self._directive = self._initial

    def sort_icon(self, field: str) -> Optional[str]:
        return sort_icon(self._directive, field)

    def apply(self, records: Iterable[T]) -> List[T]:
        return sort_records(records, self._directive, self._accessor(), self.collator)
