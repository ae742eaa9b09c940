"""
Table controller composing sorting and pagination.

Owns one sort directive and one page state, feeds the sorted records into the
slicer, and renders everything a client needs to draw the table controls.
"""
from __future__ import annotations

from typing import Any, Callable, Dict, Generic, Iterable, List, Mapping, Optional, TypeVar

from okazje.table.pagination import DEFAULT_PAGE_SIZE, PageSlicer
from okazje.table.sorting import SortCyclePolicy, SortDirective, TableSort

T = TypeVar("T")


class TableView(Generic[T]):
    def __init__(
        self,
        records: Iterable[T] = (),
        page_size: int = DEFAULT_PAGE_SIZE,
        initial_sort: Optional[SortDirective] = None,
        columns: Optional[Mapping[str, Callable[[T], Any]]] = None,
        policy: SortCyclePolicy = SortCyclePolicy.CYCLE,
    ):
        self.sorter: TableSort[T] = TableSort(initial=initial_sort, columns=columns, policy=policy)
        self._raw: List[T] = list(records)
        self.pager: PageSlicer[T] = PageSlicer(self.sorter.apply(self._raw), page_size)

    def _resort(self) -> None:
        self.pager.records = self.sorter.apply(self._raw)

    def set_records(self, records: Iterable[T]) -> None:
        self._raw = list(records)
        self._resort()

    def request_sort(self, field: str) -> Optional[SortDirective]:
        directive = self.sorter.request_sort(field)
        self._resort()
        return directive

    def sort_by(self, directive: Optional[SortDirective]) -> None:
        self.sorter.set_directive(directive)
        self._resort()

    def set_page_size(self, page_size: int) -> None:
        self.pager = self.pager.with_page_size(page_size)

    def go_to_page(self, page: int) -> int:
        return self.pager.go_to_page(page)

    def next_page(self) -> int:
        return self.pager.next_page()

    def previous_page(self) -> int:
        return self.pager.previous_page()

    def go_to_first_page(self) -> int:
        return self.pager.go_to_first_page()

    def go_to_last_page(self) -> int:
        return self.pager.go_to_last_page()

    def items(self) -> List[T]:
        return self.pager.current_slice()

    def state(self) -> Dict[str, Any]:
        """
        Snapshot of the visible page and all control state.

        Returns:
            Dictionary with items, page navigation, active sort, and for each
            sortable column its header icon and the sort a click would apply
        """
        start, end = self.pager.item_range()
        directive = self.sorter.directive
        columns: Dict[str, Any] = {}
        for name in self.sorter.columns or []:
            upcoming = self.sorter.peek(name)
            columns[name] = {
                "icon": self.sorter.sort_icon(name),
                "next_sort": upcoming.to_dict() if upcoming else None,
            }
        return {
            "items": self.items(),
            "page": self.pager.current_page,
            "page_size": self.pager.page_size,
            "total_pages": self.pager.total_pages,
            "total_items": self.pager.total_items,
            "can_go_next": self.pager.can_go_next,
            "can_go_prev": self.pager.can_go_prev,
            "range": {"start": start, "end": end},
            "sort": directive.to_dict() if directive else None,
            "columns": columns,
        }
