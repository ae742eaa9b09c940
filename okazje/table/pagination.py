"""
Page slicing with clamped navigation.

The slicer never rejects a page number: every request is clamped to the
valid range computed from the records it holds at that moment. Replacing the
records (for example after filtering) and then reading any state heals an
out-of-range page instead of failing.
"""
from __future__ import annotations

import math
from typing import Generic, Iterable, List, Tuple, TypeVar

T = TypeVar("T")

DEFAULT_PAGE_SIZE = 10
PAGE_SIZE_OPTIONS = (10, 20, 50, 100)


class PageSlicer(Generic[T]):
    """Current-page state over a record sequence with a fixed page size."""

    def __init__(self, records: Iterable[T] = (), page_size: int = DEFAULT_PAGE_SIZE):
        if isinstance(page_size, bool) or not isinstance(page_size, int) or page_size < 1:
            raise ValueError(f"page_size must be a positive integer, got {page_size!r}")
        self._page_size = page_size
        self._records: List[T] = list(records)
        self._page = 1

    # ----------------------------
    # Data
    # ----------------------------
    @property
    def records(self) -> List[T]:
        return self._records

    @records.setter
    def records(self, records: Iterable[T]) -> None:
        self._records = list(records)

    @property
    def page_size(self) -> int:
        return self._page_size

    @property
    def total_items(self) -> int:
        return len(self._records)

    @property
    def total_pages(self) -> int:
        """Number of pages; 0 for an empty sequence."""
        return math.ceil(len(self._records) / self._page_size)

    def _clamp(self, page: int) -> int:
        last = max(self.total_pages, 1)
        if isinstance(page, float) and not math.isfinite(page):
            return last if page == math.inf else 1
        return max(1, min(int(page), last))

    # ----------------------------
    # Page state
    # ----------------------------
    @property
    def current_page(self) -> int:
        self._page = self._clamp(self._page)
        return self._page

    @property
    def can_go_next(self) -> bool:
        return self.current_page < self.total_pages

    @property
    def can_go_prev(self) -> bool:
        return self.current_page > 1

    def current_slice(self) -> List[T]:
        start = (self.current_page - 1) * self._page_size
        return self._records[start:start + self._page_size]

    def item_range(self) -> Tuple[int, int]:
        """1-based (first, last) position of the visible items; (0, 0) when empty."""
        if not self._records:
            return 0, 0
        start = (self.current_page - 1) * self._page_size + 1
        end = min(self.current_page * self._page_size, self.total_items)
        return start, end

    # ----------------------------
    # Navigation
    # ----------------------------
    def go_to_page(self, page: int) -> int:
        self._page = self._clamp(page)
        return self._page

    def next_page(self) -> int:
        return self.go_to_page(self.current_page + 1)

    def previous_page(self) -> int:
        return self.go_to_page(self.current_page - 1)

    def go_to_first_page(self) -> int:
        return self.go_to_page(1)

    def go_to_last_page(self) -> int:
        return self.go_to_page(self.total_pages)

    def with_page_size(self, page_size: int) -> "PageSlicer[T]":
        """New slicer over the same records with another page size, on page 1."""
        return PageSlicer(self._records, page_size)
