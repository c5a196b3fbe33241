"""
Pagination module - page-number window and navigation state
"""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import TYPE_CHECKING, List

from .models import PageSlot

if TYPE_CHECKING:
    from .schemas import PaginationInfo


def window(current: int, total: int) -> List[PageSlot]:
    """
    Compute the page-number controls to render

    Pages 1, total and current +/- 1 are shown. A hidden page becomes an
    ellipsis only when it is exactly two away from the current page; other
    hidden pages produce no slot.

    Args:
        current: Current page (1-indexed), clamped into [1, total]
        total: Number of pages

    Returns:
        Ordered slots; empty when there is at most one page
    """
    if total <= 1:
        return []

    current = min(max(current, 1), total)
    slots: List[PageSlot] = []
    for number in range(1, total + 1):
        if number == 1 or number == total or abs(number - current) <= 1:
            slots.append(PageSlot.page(number))
        elif number == current - 2 or number == current + 2:
            slots.append(PageSlot.ellipsis())
    return slots


@dataclass(frozen=True)
class PageState:
    """Pagination values supplied by the query layer"""
    current_page: int = 1
    total_pages: int = 1
    has_previous_page: bool = False
    has_next_page: bool = False
    total_posts: int = 0

    @classmethod
    def from_info(cls, info: "PaginationInfo") -> "PageState":
        return cls(
            current_page=info.current_page,
            total_pages=info.total_pages,
            has_previous_page=info.has_previous_page,
            has_next_page=info.has_next_page,
            total_posts=info.total_posts,
        )

    @property
    def page(self) -> int:
        """Current page clamped into [1, total_pages]"""
        return min(max(self.current_page, 1), max(self.total_pages, 1))

    @property
    def can_go_back(self) -> bool:
        return self.has_previous_page and self.page > 1

    @property
    def can_go_forward(self) -> bool:
        return self.has_next_page and self.page < self.total_pages

    @property
    def slots(self) -> List[PageSlot]:
        return window(self.page, self.total_pages)

    def go_to(self, page: int) -> "PageState":
        """Request a page; out-of-range requests are clamped"""
        target = min(max(page, 1), max(self.total_pages, 1))
        return replace(
            self,
            current_page=target,
            has_previous_page=target > 1,
            has_next_page=target < self.total_pages,
        )

    def previous(self) -> "PageState":
        if not self.can_go_back:
            return self
        return self.go_to(self.page - 1)

    def next(self) -> "PageState":
        if not self.can_go_forward:
            return self
        return self.go_to(self.page + 1)
