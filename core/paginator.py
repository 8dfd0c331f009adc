# core/paginator.py
import math
from dataclasses import dataclass
from typing import List, Sequence, TypeVar

T = TypeVar("T")

PAGE_SIZE = 10
PAGE_BUTTONS = 3


def total_pages(count: int, size: int = PAGE_SIZE) -> int:
    return max(1, math.ceil(count / size))


def page_slice(items: Sequence[T], page: int, size: int = PAGE_SIZE) -> List[T]:
    """Return items[(page-1)*size : page*size]; empty past the last page."""
    last = page * size
    first = last - size
    return list(items[max(first, 0):max(last, 0)])


@dataclass(frozen=True)
class PageButton:
    number: int
    active: bool
    disabled: bool


def page_buttons(current: int, total: int, count: int = PAGE_BUTTONS) -> List[PageButton]:
    """Numbered jump buttons starting at the current page."""
    buttons = []
    for offset in range(count):
        number = current + offset
        buttons.append(
            PageButton(
                number=number,
                active=number == current,
                disabled=number < 1 or number > total,
            )
        )
    return buttons


@dataclass
class Paginator:
    current_page: int = 1

    def previous(self) -> int:
        self.current_page = max(self.current_page - 1, 1)
        return self.current_page

    def next(self, total: int) -> int:
        # a page past the end (left behind by a filter change) snaps back to the last one
        self.current_page = min(self.current_page + 1, max(total, 1))
        return self.current_page

    def go_to(self, page: int, total: int) -> bool:
        if page < 1 or page > total:
            return False
        self.current_page = page
        return True

    def reset(self) -> None:
        self.current_page = 1

    def has_previous(self) -> bool:
        return self.current_page > 1

    def has_next(self, total: int) -> bool:
        return self.current_page != total
