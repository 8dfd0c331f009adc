# core/session.py
import os
from dataclasses import dataclass, field, replace
from typing import Callable, List, Optional

from .detail import DetailView
from .filters import FilterCriteria, filter_potions
from .logger import get_logger
from .models import Potion
from .paginator import PAGE_SIZE, Paginator, page_slice, total_pages

logger = get_logger(__name__)

RESET_PAGE_ON_FILTER = os.getenv("RESET_PAGE_ON_FILTER", "false").lower() == "true"

Fetcher = Callable[[], List[Potion]]


@dataclass
class CatalogSession:
    """
    Per-session browser state: the fetched potions, the active filters,
    the current page and the detail view.

    The potion list is written once by load() and only read afterwards.
    """
    fetcher: Fetcher
    page_size: int = PAGE_SIZE
    reset_page_on_filter: bool = RESET_PAGE_ON_FILTER
    potions: List[Potion] = field(default_factory=list)
    criteria: FilterCriteria = field(default_factory=FilterCriteria)
    paginator: Paginator = field(default_factory=Paginator)
    detail: DetailView = field(default_factory=DetailView)
    loaded: bool = False

    def load(self) -> int:
        if self.loaded:
            logger.debug("Catalog already loaded; skipping fetch.")
            return len(self.potions)
        self.potions = list(self.fetcher())
        self.loaded = True
        logger.info("Catalog session loaded %d potions.", len(self.potions))
        return len(self.potions)

    # filters

    def set_search(self, term: str) -> None:
        self.criteria = replace(self.criteria, search_term=term or "")
        self.paginator.reset()

    def set_difficulty(self, value: Optional[str]) -> None:
        self.criteria = replace(self.criteria, difficulty=value or None)
        if self.reset_page_on_filter:
            self.paginator.reset()

    def set_characteristic(self, value: Optional[str]) -> None:
        self.criteria = replace(self.criteria, characteristic=value or None)
        if self.reset_page_on_filter:
            self.paginator.reset()

    def filtered(self) -> List[Potion]:
        return filter_potions(self.potions, self.criteria)

    # pagination

    @property
    def current_page(self) -> int:
        return self.paginator.current_page

    def total_pages(self) -> int:
        return total_pages(len(self.filtered()), self.page_size)

    def current_rows(self) -> List[Potion]:
        return page_slice(self.filtered(), self.current_page, self.page_size)

    def next_page(self) -> int:
        return self.paginator.next(self.total_pages())

    def previous_page(self) -> int:
        return self.paginator.previous()

    def go_to_page(self, page: int) -> bool:
        moved = self.paginator.go_to(page, self.total_pages())
        if not moved:
            logger.warning("Page %d is outside 1..%d; staying on page %d.",
                           page, self.total_pages(), self.current_page)
        return moved

    # detail view

    def select_row(self, index: int) -> Potion:
        rows = self.current_rows()
        if index < 0 or index >= len(rows):
            raise IndexError(f"row {index} is not on page {self.current_page} ({len(rows)} rows)")
        potion = rows[index]
        self.detail.open(potion)
        return potion

    def close_detail(self) -> None:
        self.detail.close()
