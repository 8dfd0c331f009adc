# core/filters.py
from dataclasses import dataclass
from typing import Iterable, List, Optional

from .models import Potion

ALL_LABEL = "All"


@dataclass(frozen=True)
class FilterOption:
    """A dropdown entry. ``value=None`` means the filter matches everything."""
    value: Optional[str]
    label: str


def _options(*values: str) -> List[FilterOption]:
    return [FilterOption(None, ALL_LABEL)] + [FilterOption(v, v) for v in values]


DIFFICULTY_OPTIONS = _options(
    "Beginner",
    "Beginner to Ordinary Wizarding Level",
    "Advanced",
    "Beginner to Moderate",
    "Moderate",
    "Ordinary Wizarding Level",
    "Moderate to advanced",
)

CHARACTERISTIC_OPTIONS = _options(
    "Pink in colour",
    "Green in colour",
)


def option_label(value: Optional[str]) -> str:
    return ALL_LABEL if value is None else value


@dataclass(frozen=True)
class FilterCriteria:
    search_term: str = ""
    difficulty: Optional[str] = None
    characteristic: Optional[str] = None

    def matches(self, potion: Potion) -> bool:
        if not potion.name:
            return False
        if self.search_term.lower() not in potion.name.lower():
            return False
        if self.difficulty is not None and potion.difficulty != self.difficulty:
            return False
        if self.characteristic is not None and potion.characteristics != self.characteristic:
            return False
        return True


def filter_potions(potions: Iterable[Potion], criteria: FilterCriteria) -> List[Potion]:
    """
    Keep potions matching every criterion, in their original order.
    Potions without a name never match.
    """
    return [p for p in potions if criteria.matches(p)]
