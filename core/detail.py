# core/detail.py
from dataclasses import dataclass
from typing import List, Optional, Tuple

from .models import Potion

NOT_SPECIFIED = "Not specified"
EMPTY_CELL = "Empty"

DETAIL_FIELDS = [
    ("Effect", "effect"),
    ("Difficulty", "difficulty"),
    ("Characteristic", "characteristics"),
    ("Inventor", "inventors"),
    ("Ingredients", "ingredients"),
    ("Side Effects", "side_effects"),
    ("Time to Make", "time"),
    ("Wiki", "wiki"),
]

TABLE_FIELDS = [
    ("Name", "name"),
    ("Effect", "effect"),
    ("Difficulty", "difficulty"),
    ("Characteristic", "characteristics"),
]


def _or(value: Optional[str], placeholder: str) -> str:
    return value if value else placeholder


def detail_fields(potion: Potion) -> List[Tuple[str, str]]:
    return [(label, _or(getattr(potion, attr), NOT_SPECIFIED)) for label, attr in DETAIL_FIELDS]


def table_cells(potion: Potion) -> List[str]:
    return [_or(getattr(potion, attr), EMPTY_CELL) for _, attr in TABLE_FIELDS]


@dataclass
class DetailView:
    """
    Modal state: closed, or open on one selected potion.
    Opening while already open replaces the selection.
    """
    selected: Optional[Potion] = None

    @property
    def is_open(self) -> bool:
        return self.selected is not None

    def open(self, potion: Potion) -> None:
        self.selected = potion

    def close(self) -> None:
        self.selected = None

    @property
    def title(self) -> str:
        if self.selected is None:
            return ""
        return self.selected.name or ""

    def fields(self) -> List[Tuple[str, str]]:
        if self.selected is None:
            return []
        return detail_fields(self.selected)
