# core/models.py
from dataclasses import dataclass
from typing import Any, Dict, Optional

ATTRIBUTE_FIELDS = {
    "name": "name",
    "effect": "effect",
    "difficulty": "difficulty",
    "characteristics": "characteristics",
    "image": "image_url",
    "inventors": "inventors",
    "ingredients": "ingredients",
    "side_effects": "side_effects",
    "time": "time",
    "wiki": "wiki",
}


def _as_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    if isinstance(value, str):
        return value
    return str(value)


@dataclass(frozen=True)
class Potion:
    """
    Flat representation of a catalog potion.
    Every field except the identifier may be missing from the source API.
    """
    potion_id: str
    name: Optional[str] = None
    effect: Optional[str] = None
    difficulty: Optional[str] = None
    characteristics: Optional[str] = None
    image_url: Optional[str] = None
    inventors: Optional[str] = None
    ingredients: Optional[str] = None
    side_effects: Optional[str] = None
    time: Optional[str] = None
    wiki: Optional[str] = None

    @classmethod
    def from_record(cls, record: Dict[str, Any]) -> "Potion":
        attributes = record.get("attributes")
        if not isinstance(attributes, dict):
            attributes = {}
        fields = {
            attr: _as_text(attributes.get(key))
            for key, attr in ATTRIBUTE_FIELDS.items()
        }
        return cls(potion_id=str(record.get("id", "")), **fields)
