import os

import pytest

os.environ.setdefault("LOG_TO_FILE", "false")

from core.models import Potion  # noqa: E402


def make_potion(idx, **overrides):
    fields = {
        "potion_id": f"id-{idx}",
        "name": f"Potion {idx}",
        "effect": f"Effect {idx}",
        "difficulty": "Moderate",
        "characteristics": "Pink in colour",
        "image_url": f"https://img.example/{idx}.png",
        "inventors": "Unknown",
        "ingredients": "Water",
        "side_effects": "None",
        "time": "1 hour",
        "wiki": f"https://wiki.example/{idx}",
    }
    fields.update(overrides)
    return Potion(**fields)


@pytest.fixture
def potions():
    return [make_potion(i) for i in range(1, 26)]


@pytest.fixture
def sample_records():
    return {
        "data": [
            {
                "id": "a1",
                "type": "potion",
                "attributes": {
                    "name": "Amortentia",
                    "effect": "Love potion",
                    "difficulty": "Advanced",
                    "characteristics": "Mother-of-pearl sheen",
                    "image": "https://img.example/amortentia.png",
                    "inventors": None,
                    "ingredients": "Ashwinder eggs",
                    "side_effects": "Obsession",
                    "time": None,
                    "wiki": "https://harrypotter.fandom.com/wiki/Amortentia",
                },
            },
            {
                "id": "b2",
                "type": "potion",
                "attributes": {
                    "name": "Pepperup Potion",
                    "difficulty": "Beginner",
                },
            },
        ]
    }
