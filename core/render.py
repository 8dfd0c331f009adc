# core/render.py
from pathlib import Path
from typing import Any, Dict

from jinja2 import Environment, FileSystemLoader, select_autoescape

from core.detail import TABLE_FIELDS, table_cells
from core.filters import CHARACTERISTIC_OPTIONS, DIFFICULTY_OPTIONS, option_label
from core.paginator import page_buttons
from core.session import CatalogSession

# Resolve template directory relative to this file
TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"
env = Environment(
    loader=FileSystemLoader(str(TEMPLATE_DIR)),
    autoescape=select_autoescape(["html"]),
    trim_blocks=True,
    lstrip_blocks=True,
)

TITLE = "Potion Catalog"
THUMBNAIL_PX = 50


def _context(session: CatalogSession) -> Dict[str, Any]:
    total = session.total_pages()
    current = session.current_page
    criteria = session.criteria

    rows = [
        {
            "number": idx,
            "cells": table_cells(potion),
            "image_url": potion.image_url or "",
            "name": potion.name or "",
        }
        for idx, potion in enumerate(session.current_rows())
    ]

    modal = None
    if session.detail.is_open:
        modal = {
            "title": session.detail.title,
            "fields": session.detail.fields(),
        }

    return {
        "title": TITLE,
        "search_term": criteria.search_term,
        "difficulty_label": option_label(criteria.difficulty),
        "characteristic_label": option_label(criteria.characteristic),
        "difficulty_options": DIFFICULTY_OPTIONS,
        "characteristic_options": CHARACTERISTIC_OPTIONS,
        "headers": [label for label, _ in TABLE_FIELDS] + ["Image"],
        "rows": rows,
        "matched": len(session.filtered()),
        "loaded": len(session.potions),
        "current_page": current,
        "total_pages": total,
        "previous_disabled": not session.paginator.has_previous(),
        "next_disabled": not session.paginator.has_next(total),
        "buttons": page_buttons(current, total),
        "modal": modal,
        "thumbnail_px": THUMBNAIL_PX,
    }


def build_html_page(session: CatalogSession) -> str:
    template = env.get_template("catalog.html")
    return template.render(**_context(session))


def build_plaintext_page(session: CatalogSession) -> str:
    template = env.get_template("catalog.txt")
    return template.render(**_context(session))
