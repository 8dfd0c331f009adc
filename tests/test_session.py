"""Tests for the catalog session: filters, paging and selection together."""

from unittest.mock import MagicMock

import pytest

from core.session import CatalogSession
from conftest import make_potion


def _session(items, **kwargs):
    return CatalogSession(fetcher=MagicMock(return_value=items), **kwargs)


class TestLoad:

    def test_load_fetches_once(self, potions):
        session = _session(potions)
        assert session.load() == 25
        assert session.load() == 25
        session.fetcher.assert_called_once_with()

    def test_empty_fetch_gives_empty_table(self):
        session = _session([])
        session.load()
        assert session.current_rows() == []
        assert session.total_pages() == 1


class TestPaging:

    def test_pages_of_ten(self, potions):
        session = _session(potions)
        session.load()
        assert len(session.current_rows()) == 10
        assert session.total_pages() == 3
        session.next_page()
        session.next_page()
        assert session.current_page == 3
        assert [p.potion_id for p in session.current_rows()] == [f"id-{i}" for i in range(21, 26)]

    def test_next_on_last_and_previous_on_first(self, potions):
        session = _session(potions)
        session.load()
        session.previous_page()
        assert session.current_page == 1
        assert session.go_to_page(3)
        session.next_page()
        assert session.current_page == 3

    def test_go_to_page_out_of_range_is_ignored(self, potions):
        session = _session(potions)
        session.load()
        assert session.go_to_page(4) is False
        assert session.current_page == 1


class TestFilterPageReset:

    def test_search_resets_to_first_page(self, potions):
        session = _session(potions)
        session.load()
        session.go_to_page(2)
        session.set_search("potion 1")
        assert session.current_page == 1
        assert all("potion 1" in p.name.lower() for p in session.filtered())

    def test_difficulty_change_keeps_page_by_default(self, potions):
        session = _session(potions, reset_page_on_filter=False)
        session.load()
        session.go_to_page(3)
        session.set_difficulty("Advanced")
        assert session.current_page == 3
        assert session.current_rows() == []

    def test_filter_change_resets_when_configured(self, potions):
        session = _session(potions, reset_page_on_filter=True)
        session.load()
        session.go_to_page(3)
        session.set_characteristic("Pink in colour")
        assert session.current_page == 1

    def test_all_sentinel_clears_filter(self, potions):
        session = _session(potions)
        session.load()
        session.set_difficulty("Advanced")
        assert session.filtered() == []
        session.set_difficulty(None)
        assert session.filtered() == potions


class TestSelection:

    def test_select_row_opens_detail(self, potions):
        session = _session(potions)
        session.load()
        session.next_page()
        potion = session.select_row(0)
        assert potion.potion_id == "id-11"
        assert session.detail.selected is potion
        session.close_detail()
        assert not session.detail.is_open

    def test_select_row_outside_page(self):
        session = _session([make_potion(1)])
        session.load()
        with pytest.raises(IndexError):
            session.select_row(1)
        assert not session.detail.is_open
