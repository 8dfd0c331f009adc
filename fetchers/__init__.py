# fetchers/__init__.py
from . import potterdb

FETCHERS = {
    "potterdb": potterdb.fetch_potions,
}
