# fetchers/potterdb.py
import os
from typing import Any, List

import requests

from core.models import Potion
from core.logger import get_logger

logger = get_logger(__name__)

API_URL = os.getenv("POTION_API_URL", "https://api.potterdb.com/v1/potions")
API_TIMEOUT = float(os.getenv("POTION_API_TIMEOUT", "30"))
USER_AGENT = os.getenv("POTION_USER_AGENT", "potion-catalog/1.0")
DEBUG_LOG_SAMPLES = os.getenv("POTION_DEBUG_LOG_SAMPLES", "false").lower() == "true"

SESSION = requests.Session()
SESSION.headers.update({"User-Agent": USER_AGENT, "Accept": "application/json"})


def _fetch(url: str) -> Any:
    r = SESSION.get(url, timeout=API_TIMEOUT)
    r.raise_for_status()
    return r.json()


def _normalize(records: List[Any]) -> List[Potion]:
    potions: List[Potion] = []
    for idx, record in enumerate(records):
        if not isinstance(record, dict):
            logger.warning("Skipping potion record %d: expected an object, got %r", idx, record)
            continue
        potions.append(Potion.from_record(record))
    return potions


def fetch_potions(url: str = API_URL) -> List[Potion]:
    """
    Fetch the potion catalog with a single GET request.
    Returns an empty list on any transport, HTTP, or shape failure.
    """
    logger.info("Fetching potions from %s", url)

    try:
        payload = _fetch(url)
    except requests.RequestException as e:
        logger.error("Error fetching potions from %s: %s", url, e)
        return []
    except ValueError as e:
        logger.error("Potion response from %s is not valid JSON: %s", url, e)
        return []

    data = payload.get("data") if isinstance(payload, dict) else None
    if not isinstance(data, list):
        logger.error("Invalid data structure from %s. Expected an array under 'data'.", url)
        return []

    potions = _normalize(data)

    if DEBUG_LOG_SAMPLES:
        logger.debug("Sample potions from %s: %s", url, potions[:3])

    logger.info("Fetched %d potions from %s", len(potions), url)
    return potions
