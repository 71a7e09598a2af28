"""
Public 2XKO champion catalog.

The catalog JSON is not versioned and its shape has moved around, so the
collection is located by trying a few extraction strategies in order. The
first one that returns a collection wins. Any failure yields ``None``.
"""

import datetime
import logging
from typing import Any, Callable, Optional

import requests

from config import CATALOG_SAMPLE_SIZE, Settings

logger = logging.getLogger(__name__)

CollectionStrategy = Callable[[Any], Optional[list]]

COLLECTION_KEYS = ("champions", "data", "items", "results")
NAME_KEYS = ("displayName", "name", "championName", "id", "slug")


def _from_list(payload: Any) -> list | None:
    return payload if isinstance(payload, list) else None


def _from_known_key(payload: Any) -> list | None:
    if not isinstance(payload, dict):
        return None
    for key in COLLECTION_KEYS:
        value = payload.get(key)
        if isinstance(value, list):
            return value
        if isinstance(value, dict):
            return list(value.values())
    return None


def _from_dict_values(payload: Any) -> list | None:
    if isinstance(payload, dict):
        return list(payload.values())
    return None


COLLECTION_STRATEGIES: tuple[CollectionStrategy, ...] = (
    _from_list,
    _from_known_key,
    _from_dict_values,
)


def resolve_collection(payload: Any, strategies=COLLECTION_STRATEGIES) -> list | None:
    for strategy in strategies:
        found = strategy(payload)
        if found is not None:
            return found
    return None


def infer_collection_count(payload: Any) -> int | None:
    if isinstance(payload, list):
        return len(payload)
    if not isinstance(payload, dict):
        return None

    for key in COLLECTION_KEYS:
        value = payload.get(key)
        if isinstance(value, (list, dict)):
            return len(value)

    return len(payload) or None


def _item_name(item: Any) -> str | None:
    if isinstance(item, str):
        return item
    if not isinstance(item, dict):
        return None
    for key in NAME_KEYS:
        value = item.get(key)
        if value is not None:
            return value if isinstance(value, str) else None
    return None


def extract_champion_names(payload: Any) -> list[str]:
    collection = resolve_collection(payload) or []
    return [name for name in (_item_name(item) for item in collection) if name]


def summarize_catalog(payload: Any, source_url: str) -> dict:
    unique_names = list(dict.fromkeys(extract_champion_names(payload)))
    return {
        "source_url": source_url,
        "count": len(unique_names) if unique_names else infer_collection_count(payload),
        "sample_names": unique_names[:CATALOG_SAMPLE_SIZE],
        "fetched_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
    }


def fetch_champion_catalog_summary(settings: Settings) -> dict | None:
    try:
        r = requests.get(settings.catalog_url, timeout=settings.timeout)
        if not r.ok:
            logger.info("catalog unavailable: HTTP %s", r.status_code)
            return None
        return summarize_catalog(r.json(), settings.catalog_url)
    except Exception as exc:
        logger.info("catalog unavailable: %s", exc)
        return None
