"""
Live 2XKO profile lookup.

Only the account resolution is fatal. Ranked stats, the match id list and
each match detail degrade to a warning string plus a ``None`` or partial
section, so the caller always gets either one RiotApiError or a complete
payload.
"""

import logging
import threading
from concurrent.futures import ThreadPoolExecutor

from api.http import RiotApiError
from config import (
    DEFAULT_MATCH_COUNT,
    DEFAULT_QUEUE,
    MATCH_BATCH_LIMIT,
    MATCH_FETCH_CONCURRENCY,
)
from engine.extractor import TrackedMatch, extract_tracked_match
from engine.fetcher import map_with_concurrency
from engine.stats_engine import compute_analytics

logger = logging.getLogger(__name__)

SCOPE_RANKED = "ranked-v1"
SCOPE_MATCH_IDS = "match-v1 ids"
SCOPE_MATCH_DETAIL = "match-v1 detail"

NOTE_WITH_ANALYTICS = (
    "2XKO-MATCH-V1 / 2XKO-RANKED-V1 endpoints consumed as documented. "
    "Double-check field names if Riot changes the response."
)
NOTE_WITHOUT_ANALYTICS = (
    "2XKO match/ranked data unavailable with the current configuration (route, key or access). "
    "The Riot ID lookup still works."
)


def format_partial_error(scope: str, error: BaseException) -> str:
    if isinstance(error, RiotApiError):
        suffix = f" ({error.status})" if error.status else ""
        return f"{scope}: {error.message}{suffix}"
    message = str(error)
    if message:
        return f"{scope}: {message}"
    return f"{scope}: unknown error"


def fetch_and_track_matches(
    client,
    match_ids: list[str],
    puuid: str,
    cluster: str,
    warnings: list[str],
    batch_limit: int = MATCH_BATCH_LIMIT,
    concurrency: int = MATCH_FETCH_CONCURRENCY,
    cancel: threading.Event | None = None,
) -> list[TrackedMatch]:
    limited_ids = list(match_ids)[:batch_limit]

    def fetch_and_extract(match_id: str, _index: int) -> TrackedMatch | None:
        match = client.get_match(match_id, cluster)
        return extract_tracked_match(match, puuid, match_id)

    results = map_with_concurrency(limited_ids, concurrency, fetch_and_extract, cancel)

    tracked = []
    skipped = 0
    for match_id, result in zip(limited_ids, results):
        if not result.success:
            logger.warning("match %s failed: %s", match_id, result.error)
            warnings.append(format_partial_error(SCOPE_MATCH_DETAIL, result.error))
        elif result.value is None:
            skipped += 1
        else:
            tracked.append(result.value)

    if skipped:
        logger.info("player absent from %d match(es), skipped", skipped)
    return tracked


def build_live_profile(
    riot_id: str,
    client,
    count: int = DEFAULT_MATCH_COUNT,
    queue: str | None = DEFAULT_QUEUE,
) -> dict:
    warnings: list[str] = []

    with ThreadPoolExecutor(max_workers=2) as executor:
        account_future = executor.submit(client.resolve_account, riot_id)
        catalog_future = executor.submit(client.get_catalog_summary)
        # fatal: re-raised to the caller
        account = account_future.result()
        try:
            champion_catalog = catalog_future.result()
        except Exception as exc:
            logger.info("catalog lookup failed: %s", exc)
            champion_catalog = None

    puuid = account["puuid"]
    cluster = account["source_cluster"]
    logger.info("resolved %s on %s", account.get("riot_id", riot_id), cluster)

    with ThreadPoolExecutor(max_workers=2) as executor:
        ranked_future = executor.submit(client.get_ranked_stats, puuid, cluster)
        ids_future = executor.submit(client.list_match_ids, puuid, cluster, count=count, queue=queue)

        ranked = None
        try:
            ranked = ranked_future.result()
        except Exception as exc:
            logger.warning("ranked stats failed: %s", exc)
            warnings.append(format_partial_error(SCOPE_RANKED, exc))

        match_ids = None
        try:
            match_ids = ids_future.result()
        except Exception as exc:
            logger.warning("match id listing failed: %s", exc)
            warnings.append(format_partial_error(SCOPE_MATCH_IDS, exc))

    analytics = None
    if match_ids is not None:
        if not isinstance(match_ids, list):
            match_ids = []
        tracked = fetch_and_track_matches(client, match_ids, puuid, cluster, warnings)
        analytics = compute_analytics(tracked, queue=queue)

    return {
        "account": account,
        "ranked": ranked,
        "analytics": analytics,
        "champion_catalog": champion_catalog,
        "limitations": {
            "has_match_analytics": analytics is not None,
            "requires_player_opt_in": True,
            "note": NOTE_WITH_ANALYTICS if analytics is not None else NOTE_WITHOUT_ANALYTICS,
        },
        "warnings": warnings,
    }
