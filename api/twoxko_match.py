from urllib.parse import quote

from api import error_codes
from api.http import riot_get
from config import MAX_MATCH_IDS_PER_REQUEST, Settings


def get_match_ids_by_puuid(
    settings: Settings,
    puuid: str,
    cluster: str,
    count: int = 20,
    start: int = 0,
    queue: str | None = None,
):
    url = f"{settings.base_url(cluster)}/match/v1/matches/by-puuid/{quote(puuid, safe='')}/ids"
    params = {
        "start": max(start, 0),
        "count": min(max(count, 1), MAX_MATCH_IDS_PER_REQUEST),
    }
    if queue:
        params["queue"] = queue

    return riot_get(
        settings,
        url,
        params=params,
        context_label="2XKO match id list",
        not_found_code=error_codes.ACCOUNT_NOT_FOUND,
        not_found_message="No 2XKO match found for this player.",
    )


def get_match(settings: Settings, match_id: str, cluster: str):
    url = f"{settings.base_url(cluster)}/match/v1/matches/{quote(match_id, safe='')}"
    return riot_get(
        settings,
        url,
        context_label="2XKO match detail",
        not_found_code=error_codes.MATCH_NOT_FOUND,
        not_found_message=f"2XKO match not found ({match_id}).",
    )
