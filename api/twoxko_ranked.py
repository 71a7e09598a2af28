from urllib.parse import quote

from api import error_codes
from api.http import riot_get
from config import Settings


def get_ranked_stats_by_puuid(settings: Settings, puuid: str, cluster: str):
    url = f"{settings.base_url(cluster)}/ranked/v1/stats/by-puuid/{quote(puuid, safe='')}"
    return riot_get(
        settings,
        url,
        context_label="2XKO ranked stats",
        not_found_code=error_codes.ACCOUNT_NOT_FOUND,
        not_found_message="No 2XKO ranked stats for this player.",
    )
