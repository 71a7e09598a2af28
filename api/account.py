import datetime
import logging
from urllib.parse import quote

from api import error_codes
from api.http import RiotApiError, require_api_key, riot_get
from config import Settings

logger = logging.getLogger(__name__)


def parse_riot_id(value: str) -> tuple[str, str]:
    """Split ``Name#TAG`` on the last ``#`` into ``(game_name, tag_line)``."""
    value = (value or "").strip()
    hash_index = value.rfind("#")

    if hash_index <= 0 or hash_index == len(value) - 1:
        raise RiotApiError(
            error_codes.INVALID_RIOT_ID, 400, "Invalid Riot ID format. Use `Name#TAG`."
        )

    game_name = value[:hash_index].strip()
    tag_line = value[hash_index + 1 :].strip()
    if not game_name or not tag_line:
        raise RiotApiError(
            error_codes.INVALID_RIOT_ID, 400, "Invalid Riot ID format. Use `Name#TAG`."
        )

    return game_name, tag_line


def fetch_account_by_riot_id(settings: Settings, riot_id: str) -> dict:
    """
    Resolve a Riot ID by trying each account cluster in turn.

    A 404 moves on to the next cluster; any other error stops the lookup.
    """
    require_api_key(settings)
    game_name, tag_line = parse_riot_id(riot_id)
    last_404 = False

    for cluster in settings.account_clusters:
        url = (
            f"{settings.base_url(cluster)}/riot/account/v1/accounts/by-riot-id/"
            f"{quote(game_name, safe='')}/{quote(tag_line, safe='')}"
        )
        try:
            data = riot_get(
                settings,
                url,
                context_label="account lookup",
                not_found_code=error_codes.ACCOUNT_NOT_FOUND,
                not_found_message="No Riot account found for this Riot ID.",
            )
        except RiotApiError as exc:
            if exc.status == 404:
                logger.debug("account %s#%s not on %s", game_name, tag_line, cluster)
                last_404 = True
                continue
            raise

        if not isinstance(data, dict) or not data.get("puuid"):
            raise RiotApiError(
                error_codes.RIOT_UPSTREAM_ERROR, 502, "Account lookup returned no puuid."
            )

        name = data.get("gameName") or game_name
        tag = data.get("tagLine") or tag_line
        return {
            "puuid": data["puuid"],
            "game_name": name,
            "tag_line": tag,
            "riot_id": f"{name}#{tag}",
            "source_cluster": cluster,
            "fetched_at": datetime.datetime.now(datetime.timezone.utc).isoformat(),
        }

    if last_404:
        raise RiotApiError(
            error_codes.ACCOUNT_NOT_FOUND, 404, "No Riot account found for this Riot ID."
        )

    raise RiotApiError(
        error_codes.RIOT_UPSTREAM_ERROR, 502, "Unable to resolve the Riot account right now."
    )
