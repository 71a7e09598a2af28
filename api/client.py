from api.account import fetch_account_by_riot_id
from api.catalog import fetch_champion_catalog_summary
from api.twoxko_match import get_match, get_match_ids_by_puuid
from api.twoxko_ranked import get_ranked_stats_by_puuid
from config import Settings, load_settings


class RiotClient:
    """Upstream collaborators bound to one ``Settings``."""

    def __init__(self, settings: Settings | None = None):
        self.settings = settings if settings is not None else load_settings()

    def resolve_account(self, riot_id: str) -> dict:
        return fetch_account_by_riot_id(self.settings, riot_id)

    def list_match_ids(self, puuid: str, cluster: str, count: int = 20, start: int = 0, queue: str | None = None):
        return get_match_ids_by_puuid(self.settings, puuid, cluster, count=count, start=start, queue=queue)

    def get_match(self, match_id: str, cluster: str):
        return get_match(self.settings, match_id, cluster)

    def get_ranked_stats(self, puuid: str, cluster: str):
        return get_ranked_stats_by_puuid(self.settings, puuid, cluster)

    def get_catalog_summary(self) -> dict | None:
        return fetch_champion_catalog_summary(self.settings)
