import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _parse_int(env_var: str, default: int) -> int:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return int(raw)
    except ValueError:
        return default


def _parse_float(env_var: str, default: float) -> float:
    raw = os.getenv(env_var)
    if raw is None:
        return default
    try:
        return float(raw)
    except ValueError:
        return default


ACCOUNT_CLUSTERS = ("europe", "americas", "asia")
CATALOG_URL = "https://map.rgpub.io/public/2xko/latest/champions.json"

DEFAULT_QUEUE = "ranked"
DEFAULT_MATCH_COUNT = 20
MAX_MATCH_IDS_PER_REQUEST = 100

# Fan-out bounds for one profile lookup
MATCH_BATCH_LIMIT = 20
MATCH_FETCH_CONCURRENCY = 4

TOP_STATS_LIMIT = 8
RECENT_MATCHES_LIMIT = 10
CATALOG_SAMPLE_SIZE = 8

# first hits per round strictly above this -> "Predateur"
AGGRESSIVITY_PREDATOR_THRESHOLD = 0.7

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()


@dataclass(frozen=True)
class Settings:
    api_key: str | None
    base_url_override: str | None = None
    timeout: float = 20
    max_retries: int = 0
    catalog_url: str = CATALOG_URL
    account_clusters: tuple[str, ...] = ACCOUNT_CLUSTERS

    def base_url(self, cluster: str) -> str:
        if self.base_url_override:
            return self.base_url_override.rstrip("/")
        return f"https://{cluster}.api.riotgames.com"


def load_settings() -> Settings:
    api_key = (os.getenv("RIOT_API_KEY") or "").strip() or None
    base_url = (os.getenv("RIOT_2XKO_API_BASE_URL") or "").strip() or None
    return Settings(
        api_key=api_key,
        base_url_override=base_url,
        timeout=_parse_float("RIOT_HTTP_TIMEOUT", 20.0),
        max_retries=max(0, _parse_int("RIOT_MAX_RETRIES", 0)),
        catalog_url=os.getenv("TWOXKO_CATALOG_URL", CATALOG_URL),
    )
