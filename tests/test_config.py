from unittest.mock import patch

from api.client import RiotClient
from config import Settings, load_settings


def test_load_settings_from_env(monkeypatch):
    monkeypatch.setenv("RIOT_API_KEY", "  RGAPI-abc  ")
    monkeypatch.setenv("RIOT_2XKO_API_BASE_URL", "http://localhost:9000/")
    monkeypatch.setenv("RIOT_HTTP_TIMEOUT", "oops")
    monkeypatch.setenv("RIOT_MAX_RETRIES", "2")

    settings = load_settings()

    assert settings.api_key == "RGAPI-abc"
    assert settings.timeout == 20.0
    assert settings.max_retries == 2
    assert settings.base_url("europe") == "http://localhost:9000"


def test_blank_key_is_none(monkeypatch):
    monkeypatch.setenv("RIOT_API_KEY", "   ")
    monkeypatch.delenv("RIOT_2XKO_API_BASE_URL", raising=False)
    settings = load_settings()
    assert settings.api_key is None
    assert settings.base_url("asia") == "https://asia.api.riotgames.com"


def test_client_binds_settings():
    settings = Settings(api_key="k")
    client = RiotClient(settings)
    with patch("api.client.get_match", return_value={"m": 1}) as get_match:
        assert client.get_match("M1", "europe") == {"m": 1}
    get_match.assert_called_once_with(settings, "M1", "europe")

    with patch("api.client.get_match_ids_by_puuid", return_value=["M1"]) as list_ids:
        client.list_match_ids("p", "europe", count=5, queue="ranked")
    list_ids.assert_called_once_with(settings, "p", "europe", count=5, start=0, queue="ranked")
