from unittest.mock import patch

import pytest

from api import error_codes
from api.account import fetch_account_by_riot_id, parse_riot_id
from api.http import RiotApiError
from config import Settings

SETTINGS = Settings(api_key="k")


class TestParseRiotId:

    def test_splits_on_last_hash(self):
        assert parse_riot_id("  Wei#rd#EUW ") == ("Wei#rd", "EUW")

    @pytest.mark.parametrize("value", ["", "NoTag", "#EUW", "Name#", "   #  ", "Name#   "])
    def test_invalid(self, value):
        with pytest.raises(RiotApiError) as exc_info:
            parse_riot_id(value)
        assert exc_info.value.code == error_codes.INVALID_RIOT_ID
        assert exc_info.value.status == 400


class TestFetchAccount:

    def test_missing_key_checked_first(self):
        with pytest.raises(RiotApiError) as exc_info:
            fetch_account_by_riot_id(Settings(api_key=None), "not-an-id")
        assert exc_info.value.code == error_codes.MISSING_RIOT_API_KEY

    def test_falls_through_404_clusters(self):
        calls = []

        def fake_get(settings, url, **kwargs):
            calls.append(url)
            if "asia" not in url:
                raise RiotApiError(error_codes.ACCOUNT_NOT_FOUND, 404, "nope")
            return {"puuid": "p-1", "gameName": "Faker"}

        with patch("api.account.riot_get", side_effect=fake_get):
            account = fetch_account_by_riot_id(SETTINGS, "faker#KR1")

        assert len(calls) == 3
        assert calls[0].startswith("https://europe.api.riotgames.com/riot/account/v1/accounts/by-riot-id/")
        assert account["puuid"] == "p-1"
        assert account["riot_id"] == "Faker#KR1"
        assert account["tag_line"] == "KR1"
        assert account["source_cluster"] == "asia"
        assert account["fetched_at"]

    def test_all_404_is_not_found(self):
        err = RiotApiError(error_codes.ACCOUNT_NOT_FOUND, 404, "nope")
        with patch("api.account.riot_get", side_effect=err):
            with pytest.raises(RiotApiError) as exc_info:
                fetch_account_by_riot_id(SETTINGS, "a#b")
        assert exc_info.value.code == error_codes.ACCOUNT_NOT_FOUND
        assert exc_info.value.status == 404

    def test_other_errors_stop_the_loop(self):
        err = RiotApiError(error_codes.RIOT_FORBIDDEN, 403, "forbidden")
        with patch("api.account.riot_get", side_effect=err) as get:
            with pytest.raises(RiotApiError) as exc_info:
                fetch_account_by_riot_id(SETTINGS, "a#b")
        assert exc_info.value.code == error_codes.RIOT_FORBIDDEN
        assert get.call_count == 1

    def test_no_clusters_is_upstream_error(self):
        with pytest.raises(RiotApiError) as exc_info:
            fetch_account_by_riot_id(Settings(api_key="k", account_clusters=()), "a#b")
        assert exc_info.value.code == error_codes.RIOT_UPSTREAM_ERROR
        assert exc_info.value.status == 502

    def test_url_encodes_name(self):
        with patch("api.account.riot_get", return_value={"puuid": "p"}) as get:
            fetch_account_by_riot_id(SETTINGS, "Jean Luc/x#EU W")
        url = get.call_args[0][1]
        assert url.endswith("/by-riot-id/Jean%20Luc%2Fx/EU%20W")
