import json
import logging
import time

import requests

from api import error_codes
from config import Settings

logger = logging.getLogger(__name__)


class RiotApiError(Exception):
    def __init__(self, code: str, status: int, message: str, details: str | None = None):
        super().__init__(message)
        self.code = code
        self.status = status
        self.message = message
        self.details = details

    def to_dict(self) -> dict:
        out = {"ok": False, "error": self.message, "code": self.code, "status": self.status}
        if self.details:
            out["details"] = self.details
        return out


def require_api_key(settings: Settings) -> str:
    if not settings.api_key:
        raise RiotApiError(
            error_codes.MISSING_RIOT_API_KEY,
            500,
            "RIOT_API_KEY is missing from the server environment.",
        )
    return settings.api_key


def safe_error_body(r: requests.Response) -> str | None:
    try:
        content_type = r.headers.get("content-type", "")
        if "application/json" in content_type:
            return json.dumps(r.json())
        return r.text
    except Exception:
        return None


def error_for_status(
    status: int,
    context_label: str,
    not_found_code: str,
    not_found_message: str,
    details: str | None = None,
) -> RiotApiError:
    if status == 404:
        return RiotApiError(not_found_code, 404, not_found_message, details)
    if status == 401:
        return RiotApiError(
            error_codes.RIOT_UNAUTHORIZED,
            401,
            f"RIOT_API_KEY is invalid or expired ({context_label}).",
            details,
        )
    if status == 403:
        return RiotApiError(
            error_codes.RIOT_FORBIDDEN,
            403,
            f"Riot denied access to {context_label} (route not allowed for this key).",
            details,
        )
    if status == 429:
        return RiotApiError(
            error_codes.RIOT_RATE_LIMIT,
            429,
            f"Riot rate limit reached on {context_label}.",
            details,
        )
    return RiotApiError(
        error_codes.RIOT_UPSTREAM_ERROR,
        status,
        f"Riot upstream error on {context_label}.",
        details,
    )


def riot_get(
    settings: Settings,
    url: str,
    params=None,
    context_label: str = "Riot API",
    not_found_code: str = error_codes.RIOT_UPSTREAM_ERROR,
    not_found_message: str = "Resource not found.",
):
    api_key = require_api_key(settings)
    headers = {"X-Riot-Token": api_key, "Accept": "application/json"}

    for attempt in range(settings.max_retries + 1):
        logger.debug("GET %s params=%s", url, params)
        try:
            r = requests.get(url, headers=headers, params=params, timeout=settings.timeout)
        except requests.RequestException as exc:
            raise RiotApiError(
                error_codes.RIOT_UPSTREAM_ERROR,
                502,
                f"Network error on {context_label}.",
                str(exc),
            ) from exc

        if r.status_code == 200:
            try:
                return r.json()
            except ValueError as exc:
                raise RiotApiError(
                    error_codes.RIOT_UPSTREAM_ERROR,
                    502,
                    f"Undecodable response on {context_label}.",
                    r.text[:500],
                ) from exc

        if r.status_code == 429 and attempt < settings.max_retries:
            retry_after = r.headers.get("Retry-After")
            sleep_s = int(retry_after) if retry_after and retry_after.isdigit() else (2 + attempt)
            logger.info("429 on %s, retrying in %ss", context_label, sleep_s)
            time.sleep(sleep_s)
            continue

        raise error_for_status(
            r.status_code,
            context_label,
            not_found_code,
            not_found_message,
            safe_error_body(r),
        )

    # unreachable: the last attempt always returns or raises
    raise RiotApiError(error_codes.RIOT_RATE_LIMIT, 429, f"Too many retries (429) on {context_label}.")
