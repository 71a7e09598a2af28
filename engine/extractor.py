import math
from dataclasses import dataclass

from engine.duo import normalize_duo

WIN = "WIN"
LOSS = "LOSS"


@dataclass(frozen=True)
class TrackedMatch:
    """One player's view of one match, built from the raw match document."""

    match_id: str
    result: str
    duo: tuple[str, str]
    anchor_char: str | None
    point_char: str | None
    game_mode: str | None
    duration_seconds: float | None
    first_hits: int = 0
    combo_peak: int = 0
    assists_called: int = 0
    damage_dealt: int = 0
    tags_performed: int = 0
    rounds_played: int | None = None

    def to_recent(self) -> dict:
        return {
            "match_id": self.match_id,
            "result": self.result,
            "duo": list(self.duo),
            "anchor_char": self.anchor_char,
            "game_mode": self.game_mode,
            "duration_seconds": self.duration_seconds,
            "first_hits": self.first_hits,
            "combo_peak": self.combo_peak,
        }


def _is_number(value) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool) and math.isfinite(value)


def _count_or_zero(value) -> int:
    if not _is_number(value) or value < 0:
        return 0
    return int(value)


def _as_dict(value) -> dict:
    return value if isinstance(value, dict) else {}


def _rounds_or_none(value) -> int | None:
    # 0 is kept: known, zero rounds
    if not _is_number(value) or value < 0:
        return None
    return int(value)


def _resolve_anchor(characters: list[dict], names: list[str]) -> str | None:
    for c in characters:
        if c.get("is_anchor"):
            return c["char_id"]
    if len(names) > 1:
        return names[1]
    return names[0] if names else None


def _resolve_point(characters: list[dict], names: list[str], anchor: str | None) -> str | None:
    for c in characters:
        if c.get("is_anchor") is False:
            return c["char_id"]
    for name in names:
        if name != anchor:
            return name
    return names[0] if names else None


def extract_tracked_match(match: dict, puuid: str, fallback_match_id: str) -> TrackedMatch | None:
    """
    Find ``puuid`` in the match teams and build its TrackedMatch.

    Returns None when the player is not part of this match.
    """
    match = _as_dict(match)
    metadata = _as_dict(match.get("metadata"))
    info = _as_dict(match.get("info"))
    match_id = metadata.get("match_id") or fallback_match_id

    for team in info.get("teams") or []:
        if not isinstance(team, dict):
            continue
        for player in team.get("players") or []:
            if not isinstance(player, dict) or player.get("puuid") != puuid:
                continue

            characters = [
                c for c in (player.get("characters") or [])
                if isinstance(c, dict) and isinstance(c.get("char_id"), str)
            ]
            names = [c["char_id"] for c in characters]
            anchor = _resolve_anchor(characters, names)
            point = _resolve_point(characters, names, anchor)

            stats = _as_dict(player.get("stats"))
            rounds = stats.get("rounds_played")
            if rounds is None:
                rounds = stats.get("rounds")

            game_mode = info.get("game_mode")
            duration = info.get("game_duration")

            return TrackedMatch(
                match_id=match_id,
                result=WIN if team.get("won") else LOSS,
                duo=normalize_duo(
                    names[0] if names else None,
                    names[1] if len(names) > 1 else None,
                    anchor,
                ),
                anchor_char=anchor,
                point_char=point,
                game_mode=game_mode if isinstance(game_mode, str) else None,
                duration_seconds=duration if _is_number(duration) else None,
                first_hits=_count_or_zero(stats.get("first_hits")),
                combo_peak=_count_or_zero(stats.get("combo_peak")),
                assists_called=_count_or_zero(stats.get("assists_called")),
                damage_dealt=_count_or_zero(stats.get("damage_dealt")),
                tags_performed=_count_or_zero(stats.get("tags_performed")),
                rounds_played=_rounds_or_none(rounds),
            )

    return None
