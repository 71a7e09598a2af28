import math
from collections import defaultdict

from config import AGGRESSIVITY_PREDATOR_THRESHOLD, RECENT_MATCHES_LIMIT, TOP_STATS_LIMIT
from engine.duo import duo_key
from engine.extractor import WIN, TrackedMatch

BADGE_UNKNOWN = "Indetermine"
BADGE_PREDATOR = "Predateur"
BADGE_STANDARD = "Standard"


def win_rate_pct(wins: int, total: int) -> int:
    if total <= 0:
        return 0
    # half-up, so 12.5 -> 13
    return int(math.floor(wins / total * 100 + 0.5))


def _rank(rows: list[dict], limit: int) -> list[dict]:
    for row in rows:
        row["winrate"] = win_rate_pct(row["wins"], row["total_matches"])
    rows.sort(key=lambda r: (-r["total_matches"], -r["winrate"]))
    return rows[:limit]


def aggressivity_badge(ratio: float | None, threshold: float = AGGRESSIVITY_PREDATOR_THRESHOLD) -> str:
    if ratio is None:
        return BADGE_UNKNOWN
    if ratio > threshold:
        return BADGE_PREDATOR
    return BADGE_STANDARD


def compute_analytics(
    matches: list[TrackedMatch],
    queue: str | None = None,
    top_n: int = TOP_STATS_LIMIT,
    recent_n: int = RECENT_MATCHES_LIMIT,
    predator_threshold: float = AGGRESSIVITY_PREDATOR_THRESHOLD,
) -> dict:
    duo_stats = {}
    anchor_stats = defaultdict(lambda: {"wins": 0, "losses": 0, "total_matches": 0})
    wins = 0
    total_first_hits = 0
    total_rounds = 0
    rounds_known = 0

    for m in matches:
        won = m.result == WIN
        wins += won

        key = duo_key(m.duo)
        if key not in duo_stats:
            duo_stats[key] = {"duo": list(m.duo), "wins": 0, "losses": 0, "total_matches": 0}
        bucket = duo_stats[key]
        bucket["total_matches"] += 1
        bucket["wins" if won else "losses"] += 1

        if m.anchor_char:
            a = anchor_stats[m.anchor_char]
            a["total_matches"] += 1
            a["wins" if won else "losses"] += 1

        total_first_hits += m.first_hits
        if m.rounds_played is not None and m.rounds_played > 0:
            total_rounds += m.rounds_played
            rounds_known += 1

    duo_rows = _rank(list(duo_stats.values()), top_n)
    anchor_rows = _rank(
        [{"char_id": char_id, **s} for char_id, s in anchor_stats.items()],
        top_n,
    )
    top_anchor = anchor_rows[0] if anchor_rows else None

    ratio = round(total_first_hits / total_rounds, 3) if total_rounds > 0 else None
    avg_per_match = round(total_first_hits / len(matches), 2) if matches else 0

    return {
        "sample_window_matches": len(matches),
        "queue": queue,
        "wins": wins,
        "losses": len(matches) - wins,
        "duo_stats": duo_rows,
        "anchor": {
            "top_anchor_char": top_anchor["char_id"] if top_anchor else None,
            "top_anchor_winrate": top_anchor["winrate"] if top_anchor else None,
            "by_anchor_char": anchor_rows,
        },
        "aggressivity": {
            "badge": aggressivity_badge(ratio, predator_threshold),
            "ratio_first_hits_per_round": ratio,
            "average_first_hits_per_match": avg_per_match,
            "total_first_hits": total_first_hits,
            "total_rounds_seen": total_rounds if rounds_known > 0 else None,
        },
        "recent_matches": [m.to_recent() for m in matches[:recent_n]],
    }
