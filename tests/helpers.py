# tests/helpers.py

from engine.extractor import LOSS, WIN, TrackedMatch

PUUID = "puuid-me"


def make_match_doc(match_id="EUW_1", won=True, characters=None, stats=None,
                   puuid=PUUID, game_mode="ranked", duration=412):
    """Build a raw 2XKO match document with the target player on team 1."""
    if characters is None:
        characters = [
            {"char_id": "Ahri", "is_anchor": False},
            {"char_id": "Darius", "is_anchor": True},
        ]
    return {
        "metadata": {"match_id": match_id},
        "info": {
            "game_mode": game_mode,
            "game_duration": duration,
            "teams": [
                {
                    "won": not won,
                    "players": [{"puuid": "someone-else", "characters": [], "stats": {}}],
                },
                {
                    "won": won,
                    "players": [
                        {"puuid": puuid, "characters": characters, "stats": stats or {}},
                    ],
                },
            ],
        },
    }


def make_tracked(duo=("Ahri", "Darius"), won=True, anchor="Darius", first_hits=0,
                 rounds=None, match_id="M"):
    return TrackedMatch(
        match_id=match_id,
        result=WIN if won else LOSS,
        duo=tuple(sorted(duo)),
        anchor_char=anchor,
        point_char=None,
        game_mode="ranked",
        duration_seconds=300,
        first_hits=first_hits,
        rounds_played=rounds,
    )
