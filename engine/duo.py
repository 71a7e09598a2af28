DUO_KEY_SEPARATOR = "|"
UNKNOWN_CHAR = "Unknown"


def normalize_duo(first: str | None, second: str | None, anchor_fallback: str | None) -> tuple[str, str]:
    """
    Canonical pair for the two characters a player fielded.

    Two known characters are sorted so that (A, B) and (B, A) land on the
    same duo. With one known character the anchor fills the other slot when
    it differs, otherwise the duo is degenerate (X, X).
    """
    known = [c for c in (first, second) if c]

    if not known:
        return (anchor_fallback or UNKNOWN_CHAR, UNKNOWN_CHAR)

    if len(known) == 1:
        only = known[0]
        if anchor_fallback and anchor_fallback != only:
            return (only, anchor_fallback)
        return (only, only)

    # code-point order: "Darius" sorts before "ahri"
    a, b = sorted(known[:2])
    return (a, b)


def duo_key(duo: tuple[str, str]) -> str:
    return DUO_KEY_SEPARATOR.join(duo)
