"""Translate a similarity threshold into the minimum detectable q-gram length."""

from __future__ import annotations

# Used when no errors are tolerated and the run-length ratio is undefined.
EXACT_MATCH_Q = 10


def compute_q(threshold: float) -> int:
    """Return the shortest token run that must survive at `threshold`.

    With at most `1 - threshold` of the tokens in error, the worst case spreads
    the errors evenly and leaves runs of `threshold / (1 - threshold)` good
    tokens between them. For example, 100 tokens at 0.8 leave 20 errors and
    runs of 4 good tokens. Thresholds at or below 0.5 would give runs shorter
    than one token, so the result is clamped to 1.
    """

    if not 0.0 < threshold <= 1.0:
        raise ValueError(f"threshold must be in (0, 1], got {threshold}")
    if threshold == 1.0:
        return EXACT_MATCH_Q
    return max(1, int(threshold / (1.0 - threshold)))
