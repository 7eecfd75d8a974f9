# -----------------------------------------------------------------------------
# Accuracy scorer
# Purpose: Heuristic confidence in [0, 1] derived from the number of range
# warnings raised for an evaluation. Each warning costs a fixed penalty; the
# score is clamped so eleven or more warnings read as 0.0, never negative.
# -----------------------------------------------------------------------------

from __future__ import annotations

WARNING_PENALTY = 0.1


def score(warning_count: int) -> float:
    if warning_count < 0:
        raise ValueError("warning_count must be non-negative")
    raw = 1.0 - WARNING_PENALTY * warning_count
    return min(1.0, max(0.0, raw))
