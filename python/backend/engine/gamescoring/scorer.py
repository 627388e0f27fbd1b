"""Word search scoring."""

from __future__ import annotations

import math

BASE_SCORE = 1000
POINTS_PER_SECOND = 2


class Scorer:
    """Stateless scorer — all methods are static."""

    @staticmethod
    def score(elapsed_seconds: float | None, won: bool) -> int:
        """Return the final score for a round.

        A win is worth ``1000 - 2 * elapsed`` rounded down and never below
        zero; a loss, or a round with no known start time, scores 0.
        """
        if not won or elapsed_seconds is None:
            return 0
        elapsed_seconds = max(0.0, elapsed_seconds)
        return max(0, math.floor(BASE_SCORE - POINTS_PER_SECOND * elapsed_seconds))
