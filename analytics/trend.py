from __future__ import annotations

import logging
from typing import Iterable

from models.round import Round
from models.stats import ScoringTrend

from .numeric import is_finite_number

logger = logging.getLogger(__name__)

# Strokes the earlier/recent averages must differ by before a trend is called.
# A fixed policy value, not derived from score variance.
TREND_THRESHOLD = 2.0
MIN_TREND_ROUNDS = 4


def scoring_trend(rounds: Iterable[Round], threshold: float = TREND_THRESHOLD) -> ScoringTrend:
    """
    Compare the earlier half of a player's rounds with the recent half.

    Rounds are ordered by date; with an odd count the recent half gets the
    extra round. A drop in average score of more than ``threshold`` strokes is
    "improving", a rise of more than ``threshold`` is "declining".
    """
    dated = [
        r for r in rounds
        if is_finite_number(r.total_score) and r.round_date is not None
    ]
    if len(dated) < MIN_TREND_ROUNDS:
        return ScoringTrend.STABLE

    dated.sort(key=lambda r: r.round_date)
    midpoint = len(dated) // 2
    earlier = [r.total_score for r in dated[:midpoint]]
    recent = [r.total_score for r in dated[midpoint:]]

    difference = sum(earlier) / len(earlier) - sum(recent) / len(recent)
    logger.debug("scoring_trend: earlier-recent difference %.2f over %d rounds", difference, len(dated))

    if difference > threshold:
        return ScoringTrend.IMPROVING
    if difference < -threshold:
        return ScoringTrend.DECLINING
    return ScoringTrend.STABLE
