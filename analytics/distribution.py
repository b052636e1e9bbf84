from __future__ import annotations

import logging
from typing import Iterable

from models.hole import Hole
from models.round import Round
from models.stats import ScoreDistribution

logger = logging.getLogger(__name__)

SCORE_TYPE_ORDER = [
    "eagles",
    "birdies",
    "pars",
    "bogeys",
    "double_plus",
]


def classify_score_to_par(to_par: int) -> str:
    """Bucket name for a hole result relative to par. Eagle includes anything better."""
    if to_par <= -2:
        return "eagles"
    if to_par == -1:
        return "birdies"
    if to_par == 0:
        return "pars"
    if to_par == 1:
        return "bogeys"
    return "double_plus"


def score_distribution(holes: Iterable[Hole]) -> ScoreDistribution:
    """
    Count holes by score type.

    Holes without a score, without a par, or with a par outside 3-5 are
    skipped and do not count toward any bucket.
    """
    counts = {name: 0 for name in SCORE_TYPE_ORDER}
    skipped = 0

    for hole in holes:
        if hole.score is None or not hole.has_valid_par():
            skipped += 1
            continue
        counts[classify_score_to_par(hole.score - hole.par)] += 1

    if skipped:
        logger.debug("score_distribution skipped %d unscored or invalid holes", skipped)
    return ScoreDistribution(**counts)


def round_score_distribution(rounds: Iterable[Round]) -> ScoreDistribution:
    """Pool the holes of every round into one distribution."""
    return score_distribution(hole for round_obj in rounds for hole in round_obj.holes)
