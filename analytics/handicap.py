"""
Handicap index calculation (simplified USGA method).

A differential is computed for every rated round, the lowest N of them are
averaged and the average is scaled by 0.96. N depends on how many rated
rounds exist; see ``differentials_to_use``.
"""

from __future__ import annotations

import logging
from typing import Iterable, List, Optional

from models.round import Round

from .exceptions import InvalidSlopeError, NonFiniteValueError
from .numeric import is_finite_number, round_tenth

logger = logging.getLogger(__name__)

STANDARD_SLOPE = 113
HANDICAP_MULTIPLIER = 0.96
MIN_HANDICAP_ROUNDS = 3


def score_differential(score: float, course_rating: float, course_slope: float) -> float:
    """(score - course rating) x 113 / slope."""
    if not (is_finite_number(score) and is_finite_number(course_rating)
            and is_finite_number(course_slope)):
        raise NonFiniteValueError(
            f"Differential inputs must be finite numbers: "
            f"score={score!r}, rating={course_rating!r}, slope={course_slope!r}"
        )
    if course_slope <= 0:
        raise InvalidSlopeError(f"Slope must be positive, got {course_slope}")
    return (score - course_rating) * STANDARD_SLOPE / course_slope


def eligible_rounds(rounds: Iterable[Round]) -> List[Round]:
    """Rounds carrying a score, a course rating and a positive slope."""
    return [
        r for r in rounds
        if is_finite_number(r.total_score)
        and is_finite_number(r.course_rating)
        and is_finite_number(r.course_slope)
        and r.course_slope > 0
    ]


def differentials_to_use(count: int) -> int:
    """
    How many of the lowest differentials count toward the index.

    20+ rounds use the best 10, 10-19 use half, 6-9 drop the two worst and
    anything below 6 uses only the single best differential.
    """
    if count >= 20:
        return 10
    if count >= 10:
        return count // 2
    if count >= 6:
        return count - 2
    return 1


def handicap_index(rounds: Iterable[Round]) -> Optional[float]:
    """
    Compute a handicap index to one decimal place.

    Returns None when fewer than three rated rounds are available so callers
    can tell "no handicap yet" apart from a scratch (0.0) index.
    """
    rated = eligible_rounds(rounds)
    if len(rated) < MIN_HANDICAP_ROUNDS:
        logger.debug("handicap unavailable: %d rated rounds", len(rated))
        return None

    differentials = sorted(
        score_differential(r.total_score, r.course_rating, r.course_slope)
        for r in rated
    )
    num_to_use = differentials_to_use(len(differentials))
    best = differentials[:num_to_use]
    logger.debug("handicap from best %d of %d differentials", num_to_use, len(differentials))

    average = sum(best) / len(best)
    return round_tenth(average * HANDICAP_MULTIPLIER)
