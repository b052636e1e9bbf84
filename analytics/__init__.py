from .distribution import (
    classify_score_to_par,
    round_score_distribution,
    score_distribution,
)
from .exceptions import InvalidSlopeError, NonFiniteValueError, StatsError
from .handicap import (
    differentials_to_use,
    eligible_rounds,
    handicap_index,
    score_differential,
)
from .stats import (
    average_by_round_type,
    best_round,
    player_stats,
    recent_rounds,
    valid_scored_rounds,
)
from .team import team_stats
from .trend import TREND_THRESHOLD, scoring_trend

__all__ = [
    "classify_score_to_par",
    "score_distribution",
    "round_score_distribution",
    "score_differential",
    "eligible_rounds",
    "differentials_to_use",
    "handicap_index",
    "player_stats",
    "valid_scored_rounds",
    "recent_rounds",
    "average_by_round_type",
    "best_round",
    "scoring_trend",
    "TREND_THRESHOLD",
    "team_stats",
    "StatsError",
    "InvalidSlopeError",
    "NonFiniteValueError",
]
