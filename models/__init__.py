from .base import BaseGolfModel
from .hole import Hole
from .round import Round, RoundType
from .stats import PlayerStats, ScoreDistribution, ScoringTrend, TeamStats

__all__ = [
    "BaseGolfModel",
    "Hole",
    "Round",
    "RoundType",
    "PlayerStats",
    "ScoreDistribution",
    "ScoringTrend",
    "TeamStats",
]
