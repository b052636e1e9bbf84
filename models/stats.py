"""Result models returned by the analytics engine."""

from enum import Enum
from pydantic import BaseModel
from typing import Optional


class ScoringTrend(str, Enum):
    """Direction of a player's scoring over time."""
    IMPROVING = "improving"
    DECLINING = "declining"
    STABLE = "stable"


class PlayerStats(BaseModel):
    """Aggregate statistics for one player's rounds."""
    rounds_played: int = 0
    scoring_average: float = 0.0
    best_round: int = 0
    worst_round: int = 0
    putts_per_round: float = 0.0
    fairways_hit_percentage: float = 0.0
    greens_in_regulation_percentage: float = 0.0
    handicap_index: Optional[float] = None  # None until enough rated rounds exist


class ScoreDistribution(BaseModel):
    """Hole counts by score relative to par."""
    eagles: int = 0
    birdies: int = 0
    pars: int = 0
    bogeys: int = 0
    double_plus: int = 0

    @property
    def total(self) -> int:
        return self.eagles + self.birdies + self.pars + self.bogeys + self.double_plus


class TeamStats(BaseModel):
    """Team-wide rollup across every player's rounds."""
    total_players: int = 0
    active_players: int = 0
    total_rounds: int = 0
    team_scoring_average: float = 0.0
    best_team_round: Optional[int] = None
    rounds_this_month: int = 0
