"""API request and response models."""

from datetime import date
from pydantic import BaseModel, Field
from typing import Dict, List, Optional

from models import Hole, PlayerStats, Round, RoundType, ScoreDistribution, ScoringTrend


class RoundsRequest(BaseModel):
    """A player's rounds, as supplied by the caller."""
    rounds: List[Round] = Field(default_factory=list)


class HolesRequest(BaseModel):
    holes: List[Hole] = Field(default_factory=list)


class TeamStatsRequest(BaseModel):
    total_players: int = Field(0, ge=0)
    active_players: int = Field(0, ge=0)
    rounds: List[Round] = Field(default_factory=list)
    today: Optional[date] = None  # reference date for the "this month" window


class HandicapResponse(BaseModel):
    handicap_index: Optional[float] = None
    eligible_rounds: int


class TrendResponse(BaseModel):
    trend: ScoringTrend


class RoundSummaryResponse(BaseModel):
    """Lightweight round for list views."""
    id: Optional[str] = None
    course_name: Optional[str] = None
    round_date: Optional[date] = None
    round_type: Optional[RoundType] = None
    total_score: Optional[int] = None
    to_par: Optional[int] = None
    total_putts: Optional[int] = None


class DashboardResponse(BaseModel):
    """Aggregated stats for a player's dashboard page."""
    stats: PlayerStats
    trend: ScoringTrend
    distribution: ScoreDistribution
    best_round_id: Optional[str] = None
    best_round_course: Optional[str] = None
    recent_rounds: List[RoundSummaryResponse]
    average_by_round_type: Dict[str, float]
