from datetime import date
from enum import Enum
from pydantic import Field, model_validator
from typing import List, Optional

from .base import BaseGolfModel
from .hole import Hole


class RoundType(str, Enum):
    """Why the round was played."""
    PRACTICE = "practice"
    QUALIFIER = "qualifier"
    TOURNAMENT = "tournament"
    CASUAL = "casual"


class Round(BaseGolfModel):
    """Represents one played round of golf for a single player."""
    id: Optional[str] = None
    player_id: Optional[str] = None
    course_name: Optional[str] = None
    round_date: Optional[date] = None
    round_type: Optional[RoundType] = None

    # None while the round is in progress or holes are unscored
    total_score: Optional[int] = None

    course_rating: Optional[float] = None
    course_slope: Optional[int] = None

    # Counters; a total of 0 means the stat was not tracked
    total_putts: Optional[int] = Field(None, ge=0)
    fairways_hit: Optional[int] = Field(None, ge=0)
    fairways_total: Optional[int] = Field(None, ge=0)
    greens_in_regulation: Optional[int] = Field(None, ge=0)
    greens_total: Optional[int] = Field(None, ge=0)

    holes: List[Hole] = Field(default_factory=list)

    @model_validator(mode='after')
    def validate_counter_totals(self):
        pairs = [
            ("fairways_hit", self.fairways_hit, self.fairways_total),
            ("greens_in_regulation", self.greens_in_regulation, self.greens_total),
        ]
        for name, hit, total in pairs:
            if hit is not None and total:
                if hit > total:
                    raise ValueError(f"{name} ({hit}) cannot exceed its total ({total})")
        return self

    def total_to_par(self) -> Optional[int]:
        """Total score relative to the summed par of the scored holes."""
        scored = [h for h in self.holes if h.score is not None and h.par is not None]
        if not scored:
            return None
        return sum(h.score for h in scored) - sum(h.par for h in scored)
