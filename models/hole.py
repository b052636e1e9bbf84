from pydantic import Field
from typing import Optional

from .base import BaseGolfModel

VALID_PARS = (3, 4, 5)


class Hole(BaseGolfModel):
    """A single hole played within a round."""
    hole_number: Optional[int] = Field(None, ge=1, le=18)
    # Left unconstrained: upstream data may carry bad pars, the engine skips them.
    par: Optional[int] = None
    score: Optional[int] = Field(None, ge=1)
    putts: Optional[int] = Field(None, ge=0)
    fairway_hit: Optional[bool] = None
    green_in_regulation: Optional[bool] = None

    def has_valid_par(self) -> bool:
        return self.par in VALID_PARS

    def score_to_par(self) -> Optional[int]:
        """Score relative to par (+2, -1, etc.)."""
        if self.score is None or self.par is None:
            return None
        return self.score - self.par
