from __future__ import annotations

import logging
from typing import Dict, Iterable, List, Optional, Tuple

from models.round import Round
from models.stats import PlayerStats

from .handicap import handicap_index
from .numeric import is_finite_number, round_tenth

logger = logging.getLogger(__name__)


def valid_scored_rounds(rounds: Iterable[Round]) -> List[Round]:
    """Rounds with a recorded, positive total score."""
    return [r for r in rounds if is_finite_number(r.total_score) and r.total_score > 0]


def _ratio_percentage(pairs: List[Tuple[int, int]]) -> float:
    """
    Percentage from the sum of hits over the sum of totals.

    Summing first keeps rounds with few tracked holes from skewing the result
    the way an average of per-round percentages would.
    """
    if not pairs:
        return 0.0
    hit = sum(h for h, _ in pairs)
    total = sum(t for _, t in pairs)
    return hit / total * 100


def player_stats(rounds: Iterable[Round]) -> PlayerStats:
    """Compute aggregate scoring, putting, fairway and GIR stats for a player."""
    valid = valid_scored_rounds(rounds)
    if not valid:
        return PlayerStats()

    scores = [r.total_score for r in valid]

    putts = [r.total_putts for r in valid if is_finite_number(r.total_putts)]
    putts_per_round = sum(putts) / len(putts) if putts else 0.0

    fairways = [
        (r.fairways_hit, r.fairways_total)
        for r in valid
        if r.fairways_hit is not None and r.fairways_total
    ]
    greens = [
        (r.greens_in_regulation, r.greens_total)
        for r in valid
        if r.greens_in_regulation is not None and r.greens_total
    ]
    logger.debug(
        "player_stats: %d scored rounds, %d with putts, %d with fairways, %d with greens",
        len(valid), len(putts), len(fairways), len(greens),
    )

    return PlayerStats(
        rounds_played=len(valid),
        scoring_average=round_tenth(sum(scores) / len(scores)),
        best_round=min(scores),
        worst_round=max(scores),
        putts_per_round=round_tenth(putts_per_round),
        fairways_hit_percentage=round_tenth(_ratio_percentage(fairways)),
        greens_in_regulation_percentage=round_tenth(_ratio_percentage(greens)),
        handicap_index=handicap_index(valid),
    )


def recent_rounds(rounds: Iterable[Round], count: int = 5) -> List[Round]:
    """Most recent dated rounds, newest first."""
    dated = [r for r in rounds if r.round_date is not None]
    dated.sort(key=lambda r: r.round_date, reverse=True)
    return dated[:count]


def average_by_round_type(rounds: Iterable[Round]) -> Dict[str, float]:
    """Average total score per round type (practice, tournament, ...)."""
    by_type: Dict[str, List[int]] = {}

    for round_obj in rounds:
        if not round_obj.total_score or round_obj.round_type is None:
            continue
        by_type.setdefault(round_obj.round_type.value, []).append(round_obj.total_score)

    return {
        round_type: round_tenth(sum(scores) / len(scores))
        for round_type, scores in by_type.items()
    }


def best_round(rounds: Iterable[Round]) -> Optional[Round]:
    """The lowest-scoring valid round, first in input order on ties."""
    valid = valid_scored_rounds(rounds)
    if not valid:
        return None
    return min(valid, key=lambda r: r.total_score)
