from __future__ import annotations

import logging
from datetime import date
from typing import Iterable, Optional

from models.round import Round
from models.stats import TeamStats

from .numeric import round_tenth
from .stats import valid_scored_rounds

logger = logging.getLogger(__name__)


def first_of_month(day: date) -> date:
    return day.replace(day=1)


def team_stats(
    player_count: int,
    active_player_count: int,
    rounds: Iterable[Round],
    *,
    today: Optional[date] = None,
) -> TeamStats:
    """
    Roll every player's rounds up into team totals.

    ``today`` fixes the month used for ``rounds_this_month``; it defaults to
    the current local date, so pass it explicitly for reproducible results.
    """
    rounds = list(rounds)
    valid = valid_scored_rounds(rounds)
    scores = [r.total_score for r in valid]

    month_start = first_of_month(today or date.today())
    this_month = [
        r for r in valid
        if r.round_date is not None and r.round_date >= month_start
    ]
    logger.debug(
        "team_stats: %d of %d rounds scored, %d since %s",
        len(valid), len(rounds), len(this_month), month_start,
    )

    return TeamStats(
        total_players=player_count,
        active_players=active_player_count,
        total_rounds=len(valid),
        team_scoring_average=round_tenth(sum(scores) / len(scores)) if scores else 0.0,
        best_team_round=min(scores) if scores else None,
        rounds_this_month=len(this_month),
    )
