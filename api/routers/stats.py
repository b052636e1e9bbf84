"""Stats API endpoints. Every endpoint is a pure computation over the request body."""

from fastapi import APIRouter

from analytics import (
    average_by_round_type,
    best_round,
    eligible_rounds,
    handicap_index,
    player_stats,
    recent_rounds,
    round_score_distribution,
    score_distribution,
    scoring_trend,
    team_stats,
)
from api.schemas import (
    DashboardResponse,
    HandicapResponse,
    HolesRequest,
    RoundsRequest,
    RoundSummaryResponse,
    TeamStatsRequest,
    TrendResponse,
)
from models import PlayerStats, Round, ScoreDistribution, TeamStats

router = APIRouter()


def summarize_round(r: Round) -> RoundSummaryResponse:
    """Project a full Round model into a lightweight summary."""
    return RoundSummaryResponse(
        id=r.id,
        course_name=r.course_name,
        round_date=r.round_date,
        round_type=r.round_type,
        total_score=r.total_score,
        to_par=r.total_to_par(),
        total_putts=r.total_putts,
    )


@router.post("/player", response_model=PlayerStats)
async def get_player_stats(req: RoundsRequest):
    return player_stats(req.rounds)


@router.post("/distribution", response_model=ScoreDistribution)
async def get_score_distribution(req: HolesRequest):
    return score_distribution(req.holes)


@router.post("/handicap", response_model=HandicapResponse)
async def get_handicap(req: RoundsRequest):
    return HandicapResponse(
        handicap_index=handicap_index(req.rounds),
        eligible_rounds=len(eligible_rounds(req.rounds)),
    )


@router.post("/trend", response_model=TrendResponse)
async def get_trend(req: RoundsRequest):
    return TrendResponse(trend=scoring_trend(req.rounds))


@router.post("/team", response_model=TeamStats)
async def get_team_stats(req: TeamStatsRequest):
    return team_stats(req.total_players, req.active_players, req.rounds, today=req.today)


@router.post("/dashboard", response_model=DashboardResponse)
async def get_dashboard(req: RoundsRequest):
    best = best_round(req.rounds)
    return DashboardResponse(
        stats=player_stats(req.rounds),
        trend=scoring_trend(req.rounds),
        distribution=round_score_distribution(req.rounds),
        best_round_id=best.id if best else None,
        best_round_course=best.course_name if best else None,
        recent_rounds=[summarize_round(r) for r in recent_rounds(req.rounds)],
        average_by_round_type=average_by_round_type(req.rounds),
    )
