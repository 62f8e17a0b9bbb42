"""REST API for the hoopdraft engine."""

from __future__ import annotations

import logging
from dataclasses import asdict

from fastapi import FastAPI, HTTPException, Query

from hoopdraft.api.schemas import (
    EvaluateRequest,
    EvaluationResponse,
    FeedbackResponse,
    NeedsRequest,
    NeedsResponse,
    PoolReportResponse,
    PoolRequest,
    PoolResponse,
    PoolSummaryResponse,
    PositionNeedPayload,
    PositionPriorityResponse,
    PrioritiesRequest,
    PrioritiesResponse,
    SettingsResponse,
    StandingsResponse,
    TeamsEvaluateRequest,
    TeamStandingResponse,
)
from hoopdraft.config import POOL_CHOICES, ROUND_CHOICES, DraftSettings, load_settings
from hoopdraft.draft import (
    InvalidNeedsError,
    PositionNeed,
    Team,
    compute_team_needs,
    rank_position_priorities,
)
from hoopdraft.evaluation import EvaluationResult, evaluate_roster, evaluate_teams, feedback_for_score
from hoopdraft.ingest import RawPlayerSources, normalize_with_report
from hoopdraft.pool import PlayerFilter, filter_players


logger = logging.getLogger(__name__)


def _evaluation_to_response(result: EvaluationResult) -> EvaluationResponse:
    return EvaluationResponse(score=result.score, sub_scores=dict(result.sub_scores), feedback=result.feedback)


def create_app(settings: DraftSettings | None = None) -> FastAPI:
    app = FastAPI(title="hoopdraft")
    app.state.settings = settings or load_settings()

    @app.get("/health")
    async def health() -> dict[str, str]:
        return {"status": "ok"}

    @app.get("/settings", response_model=SettingsResponse)
    async def get_settings() -> SettingsResponse:
        current: DraftSettings = app.state.settings
        return SettingsResponse(
            **asdict(current),
            round_choices=list(ROUND_CHOICES),
            pool_choices=dict(POOL_CHOICES),
        )

    @app.post("/pool", response_model=PoolResponse)
    async def build_pool(request: PoolRequest) -> PoolResponse:
        sources = RawPlayerSources(current=request.current, all_time=request.all_time)
        players, report = normalize_with_report(sources, request.pool)
        selection = filter_players(
            players,
            PlayerFilter(
                position=request.position,
                min_overall=request.min_overall,
                name_query=request.name_query,
                limit=request.limit,
            ),
        )
        return PoolResponse(
            report=PoolReportResponse(**asdict(report)),
            summary=PoolSummaryResponse(**asdict(selection.summary)),
            players=selection.players,
        )

    @app.post("/needs", response_model=NeedsResponse)
    async def needs(request: NeedsRequest) -> NeedsResponse:
        computed = compute_team_needs(request.roster, request.total_rounds)
        return NeedsResponse(
            needs={
                position: PositionNeedPayload(current=need.current, target=need.target)
                for position, need in computed.items()
            }
        )

    @app.post("/priorities", response_model=PrioritiesResponse)
    async def priorities(request: PrioritiesRequest) -> PrioritiesResponse:
        needs_map = {
            position: PositionNeed(current=payload.current, target=payload.target)
            for position, payload in request.needs.items()
        }
        try:
            ranked = rank_position_priorities(needs_map)
        except InvalidNeedsError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc
        return PrioritiesResponse(
            priorities=[
                PositionPriorityResponse(position=item.position, priority=item.priority)
                for item in ranked
            ]
        )

    @app.post("/evaluate", response_model=EvaluationResponse)
    async def evaluate(request: EvaluateRequest) -> EvaluationResponse:
        return _evaluation_to_response(evaluate_roster(request.roster))

    @app.post("/evaluate/teams", response_model=StandingsResponse)
    async def evaluate_standings(request: TeamsEvaluateRequest) -> StandingsResponse:
        if not request.teams:
            raise HTTPException(status_code=400, detail="at least one team is required")
        teams = [
            Team(
                team_id=payload.team_id,
                name=payload.name,
                draft_order=index,
                is_user=payload.is_user,
                roster=list(payload.roster),
            )
            for index, payload in enumerate(request.teams, start=1)
        ]
        standings = evaluate_teams(teams)
        logger.info("Evaluated %d teams", len(standings))
        return StandingsResponse(
            standings=[
                TeamStandingResponse(
                    rank=rank,
                    team_id=entry.team_id,
                    name=entry.name,
                    is_user=entry.is_user,
                    evaluation=_evaluation_to_response(entry.result),
                )
                for rank, entry in enumerate(standings, start=1)
            ]
        )

    @app.get("/feedback", response_model=FeedbackResponse)
    async def feedback(score: int = Query(..., ge=0, le=100)) -> FeedbackResponse:
        return FeedbackResponse(score=score, feedback=feedback_for_score(score))

    return app
