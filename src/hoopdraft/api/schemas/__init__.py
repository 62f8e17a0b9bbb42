"""Pydantic models for API I/O."""

from .draft import (
    NeedsRequest,
    NeedsResponse,
    PositionNeedPayload,
    PositionPriorityResponse,
    PrioritiesRequest,
    PrioritiesResponse,
)
from .evaluation import (
    EvaluateRequest,
    EvaluationResponse,
    FeedbackResponse,
    StandingsResponse,
    TeamRosterPayload,
    TeamsEvaluateRequest,
    TeamStandingResponse,
)
from .pool import (
    PoolReportResponse,
    PoolRequest,
    PoolResponse,
    PoolSummaryResponse,
    SettingsResponse,
)

__all__ = [
    "EvaluateRequest",
    "EvaluationResponse",
    "FeedbackResponse",
    "NeedsRequest",
    "NeedsResponse",
    "PoolReportResponse",
    "PoolRequest",
    "PoolResponse",
    "PoolSummaryResponse",
    "PositionNeedPayload",
    "PositionPriorityResponse",
    "PrioritiesRequest",
    "PrioritiesResponse",
    "SettingsResponse",
    "StandingsResponse",
    "TeamRosterPayload",
    "TeamStandingResponse",
    "TeamsEvaluateRequest",
]
