from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from hoopdraft.models import Player


class EvaluateRequest(BaseModel):
    roster: List[Player] = Field(default_factory=list)


class EvaluationResponse(BaseModel):
    score: int
    sub_scores: dict[str, float]
    feedback: str


class TeamRosterPayload(BaseModel):
    team_id: str
    name: str
    is_user: bool = False
    roster: List[Player] = Field(default_factory=list)


class TeamsEvaluateRequest(BaseModel):
    teams: List[TeamRosterPayload]


class TeamStandingResponse(BaseModel):
    rank: int
    team_id: str
    name: str
    is_user: bool
    evaluation: EvaluationResponse


class StandingsResponse(BaseModel):
    standings: List[TeamStandingResponse]


class FeedbackResponse(BaseModel):
    score: int
    feedback: str
