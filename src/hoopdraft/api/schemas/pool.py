from __future__ import annotations

from typing import Any, List

from pydantic import BaseModel, Field

from hoopdraft.models import Player


class PoolRequest(BaseModel):
    pool: str = Field(default="current")
    current: List[dict[str, Any]] = Field(default_factory=list)
    all_time: List[dict[str, Any]] = Field(default_factory=list)
    position: str | None = None
    min_overall: int | None = Field(default=None, ge=0)
    name_query: str | None = None
    limit: int | None = Field(default=None, ge=1, le=1000)


class PoolReportResponse(BaseModel):
    pool: str
    total_records: int
    accepted_players: int
    rejected_records: list[str]


class PoolSummaryResponse(BaseModel):
    available_players: int
    selected_players: int
    overall_mean: float | None
    overall_median: float | None
    overall_std: float | None


class PoolResponse(BaseModel):
    report: PoolReportResponse
    summary: PoolSummaryResponse
    players: List[Player]


class SettingsResponse(BaseModel):
    rounds: int
    ai_team_count: int
    pool: str
    user_team_name: str
    round_choices: list[int]
    pool_choices: dict[str, str]
