from __future__ import annotations

from typing import List

from pydantic import BaseModel, Field

from hoopdraft.models import Player


class NeedsRequest(BaseModel):
    roster: List[Player] = Field(default_factory=list)
    total_rounds: int = Field(..., ge=0)


class PositionNeedPayload(BaseModel):
    current: float
    target: int


class NeedsResponse(BaseModel):
    needs: dict[str, PositionNeedPayload]


class PrioritiesRequest(BaseModel):
    needs: dict[str, PositionNeedPayload]


class PositionPriorityResponse(BaseModel):
    position: str
    priority: float


class PrioritiesResponse(BaseModel):
    priorities: List[PositionPriorityResponse]
