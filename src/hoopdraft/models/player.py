"""Canonical player models shared across ingestion, drafting and evaluation."""

from __future__ import annotations

from typing import Any, List, Optional

from pydantic import BaseModel, Field, model_validator
from pydantic.config import ConfigDict

from .height import DEFAULT_HEIGHT_INCHES, parse_height_inches


class _AttributeGroup(BaseModel):
    model_config = ConfigDict(frozen=True)


class InsideScoring(_AttributeGroup):
    close_shot: int = 0
    layup: int = 0
    standing_dunk: int = 0
    driving_dunk: int = 0
    post_control: int = 0
    post_hook: int = 0
    post_fade: int = 0


class Shooting(_AttributeGroup):
    mid_range: int = 0
    three_point: int = 0
    free_throw: int = 0
    shot_iq: int = 0


class Playmaking(_AttributeGroup):
    pass_accuracy: int = 0
    ball_handle: int = 0
    speed_with_ball: int = 0
    pass_iq: int = 0
    pass_vision: int = 0


class Defense(_AttributeGroup):
    interior: int = 0
    perimeter: int = 0
    steal: int = 0
    block: int = 0
    defensive_rebound: int = 0
    offensive_rebound: int = 0


class Athleticism(_AttributeGroup):
    speed: int = 0
    agility: int = 0
    strength: int = 0
    vertical: int = 0
    stamina: int = 0
    hustle: int = 0


class Intangibles(_AttributeGroup):
    offensive_consistency: int = 0
    defensive_consistency: int = 0
    help_defense_iq: int = 0
    durability: int = 0


class BadgeCounts(_AttributeGroup):
    legendary: int = Field(default=0, ge=0)
    purple: int = Field(default=0, ge=0)
    gold: int = Field(default=0, ge=0)
    silver: int = Field(default=0, ge=0)
    bronze: int = Field(default=0, ge=0)
    outside_scoring: int = Field(default=0, ge=0)
    inside_scoring: int = Field(default=0, ge=0)
    general_offense: int = Field(default=0, ge=0)
    playmaking: int = Field(default=0, ge=0)
    defensive: int = Field(default=0, ge=0)
    rebounding: int = Field(default=0, ge=0)
    all_around: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)


class Player(BaseModel):
    """Normalized player payload used by the draft and evaluation layers."""

    player_id: str = Field(..., min_length=1)
    name: str = Field(..., min_length=1)
    team: Optional[str] = None
    image: Optional[str] = None
    height: Optional[str] = None
    height_inches: int = DEFAULT_HEIGHT_INCHES
    primary_position: str
    secondary_position: Optional[str] = None
    overall_rating: int = 0
    inside_scoring: InsideScoring = Field(default_factory=InsideScoring)
    shooting: Shooting = Field(default_factory=Shooting)
    playmaking: Playmaking = Field(default_factory=Playmaking)
    defense: Defense = Field(default_factory=Defense)
    athleticism: Athleticism = Field(default_factory=Athleticism)
    intangibles: Intangibles = Field(default_factory=Intangibles)
    badges: BadgeCounts = Field(default_factory=BadgeCounts)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode="before")
    @classmethod
    def _derive_height_inches(cls, data: Any) -> Any:
        # Payloads carrying only the "feet'inches" label get it parsed here.
        if isinstance(data, dict) and data.get("height_inches") is None:
            data = {key: value for key, value in data.items() if key != "height_inches"}
            if data.get("height"):
                data["height_inches"] = parse_height_inches(data["height"])
        return data

    @property
    def positions(self) -> List[str]:
        if self.secondary_position:
            return [self.primary_position, self.secondary_position]
        return [self.primary_position]

    def plays(self, position: str) -> bool:
        return position in self.positions
