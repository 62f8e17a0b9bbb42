"""Canonical value models."""

from .height import DEFAULT_HEIGHT_INCHES, parse_height_inches
from .player import (
    Athleticism,
    BadgeCounts,
    Defense,
    InsideScoring,
    Intangibles,
    Player,
    Playmaking,
    Shooting,
)

__all__ = [
    "DEFAULT_HEIGHT_INCHES",
    "Athleticism",
    "BadgeCounts",
    "Defense",
    "InsideScoring",
    "Intangibles",
    "Player",
    "Playmaking",
    "Shooting",
    "parse_height_inches",
]
