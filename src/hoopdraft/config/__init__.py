"""Configuration helpers for draft sessions and player pools."""

from .draft import (
    NBA_TEAM_NAMES,
    POOL_ALL_TIME,
    POOL_CHOICES,
    POOL_COMBINED,
    POOL_CURRENT,
    POSITIONS,
    ROUND_CHOICES,
    DraftSettings,
    get_pool_label,
    load_settings,
)

__all__ = [
    "NBA_TEAM_NAMES",
    "POOL_ALL_TIME",
    "POOL_CHOICES",
    "POOL_COMBINED",
    "POOL_CURRENT",
    "POSITIONS",
    "ROUND_CHOICES",
    "DraftSettings",
    "get_pool_label",
    "load_settings",
]
