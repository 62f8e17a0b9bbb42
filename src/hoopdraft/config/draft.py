"""Draft configuration: positions, player pools and session settings."""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass, replace
from typing import Iterable, Mapping, Tuple


logger = logging.getLogger(__name__)

POSITIONS: Tuple[str, ...] = ("PG", "SG", "SF", "PF", "C")

POOL_CURRENT = "current"
POOL_ALL_TIME = "allTime"
POOL_COMBINED = "combined"

POOL_CHOICES: Mapping[str, str] = {
    POOL_CURRENT: "Current Players",
    POOL_ALL_TIME: "All-Time Players",
    POOL_COMBINED: "Current + All-Time",
}

ROUND_CHOICES: Tuple[int, ...] = (5, 7, 10, 12, 15)

NBA_TEAM_NAMES: Tuple[str, ...] = (
    "Atlanta Hawks",
    "Boston Celtics",
    "Brooklyn Nets",
    "Charlotte Hornets",
    "Chicago Bulls",
    "Cleveland Cavaliers",
    "Dallas Mavericks",
    "Denver Nuggets",
    "Detroit Pistons",
    "Golden State Warriors",
    "Houston Rockets",
    "Indiana Pacers",
    "Los Angeles Clippers",
    "Los Angeles Lakers",
    "Memphis Grizzlies",
    "Miami Heat",
    "Milwaukee Bucks",
    "Minnesota Timberwolves",
    "New Orleans Pelicans",
    "New York Knicks",
    "Oklahoma City Thunder",
    "Orlando Magic",
    "Philadelphia 76ers",
    "Phoenix Suns",
    "Portland Trail Blazers",
    "Sacramento Kings",
    "San Antonio Spurs",
    "Toronto Raptors",
    "Utah Jazz",
    "Washington Wizards",
)

_ROUNDS_ENV = "HOOPDRAFT_ROUNDS"
_AI_TEAMS_ENV = "HOOPDRAFT_AI_TEAMS"
_POOL_ENV = "HOOPDRAFT_POOL"
_USER_TEAM_ENV = "HOOPDRAFT_USER_TEAM"


@dataclass(frozen=True)
class DraftSettings:
    rounds: int = 5
    ai_team_count: int = 5
    pool: str = POOL_CURRENT
    user_team_name: str = "Your Team"

    @property
    def team_count(self) -> int:
        return self.ai_team_count + 1

    @property
    def total_picks(self) -> int:
        return self.rounds * self.team_count

    def with_overrides(self, **overrides: object) -> "DraftSettings":
        """Return a copy with the non-``None`` overrides applied."""

        unknown = set(overrides) - set(self.__dataclass_fields__)
        if unknown:
            raise KeyError(f"Unknown draft settings: {sorted(unknown)!r}")
        values = {key: value for key, value in overrides.items() if value is not None}
        return replace(self, **values)


def _env_int(name: str, default: int, *, min_value: int | None = None) -> int:
    raw = os.getenv(name)
    if raw is None:
        return default
    try:
        value = int(raw)
    except ValueError:
        logger.warning("Invalid int for %s: %s; using default %d", name, raw, default)
        return default
    if min_value is not None and value < min_value:
        logger.warning("%s=%d is below %d; using default %d", name, value, min_value, default)
        return default
    return value


def _env_str(name: str, default: str, *, choices: Iterable[str] | None = None) -> str:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    value = raw.strip()
    if choices is not None and value not in set(choices):
        logger.warning("Invalid value for %s: %s; using default %s", name, value, default)
        return default
    return value


def load_settings(base: DraftSettings | None = None) -> DraftSettings:
    """Build draft settings from ``HOOPDRAFT_*`` environment variables."""

    base = base or DraftSettings()
    return DraftSettings(
        rounds=_env_int(_ROUNDS_ENV, base.rounds, min_value=1),
        ai_team_count=_env_int(_AI_TEAMS_ENV, base.ai_team_count, min_value=0),
        pool=_env_str(_POOL_ENV, base.pool, choices=POOL_CHOICES),
        user_team_name=_env_str(_USER_TEAM_ENV, base.user_team_name),
    )


def get_pool_label(pool: str) -> str:
    """Display label for a pool selector, raising KeyError if unknown."""

    if pool not in POOL_CHOICES:
        raise KeyError(f"No player pool configured for {pool!r}")
    return POOL_CHOICES[pool]
