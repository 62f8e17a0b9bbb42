"""Helpers to load raw player pools and emit canonical players."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

from hoopdraft.config import POOL_ALL_TIME, POOL_COMBINED, POOL_CURRENT
from hoopdraft.models import Player
from hoopdraft.models.height import DEFAULT_HEIGHT_INCHES, parse_height_inches, parse_leading_int


logger = logging.getLogger(__name__)

RawRecord = Mapping[str, Any]

NAME_FIELD = "name"
RATING_FIELD = "overallAttribute"

ATTRIBUTE_MAPPING: Dict[str, Dict[str, str]] = {
    "inside_scoring": {
        "close_shot": "closeShot",
        "layup": "layup",
        "standing_dunk": "standingDunk",
        "driving_dunk": "drivingDunk",
        "post_control": "postControl",
        "post_hook": "postHook",
        "post_fade": "postFade",
    },
    "shooting": {
        "mid_range": "midRangeShot",
        "three_point": "threePointShot",
        "free_throw": "freeThrow",
        "shot_iq": "shotIQ",
    },
    "playmaking": {
        "pass_accuracy": "passAccuracy",
        "ball_handle": "ballHandle",
        "speed_with_ball": "speedWithBall",
        "pass_iq": "passIQ",
        "pass_vision": "passVision",
    },
    "defense": {
        "interior": "interiorDefense",
        "perimeter": "perimeterDefense",
        "steal": "steal",
        "block": "block",
        "defensive_rebound": "defensiveRebound",
        "offensive_rebound": "offensiveRebound",
    },
    "athleticism": {
        "speed": "speed",
        "agility": "agility",
        "strength": "strength",
        "vertical": "vertical",
        "stamina": "stamina",
        "hustle": "hustle",
    },
    "intangibles": {
        "offensive_consistency": "offensiveConsistency",
        "defensive_consistency": "defensiveConsistency",
        "help_defense_iq": "helpDefenseIQ",
        "durability": "overallDurability",
    },
}

BADGE_MAPPING: Dict[str, str] = {
    "legendary": "legendaryBadgeCount",
    "purple": "purpleBadgeCount",
    "gold": "goldBadgeCount",
    "silver": "silverBadgeCount",
    "bronze": "bronzeBadgeCount",
    "outside_scoring": "outsideScoringBadgeCount",
    "inside_scoring": "insideScoringBadgeCount",
    "general_offense": "generalOffenseBadgeCount",
    "playmaking": "playmakingBadgeCount",
    "defensive": "defensiveBadgeCount",
    "rebounding": "reboundingBadgeCount",
    "all_around": "allAroundBadgeCount",
    "total": "badgeCount",
}


@dataclass(frozen=True)
class RawPlayerSources:
    """The two raw collections a pool is selected from."""

    current: Sequence[RawRecord] = field(default_factory=tuple)
    all_time: Sequence[RawRecord] = field(default_factory=tuple)


@dataclass(frozen=True)
class PoolReport:
    pool: str
    total_records: int
    accepted_players: int
    rejected_records: List[str]


def _attribute_value(raw: RawRecord, key: str) -> int:
    value = parse_leading_int(raw.get(key))
    return 0 if value is None else value


def _optional_text(value: Any) -> Optional[str]:
    if value is None:
        return None
    text = str(value).strip()
    return text or None


def normalize_player(raw: RawRecord) -> Optional[Player]:
    """Build a canonical player, or ``None`` when the record is unusable."""

    if not raw.get(NAME_FIELD) or not raw.get(RATING_FIELD):
        return None
    rating = parse_leading_int(raw.get(RATING_FIELD))
    if rating is None:
        return None

    name = str(raw[NAME_FIELD]).strip()
    if not name:
        return None

    groups = {
        group: {attr: _attribute_value(raw, key) for attr, key in mapping.items()}
        for group, mapping in ATTRIBUTE_MAPPING.items()
    }
    badges = {attr: max(0, _attribute_value(raw, key)) for attr, key in BADGE_MAPPING.items()}
    height = _optional_text(raw.get("height"))

    return Player(
        player_id=_optional_text(raw.get("id")) or name,
        name=name,
        team=_optional_text(raw.get("team")),
        image=_optional_text(raw.get("profilePicture")),
        height=height,
        height_inches=parse_height_inches(height),
        primary_position=(_optional_text(raw.get("primaryPosition")) or "").upper(),
        secondary_position=(_optional_text(raw.get("secondaryPosition")) or "").upper() or None,
        overall_rating=rating,
        badges=badges,
        **groups,
    )


def select_pool_records(sources: RawPlayerSources, pool: str) -> List[RawRecord]:
    """Pick the raw collection backing ``pool``.

    Unrecognized selectors fall back to the all-time collection, not the
    current one.
    """

    if pool == POOL_CURRENT:
        return list(sources.current)
    if pool == POOL_ALL_TIME:
        return list(sources.all_time)
    if pool == POOL_COMBINED:
        return [*sources.current, *sources.all_time]
    logger.debug("Unknown player pool %r; falling back to %s", pool, POOL_ALL_TIME)
    return list(sources.all_time)


def _describe(raw: RawRecord, index: int) -> str:
    return str(raw.get(NAME_FIELD) or raw.get("id") or f"record #{index}")


def normalize_with_report(sources: RawPlayerSources, pool: str) -> Tuple[List[Player], PoolReport]:
    records = select_pool_records(sources, pool)
    players: List[Player] = []
    rejected: List[str] = []
    for index, raw in enumerate(records):
        player = normalize_player(raw)
        if player is None:
            logger.debug("Skipping unusable player record %s", _describe(raw, index))
            rejected.append(_describe(raw, index))
            continue
        players.append(player)

    players.sort(key=lambda player: player.overall_rating, reverse=True)
    logger.info(
        "Loaded %d players for %s pool (%d records skipped)",
        len(players),
        pool,
        len(rejected),
    )
    report = PoolReport(
        pool=pool,
        total_records=len(records),
        accepted_players=len(players),
        rejected_records=rejected,
    )
    return players, report


def normalize_player_pool(sources: RawPlayerSources, pool: str) -> List[Player]:
    """Normalize the selected pool, best players first."""

    players, _ = normalize_with_report(sources, pool)
    return players


def load_raw_records(path: Path) -> List[Dict[str, Any]]:
    data = json.loads(path.read_text(encoding="utf-8"))
    if not isinstance(data, list):
        raise ValueError(f"{path} must contain a JSON array of player records")
    return [row for row in data if isinstance(row, dict)]


def load_player_pool(
    *,
    current_path: Optional[Path],
    all_time_path: Optional[Path],
    pool: str,
) -> Tuple[List[Player], PoolReport]:
    sources = RawPlayerSources(
        current=load_raw_records(current_path) if current_path else (),
        all_time=load_raw_records(all_time_path) if all_time_path else (),
    )
    return normalize_with_report(sources, pool)
