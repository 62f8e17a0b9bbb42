"""Positional needs and drafting priorities for a roster in progress."""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping

from hoopdraft.config import POSITIONS
from hoopdraft.models import Player


TARGET_SHARE_PER_POSITION = 0.2
SECONDARY_POSITION_CREDIT = 0.5


class InvalidNeedsError(ValueError):
    """Raised when needs cannot be ranked, e.g. a zero target per position."""


@dataclass(frozen=True)
class PositionNeed:
    current: float
    target: int


@dataclass(frozen=True)
class PositionPriority:
    position: str
    priority: float


PositionNeeds = Dict[str, PositionNeed]
PriorityList = List[PositionPriority]


def target_per_position(total_rounds: int) -> int:
    return math.ceil(total_rounds * TARGET_SHARE_PER_POSITION)


def compute_team_needs(roster: Iterable[Player], total_rounds: int) -> PositionNeeds:
    """Count filled positions and the uniform per-position target.

    A primary position counts 1.0 and a secondary position 0.5, so one
    player may feed two counters.
    """

    counts: Dict[str, float] = {position: 0.0 for position in POSITIONS}
    for player in roster:
        if player.primary_position in counts:
            counts[player.primary_position] += 1.0
        if player.secondary_position and player.secondary_position in counts:
            counts[player.secondary_position] += SECONDARY_POSITION_CREDIT

    target = target_per_position(total_rounds)
    return {position: PositionNeed(current=counts[position], target=target) for position in POSITIONS}


def rank_position_priorities(needs: Mapping[str, PositionNeed]) -> PriorityList:
    """Rank positions by relative shortfall, most needed first.

    Exact ties keep the order of ``needs``.
    """

    priorities: PriorityList = []
    for position, need in needs.items():
        if need.target <= 0:
            raise InvalidNeedsError(
                f"target for {position} must be positive, got {need.target}; is total_rounds >= 1?"
            )
        priorities.append(
            PositionPriority(position=position, priority=(need.target - need.current) / need.target)
        )
    priorities.sort(key=lambda item: item.priority, reverse=True)
    return priorities
