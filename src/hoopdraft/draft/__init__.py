"""Team needs, priorities and draft orchestration."""

from .needs import (
    InvalidNeedsError,
    PositionNeed,
    PositionNeeds,
    PositionPriority,
    PriorityList,
    compute_team_needs,
    rank_position_priorities,
    target_per_position,
)
from .session import (
    BestAvailableStrategy,
    DraftClosedError,
    DraftError,
    DraftPick,
    DraftSession,
    PickStrategy,
    PositionNeedStrategy,
    Team,
    create_teams,
)

__all__ = [
    "BestAvailableStrategy",
    "DraftClosedError",
    "DraftError",
    "DraftPick",
    "DraftSession",
    "InvalidNeedsError",
    "PickStrategy",
    "PositionNeed",
    "PositionNeedStrategy",
    "PositionNeeds",
    "PositionPriority",
    "PriorityList",
    "Team",
    "compute_team_needs",
    "create_teams",
    "rank_position_priorities",
    "target_per_position",
]
