"""Available-player pool utilities."""

from .filtering import PlayerFilter, PlayerSelection, PoolSummary, filter_players

__all__ = [
    "PlayerFilter",
    "PlayerSelection",
    "PoolSummary",
    "filter_players",
]
