"""Helpers for slicing the available player pool."""

from __future__ import annotations

from dataclasses import dataclass
from statistics import fmean, median, pstdev
from typing import Iterable, Sequence

from hoopdraft.models import Player


@dataclass(frozen=True)
class PlayerFilter:
    """Filtering configuration for an available-player view."""

    position: str | None = None
    min_overall: int | None = None
    max_overall: int | None = None
    name_query: str | None = None
    exclude_player_ids: tuple[str, ...] = ()
    limit: int | None = None


@dataclass(frozen=True)
class PoolSummary:
    """Aggregate stats for a player selection."""

    available_players: int
    selected_players: int
    overall_mean: float | None
    overall_median: float | None
    overall_std: float | None


@dataclass(frozen=True)
class PlayerSelection:
    players: list[Player]
    summary: PoolSummary


def _passes_criteria(player: Player, criteria: PlayerFilter) -> bool:
    if criteria.position and not player.plays(criteria.position.upper()):
        return False
    if criteria.min_overall is not None and player.overall_rating < criteria.min_overall:
        return False
    if criteria.max_overall is not None and player.overall_rating > criteria.max_overall:
        return False
    if criteria.name_query and criteria.name_query.casefold() not in player.name.casefold():
        return False
    if player.player_id in criteria.exclude_player_ids:
        return False
    return True


def _build_summary(*, available: Sequence[Player], selected: Sequence[Player]) -> PoolSummary:
    ratings: list[float] = [player.overall_rating for player in selected]
    if not ratings:
        return PoolSummary(len(available), 0, None, None, None)
    return PoolSummary(
        available_players=len(available),
        selected_players=len(selected),
        overall_mean=fmean(ratings),
        overall_median=median(ratings),
        overall_std=pstdev(ratings) if len(ratings) > 1 else 0.0,
    )


def filter_players(players: Iterable[Player], criteria: PlayerFilter) -> PlayerSelection:
    """Filter players, best overall rating first, with summary statistics."""

    ordered = sorted(players, key=lambda player: player.overall_rating, reverse=True)
    filtered = [player for player in ordered if _passes_criteria(player, criteria)]

    limit = criteria.limit if criteria.limit is not None and criteria.limit > 0 else None
    selected = filtered[:limit] if limit is not None else filtered

    return PlayerSelection(
        players=selected,
        summary=_build_summary(available=filtered, selected=selected),
    )


__all__ = [
    "PlayerFilter",
    "PlayerSelection",
    "PoolSummary",
    "filter_players",
]
