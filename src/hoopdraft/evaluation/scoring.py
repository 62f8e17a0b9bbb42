"""Multi-factor roster grading.

Each category scorer takes a non-empty roster and returns a 0-100 value.
``evaluate_roster`` combines them with ``CATEGORY_WEIGHTS`` (summing to 100)
into a single rounded score and attaches the matching feedback message.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from statistics import fmean
from typing import TYPE_CHECKING, Callable, Dict, Iterable, List, Mapping, Sequence

from hoopdraft.config import POSITIONS
from hoopdraft.models import Player

from .feedback import feedback_for_score

if TYPE_CHECKING:
    from hoopdraft.draft import Team


Roster = Sequence[Player]

MIN_HEIGHT = 72  # 6'0"
IDEAL_MIN_HEIGHT = 78  # 6'6"
IDEAL_MAX_HEIGHT = 81  # 6'9"
MAX_HEIGHT = 84  # 7'0"

PLAYMAKER_THRESHOLD = 85
PLAYMAKER_SHARE = 0.3
WEAK_FREE_THROW = 75
BADGES_FOR_FULL_SCORE = 20


@dataclass(frozen=True)
class EvaluationResult:
    score: int
    sub_scores: Dict[str, float] = field(default_factory=dict)
    feedback: str = ""


@dataclass(frozen=True)
class TeamEvaluation:
    team_id: str
    name: str
    is_user: bool
    result: EvaluationResult


def _avg(roster: Roster, value: Callable[[Player], float]) -> float:
    return fmean(value(player) for player in roster)


def _clamp(value: float, low: float = 0.0, high: float = 100.0) -> float:
    return min(high, max(low, value))


def position_balance(roster: Roster) -> float:
    covered = {
        position
        for player in roster
        for position in player.positions
        if position in POSITIONS
    }
    return len(covered) / len(POSITIONS) * 100


def floor_stretch(roster: Roster) -> float:
    three_point = _avg(roster, lambda p: p.shooting.three_point)
    mid_range = _avg(roster, lambda p: p.shooting.mid_range)
    inside = _avg(
        roster,
        lambda p: (p.inside_scoring.layup + p.inside_scoring.standing_dunk + p.inside_scoring.driving_dunk) / 3,
    )
    return 100 - (abs(three_point - mid_range) + abs(mid_range - inside)) / 2


def rebounding(roster: Roster) -> float:
    offensive = _avg(roster, lambda p: p.defense.offensive_rebound)
    defensive = _avg(roster, lambda p: p.defense.defensive_rebound)
    return offensive * 0.4 + defensive * 0.6


def defense(roster: Roster) -> float:
    interior = _avg(roster, lambda p: p.defense.interior)
    perimeter = _avg(roster, lambda p: p.defense.perimeter)
    help_iq = _avg(roster, lambda p: p.intangibles.help_defense_iq)
    return interior * 0.35 + perimeter * 0.35 + help_iq * 0.3


def _is_playmaker(player: Player) -> bool:
    passing = player.playmaking
    return (passing.pass_accuracy + passing.pass_iq + passing.pass_vision) / 3 >= PLAYMAKER_THRESHOLD


def playmaking(roster: Roster) -> float:
    playmakers = sum(1 for player in roster if _is_playmaker(player))
    return min(100.0, playmakers / (len(roster) * PLAYMAKER_SHARE) * 100)


def free_throws(roster: Roster) -> float:
    weak = sum(1 for player in roster if player.shooting.free_throw < WEAK_FREE_THROW)
    return 100 - weak / len(roster) * 100


def hustle(roster: Roster) -> float:
    return _avg(roster, lambda p: p.athleticism.hustle)


def shot_iq(roster: Roster) -> float:
    return _avg(roster, lambda p: p.shooting.shot_iq)


def badges(roster: Roster) -> float:
    return min(100.0, _avg(roster, lambda p: p.badges.total) / BADGES_FOR_FULL_SCORE * 100)


def height_score(avg_inches: float) -> float:
    """Piecewise score peaking between 6'6" and 6'9" average height."""

    if avg_inches < MIN_HEIGHT:
        score = 0.0
    elif IDEAL_MIN_HEIGHT <= avg_inches <= IDEAL_MAX_HEIGHT:
        score = 100.0
    elif avg_inches < IDEAL_MIN_HEIGHT:
        score = (avg_inches - MIN_HEIGHT) / (IDEAL_MIN_HEIGHT - MIN_HEIGHT) * 100
    else:
        score = max(0.0, 100 - (avg_inches - IDEAL_MAX_HEIGHT) / (MAX_HEIGHT - IDEAL_MAX_HEIGHT) * 100)
    return _clamp(score)


def height_balance(roster: Roster) -> float:
    return height_score(_avg(roster, lambda p: p.height_inches))


CATEGORY_WEIGHTS: Mapping[str, int] = {
    "position_balance": 15,
    "floor_stretch": 12,
    "rebounding": 10,
    "defense": 15,
    "playmaking": 10,
    "free_throws": 8,
    "hustle": 8,
    "shot_iq": 8,
    "badges": 7,
    "height_balance": 7,
}

CATEGORY_SCORERS: Mapping[str, Callable[[Roster], float]] = {
    "position_balance": position_balance,
    "floor_stretch": floor_stretch,
    "rebounding": rebounding,
    "defense": defense,
    "playmaking": playmaking,
    "free_throws": free_throws,
    "hustle": hustle,
    "shot_iq": shot_iq,
    "badges": badges,
    "height_balance": height_balance,
}


def _round_half_up(value: float) -> int:
    return int(math.floor(value + 0.5))


def weighted_score(sub_scores: Mapping[str, float]) -> int:
    total = sum(sub_scores[category] * weight / 100 for category, weight in CATEGORY_WEIGHTS.items())
    return int(_clamp(_round_half_up(total)))


def evaluate_roster(roster: Iterable[Player]) -> EvaluationResult:
    """Grade a completed roster; an empty roster scores 0."""

    players = list(roster)
    if not players:
        return EvaluationResult(score=0, sub_scores={}, feedback=feedback_for_score(0))

    sub_scores = {category: scorer(players) for category, scorer in CATEGORY_SCORERS.items()}
    score = weighted_score(sub_scores)
    return EvaluationResult(score=score, sub_scores=sub_scores, feedback=feedback_for_score(score))


def evaluate_teams(teams: Iterable["Team"]) -> List[TeamEvaluation]:
    """Evaluate every team, best score first (ties keep input order)."""

    evaluations = [
        TeamEvaluation(
            team_id=team.team_id,
            name=team.name,
            is_user=team.is_user,
            result=evaluate_roster(team.roster),
        )
        for team in teams
    ]
    evaluations.sort(key=lambda item: item.result.score, reverse=True)
    return evaluations


def composite_rating(ratings: Mapping[str, object]) -> int:
    """Rounded mean of the numeric values in ``ratings``; 0 when none."""

    values = [
        float(value)
        for value in ratings.values()
        if isinstance(value, (int, float)) and not isinstance(value, bool) and not math.isnan(value)
    ]
    if not values:
        return 0
    return _round_half_up(fmean(values))
