"""Roster grading and feedback."""

from .feedback import DEFAULT_FEEDBACK, FEEDBACK_BANDS, feedback_for_score
from .scoring import (
    CATEGORY_SCORERS,
    CATEGORY_WEIGHTS,
    EvaluationResult,
    TeamEvaluation,
    composite_rating,
    evaluate_roster,
    evaluate_teams,
    height_score,
    weighted_score,
)

__all__ = [
    "CATEGORY_SCORERS",
    "CATEGORY_WEIGHTS",
    "DEFAULT_FEEDBACK",
    "FEEDBACK_BANDS",
    "EvaluationResult",
    "TeamEvaluation",
    "composite_rating",
    "evaluate_roster",
    "evaluate_teams",
    "feedback_for_score",
    "height_score",
    "weighted_score",
]
