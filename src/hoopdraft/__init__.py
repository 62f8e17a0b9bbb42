"""Fantasy draft simulation: player normalization, team needs and roster grading."""

from hoopdraft.draft import compute_team_needs, rank_position_priorities
from hoopdraft.evaluation import evaluate_roster, feedback_for_score
from hoopdraft.ingest import normalize_player_pool

__all__ = [
    "compute_team_needs",
    "evaluate_roster",
    "feedback_for_score",
    "normalize_player_pool",
]
