"""Qualitative feedback for a final roster score."""

from __future__ import annotations

from typing import Tuple


FEEDBACK_BANDS: Tuple[Tuple[int, str], ...] = (
    (
        95,
        "Elite Dynasty Material! This team has the perfect blend of talent, chemistry, "
        "and balance - reminiscent of the '96 Bulls! 🏆👑",
    ),
    (
        90,
        "Championship Caliber! Your team has the depth and versatility of the 2022 "
        "Warriors - true title contenders! 🏆",
    ),
    (85, "Title Contender! This roster has excellent balance and could compete with any team in the league! 🌟"),
    (80, "Playoff Ready! Your team shows great potential with strong fundamentals and good chemistry! 💪"),
    (75, "Promising Core! With some development, this team could make some serious noise! 📈"),
    (
        70,
        "Solid Foundation! Your team has good pieces but might need more balance to compete "
        "at the highest level. 🔄",
    ),
    (65, "Work in Progress! There's talent here, but the roster needs more cohesion and depth. 🛠️"),
)

DEFAULT_FEEDBACK = "Development Mode! Keep drafting - focus on team balance and complementary skillsets! 📚"


def feedback_for_score(score: float) -> str:
    """Message of the highest band whose lower bound ``score`` reaches."""

    for threshold, message in FEEDBACK_BANDS:
        if score >= threshold:
            return message
    return DEFAULT_FEEDBACK
