import pytest

from hoopdraft.evaluation import DEFAULT_FEEDBACK, FEEDBACK_BANDS, feedback_for_score


def test_score_94_is_championship_caliber():
    assert feedback_for_score(94).startswith("Championship Caliber!")


def test_low_score_gets_default():
    assert feedback_for_score(50) == DEFAULT_FEEDBACK
    assert feedback_for_score(50).startswith("Development Mode!")


@pytest.mark.parametrize("threshold, message", FEEDBACK_BANDS)
def test_band_lower_bound_is_inclusive(threshold, message):
    assert feedback_for_score(threshold) == message
    assert feedback_for_score(threshold - 1) != message


def test_perfect_score_is_elite():
    assert feedback_for_score(100).startswith("Elite Dynasty Material!")


def test_messages_are_reported_verbatim():
    assert feedback_for_score(95) == (
        "Elite Dynasty Material! This team has the perfect blend of talent, chemistry, "
        "and balance - reminiscent of the '96 Bulls! 🏆👑"
    )
    assert feedback_for_score(66) == (
        "Work in Progress! There's talent here, but the roster needs more cohesion and depth. 🛠️"
    )
    assert DEFAULT_FEEDBACK == (
        "Development Mode! Keep drafting - focus on team balance and complementary skillsets! 📚"
    )
