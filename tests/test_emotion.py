import pytest

from xenochat.emotion import EmotionState


def test_default_levels():
    state = EmotionState()
    assert (state.calm, state.curious, state.empathic) == (0.6, 0.5, 0.7)


def test_bounded_clamps_out_of_range_values():
    state = EmotionState(calm=-0.5, curious=1.5, empathic=0.4).bounded()
    assert state == EmotionState(calm=0.0, curious=1.0, empathic=0.4)


def test_nudge_raises_every_level():
    state = EmotionState()
    nudged = state.nudge_for_positive_dialog()
    assert nudged.calm > state.calm
    assert nudged.curious > state.curious
    assert nudged.empathic > state.empathic
    assert nudged.calm == pytest.approx(state.calm + 0.02)


def test_nudge_saturates_at_one():
    state = EmotionState(1.0, 1.0, 1.0).nudge_for_positive_dialog()
    assert state == EmotionState(1.0, 1.0, 1.0)


def test_nudge_leaves_original_unchanged():
    state = EmotionState()
    state.nudge_for_positive_dialog()
    assert state == EmotionState()