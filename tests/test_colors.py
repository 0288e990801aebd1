import pytest

from pixelsorter.colors import (PULSE_DEPTH, invert_color, stage_color,
                                to_rgba255)

BASE = (0.5, 0.8, 1.0, 0.7)


def test_first_and_last_stage_use_base_color():
    assert stage_color(BASE, 10, 10) == BASE
    assert stage_color(BASE, 1, 10) == BASE


def test_midpoint_is_darkest():
    r, g, b, a = stage_color(BASE, 5, 10)
    assert r == pytest.approx(0.5 * (1 - PULSE_DEPTH))
    assert g == pytest.approx(0.8 * (1 - PULSE_DEPTH))
    assert b == pytest.approx(1.0 * (1 - PULSE_DEPTH))
    assert a == 0.7


def test_pulse_darkens_then_lightens():
    reds = [stage_color(BASE, s, 10)[0] for s in range(10, 0, -1)]
    darkest = reds.index(min(reds))
    assert darkest == 5
    assert all(x >= y for x, y in zip(reds[:darkest], reds[1:darkest + 1]))
    assert all(x <= y for x, y in zip(reds[darkest:], reds[darkest + 1:]))


def test_channels_never_negative():
    for stage in range(1, 11):
        assert min(stage_color((0.0, 0.0, 0.0, 1.0), stage, 10)) >= 0.0


def test_invert_keeps_alpha():
    assert invert_color((0.25, 0.5, 1.0, 0.3)) == (0.75, 0.5, 0.0, 0.3)


def test_to_rgba255():
    assert to_rgba255((1.0, 0.0, 0.5, 1.0)) == (255, 0, 127, 255)
    assert to_rgba255((1.5, -0.1, 0.0, 1.0)) == (255, 0, 0, 255)
