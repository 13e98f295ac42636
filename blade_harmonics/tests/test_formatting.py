"""Tests for axis and tooltip formatters."""

import numpy as np
import pytest

from blade_harmonics.analysis.formatting import (
    AXIS_TICKS,
    format_angle_to_pi,
    format_theta_label,
    format_tooltip_label,
    format_tooltip_value,
)


@pytest.mark.parametrize(
    "angle, expected",
    [
        (0.0, "0"),
        (np.pi / 2, "π/2"),
        (np.pi, "π"),
        (3 * np.pi / 2, "3π/2"),
        (2 * np.pi, "2π"),
    ],
)
def test_canonical_ticks(angle, expected):
    assert format_angle_to_pi(angle) == expected


def test_axis_ticks_all_labelled():
    assert [format_angle_to_pi(t) for t in AXIS_TICKS] == ["0", "π/2", "π", "3π/2", "2π"]


@pytest.mark.parametrize("angle", [0.1, np.pi / 4, 1.0, 3.0, 2.5 * np.pi, -np.pi, float("nan")])
def test_other_angles_have_empty_label(angle):
    assert format_angle_to_pi(angle) == ""


def test_tick_formatter_accepts_round_off():
    assert format_angle_to_pi(np.pi * (1.5 + 1e-13)) == "3π/2"


@pytest.mark.parametrize(
    "theta, expected",
    [
        (0.0, "0.00π"),
        (np.pi / 2, "0.50π"),
        (2 * np.pi / 3, "0.67π"),
        (np.pi, "1.00π"),
        (2 * np.pi * 359 / 360, "1.99π"),
    ],
)
def test_theta_label(theta, expected):
    assert format_theta_label(theta) == expected


def test_tooltip_label():
    assert format_tooltip_label(np.pi) == "θ = 1.00π"


@pytest.mark.parametrize(
    "value, expected",
    [(1 / 3, "0.3333"), (-1.0, "-1.0000"), (0.0, "0.0000"), (1.5, "1.5000"), (np.float64(2.71828), "2.7183")],
)
def test_tooltip_value_four_decimals(value, expected):
    assert format_tooltip_value(value) == expected
