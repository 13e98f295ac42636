"""Text formatting for angle axes and tooltips.

Functions
---------
format_theta_label
    Sample label ``"0.50π"`` (θ/π with two decimals).
format_angle_to_pi
    Axis tick label for the canonical multiples of π/2; empty elsewhere.
format_tooltip_label
    Tooltip header ``"θ = 0.50π"``.
format_tooltip_value
    Tooltip value with four decimals.
"""

from __future__ import annotations

import math

import numpy as np


AXIS_TICKS = (0.0, np.pi / 2, np.pi, 3 * np.pi / 2, 2 * np.pi)

_TICK_LABELS = (
    (0.0, "0"),
    (0.5, "π/2"),
    (1.0, "π"),
    (1.5, "3π/2"),
    (2.0, "2π"),
)

# Tolerance in units of π; absorbs the round-off of AXIS_TICKS themselves.
_TICK_ATOL = 1e-9


def format_theta_label(theta: float) -> str:
    return f"{float(theta) / np.pi:.2f}π"


def format_angle_to_pi(angle: float) -> str:
    """Return ``"0"``, ``"π/2"``, ``"π"``, ``"3π/2"`` or ``"2π"`` for the canonical ticks.

    Any other angle (including NaN) renders as ``""`` so that only the
    canonical positions carry a label.
    """
    pi_value = float(angle) / np.pi
    for target, label in _TICK_LABELS:
        if math.isclose(pi_value, target, rel_tol=0.0, abs_tol=_TICK_ATOL):
            return label
    return ""


def format_tooltip_label(theta: float) -> str:
    return f"θ = {format_theta_label(theta)}"


def format_tooltip_value(value: float) -> str:
    return f"{float(value):.4f}"
