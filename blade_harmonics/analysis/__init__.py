"""Analysis package.

Design principle:
  - The sampler is a pure function of four parameters; it keeps no state
    between calls and performs no I/O.
  - Everything the GUI displays (tick labels, tooltips, identity residuals)
    is derived here from the returned datasets.
"""

from .sampler import blade_phases, generate, generate_from_params
from .formatting import (
    AXIS_TICKS,
    format_angle_to_pi,
    format_theta_label,
    format_tooltip_label,
    format_tooltip_value,
)
from .identities import IdentityReport, check_identities, expected_sine_sum, expected_squared_sum

__all__ = [
    "blade_phases",
    "generate",
    "generate_from_params",
    "AXIS_TICKS",
    "format_angle_to_pi",
    "format_theta_label",
    "format_tooltip_label",
    "format_tooltip_value",
    "IdentityReport",
    "check_identities",
    "expected_sine_sum",
    "expected_squared_sum",
]
