"""Blade harmonics sampler.

Generates the two datasets plotted by the visualizer: the per-blade values
of ``sin(θ + Δψ + 2πb/B)`` and of its square, each with a sum-over-blades
series, on the angular grid ``θ_i = 2πi/N``.

Functions
---------
blade_phases
    Phase of every blade, ``Δψ + 2πb/B``.
generate
    Both datasets for one parameter set, optionally mean-centered.
generate_from_params
    Same, taking a :class:`~blade_harmonics.models.params.HarmonicsParams`.
"""

from __future__ import annotations

from typing import Tuple

import numpy as np

from blade_harmonics.analysis.formatting import format_theta_label
from blade_harmonics.models.params import HarmonicsParams, require_positive_int
from blade_harmonics.models.samples import HarmonicsDataset


def blade_phases(blade_count: int, phase_shift: float) -> np.ndarray:
    """Return ``phase_shift + 2π·b/blade_count`` for ``b = 0..blade_count-1``."""
    B = require_positive_int("blade_count", blade_count)
    b = np.arange(B, dtype=float)
    return float(phase_shift) + 2.0 * np.pi * b / float(B)


def _angular_grid(resolution: int) -> np.ndarray:
    i = np.arange(resolution, dtype=float)
    return 2.0 * np.pi * i / float(resolution)


def generate(
    blade_count: int,
    phase_shift: float,
    resolution: int,
    subtract_mean: bool = False,
) -> Tuple[HarmonicsDataset, HarmonicsDataset]:
    r"""Sample the blade harmonics over one full rotation.

    Parameters
    ----------
    blade_count:
        Number of blades B, any positive integer.
    phase_shift:
        Global phase offset Δψ in radians.  Non-finite values are not rejected;
        they propagate as NaN into every value.
    resolution:
        Number of samples N over [0, 2π), any positive integer.
    subtract_mean:
        If True, each blade series and each sum series is reduced by its own
        unweighted mean over the N samples.

    Returns
    -------
    (sine, squared):
        Two :class:`HarmonicsDataset` of length N, angle-ascending.

    Raises
    ------
    ValueError
        If ``blade_count`` or ``resolution`` is not a positive integer.

    Notes
    -----
    For B >= 2 the sine sum vanishes at every angle.  The squared sum is
    \(\sum_b \sin^2 x_b = B/2 - \tfrac12\sum_b \cos 2x_b\); the cosine terms
    cancel for B >= 3, leaving the constant B/2.  For B = 1 and B = 2 the
    doubled phases coincide and the squared sum oscillates around B/2.
    """
    B = require_positive_int("blade_count", blade_count)
    N = require_positive_int("resolution", resolution)

    theta = _angular_grid(N)
    phases = blade_phases(B, phase_shift)

    # Pass 1: raw values and sums over blades
    sin_values = np.sin(theta[:, None] + phases[None, :])
    sin2_values = sin_values ** 2
    sin_sum = sin_values.sum(axis=1)
    sin2_sum = sin2_values.sum(axis=1)

    # Pass 2: means over the rotation
    if subtract_mean:
        sin_values = sin_values - sin_values.mean(axis=0)
        sin2_values = sin2_values - sin2_values.mean(axis=0)
        sin_sum = sin_sum - sin_sum.mean()
        sin2_sum = sin2_sum - sin2_sum.mean()

    # Pass 3: assembly
    labels = tuple(format_theta_label(t) for t in theta)
    sine = HarmonicsDataset(
        theta=theta,
        labels=labels,
        values=sin_values,
        total=sin_sum,
        mean_subtracted=bool(subtract_mean),
    )
    squared = HarmonicsDataset(
        theta=theta.copy(),
        labels=labels,
        values=sin2_values,
        total=sin2_sum,
        mean_subtracted=bool(subtract_mean),
    )
    return sine, squared


def generate_from_params(params: HarmonicsParams) -> Tuple[HarmonicsDataset, HarmonicsDataset]:
    return generate(
        params.blade_count,
        params.phase_shift,
        params.resolution,
        subtract_mean=params.subtract_mean,
    )
