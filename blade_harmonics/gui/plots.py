"""
Chart rendering for the two harmonics datasets.

One line per blade plus a heavy black sum line, on a fixed angle axis
[0, 2π] labelled only at multiples of π/2.  Hover tooltips are built as
plain text from the sample nearest to the cursor, so they can be shown in
any widget (the GUI uses an HTML readout under the charts).
"""

from __future__ import annotations

from typing import List, Optional

import numpy as np
from matplotlib.ticker import FixedLocator, FuncFormatter

from blade_harmonics.analysis.formatting import (
    AXIS_TICKS,
    format_angle_to_pi,
    format_tooltip_label,
    format_tooltip_value,
)
from blade_harmonics.models.samples import HarmonicsDataset, Sample


BLADE_COLORS = (
    "#8884d8",
    "#82ca9d",
    "#ffc658",
    "#ff7c7c",
    "#a78bfa",
    "#fb923c",
    "#34d399",
    "#f472b6",
)
SUM_COLOR = "#000000"


def blade_color(b: int) -> str:
    return BLADE_COLORS[b % len(BLADE_COLORS)]


def plot_dataset(ax, dataset: HarmonicsDataset, *, title: str = "", ylabel: str = "") -> List[object]:
    """
    Draw ``dataset`` on ``ax`` and return the Line2D artists (blades first, sum last).

    The axes is cleared first, so calling this again on the same axes
    replaces the previous drawing instead of stacking traces.
    """
    ax.clear()
    lines = []
    theta = dataset.theta
    for b in range(dataset.blade_count):
        (ln,) = ax.plot(theta, dataset.blade(b), color=blade_color(b), linewidth=1.5, label=f"Blade {b + 1}")
        lines.append(ln)
    (ln_sum,) = ax.plot(theta, dataset.total, color=SUM_COLOR, linewidth=3.0, label="Sum")
    lines.append(ln_sum)

    ax.set_xlim(0.0, 2.0 * np.pi)
    ax.xaxis.set_major_locator(FixedLocator(AXIS_TICKS))
    ax.xaxis.set_major_formatter(FuncFormatter(lambda v, _pos: format_angle_to_pi(v)))
    ax.set_xlabel("θ (radians)")
    if ylabel:
        ax.set_ylabel(ylabel)
    if title:
        ax.set_title(title)
    ax.grid(True, linestyle="--", color="#e0e0e0")
    ax.legend(loc="upper right", fontsize="small")
    return lines


def nearest_sample(dataset: HarmonicsDataset, theta: float) -> Optional[Sample]:
    """Sample whose angle is closest to ``theta``; None outside [0, 2π] or for NaN."""
    theta = float(theta)
    if not np.isfinite(theta) or theta < 0.0 or theta > 2.0 * np.pi or len(dataset) == 0:
        return None
    i = int(np.argmin(np.abs(dataset.theta - theta)))
    return dataset[i]


def tooltip_text(dataset: HarmonicsDataset, theta: float) -> str:
    """Tooltip for the sample nearest to ``theta``; empty string when there is none."""
    s = nearest_sample(dataset, theta)
    if s is None:
        return ""
    lines = [format_tooltip_label(s.theta)]
    for b, v in enumerate(s.values):
        lines.append(f"Blade {b + 1}: {format_tooltip_value(v)}")
    lines.append(f"Sum: {format_tooltip_value(s.sum)}")
    return "\n".join(lines)
