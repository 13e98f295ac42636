"""Trigonometric identities behind the visualizer, and a numerical check of them.

For B evenly spaced blades with phases ``x_b = θ + Δψ + 2πb/B``:

- ``Σ_b sin(x_b) = 0`` for B >= 2 (the B-th roots of unity sum to zero);
- ``Σ_b sin²(x_b) = B/2 - ½ Σ_b cos(2 x_b) = B/2`` for B >= 3.

For B = 2 the doubled phases ``2x_b`` coincide, so the squared sum
``2 sin²(θ + Δψ)`` still oscillates; for B = 1 neither identity applies.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from blade_harmonics.models.params import require_positive_int
from blade_harmonics.models.samples import HarmonicsDataset


THEORY_HTML = (
    "<h3>Theory</h3>"
    "<p><b>For sin(θ):</b> The sum of equally-spaced sinusoids is zero for B ≥ 2. "
    "This is due to rotational symmetry and the roots of unity theorem.</p>"
    "<div style='font-family:monospace; margin:4px 0 8px 16px;'>∑[b=0 to B-1] sin(θ + 2πb/B) = 0</div>"
    "<p><b>For sin²(θ):</b> Using the identity sin²(x) = (1 - cos(2x))/2, the sum becomes:</p>"
    "<div style='font-family:monospace; margin:4px 0 8px 16px;'>∑[b=0 to B-1] sin²(θ + 2πb/B) = B/2</div>"
    "<p>This explains why you see different behavior: sin harmonics cancel completely, "
    "but sin² harmonics average to a constant B/2 (for B ≥ 3; with two blades the "
    "doubled phases coincide and the sum still oscillates).</p>"
)


def expected_sine_sum(blade_count: int) -> Optional[float]:
    """Constant value of the sine sum, or None when it is not constant (B = 1)."""
    B = require_positive_int("blade_count", blade_count)
    return 0.0 if B >= 2 else None


def expected_squared_sum(blade_count: int) -> Optional[float]:
    """Constant value of the squared-sine sum (B/2), or None when it is not constant (B <= 2)."""
    B = require_positive_int("blade_count", blade_count)
    return B / 2.0 if B >= 3 else None


@dataclass(frozen=True)
class IdentityReport:
    """Residuals of the two identities over one pair of datasets.

    Attributes
    ----------
    blade_count:
        Number of blades in the datasets.
    max_abs_sine_sum:
        ``max_i |sine.sum_i|``.
    max_squared_sum_error:
        ``max_i |squared.sum_i - target|`` where target is B/2, or 0 for
        mean-subtracted datasets.
    sine_cancels, squared_constant:
        Whether each residual is within ``atol``.
    """

    blade_count: int
    max_abs_sine_sum: float
    max_squared_sum_error: float
    sine_cancels: bool
    squared_constant: bool

    def summary(self) -> str:
        return (
            f"B={self.blade_count}: max|Σsin|={self.max_abs_sine_sum:.3e} "
            f"({'cancels' if self.sine_cancels else 'does not cancel'}), "
            f"max|Σsin² - target|={self.max_squared_sum_error:.3e} "
            f"({'constant' if self.squared_constant else 'not constant'})"
        )


def check_identities(
    sine: HarmonicsDataset,
    squared: HarmonicsDataset,
    *,
    atol: float = 1e-9,
) -> IdentityReport:
    """Measure how closely the datasets satisfy the two identities."""
    if sine.blade_count != squared.blade_count or len(sine) != len(squared):
        raise ValueError(
            f"sine and squared datasets do not match: "
            f"{len(sine)}x{sine.blade_count} vs {len(squared)}x{squared.blade_count}"
        )
    B = sine.blade_count

    target = 0.0 if squared.mean_subtracted else B / 2.0
    max_sin = float(np.max(np.abs(sine.total)))
    max_sq = float(np.max(np.abs(squared.total - target)))

    return IdentityReport(
        blade_count=B,
        max_abs_sine_sum=max_sin,
        max_squared_sum_error=max_sq,
        sine_cancels=bool(max_sin <= atol),
        squared_constant=bool(max_sq <= atol),
    )
