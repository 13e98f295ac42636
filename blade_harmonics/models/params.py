"""Harmonics parameters -- the four inputs that drive the sampler.

A HarmonicsParams groups every value that affects the generated datasets
into one frozen dataclass.  It can be:

- Constructed with the defaults the GUI starts from
- Overridden field-by-field via ``dataclasses.replace()``
- Serialized to/from a dict (e.g. to restore slider positions)

The slider bounds below belong to the GUI only.  The sampler itself accepts
any positive blade count and resolution.
"""

from __future__ import annotations

import math
import numbers
from dataclasses import asdict, dataclass
from typing import Any, Dict, Tuple

import numpy as np


BLADE_COUNT_RANGE: Tuple[int, int] = (1, 8)
PHASE_SHIFT_RANGE: Tuple[float, float] = (0.0, 6.28)
PHASE_SHIFT_STEP: float = 0.01
RESOLUTION_RANGE: Tuple[int, int] = (100, 1000)
RESOLUTION_STEP: int = 10


def require_positive_int(name: str, value: Any) -> int:
    """Return ``value`` as an int, or raise ``ValueError`` if it is not a positive integer.

    Booleans and strings are rejected even though ``bool`` subclasses ``int``.
    Integral floats (``4.0``) are accepted.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    as_float = float(value)
    if not math.isfinite(as_float) or not as_float.is_integer():
        raise ValueError(f"{name} must be a positive integer, got {value!r}")
    n = int(as_float)
    if n <= 0:
        raise ValueError(f"{name} must be > 0, got {n}")
    return n


@dataclass(frozen=True)
class HarmonicsParams:
    """Frozen parameter set for one sampler run.

    Attributes
    ----------
    blade_count : int
        Number of blades B (evenly spaced around one rotation).
    phase_shift : float
        Global phase offset Δψ in radians, added to every blade.
    resolution : int
        Number of samples over one rotation [0, 2π).
    subtract_mean : bool
        If True, every series is centered on its mean over the rotation.
    """

    blade_count: int = 3
    phase_shift: float = 0.0
    resolution: int = 360
    subtract_mean: bool = False

    def validate(self) -> "HarmonicsParams":
        """Raise ``ValueError`` for an unusable parameter set; return self otherwise."""
        require_positive_int("blade_count", self.blade_count)
        require_positive_int("resolution", self.resolution)
        return self

    def clamped_to_ui(self) -> "HarmonicsParams":
        """Return a copy with every field pulled into the GUI slider ranges."""
        lo_b, hi_b = BLADE_COUNT_RANGE
        lo_p, hi_p = PHASE_SHIFT_RANGE
        lo_r, hi_r = RESOLUTION_RANGE
        return HarmonicsParams(
            blade_count=int(min(max(int(self.blade_count), lo_b), hi_b)),
            phase_shift=float(min(max(float(self.phase_shift), lo_p), hi_p)),
            resolution=int(min(max(int(self.resolution), lo_r), hi_r)),
            subtract_mean=bool(self.subtract_mean),
        )

    # ------------------------------------------------------------------
    # Serialization
    # ------------------------------------------------------------------

    def to_dict(self) -> Dict[str, Any]:
        """Return a JSON-friendly dict."""
        return asdict(self)

    @classmethod
    def from_dict(cls, d: Dict[str, Any]) -> "HarmonicsParams":
        """Reconstruct from a dict, ignoring unknown keys."""
        known = {k: d[k] for k in ("blade_count", "phase_shift", "resolution", "subtract_mean") if k in d}
        if "phase_shift" in known:
            known["phase_shift"] = float(known["phase_shift"])
        if "subtract_mean" in known:
            known["subtract_mean"] = bool(known["subtract_mean"])
        return cls(**known)
