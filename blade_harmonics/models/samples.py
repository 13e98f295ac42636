from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Tuple, overload

import numpy as np
import pandas as pd


@dataclass(frozen=True)
class Sample:
    """One angle of a harmonics dataset.

    Attributes
    ----------
    theta:
        Rotation angle in radians.
    label:
        ``theta/π`` with two decimals, suffixed ``"π"`` (e.g. ``"0.50π"``).
    values:
        One value per blade, indexed by blade number.
    sum:
        Aggregate over blades (mean-centered when the dataset is).
    """

    theta: float
    label: str
    values: Tuple[float, ...]
    sum: float

    @property
    def blade_count(self) -> int:
        return len(self.values)


@dataclass(frozen=True, eq=False)
class HarmonicsDataset:
    """Ordered, angle-ascending sequence of :class:`Sample` records.

    Stored column-wise; indexing and iteration build ``Sample`` objects on the fly.

    Attributes
    ----------
    theta:
        Angles of shape ``(resolution,)``.
    labels:
        Formatted angle labels, one per sample.
    values:
        Per-blade values of shape ``(resolution, blade_count)``.
    total:
        Sum series of shape ``(resolution,)``.
    mean_subtracted:
        Whether ``values`` and ``total`` were centered on their means.
    """

    theta: np.ndarray
    labels: Tuple[str, ...]
    values: np.ndarray
    total: np.ndarray
    mean_subtracted: bool = False

    def __post_init__(self) -> None:
        n = self.theta.shape[0]
        if self.values.ndim != 2 or self.values.shape[0] != n:
            raise ValueError(f"values must be 2D (resolution, blade_count) with {n} rows, got shape {self.values.shape}")
        if self.total.shape != (n,):
            raise ValueError(f"total must have shape ({n},), got {self.total.shape}")
        if len(self.labels) != n:
            raise ValueError(f"labels must have length {n}, got {len(self.labels)}")

    @property
    def resolution(self) -> int:
        return int(self.theta.shape[0])

    @property
    def blade_count(self) -> int:
        return int(self.values.shape[1])

    def blade(self, b: int) -> np.ndarray:
        """Series of blade ``b`` across all angles."""
        if not (0 <= b < self.blade_count):
            raise IndexError(f"blade index must be in [0, {self.blade_count - 1}], got {b}")
        return self.values[:, b]

    def __len__(self) -> int:
        return self.resolution

    @overload
    def __getitem__(self, i: int) -> Sample: ...

    @overload
    def __getitem__(self, i: slice) -> Tuple[Sample, ...]: ...

    def __getitem__(self, i):
        if isinstance(i, slice):
            return tuple(self[j] for j in range(*i.indices(len(self))))
        n = len(self)
        if i < 0:
            i += n
        if not (0 <= i < n):
            raise IndexError(f"sample index out of range (resolution={n})")
        return Sample(
            theta=float(self.theta[i]),
            label=self.labels[i],
            values=tuple(float(v) for v in self.values[i]),
            sum=float(self.total[i]),
        )

    def __iter__(self) -> Iterator[Sample]:
        for i in range(len(self)):
            yield self[i]

    def to_frame(self) -> pd.DataFrame:
        """Chart-ready table: ``theta``, ``theta_label``, ``blade0..``, ``sum``."""
        cols = {"theta": self.theta, "theta_label": list(self.labels)}
        for b in range(self.blade_count):
            cols[f"blade{b}"] = self.values[:, b]
        cols["sum"] = self.total
        return pd.DataFrame(cols)
