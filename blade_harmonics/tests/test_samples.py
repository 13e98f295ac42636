"""Tests for the dataset containers."""

from __future__ import annotations

import numpy as np
import pandas as pd
import pytest

from blade_harmonics.analysis.sampler import generate
from blade_harmonics.models.samples import HarmonicsDataset, Sample


def test_dataset_is_a_sequence_of_samples() -> None:
    sine, _ = generate(3, 0.0, 12)
    samples = list(sine)
    assert len(samples) == 12
    assert all(isinstance(s, Sample) for s in samples)
    assert samples[0].blade_count == 3
    assert samples[-1].theta == pytest.approx(2 * np.pi * 11 / 12)
    assert sine[-1] == samples[-1]


def test_sample_sum_matches_values() -> None:
    _, squared = generate(4, 0.3, 50)
    for s in squared:
        assert s.sum == pytest.approx(sum(s.values), abs=1e-12)


def test_slice_returns_tuple_of_samples() -> None:
    sine, _ = generate(2, 0.0, 10)
    part = sine[2:5]
    assert isinstance(part, tuple)
    assert [s.label for s in part] == [sine.labels[i] for i in (2, 3, 4)]


def test_index_out_of_range() -> None:
    sine, _ = generate(2, 0.0, 10)
    with pytest.raises(IndexError):
        sine[10]
    with pytest.raises(IndexError):
        sine.blade(2)


def test_to_frame_columns() -> None:
    sine, _ = generate(3, 0.0, 8)
    df = sine.to_frame()
    assert isinstance(df, pd.DataFrame)
    assert list(df.columns) == ["theta", "theta_label", "blade0", "blade1", "blade2", "sum"]
    assert len(df) == 8
    assert df["theta_label"].iloc[2] == "0.50π"
    assert np.allclose(df["sum"].to_numpy(), df[["blade0", "blade1", "blade2"]].sum(axis=1).to_numpy())


def test_shape_mismatch_rejected() -> None:
    theta = np.zeros(4)
    with pytest.raises(ValueError, match="values"):
        HarmonicsDataset(theta=theta, labels=("a",) * 4, values=np.zeros((3, 2)), total=np.zeros(4))
    with pytest.raises(ValueError, match="total"):
        HarmonicsDataset(theta=theta, labels=("a",) * 4, values=np.zeros((4, 2)), total=np.zeros(3))
    with pytest.raises(ValueError, match="labels"):
        HarmonicsDataset(theta=theta, labels=("a",) * 3, values=np.zeros((4, 2)), total=np.zeros(4))
