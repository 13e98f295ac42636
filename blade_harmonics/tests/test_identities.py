"""Tests for the identity checks shown in the theory box and the log."""

from __future__ import annotations

import pytest

from blade_harmonics.analysis.identities import (
    THEORY_HTML,
    check_identities,
    expected_sine_sum,
    expected_squared_sum,
)
from blade_harmonics.analysis.sampler import generate


def test_expected_values() -> None:
    assert expected_sine_sum(1) is None
    assert expected_sine_sum(2) == 0.0
    assert expected_squared_sum(1) is None
    assert expected_squared_sum(2) is None
    assert expected_squared_sum(3) == 1.5
    assert expected_squared_sum(8) == 4.0


def test_expected_values_reject_invalid_counts() -> None:
    with pytest.raises(ValueError):
        expected_sine_sum(0)
    with pytest.raises(ValueError):
        expected_squared_sum(-2)


@pytest.mark.parametrize(
    "B, sine_cancels, squared_constant",
    [(1, False, False), (2, True, False), (3, True, True), (8, True, True)],
)
def test_check_identities_by_blade_count(B: int, sine_cancels: bool, squared_constant: bool) -> None:
    report = check_identities(*generate(B, 0.6, 360))
    assert report.blade_count == B
    assert report.sine_cancels is sine_cancels
    assert report.squared_constant is squared_constant


def test_check_identities_mean_subtracted_targets_zero() -> None:
    report = check_identities(*generate(5, 1.0, 360, subtract_mean=True))
    assert report.sine_cancels
    assert report.squared_constant
    assert report.max_squared_sum_error < 1e-9


def test_check_identities_rejects_mismatched_pair() -> None:
    sine, _ = generate(3, 0.0, 100)
    _, squared = generate(4, 0.0, 100)
    with pytest.raises(ValueError):
        check_identities(sine, squared)


def test_summary_text() -> None:
    report = check_identities(*generate(3, 0.0, 100))
    text = report.summary()
    assert text.startswith("B=3:")
    assert "cancels" in text
    assert "constant" in text


def test_theory_mentions_both_identities() -> None:
    assert "= 0" in THEORY_HTML
    assert "= B/2" in THEORY_HTML
