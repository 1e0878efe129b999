"""Tests for random stream diagnostics."""

from __future__ import annotations

import math

import numpy as np

from pageshim.analytics.metrics import compute_metrics, cycle_length
from pageshim.config.schema import LcgParameters
from pageshim.core.rng import make_rng


class TestCycleLength:
    def test_reference_constants_full_period(self) -> None:
        info = cycle_length(LcgParameters(), 1000)
        assert info.period == 233280
        assert info.tail == 0

    def test_seed_outside_state_space_has_tail(self) -> None:
        """An epoch-millisecond seed is never revisited once reduced mod M."""
        info = cycle_length(LcgParameters(), 1_700_000_000_000)
        assert info.period == 233280
        assert info.tail == 1

    def test_short_generator(self) -> None:
        params = LcgParameters(multiplier=5, increment=3, modulus=16)
        assert cycle_length(params, 1).period == 16

    def test_sequence_repeats_after_period(self) -> None:
        params = LcgParameters(multiplier=5, increment=3, modulus=16)
        values = make_rng(1, params).draws(32)
        np.testing.assert_array_equal(values[:16], values[16:])


class TestComputeMetrics:
    def test_basic(self) -> None:
        metrics = compute_metrics(np.array([0.0, 0.5, 0.25]))
        assert metrics.count == 3
        assert metrics.minimum == 0.0
        assert metrics.maximum == 0.5
        assert metrics.mean == 0.25
        assert metrics.in_unit_interval

    def test_out_of_range(self) -> None:
        assert not compute_metrics(np.array([0.5, 1.0])).in_unit_interval

    def test_empty(self) -> None:
        metrics = compute_metrics(np.array([]))
        assert metrics.count == 0
        assert math.isnan(metrics.mean)

    def test_reference_stream_mean(self) -> None:
        metrics = compute_metrics(make_rng(1_700_000_000_000).draws(10_000))
        assert metrics.in_unit_interval
        assert abs(metrics.mean - 0.5) < 0.05
