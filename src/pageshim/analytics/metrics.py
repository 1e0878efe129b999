"""Diagnostics for the deterministic random stream."""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from pageshim.config.schema import LcgParameters
from pageshim.core.rng import lcg_step


@dataclass(frozen=True)
class SequenceMetrics:
    """Summary of a drawn sequence."""

    count: int
    minimum: float
    maximum: float
    mean: float
    in_unit_interval: bool


@dataclass(frozen=True)
class CycleInfo:
    """Shape of the state sequence from a given seed.

    Attributes:
        tail: Draws before the sequence enters its cycle.
        period: Length of the cycle.
    """

    tail: int
    period: int


def compute_metrics(values: np.ndarray) -> SequenceMetrics:
    """Compute summary statistics of drawn values.

    Args:
        values: 1-D array of draws.

    Returns:
        SequenceMetrics; an empty input reports NaN statistics.
    """
    values = np.asarray(values, dtype=np.float64)
    if values.size == 0:
        return SequenceMetrics(0, float("nan"), float("nan"), float("nan"), True)
    return SequenceMetrics(
        count=int(values.size),
        minimum=float(values.min()),
        maximum=float(values.max()),
        mean=float(values.mean()),
        in_unit_interval=bool(np.all((values >= 0.0) & (values < 1.0))),
    )


def cycle_length(params: LcgParameters, seed: int) -> CycleInfo:
    """Find tail and period of the generator's states (Brent's algorithm)."""
    a = float(params.multiplier)
    c = float(params.increment)
    m = float(params.modulus)

    def step(state: float) -> float:
        return lcg_step(state, a, c, m)

    start = float(seed)
    power = period = 1
    tortoise = start
    hare = step(start)
    while tortoise != hare:
        if power == period:
            tortoise = hare
            power *= 2
            period = 0
        hare = step(hare)
        period += 1

    tortoise = hare = start
    for _ in range(period):
        hare = step(hare)
    tail = 0
    while tortoise != hare:
        tortoise = step(tortoise)
        hare = step(hare)
        tail += 1
    return CycleInfo(tail=tail, period=period)
