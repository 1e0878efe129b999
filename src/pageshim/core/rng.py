"""Deterministic ``Math.random`` replacement seeded from the reference instant."""

from __future__ import annotations

import math

import numpy as np

from pageshim.config.schema import LcgParameters


def lcg_step(state: float, multiplier: float, increment: float, modulus: float) -> float:
    """Advance the generator state by one draw.

    Computed in IEEE-754 doubles exactly as a page's script engine does,
    so seeds whose first product exceeds 2**53 round the same way in both.
    The outer remainder keeps the state non-negative for pre-epoch seeds.
    """
    return math.fmod(math.fmod(state * multiplier + increment, modulus) + modulus, modulus)


class LcgRandom:
    """Linear congruential generator yielding floats in [0, 1).

    Each call to :meth:`random` mutates the private state, so the n-th value
    depends on every earlier call.
    """

    __slots__ = ("_state", "_multiplier", "_increment", "_modulus")

    def __init__(self, seed: int, params: LcgParameters | None = None) -> None:
        if params is None:
            params = LcgParameters()
        self._state = float(seed)
        self._multiplier = float(params.multiplier)
        self._increment = float(params.increment)
        self._modulus = float(params.modulus)

    def random(self) -> float:
        self._state = lcg_step(self._state, self._multiplier, self._increment, self._modulus)
        return self._state / self._modulus

    def draws(self, n: int) -> np.ndarray:
        """Return the next ``n`` values as a float64 array."""
        if n < 0:
            raise ValueError(f"n must be non-negative, got {n}")
        return np.fromiter((self.random() for _ in range(n)), dtype=np.float64, count=n)


def make_rng(seed: int, params: LcgParameters | None = None) -> LcgRandom:
    """Create the deterministic page RNG for a reference instant."""
    return LcgRandom(seed, params)
