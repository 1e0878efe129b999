"""Injectable script environment exposing the shim's two capabilities."""

from __future__ import annotations

import logging
from collections.abc import Callable, MutableMapping
from datetime import datetime
from typing import Any

from pageshim.config.defaults import default_shim_config
from pageshim.config.schema import ShimConfig
from pageshim.core.clock import (
    ClockOverride,
    NativeDate,
    date_utc,
    native_date,
    to_epoch_millis,
)
from pageshim.core.rng import LcgRandom, make_rng
from pageshim.utils.exceptions import ShimInstallError

log = logging.getLogger(__name__)


class DateBinding:
    """Object bound as ``Date`` in a script scope.

    Calling it directly is the plain-function convention and returns a
    string; :meth:`construct` is the ``new Date(...)`` convention.
    """

    def __init__(self, clock: ClockOverride) -> None:
        self._clock = clock

    def __call__(self, *args: Any) -> str:
        return self._clock.call(*args)

    def construct(self, *args: Any) -> datetime:
        return self._clock.construct(*args)

    def now(self) -> int:
        return self._clock.now()

    def UTC(self, *args: Any) -> int:  # noqa: N802
        return date_utc(*args)

    def parse(self, text: str) -> int:
        return to_epoch_millis(self._clock.native(str(text)))


class MathBinding:
    """``Math`` namespace with ``random`` replaced; other names fall through to ``base``."""

    def __init__(self, random: Callable[[], float], base: Any = None) -> None:
        self.random = random
        self._base = base

    def __getattr__(self, name: str) -> Any:
        if self._base is None:
            raise AttributeError(name)
        return getattr(self._base, name)


class Environment:
    """One execution context's deterministic clock and random stream.

    Both capabilities are seeded from the same reference instant. Separate
    environments never share generator state.
    """

    def __init__(self, config: ShimConfig, native: NativeDate = native_date) -> None:
        self.config = config
        self._clock = ClockOverride(config.reference_instant, native)
        self._rng: LcgRandom = make_rng(config.reference_instant, config.lcg)

    @classmethod
    def for_instant(cls, reference_ms: int) -> Environment:
        """Environment with the reference LCG constants."""
        return cls(default_shim_config(reference_ms))

    def now(self) -> int:
        """Current time in epoch milliseconds; always the reference instant."""
        return self._clock.now()

    def next_random(self) -> float:
        return self._rng.random()

    def new_date(self, *args: Any) -> datetime:
        return self._clock.construct(*args)

    def date_string(self) -> str:
        return self._clock.call()

    def install(self, scope: MutableMapping[str, Any]) -> bool:
        """Bind ``Date`` and ``Math`` into a sandboxed interpreter's globals.

        A callable already bound as ``Date`` in ``scope`` becomes the native
        constructor that explicit-argument dates are forwarded to.

        Args:
            scope: The interpreter's global namespace.

        Returns:
            True if the overrides were bound, False if the shim is disabled.

        Raises:
            ShimInstallError: If a shim is already installed in ``scope``.
        """
        if not self.config.enabled:
            log.debug("Shim disabled; leaving scope untouched")
            return False
        existing_date = scope.get("Date")
        if isinstance(existing_date, DateBinding):
            raise ShimInstallError("a determinism shim is already installed in this scope")
        if callable(existing_date):
            self._clock = ClockOverride(self.config.reference_instant, existing_date)
        existing_math = scope.get("Math")
        if isinstance(existing_math, MathBinding):
            existing_math = existing_math._base
        scope["Date"] = DateBinding(self._clock)
        scope["Math"] = MathBinding(self.next_random, existing_math)
        log.info("Installed determinism shim at reference instant %d", self.config.reference_instant)
        return True
