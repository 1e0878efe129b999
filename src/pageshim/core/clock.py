"""Clock override: a date constructor pinned to a fixed reference instant."""

from __future__ import annotations

import enum
import math
from collections.abc import Callable, Sequence
from datetime import datetime, timedelta, timezone
from typing import Any, cast

from pageshim.utils.exceptions import InvalidDateError

EPOCH = datetime(1970, 1, 1, tzinfo=timezone.utc)

# Epoch-millisecond range a datetime can hold (years 1 to 9999).
MIN_EPOCH_MS = -62_135_596_800_000
MAX_EPOCH_MS = 253_402_300_799_999

_WEEKDAYS = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")
_MONTHS = ("Jan", "Feb", "Mar", "Apr", "May", "Jun", "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")

NativeDate = Callable[..., datetime]


class CallStyle(enum.Enum):
    """How page code reached the date constructor."""

    CONSTRUCT = "construct"
    CALL = "call"


def to_epoch_millis(value: datetime) -> int:
    """Convert an aware datetime to integer epoch milliseconds."""
    delta = value - EPOCH
    return (delta.days * 86_400 + delta.seconds) * 1000 + delta.microseconds // 1000


def from_epoch_millis(ms: int) -> datetime:
    """Aware UTC datetime for integer epoch milliseconds."""
    try:
        return EPOCH + timedelta(milliseconds=ms)
    except OverflowError as exc:
        raise InvalidDateError(f"time value out of range: {ms}") from exc


def format_date(value: datetime) -> str:
    """Render a date the way the platform's plain ``Date()`` call does (UTC)."""
    value = value.astimezone(timezone.utc)
    return (
        f"{_WEEKDAYS[value.weekday()]} {_MONTHS[value.month - 1]} {value.day:02d} "
        f"{value.year:04d} {value.hour:02d}:{value.minute:02d}:{value.second:02d} "
        "GMT+0000 (Coordinated Universal Time)"
    )


def _to_integer(value: Any, name: str) -> int:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidDateError(f"{name} must be a number, got {value!r}")
    if not math.isfinite(value):
        raise InvalidDateError(f"{name} must be finite, got {value!r}")
    return math.trunc(value)


def _truncate_ms(value: datetime) -> datetime:
    return value.replace(microsecond=value.microsecond - value.microsecond % 1000)


def _parse_string(text: str) -> datetime:
    candidate = text.strip()
    if candidate.endswith(("Z", "z")):
        candidate = candidate[:-1] + "+00:00"
    try:
        parsed = datetime.fromisoformat(candidate)
    except ValueError as exc:
        raise InvalidDateError(f"unparseable date string: {text!r}") from exc
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return _truncate_ms(parsed.astimezone(timezone.utc))


def _from_components(args: Sequence[Any]) -> datetime:
    names = ("year", "month", "day", "hours", "minutes", "seconds", "milliseconds")
    fields = [_to_integer(arg, name) for arg, name in zip(args, names)]
    fields += [1, 0, 0, 0, 0][len(fields) - 2 :]
    year, month, day, hours, minutes, seconds, millis = fields
    if 0 <= year <= 99:
        year += 1900
    try:
        start = datetime(year + month // 12, month % 12 + 1, 1, tzinfo=timezone.utc)
        return start + timedelta(
            days=day - 1,
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            milliseconds=millis,
        )
    except (OverflowError, ValueError) as exc:
        raise InvalidDateError(f"date components out of range: {tuple(args)!r}") from exc


def native_date(*args: Any) -> datetime:
    """The platform date constructor, without any override.

    Args:
        *args: Nothing (read the real clock), a single epoch-millisecond
            number, ISO-8601 string or datetime, or year and zero-based
            month followed by optional day, hours, minutes, seconds and
            milliseconds. Overflowing components carry into the next unit.

    Returns:
        An aware UTC datetime with millisecond precision.

    Raises:
        InvalidDateError: If the arguments do not describe a valid date.
    """
    if not args:
        return _truncate_ms(datetime.now(timezone.utc))
    if len(args) == 1:
        (value,) = args
        if isinstance(value, datetime):
            if value.tzinfo is None:
                return _truncate_ms(value.replace(tzinfo=timezone.utc))
            return _truncate_ms(value.astimezone(timezone.utc))
        if isinstance(value, str):
            return _parse_string(value)
        return from_epoch_millis(_to_integer(value, "time value"))
    return _from_components(args[:7])


def date_utc(*args: Any) -> int:
    """Epoch milliseconds for UTC date components, as the static ``Date.UTC``.

    A lone year means January of that year.
    """
    if not args:
        raise InvalidDateError("Date.UTC needs at least a year")
    if len(args) == 1:
        args = (args[0], 0)
    return to_epoch_millis(_from_components(args[:7]))


class ClockOverride:
    """Date constructor whose notion of "now" is a fixed reference instant.

    The native constructor is captured once, when the override is built, and
    every pass-through goes to that captured reference.
    """

    def __init__(self, reference_ms: int, native: NativeDate = native_date) -> None:
        self._native = native
        self._reference_ms = int(reference_ms)

    @property
    def native(self) -> NativeDate:
        return self._native

    def dispatch(self, style: CallStyle, args: Sequence[Any] = ()) -> datetime | str:
        """Single entry point for both calling conventions.

        ``CONSTRUCT`` with no arguments yields the reference instant and with
        arguments forwards them untouched to the native constructor. ``CALL``
        ignores its arguments and yields the formatted reference instant.
        """
        if style is CallStyle.CALL:
            return format_date(self._native(self._reference_ms))
        if not args:
            return self._native(self._reference_ms)
        return self._native(*args)

    def construct(self, *args: Any) -> datetime:
        return cast(datetime, self.dispatch(CallStyle.CONSTRUCT, args))

    def call(self, *args: Any) -> str:
        return cast(str, self.dispatch(CallStyle.CALL, args))

    def now(self) -> int:
        """Static ``now`` accessor: epoch milliseconds of a zero-argument construct."""
        return to_epoch_millis(self.construct())
