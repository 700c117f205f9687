"""The Timespan value type."""

from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import timedelta
from typing import ClassVar, Protocol, Self, runtime_checkable

from pytimespan._constants import (
    DEFAULT_FORMAT,
    MINUTES_PER_HOUR,
    SECONDS_PER_HOUR,
    SECONDS_PER_MINUTE,
)
from pytimespan._formatter import render
from pytimespan._parser import parse_seconds


@runtime_checkable
class Instant(Protocol):
    """Anything that knows its offset from the Unix epoch, e.g. ``datetime``."""

    def timestamp(self) -> float: ...


@dataclass(frozen=True)
class Units:
    """Non-negative decomposition of a timespan's magnitude."""

    hours: int
    minutes: int
    seconds: int
    total_minutes: int


def total_seconds(hours: float = 0, minutes: float = 0, seconds: float = 0) -> float:
    """Combine hours, minutes and seconds into one second count."""
    return hours * SECONDS_PER_HOUR + minutes * SECONDS_PER_MINUTE + seconds


def recompute(current: float, *, hours: float = 0, minutes: float = 0) -> float:
    """Recompute a second count from a changed unit plus the current total.

    This is what ``set_hours``/``set_minutes``/``add_hours``/``add_minutes``
    do: the changed unit is converted to seconds and the *whole* current
    value is folded back in as the seconds component. Setting minutes on a
    90 second span therefore gives ``minutes * 60 + 90``, not a span whose
    minute field alone was replaced.
    """
    return total_seconds(hours, minutes, current)


def _epoch_seconds(instant: Instant | float) -> int:
    if isinstance(instant, Instant):
        return math.floor(instant.timestamp())
    return math.floor(instant)


@dataclass(order=True)
class Timespan:
    """A signed amount of time, stored as seconds.

    Mutators change the instance in place and return it, so calls chain::

        Timespan().add_hours(1).add_minutes(30).format()  # "01:30:00"
    """

    seconds: float = 0.0

    default_format: ClassVar[str] = DEFAULT_FORMAT
    """Template used by ``str()`` and ``to_json()``."""

    def __post_init__(self) -> None:
        self.seconds = float(self.seconds)

    # --- Construction ---

    @classmethod
    def from_units(cls, hours: float = 0, minutes: float = 0, seconds: float = 0) -> Self:
        """Create a Timespan from hours, minutes and seconds.

        Values are neither bounded nor rounded: ``from_units(0, 1.5)`` is 90
        seconds and ``from_units(0, 0, 90)`` is the same span.
        """
        return cls(total_seconds(hours, minutes, seconds))

    @classmethod
    def from_instant_diff(cls, start: Instant | float, end: Instant | float) -> Self:
        """Create a Timespan covering ``start`` to ``end``.

        Instants are ``datetime``-like objects or epoch seconds. The result is
        negative when ``end`` precedes ``start``.
        """
        return cls(_epoch_seconds(end) - _epoch_seconds(start))

    @classmethod
    def from_relative(cls, seconds: float) -> Self:
        """Create a Timespan from an already resolved relative offset."""
        return cls().add_relative(seconds)

    @classmethod
    def from_timedelta(cls, delta: timedelta) -> Self:
        return cls(delta.total_seconds())

    @classmethod
    def create_from_format(cls, template: str, value: str) -> Self:
        """Parse ``value`` with ``template``.

        Raises:
            InvalidFormatError: If ``value`` does not match ``template``.
        """
        return cls(parse_seconds(template, value))

    # --- Setters ---

    def set_time(self, hours: float = 0, minutes: float = 0, seconds: float = 0) -> Self:
        self.seconds = total_seconds(hours, minutes, seconds)
        return self

    def set_seconds(self, seconds: float) -> Self:
        self.seconds = float(seconds)
        return self

    def set_minutes(self, minutes: float) -> Self:
        """Recompute from ``minutes`` plus the current seconds, see ``recompute``."""
        self.seconds = recompute(self.seconds, minutes=minutes)
        return self

    def set_hours(self, hours: float) -> Self:
        """Recompute from ``hours`` plus the current seconds, see ``recompute``."""
        self.seconds = recompute(self.seconds, hours=hours)
        return self

    # --- Arithmetic ---

    def add_seconds(self, seconds: float) -> Self:
        self.seconds += seconds
        return self

    def add_minutes(self, minutes: float) -> Self:
        self.seconds = recompute(self.seconds, minutes=minutes)
        return self

    def add_hours(self, hours: float) -> Self:
        self.seconds = recompute(self.seconds, hours=hours)
        return self

    def add(self, hours: float = 0, minutes: float = 0, seconds: float = 0) -> Self:
        """Add hours, then minutes, then seconds."""
        return self.add_hours(hours).add_minutes(minutes).add_seconds(seconds)

    def add_relative(self, seconds: float) -> Self:
        """Add a signed offset resolved from a relative expression such as ``"+1 day"``.

        Resolving the expression itself is left to the caller.
        """
        return self.add_seconds(seconds)

    def sum(self, *others: Timespan) -> Self:
        """Add every other Timespan to this one, in order."""
        for other in others:
            self.seconds += other.seconds
        return self

    def diff(self, other: Timespan, absolute: bool = True) -> Self:
        """Return a new Timespan of ``other - self``, its magnitude if ``absolute``."""
        seconds = other.seconds - self.seconds
        return type(self)(abs(seconds) if absolute else seconds)

    def negate(self) -> Self:
        self.seconds = -self.seconds
        return self

    def __neg__(self) -> Self:
        return type(self)(-self.seconds)

    # --- Queries ---

    def as_minutes(self) -> float:
        return self.seconds / SECONDS_PER_MINUTE

    def as_hours(self) -> float:
        return self.seconds / SECONDS_PER_HOUR

    def is_negative(self) -> bool:
        return self.seconds < 0

    def is_empty(self) -> bool:
        return self.seconds == 0

    def get_units(self) -> Units:
        """Split the magnitude into whole hours, minutes and seconds.

        Fractions of a second are dropped here but kept in ``seconds``.
        """
        magnitude = abs(self.seconds)
        hours = math.floor(magnitude / SECONDS_PER_HOUR)
        minutes = math.floor((magnitude - hours * SECONDS_PER_HOUR) / SECONDS_PER_MINUTE)
        seconds = math.floor(magnitude % SECONDS_PER_MINUTE)
        return Units(
            hours=hours,
            minutes=minutes,
            seconds=seconds,
            total_minutes=hours * MINUTES_PER_HOUR + minutes,
        )

    # --- Conversion ---

    def format(self, template: str | None = None) -> str:
        """Render with ``template``, or ``default_format`` when omitted."""
        return render(self.default_format if template is None else template, self)

    def to_json(self) -> str:
        return self.format()

    def to_timedelta(self) -> timedelta:
        return timedelta(seconds=self.seconds)

    def __str__(self) -> str:
        return self.format()

    def __format__(self, format_spec: str) -> str:
        return self.format(format_spec or None)


def parse(template: str, text: str) -> Timespan:
    """Parse ``text`` into a Timespan according to ``template``.

    This is the inverse of ``render`` for templates made only of
    placeholders and literal separators.

    Args:
        template: The template, e.g. ``"%r%h:%i:%s"``.
        text: The string to decode, e.g. ``"-00:01:30"``.

    Returns:
        A new Timespan.

    Raises:
        InvalidFormatError: If the template is malformed or ``text`` does not
            match it in full.
    """
    return Timespan(parse_seconds(template, text))


def create_from_format(template: str, value: str) -> Timespan:
    """Create a Timespan from ``value`` formatted with ``template``."""
    return Timespan.create_from_format(template, value)
