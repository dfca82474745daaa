"""Time spans, time points and per-frame timing state."""

from __future__ import annotations

import time
from fractions import Fraction
from numbers import Real
from typing import Optional, Type, TypeVar

S = TypeVar("S", bound="TimeSpan")

_NANOSECOND = Fraction(1, 1_000_000_000)


def _scale(count: float, factor: Fraction) -> float:
    return count * factor.numerator / factor.denominator


class TimeSpan:
    """A duration stored as a count of units; the unit is RATIO seconds."""

    RATIO: Fraction = Fraction(1)

    __slots__ = ("_count",)

    def __init__(self, count: float = 0.0) -> None:
        if isinstance(count, TimeSpan):
            count = _scale(count._count, count.RATIO / self.RATIO)
        if not isinstance(count, Real):
            raise TypeError(f"expected a number, got {type(count).__name__}")
        self._count = float(count)

    @property
    def count(self) -> float:
        return self._count

    def to(self, kind: Type[S]) -> S:
        """Convert this span to another unit."""
        return kind(_scale(self._count, self.RATIO / kind.RATIO))

    def __add__(self, other: "TimeSpan") -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return type(self)(self._count + other.to(type(self))._count)

    def __sub__(self, other: "TimeSpan") -> "TimeSpan":
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return type(self)(self._count - other.to(type(self))._count)

    def __mul__(self, scalar: Real) -> "TimeSpan":
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(self._count * scalar)

    __rmul__ = __mul__

    def __truediv__(self, scalar: Real) -> "TimeSpan":
        if not isinstance(scalar, Real):
            return NotImplemented
        return type(self)(self._count / scalar)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimeSpan):
            return NotImplemented
        return self._count == other.to(type(self))._count

    __hash__ = None  # type: ignore[assignment]

    def __float__(self) -> float:
        return self._count

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._count!r})"


class Seconds(TimeSpan):
    RATIO = Fraction(1)
    __slots__ = ()


class Milliseconds(TimeSpan):
    RATIO = Fraction(1, 1000)
    __slots__ = ()


class TimePoint:
    """A reading of the monotonic high-resolution clock, in nanoseconds."""

    __slots__ = ("nanoseconds",)

    def __init__(self, nanoseconds: Optional[int] = None) -> None:
        self.nanoseconds = time.perf_counter_ns() if nanoseconds is None else int(nanoseconds)

    @classmethod
    def now(cls) -> "TimePoint":
        return cls()

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TimePoint):
            return NotImplemented
        return self.nanoseconds == other.nanoseconds

    def __hash__(self) -> int:
        return hash(self.nanoseconds)

    def __repr__(self) -> str:
        return f"TimePoint({self.nanoseconds})"


class Time:
    """Process-wide frame timing: delta time and time since start."""

    _time_since_app_start: Seconds = Seconds(0.0)
    _delta_time: Milliseconds = Milliseconds(0.0)

    @classmethod
    def time_since_app_start(cls) -> Seconds:
        return cls._time_since_app_start

    @classmethod
    def delta_time(cls) -> Seconds:
        return cls._delta_time.to(Seconds)

    @classmethod
    def delta_time_millis(cls) -> Milliseconds:
        return cls._delta_time

    @classmethod
    def now(cls) -> TimePoint:
        return TimePoint.now()

    @classmethod
    def elapsed_time(
        cls, start: TimePoint, end: TimePoint, kind: Type[S] = Seconds
    ) -> S:
        """Time from start to end, as Seconds or Milliseconds."""
        if kind not in (Seconds, Milliseconds):
            raise TypeError("kind must be Seconds or Milliseconds")
        elapsed = end.nanoseconds - start.nanoseconds
        return kind(_scale(elapsed, _NANOSECOND / kind.RATIO))

    @classmethod
    def record_frame(
        cls, app_start: TimePoint, last_frame: TimePoint, now: TimePoint
    ) -> Milliseconds:
        """Update the frame timings and return the new delta time."""
        cls._delta_time = cls.elapsed_time(last_frame, now, Milliseconds)
        cls._time_since_app_start = cls.elapsed_time(app_start, now, Milliseconds).to(Seconds)
        return cls._delta_time