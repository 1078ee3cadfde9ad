"""Centisecond time arithmetic for ASS timestamps.

ASS timestamps are ``H:MM:SS.CC``: the finest unit is the centisecond, so all
arithmetic runs on a single integer count of centiseconds.  Frame-rate
ratios are carried as :class:`fractions.Fraction` so that retiming truncates
exactly (``3600 * 24/25 == 3456``) instead of drifting through float error.
"""

from __future__ import annotations

from dataclasses import dataclass
from fractions import Fraction
from typing import Optional, Union

CENTIS_PER_SECOND = 100
CENTIS_PER_MINUTE = 60 * CENTIS_PER_SECOND
CENTIS_PER_HOUR = 60 * CENTIS_PER_MINUTE

IDENTITY = Fraction(1)

FrameRate = Union[int, float, str, Fraction]


def to_centis(hours: int, minutes: int, seconds: int, centiseconds: int) -> int:
    """Collapse ``(h, m, s, cs)`` into a total centisecond count.

    Sub-fields are not range checked: ``0:00:75.00`` is 7500 centiseconds.
    """
    return ((hours * 60 + minutes) * 60 + seconds) * CENTIS_PER_SECOND + centiseconds


def from_centis(total: int) -> tuple[int, int, int, int]:
    """Split a non-negative centisecond count into normalised ``(h, m, s, cs)``."""
    if total < 0:
        raise ValueError(f"timestamp cannot be negative: {total} centiseconds")
    hours, rest = divmod(total, CENTIS_PER_HOUR)
    minutes, rest = divmod(rest, CENTIS_PER_MINUTE)
    seconds, centiseconds = divmod(rest, CENTIS_PER_SECOND)
    return hours, minutes, seconds, centiseconds


def rescale(total: int, ratio: Fraction) -> int:
    """Multiply *total* by *ratio*, dropping fractional centiseconds."""
    return int(total * ratio)


def format_timestamp(hours: int, minutes: int, seconds: int, centiseconds: int) -> str:
    # Hours are unpadded and unbounded; the rest are two digits.
    return f"{hours}:{minutes:02d}:{seconds:02d}.{centiseconds:02d}"


def parse_frame_rate(value: FrameRate) -> Fraction:
    """Convert a frame rate given as number or text into an exact Fraction.

    Floats go through their shortest decimal repr, so ``23.976`` becomes
    ``2997/125`` rather than the nearest binary fraction.  Text may be a
    decimal (``"29.97"``) or a ratio (``"30000/1001"``).

    Raises ``ValueError`` for text that is not a number.
    """
    if isinstance(value, Fraction):
        return value
    if isinstance(value, bool):
        raise ValueError(f"not a frame rate: {value!r}")
    if isinstance(value, int):
        return Fraction(value)
    if isinstance(value, float):
        value = repr(value)
    try:
        return Fraction(str(value).strip())
    except (ValueError, ZeroDivisionError) as exc:
        raise ValueError(f"not a frame rate: {value!r}") from exc


def compute_ratio(old_fps: Optional[FrameRate], new_fps: Optional[FrameRate]) -> Fraction:
    """Return the retiming multiplier ``old_fps / new_fps``.

    Missing or non-positive rates mean "do not retime" and yield exactly 1.
    """
    if old_fps is None or new_fps is None:
        return IDENTITY
    old = parse_frame_rate(old_fps)
    new = parse_frame_rate(new_fps)
    if old <= 0 or new <= 0:
        return IDENTITY
    return old / new


@dataclass(frozen=True)
class Timestamp:
    """An ASS timestamp, ``H:MM:SS.CC``."""

    hours: int
    minutes: int
    seconds: int
    centiseconds: int

    @classmethod
    def from_centis(cls, total: int) -> Timestamp:
        return cls(*from_centis(total))

    def to_centis(self) -> int:
        return to_centis(self.hours, self.minutes, self.seconds, self.centiseconds)

    def normalized(self) -> Timestamp:
        return Timestamp.from_centis(self.to_centis())

    def rescale(self, ratio: Fraction) -> Timestamp:
        return Timestamp.from_centis(rescale(self.to_centis(), ratio))

    def __str__(self) -> str:
        return format_timestamp(self.hours, self.minutes, self.seconds, self.centiseconds)
