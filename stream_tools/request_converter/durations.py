"""Human-readable duration strings such as ``15m``, ``2h`` or ``1h 30m``."""

import re
from datetime import timedelta
from typing import Dict, List

# Lengths in microseconds, the resolution of timedelta
_MICROSECOND = 1
_MILLISECOND = 1_000
_SECOND = 1_000_000
_MINUTE = 60 * _SECOND
_HOUR = 60 * _MINUTE
_DAY = 24 * _HOUR
_WEEK = 7 * _DAY
_MONTH = 2_630_016 * _SECOND  # 30.44 days
_YEAR = 31_557_600 * _SECOND  # 365.25 days

_UNIT_LENGTHS: Dict[str, int] = {
    "usec": _MICROSECOND,
    "us": _MICROSECOND,
    "µs": _MICROSECOND,
    "msec": _MILLISECOND,
    "millis": _MILLISECOND,
    "ms": _MILLISECOND,
    "seconds": _SECOND,
    "second": _SECOND,
    "secs": _SECOND,
    "sec": _SECOND,
    "s": _SECOND,
    "minutes": _MINUTE,
    "minute": _MINUTE,
    "mins": _MINUTE,
    "min": _MINUTE,
    "m": _MINUTE,
    "hours": _HOUR,
    "hour": _HOUR,
    "hrs": _HOUR,
    "hr": _HOUR,
    "h": _HOUR,
    "days": _DAY,
    "day": _DAY,
    "d": _DAY,
    "weeks": _WEEK,
    "week": _WEEK,
    "w": _WEEK,
    "months": _MONTH,
    "month": _MONTH,
    "M": _MONTH,
    "years": _YEAR,
    "year": _YEAR,
    "y": _YEAR,
}

# Lengths in nanoseconds
UNITS: Dict[str, int] = {unit: length * 1_000 for unit, length in _UNIT_LENGTHS.items()}
UNITS.update({"nsec": 1, "ns": 1})

_ITEM_RE = re.compile(r"\s*(?P<number>[0-9]+)\s*(?P<unit>[^0-9\s]*)")


class DurationError(ValueError):
    """Raised for duration strings that cannot be parsed or values that cannot be formatted."""


def parse_duration(text: str) -> timedelta:
    """
    Parse a human-readable duration.

    Sub-microsecond parts are truncated.

    Args:
        text: Duration such as ``"15m"``, ``"2h"`` or ``"1h 30m"``

    Returns:
        Parsed duration

    Raises:
        DurationError: If the text is empty, has no unit, or uses an unknown unit
    """
    stripped = text.strip()
    if not stripped:
        raise DurationError("empty duration string")

    nanos = 0
    pos = 0

    while pos < len(stripped):
        match = _ITEM_RE.match(stripped, pos)
        if match is None:
            raise DurationError(f"invalid duration {text!r}: expected a number at position {pos}")

        unit = match.group("unit")
        if not unit:
            raise DurationError(f"invalid duration {text!r}: time unit needed, e.g. {match.group('number')}s")
        if unit not in UNITS:
            raise DurationError(f"invalid duration {text!r}: unknown unit {unit!r}")

        nanos += int(match.group("number")) * UNITS[unit]
        pos = match.end()

    try:
        return timedelta(microseconds=nanos // 1_000)
    except OverflowError as e:
        raise DurationError(f"invalid duration {text!r}: number is too large") from e


def format_duration(value: timedelta) -> str:
    """
    Format a duration in canonical human-readable form.

    Largest units come first, e.g. ``timedelta(minutes=90)`` gives ``"1h 30m"``.

    Raises:
        DurationError: For negative durations
    """
    total = (value.days * 86_400 + value.seconds) * _SECOND + value.microseconds
    if total < 0:
        raise DurationError(f"cannot format negative duration {value}")
    if total == 0:
        return "0s"

    parts: List[str] = []

    for length, word in ((_YEAR, "year"), (_MONTH, "month"), (_DAY, "day")):
        count, total = divmod(total, length)
        if count:
            parts.append(f"{count}{word}" + ("s" if count > 1 else ""))

    for length, suffix in ((_HOUR, "h"), (_MINUTE, "m"), (_SECOND, "s"), (_MILLISECOND, "ms")):
        count, total = divmod(total, length)
        if count:
            parts.append(f"{count}{suffix}")

    if total:
        parts.append(f"{total}us")

    return " ".join(parts)
