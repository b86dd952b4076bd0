"""Pipe-delimited ``DD|MM|YYYY`` encoding for calendar dates."""

import re
from typing import Annotated, List

from pydantic import BaseModel, ConfigDict, Field

SEPARATOR = "|"
U32_MAX = 2**32 - 1

_DIGITS_RE = re.compile(r"[0-9]+")

U32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]


class DateCodecError(ValueError):
    """Base error for date strings that cannot be decoded."""


class DateFormatError(DateCodecError):
    """Raised when a date string does not have exactly three segments."""


class DateParseError(DateCodecError):
    """Raised when a date segment is not an unsigned integer."""


class Date(BaseModel):
    """
    Day, month and year as plain integers.

    Values are not checked against the calendar; month 13 is a valid ``Date``.
    """

    model_config = ConfigDict(frozen=True)

    day: U32
    month: U32
    year: U32


def encode_date(date: Date) -> str:
    """
    Encode a date as ``DD|MM|YYYY``.

    Day and month are zero-padded to at least two digits; the year is not padded.
    """
    return f"{date.day:02d}{SEPARATOR}{date.month:02d}{SEPARATOR}{date.year}"


def _parse_segment(segment: str, field: str) -> int:
    if not _DIGITS_RE.fullmatch(segment):
        raise DateParseError(f"invalid {field} {segment!r}: not an unsigned integer")
    value = int(segment)
    if value > U32_MAX:
        raise DateParseError(f"invalid {field} {segment!r}: number too large")
    return value


def decode_date(text: str) -> Date:
    """
    Decode a ``DD|MM|YYYY`` string.

    Segments of any width are accepted.

    Args:
        text: Encoded date

    Returns:
        Decoded date

    Raises:
        DateFormatError: If the text does not split into exactly three segments
        DateParseError: If a segment is not an unsigned 32-bit integer
    """
    parts: List[str] = text.split(SEPARATOR)
    if len(parts) != 3:
        raise DateFormatError(f"Invalid date format {text!r}: expected DD|MM|YYYY")

    day = _parse_segment(parts[0], "day")
    month = _parse_segment(parts[1], "month")
    year = _parse_segment(parts[2], "year")
    return Date(day=day, month=month, year=year)
