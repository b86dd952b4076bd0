"""Event Demo - Custom string encoding for a date field."""

from .date_codec import Date, DateCodecError, DateFormatError, DateParseError, decode_date, encode_date
from .models import Event

__all__ = [
    "Date",
    "DateCodecError",
    "DateFormatError",
    "DateParseError",
    "Event",
    "decode_date",
    "encode_date",
]
