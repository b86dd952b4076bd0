"""Event model whose date travels as a ``DD|MM|YYYY`` string."""

from typing import Annotated, Any

from pydantic import BaseModel, BeforeValidator, ConfigDict, PlainSerializer

from .date_codec import Date, DateFormatError, decode_date, encode_date


def _decode(value: Any) -> Any:
    if isinstance(value, Date):
        return value
    if not isinstance(value, str):
        raise DateFormatError(f"expected a DD|MM|YYYY string, got {type(value).__name__}")
    return decode_date(value)


EncodedDate = Annotated[
    Date,
    BeforeValidator(_decode),
    PlainSerializer(encode_date, return_type=str),
]


class Event(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    date: EncodedDate
