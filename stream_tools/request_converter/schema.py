"""Typed schema of a livestream request document."""

import re
from datetime import datetime, timedelta, timezone
from enum import Enum
from typing import Annotated, Any, List
from uuid import UUID

from pydantic import (
    AfterValidator,
    AnyUrl,
    AwareDatetime,
    BaseModel,
    BeforeValidator,
    ConfigDict,
    Field,
    PlainSerializer,
)

from .durations import DurationError, format_duration, parse_duration

U32_MAX = 2**32 - 1


def _to_duration(value: Any) -> Any:
    if isinstance(value, timedelta):
        return value
    if isinstance(value, str):
        return parse_duration(value)
    raise DurationError(f"expected a duration string such as '15m', got {type(value).__name__}")


_RFC3339_RE = re.compile(r"[0-9]{4}-[0-9]{2}-[0-9]{2}[Tt ][0-9]{2}:[0-9]{2}:[0-9]{2}")


def _require_rfc3339(value: Any) -> Any:
    if isinstance(value, datetime):
        return value
    if not isinstance(value, str) or not _RFC3339_RE.match(value):
        raise ValueError(f"expected an RFC 3339 timestamp string, got {value!r}")
    return value


def _to_utc(value: datetime) -> datetime:
    return value.astimezone(timezone.utc)


U32 = Annotated[int, Field(strict=True, ge=0, le=U32_MAX)]
Text = Annotated[str, Field(strict=True)]
Flag = Annotated[bool, Field(strict=True)]

Duration = Annotated[
    timedelta,
    BeforeValidator(_to_duration),
    PlainSerializer(format_duration, return_type=str),
]

Timestamp = Annotated[AwareDatetime, BeforeValidator(_require_rfc3339), AfterValidator(_to_utc)]


class RequestType(str, Enum):
    """Kinds of request envelope."""

    SUCCESS = "success"


class _Record(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)


class PublicTariff(_Record):
    """Tariff visible to every viewer."""

    id: U32
    price: U32
    duration: Duration
    description: Text


class PrivateTariff(_Record):
    """Client-specific tariff, priced through ``client_price``."""

    price: U32 = Field(alias="client_price")
    duration: Duration
    description: Text

    @property
    def client_price(self) -> int:
        return self.price


class Stream(_Record):
    """Stream metadata with its two tariffs."""

    user_id: UUID
    is_private: Flag
    settings: U32
    shard_url: AnyUrl
    public_tariff: PublicTariff
    private_tariff: PrivateTariff


class Gift(_Record):
    id: U32
    price: U32
    description: Text


class Debug(_Record):
    duration: Duration
    at: Timestamp


class StreamRequest(_Record):
    """
    Top-level request envelope.

    The ``type`` key carries the discriminant; only ``"success"`` is accepted.
    """

    request_type: RequestType = Field(alias="type")
    stream: Stream
    gifts: List[Gift]
    debug: Debug

    def to_document(self) -> dict:
        """
        Dump to plain data with wire key names.

        UUID, URL, duration and timestamp fields become their canonical strings.
        """
        return self.model_dump(mode="json", by_alias=True)
