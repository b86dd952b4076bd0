"""Request Converter - Transcode livestream requests from JSON to YAML and TOML."""

from .converter import ConversionFormat, RequestConverter, RequestSchemaError
from .schema import Debug, Gift, PrivateTariff, PublicTariff, RequestType, Stream, StreamRequest

__all__ = [
    "ConversionFormat",
    "RequestConverter",
    "RequestSchemaError",
    "Debug",
    "Gift",
    "PrivateTariff",
    "PublicTariff",
    "RequestType",
    "Stream",
    "StreamRequest",
]
