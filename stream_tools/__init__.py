"""Livestream request transcoding tools."""

__version__ = "0.1.0"
