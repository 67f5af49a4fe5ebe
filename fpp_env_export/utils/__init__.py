"""Utility helpers for the exporter."""

from .io import detect_encoding, read_text
from .parsing import parse_coordinate, parse_optional_float, parse_settings_line

__all__ = [
    "detect_encoding",
    "read_text",
    "parse_coordinate",
    "parse_optional_float",
    "parse_settings_line",
]
