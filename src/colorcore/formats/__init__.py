"""Hex-string and packed-integer adapters for RGB values."""

from colorcore.formats.hex import RenderCondition, format_hex, parse_hex
from colorcore.formats.packed import RGBInt

__all__ = [
    "RenderCondition",
    "format_hex",
    "parse_hex",
    "RGBInt",
]
