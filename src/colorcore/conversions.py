"""
Name-keyed conversion dispatch.

Maps model names to the conversion method every Color exposes, so that
callers holding a target name (from configuration, a CLI or a UI) can
convert without a chain of isinstance checks.
"""

from __future__ import annotations

from colorcore.core.color import Color

# Model name -> Color method producing it
CONVERTERS: dict[str, str] = {
    "RGB": "to_rgb",
    "SRGB": "to_srgb",
    "XYZ": "to_xyz",
    "LAB": "to_lab",
    "LCH": "to_lch",
    "LUV": "to_luv",
    "OKLAB": "to_oklab",
    "OKLCH": "to_oklch",
    "HSL": "to_hsl",
    "HSV": "to_hsv",
    "HSB": "to_hsv",  # Alias for HSV
    "HWB": "to_hwb",
    "CMYK": "to_cmyk",
    "ANSI16": "to_ansi16",
    "ANSI256": "to_ansi256",
    "ICTCP": "to_ictcp",
}

_ALIASES = {"HSB"}


def convert_color(color: Color, target: str) -> Color:
    """
    Convert a color value to the named model.

    Args:
        color: Any color value
        target: Model name, case-insensitive (see list_models)

    Returns:
        Converted color value
    """
    key = target.upper().replace("-", "").replace("_", "")
    if key not in CONVERTERS:
        raise ValueError(f"Unknown target color model: {target}")
    return getattr(color, CONVERTERS[key])()


def list_models() -> list[str]:
    """Get list of supported color models."""
    # Return unique names (not aliases)
    return sorted(set(CONVERTERS) - _ALIASES)
