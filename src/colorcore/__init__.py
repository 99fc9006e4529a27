"""
colorcore: color space conversion engine.

RGB working spaces, CIE XYZ/LAB/LCH/LUV, Oklab/Oklch, ICtCp, HSL/HSV/HWB,
CMYK and ANSI terminal colors, all converting through CIE XYZ.
"""

__version__ = "0.1.0"

from colorcore.conversions import convert_color, list_models
from colorcore.core import Color, ColorComponentInfo, Illuminant
from colorcore.formats import RenderCondition, RGBInt
from colorcore.models import (
    BT2020,
    CMYK,
    HSL,
    HSV,
    HWB,
    LAB,
    LAB50,
    LAB65,
    LCH,
    LINEAR_SRGB,
    LUV,
    RGB,
    SRGB,
    XYZ,
    XYZ50,
    XYZ65,
    Ansi16,
    Ansi256,
    ICtCp,
    Oklab,
    Oklch,
    RGBColorSpace,
    get_rgb_color_space,
)

__all__ = [
    "__version__",
    "convert_color",
    "list_models",
    "Color",
    "ColorComponentInfo",
    "Illuminant",
    "RenderCondition",
    "RGBInt",
    "RGB",
    "RGBColorSpace",
    "SRGB",
    "LINEAR_SRGB",
    "BT2020",
    "get_rgb_color_space",
    "XYZ",
    "XYZ65",
    "XYZ50",
    "LAB",
    "LAB65",
    "LAB50",
    "LCH",
    "LUV",
    "Oklab",
    "Oklch",
    "ICtCp",
    "HSL",
    "HSV",
    "HWB",
    "CMYK",
    "Ansi16",
    "Ansi256",
]
