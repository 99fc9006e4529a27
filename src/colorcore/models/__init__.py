"""Color models and the standard spaces they are defined against."""

from colorcore.models.rgb import (
    ACES,
    ACES_CG,
    ADOBE_RGB,
    BT709,
    BT2020,
    DCI_P3,
    DISPLAY_P3,
    LINEAR_SRGB,
    RGB,
    RGB_COLOR_SPACES,
    SRGB,
    RGBColorSpace,
    get_rgb_color_space,
    list_rgb_color_spaces,
    register_rgb_color_space,
)
from colorcore.models.xyz import XYZ, XYZ50, XYZ65, XYZColorSpace
from colorcore.models.lab import LAB, LAB50, LAB65, LABColorSpace
from colorcore.models.lch import LCH, LCH50, LCH65, LCHColorSpace
from colorcore.models.luv import LUV, LUV50, LUV65, LUVColorSpace
from colorcore.models.oklab import Oklab
from colorcore.models.oklch import Oklch
from colorcore.models.ictcp import ICtCp
from colorcore.models.hsl import HSL
from colorcore.models.hsv import HSV
from colorcore.models.hwb import HWB
from colorcore.models.cmyk import CMYK
from colorcore.models.ansi import Ansi16, Ansi256, ansi256_palette

__all__ = [
    "RGB",
    "RGBColorSpace",
    "RGB_COLOR_SPACES",
    "SRGB",
    "LINEAR_SRGB",
    "BT709",
    "BT2020",
    "DISPLAY_P3",
    "DCI_P3",
    "ADOBE_RGB",
    "ACES",
    "ACES_CG",
    "get_rgb_color_space",
    "list_rgb_color_spaces",
    "register_rgb_color_space",
    "XYZ",
    "XYZColorSpace",
    "XYZ65",
    "XYZ50",
    "LAB",
    "LABColorSpace",
    "LAB65",
    "LAB50",
    "LCH",
    "LCHColorSpace",
    "LCH65",
    "LCH50",
    "LUV",
    "LUVColorSpace",
    "LUV65",
    "LUV50",
    "Oklab",
    "Oklch",
    "ICtCp",
    "HSL",
    "HSV",
    "HWB",
    "CMYK",
    "Ansi16",
    "Ansi256",
    "ansi256_palette",
]
