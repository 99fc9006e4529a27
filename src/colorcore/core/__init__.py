"""Numeric primitives, white points, transfer functions and the Color base class."""

from colorcore.core.color import Color, ColorComponentInfo
from colorcore.core.constants import CIE_E, CIE_E_TIMES_K, CIE_K
from colorcore.core.illuminant import ILLUMINANTS, Illuminant, get_illuminant
from colorcore.core.numeric import Matrix, cbrt, normalize_deg, round_half_up, spow
from colorcore.core.transfer import (
    BT709TransferFunctions,
    GammaTransferFunctions,
    LinearTransferFunctions,
    PQTransferFunctions,
    SRGBTransferFunctions,
    TransferFunctions,
)

__all__ = [
    "Color",
    "ColorComponentInfo",
    "CIE_E",
    "CIE_K",
    "CIE_E_TIMES_K",
    "Illuminant",
    "ILLUMINANTS",
    "get_illuminant",
    "Matrix",
    "spow",
    "cbrt",
    "normalize_deg",
    "round_half_up",
    "TransferFunctions",
    "GammaTransferFunctions",
    "LinearTransferFunctions",
    "SRGBTransferFunctions",
    "BT709TransferFunctions",
    "PQTransferFunctions",
]
