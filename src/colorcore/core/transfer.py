"""
Color component transfer functions.

A TransferFunctions object pairs an EOTF (decode a non-linear signal to
linear light) with its inverse OETF (encode linear light to a signal).
All built-in variants preserve sign so that out-of-gamut intermediate
values from wide-gamut conversions survive a decode/encode round trip.
"""

from __future__ import annotations

import math
from abc import ABC, abstractmethod
from dataclasses import dataclass

from colorcore.core.numeric import spow


class TransferFunctions(ABC):
    """Encode/decode pair for the components of an RGB space."""

    @abstractmethod
    def eotf(self, x: float) -> float:
        """Electro-optical transfer function: signal -> linear light."""

    @abstractmethod
    def oetf(self, x: float) -> float:
        """Opto-electronic transfer function: linear light -> signal."""


@dataclass(frozen=True)
class GammaTransferFunctions(TransferFunctions):
    """Pure power law: eotf(x) = x ** gamma, oetf(x) = x ** (1 / gamma)."""

    gamma: float

    def eotf(self, x: float) -> float:
        return spow(x, self.gamma)

    def oetf(self, x: float) -> float:
        return spow(x, 1.0 / self.gamma)


@dataclass(frozen=True)
class LinearTransferFunctions(TransferFunctions):
    """Identity pair for spaces that are already linear."""

    def eotf(self, x: float) -> float:
        return x

    def oetf(self, x: float) -> float:
        return x


@dataclass(frozen=True)
class SRGBTransferFunctions(TransferFunctions):
    """IEC 61966-2-1 piecewise curve: linear toe plus a 2.4 power segment."""

    def eotf(self, x: float) -> float:
        ax = abs(x)
        if ax <= 0.04045:
            return x / 12.92
        return math.copysign(((ax + 0.055) / 1.055) ** 2.4, x)

    def oetf(self, x: float) -> float:
        ax = abs(x)
        if ax <= 0.0031308:
            return x * 12.92
        return math.copysign(1.055 * ax ** (1.0 / 2.4) - 0.055, x)


# ITU-R BT.2020 constants at full precision; also used for BT.709
_BT_ALPHA = 1.09929682680944
_BT_BETA = 0.018053968510807


@dataclass(frozen=True)
class BT709TransferFunctions(TransferFunctions):
    """ITU-R BT.709 / BT.2020 camera curve: linear below beta, 0.45 power above."""

    def eotf(self, x: float) -> float:
        ax = abs(x)
        if ax < _BT_BETA * 4.5:
            return x / 4.5
        return math.copysign(((ax + _BT_ALPHA - 1.0) / _BT_ALPHA) ** (1.0 / 0.45), x)

    def oetf(self, x: float) -> float:
        ax = abs(x)
        if ax < _BT_BETA:
            return x * 4.5
        return math.copysign(_BT_ALPHA * ax ** 0.45 - (_BT_ALPHA - 1.0), x)


# SMPTE ST 2084 constants
_PQ_M1 = 2610.0 / 16384.0
_PQ_M2 = 2523.0 / 4096.0 * 128.0
_PQ_C1 = 3424.0 / 4096.0
_PQ_C2 = 2413.0 / 4096.0 * 32.0
_PQ_C3 = 2392.0 / 4096.0 * 32.0
PQ_PEAK_LUMINANCE = 10000.0

# ITU-R BT.2408 HDR reference white, cd/m^2
SDR_WHITE_LUMINANCE = 203.0


@dataclass(frozen=True)
class PQTransferFunctions(TransferFunctions):
    """
    SMPTE ST 2084 perceptual quantizer.

    Linear values are relative: 1.0 corresponds to ``white_luminance``
    cd/m^2 on a 10000 cd/m^2 absolute scale.
    """

    white_luminance: float = SDR_WHITE_LUMINANCE

    def eotf(self, x: float) -> float:
        ep = abs(x) ** (1.0 / _PQ_M2)
        y = (max(ep - _PQ_C1, 0.0) / (_PQ_C2 - _PQ_C3 * ep)) ** (1.0 / _PQ_M1)
        return math.copysign(y * PQ_PEAK_LUMINANCE / self.white_luminance, x)

    def oetf(self, x: float) -> float:
        ym = (abs(x) * self.white_luminance / PQ_PEAK_LUMINANCE) ** _PQ_M1
        e = ((_PQ_C1 + _PQ_C2 * ym) / (1.0 + _PQ_C3 * ym)) ** _PQ_M2
        return math.copysign(e, x)
