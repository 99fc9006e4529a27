"""
ITU-R BT.2100 ICtCp.

Computed from linear BT.2020 RGB through an LMS intermediate encoded with
the SMPTE ST 2084 (PQ) curve. Linear 1.0 is taken as the BT.2408 HDR
reference white of 203 cd/m^2.
"""

from __future__ import annotations

from dataclasses import dataclass

import numpy as np

from colorcore.core.color import Color
from colorcore.core.numeric import Matrix
from colorcore.core.transfer import PQTransferFunctions
from colorcore.models.rgb import BT2020, RGB

_PQ = PQTransferFunctions()

_RGB_TO_LMS = Matrix(np.array((
    (1688.0, 2146.0, 262.0),
    (683.0, 2951.0, 462.0),
    (99.0, 309.0, 3688.0),
)) / 4096.0)

_LMS_TO_ICTCP = Matrix(np.array((
    (2048.0, 2048.0, 0.0),
    (6610.0, -13613.0, 7003.0),
    (17933.0, -17390.0, -543.0),
)) / 4096.0)

_LMS_TO_RGB = _RGB_TO_LMS.inverse()
_ICTCP_TO_LMS = _LMS_TO_ICTCP.inverse()


def bt2020_to_ictcp(rgb: RGB) -> ICtCp:
    """Direct conversion from a BT.2020 value."""
    f = BT2020.transfer_functions
    l, m, s = _RGB_TO_LMS.dot(f.eotf(rgb.r), f.eotf(rgb.g), f.eotf(rgb.b))
    i, t, p = _LMS_TO_ICTCP.dot(_PQ.oetf(l), _PQ.oetf(m), _PQ.oetf(s))
    return ICtCp(i, t, p, rgb.alpha)


@dataclass(frozen=True)
class ICtCp(Color):
    """
    | Component | Description           | Range       |
    | --------- | --------------------- | ----------- |
    | i         | intensity             | [0, 1]      |
    | t         | blue-yellow (tritan)  | [-0.5, 0.5] |
    | p         | red-green (protan)    | [-0.5, 0.5] |
    """

    component_names = ("i", "t", "p")

    i: float
    t: float
    p: float
    alpha: float = 1.0

    def to_rgb(self) -> RGB:
        """Convert to BT.2020 RGB."""
        l_, m_, s_ = _ICTCP_TO_LMS.dot(self.i, self.t, self.p)
        r, g, b = _LMS_TO_RGB.dot(_PQ.eotf(l_), _PQ.eotf(m_), _PQ.eotf(s_))
        f = BT2020.transfer_functions
        return BT2020(f.oetf(r), f.oetf(g), f.oetf(b), self.alpha)

    def to_ictcp(self) -> ICtCp:
        return self
