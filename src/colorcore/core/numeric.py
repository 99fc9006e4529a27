"""
Numeric primitives shared by all color models.

Scalar helpers (signed power, cube root, hue normalization, half-up rounding)
and a small immutable 3x3 matrix backed by numpy.
"""

from __future__ import annotations

import math
from typing import Iterable, Sequence

import numpy as np
from numpy.typing import NDArray

# Chroma below this is treated as achromatic (hue undefined)
HUE_EPSILON = 1.0e-7


def spow(x: float, p: float) -> float:
    """Signed power: sign(x) * |x| ** p."""
    return math.copysign(abs(x) ** p, x)


def cbrt(x: float) -> float:
    """Real cube root, sign-preserving."""
    return math.copysign(abs(x) ** (1.0 / 3.0), x)


def normalize_deg(h: float) -> float:
    """Wrap an angle in degrees into [0, 360). NaN stays NaN."""
    h = h % 360.0
    # -tiny % 360 rounds up to exactly 360.0
    if h == 360.0:
        return 0.0
    return h


def round_half_up(x: float) -> int:
    """Round to the nearest integer, ties toward positive infinity."""
    return math.floor(x + 0.5)


def to_polar(a: float, b: float) -> tuple[float, float]:
    """Rectangular (a, b) -> (chroma, hue degrees). Hue is NaN when achromatic."""
    c = math.hypot(a, b)
    if c < HUE_EPSILON:
        return c, math.nan
    return c, normalize_deg(math.degrees(math.atan2(b, a)))


def from_polar(c: float, h: float) -> tuple[float, float]:
    """(chroma, hue degrees) -> rectangular (a, b). A NaN hue counts as 0."""
    if math.isnan(h):
        h = 0.0
    hr = math.radians(h)
    return c * math.cos(hr), c * math.sin(hr)


class Matrix:
    """
    Immutable 3x3 matrix in row-major order.

    Wraps a read-only float64 numpy array. Equality and hashing are
    structural so that color spaces holding matrices compare by value.
    """

    __slots__ = ("_values",)

    def __init__(self, values: Sequence[float] | Sequence[Sequence[float]] | NDArray) -> None:
        arr = np.array(values, dtype=np.float64).reshape(3, 3)
        arr.flags.writeable = False
        self._values = arr

    @property
    def values(self) -> NDArray[np.float64]:
        """Read-only (3, 3) array."""
        return self._values

    def dot(self, x: float, y: float, z: float) -> tuple[float, float, float]:
        """Multiply this matrix by the column vector (x, y, z)."""
        out = self._values @ np.array((x, y, z), dtype=np.float64)
        return float(out[0]), float(out[1]), float(out[2])

    def inverse(self) -> Matrix:
        return Matrix(np.linalg.inv(self._values))

    def scale_columns(self, factors: Iterable[float]) -> Matrix:
        """Return a copy with column i multiplied by factors[i]."""
        return Matrix(self._values * np.asarray(tuple(factors), dtype=np.float64)[np.newaxis, :])

    def __matmul__(self, other: Matrix) -> Matrix:
        if not isinstance(other, Matrix):
            return NotImplemented
        return Matrix(self._values @ other._values)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Matrix):
            return NotImplemented
        return bool(np.array_equal(self._values, other._values))

    def __hash__(self) -> int:
        return hash(tuple(self._values.ravel().tolist()))

    def __repr__(self) -> str:
        rows = ", ".join(
            "(" + ", ".join(f"{v:.10g}" for v in row) + ")" for row in self._values.tolist()
        )
        return f"Matrix({rows})"
