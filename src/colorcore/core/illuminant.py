"""
Reference white points.

An Illuminant is the XYZ tristimulus value of a reference white, normalized
so that Y = 1. Named constants are built from their CIE 1931 xy
chromaticities.
"""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Illuminant:
    """
    Reference white as XYZ tristimulus values.

    Attributes:
        x: X tristimulus component
        y: Y tristimulus component (1.0 for all named illuminants)
        z: Z tristimulus component
        name: Display name; not part of equality
    """

    x: float
    y: float
    z: float
    name: str = field(default="", compare=False)

    @classmethod
    def from_chromaticity(cls, x: float, y: float, name: str = "") -> Illuminant:
        """Build an illuminant from xy chromaticity with luminance Y = 1."""
        return cls(x / y, 1.0, (1.0 - x - y) / y, name)

    @property
    def chromaticity(self) -> tuple[float, float]:
        """CIE xy chromaticity of this white."""
        total = self.x + self.y + self.z
        return self.x / total, self.y / total

    def __repr__(self) -> str:
        if self.name:
            return f"Illuminant.{self.name}"
        return f"Illuminant(x={self.x}, y={self.y}, z={self.z})"


# CIE standard illuminants, 2° observer
A = Illuminant.from_chromaticity(0.44757, 0.40745, "A")
B = Illuminant.from_chromaticity(0.34842, 0.35161, "B")
C = Illuminant.from_chromaticity(0.31006, 0.31616, "C")
D50 = Illuminant.from_chromaticity(0.34570, 0.35850, "D50")
D55 = Illuminant.from_chromaticity(0.33242, 0.34743, "D55")
D65 = Illuminant.from_chromaticity(0.31270, 0.32900, "D65")
D75 = Illuminant.from_chromaticity(0.29902, 0.31485, "D75")
E = Illuminant.from_chromaticity(1.0 / 3.0, 1.0 / 3.0, "E")

# Non-CIE whites used by standard RGB spaces
DCI_P3 = Illuminant.from_chromaticity(0.314, 0.351, "DCI_P3")
ACES = Illuminant.from_chromaticity(0.32168, 0.33767, "ACES")


ILLUMINANTS: dict[str, Illuminant] = {
    ill.name: ill for ill in (A, B, C, D50, D55, D65, D75, E, DCI_P3, ACES)
}


def get_illuminant(name: str) -> Illuminant:
    """Look up a named illuminant (case-insensitive)."""
    key = name.upper().replace("-", "_")
    if key not in ILLUMINANTS:
        raise KeyError(f"Unknown illuminant: {name}. Known: {sorted(ILLUMINANTS)}")
    return ILLUMINANTS[key]
