"""
Base class for all color values.

Every model implements ``to_rgb``; the remaining conversions default to a
route through RGB or XYZ and are overridden by models that have a direct
path. Component introspection is derived from the dataclass fields of the
concrete model.
"""

from __future__ import annotations

import dataclasses
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Sequence, TypeVar

if TYPE_CHECKING:
    from colorcore.models.ansi import Ansi16, Ansi256
    from colorcore.models.cmyk import CMYK
    from colorcore.models.hsl import HSL
    from colorcore.models.hsv import HSV
    from colorcore.models.hwb import HWB
    from colorcore.models.ictcp import ICtCp
    from colorcore.models.lab import LAB
    from colorcore.models.lch import LCH
    from colorcore.models.luv import LUV
    from colorcore.models.oklab import Oklab
    from colorcore.models.oklch import Oklch
    from colorcore.models.rgb import RGB
    from colorcore.models.xyz import XYZ

C = TypeVar("C", bound="Color")


@dataclass(frozen=True)
class ColorComponentInfo:
    """Name of a component and whether it is an angle (hue)."""

    name: str
    is_polar: bool = False


class Color(ABC):
    """
    A color value in some model.

    Subclasses are frozen dataclasses whose leading fields are the color
    components followed by ``alpha`` (and optionally a ``space``).
    """

    # Component names in order, alpha excluded
    component_names: ClassVar[tuple[str, ...]] = ()
    # Names of components that are hue angles
    polar_components: ClassVar[frozenset[str]] = frozenset()

    alpha: float

    @abstractmethod
    def to_rgb(self) -> RGB:
        """Convert to RGB. Most models produce sRGB."""

    def to_srgb(self) -> RGB:
        return self.to_rgb().to_srgb()

    def to_xyz(self) -> XYZ:
        return self.to_rgb().to_xyz()

    def to_lab(self) -> LAB:
        return self.to_xyz().to_lab()

    def to_lch(self) -> LCH:
        return self.to_lab().to_lch()

    def to_luv(self) -> LUV:
        return self.to_xyz().to_luv()

    def to_oklab(self) -> Oklab:
        return self.to_rgb().to_oklab()

    def to_oklch(self) -> Oklch:
        return self.to_oklab().to_oklch()

    def to_hsl(self) -> HSL:
        return self.to_rgb().to_hsl()

    def to_hsv(self) -> HSV:
        return self.to_rgb().to_hsv()

    def to_hwb(self) -> HWB:
        return self.to_rgb().to_hwb()

    def to_cmyk(self) -> CMYK:
        return self.to_rgb().to_cmyk()

    def to_ansi16(self) -> Ansi16:
        return self.to_rgb().to_ansi16()

    def to_ansi256(self) -> Ansi256:
        return self.to_rgb().to_ansi256()

    def to_ictcp(self) -> ICtCp:
        return self.to_rgb().to_ictcp()

    # -------------------------------------------------------------------------
    # Component introspection
    # -------------------------------------------------------------------------

    @classmethod
    def component_info(cls) -> tuple[ColorComponentInfo, ...]:
        """Info for every component, alpha last."""
        infos = tuple(
            ColorComponentInfo(name, name in cls.polar_components)
            for name in cls.component_names
        )
        return infos + (ColorComponentInfo("alpha"),)

    @classmethod
    def component_count(cls) -> int:
        """Number of components including alpha."""
        return len(cls.component_names) + 1

    @classmethod
    def component_is_polar(cls, i: int) -> bool:
        """Whether component ``i`` is a hue angle."""
        count = cls.component_count()
        if not 0 <= i < count:
            raise ValueError(f"Component index {i} out of range for {cls.__name__} ({count} components)")
        return cls.component_info()[i].is_polar

    def components(self) -> list[float]:
        """Component values as a flat list, alpha last."""
        values = [float(getattr(self, name)) for name in self.component_names]
        values.append(float(self.alpha))
        return values

    def from_components(self: C, components: Sequence[float]) -> C:
        """
        Build a value of the same model (and space) from a flat list.

        Args:
            components: Either every component including alpha, or every
                component without alpha (alpha then defaults to 1.0)

        Returns:
            New color value
        """
        n = len(self.component_names)
        if len(components) not in (n, n + 1):
            raise ValueError(
                f"{type(self).__name__} requires {n} or {n + 1} components, got {len(components)}"
            )
        changes = {name: float(v) for name, v in zip(self.component_names, components)}
        changes["alpha"] = float(components[n]) if len(components) > n else 1.0
        return dataclasses.replace(self, **changes)
