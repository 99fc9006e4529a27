"""
ANSI terminal colors.

Ansi16 holds one of the 32 SGR color codes (foreground, background and
their bright variants). Ansi256 indexes the xterm 256-color palette:

    0-15     the 16 ANSI colors
    16-231   a 6x6x6 color cube
    232-255  a 24-step grey ramp

Conversion into either is lossy; conversion out is closed-form.
"""

from __future__ import annotations

import numbers
from dataclasses import dataclass
from typing import Sequence

from colorcore.core.color import Color
from colorcore.models.rgb import RGB, SRGB

# | Color  | Foreground | Background | Bright FG | Bright BG |
# | ------ | ---------- | ---------- | --------- | --------- |
# | black  | 30         | 40         | 90        | 100       |
# | red    | 31         | 41         | 91        | 101       |
# | green  | 32         | 42         | 92        | 102       |
# | yellow | 33         | 43         | 93        | 103       |
# | blue   | 34         | 44         | 94        | 104       |
# | purple | 35         | 45         | 95        | 105       |
# | cyan   | 36         | 46         | 96        | 106       |
# | white  | 37         | 47         | 97        | 107       |
ANSI16_CODES = frozenset(
    list(range(30, 38)) + list(range(40, 48)) + list(range(90, 98)) + list(range(100, 108))
)

CUBE_START = 16
GREY_START = 232


class _TerminalColor(Color):
    """Shared component handling for the integer terminal codes."""

    component_names = ("code",)

    code: int

    @property
    def alpha(self) -> float:
        return 1.0

    def components(self) -> list[float]:
        return [float(self.code), 1.0]

    def from_components(self, components: Sequence[float]):
        if len(components) not in (1, 2):
            raise ValueError(f"{type(self).__name__} requires 1 or 2 components, got {len(components)}")
        return type(self)(int(components[0]))


@dataclass(frozen=True)
class Ansi16(_TerminalColor):
    """An ANSI-16 SGR color code. Always fully opaque."""

    code: int

    def __post_init__(self) -> None:
        if not isinstance(self.code, numbers.Integral) or self.code not in ANSI16_CODES:
            raise ValueError(f"code not valid: {self.code}")

    def to_rgb(self) -> RGB:
        color = self.code % 10

        # grayscale
        if color == 0 or color == 7:
            c = color + 3.5 if self.code > 50 else float(color)
            v = c / 10.5
            return SRGB(v, v, v)

        mul = 1.0 if self.code > 50 else 0.5
        r = (color % 2) * mul
        g = ((color // 2) % 2) * mul
        b = ((color // 4) % 2) * mul
        return SRGB(r, g, b)

    def to_ansi16(self) -> Ansi16:
        return self

    def to_ansi256(self) -> Ansi256:
        if self.code >= 90:
            return Ansi256(self.code - 90 + 8)
        return Ansi256(self.code - 30)


@dataclass(frozen=True)
class Ansi256(_TerminalColor):
    """An index into the xterm 256-color palette. Always fully opaque."""

    code: int

    def __post_init__(self) -> None:
        if not isinstance(self.code, numbers.Integral) or not 0 <= self.code <= 255:
            raise ValueError(f"code not valid: {self.code}")

    def to_rgb(self) -> RGB:
        if self.code < CUBE_START:
            return self.to_ansi16().to_rgb()

        if self.code >= GREY_START:
            c = (self.code - GREY_START) * 10 + 8
            return SRGB.from255(c, c, c)

        c = self.code - CUBE_START
        r, rem = divmod(c, 36)
        g, b = divmod(rem, 6)
        return SRGB(r / 5, g / 5, b / 5)

    def to_ansi16(self) -> Ansi16:
        if self.code < 8:
            return Ansi16(self.code + 30)
        if self.code < CUBE_START:
            return Ansi16(self.code - 8 + 90)
        return self.to_rgb().to_ansi16()

    def to_ansi256(self) -> Ansi256:
        return self


def ansi256_palette() -> list[RGB]:
    """Every palette entry in index order."""
    return [Ansi256(code).to_rgb() for code in range(256)]
