"""Hex string parsing and rendering for 8-bit RGBA channels."""

from __future__ import annotations

import re
from enum import Enum

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]+)$")


class RenderCondition(str, Enum):
    """When to write an optional component such as alpha."""

    AUTO = "auto"  # only when it carries information (alpha < 255)
    ALWAYS = "always"
    NEVER = "never"


def parse_hex(text: str) -> tuple[int, int, int, int]:
    """
    Parse a hex color into 8-bit channels.

    Accepts ``rgb``, ``rgba``, ``rrggbb`` and ``rrggbbaa``, each optionally
    prefixed with ``#``. Short forms repeat each digit (``#369`` is
    ``#336699``). A missing alpha is 255.

    Returns:
        (r, g, b, alpha) integers in [0, 255]
    """
    match = _HEX_RE.match(text)
    if match is None:
        raise ValueError(f"Invalid hex color: {text!r}")
    digits = match.group(1)

    if len(digits) in (3, 4):
        digits = "".join(d * 2 for d in digits)
    elif len(digits) not in (6, 8):
        raise ValueError(f'Hex string must be in the format "#ffffff" or "ffffff", got {text!r}')

    channels = [int(digits[i:i + 2], 16) for i in range(0, len(digits), 2)]
    if len(channels) == 3:
        channels.append(255)
    r, g, b, a = channels
    return r, g, b, a


def format_hex(
    r: int,
    g: int,
    b: int,
    alpha: int = 255,
    with_number_sign: bool = True,
    render_alpha: RenderCondition = RenderCondition.AUTO,
) -> str:
    """Render 8-bit channels as ``#rrggbb`` or ``#rrggbbaa``."""
    out = f"{r:02x}{g:02x}{b:02x}"
    if render_alpha == RenderCondition.ALWAYS or (render_alpha == RenderCondition.AUTO and alpha != 255):
        out += f"{alpha:02x}"
    return "#" + out if with_number_sign else out
