"""
Hex colour parsing for cover rendering.
"""

import re
from typing import Tuple

RGB = Tuple[int, int, int]

# Dark blue used when a colour cannot be parsed
FALLBACK_RGB: RGB = (26, 26, 46)

_HEX_COLOR = re.compile(r"#?([0-9a-fA-F]{2})([0-9a-fA-F]{2})([0-9a-fA-F]{2})")


def is_hex_color(value) -> bool:
    """True for '#rrggbb' / 'rrggbb' (case-insensitive)."""
    return isinstance(value, str) and _HEX_COLOR.fullmatch(value) is not None


def resolve_rgb(hex_color) -> RGB:
    """
    Parse a 6-digit hex colour into an (r, g, b) triple.

    The leading '#' is optional. Anything else (3-digit shorthand, stray
    characters, non-strings) yields FALLBACK_RGB.

    Examples:
        resolve_rgb("#1a1a2e") -> (26, 26, 46)
        resolve_rgb("FFFFFF") -> (255, 255, 255)
        resolve_rgb("not-a-color") -> (26, 26, 46)
    """
    if not isinstance(hex_color, str):
        return FALLBACK_RGB
    match = _HEX_COLOR.fullmatch(hex_color)
    if not match:
        return FALLBACK_RGB
    return tuple(int(part, 16) for part in match.groups())


def rgb_to_unit(rgb: RGB) -> Tuple[float, float, float]:
    """Scale 0-255 channels to the 0-1 floats ReportLab expects."""
    return tuple(channel / 255.0 for channel in rgb)
