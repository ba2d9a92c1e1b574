"""Conversions between hex strings, RGB triplets and HSL triples

Triplets are always in canonical (R, G, B) order. The catalog file stores
B, G, R; `bgr_to_rgb` exists for the loader and nothing else should reorder
channels.
"""

import colorsys
import re

from .errors import InvalidFormat

RGB = tuple[int, int, int]
HSL = tuple[float, float, float]

_HEX_RE = re.compile(r"[0-9a-fA-F]{6}")


def _clamp_channel(value: float) -> int:
    return max(0, min(255, int(round(value))))


def normalize_hue(hue: float) -> float:
    """Wrap a hue in degrees into [0, 360)"""
    hue = hue % 360.0
    # float modulo can land exactly on 360.0 for tiny negative inputs
    return 0.0 if hue >= 360.0 else hue


def hex_to_rgb(hex_color: str) -> RGB:
    """Convert hex color to an RGB triplet

    Args:
        hex_color: Six hex digits with an optional leading "#" (e.g. "#FF5733")

    Returns:
        (R, G, B) tuple with values 0-255

    Raises:
        InvalidFormat: if the string is not exactly six hex digits
    """
    if not isinstance(hex_color, str):
        raise InvalidFormat(f"Invalid hex color: {hex_color!r}")
    cleaned = hex_color.strip()
    if cleaned.startswith("#"):
        cleaned = cleaned[1:]
    if not _HEX_RE.fullmatch(cleaned):
        raise InvalidFormat(
            f"Invalid color format: {hex_color}. Please use hex format like #FF5733"
        )
    return tuple(int(cleaned[i:i + 2], 16) for i in (0, 2, 4))


def rgb_to_hex(rgb: RGB) -> str:
    """Convert an RGB triplet to a lowercase "#rrggbb" string"""
    r, g, b = (_clamp_channel(c) for c in rgb)
    return f"#{r:02x}{g:02x}{b:02x}"


def bgr_to_rgb(bgr) -> RGB:
    b, g, r = bgr
    return (r, g, b)


def rgb_to_hsl(rgb: RGB) -> HSL:
    """Convert an RGB triplet to (hue degrees, saturation, lightness)

    Achromatic colors come back with hue 0 and saturation 0.
    """
    r, g, b = [c / 255.0 for c in rgb]
    # colorsys returns H, L, S with hue in 0-1
    h, l, s = colorsys.rgb_to_hls(r, g, b)
    if s == 0:
        h = 0.0
    return normalize_hue(h * 360.0), s, l


def hsl_to_rgb(hsl: HSL) -> RGB:
    """Convert (hue degrees, saturation, lightness) to a rounded RGB triplet"""
    h, s, l = hsl
    r, g, b = colorsys.hls_to_rgb(normalize_hue(h) / 360.0, l, s)
    return (_clamp_channel(r * 255), _clamp_channel(g * 255), _clamp_channel(b * 255))
