"""Heuristic color-family labels and short descriptions.

The thresholds are tuned against the scanned ink catalog and are kept as-is:
a spread under 22 is gray, a channel must lead the others by more than 20 to
count as a primary, secondaries need two channels over 150 with the third
under 100, and the fallback branches split on a 30-unit margin.
"""

from .convert import RGB

GRAY_SPREAD = 22
PRIMARY_MARGIN = 20
SECONDARY_HIGH = 150
SECONDARY_LOW = 100
BLEND_MARGIN = 30


def color_family(rgb: RGB) -> str:
    """Classify an RGB color into a family such as "red", "teal" or "gray"

    Rules are checked in priority order; the first match wins.
    """
    r, g, b = rgb
    high = max(r, g, b)
    low = min(r, g, b)

    if high - low < GRAY_SPREAD:
        return "gray"

    if r == high and r > g + PRIMARY_MARGIN and r > b + PRIMARY_MARGIN:
        return "red"
    if g == high and g > r + PRIMARY_MARGIN and g > b + PRIMARY_MARGIN:
        return "green"
    if b == high and b > r + PRIMARY_MARGIN and b > g + PRIMARY_MARGIN:
        return "blue"

    if r > SECONDARY_HIGH and g > SECONDARY_HIGH and b < SECONDARY_LOW:
        return "yellow"
    if r > SECONDARY_HIGH and b > SECONDARY_HIGH and g < SECONDARY_LOW:
        return "magenta"
    if g > SECONDARY_HIGH and b > SECONDARY_HIGH and r < SECONDARY_LOW:
        return "cyan"

    if r > g and r > b:
        if g > b + BLEND_MARGIN:
            return "orange"
        if b > g + BLEND_MARGIN:
            return "purple"
        return "red"

    if g > r and g > b:
        if b > r + BLEND_MARGIN:
            return "teal"
        if r > b + BLEND_MARGIN:
            return "yellow-green"
        return "green"

    if b > r and b > g:
        if r > g + BLEND_MARGIN:
            return "purple"
        if g > r + BLEND_MARGIN:
            return "blue-green"
        return "blue"

    return "mixed"


def describe_color(rgb: RGB) -> str:
    """Describe a color as e.g. "dark vibrant red" or "light muted gray"

    Args:
        rgb: RGB triplet

    Returns:
        Brightness and saturation qualifiers followed by the color family
    """
    r, g, b = rgb
    brightness = (r + g + b) / 3
    spread = max(r, g, b) - min(r, g, b)

    parts = []
    if brightness < 85:
        parts.append("dark")
    elif brightness > 170:
        parts.append("light")

    if spread < 30:
        parts.append("muted")
    elif spread > 150:
        parts.append("vibrant")

    parts.append(color_family(rgb))
    return " ".join(parts)
