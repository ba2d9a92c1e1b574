"""Color harmony rules expressed as hue offsets on the color wheel"""

from .convert import HSL, normalize_hue
from .errors import UnknownHarmonyRule

# Base hue always comes first; palette building relies on that ordering.
HARMONY_OFFSETS: dict[str, tuple[float, ...]] = {
    "complementary": (0, 180),
    "analogous": (0, 30, 330),
    "triadic": (0, 120, 240),
    "split-complementary": (0, 150, 210),
}

HARMONY_RULES = tuple(HARMONY_OFFSETS)


def generate_harmony(base_hsl: HSL, rule: str) -> list[HSL]:
    """Generate the colors of a harmony rule from a base color

    Args:
        base_hsl: (hue degrees, saturation, lightness) of the base color
        rule: One of complementary, analogous, triadic, split-complementary

    Returns:
        HSL triples sharing the base saturation and lightness, base first

    Raises:
        UnknownHarmonyRule: for any other rule name
    """
    offsets = HARMONY_OFFSETS.get(rule)
    if offsets is None:
        raise UnknownHarmonyRule(rule, list(HARMONY_RULES))
    h, s, l = base_hsl
    return [(normalize_hue(h + offset), s, l) for offset in offsets]
