"""Color temperature estimate and the analyses built on it

The Kelvin figure is a per-channel estimate, not a blackbody fit: it moves
away from a neutral 4250K in proportion to how far blue leads red, relative
to the brightest channel. Grays, black and white sit at 4250K; pure red and
pure blue land at the warm and cool ends (2562K / 5938K).
"""

from collections.abc import Iterable, Sequence

from ..models import InkEntry, PaletteTemperature, ScoredInk, TemperatureAnalysis
from .classify import color_family
from .convert import RGB
from .errors import InvalidArgument

NEUTRAL_KELVIN = 4250
MAX_DEVIATION = 2250
CHANNEL_WEIGHT = 0.75
MIN_KELVIN = 2000
MAX_KELVIN = 8000

WARM_BELOW = 3800
COOL_FROM = 5000

TEMPERATURE_CATEGORIES = ("warm", "cool", "neutral")

SIMILAR_WITHIN = 500
CONTRAST_FROM = 1500
RECOMMENDATION_COUNT = 5


def color_temperature(rgb: RGB) -> int:
    """Estimate a color's temperature in Kelvin (lower is warmer)"""
    r, g, b = rgb
    high = max(r, g, b)
    if high == 0:
        return NEUTRAL_KELVIN
    balance = (b - r) / high
    kelvin = NEUTRAL_KELVIN + MAX_DEVIATION * CHANNEL_WEIGHT * balance
    return max(MIN_KELVIN, min(MAX_KELVIN, int(round(kelvin))))


def temperature_category(kelvin: float) -> str:
    if kelvin < WARM_BELOW:
        return "warm"
    if kelvin >= COOL_FROM:
        return "cool"
    return "neutral"


def validate_category(category: str) -> str:
    if category not in TEMPERATURE_CATEGORIES:
        raise InvalidArgument(
            f'Invalid temperature filter: "{category}". Use one of: '
            f'{", ".join(TEMPERATURE_CATEGORIES)}'
        )
    return category


def _band(kelvin: float) -> str:
    if kelvin < 3200:
        return "very warm"
    if kelvin < WARM_BELOW:
        return "warm"
    if kelvin < COOL_FROM:
        return "neutral"
    if kelvin < 6000:
        return "cool"
    return "very cool"


def temperature_description(rgb: RGB) -> str:
    """Describe the temperature, e.g. "very warm red (2562K)" """
    kelvin = color_temperature(rgb)
    return f"{_band(kelvin)} {color_family(rgb)} ({kelvin}K)"


def temperature_intensity(kelvin: float) -> float:
    """Deviation from neutral scaled to 0-1"""
    return min(1.0, abs(kelvin - NEUTRAL_KELVIN) / MAX_DEVIATION)


def seasonal_matches(kelvin: float, family: str) -> list[str]:
    if kelvin < 3200:
        return ["autumn", "winter"]
    if kelvin < WARM_BELOW:
        seasons = ["autumn"]
        if family in ("yellow", "orange"):
            seasons.append("summer")
        return seasons
    if kelvin < 5200:
        return ["spring", "summer", "autumn"]
    if kelvin < 6000:
        return ["spring", "summer"]
    return ["winter", "spring"]


def complementary_temperature(kelvin: float) -> int:
    """Mirror a temperature around neutral, clamped to 2000-8000K"""
    mirrored = NEUTRAL_KELVIN - (kelvin - NEUTRAL_KELVIN)
    return int(max(MIN_KELVIN, min(MAX_KELVIN, mirrored)))


def analyze_temperature(rgb: RGB) -> TemperatureAnalysis:
    kelvin = color_temperature(rgb)
    return TemperatureAnalysis(
        kelvin=kelvin,
        category=temperature_category(kelvin),
        description=temperature_description(rgb),
        intensity=round(temperature_intensity(kelvin), 4),
        seasonal_match=seasonal_matches(kelvin, color_family(rgb)),
        complementary_temperature=complementary_temperature(kelvin),
    )


def filter_by_temperature(scored: Iterable[ScoredInk], category: str) -> list[ScoredInk]:
    category = validate_category(category)
    return [s for s in scored if temperature_category(color_temperature(s.ink.color)) == category]


def temperature_recommendations(
    target: RGB, inks: Iterable[InkEntry]
) -> tuple[list[ScoredInk], list[ScoredInk]]:
    """Find inks with a similar and with a contrasting temperature

    Returns:
        (similar, contrasting). `distance` holds the Kelvin difference.
        Similar inks are within 500K, closest first; contrasting inks are at
        least 1500K away, furthest first. Each list has at most five inks.
    """
    target_kelvin = color_temperature(target)
    diffs = [(abs(color_temperature(ink.color) - target_kelvin), ink) for ink in inks]

    similar = sorted((d for d in diffs if d[0] <= SIMILAR_WITHIN), key=lambda d: d[0])
    contrasting = sorted(
        (d for d in diffs if d[0] >= CONTRAST_FROM), key=lambda d: d[0], reverse=True
    )
    return (
        [ScoredInk(ink=ink, distance=d) for d, ink in similar[:RECOMMENDATION_COUNT]],
        [ScoredInk(ink=ink, distance=d) for d, ink in contrasting[:RECOMMENDATION_COUNT]],
    )


def palette_temperature(colors: Sequence[RGB]) -> PaletteTemperature:
    """Summarize the temperatures of a palette's ink colors

    An empty palette reports a neutral, monochromatic summary.
    """
    if not colors:
        return PaletteTemperature(
            average_temperature=NEUTRAL_KELVIN,
            temperature_range=(NEUTRAL_KELVIN, NEUTRAL_KELVIN),
            dominant_category="neutral",
            temperature_harmony="monochromatic",
        )

    temperatures = [color_temperature(rgb) for rgb in colors]
    categories = [temperature_category(k) for k in temperatures]
    low, high = min(temperatures), max(temperatures)

    # strictly-greater scan: ties go to warm, then cool, then neutral
    dominant, best = "neutral", 0
    for category in TEMPERATURE_CATEGORIES:
        count = categories.count(category)
        if count > best:
            dominant, best = category, count

    spread = high - low
    if spread < 800:
        harmony = "monochromatic"
    elif spread > 2000 and "warm" in categories and "cool" in categories:
        harmony = "complementary"
    else:
        harmony = "mixed"

    return PaletteTemperature(
        average_temperature=int(round(sum(temperatures) / len(temperatures))),
        temperature_range=(low, high),
        dominant_category=dominant,
        temperature_harmony=harmony,
    )
