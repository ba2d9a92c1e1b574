"""Euclidean RGB distance and nearest-ink ranking"""

import math
from collections.abc import Collection, Iterable

from ..models import InkEntry, ScoredInk
from .convert import RGB
from .errors import InvalidArgument


def color_distance(a: RGB, b: RGB) -> float:
    """Unweighted Euclidean distance between two RGB colors (0 to ~441.67)"""
    return math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2 + (a[2] - b[2]) ** 2)


def validate_count(value, name: str = "limit") -> int:
    """Return `value` as a positive int or raise InvalidArgument"""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
    if isinstance(value, float):
        if not math.isfinite(value) or not value.is_integer():
            raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
        value = int(value)
    if value < 1:
        raise InvalidArgument(f"{name} must be a positive integer, got {value!r}")
    return value


def find_closest(
    target: RGB,
    inks: Iterable[InkEntry],
    limit: int = 20,
    exclude: Collection[str] = (),
) -> list[ScoredInk]:
    """Rank inks by distance to a target color

    Args:
        target: RGB triplet to match
        inks: Catalog entries, in catalog order
        limit: Maximum number of results (positive integer)
        exclude: Ink ids to leave out before ranking

    Returns:
        Up to `limit` scored inks, closest first. Ties keep catalog order.
    """
    limit = validate_count(limit)
    scored = [
        (color_distance(target, ink.color), ink)
        for ink in inks
        if ink.id not in exclude
    ]
    # sort is stable, so equal distances stay in catalog order
    scored.sort(key=lambda pair: pair[0])
    return [ScoredInk(ink=ink, distance=d) for d, ink in scored[:limit]]
