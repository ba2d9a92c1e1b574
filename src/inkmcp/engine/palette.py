"""Palette building: resolve a theme request to target colors, then pick
the nearest unused ink for each target."""

from collections.abc import Sequence
from typing import Optional

from ..models import InkEntry, Palette
from .convert import RGB, hex_to_rgb, hsl_to_rgb, rgb_to_hsl
from .errors import (
    InvalidBaseColor,
    InvalidCustomPalette,
    InvalidFormat,
    UnknownTheme,
)
from .harmony import generate_harmony
from .search import find_closest, validate_count
from .themes import THEME_NAMES, THEMES

# Candidates considered per target before dedup picks the first unused one.
CANDIDATES_PER_TARGET = 5


def resolve_targets(theme: str, harmony: Optional[str] = None) -> list[RGB]:
    """Turn a theme request into an ordered list of target colors

    Resolution order:
        1. harmony given: `theme` is a single base hex color
        2. built-in theme name (case-insensitive)
        3. "#..." or comma-separated hex list
        4. otherwise UnknownTheme, listing the built-in names
    """
    if harmony:
        try:
            base = hex_to_rgb(theme)
        except InvalidFormat as exc:
            raise InvalidBaseColor(theme) from exc
        return [hsl_to_rgb(hsl) for hsl in generate_harmony(rgb_to_hsl(base), harmony)]

    builtin = THEMES.get(theme.strip().lower())
    if builtin is not None:
        return list(builtin)

    if theme.startswith("#") or "," in theme:
        targets = []
        for segment in theme.split(","):
            try:
                targets.append(hex_to_rgb(segment.strip()))
            except InvalidFormat as exc:
                raise InvalidCustomPalette(segment) from exc
        return targets

    raise UnknownTheme(theme, list(THEME_NAMES))


def build_palette(
    theme: str,
    size: int,
    inks: Sequence[InkEntry],
    harmony: Optional[str] = None,
) -> Palette:
    """Build a palette of distinct inks for a theme

    Args:
        theme: Theme name, hex list, or base hex color when `harmony` is set
        size: Maximum number of inks wanted
        inks: Catalog entries to choose from
        harmony: Optional harmony rule name

    Returns:
        Palette whose inks follow target order. It can be shorter than `size`
        when the theme has fewer targets or a target has no unused candidate.
    """
    size = validate_count(size, "palette_size")
    targets = resolve_targets(theme, harmony)

    chosen = []
    used_ids: set[str] = set()
    for target in targets[:size]:
        candidates = find_closest(target, inks, CANDIDATES_PER_TARGET, exclude=used_ids)
        if not candidates:
            continue
        pick = candidates[0]
        used_ids.add(pick.ink.id)
        chosen.append(pick)

    return Palette(theme=theme, harmony=harmony, targets=targets, inks=chosen)
