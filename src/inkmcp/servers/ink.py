"""Fountain Pen Ink MCP Server

Exposes the ink catalog and the color engine as MCP tools: name and color
search, maker listing, ink details, color and color-temperature analysis,
and palette generation.
"""

import logging
import sys
from contextlib import contextmanager
from typing import Optional

from fastmcp import FastMCP
from fastmcp.exceptions import ToolError

from ..catalog.errors import CatalogLoadError, InkNotFound
from ..catalog.store import Catalog
from ..config import Settings, get_settings
from ..engine.classify import color_family, describe_color
from ..engine.convert import hex_to_rgb, rgb_to_hex, rgb_to_hsl
from ..engine.errors import InkEngineError
from ..engine.harmony import HARMONY_RULES
from ..engine.palette import build_palette
from ..engine.search import find_closest, validate_count
from ..engine.temperature import (
    analyze_temperature,
    filter_by_temperature,
    palette_temperature,
    temperature_recommendations,
)
from ..engine.themes import THEME_NAMES
from ..logging_setup import configure_logging
from ..models import InkResult

logger = logging.getLogger(__name__)

mcp = FastMCP("Fountain Pen Inks 🖋️")

_catalog: Optional[Catalog] = None


def set_catalog(catalog: Catalog) -> None:
    """Install a catalog snapshot, replacing any previous one"""
    global _catalog
    _catalog = catalog


def get_catalog() -> Catalog:
    """Return the loaded catalog, loading it from settings on first use"""
    if _catalog is None:
        settings = get_settings()
        set_catalog(Catalog.from_directory(settings.DATA_DIR, site_url=settings.SITE_URL))
    return _catalog


@contextmanager
def _tool_errors():
    # engine and lookup failures become MCP tool errors; anything else propagates
    try:
        yield
    except (InkEngineError, InkNotFound) as exc:
        logger.debug(f"Tool error: {exc}")
        raise ToolError(str(exc)) from exc


def _dump(results: list[InkResult]) -> list[dict]:
    return [r.model_dump(mode="json", exclude_none=True) for r in results]


@mcp.tool
def search_inks_by_name(query: str, max_results: int = 20) -> dict:
    """Search for fountain pen inks by name using fuzzy matching

    Args:
        query: Search term for ink name or maker
        max_results: Maximum number of results to return (default: 20)

    Returns:
        Dictionary with the query and matching inks
    """
    with _tool_errors():
        max_results = validate_count(max_results, "max_results")
        results = get_catalog().search_by_name(query, max_results)

    return {
        "query": query,
        "results_count": len(results),
        "results": _dump(results),
    }


@mcp.tool
def search_inks_by_color(
    color: str,
    max_results: int = 20,
    temperature_filter: Optional[str] = None,
) -> dict:
    """Find inks similar to a given color using RGB matching

    Args:
        color: Hex color code (e.g., "#FF5733")
        max_results: Maximum number of results to return (default: 20)
        temperature_filter: Only keep "warm", "cool" or "neutral" inks

    Returns:
        Dictionary with the target color and the closest inks
    """
    with _tool_errors():
        max_results = validate_count(max_results, "max_results")
        target = hex_to_rgb(color)
        catalog = get_catalog()
        if temperature_filter:
            # over-fetch so filtering still leaves enough candidates
            closest = find_closest(target, catalog.inks, max_results * 2)
            closest = filter_by_temperature(closest, temperature_filter)[:max_results]
        else:
            closest = find_closest(target, catalog.inks, max_results)

    results = [catalog.to_result(s.ink, s.distance) for s in closest]
    return {
        "target_color": color,
        "target_rgb": list(target),
        "temperature_filter": temperature_filter or "none",
        "results_count": len(results),
        "results": _dump(results),
    }


@mcp.tool
def get_ink_details(ink_id: str) -> dict:
    """Get complete information about a specific ink

    Args:
        ink_id: The unique identifier for the ink

    Returns:
        Dictionary with ink details, hex color, color family and description
    """
    with _tool_errors():
        catalog = get_catalog()
        ink = catalog.get_ink(ink_id)

    return {
        "ink_details": catalog.to_result(ink).model_dump(mode="json", exclude_none=True),
        "hex_color": rgb_to_hex(ink.color),
        "color_family": color_family(ink.color),
        "color_description": describe_color(ink.color),
    }


@mcp.tool
def get_inks_by_maker(maker: str, max_results: int = 50) -> dict:
    """List all inks from a specific manufacturer

    Args:
        maker: Manufacturer name (e.g., "sailor", "diamine")
        max_results: Maximum number of results to return (default: 50)

    Returns:
        Dictionary with the maker and its inks
    """
    with _tool_errors():
        max_results = validate_count(max_results, "max_results")
        results = get_catalog().inks_by_maker(maker, max_results)

    return {
        "maker": maker,
        "results_count": len(results),
        "results": _dump(results),
    }


@mcp.tool
def analyze_color(color: str, max_results: int = 5) -> dict:
    """Analyze a color and find the closest inks

    Args:
        color: Hex color code (e.g., "#FF5733")
        max_results: Number of closest inks to include (default: 5)

    Returns:
        Dictionary with the color family, description, temperature and closest inks
    """
    with _tool_errors():
        max_results = validate_count(max_results, "max_results")
        rgb = hex_to_rgb(color)
        catalog = get_catalog()
        closest = find_closest(rgb, catalog.inks, max_results)

    return {
        "hex": color,
        "rgb": list(rgb),
        "closest_inks": _dump([catalog.to_result(s.ink, s.distance) for s in closest]),
        "color_family": color_family(rgb),
        "description": describe_color(rgb),
        "temperature": analyze_temperature(rgb).model_dump(mode="json"),
    }


@mcp.tool
def analyze_color_temperature(color: str, include_recommendations: bool = False) -> dict:
    """Analyze color temperature characteristics of a given color

    Args:
        color: Hex color code (e.g., "#FF5733")
        include_recommendations: Include inks with similar and contrasting
            temperatures (default: false)

    Returns:
        Dictionary with the Kelvin estimate, category, intensity and seasons
    """
    with _tool_errors():
        rgb = hex_to_rgb(color)

    analysis = analyze_temperature(rgb)
    result = {
        "color": color,
        "rgb": list(rgb),
        "color_family": color_family(rgb),
        "temperature": analysis.model_dump(mode="json"),
    }

    if include_recommendations:
        catalog = get_catalog()
        similar, contrasting = temperature_recommendations(rgb, catalog.inks)
        result["temperature_recommendations"] = {
            "similar_temperature_inks": _dump([catalog.to_result(s.ink, s.distance) for s in similar]),
            "contrasting_temperature_inks": _dump([catalog.to_result(s.ink, s.distance) for s in contrasting]),
            "seasonal_suggestions": analysis.seasonal_match,
        }

    return result


@mcp.tool
def classify_color(color: str) -> dict:
    """Classify a color into a color family without searching the catalog

    Args:
        color: Hex color code (e.g., "#FF5733")
    """
    with _tool_errors():
        rgb = hex_to_rgb(color)

    h, s, l = rgb_to_hsl(rgb)
    return {
        "hex": rgb_to_hex(rgb),
        "rgb": list(rgb),
        "hsl": [round(h, 2), round(s, 4), round(l, 4)],
        "color_family": color_family(rgb),
        "description": describe_color(rgb),
    }


@mcp.tool
def get_color_palette(
    theme: str,
    palette_size: int = 5,
    harmony: Optional[str] = None,
) -> dict:
    """Generate a themed or harmony-based palette of inks

    Supports three modes: a predefined theme name (see list_palette_themes),
    a comma-separated list of hex colors, or a single base hex color combined
    with a harmony rule.

    Args:
        theme: Theme name, comma-separated hex colors, or a base hex color
        palette_size: Number of inks in the palette (default: 5)
        harmony: complementary, analogous, triadic or split-complementary;
            requires theme to be a single hex color

    Returns:
        Dictionary with the palette inks, in target order
    """
    with _tool_errors():
        catalog = get_catalog()
        palette = build_palette(theme, palette_size, catalog.inks, harmony=harmony)

    return {
        "theme": palette.theme,
        "harmony": palette.harmony,
        "inks": _dump([catalog.to_result(s.ink, s.distance) for s in palette.inks]),
        "description": palette.description,
        "temperature_analysis": palette_temperature(
            [s.ink.color for s in palette.inks]
        ).model_dump(mode="json"),
    }


@mcp.tool
def list_palette_themes() -> dict:
    """List the built-in palette themes and supported harmony rules"""
    return {
        "themes": list(THEME_NAMES),
        "harmony_rules": list(HARMONY_RULES),
    }


def startup(settings: Optional[Settings] = None) -> Settings:
    """Configure logging, validate settings and load the catalog

    Exits with status 1 after logging the problem when the settings are
    invalid or the catalog cannot be loaded.
    """
    settings = settings or get_settings()
    configure_logging(settings.LOG_LEVEL)

    errors = settings.validate()
    if errors:
        for error in errors:
            logger.error(error)
        sys.exit(1)

    try:
        set_catalog(Catalog.from_directory(settings.DATA_DIR, site_url=settings.SITE_URL))
    except CatalogLoadError as exc:
        logger.error(f"Error loading ink data: {exc}")
        sys.exit(1)
    return settings


def main() -> None:
    """Run the ink MCP server"""
    settings = startup()

    if settings.TRANSPORT == "http":
        mcp.run(transport="http", host=settings.HOST, port=settings.PORT)
    else:
        mcp.run()

if __name__ == "__main__":
    main()
