import json

import pytest

from inkmcp.catalog.errors import CatalogLoadError, InkNotFound
from inkmcp.catalog.loader import load_catalog_files, load_ink_colors
from inkmcp.catalog.text_search import fuzzy_search


def write_catalog(directory, colors, search):
    (directory / "ink-colors.json").write_text(json.dumps(colors), encoding="utf-8")
    (directory / "search.json").write_text(json.dumps(search), encoding="utf-8")


SEARCH_ENTRY = {
    "ink_id": "x",
    "name": "Ex",
    "scanned": "2024-01-01",
    "fullname": "Maker Ex",
    "maker": "Maker",
}


def test_loader_reorders_bgr_to_rgb(tmp_path):
    write_catalog(tmp_path, [{"ink_id": "x", "fullname": "Maker Ex", "rgb": [51, 87, 255]}], [SEARCH_ENTRY])
    inks, metadata = load_catalog_files(tmp_path)
    assert inks[0].color == (255, 87, 51)
    assert inks[0].display_name == "Maker Ex"
    assert metadata[0].short_name == "Ex"
    assert metadata[0].scan_date == "2024-01-01"


@pytest.mark.parametrize("colors", [
    {"ink_id": "x"},
    [{"ink_id": "x", "fullname": "Ex"}],
    [{"ink_id": "x", "fullname": "Ex", "rgb": [0, 0, 300]}],
    [{"ink_id": "x", "fullname": "Ex", "rgb": [0, 0]}],
])
def test_loader_rejects_malformed_colors(tmp_path, colors):
    write_catalog(tmp_path, colors, [SEARCH_ENTRY])
    with pytest.raises(CatalogLoadError):
        load_catalog_files(tmp_path)


def test_loader_rejects_malformed_metadata(tmp_path):
    broken = dict(SEARCH_ENTRY)
    del broken["maker"]
    write_catalog(tmp_path, [], [broken])
    with pytest.raises(CatalogLoadError, match="search.json"):
        load_catalog_files(tmp_path)


def test_loader_missing_file(tmp_path):
    with pytest.raises(CatalogLoadError, match="not found"):
        load_ink_colors(tmp_path / "ink-colors.json")


def test_loader_invalid_json(tmp_path):
    path = tmp_path / "ink-colors.json"
    path.write_text("[{", encoding="utf-8")
    with pytest.raises(CatalogLoadError):
        load_ink_colors(path)


def test_packaged_catalog_loads(packaged_catalog):
    assert len(packaged_catalog) == 32
    assert packaged_catalog.get_ink("iroshizuku-kon-peki").color == (0, 120, 190)
    assert packaged_catalog.get_metadata("iroshizuku-kon-peki").maker == "Pilot"


def test_duplicate_ids_resolve_to_first_entry(small_catalog):
    assert small_catalog.get_ink("a").display_name == "Alpha Red"


def test_missing_ink_raises(small_catalog):
    with pytest.raises(InkNotFound):
        small_catalog.get_ink("zzz")
    assert small_catalog.find_ink("zzz") is None


def test_result_links_and_metadata_join(small_catalog):
    result = small_catalog.to_result(small_catalog.get_ink("a"), 1.5)
    assert result.hex == "#ff0000"
    assert result.distance == 1.5
    assert result.metadata.maker == "Acme"
    assert result.detail_url == "https://example.test/ink/a"
    assert result.image_url == "https://example.test/images/inks/a-sq.jpg"


def test_result_without_metadata(small_catalog):
    result = small_catalog.to_result(small_catalog.get_ink("c"))
    assert result.metadata is None
    assert result.distance is None


def test_inks_by_maker_ignores_case_and_skips_orphans(small_catalog):
    results = small_catalog.inks_by_maker("acme", 10)
    assert [r.id for r in results] == ["a", "b"]
    assert [r.id for r in small_catalog.inks_by_maker("ACME", 1)] == ["a"]
    assert small_catalog.inks_by_maker("nobody", 10) == []


def test_fuzzy_search_exact_and_typo(packaged_catalog):
    assert fuzzy_search("oxblood", packaged_catalog.metadata)[0].id == "diamine-oxblood"
    assert fuzzy_search("oxbood", packaged_catalog.metadata)[0].id == "diamine-oxblood"


def test_fuzzy_search_by_maker(packaged_catalog):
    results = packaged_catalog.search_by_name("sailor", 20)
    assert len(results) == 3
    assert all(r.metadata.maker == "Sailor" for r in results)


def test_fuzzy_search_short_or_unmatched_query(packaged_catalog):
    assert fuzzy_search("a", packaged_catalog.metadata) == []
    assert fuzzy_search("zzqqxxjj", packaged_catalog.metadata) == []


def test_page_walks_catalog_order(small_catalog):
    inks, cursor = small_catalog.page(2)
    assert [ink.display_name for ink in inks] == ["Alpha Red", "Beta Blue"]
    assert cursor == "b"

    inks, cursor = small_catalog.page(2, after=cursor)
    assert [ink.display_name for ink in inks] == ["Shadowed Duplicate", "Gamma Black"]
    assert cursor is None


def test_page_unknown_cursor_starts_from_first_ink(small_catalog):
    inks, cursor = small_catalog.page(1, after="missing")
    assert inks[0].display_name == "Alpha Red"
    assert cursor == "a"
