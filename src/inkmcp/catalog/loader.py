"""Load and validate the two catalog files

`ink-colors.json` holds one record per scanned ink with its color stored in
B, G, R order. `search.json` holds maker/name/scan-date metadata keyed by the
same ink id. Records are validated with pydantic and the colors are reordered
to RGB here, once; nothing downstream touches channel order again.
"""

import json
import logging
from pathlib import Path
from typing import Annotated

from pydantic import BaseModel, Field, TypeAdapter, ValidationError

from ..engine.convert import bgr_to_rgb
from ..models import InkEntry, InkMetadata
from .errors import CatalogLoadError

logger = logging.getLogger(__name__)

INK_COLORS_FILE = "ink-colors.json"
SEARCH_FILE = "search.json"

_Channel = Annotated[int, Field(ge=0, le=255)]


class RawInkColor(BaseModel):
    ink_id: str
    fullname: str
    rgb: tuple[_Channel, _Channel, _Channel]  # B, G, R on disk


class RawSearchEntry(BaseModel):
    ink_id: str
    name: str
    scanned: str
    fullname: str
    maker: str


_ink_colors_adapter = TypeAdapter(list[RawInkColor])
_search_adapter = TypeAdapter(list[RawSearchEntry])


def _read_json(path: Path):
    try:
        with open(path, encoding="utf-8") as fh:
            return json.load(fh)
    except FileNotFoundError as exc:
        raise CatalogLoadError(f"Catalog file not found: {path}") from exc
    except (OSError, json.JSONDecodeError) as exc:
        raise CatalogLoadError(f"Cannot read catalog file {path}: {exc}") from exc


def _validate(adapter: TypeAdapter, data, path: Path) -> list:
    try:
        return adapter.validate_python(data)
    except ValidationError as exc:
        errors = exc.errors()
        first = errors[0]
        location = ".".join(str(part) for part in first["loc"])
        raise CatalogLoadError(
            f"Malformed catalog file {path}: {len(errors)} error(s), "
            f"first at [{location}]: {first['msg']}"
        ) from exc


def load_ink_colors(path: Path) -> list[InkEntry]:
    """Load ink colors, converting stored BGR to RGB"""
    records = _validate(_ink_colors_adapter, _read_json(path), path)
    return [
        InkEntry(id=rec.ink_id, display_name=rec.fullname, color=bgr_to_rgb(rec.rgb))
        for rec in records
    ]


def load_search_metadata(path: Path) -> list[InkMetadata]:
    records = _validate(_search_adapter, _read_json(path), path)
    return [
        InkMetadata(
            id=rec.ink_id,
            maker=rec.maker,
            short_name=rec.name,
            full_name=rec.fullname,
            scan_date=rec.scanned,
        )
        for rec in records
    ]


def load_catalog_files(data_dir: Path) -> tuple[list[InkEntry], list[InkMetadata]]:
    """Load both catalog files from a directory

    Raises:
        CatalogLoadError: if either file is missing or malformed
    """
    data_dir = Path(data_dir)
    inks = load_ink_colors(data_dir / INK_COLORS_FILE)
    metadata = load_search_metadata(data_dir / SEARCH_FILE)
    logger.info(
        f"Loaded {len(inks)} inks and {len(metadata)} search entries from {data_dir}"
    )
    return inks, metadata
