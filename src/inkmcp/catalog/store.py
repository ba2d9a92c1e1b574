"""Read-only in-memory catalog shared by every request handler"""

from collections.abc import Sequence
from pathlib import Path
from typing import Optional

from ..engine.convert import rgb_to_hex
from ..models import InkEntry, InkMetadata, InkResult
from .errors import InkNotFound
from .loader import load_catalog_files
from .text_search import fuzzy_search

DEFAULT_SITE_URL = "https://wilderwrites.ink"


class Catalog:
    """Immutable snapshot of the ink colors and their metadata

    Built once at startup. Lookups by id use the first entry with that id,
    so duplicate ids in the source files shadow later ones.
    """

    def __init__(
        self,
        inks: Sequence[InkEntry],
        metadata: Sequence[InkMetadata] = (),
        site_url: str = DEFAULT_SITE_URL,
    ):
        self._inks = tuple(inks)
        self._metadata = tuple(metadata)
        self.site_url = site_url.rstrip("/")

        self._ink_by_id: dict[str, InkEntry] = {}
        self._position: dict[str, int] = {}
        for index, ink in enumerate(self._inks):
            self._ink_by_id.setdefault(ink.id, ink)
            self._position.setdefault(ink.id, index)
        self._metadata_by_id: dict[str, InkMetadata] = {}
        for meta in self._metadata:
            self._metadata_by_id.setdefault(meta.id, meta)

    @classmethod
    def from_directory(cls, data_dir: Path, site_url: str = DEFAULT_SITE_URL) -> "Catalog":
        inks, metadata = load_catalog_files(data_dir)
        return cls(inks, metadata, site_url=site_url)

    @property
    def inks(self) -> tuple[InkEntry, ...]:
        return self._inks

    @property
    def metadata(self) -> tuple[InkMetadata, ...]:
        return self._metadata

    def __len__(self) -> int:
        return len(self._inks)

    def find_ink(self, ink_id: str) -> Optional[InkEntry]:
        return self._ink_by_id.get(ink_id)

    def get_ink(self, ink_id: str) -> InkEntry:
        ink = self._ink_by_id.get(ink_id)
        if ink is None:
            raise InkNotFound(ink_id)
        return ink

    def get_metadata(self, ink_id: str) -> Optional[InkMetadata]:
        return self._metadata_by_id.get(ink_id)

    def detail_url(self, ink_id: str) -> str:
        return f"{self.site_url}/ink/{ink_id}"

    def image_url(self, ink_id: str) -> str:
        return f"{self.site_url}/images/inks/{ink_id}-sq.jpg"

    def to_result(self, ink: InkEntry, distance: Optional[float] = None) -> InkResult:
        """Join an ink with its metadata and site links"""
        return InkResult(
            id=ink.id,
            display_name=ink.display_name,
            color=ink.color,
            hex=rgb_to_hex(ink.color),
            distance=distance,
            metadata=self.get_metadata(ink.id),
            detail_url=self.detail_url(ink.id),
            image_url=self.image_url(ink.id),
        )

    def _join(self, entries: Sequence[InkMetadata]) -> list[InkResult]:
        # metadata without a matching color record is skipped
        results = []
        for meta in entries:
            ink = self._ink_by_id.get(meta.id)
            if ink is not None:
                results.append(self.to_result(ink))
        return results

    def page(self, limit: int, after: Optional[str] = None) -> tuple[tuple[InkEntry, ...], Optional[str]]:
        """One page of inks in catalog order

        `after` is the id of the last ink already seen; an unknown id starts
        from the first ink. Returns the page and the id to pass as `after` for
        the next one, or None when the catalog is exhausted.
        """
        start = self._position[after] + 1 if after in self._position else 0
        chunk = self._inks[start:start + limit]
        more = start + limit < len(self._inks)
        return chunk, (chunk[-1].id if more and chunk else None)

    def search_by_name(self, query: str, limit: int) -> list[InkResult]:
        return self._join(fuzzy_search(query, self._metadata)[:limit])

    def inks_by_maker(self, maker: str, limit: int) -> list[InkResult]:
        """Inks whose maker equals `maker`, ignoring case, in metadata order"""
        maker = maker.strip().lower()
        entries = [meta for meta in self._metadata if meta.maker.lower() == maker]
        return self._join(entries[:limit])
