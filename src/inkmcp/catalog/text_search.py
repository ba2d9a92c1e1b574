"""Fuzzy name search over ink metadata"""

import difflib
from collections.abc import Iterable

from ..models import InkMetadata

MATCH_CUTOFF = 0.6
MIN_QUERY_LENGTH = 2


def _field_score(query: str, value: str) -> float:
    value = value.lower()
    if query in value:
        return 1.0
    best = difflib.SequenceMatcher(None, query, value).ratio()
    # also compare against single words so "kon peki" finds "Iroshizuku Kon-peki"
    for word in value.replace("-", " ").split():
        best = max(best, difflib.SequenceMatcher(None, query, word).ratio())
    return best


def score_entry(query: str, entry: InkMetadata) -> float:
    """Best match score of `query` against the entry's name and maker fields"""
    query = query.strip().lower()
    return max(
        _field_score(query, entry.full_name),
        _field_score(query, entry.short_name),
        _field_score(query, entry.maker),
    )


def fuzzy_search(
    query: str,
    entries: Iterable[InkMetadata],
    cutoff: float = MATCH_CUTOFF,
) -> list[InkMetadata]:
    """Search metadata entries by name or maker

    Args:
        query: Free-text search term
        entries: Metadata entries in catalog order
        cutoff: Minimum score (0-1) for an entry to match

    Returns:
        Matching entries, best match first; equal scores keep catalog order
    """
    if len(query.strip()) < MIN_QUERY_LENGTH:
        return []
    scored = [(score_entry(query, entry), entry) for entry in entries]
    matches = [pair for pair in scored if pair[0] >= cutoff]
    matches.sort(key=lambda pair: pair[0], reverse=True)
    return [entry for _, entry in matches]
