"""Typo-tolerant string matching shared by scoring and search."""

import re
from typing import List, Optional

from rapidfuzz.distance import Levenshtein

MIN_FUZZY_QUERY_LENGTH = 2
MAX_EDITS = 1

_WHITESPACE = re.compile(r"\s+")


def edit_distance(a: str, b: str, score_cutoff: Optional[int] = None) -> int:
    """Unit-cost Levenshtein distance; values above ``score_cutoff`` come back as cutoff + 1."""
    return Levenshtein.distance(a, b, score_cutoff=score_cutoff)


def is_fuzzy_match(target: str, query: str) -> bool:
    """
    Check whether ``query`` loosely matches ``target``.

    A case-insensitive substring hit always matches. Otherwise queries of at
    least two characters match when the whole target is within one edit of
    the whole query, so "西红士" matches "西红柿" but not "西红柿炒蛋".
    """
    lower_target = target.lower()
    lower_query = query.lower()

    if lower_query in lower_target:
        return True

    if len(lower_query) >= MIN_FUZZY_QUERY_LENGTH:
        distance = edit_distance(lower_target, lower_query, score_cutoff=MAX_EDITS)
        return distance <= MAX_EDITS

    return False


def tokenize(query: str) -> List[str]:
    """Lowercase a free-text query and split it on whitespace runs."""
    return [t for t in _WHITESPACE.split(query.lower()) if t]
