"""Helpers for the caller-owned anti-repetition buffer.

The engine never bounds exclusion lists itself; callers keep the names of
recently shown dishes and pass them back on the next request.
"""

from typing import Iterable, List

DEFAULT_SEEN_LIMIT = 12


def merge_exclusions(*groups: Iterable[str]) -> List[str]:
    """Concatenate name lists, keeping the first occurrence of each name."""
    merged = []
    seen = set()
    for group in groups:
        for name in group:
            if name not in seen:
                seen.add(name)
                merged.append(name)
    return merged


def update_seen(seen: Iterable[str], new_names: Iterable[str],
                limit: int = DEFAULT_SEEN_LIMIT) -> List[str]:
    """Append newly shown names and keep only the most recent ``limit``."""
    combined = list(seen) + list(new_names)
    if limit <= 0:
        return []
    return combined[-limit:]
