"""Subsequence fuzzy scoring and stable ranking for palette labels."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Generic, Iterable, Optional, TypeVar

T = TypeVar("T")


@dataclass(frozen=True, slots=True)
class FuzzyHit(Generic[T]):
    item: T
    score: int


def score(query: str, text: str) -> Optional[int]:
    """Score ``query`` as a case-insensitive subsequence of ``text``.

    Returns ``None`` when ``query`` is not a subsequence. Each matched
    character earns ``10 + streak * 5``, each skipped character costs 1, and
    an earlier first match earns up to 50 extra points.
    """

    if not query:
        return 0
    needle = query.lower()
    haystack = text.lower()

    matched = 0
    streak = 0
    total = 0
    first_match = -1
    for idx, ch in enumerate(haystack):
        if matched >= len(needle):
            break
        if ch == needle[matched]:
            if first_match < 0:
                first_match = idx
            matched += 1
            streak += 1
            total += 10 + streak * 5
        else:
            streak = 0
            total -= 1

    if matched < len(needle):
        return None
    return total + max(0, 50 - first_match)


def find_ranked(
    query: str,
    items: Iterable[T],
    label_of: Callable[[T], str],
    limit: int = 20,
) -> list[FuzzyHit[T]]:
    hits: list[FuzzyHit[T]] = []
    for item in items:
        value = score(query, label_of(item))
        if value is not None:
            hits.append(FuzzyHit(item=item, score=value))
    # list.sort is stable, so equal scores keep input order.
    hits.sort(key=lambda hit: -hit.score)
    return hits[: max(0, limit)]


__all__ = ["FuzzyHit", "find_ranked", "score"]
