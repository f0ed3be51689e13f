from __future__ import annotations
from typing import Iterable, List

from .models import Candidate


def _sort_key(c: Candidate):
    # the exact match leads even when beta * frequency pushes a fuzzy score below the sentinel
    return (not c.is_exact_match, c.composite_score)


def sort_candidates(candidates: Iterable[Candidate]) -> List[Candidate]:
    """Exact match first, then ascending composite score; equal scores keep no particular order."""
    return sorted(candidates, key=_sort_key)


def rank(candidates: Iterable[Candidate], limit: int) -> List[str]:
    """Texts of the best `limit` candidates, best first."""
    if limit <= 0:
        return []
    return [c.text for c in sort_candidates(candidates)[:limit]]
