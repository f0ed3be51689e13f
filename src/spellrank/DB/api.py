# spellrank/DB/api.py
from __future__ import annotations
from typing import Optional, Protocol, Set

from ..models import SuggestionResult
from ..distance import DistanceMetric


class DictionaryService(Protocol):
    # Membership
    def contains(self, text: str) -> bool: ...
    # Approximate match, bounded by max_cost
    def approximate_search(
        self,
        text: str,
        max_cost: int,
        insertion_cost: float,
        substitution_cost: float,
        omission_cost: float,
        metric: DistanceMetric,
    ) -> Set[SuggestionResult]: ...
    # word -> frequency-table index; None means unknown (distinct from index 0)
    def index_of(self, text: str) -> Optional[int]: ...
