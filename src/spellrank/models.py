# src/spellrank/models.py
"""
Data models for the suggestion ranking engine.

This module defines the small containers that flow through one ranking pass:

- Weights: the five runtime tunables, always replaced as a unit.
- SuggestionResult: one raw hit returned by the dictionary's approximate search.
- Candidate: a scored suggestion living only for the duration of a request.
- RankingRequest / RankingResponse: the host-facing request/response pair.
- LocaleResources: the immutable per-locale snapshot (dictionary + frequencies + metric).

These classes carry no ranking logic; generation, scoring and sorting live in
generator.py, scoring.py and ranker.py.
"""

from __future__ import annotations
from dataclasses import dataclass, field
from numbers import Real
from typing import Any, List, TYPE_CHECKING

from . import config as CFG
from .errors import InvalidParameterUpdate

if TYPE_CHECKING:  # pragma: no cover
    from .DB.api import DictionaryService
    from .DB.frequency import FrequencyTable
    from .distance import DistanceMetric


@dataclass(frozen=True, slots=True)  # frozen: a Weights object is never mutated, only swapped
class Weights:
    """
    The five weighting constants of the composite score and the search costs.

    Attributes
    ----------
    alpha : float
        Weight of the normalized edit-cost term.
    beta : float
        Weight of the frequency term.
    insertion_cost : float
        Cost multiplier for an extra character in the typed token.
    substitution_cost : float
        Cost multiplier for a confused character (scaled by the metric).
    omission_cost : float
        Flat cost for a character missing from the typed token. Also the raw
        cost of a split-word candidate.
    """
    alpha: float = CFG.DEFAULT_ALPHA
    beta: float = CFG.DEFAULT_BETA
    insertion_cost: float = CFG.DEFAULT_INSERTION_COST
    substitution_cost: float = CFG.DEFAULT_SUBSTITUTION_COST
    omission_cost: float = CFG.DEFAULT_OMISSION_COST

    @classmethod
    def from_sequence(cls, values: Any) -> "Weights":
        """
        Build Weights from [alpha, beta, insertion, substitution, omission].
        Raises InvalidParameterUpdate unless exactly five real numbers are given.
        No range check: negative or zero values are accepted as-is.
        """
        if values is None or isinstance(values, (str, bytes)):
            raise InvalidParameterUpdate(f"expected {CFG.WEIGHT_COUNT} values, got {values!r}")
        try:
            items = list(values)
        except TypeError:
            raise InvalidParameterUpdate(f"expected a sequence, got {type(values).__name__}")
        if len(items) != CFG.WEIGHT_COUNT:
            raise InvalidParameterUpdate(f"expected {CFG.WEIGHT_COUNT} values, got {len(items)}")
        if not all(isinstance(v, Real) and not isinstance(v, bool) for v in items):
            raise InvalidParameterUpdate(f"non-numeric weight in {items!r}")
        return cls(*(float(v) for v in items))

    def as_list(self) -> List[float]:
        return [self.alpha, self.beta, self.insertion_cost, self.substitution_cost, self.omission_cost]


@dataclass(frozen=True, slots=True)
class SuggestionResult:
    """One approximate-search hit: the dictionary word and its edit cost."""
    suggestion: str
    raw_cost: float


@dataclass(slots=True)
class Candidate:
    """
    A suggestion being ranked within a single request.

    Attributes
    ----------
    text : str
        Surface text; the key of a candidate set. Split candidates contain one space.
    raw_cost : float
        Edit cost from the dictionary search, the omission weight for a split,
        or the sentinel cost for an exact match.
    frequency : float
        Resolved by the scoring engine; neutral until scored.
    composite_score : float
        Lower is better. Computed by the scoring engine, never supplied.
    is_exact_match : bool
        The typed token itself is a dictionary word.
    is_split : bool
        Two-token candidate formed by splitting the typed token.
    """
    text: str
    raw_cost: float
    frequency: float = CFG.NEUTRAL_FREQUENCY
    composite_score: float = 0.0
    is_exact_match: bool = False
    is_split: bool = False

    def merge(self, other: "Candidate") -> None:
        """Reconcile a second candidate with the same text into this one."""
        self.is_exact_match = self.is_exact_match or other.is_exact_match
        self.raw_cost = min(self.raw_cost, other.raw_cost)
        # a single-token origin lifts the two-word penalty
        self.is_split = self.is_split and other.is_split


@dataclass(frozen=True, slots=True)
class RankingRequest:
    token: str
    suggestion_limit: int = CFG.TOP_K


@dataclass(frozen=True, slots=True)
class RankingResponse:
    suggestions: List[str] = field(default_factory=list)


@dataclass(frozen=True, slots=True)
class LocaleResources:
    """
    Immutable snapshot of everything a ranking pass reads for one locale.
    Replaced wholesale on a locale change, so a request never sees a
    dictionary paired with another locale's frequency table.
    """
    locale: str
    dictionary: "DictionaryService"
    frequencies: "FrequencyTable"
    metric: "DistanceMetric"

    def frequency_of(self, text: str) -> float:
        return self.frequencies.get(self.dictionary.index_of(text))
