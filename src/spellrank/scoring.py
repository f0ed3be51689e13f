from __future__ import annotations
from typing import Iterable

from . import config as CFG
from .models import Candidate, LocaleResources, Weights


class ScoringEngine:
    """
    Composite score, lower is better:

        exact match  -> EXACT_MATCH_SCORE (-2); the ranker also orders it first,
                        since a large beta * frequency can go below -2
        otherwise    -> alpha * (raw_cost / max_cost) - beta * frequency
        split word   -> formula above with the mean of both halves' frequencies,
                        multiplied by SPLIT_PENALTY (1.5)

    Frequencies resolve through the snapshot's dictionary index and frequency
    table; anything unresolvable reads as NEUTRAL_FREQUENCY.
    """

    def __init__(self, resources: LocaleResources) -> None:
        self.resources = resources

    def frequency(self, cand: Candidate) -> float:
        if cand.is_split:
            head, _, tail = cand.text.partition(" ")
            return (self.resources.frequency_of(head) + self.resources.frequency_of(tail)) / 2
        return self.resources.frequency_of(cand.text)

    def score(self, cand: Candidate, max_cost: int, weights: Weights) -> float:
        cand.frequency = self.frequency(cand)
        if cand.is_exact_match:
            return CFG.EXACT_MATCH_SCORE
        value = weights.alpha * (cand.raw_cost / max_cost) - weights.beta * cand.frequency
        if cand.is_split:
            value *= CFG.SPLIT_PENALTY
        return value

    def score_all(self, candidates: Iterable[Candidate], max_cost: int, weights: Weights) -> None:
        for cand in candidates:
            cand.composite_score = self.score(cand, max_cost, weights)
