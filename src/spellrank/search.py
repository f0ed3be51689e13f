from __future__ import annotations
from typing import List

from .config import TOP_K
from .generator import CandidateGenerator, max_cost_for
from .models import Candidate, LocaleResources, Weights
from .ranker import rank, sort_candidates
from .scoring import ScoringEngine

_generator = CandidateGenerator()


def scored_candidates(token: str, resources: LocaleResources, weights: Weights) -> List[Candidate]:
    """Generate and score every candidate for `token`, best first."""
    cands = _generator.generate(token, weights, resources)
    if not len(cands):
        return []
    ScoringEngine(resources).score_all(cands, max_cost_for(token), weights)
    return sort_candidates(cands)


def suggest(token: str, resources: LocaleResources, weights: Weights, limit: int = TOP_K) -> List[str]:
    """
    /* ~~~ token -> candidates -> composite scores -> top `limit` texts ~~~ */
    Pure in-memory pass: no I/O, no errors for empty or unknown input.
    """
    if not token or limit <= 0:
        return []
    cands = _generator.generate(token, weights, resources)
    ScoringEngine(resources).score_all(cands, max_cost_for(token), weights)
    return rank(cands, limit)
