from __future__ import annotations
import logging
from typing import Dict, Iterator

from . import config as CFG
from .models import Candidate, LocaleResources, Weights
from .normalize import fold, split_pairs

log = logging.getLogger(__name__)


def max_cost_for(token: str) -> int:
    """Short tokens get a tighter edit budget: one unit below long ones."""
    return CFG.SHORT_MAX_COST if len(token) <= CFG.SHORT_TOKEN_LENGTH else CFG.LONG_MAX_COST


class CandidateSet:
    """
    Candidates of one ranking pass, keyed by surface text.
    Adding a text that is already present merges the two instead of replacing.
    """

    def __init__(self) -> None:
        self._by_text: Dict[str, Candidate] = {}

    def add(self, cand: Candidate) -> Candidate:
        cur = self._by_text.get(cand.text)
        if cur is None:
            self._by_text[cand.text] = cand
            return cand
        cur.merge(cand)
        return cur

    def __contains__(self, text: str) -> bool:
        return text in self._by_text

    def __getitem__(self, text: str) -> Candidate:
        return self._by_text[text]

    def __iter__(self) -> Iterator[Candidate]:
        return iter(self._by_text.values())

    def __len__(self) -> int:
        return len(self._by_text)


class CandidateGenerator:
    """
    Builds the raw candidate set for a token:
      1) approximate matches from the dictionary, within max_cost
      2) the token itself when it is a dictionary word (exact-match sentinel);
         a case variant is the exact match only when the token is not a word
      3) every two-word split whose halves are both dictionary words
    Scoring is left to ScoringEngine.
    """

    def generate(self, token: str, weights: Weights, resources: LocaleResources) -> CandidateSet:
        out = CandidateSet()
        if not token:
            return out

        dictionary = resources.dictionary
        max_cost = max_cost_for(token)
        key = fold(token)
        verbatim = dictionary.contains(token)

        # 1) approximate search
        exists = False
        for hit in dictionary.approximate_search(
            token, max_cost,
            weights.insertion_cost, weights.substitution_cost, weights.omission_cost,
            resources.metric,
        ):
            exact = hit.suggestion == token if verbatim else fold(hit.suggestion) == key
            exists = exists or exact
            out.add(Candidate(text=hit.suggestion, raw_cost=hit.raw_cost, is_exact_match=exact))

        # 2) exact-match injection
        if verbatim and not exists:
            out.add(Candidate(text=token, raw_cost=CFG.EXACT_MATCH_RAW_COST, is_exact_match=True))

        # 3) split words, all qualifying split points
        for prefix, suffix in split_pairs(token):
            if dictionary.contains(prefix) and dictionary.contains(suffix):
                out.add(Candidate(text=f"{prefix} {suffix}", raw_cost=weights.omission_cost, is_split=True))

        log.debug("generate(%r): max_cost=%d candidates=%d", token, max_cost, len(out))
        return out
