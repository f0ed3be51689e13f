# src/e2e/test_candidate_generator.py

import pytest

from spellrank.distance import DistanceMetric
from spellrank.generator import CandidateGenerator, CandidateSet, max_cost_for
from spellrank.models import Candidate, LocaleResources, SuggestionResult, Weights
from spellrank.DB.frequency import FrequencyTable


class FakeDictionary:
    """
    DictionaryService double:
      - words: membership + index
      - hits: token -> {suggestion: raw_cost} returned by approximate_search
      - calls: recorded approximate_search arguments
    """
    def __init__(self, words, hits=None):
        self._lex = sorted(words)
        self.hits = hits or {}
        self.calls = []

    def contains(self, text):
        return text in self._lex

    def index_of(self, text):
        return self._lex.index(text) if text in self._lex else None

    def approximate_search(self, text, max_cost, ins, sub, om, metric):
        self.calls.append((text, max_cost, ins, sub, om))
        return {SuggestionResult(w, c) for w, c in self.hits.get(text, {}).items()}


W = Weights(0.65, 0.35, 0.4, 1.7, 1.8)


def _generate(words, token, hits=None):
    d = FakeDictionary(words, hits)
    snap = LocaleResources("en", d, FrequencyTable.empty(), DistanceMetric())
    return CandidateGenerator().generate(token, W, snap), d


@pytest.mark.parametrize("token,expected", [
    ("a", 2), ("abcde", 2), ("abcdef", 3), ("abcdefghij", 3),
])
def test_max_cost_is_tighter_for_short_tokens(token, expected):
    assert max_cost_for(token) == expected


def test_empty_token_yields_nothing_and_skips_search():
    cands, d = _generate({"a", "b"}, "")
    assert len(cands) == 0
    assert d.calls == []


def test_search_receives_cost_ceiling_and_weights():
    _, d = _generate({"hello"}, "helo")
    assert d.calls == [("helo", 2, 0.4, 1.7, 1.8)]


def test_exact_match_is_injected_when_search_misses_it():
    cands, _ = _generate({"cat", "cart"}, "cat", hits={"cat": {"cart": 1.8}})
    assert "cat" in cands
    assert cands["cat"].is_exact_match
    assert not cands["cart"].is_exact_match


def test_case_variant_is_exact_match_when_token_is_not_a_word():
    cands, _ = _generate({"Cat"}, "cat", hits={"cat": {"Cat": 0.3}})
    assert len(cands) == 1
    assert cands["Cat"].is_exact_match


def test_verbatim_token_is_the_only_exact_match_beside_case_variant():
    cands, _ = _generate({"May", "may"}, "may", hits={"may": {"May": 0.3, "may": 0.0}})
    assert len(cands) == 2
    assert cands["may"].is_exact_match
    assert not cands["May"].is_exact_match


def test_verbatim_token_injected_when_search_returns_only_case_variant():
    cands, _ = _generate({"May", "may"}, "may", hits={"may": {"May": 0.3}})
    assert cands["may"].is_exact_match
    assert not cands["May"].is_exact_match


def test_split_word_candidate_when_both_halves_are_words():
    cands, _ = _generate({"cat", "dog"}, "catdog")
    cand = cands["cat dog"]
    assert cand.is_split
    assert cand.raw_cost == W.omission_cost


def test_no_split_when_a_half_is_unknown():
    cands, _ = _generate({"cat"}, "catxyz")
    assert len(cands) == 0


def test_every_split_point_is_emitted():
    cands, _ = _generate({"a", "ab", "b", "ba"}, "aba")
    assert {c.text for c in cands} == {"a ba", "ab a"}


def test_no_candidates_for_unmatched_token():
    cands, _ = _generate({"alpha", "beta"}, "xyz")
    assert list(cands) == []


def test_candidate_set_merges_instead_of_dropping():
    s = CandidateSet()
    s.add(Candidate("in to", raw_cost=1.8, is_split=True))
    merged = s.add(Candidate("in to", raw_cost=0.5))
    assert len(s) == 1
    assert merged.raw_cost == 0.5
    assert merged.is_split is False


def test_candidate_set_keeps_exact_flag_on_merge():
    s = CandidateSet()
    s.add(Candidate("cat", raw_cost=0.0, is_exact_match=True))
    s.add(Candidate("cat", raw_cost=1.0))
    assert s["cat"].is_exact_match
    assert s["cat"].raw_cost == 0.0
