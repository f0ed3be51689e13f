from __future__ import annotations
import bisect
import logging
from typing import Dict, Iterable, List, Optional, Set

from ..distance import DistanceMetric
from ..models import SuggestionResult
from ..normalize import normalize_word

log = logging.getLogger(__name__)


class _Node:
    __slots__ = ("children", "word")

    def __init__(self) -> None:
        self.children: Dict[str, _Node] = {}
        self.word: Optional[str] = None


class WordDictionary:
    """
    In-memory DictionaryService.
    Lexicon: sorted, de-duplicated word list; a word's index is its position in it.
    Trie: same words, walked by the cost-bounded approximate search.
    """

    def __init__(self, words: Iterable[str]) -> None:
        lex = {normalize_word(w) for w in words}
        lex.discard("")
        self._term_lex: List[str] = sorted(lex)
        self._root = _Node()
        for w in self._term_lex:
            self._insert(w)
        log.info("Dictionary built: words=%d", len(self._term_lex))

    def __len__(self) -> int:
        return len(self._term_lex)

    def __contains__(self, text: str) -> bool:
        return self.contains(text)

    # ---- Build ----
    def _insert(self, word: str) -> None:
        node = self._root
        for ch in word:
            nxt = node.children.get(ch)
            if nxt is None:
                nxt = node.children[ch] = _Node()
            node = nxt
        node.word = word

    # ---- Lookup ----
    def index_of(self, text: str) -> Optional[int]:
        i = bisect.bisect_left(self._term_lex, text)
        if i < len(self._term_lex) and self._term_lex[i] == text:
            return i
        return None

    def contains(self, text: str) -> bool:
        return bool(text) and self.index_of(text) is not None

    # /* ~~~ weighted Damerau-Levenshtein over the trie, pruned at max_cost ~~~ */
    def approximate_search(
        self,
        text: str,
        max_cost: int,
        insertion_cost: float,
        substitution_cost: float,
        omission_cost: float,
        metric: DistanceMetric,
    ) -> Set[SuggestionResult]:
        """
        Return every word whose alignment cost against the typed text is <= max_cost.

        Costs are from the typist's point of view:
          - insertion: an extra character in `text` (scaled by metric.insertion)
          - omission: a word character missing from `text` (flat)
          - substitution: a confused character (scaled by metric.substitution);
            an adjacent transposition also costs one substitution weight
        """
        if not text:
            return set()

        n = len(text)
        ins = [insertion_cost * metric.insertion(text[j], _neighbour(text, j)) for j in range(n)]
        first = [0.0]
        for c in ins:
            first.append(first[-1] + c)

        # pruning is only sound when no cost can lower a running total
        prune = min(insertion_cost, substitution_cost, omission_cost) >= 0

        out: Set[SuggestionResult] = set()
        stack = [(child, ch, first, None, None) for ch, child in self._root.children.items()]
        while stack:
            node, ch, prev, prev2, prev_ch = stack.pop()
            row = [prev[0] + omission_cost]
            for j in range(1, n + 1):
                t = text[j - 1]
                sub = 0.0 if t == ch else substitution_cost * metric.substitution(t, ch)
                cost = min(prev[j] + omission_cost, row[j - 1] + ins[j - 1], prev[j - 1] + sub)
                if prev2 is not None and j > 1 and t != ch and t == prev_ch and text[j - 2] == ch:
                    cost = min(cost, prev2[j - 2] + substitution_cost)
                row.append(cost)

            if node.word is not None and row[n] <= max_cost:
                out.add(SuggestionResult(node.word, row[n]))
            if prune and min(row) > max_cost:
                continue
            for nch, child in node.children.items():
                stack.append((child, nch, row, prev, ch))
        return out


def _neighbour(text: str, j: int) -> Optional[str]:
    """The typed character an insertion at j is most likely a repeat of."""
    if j > 0:
        return text[j - 1]
    return text[1] if len(text) > 1 else None
