"""
Pluggable confusion models used by the dictionary's approximate search.

A metric only answers "how alike are these two characters" in [0, 1]; the
search multiplies the answer by the substitution or insertion weight. The
omission weight is flat and does not consult the metric.

The chord metrics model six-dot braille entry: a letter is a chord of dots,
and two letters whose chords share most dots are easy to confuse.
"""
from __future__ import annotations
from typing import Dict, FrozenSet, Optional

# smallest cost of a chord-level edit, so identical neighbours still cost something
MIN_CHORD_DISTANCE = 1.0 / 6.0


class DistanceMetric:
    """Damerau-style uniform metric: every differing character costs 1."""

    name = "damerau"

    def substitution(self, typed: str, intended: str) -> float:
        return 0.0 if typed == intended else 1.0

    def insertion(self, typed: str, neighbour: Optional[str]) -> float:
        return 1.0

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r})"


def _cell(*dots: int) -> FrozenSet[int]:
    return frozenset(dots)


# Standard six-dot braille cells for the basic latin letters
_LATIN_CELLS: Dict[str, FrozenSet[int]] = {
    "a": _cell(1), "b": _cell(1, 2), "c": _cell(1, 4), "d": _cell(1, 4, 5),
    "e": _cell(1, 5), "f": _cell(1, 2, 4), "g": _cell(1, 2, 4, 5), "h": _cell(1, 2, 5),
    "i": _cell(2, 4), "j": _cell(2, 4, 5), "k": _cell(1, 3), "l": _cell(1, 2, 3),
    "m": _cell(1, 3, 4), "n": _cell(1, 3, 4, 5), "o": _cell(1, 3, 5), "p": _cell(1, 2, 3, 4),
    "q": _cell(1, 2, 3, 4, 5), "r": _cell(1, 2, 3, 5), "s": _cell(2, 3, 4), "t": _cell(2, 3, 4, 5),
    "u": _cell(1, 3, 6), "v": _cell(1, 2, 3, 6), "w": _cell(2, 4, 5, 6), "x": _cell(1, 3, 4, 6),
    "y": _cell(1, 3, 4, 5, 6), "z": _cell(1, 3, 5, 6),
}

# Portuguese braille adds the accented letters
_PT_CELLS: Dict[str, FrozenSet[int]] = {
    **_LATIN_CELLS,
    "á": _cell(1, 2, 3, 5, 6), "à": _cell(1, 2, 4, 6), "â": _cell(1, 6), "ã": _cell(3, 4, 5),
    "é": _cell(1, 2, 3, 4, 5, 6), "ê": _cell(1, 2, 6), "í": _cell(3, 4),
    "ó": _cell(3, 4, 6), "ô": _cell(1, 4, 5, 6), "õ": _cell(2, 4, 6),
    "ú": _cell(2, 3, 4, 5, 6), "ç": _cell(1, 2, 3, 4, 6),
}


class ChordDistance(DistanceMetric):
    """
    Braille chord confusion: distance = differing dots / 6.
    Characters outside the chord table fall back to the uniform metric.
    """

    def __init__(self, name: str, cells: Dict[str, FrozenSet[int]]) -> None:
        self.name = name
        self._cells = cells

    def _chord(self, ch: str) -> Optional[FrozenSet[int]]:
        return self._cells.get(ch.lower())

    def chord_distance(self, a: str, b: str) -> float:
        ca, cb = self._chord(a), self._chord(b)
        if ca is None or cb is None:
            return 0.0 if a.lower() == b.lower() else 1.0
        return len(ca ^ cb) / 6.0

    def substitution(self, typed: str, intended: str) -> float:
        if typed == intended:
            return 0.0
        return max(self.chord_distance(typed, intended), MIN_CHORD_DISTANCE)

    def insertion(self, typed: str, neighbour: Optional[str]) -> float:
        # an extra chord close to its neighbour is a likely double/partial press
        if neighbour is None:
            return 1.0
        return max(self.chord_distance(typed, neighbour), MIN_CHORD_DISTANCE)


METRICS: Dict[str, DistanceMetric] = {
    "damerau": DistanceMetric(),
    "chord_en": ChordDistance("chord_en", _LATIN_CELLS),
    "chord_pt": ChordDistance("chord_pt", _PT_CELLS),
}


def get_metric(name: str) -> DistanceMetric:
    try:
        return METRICS[name]
    except KeyError:
        raise ValueError(f"Unknown distance metric: {name!r}") from None
