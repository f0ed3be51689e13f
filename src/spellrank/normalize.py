from __future__ import annotations
import unicodedata
from typing import Iterator


def normalize_word(text: str) -> str:
    """
    Normalize a word-list entry or a typed token for storage and lookup:
      * Unicode NFC, so composed and decomposed accents hit the same entry
      * surrounding whitespace trimmed
    Case is preserved; the dictionary is case-sensitive.
    """
    return unicodedata.normalize("NFC", text).strip()


def fold(text: str) -> str:
    """Case-insensitive comparison key."""
    return unicodedata.normalize("NFC", text).casefold()


def split_pairs(token: str) -> Iterator[tuple[str, str]]:
    """Yield (prefix, suffix) for every split point 1..len(token)-1."""
    for i in range(1, len(token)):
        yield token[:i], token[i:]
