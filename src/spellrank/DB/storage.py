from __future__ import annotations
import logging
import os
import struct
import sys
from array import array
from typing import Dict, Iterable, Tuple

from ..errors import ResourceCorrupt
from ..normalize import normalize_word
from .dictionary import WordDictionary
from .frequency import FrequencyTable

log = logging.getLogger(__name__)

# Frequency file format:
#   0..3  : b"FRQ1"
#   4..7  : N (uint32) = number of entries
#   Body  : N * float32, little-endian, indexed by dictionary word index
_MAGIC = b"FRQ1"
_U32 = struct.Struct("<I")
_HEADER = len(_MAGIC) + _U32.size


def _atomic_write(path: str, data: bytes) -> None:
    tmp = f"{path}.tmp"
    os.makedirs(os.path.dirname(os.path.abspath(path)), exist_ok=True)
    with open(tmp, "wb") as f:
        f.write(data)
    os.replace(tmp, path)


# ---- word list ----

def read_word_list(path: str) -> list[str]:
    """One word per line, UTF-8; blank lines and '#' comments are skipped."""
    try:
        with open(path, encoding="utf-8") as f:
            lines = f.read().splitlines()
    except FileNotFoundError:
        raise ResourceCorrupt(path, "word list not found") from None
    except UnicodeDecodeError as e:
        raise ResourceCorrupt(path, f"not UTF-8 ({e.reason})") from None
    out = []
    for line in lines:
        w = normalize_word(line)
        if w and not w.startswith("#"):
            out.append(w)
    return out


def write_word_list(words: Iterable[str], path: str) -> None:
    body = "\n".join(sorted({normalize_word(w) for w in words} - {""}))
    _atomic_write(path, (body + "\n").encode("utf-8"))


def load_dictionary(path: str) -> WordDictionary:
    return WordDictionary(read_word_list(path))


# ---- frequency table ----

def write_frequencies(values: Iterable[float], path: str) -> None:
    body = array("f", (float(v) for v in values))
    if body.itemsize != 4:  # pragma: no cover
        raise RuntimeError("float32 array type unavailable on this platform")
    if sys.byteorder != "little":  # pragma: no cover
        body.byteswap()
    _atomic_write(path, _MAGIC + _U32.pack(len(body)) + body.tobytes())


def read_frequencies(path: str) -> FrequencyTable:
    try:
        with open(path, "rb") as f:
            blob = f.read()
    except FileNotFoundError:
        raise ResourceCorrupt(path, "frequency table not found") from None

    if len(blob) < _HEADER or blob[:4] != _MAGIC:
        raise ResourceCorrupt(path, "bad magic, not an FRQ1 frequency table")
    (n,) = _U32.unpack_from(blob, 4)
    body = blob[_HEADER:]
    if len(body) != n * 4:
        raise ResourceCorrupt(path, f"expected {n} float32 entries, found {len(body)} bytes")

    values = array("f")
    values.frombytes(body)
    if sys.byteorder != "little":  # pragma: no cover
        values.byteswap()
    return FrequencyTable(values)


# ---- builder ----

def read_word_counts(path: str) -> Dict[str, int]:
    """UTF-8 'word<TAB>count' lines (a missing count means 1)."""
    counts: Dict[str, int] = {}
    with open(path, encoding="utf-8") as f:
        for line_no, line in enumerate(f, start=1):
            line = line.strip()
            if not line or line.startswith("#"):
                continue
            word, _, raw = line.partition("\t")
            word = normalize_word(word)
            try:
                n = int(raw) if raw.strip() else 1
            except ValueError:
                raise ValueError(f"{path}:{line_no}: bad count {raw!r}") from None
            counts[word] = counts.get(word, 0) + n
    return counts


def build_resources(counts: Dict[str, int], words_path: str, freq_path: str) -> Tuple[int, float]:
    """
    Write a word list and its aligned FRQ1 table.
    Frequencies are count / max_count, so they fall in [0, 1].
    Returns (number of words, max count).
    """
    lex = sorted({w for w in counts if w})
    top = max((counts[w] for w in lex), default=0)
    scale = float(top) if top > 0 else 1.0
    write_word_list(lex, words_path)
    write_frequencies((counts[w] / scale for w in lex), freq_path)
    log.info("Wrote %d words to %s and %s", len(lex), words_path, freq_path)
    return len(lex), float(top)
