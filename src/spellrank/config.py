from __future__ import annotations
import os
from pathlib import Path

# project root: the directory holding pyproject.toml
PROJECT_ROOT = Path(__file__).resolve().parents[2]

# where per-locale resources live (override with SPELLRANK_RESOURCES)
RESOURCE_ROOT: Path = Path(os.environ.get("SPELLRANK_RESOURCES", PROJECT_ROOT / "resources"))

# Progress logging (set SPELLRANK_VERBOSE=1 to enable)
VERBOSE: bool = os.environ.get("SPELLRANK_VERBOSE") == "1"

TOP_K: int = 5

# /* ~~~ default weights, pilot-derived: [alpha, beta, insertion, substitution, omission] ~~~ */
DEFAULT_ALPHA: float = 0.6484113
DEFAULT_BETA: float = 0.35158873
DEFAULT_INSERTION_COST: float = 0.41078573
DEFAULT_SUBSTITUTION_COST: float = 1.6959325
DEFAULT_OMISSION_COST: float = 1.8156104
WEIGHT_COUNT: int = 5

# Cost ceiling for the approximate search, by token length
SHORT_TOKEN_LENGTH: int = 5
SHORT_MAX_COST: int = 2
LONG_MAX_COST: int = 3

# Scoring constants
EXACT_MATCH_SCORE: float = -2.0
EXACT_MATCH_RAW_COST: float = 0.0
SPLIT_PENALTY: float = 1.5
NEUTRAL_FREQUENCY: float = 0.0

# /* ~~~ locale tag -> (word list, frequency table, default metric) ~~~ */
LOCALES: dict[str, tuple[str, str, str]] = {
    "en": ("en.words", "en.freq", "chord_en"),
    "pt_PT": ("pt_PT.words", "pt_PT.freq", "chord_pt"),
}

# Acknowledgment tokens of the parameter channel
ACK_VALID: str = "valid"
ACK_INVALID: str = "invalid"
