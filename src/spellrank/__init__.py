"""
Suggestion Ranking Engine

This package ranks candidate corrections for a mistyped token, for use inside
an input-method / spell-checking pipeline. A dictionary supplies cost-annotated
approximate matches; the engine blends normalized edit cost with corpus
frequency, adds two-word split suggestions, and returns a stable top-N list.
The weighting constants can be replaced at runtime through a parameter channel.

The package is organised as:
- Candidate generation (approximate matches, exact-match injection, split words)
- Composite scoring and ranking
- Runtime parameter channel
- Per-locale resources (dictionary, frequency table, distance metric)

Example Usage:
    from spellrank import Engine

    engine = Engine(resource_root="resources")
    session = engine.create_session("en")

    print(session.get_suggestions("helo", 5))
    engine.apply_parameters([0.65, 0.35, 1.0, 1.0, 1.0])  # -> "valid"
"""

# src/spellrank/__init__.py
from .engine import Engine, Session  # re-export
from .models import Candidate, RankingRequest, RankingResponse, Weights
from .parameters import ParameterChannel, UpdateResult

__version__ = "1.0.0"
__all__ = [
    "Engine", "Session", "Candidate", "RankingRequest", "RankingResponse",
    "Weights", "ParameterChannel", "UpdateResult",
]
