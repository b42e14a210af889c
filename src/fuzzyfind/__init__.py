"""
Fuzzy Finder Module

Interactive fuzzy search over a fixed word list. As the user types, every
word is scored against the pattern (case-insensitive subsequence match with
bonuses for adjacent, camelCase, post-separator and first-letter hits) and the
best 30 are returned together with the matched character positions, ready to
be highlighted.

The module is split into:
- matcher: scoring of one pattern against one word
- ranker: score every word, keep the top-k
- coordinator: debounced, cancellable, newest-wins background search
- loader / engine: reading the word list and gluing the pieces together

Example Usage:
    from fuzzyfind import Engine

    engine = Engine()
    engine.load(["/path/to/words.txt"])

    for r in engine.complete("cat"):
        print(f"{r.score}: {r.text} {r.matches}")

    coord = engine.coordinator(on_publish=lambda res: print(res.pattern, len(res.results)))
    coord.update_pattern("c")
    coord.update_pattern("ca")   # "c" is superseded and never published
"""

# src/fuzzyfind/__init__.py
from .coordinator import CoordinatorState, SearchCoordinator
from .engine import Engine
from .highlight import highlight_segments
from .loader import load_words
from .matcher import fuzzy_match, fuzzy_match_simple
from .models import (
    DEFAULT_MATCH_CONFIG,
    NO_MATCH,
    Candidate,
    MatchConfig,
    MatchOutcome,
    RankedResult,
    SearchRequest,
    SearchResults,
)
from .ranker import rank

__version__ = "1.0.0"
__all__ = [
    "Candidate",
    "CoordinatorState",
    "DEFAULT_MATCH_CONFIG",
    "Engine",
    "MatchConfig",
    "MatchOutcome",
    "NO_MATCH",
    "RankedResult",
    "SearchCoordinator",
    "SearchRequest",
    "SearchResults",
    "fuzzy_match",
    "fuzzy_match_simple",
    "highlight_segments",
    "load_words",
    "rank",
]
