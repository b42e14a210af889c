# src/fuzzyfind/models.py
"""
Data models for the fuzzy finder.

These classes carry no search logic; they only give names to the values that
flow between the matcher, the ranker, the coordinator and the presenters:

- MatchConfig: every scoring/tuning constant, as one immutable value.
- Candidate: one word from the source list with its stable position.
- MatchOutcome: what the matcher says about one (pattern, candidate) pair.
- RankedResult: a candidate paired with its outcome, as returned by rank().
- SearchRequest / SearchResults: what the coordinator issues and publishes.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Tuple


@dataclass(frozen=True, slots=True)
class MatchConfig:
    """
    Tuning for the scored fuzzy matcher.

    Attributes
    ----------
    sequential_bonus : int
        Added for each matched character directly following the previous one.
    separator_bonus : int
        Added when the character before a match is one of ``separators``.
    camel_bonus : int
        Added when a match is uppercase and the character before it lowercase.
    first_letter_bonus : int
        Added when the very first character of the candidate is matched.
    leading_letter_penalty : int
        Applied per candidate character before the first match.
    max_leading_letter_penalty : int
        Floor for the total leading-letter penalty.
    unmatched_letter_penalty : int
        Applied per candidate character that is not part of the match.
    recursion_limit : int
        Number of recursive attempts shared by one top-level match call.
    max_matches : int
        Capacity of the matched-index buffer.
    separators : str
        Characters that count as word separators for ``separator_bonus``.
    """
    sequential_bonus: int = 15
    separator_bonus: int = 30
    camel_bonus: int = 30
    first_letter_bonus: int = 15
    leading_letter_penalty: int = -5
    max_leading_letter_penalty: int = -15
    unmatched_letter_penalty: int = -1
    recursion_limit: int = 10
    max_matches: int = 256
    separators: str = "_ "


DEFAULT_MATCH_CONFIG = MatchConfig()


@dataclass(frozen=True, slots=True)
class Candidate:
    index: int      # position in the source list
    text: str


@dataclass(frozen=True, slots=True)
class MatchOutcome:
    """
    Result of scoring one pattern against one candidate.

    ``score`` and ``matches`` are only meaningful when ``matched`` is true.
    Scores are comparable within one search only.
    """
    matched: bool
    score: int = 0
    matches: Tuple[int, ...] = ()


NO_MATCH = MatchOutcome(matched=False)


@dataclass(frozen=True, slots=True)
class RankedResult:
    candidate: Candidate
    outcome: MatchOutcome

    @property
    def text(self) -> str:
        return self.candidate.text

    @property
    def score(self) -> int:
        return self.outcome.score

    @property
    def matches(self) -> Tuple[int, ...]:
        return self.outcome.matches

    def to_dict(self) -> dict:
        return {
            "text": self.candidate.text,
            "index": self.candidate.index,
            "score": self.outcome.score,
            "matches": list(self.outcome.matches),
        }


# ordered by descending score, at most TOP_K entries
RankedResultSet = List[RankedResult]


@dataclass(frozen=True, slots=True)
class SearchRequest:
    pattern: str
    generation: int


@dataclass(frozen=True, slots=True)
class SearchResults:
    """A completed ranking, tagged with the request that produced it."""
    request: SearchRequest
    results: RankedResultSet

    @property
    def pattern(self) -> str:
        return self.request.pattern

    @property
    def generation(self) -> int:
        return self.request.generation
