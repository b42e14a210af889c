from __future__ import annotations

from typing import Callable, Optional, Sequence

from .config import TOP_K
from .matcher import fuzzy_match
from .models import DEFAULT_MATCH_CONFIG, Candidate, MatchConfig, RankedResult, RankedResultSet


def rank(
    pattern: str,
    candidates: Sequence[str],
    *,
    config: MatchConfig = DEFAULT_MATCH_CONFIG,
    limit: int = TOP_K,
    cancelled: Optional[Callable[[], bool]] = None,
) -> RankedResultSet:
    """
    Match ``pattern`` against every candidate and return the best ``limit``
    hits, highest score first. Ties keep source order (the sort is stable).

    ``cancelled`` is polled between candidates; once it reports true the
    ranking is abandoned and an empty list is returned. Callers that cancel
    are expected to discard the output anyway.
    """
    hits: RankedResultSet = []
    for i, text in enumerate(candidates):
        if cancelled is not None and cancelled():
            return []
        outcome = fuzzy_match(pattern, text, config)
        if outcome.matched:
            hits.append(RankedResult(Candidate(i, text), outcome))

    hits.sort(key=lambda r: r.outcome.score, reverse=True)
    return hits[:limit]
