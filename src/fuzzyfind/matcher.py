# src/fuzzyfind/matcher.py
"""
Scored fuzzy matching of a pattern against a single candidate.

fuzzy_match() tries every way of laying the pattern out as a case-insensitive
subsequence of the candidate and keeps the alignment with the best score.
At each candidate character equal to the current pattern character the search
branches: one branch consumes the character, the other skips it and retries
the same pattern position further right. The number of branches explored per
top-level call is capped by ``MatchConfig.recursion_limit`` so degenerate
inputs (pattern "aaaaaa" against a long run of "a") stay cheap, at the price
of occasionally missing the optimal alignment.

Scores have no absolute meaning; they only order candidates for one pattern.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

from .models import DEFAULT_MATCH_CONFIG, MatchConfig, MatchOutcome, NO_MATCH

# (score, matched indices) of a complete alignment
_Scored = Tuple[int, Tuple[int, ...]]


def _fold(s: str) -> List[str]:
    # fold per character so indices into the candidate stay aligned
    return [ch.lower() for ch in s]


def fuzzy_match_simple(pattern: str, candidate: str) -> bool:
    """
    Greedy subsequence check: True if every pattern character appears in
    order in the candidate. An empty pattern always matches, unlike
    fuzzy_match() which needs at least one matched character.
    """
    if not pattern:
        return True
    if not candidate:
        return False

    pat = _fold(pattern)
    p = 0
    for ch in _fold(candidate):
        if ch == pat[p]:
            p += 1
            if p == len(pat):
                return True
    return False


def score_alignment(candidate: str, matches: Sequence[int],
                    config: MatchConfig = DEFAULT_MATCH_CONFIG) -> int:
    """Score a complete alignment (strictly increasing indices into candidate)."""
    score = 100

    # leading letters, floored
    score += max(config.max_leading_letter_penalty,
                 config.leading_letter_penalty * matches[0])

    score += config.unmatched_letter_penalty * (len(candidate) - len(matches))

    prev = -2
    for idx in matches:
        if idx == prev + 1:
            score += config.sequential_bonus

        if idx > 0:
            neighbor = candidate[idx - 1]
            curr = candidate[idx]
            if neighbor.islower() and curr.isupper():
                score += config.camel_bonus
            if neighbor in config.separators:
                score += config.separator_bonus
        else:
            score += config.first_letter_bonus
        prev = idx

    return score


def fuzzy_match(pattern: str, candidate: str,
                config: MatchConfig = DEFAULT_MATCH_CONFIG) -> MatchOutcome:
    """
    Return the best-scoring alignment of ``pattern`` inside ``candidate``.

    An empty pattern or an empty candidate never matches. Running out of
    recursion budget or of matched-index capacity makes that branch a
    non-match; it is never reported as an error.
    """
    if not pattern or not candidate:
        return NO_MATCH

    pat = _fold(pattern)
    txt = _fold(candidate)
    plen, slen = len(pat), len(txt)
    recursions = 0

    def search(p_idx: int, s_idx: int, prefix: Tuple[int, ...]) -> Optional[_Scored]:
        nonlocal recursions
        recursions += 1
        if recursions >= config.recursion_limit:
            return None
        if p_idx >= plen or s_idx >= slen:
            return None

        matches = list(prefix)
        best: Optional[_Scored] = None

        while p_idx < plen and s_idx < slen:
            if pat[p_idx] == txt[s_idx]:
                if len(matches) >= config.max_matches:
                    return None

                # alternative: leave this character for a later position
                skipped = search(p_idx, s_idx + 1, tuple(matches))
                if skipped is not None and (best is None or skipped[0] > best[0]):
                    best = skipped

                matches.append(s_idx)
                p_idx += 1
            s_idx += 1

        score: Optional[int] = None
        if p_idx == plen:
            score = score_alignment(candidate, matches, config)

        # the skipped branch must be strictly better to win
        if best is not None and (score is None or best[0] > score):
            return best
        if score is not None:
            return score, tuple(matches)
        return None

    found = search(0, 0, ())
    if found is None:
        return NO_MATCH
    score, matches = found
    return MatchOutcome(matched=True, score=score, matches=matches)
