import itertools

import pytest
from fuzzyfind.matcher import fuzzy_match, fuzzy_match_simple

WORDS = [
    "cat", "concatenate", "dog", "alphaBetaCharlie", "snake_case_name", "two words",
    "Mississippi", "aardvark", "abracadabra", "XMLHttpRequest", "a", "zz_top", "banana",
]
PATTERNS = ["a", "ab", "ss", "cat", "abc", "aa", "xhr", "ssi", "nan", "zt", "tw", "cc"]


@pytest.mark.parametrize("pattern, word", list(itertools.product(PATTERNS, WORDS)))
def test_matched_indices_are_valid_and_score_is_bounded(pattern, word):
    out = fuzzy_match(pattern, word)
    if not out.matched:
        return
    idx = list(out.matches)
    assert len(idx) == len(pattern)
    assert all(0 <= i < len(word) for i in idx)
    assert all(a < b for a, b in zip(idx, idx[1:]))
    assert all(word[i].lower() == p.lower() for i, p in zip(idx, pattern))
    assert out.score >= 100 - 15 - len(word)


@pytest.mark.parametrize("pattern, word", list(itertools.product(PATTERNS, WORDS)))
def test_scored_match_agrees_with_simple_check(pattern, word):
    # the top-level call always walks the greedy path, so the budget never hides a match
    assert fuzzy_match(pattern, word).matched == fuzzy_match_simple(pattern, word)
