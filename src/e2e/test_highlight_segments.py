from fuzzyfind.highlight import highlight_segments
from fuzzyfind.matcher import fuzzy_match


def test_splits_matched_and_plain_runs():
    out = fuzzy_match("AbC", "alphaBetaCharlie")
    assert highlight_segments("alphaBetaCharlie", out.matches) == [
        ("a", True), ("lpha", False), ("B", True), ("eta", False), ("C", True), ("harlie", False),
    ]


def test_adjacent_matches_are_separate_runs():
    assert highlight_segments("cat", (0, 1, 2)) == [("c", True), ("a", True), ("t", True)]


def test_no_matches_and_empty_text():
    assert highlight_segments("dog", ()) == [("dog", False)]
    assert highlight_segments("", ()) == []


def test_out_of_range_indices_are_ignored():
    assert highlight_segments("ab", (1, 5, -1)) == [("a", False), ("b", True)]
