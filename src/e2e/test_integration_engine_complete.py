from pathlib import Path
import pytest
from fuzzyfind.engine import Engine

def _seed(tmp: Path) -> str:
    f = tmp / "english.txt"
    f.write_text("cat\nconcatenate\ndog\nalphaBetaCharlie\nscatter\n", encoding="utf-8")
    return str(f)

@pytest.mark.e2e
def test_load_then_complete(tmp_path: Path):
    eng = Engine()
    try:
        assert eng.load([_seed(tmp_path)]) == 5
        rows = eng.complete("cat", top_k=30)
        assert rows[0].text == "cat"
        assert "dog" not in {r.text for r in rows}
        assert len(eng.complete("cat", top_k=1)) == 1
        assert eng.complete("", top_k=5) == []
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_engine_coordinator_publishes_latest(tmp_path: Path):
    eng = Engine()
    seen = []
    try:
        eng.load([_seed(tmp_path)])
        coord = eng.coordinator(on_publish=seen.append, debounce=0)
        coord.update_pattern("AbC")
        assert coord.wait(5)
        assert [r.text for r in seen[-1].results] == ["alphaBetaCharlie"]
        assert seen[-1].results[0].matches == (0, 5, 9)
    finally:
        eng.shutdown()
    with pytest.raises(RuntimeError):
        coord.update_pattern("x")

def test_closed_coordinators_are_pruned_on_reload():
    eng = Engine()
    try:
        eng.use_words(["cat", "dog"])
        first = eng.coordinator(debounce=0)
        first.shutdown()
        second = eng.coordinator(debounce=0)
        assert eng._coordinators == [second]
        third = eng.coordinator(debounce=0)
        assert eng._coordinators == [second, third]
    finally:
        eng.shutdown()

def test_complete_before_load_raises():
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.complete("cat")
    with pytest.raises(RuntimeError):
        eng.coordinator()

def test_in_memory_words_and_bad_top_k():
    eng = Engine()
    assert eng.use_words(["cat", "dog"]) == 2
    assert [r.text for r in eng.complete("d")] == ["dog"]
    with pytest.raises(ValueError):
        eng.complete("d", top_k=0)
