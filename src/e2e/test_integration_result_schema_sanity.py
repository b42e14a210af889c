from pathlib import Path
import json
import pytest
from fuzzyfind.engine import Engine

def _seed(tmp: Path) -> str:
    f = tmp / "doc.txt"
    f.write_text("quick_brown\nQuickBrown\nbrown quick\n", encoding="utf-8")
    return str(f)

@pytest.mark.e2e
def test_result_schema_sanity(tmp_path: Path):
    eng = Engine()
    try:
        eng.load([_seed(tmp_path)])
        rows = eng.complete("qb", top_k=5)
        assert rows, "expected at least one result"
        for r in rows:
            d = r.to_dict()
            assert set(d) == {"text", "index", "score", "matches"}
            assert json.loads(json.dumps(d)) == d
            assert [d["text"][i].lower() for i in d["matches"]] == ["q", "b"]
        assert rows[0].text == "QuickBrown"
    finally:
        eng.shutdown()
