import json
from pathlib import Path
from fuzzyfind.__main__ import main

def _seed(tmp: Path) -> str:
    f = tmp / "words.txt"
    f.write_text("cat\nconcatenate\ndog\n", encoding="utf-8")
    return str(f)

def test_cli_json_query(tmp_path: Path, capsys):
    assert main(["--words", _seed(tmp_path), "--q", "cat", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["text"] for r in rows] == ["cat", "concatenate"]
    assert rows[0]["score"] == 145

def test_cli_table_marks_matched_letters(tmp_path: Path, capsys):
    assert main(["--words", _seed(tmp_path), "--q", "dg", "-k", "5"]) == 0
    out = capsys.readouterr().out
    assert "[d]o[g]" in out

def test_cli_no_matches(tmp_path: Path, capsys):
    assert main(["--words", _seed(tmp_path), "--q", "zzz"]) == 0
    assert "(no matches)" in capsys.readouterr().out

def test_cli_repl_builds_pattern_incrementally(tmp_path: Path, capsys, monkeypatch):
    lines = iter(["c", "at", "#", "d", ""])
    monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))
    assert main(["--words", _seed(tmp_path), "--repl", "--json"]) == 0
    out = capsys.readouterr().out
    assert "(reset)" in out
    assert "Goodbye!" in out

def test_cli_missing_word_file(tmp_path: Path, capsys):
    assert main(["--words", str(tmp_path / "missing.txt"), "--q", "cat"]) == 2
    assert "error" in capsys.readouterr().err
