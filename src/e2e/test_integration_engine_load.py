from pathlib import Path
import pytest
from dicematch import config as CFG
from dicematch.engine import Engine

def _seed(tmp: Path) -> str:
    root = tmp / "Names"; root.mkdir()
    (root / "fruit.txt").write_text("apple\nmaple\n\n   \nzzz\n", encoding="utf-8")
    sub = root / "more"; sub.mkdir()
    (sub / "extra.txt").write_text("appl\r\n", encoding="utf-8")
    (sub / "ignored.md").write_text("apple\n", encoding="utf-8")
    skip = root / "__pycache__"; skip.mkdir()
    (skip / "junk.txt").write_text("apple\n", encoding="utf-8")
    return str(root)

@pytest.mark.e2e
def test_load_folder_and_match(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine()
    try:
        added = eng.load([root])
        assert added == 4 and eng.count() == 4
        rows = eng.match("apple", top_n=2)
        assert [r.item for r in rows] == ["apple", "appl"]
        assert rows[0].score == 1.0
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_score_preserves_load_order(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine()
    try:
        eng.load([root])
        rows = eng.score("apple")
        assert [r.item for r in rows] == ["apple", "maple", "zzz", "appl"]
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_single_file_root_and_missing_root(tmp_path: Path):
    f = tmp_path / "one.txt"
    f.write_text("only line\n", encoding="utf-8")
    eng = Engine()
    try:
        assert eng.load([str(f), str(tmp_path / "nope")]) == 1
    finally:
        eng.shutdown()

@pytest.mark.e2e
def test_config_defaults_used_by_match(monkeypatch):
    monkeypatch.setattr(CFG, "TOP_N", 1)
    monkeypatch.setattr(CFG, "CUTOFF", 0.0)
    eng = Engine()
    eng.add(["apple", "appl", "maple"])
    assert [r.item for r in eng.match("apple")] == ["apple"]
    assert len(eng.match("apple", top_n=0)) == 3
    eng.shutdown()

def test_engine_requires_candidates():
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.match("x")
    with pytest.raises(ValueError):
        eng.load([])
    assert eng.similarity("night", "nacht") == 0.25

def test_add_rejects_non_strings():
    eng = Engine()
    with pytest.raises(TypeError):
        eng.add(["ok", None])  # type: ignore[list-item]
