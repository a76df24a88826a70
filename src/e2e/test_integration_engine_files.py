import logging
from pathlib import Path
import math

import pytest

from fuzzy_pinyin.engine import Engine


def _seed(tmp: Path) -> str:
    root = tmp / "Vault"; root.mkdir()
    (root / "中文笔记.md").write_text("# 中文\n", encoding="utf-8")
    (root / "项目计划.md").write_text("# plan\n", encoding="utf-8")
    (root / "readme.md").write_text("hello\n", encoding="utf-8")
    (root / "sub").mkdir()
    (root / "sub" / "中文说明.md").write_text("doc\n", encoding="utf-8")
    return str(root)


@pytest.mark.e2e
def test_initials_find_chinese_file_names(tmp_path: Path):
    eng = Engine()
    try:
        eng.build_files([_seed(tmp_path)])
        rows = eng.complete("zw")
        assert [r.item.name for r in rows] == ["中文笔记", "中文说明"]
        assert all(r.ranges == ((0, 1),) for r in rows)

        full = eng.complete("xmjh")
        assert full[0].item.name == "项目计划"
        assert full[0].score == math.inf
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_empty_query_lists_everything(tmp_path: Path):
    eng = Engine()
    try:
        eng.build_files([_seed(tmp_path)])
        rows = eng.complete("")
        assert len(rows) == 4
        assert all(r.score == 0 and r.ranges == () for r in rows)
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_typing_one_key_at_a_time_matches_a_fresh_engine(tmp_path: Path):
    roots = [_seed(tmp_path)]
    eng, fresh = Engine(), Engine()
    try:
        eng.build_files(roots)
        for q in ("z", "zh", "zho", "zhon", "zhong", "zhongw", "zhong", "zhongwb"):
            rows = eng.complete(q)
        fresh.build_files(roots)
        expected = fresh.complete("zhongwb")
        assert [(r.item.name, r.score, r.ranges) for r in rows] == \
               [(r.item.name, r.score, r.ranges) for r in expected]
        assert [r.item.name for r in rows] == ["中文笔记"]
    finally:
        eng.shutdown()
        fresh.shutdown()


@pytest.mark.e2e
def test_refresh_picks_up_new_files(tmp_path: Path):
    root = _seed(tmp_path)
    eng = Engine()
    try:
        eng.build_files([root])
        assert "中午" not in [r.item.name for r in eng.complete("zw")]
        (Path(root) / "中午.md").write_text("lunch\n", encoding="utf-8")
        assert eng.refresh() is True
        assert "中午" in [r.item.name for r in eng.complete("zw")]
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_path_search_highlights_the_path(tmp_path: Path):
    eng = Engine()
    try:
        eng.build_files([_seed(tmp_path)], path_search=True)
        rows = eng.complete("sub/zw")
        assert rows and rows[0].field == "path"
        assert rows[0].display == "sub/中文说明"
        assert rows[0].ranges == ((0, 5),)
    finally:
        eng.shutdown()


@pytest.mark.e2e
def test_double_pinyin_names():
    eng = Engine()
    try:
        eng.build_names(["标签", "tag"], id="tag", scheme="xiaohe")
        assert [r.item.name for r in eng.complete("bnqm")] == ["标签"]
        assert eng.complete("bnqm")[0].score == math.inf
        assert eng.complete("biaoqian") == []
    finally:
        eng.shutdown()


def test_engine_errors(tmp_path: Path):
    eng = Engine()
    with pytest.raises(RuntimeError):
        eng.complete("zw")
    with pytest.raises(RuntimeError):
        eng.refresh()
    with pytest.raises(ValueError):
        eng.build_files([])
    with pytest.raises(FileNotFoundError):
        eng.build_files([str(tmp_path / "missing")])


@pytest.mark.e2e
def test_build_logs_index_timing_and_progress(tmp_path: Path, monkeypatch, caplog, capsys):
    root = _seed(tmp_path)
    # restored after the test; build_files(verbose=True) turns it on
    monkeypatch.setenv("FUZZY_PINYIN_VERBOSE", "0")
    eng = Engine()
    try:
        with caplog.at_level(logging.INFO, logger="fuzzy_pinyin.index"):
            eng.build_files([root], verbose=True)
        assert "file indexing completed, totaling 4 items" in caplog.text
        assert "[done] files=4" in capsys.readouterr().out
    finally:
        eng.shutdown()
