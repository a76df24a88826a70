import json
from pathlib import Path

import pytest

from fuzzy_pinyin.__main__ import highlight, main


def test_highlight_brackets_ranges():
    assert highlight("中文笔记", ((0, 1),)) == "[中文]笔记"
    assert highlight("readme 中文", ((4, 5), (7, 8))) == "read[me] [中文]"
    assert highlight("abc", ()) == "abc"


def test_cli_json_query(capsys):
    assert main(["--names", "中文", "标签", "中文标签", "--q", "zw", "--json"]) == 0
    rows = json.loads(capsys.readouterr().out)
    assert [r["name"] for r in rows] == ["中文", "中文标签"]
    assert rows[0]["score"] is None


def test_cli_table_output(capsys, tmp_path: Path):
    root = tmp_path / "notes"; root.mkdir()
    (root / "中文笔记.md").write_text("x\n", encoding="utf-8")
    assert main(["--roots", str(root), "--q", "zwbj"]) == 0
    out = capsys.readouterr().out
    assert "[中文笔记]" in out
    assert "max" in out


def test_cli_repl_builds_the_query_incrementally(capsys, monkeypatch):
    lines = iter(["z", "w", ":bs", "h", "#", "b", ""])
    monkeypatch.setattr("builtins.input", lambda prompt="": next(lines))
    assert main(["--names", "中文", "标签", "--repl"]) == 0
    out = capsys.readouterr().out
    assert "[标]签" in out


def test_cli_missing_root_is_a_usage_error(tmp_path: Path):
    with pytest.raises(SystemExit):
        main(["--roots", str(tmp_path / "nope"), "--q", "x"])


def test_cli_rejects_non_positive_k():
    with pytest.raises(SystemExit):
        main(["--names", "中文", "--q", "zw", "-k", "0"])
