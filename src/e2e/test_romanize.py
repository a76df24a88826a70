from fuzzy_pinyin.models import PINYIN, PLAIN
from fuzzy_pinyin.romanize import build, concat, expand_ranges, to_ranges
from fuzzy_pinyin.tables import DictTable


def test_units_carry_every_romanization(table):
    text = build("银行", table)
    assert len(text) == 2
    assert text[0].kind == PINYIN and text[0].candidates == ("yin",)
    assert text[1].candidates == ("xing", "hang")
    assert text.source == "银行"
    assert text.source_length == 2


def test_unknown_characters_are_plain_and_lowercased(table):
    text = build("Readme 中", table)
    assert [u.character for u in text] == list("readme 中")
    assert all(u.kind == PLAIN and u.candidates == (u.character,) for u in text.units[:7])
    assert text[7].kind == PINYIN


def test_malformed_dictionary_entries_fall_back_to_plain():
    bad = DictTable({"中": ["", None, "zhong", "zhong"], "文": 5, "字": ""})
    text = build("中文字", bad)
    assert text[0].candidates == ("zhong",)
    assert text[1].kind == PLAIN and text[1].candidates == ("文",)
    assert text[2].kind == PLAIN


def test_concat_keeps_order_and_adds_lengths(table):
    a, b, c = build("中", table), build("/", table), build("文件", table)
    ab_c = concat(concat(a, b), c)
    a_bc = concat(a, concat(b, c))
    assert ab_c == a_bc
    assert ab_c.source == "中/文件"
    assert ab_c.source_length == a.source_length + b.source_length + c.source_length
    assert [u.character for u in ab_c] == ["中", "/", "文", "件"]


def test_to_ranges_example():
    assert to_ranges([1, 2, 3, 5, 7, 8]) == [(1, 3), (5, 5), (7, 8)]
    assert to_ranges([]) == []
    assert to_ranges([4]) == [(4, 4)]


def test_to_ranges_round_trip():
    for idx in ([0], [0, 1, 2], [1, 2, 3, 5, 7, 8], [0, 2, 4, 6], [3, 4, 9, 10, 11, 20]):
        assert expand_ranges(to_ranges(idx)) == idx
