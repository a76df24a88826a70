import pytest

from fuzzy_pinyin.tables import DictTable

# Small fixed dictionary so matching tests do not depend on pypinyin's data.
PINYIN = {
    "中": ["zhong"],
    "文": ["wen"],
    "标": ["biao"],
    "签": ["qian"],
    "件": ["jian"],
    "银": ["yin"],
    "行": ["xing", "hang"],
    "说": ["shuo"],
    "明": ["ming"],
    "长": ["chang", "zhang"],
}


@pytest.fixture
def table() -> DictTable:
    return DictTable(PINYIN)
