# fuzzy_pinyin/tables/pypinyin_table.py
from __future__ import annotations
from functools import lru_cache
from typing import Tuple

from pypinyin import Style, pinyin


# pypinyin lookups dominate index build time; characters repeat a lot
@lru_cache(maxsize=65536)
def _lookup(ch: str) -> Tuple[str, ...]:
    rows = pinyin(ch, style=Style.NORMAL, heteronym=True, errors="ignore")
    if not rows:
        return ()
    return tuple(dict.fromkeys(p for p in rows[0] if p.isalpha()))


class PypinyinTable:
    """
    Romanizations from pypinyin's bundled dictionary: every reading of a
    character (heteronyms included), toneless, with "v" standing for "ü".
    Traditional characters are covered by the same dictionary.
    """
    def candidates_for(self, ch: str) -> Tuple[str, ...]:
        if len(ch) != 1 or ch.isascii():
            return ()
        return _lookup(ch)
