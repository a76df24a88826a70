# fuzzy_pinyin/tables/scheme_table.py
from __future__ import annotations
from functools import lru_cache
from typing import Tuple

from .api import RomanizationTable
from .double_pinyin import SchemeDict, full_to_double


class SchemeTable:
    """Wraps a full-pinyin table and serves double pinyin codes instead."""
    def __init__(self, base: RomanizationTable, scheme: SchemeDict, *, cache_size: int = 8192) -> None:
        self.base = base
        self.scheme = scheme
        # per instance: two tables with different schemes never share entries
        self._lookup = lru_cache(maxsize=cache_size)(self._convert)

    def _convert(self, ch: str) -> Tuple[str, ...]:
        return tuple(dict.fromkeys(full_to_double(py, self.scheme) for py in self.base.candidates_for(ch) if py))

    def candidates_for(self, ch: str) -> Tuple[str, ...]:
        return self._lookup(ch)
