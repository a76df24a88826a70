# fuzzy_pinyin/tables/dict_table.py
from __future__ import annotations
from collections import defaultdict
from typing import Dict, Iterable, List, Mapping, Tuple


class DictTable:
    """In-memory character -> romanizations table (tests, custom dictionaries)."""
    def __init__(self, mapping: Mapping[str, Iterable[str] | str] | None = None) -> None:
        self._rows: Dict[str, Tuple[str, ...]] = {}
        for ch, cands in (mapping or {}).items():
            self._rows[ch] = self._coerce(cands)

    @staticmethod
    def _coerce(cands) -> Tuple[str, ...]:
        # a bare string is one romanization; anything unusable is "none"
        if isinstance(cands, str):
            cands = [cands]
        try:
            return tuple(c for c in cands if isinstance(c, str) and c)
        except TypeError:
            return ()

    @classmethod
    def from_pinyin_map(cls, mapping: Mapping[str, str]) -> "DictTable":
        """Invert {pinyin: "chars read that way"} into a character table."""
        rows: Dict[str, List[str]] = defaultdict(list)
        for py, chars in mapping.items():
            if not py or not isinstance(chars, str):
                continue
            for ch in chars:
                if py not in rows[ch]:
                    rows[ch].append(py)
        return cls(rows)

    def candidates_for(self, ch: str) -> Tuple[str, ...]:
        return self._rows.get(ch, ())

    def __len__(self) -> int:
        return len(self._rows)
