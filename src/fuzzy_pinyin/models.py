# fuzzy_pinyin/models.py
"""
Data models for the fuzzy pinyin matcher.

- RomanizedUnit: one character of an item's text plus every input-letter
  string that may stand for it.
- RomanizedText: the ordered units of one display text.
- Item: a matchable entry (file, tag, command) owned by an index.
- MatchOutcome: one ranked hit, with the matched character ranges.

These classes carry no matching logic; see romanize, align, score and search.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Any, Iterator, Optional, Tuple

PLAIN = "plain"
PINYIN = "pinyin"


@dataclass(frozen=True, slots=True)
class RomanizedUnit:
    """
    Attributes
    ----------
    character : str
        The literal character (lower-cased) as it appears in the text.
    kind : str
        "plain" (matched literally only) or "pinyin" (has romanizations).
    candidates : Tuple[str, ...]
        Ordered, de-duplicated romanizations. For plain units this is just
        (character,).
    """
    character: str
    kind: str
    candidates: Tuple[str, ...]

    @property
    def is_pinyin(self) -> bool:
        return self.kind == PINYIN


@dataclass(frozen=True, slots=True)
class RomanizedText:
    units: Tuple[RomanizedUnit, ...]
    source: str   # lower-cased text the units were built from

    @property
    def source_length(self) -> int:
        return len(self.source)

    def __len__(self) -> int:
        return len(self.units)

    def __iter__(self) -> Iterator[RomanizedUnit]:
        return iter(self.units)

    def __getitem__(self, i: int) -> RomanizedUnit:
        return self.units[i]

    def __add__(self, other: "RomanizedText") -> "RomanizedText":
        if not isinstance(other, RomanizedText):
            return NotImplemented
        return RomanizedText(units=self.units + other.units, source=self.source + other.source)


@dataclass(eq=False)
class Item:
    """
    A matchable entry. Compared and hashed by identity: two tags with the same
    name coming from different rebuilds are different items.
    """
    name: str
    text: RomanizedText
    payload: Any = None
    path: Optional[str] = None                  # full display path (files only)
    path_text: Optional[RomanizedText] = None   # romanized `path`, for path search


@dataclass(frozen=True, slots=True)
class MatchOutcome:
    item: Item
    score: float                         # higher is better; math.inf = full coverage
    ranges: Tuple[Tuple[int, int], ...]  # inclusive (start, end), ascending
    field: str = "name"                  # "name" | "path": which text ranges index into

    @property
    def display(self) -> str:
        if self.field == "path" and self.item.path is not None:
            return self.item.path
        return self.item.name

    def to_dict(self) -> dict:
        """JSON-safe row; the full-coverage score class is reported as null."""
        return {
            "name": self.item.name,
            "payload": self.item.payload if isinstance(self.item.payload, (str, int, float, type(None))) else str(self.item.payload),
            "path": self.item.path,
            "score": self.score if math.isfinite(self.score) else None,
            "ranges": [list(r) for r in self.ranges],
            "field": self.field,
        }
