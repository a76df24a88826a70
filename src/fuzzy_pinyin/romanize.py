from __future__ import annotations
from typing import Iterable, List, Sequence, Tuple

from .models import PINYIN, PLAIN, RomanizedText, RomanizedUnit
from .tables.api import RomanizationTable


def _clean_candidates(raw: Iterable[str] | None) -> Tuple[str, ...]:
    """Drop empty / non-string entries and duplicates, keep table order."""
    if not raw:
        return ()
    seen: dict[str, None] = {}
    for c in raw:
        if isinstance(c, str) and c:
            seen.setdefault(c.lower(), None)
    return tuple(seen)


def build(text: str, table: RomanizationTable) -> RomanizedText:
    """
    Romanize `text` one character at a time.

    Rules:
      * the text is lower-cased first; unit characters and the recorded source
        are the lower-cased form
      * a character the table knows becomes a "pinyin" unit carrying every
        romanization the table lists for it
      * anything else (latin letters, digits, punctuation, a character whose
        table entry is empty or malformed) becomes a "plain" unit
    """
    units: List[RomanizedUnit] = []
    for raw in text:
        ch = raw.lower()
        if len(ch) != 1:
            # keep one unit per display character so ranges stay aligned
            ch = raw
        cands = _clean_candidates(table.candidates_for(ch))
        if cands:
            units.append(RomanizedUnit(character=ch, kind=PINYIN, candidates=cands))
        else:
            units.append(RomanizedUnit(character=ch, kind=PLAIN, candidates=(ch,)))
    return RomanizedText(units=tuple(units), source="".join(u.character for u in units))


def concat(a: RomanizedText, b: RomanizedText) -> RomanizedText:
    """Units of `a` followed by units of `b`; source lengths add up."""
    return a + b


def to_ranges(indices: Sequence[int]) -> List[Tuple[int, int]]:
    """
    Merge an ascending index list into inclusive ranges:
    [1, 2, 3, 5, 7, 8] -> [(1, 3), (5, 5), (7, 8)]
    """
    if not indices:
        return []
    out: List[Tuple[int, int]] = []
    start = end = indices[0]
    for i in indices[1:]:
        if i == end + 1:
            end = i
        else:
            out.append((start, end))
            start = end = i
    out.append((start, end))
    return out


def expand_ranges(ranges: Iterable[Tuple[int, int]]) -> List[int]:
    """Inverse of to_ranges()."""
    return [i for start, end in ranges for i in range(start, end + 1)]
