# fuzzy_pinyin/align.py
"""
Sequence aligner: can a typed query be produced from an item's romanized text?

State (i, j) means "units up to i have produced the first j query letters";
its value is the list of unit indices consumed on the way (the longest one
found so far). From the state before unit i a query position j can advance by:

  * literal       query[j] is the unit's character            -> j + 1
  * trailing      the whole rest of the query is a prefix of one of the
                  unit's romanizations (rest <= MAX_PINYIN_LENGTH letters)
                                                               -> done
  * initial       a romanization starts with query[j]         -> j + 1
  * full syllable a romanization equals query[j:j+len]        -> j + len
  * space skip    the unit is a space: every state carries over unchanged

Only two rows are kept alive (previous unit, current unit).
"""
from __future__ import annotations
from typing import List, Optional

from . import config as CFG
from .models import RomanizedText

Row = List[Optional[List[int]]]


def _keep_longest(row: Row, j: int, matches: List[int]) -> None:
    # ties keep whatever was recorded first
    cur = row[j]
    if cur is None or len(matches) > len(cur):
        row[j] = matches


def strip_query(query: str) -> str:
    """Whitespace in the query is not significant ("zhong wen" == "zhongwen")."""
    return "".join(query.split())


def align(text: RomanizedText, query: str) -> Optional[List[int]]:
    """
    Return the ascending unit indices consumed by the best alignment of
    `query` against `text`, or None when the query cannot be produced.

    The query is expected lower-cased by the caller; the text units are.
    """
    q = strip_query(query)
    n = len(q)
    if n == 0 or len(text) == 0:
        return None
    tail_max = CFG.MAX_PINYIN_LENGTH

    # prev[j]: state after the previous unit with j letters consumed.
    # j == 0 is always alive with nothing consumed, so a match may start anywhere.
    prev: Row = [[]] + [None] * n
    for i, unit in enumerate(text.units):
        cur: Row = [[]] + [None] * n
        if unit.character == " ":
            for j in range(n):
                cur[j] = prev[j]

        for j in range(n):
            base = prev[j]
            if base is None or (j > 0 and not base):
                # nothing reached (i - 1, j): the run is broken here
                continue
            matches = base + [i]

            if unit.character == q[j]:
                _keep_longest(cur, j + 1, matches)
                if j + 1 == n:
                    return cur[n]

            if not unit.is_pinyin:
                continue

            rest = q[j:]
            if len(rest) <= tail_max and any(py.startswith(rest) for py in unit.candidates):
                return matches

            if any(py[0] == q[j] for py in unit.candidates):
                _keep_longest(cur, j + 1, matches)

            full = next((py for py in unit.candidates if q.startswith(py, j)), None)
            if full is not None:
                _keep_longest(cur, j + len(full), matches)

        if cur[n] is not None:
            return cur[n]
        prev = cur
    return None
