from __future__ import annotations
import logging
from typing import Callable, Dict, List, Optional, Sequence, Tuple

from . import config as CFG
from .align import align
from .cache import HistoryNode, candidates, walk
from .models import Item, MatchOutcome
from .romanize import to_ranges
from .score import score

log = logging.getLogger(__name__)

EmptySuggestions = Callable[[], List[MatchOutcome]]


def match_item(item: Item, query: str, *, field: str = "name") -> Optional[MatchOutcome]:
    """Align + score one item against an already lower-cased query."""
    text = item.text if field == "name" else item.path_text
    if text is None:
        return None
    indices = align(text, query)
    if indices is None:
        return None
    ranges = tuple(to_ranges(indices))
    return MatchOutcome(item=item, score=score(ranges, text.source_length), ranges=ranges, field=field)


def default_suggestions(items: Sequence[Item]) -> List[MatchOutcome]:
    """Empty input: every item, unranked, nothing highlighted."""
    return [MatchOutcome(item=it, score=0.0, ranges=()) for it in items]


def _by_score(rows: List[MatchOutcome], pos: Dict[int, int]) -> List[MatchOutcome]:
    # equal scores keep collection order, whatever order the cached subset is in
    return sorted(rows, key=lambda r: (-r.score, pos.get(id(r.item), len(pos))))


def _cut(rows: List[MatchOutcome], top_k: Optional[int]) -> List[MatchOutcome]:
    if top_k is None:
        return rows
    return rows[:max(top_k, 0)]


def match_query(
    query: str,
    cache: Optional[HistoryNode],
    items: Sequence[Item],
    *,
    empty_suggestions: Optional[EmptySuggestions] = None,
    use_path: bool = False,
    top_k: Optional[int] = None,
) -> Tuple[List[MatchOutcome], HistoryNode]:
    """
    Rank `items` for the current `query` and return (outcomes, cache).

    `cache` is the HistoryNode chain returned by the previous call for the
    same collection (None to start fresh). It is updated in place: the items
    matched here are stored on the node of the last query character, so the
    next keystroke only re-scans them. An empty query drops the chain and
    returns `empty_suggestions()` (default: all items with score 0).
    """
    if query == "":
        rows = empty_suggestions() if empty_suggestions is not None else default_suggestions(items)
        return _cut(rows, top_k), HistoryNode()

    if cache is None:
        cache = HistoryNode()

    index, tail = walk(cache, query)
    pos = {id(it): n for n, it in enumerate(items)}
    q = query.lower()

    pool = candidates(cache, index, items)
    rows = _by_score([m for m in (match_item(it, q) for it in pool) if m is not None], pos)
    tail.items = [r.item for r in rows]
    log.debug("query=%r reused=%d scanned=%d/%d matched=%d", query, index, len(pool), len(items), len(rows))

    if use_path and len(rows) < CFG.PATH_SEARCH_THRESHOLD:
        named = set(tail.items)
        extra: List[MatchOutcome] = []
        for it in candidates(cache, index, items, path=True):
            if it in named:
                continue
            m = match_item(it, q, field="path")
            if m is not None:
                extra.append(m)
        extra = _by_score(extra, pos)
        # everything that matched this prefix by name or by path
        tail.path_items = tail.items + [r.item for r in extra]
        rows = rows + extra

    return _cut(rows, top_k), cache
