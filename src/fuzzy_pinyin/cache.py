# fuzzy_pinyin/cache.py
"""
Per-keystroke history of match results.

One HistoryNode per typed character; the chain from the root spells the
current query. Each node remembers the items that matched the query prefix
ending at it, so the next keystroke only has to re-scan those.
"""
from __future__ import annotations
from typing import List, Optional, Sequence, Tuple

from .models import Item

ROOT_CHAR = "\0"   # never typed; the first keystroke always resets the root


class HistoryNode:
    __slots__ = ("character", "next", "items", "path_items")

    def __init__(self, character: str = ROOT_CHAR) -> None:
        self.reset(character)

    def reset(self, character: str) -> None:
        """Re-purpose this node for `character`; everything after it is dropped."""
        self.character = character
        self.next: Optional[HistoryNode] = None
        self.items: List[Item] = []        # empty = not computed yet
        self.path_items: List[Item] = []   # same, for the path-search fallback

    def push(self, character: str) -> "HistoryNode":
        node = HistoryNode(character)
        self.next = node
        return node

    def at(self, depth: int) -> Optional["HistoryNode"]:
        """Node `depth` links after this one (0 = self), or None past the end."""
        if depth < 0:
            return None
        node: Optional[HistoryNode] = self
        for _ in range(depth):
            if node is None:
                return None
            node = node.next
        return node

    def depth(self) -> int:
        """Length of the chain starting here."""
        n, node = 0, self
        while node is not None:
            n += 1
            node = node.next
        return n

    def __repr__(self) -> str:
        return f"HistoryNode({self.character!r}, items={len(self.items)})"


def walk(root: HistoryNode, query: str) -> Tuple[int, HistoryNode]:
    """
    Align the chain with `query`, one node per character.

    Returns (index, tail):
      index  number of leading characters that hit an existing, unchanged node
      tail   node of the last query character (receives the new results)

    A node whose character differs from the query is reset, which also cuts
    off every node after it. Missing nodes are appended.
    """
    if not query:
        raise ValueError("walk(): empty query has no chain")
    node: Optional[HistoryNode] = root
    last: Optional[HistoryNode] = None
    index = 0
    intact = True
    for ch in query:
        if node is None:
            assert last is not None
            node = last.push(ch)
            intact = False
        elif ch != node.character:
            node.reset(ch)
            intact = False
        if intact:
            index += 1
        last = node
        node = node.next
    assert last is not None
    return index, last


def candidates(root: HistoryNode, index: int, items: Sequence[Item], *, path: bool = False) -> Sequence[Item]:
    """Items cached at the deepest still-valid node, else the whole collection."""
    node = root.at(index - 1) if index > 0 else None
    if node is not None:
        cached = node.path_items if path else node.items
        if cached:
            return cached
    return items
