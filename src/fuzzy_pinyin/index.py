# fuzzy_pinyin/index.py
from __future__ import annotations
import logging
import time
from typing import Callable, Dict, Iterable, List, Protocol, Sequence, Union

from . import loader
from .models import Item
from .romanize import build
from .tables.api import RomanizationTable

log = logging.getLogger(__name__)

NameSource = Union[Callable[[], Iterable[str]], Iterable[str]]


class ItemIndex(Protocol):
    id: str
    items: List[Item]
    # Full rebuild from the source collection
    def rebuild(self) -> None: ...
    # Bring `items` in line with the source; True if anything changed
    def update(self) -> bool: ...


class NameIndex:
    """
    Items named by plain strings (tags, commands, ...). `source` is either a
    callable returning the current names or a fixed iterable.
    """
    def __init__(self, id: str, source: NameSource, table: RomanizationTable) -> None:
        self.id = id
        self.table = table
        if callable(source):
            self._source = source
        else:
            fixed = list(source)
            self._source = lambda: fixed
        self.items: List[Item] = []

    def _names(self) -> List[str]:
        # keep first occurrence, drop blanks
        return list(dict.fromkeys(n for n in self._source() if n))

    def _item(self, name: str) -> Item:
        return Item(name=name, text=build(name, self.table), payload=name)

    def rebuild(self) -> None:
        self.items = [self._item(n) for n in self._names()]

    def update(self) -> bool:
        names = self._names()
        wanted = set(names)
        have = {it.name for it in self.items}
        added = [n for n in names if n not in have]
        removed = have - wanted
        if removed:
            self.items = [it for it in self.items if it.name not in removed]
        if added:
            self.items.extend(self._item(n) for n in added)
        if added or removed:
            log.info("%s index updated: +%d -%d", self.id, len(added), len(removed))
        return bool(added or removed)


class FileIndex:
    """Files under one or more root folders (see loader for filtering rules)."""
    label = "files"

    def __init__(self, roots: Sequence[str], table: RomanizationTable, *, id: str = "file") -> None:
        roots = list(roots)
        if not roots:
            raise ValueError("FileIndex: at least one root folder is required")
        self.id = id
        self.roots = roots
        self.table = table
        self.items: List[Item] = []
        self._by_path: Dict[str, Item] = {}

    def _scan(self) -> Iterable[tuple[str, str]]:
        return loader.iter_files(self.roots)

    def _make(self, root: str, path: str) -> Item:
        return loader.file_item(root, path, self.table)

    def rebuild(self) -> None:
        self._by_path = loader.load_items(self._scan(), self._make, label=self.label)
        self.items = list(self._by_path.values())

    def update(self) -> bool:
        old = self._by_path
        fresh: Dict[str, Item] = {}
        added = 0
        for root, path in self._scan():
            it = old.get(path)
            if it is None:
                it = self._make(root, path)
                added += 1
            fresh[path] = it
        removed = len(old.keys() - fresh.keys())
        self._by_path = fresh
        self.items = list(fresh.values())
        if added or removed:
            log.info("%s index updated: +%d -%d", self.id, added, removed)
        return bool(added or removed)


class FolderIndex(FileIndex):
    """Folders under the roots (move-file style pickers)."""
    label = "folders"

    def __init__(self, roots: Sequence[str], table: RomanizationTable, *, id: str = "folder") -> None:
        super().__init__(roots, table, id=id)

    def _scan(self) -> Iterable[tuple[str, str]]:
        return loader.iter_folders(self.roots)

    def _make(self, root: str, path: str) -> Item:
        return loader.folder_item(root, path, self.table)


class IndexManager:
    """Loads a group of indexes and reports how long each one took."""
    def __init__(self, indexes: Iterable[ItemIndex]) -> None:
        self.indexes: List[ItemIndex] = list(indexes)

    def load(self) -> None:
        for idx in self.indexes:
            self._load_one(idx)

    def _load_one(self, idx: ItemIndex) -> None:
        t0 = time.perf_counter()
        idx.rebuild()
        log.info("%s indexing completed, totaling %d items, taking %.3fs",
                 idx.id, len(idx.items), time.perf_counter() - t0)

    def update(self) -> bool:
        changed = False
        for idx in self.indexes:
            changed = idx.update() or changed
        return changed

    def get(self, id: str) -> ItemIndex:
        for idx in self.indexes:
            if idx.id == id:
                return idx
        raise KeyError(id)
