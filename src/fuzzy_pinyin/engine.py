# fuzzy_pinyin/engine.py
from __future__ import annotations

import os
import logging
from typing import Iterable, List, Optional

from . import config as CFG
from .cache import HistoryNode
from .index import FileIndex, FolderIndex, IndexManager, ItemIndex, NameIndex, NameSource
from .models import MatchOutcome
from .search import EmptySuggestions, match_query
from .tables.api import RomanizationTable, make_table

log = logging.getLogger(__name__)


class Engine:
    """
    Thin orchestration layer that glues together:
      - a romanization table (pypinyin, a JSON dictionary, or a mapping),
      - one item index (files, folders, or plain names such as tags),
      - the per-keystroke history cache and search.match_query.

    Public API (used by CLI/Flask):
      * build_files(roots, ...): scan folders -> index -> attach
      * build_names(names, ...): index a list (or callable) of names
      * complete(query, top_k):  ranked MatchOutcome list for the current input
      * refresh():               incremental index update, cache dropped
      * shutdown():              release everything

    One query at a time per Engine: the history cache is mutated in place.
    """

    # ------------- lifecycle -------------

    def __init__(self, table: Optional[RomanizationTable] = None) -> None:
        self.table = table
        self.index: Optional[ItemIndex] = None
        self.empty_suggestions: Optional[EmptySuggestions] = None
        self.use_path: Optional[bool] = None
        self._cache: Optional[HistoryNode] = None

    def _ensure_table(self, scheme: Optional[str]) -> RomanizationTable:
        if self.table is None:
            scheme = scheme or CFG.DOUBLE_PINYIN
            log.info("Initializing romanization table: %s (scheme=%s)", CFG.TABLE_SOURCE, scheme)
            self.table = make_table(CFG.TABLE_SOURCE, scheme=scheme)
        return self.table

    @staticmethod
    def _verbose(verbose: bool) -> None:
        if verbose:
            logging.basicConfig(level=logging.INFO)
            os.environ["FUZZY_PINYIN_VERBOSE"] = "1"

    # /* ~~~ Index files (or folders) under the given roots ~~~ */
    def build_files(
        self,
        roots: Iterable[str],
        *,
        folders: bool = False,                      # index folders instead of files
        scheme: Optional[str] = None,               # "full" | "xiaohe" | "microsoft" | "abc"
        file_exts: Optional[List[str]] = None,
        show_attachments: Optional[bool] = None,
        show_all_file_types: Optional[bool] = None,
        path_search: Optional[bool] = None,
        verbose: bool = False,
    ) -> None:
        self._verbose(verbose)

        # Optionally override file selection config for this build
        if file_exts is not None:
            CFG.FILE_EXTS = [e if e.startswith(".") else "." + e for e in file_exts]
        if show_attachments is not None:
            CFG.SHOW_ATTACHMENTS = bool(show_attachments)
        if show_all_file_types is not None:
            CFG.SHOW_ALL_FILE_TYPES = bool(show_all_file_types)
        if path_search is not None:
            self.use_path = bool(path_search)

        roots = list(roots)
        if not roots:
            raise ValueError("build_files(): at least one root folder is required")
        for r in roots:
            if not os.path.isdir(r):
                raise FileNotFoundError(r)

        table = self._ensure_table(scheme)
        index = FolderIndex(roots, table) if folders else FileIndex(roots, table)
        log.info("Scanning %s for %s", roots, index.id)
        IndexManager([index]).load()
        self.attach(index)

    # /* ~~~ Index plain names: tags, commands, suggester choices ~~~ */
    def build_names(
        self,
        names: NameSource,
        *,
        id: str = "name",
        scheme: Optional[str] = None,
        verbose: bool = False,
    ) -> None:
        self._verbose(verbose)
        index = NameIndex(id, names, self._ensure_table(scheme))
        IndexManager([index]).load()
        self.attach(index)

    def attach(self, index: ItemIndex, *, empty_suggestions: Optional[EmptySuggestions] = None) -> None:
        """Use an already-built index; drops the history cache."""
        self.index = index
        if empty_suggestions is not None:
            self.empty_suggestions = empty_suggestions
        self._cache = None
        log.info("Engine attached to %s index: items=%d", index.id, len(index.items))

    # ------------- query -------------

    # /* ~~~ Rank the index for the current input (one call per keystroke) ~~~ */
    def complete(self, query: str, *, top_k: Optional[int] = None) -> List[MatchOutcome]:
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build_files(), build_names() or attach() first.")
        rows, self._cache = match_query(
            query,
            self._cache,
            self.index.items,
            empty_suggestions=self.empty_suggestions,
            use_path=CFG.PATH_SEARCH if self.use_path is None else self.use_path,
            top_k=top_k,
        )
        return rows

    def refresh(self) -> bool:
        """Incrementally update the index from its source; cached subsets are dropped."""
        if self.index is None:
            raise RuntimeError("Engine not initialized. Call build_files(), build_names() or attach() first.")
        changed = self.index.update()
        self.reset()
        return changed

    def reset(self) -> None:
        self._cache = None

    # ------------- teardown -------------

    def shutdown(self) -> None:
        self.index = None
        self._cache = None
        log.info("Engine shutdown complete")
