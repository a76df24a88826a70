from __future__ import annotations
import os
from typing import Callable, Dict, Iterable, List, Tuple

from . import config as CFG
from .models import Item
from .romanize import build, concat
from .tables.api import RomanizationTable

# Progress logging (set FUZZY_PINYIN_VERBOSE=1 to enable; read on every load)
VERBOSE_ENV = "FUZZY_PINYIN_VERBOSE"
PROGRESS_EVERY_FILES = 500


def _wanted(filename: str) -> bool:
    if CFG.SHOW_ALL_FILE_TYPES:
        return True
    ext = os.path.splitext(filename)[1].lower()
    if ext in CFG.FILE_EXTS:
        return True
    return CFG.SHOW_ATTACHMENTS and ext in CFG.ATTACHMENT_EXTS


def _walk(root: str) -> Iterable[Tuple[str, List[str], List[str]]]:
    """os.walk in a stable (sorted) order, skipping EXCLUDE_DIRS."""
    for dirpath, dirnames, filenames in os.walk(root):
        dirnames[:] = sorted(d for d in dirnames if d not in CFG.EXCLUDE_DIRS)
        yield dirpath, dirnames, sorted(filenames)


def iter_files(roots: Iterable[str]) -> Iterable[Tuple[str, str]]:
    """Yield (root, path) for every wanted file under each root."""
    for root in roots:
        root = os.path.abspath(root)
        for dirpath, _, filenames in _walk(root):
            for fn in filenames:
                if _wanted(fn):
                    yield root, os.path.join(dirpath, fn)


def iter_folders(roots: Iterable[str]) -> Iterable[Tuple[str, str]]:
    """Yield (root, path) for every folder under each root (roots excluded)."""
    for root in roots:
        root = os.path.abspath(root)
        for dirpath, dirnames, _ in _walk(root):
            for d in dirnames:
                yield root, os.path.join(dirpath, d)


def _rel(path: str, root: str) -> str:
    return os.path.relpath(path, root).replace("\\", "/")


def display_name(filename: str) -> str:
    """Markdown notes are shown without their extension; other files keep it."""
    if filename.lower().endswith(".md"):
        return filename[:-3]
    return filename


def file_item(root: str, path: str, table: RomanizationTable) -> Item:
    """
    name       display name of the file
    payload    path relative to its root (what callers open)
    path       "<folder>/<name>", the text path search highlights
    """
    rel = _rel(path, root)
    folder, filename = os.path.split(rel)
    name = display_name(filename)
    text = build(name, table)
    if folder:
        prefix = folder + "/"
        path_text = concat(build(prefix, table), text)
        shown = prefix + name
    else:
        path_text, shown = text, name
    return Item(name=name, text=text, payload=rel, path=shown, path_text=path_text)


def folder_item(root: str, path: str, table: RomanizationTable) -> Item:
    rel = _rel(path, root)
    text = build(rel, table)
    return Item(name=rel, text=text, payload=rel, path=rel, path_text=text)


def load_items(
    pairs: Iterable[Tuple[str, str]],
    make: Callable[[str, str], Item],
    *,
    label: str = "files",
) -> Dict[str, Item]:
    """Build one Item per (root, path), keyed by path, in scan order."""
    verbose = os.environ.get(VERBOSE_ENV) == "1"
    out: Dict[str, Item] = {}
    for root, path in pairs:
        out[path] = make(root, path)
        if verbose and len(out) % PROGRESS_EVERY_FILES == 0:
            print(f"[scanned] {label}={len(out):,}")
    if verbose:
        print(f"[done] {label}={len(out):,}")
    return out
