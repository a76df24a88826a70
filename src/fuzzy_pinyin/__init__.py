"""
Fuzzy Pinyin Matcher

Find items (file names, tags, commands) written in Chinese by typing pinyin:
full syllables ("zhongwen"), initials ("zw"), a mix ("zhongw"), an unfinished
last syllable ("zhongwe"), or a double pinyin scheme code.

Results are re-ranked on every keystroke. A per-keystroke history cache
remembers which items still matched each query prefix, so narrowing a query
only re-scans the previous hits.

Example Usage:
    from fuzzy_pinyin import Engine

    eng = Engine()
    eng.build_names(["中文", "标签", "readme"], id="tag")
    for hit in eng.complete("zw"):
        print(hit.score, hit.item.name, hit.ranges)
"""

# src/fuzzy_pinyin/__init__.py
from .align import align
from .cache import HistoryNode, walk
from .engine import Engine
from .index import FileIndex, FolderIndex, IndexManager, ItemIndex, NameIndex
from .models import Item, MatchOutcome, RomanizedText, RomanizedUnit
from .romanize import build, concat, expand_ranges, to_ranges
from .score import score
from .search import match_item, match_query
from .tables import DictTable, full_to_double, make_table

__version__ = "1.0.0"
__all__ = [
    "Engine", "match_query", "match_item", "align", "score",
    "build", "concat", "to_ranges", "expand_ranges",
    "HistoryNode", "walk",
    "Item", "MatchOutcome", "RomanizedText", "RomanizedUnit",
    "ItemIndex", "NameIndex", "FileIndex", "FolderIndex", "IndexManager",
    "make_table", "DictTable", "full_to_double",
]
