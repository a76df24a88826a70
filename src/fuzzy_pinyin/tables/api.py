# fuzzy_pinyin/tables/api.py
from __future__ import annotations
import json
import os
import logging
from typing import Mapping, Optional, Protocol, Tuple

log = logging.getLogger(__name__)


class RomanizationTable(Protocol):
    # Every romanization registered for `ch`; empty means "not romanizable"
    def candidates_for(self, ch: str) -> Tuple[str, ...]: ...


def _read_json(path: str) -> dict:
    if not os.path.exists(path):
        raise FileNotFoundError(path)
    with open(path, "r", encoding="utf-8") as f:
        data = json.load(f)
    if not isinstance(data, dict):
        raise ValueError(f"{path}: expected a JSON object, got {type(data).__name__}")
    return data


def table_from_mapping(mapping: Mapping[str, object]) -> "RomanizationTable":
    """
    Accepts either dictionary layout:
      - {"zhong": "中钟忠", ...}  pinyin -> every character read that way
      - {"中": ["zhong"], ...}    character -> romanizations
    """
    from .dict_table import DictTable
    if mapping and all(isinstance(v, str) for v in mapping.values()):
        return DictTable.from_pinyin_map(mapping)  # type: ignore[arg-type]
    return DictTable(mapping)  # type: ignore[arg-type]


def make_table(source: str = "pypinyin://", *, scheme: str = "full",
               mapping: Optional[Mapping[str, object]] = None) -> RomanizationTable:
    """
    Factory:
      - pypinyin://          -> PypinyinTable (simplified + traditional)
      - json:///path.json    -> DictTable loaded from a JSON dictionary
      - memory://            -> DictTable over `mapping`
    A scheme other than "full" wraps the result in a SchemeTable.
    """
    from .double_pinyin import get_scheme

    scheme_dict = get_scheme(scheme)   # validate before doing any work

    if source.startswith("pypinyin://"):
        from .pypinyin_table import PypinyinTable
        table: RomanizationTable = PypinyinTable()
    elif source.startswith("json:///"):
        path = source.removeprefix("json:///")
        log.info("Loading romanization dictionary from %s", path)
        table = table_from_mapping(_read_json(path))
    elif source.startswith("memory://"):
        if mapping is None:
            raise ValueError("memory:// table requires a mapping")
        table = table_from_mapping(mapping)
    else:
        raise ValueError(f"Unsupported table source: {source}")

    if scheme_dict is not None:
        from .scheme_table import SchemeTable
        table = SchemeTable(table, scheme_dict)
    return table
