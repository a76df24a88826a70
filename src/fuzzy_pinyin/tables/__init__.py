"""Romanization table providers and double pinyin conversion."""
from .api import RomanizationTable, make_table, table_from_mapping
from .dict_table import DictTable
from .double_pinyin import SCHEMES, full_to_double, get_scheme
from .scheme_table import SchemeTable

__all__ = [
    "RomanizationTable", "make_table", "table_from_mapping",
    "DictTable", "SchemeTable", "SCHEMES", "full_to_double", "get_scheme",
]
