# fuzzy_pinyin/tables/double_pinyin.py
"""
Double pinyin ("shuangpin") schemes.

Each scheme maps one key to the initials (zh/ch/sh) and finals that key
types. A full syllable becomes two keys: the initial key, then the final key.
"""
from __future__ import annotations
from typing import Dict, List, Optional

SchemeDict = Dict[str, List[str]]

XIAOHE: SchemeDict = {
    "q": ["iu"],
    "w": ["ei"],
    "e": ["e"],
    "r": ["uan"],
    "t": ["ue", "ve"],
    "y": ["un"],
    "u": ["sh", "u"],
    "i": ["ch", "i"],
    "o": ["uo", "o"],
    "p": ["ie"],
    "a": ["a"],
    "s": ["iong", "ong"],
    "d": ["ai"],
    "f": ["en"],
    "g": ["eng"],
    "h": ["ang"],
    "j": ["an"],
    "k": ["ing", "uai"],
    "l": ["iang", "uang"],
    "z": ["ou"],
    "x": ["ia", "ua"],
    "c": ["ao"],
    "v": ["zh", "ui", "v"],
    "b": ["in"],
    "n": ["iao"],
    "m": ["ian"],
}

MICROSOFT: SchemeDict = {
    "q": ["iu"],
    "w": ["ia", "ua"],
    "e": ["e"],
    "r": ["uan", "er"],
    "t": ["ue"],
    "y": ["uai", "v"],
    "u": ["sh", "u"],
    "i": ["ch", "i"],
    "o": ["uo", "o"],
    "p": ["un"],
    "a": ["a"],
    "s": ["iong", "ong"],
    "d": ["uang", "iang"],
    "f": ["en"],
    "g": ["eng"],
    "h": ["ang"],
    "j": ["an"],
    "k": ["ao"],
    "l": ["ai"],
    ";": ["ing"],
    "z": ["ei"],
    "x": ["ie"],
    "c": ["iao"],
    "v": ["zh", "ui", "ve"],
    "b": ["ou"],
    "n": ["in"],
    "m": ["ian"],
}

ABC: SchemeDict = {
    "q": ["ei"],
    "w": ["ian"],
    "e": ["ch", "e"],
    "r": ["iu", "er"],
    "t": ["uang", "iang"],
    "y": ["ing"],
    "u": ["u"],
    "i": ["i"],
    "o": ["uo", "o"],
    "p": ["uan", "van"],
    "a": ["zh", "a"],
    "s": ["iong", "ong"],
    "d": ["ua", "ia"],
    "f": ["en"],
    "g": ["eng"],
    "h": ["ang"],
    "j": ["an"],
    "k": ["ao"],
    "l": ["ai"],
    "z": ["iao"],
    "x": ["ie"],
    "c": ["in", "uai"],
    "v": ["sh", "v"],
    "b": ["ou"],
    "n": ["un"],
    "m": ["ue", "ui"],
}

SCHEMES: Dict[str, Optional[SchemeDict]] = {
    "full": None,
    "xiaohe": XIAOHE,
    "microsoft": MICROSOFT,
    "abc": ABC,
}

_RETROFLEX = ("zh", "ch", "sh")


def _key_for(scheme: SchemeDict, part: str) -> Optional[str]:
    for key, parts in scheme.items():
        if part in parts:
            return key
    return None


def full_to_double(full: str, scheme: SchemeDict) -> str:
    """
    Convert one full pinyin syllable to its double pinyin code.

    >>> full_to_double("zhong", XIAOHE)
    'vs'
    >>> full_to_double("wen", XIAOHE)
    'wf'

    The initial is either a retroflex (zh/ch/sh → its key) or the first letter
    kept as-is. The rest maps to the key that lists it; a rest no key lists
    (zero-initial syllables such as "an") is kept verbatim.
    """
    if not full:
        return full
    if full.startswith(_RETROFLEX):
        head = _key_for(scheme, full[:2]) or full[:2]
        rest = full[2:]
    else:
        head = full[0]
        rest = full[1:]
    if not rest:
        return head
    return head + (_key_for(scheme, rest) or rest)


def get_scheme(name: str) -> Optional[SchemeDict]:
    """Scheme table by name; None for "full" (no conversion)."""
    try:
        return SCHEMES[name]
    except KeyError:
        raise ValueError(f"Unknown double pinyin scheme: {name!r} (choose from {sorted(SCHEMES)})")
