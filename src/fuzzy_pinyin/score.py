from __future__ import annotations
import math
from typing import Sequence, Tuple

from . import config as CFG


def covered(ranges: Sequence[Tuple[int, int]]) -> int:
    return sum(end - start + 1 for start, end in ranges)


def score(ranges: Sequence[Tuple[int, int]], source_length: int) -> float:
    """
    Rank one match (higher is better):
      SCORE_COVERAGE / (source_length - covered)   more of the text matched
      + SCORE_HEAD if the match starts at offset 0
      + SCORE_FRAGMENTS / number of ranges         fewer, longer runs

    A match covering the whole text would divide by zero; it is scored
    math.inf instead, which sorts above every finite score.
    """
    if not ranges:
        return 0.0
    gap = source_length - covered(ranges)
    if gap <= 0:
        return math.inf
    s = CFG.SCORE_COVERAGE / gap
    if ranges[0][0] == 0:
        s += CFG.SCORE_HEAD
    s += CFG.SCORE_FRAGMENTS / len(ranges)
    return float(s)
