import math

from fuzzy_pinyin.score import covered, score


def test_full_coverage_is_the_top_class():
    s = score([(0, 1)], 2)
    assert s == math.inf
    # above anything finite, including the best partial match
    assert s > score([(0, 0)], 2)
    assert sorted([score([(0, 0)], 2), s, 0.0], reverse=True)[0] == math.inf


def test_formula():
    assert covered([(0, 1), (4, 4)]) == 3
    assert score([(0, 0)], 2) == 40 + 8 + 20
    assert score([(1, 1)], 3) == 20 + 20
    assert score([(0, 0), (2, 2)], 4) == 20 + 8 + 10


def test_no_ranges_scores_zero():
    assert score([], 5) == 0.0


def test_more_coverage_never_scores_less():
    length = 12
    prev = -1.0
    for end in range(1, length):
        s = score([(1, end)], length)
        assert s >= prev
        prev = s


def test_more_fragments_never_scores_more():
    length = 20
    one = score([(2, 7)], length)
    two = score([(2, 4), (8, 10)], length)
    three = score([(2, 3), (6, 7), (10, 11)], length)
    assert one >= two >= three
