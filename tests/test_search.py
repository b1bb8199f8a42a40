import random

from sortlab.arrays import fill_inc
from sortlab.search import (
    SearchResult,
    bsearch1,
    bsearch2,
    bsearch_all1,
    bsearch_all2,
)


def _sorted_with_duplicates(seed):
    rng = random.Random(seed)
    return sorted(rng.randrange(20) for _ in range(60))


def test_bsearch1_finds_every_key_in_increasing_array():
    values = fill_inc(100)
    for key in values:
        result = bsearch1(values, key)
        assert values[result.index] == key
        assert result.indexes == [key - 1]


def test_bsearch1_missing_key():
    result = bsearch1(fill_inc(100), -100)
    assert result.index == -1
    assert result.indexes == []
    assert not result.found


def test_bsearch1_single_element_one_comparison():
    assert bsearch1([7], 7).comparisons == 1


def test_bsearch1_comparisons_bounded():
    values = fill_inc(1000)
    for key in (1, 500, 1000, 5000):
        assert bsearch1(values, key).comparisons <= 2 * 10


def test_bsearch2_returns_leftmost():
    values = [1, 1, 1, 2, 3]
    result = bsearch2(values, 1)
    assert result.indexes == [values.index(1)]


def test_bsearch2_matches_bsearch1_on_distinct_values():
    values = fill_inc(100)
    for key in (1, 37, 100, 0, 101):
        assert bsearch2(values, key).index == bsearch1(values, key).index


def test_bsearch2_empty():
    result = bsearch2([], 5)
    assert result == SearchResult([], 0)


def test_bsearch_all2_duplicates_at_front():
    values = fill_inc(100)
    values[:5] = [1] * 5
    result = bsearch_all2(values, 1)
    assert result.indexes == list(range(5))


def test_bsearch_all2_last_element():
    values = fill_inc(100)
    assert bsearch_all2(values, 100).indexes == [len(values) - 1]


def test_bsearch_all2_missing():
    assert bsearch_all2(fill_inc(100), -1).indexes == []


def test_bsearch_all_variants_agree():
    for seed in range(5):
        values = _sorted_with_duplicates(seed)
        for key in range(-1, 21):
            expected = [i for i, v in enumerate(values) if v == key]
            assert bsearch_all1(values, key).indexes == expected
            assert bsearch_all2(values, key).indexes == expected


def test_bsearch_all1_counts_more_comparisons_for_more_matches():
    values = [5] * 10
    one = bsearch_all1([5], 5)
    many = bsearch_all1(values, 5)
    assert many.comparisons > one.comparisons
    assert many.indexes == list(range(len(values)))