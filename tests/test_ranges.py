import random

from wordindex.ranges import flatten_ranges, get_range, pages_to_ranges


def test_pages_to_ranges_dedups_and_merges():
    assert pages_to_ranges([1, 1, 2, 2, 4, 4, 5, 5, 5, 5, 7, 7]) == [[1, 2], [4, 5], [7, 7]]


def test_pages_to_ranges_gaps_of_two_do_not_merge():
    assert pages_to_ranges([3, 3, 5, 5, 7, 7]) == [[3, 3], [5, 5], [7, 7]]


def test_pages_to_ranges_edge_cases():
    assert pages_to_ranges([]) == []
    assert pages_to_ranges([9]) == [[9, 9]]
    assert pages_to_ranges([1, 2, 3, 4, 5]) == [[1, 5]]


def test_pages_to_ranges_ignores_input_order():
    assert pages_to_ranges([7, 5, 1, 4, 2, 2]) == [[1, 2], [4, 5], [7, 7]]


def test_recompressing_flattened_ranges_is_identity():
    ranges = [[1, 2], [4, 5], [7, 7]]
    assert flatten_ranges(ranges) == [1, 2, 4, 5, 7]
    assert pages_to_ranges(flatten_ranges(ranges)) == ranges


def test_ranges_are_sorted_disjoint_and_minimal():
    rng = random.Random(7)
    for _ in range(200):
        pages = [rng.randint(1, 40) for _ in range(rng.randint(0, 30))]
        ranges = pages_to_ranges(pages)
        assert sorted(set(flatten_ranges(ranges))) == sorted(set(pages))
        for start, end in ranges:
            assert start <= end
        for (_, b), (c, _) in zip(ranges, ranges[1:]):
            assert c > b + 1
        present = set(pages)
        for i in present:
            if i + 1 in present:
                assert any(s <= i and i + 1 <= e for s, e in ranges)


def test_get_range_returns_first_range():
    assert get_range([1, 2, 4, 5, 7]) == [1, 2]
    assert get_range([7]) == [7, 7]
    assert get_range([3, 4, 5]) == [3, 5]
    assert get_range([]) == []
