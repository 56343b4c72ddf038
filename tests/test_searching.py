from collections import Counter

import pytest

from algorecipes.searching import (
    contains_duplicate,
    contains_nearby_duplicate,
    count_k_difference,
    find_disappeared_numbers,
    get_common,
    intersect,
    intersection,
)


@pytest.mark.parametrize(
    "nums, expected",
    [
        ([1, 2, 3, 1], True),
        ([1, 2, 3, 4], False),
        ([1, 1, 1, 3, 3, 4, 3, 2, 4, 2], True),
        ([], False),
        ([7], False),
        ([-5, 5, -5], True),
    ],
)
def test_contains_duplicate(nums, expected):
    assert contains_duplicate(nums) is expected


def test_contains_duplicate_large_distinct_input():
    assert contains_duplicate(range(-1000, 1000)) is False
    assert contains_duplicate([*range(1000), 999]) is True


@pytest.mark.parametrize(
    "nums, k, expected",
    [
        ([1, 2, 3, 1], 3, True),
        ([1, 0, 1, 1], 1, True),
        ([1, 2, 3, 1, 2, 3], 2, False),
        ([1, 2, 3, 1], 2, False),
        ([], 5, False),
        ([4, 4], 0, False),
    ],
)
def test_contains_nearby_duplicate(nums, k, expected):
    assert contains_nearby_duplicate(nums, k) is expected


def test_contains_nearby_duplicate_agrees_with_contains_duplicate_for_wide_window():
    for nums in ([1, 2, 3], [3, 1, 2, 3], [5, 5], [-1, 2, -1]):
        assert contains_nearby_duplicate(nums, len(nums)) == contains_duplicate(nums)


def test_count_k_difference_distinct_values_differing_by_k():
    nums = [1, 2]
    assert count_k_difference(nums, 1) == 1
    assert count_k_difference(nums, 2) == 0


def test_count_k_difference_zero_counts_equal_pairs():
    assert count_k_difference([4, 4, 4, 4], 0) == 6


def test_count_k_difference_negative_k_counts_nothing():
    assert count_k_difference([1, 2, 3], -1) == 0


def test_count_k_difference_is_order_independent():
    nums = [3, 2, 1, 5, 4, 1, 2, 3]
    for k in range(5):
        assert count_k_difference(nums, k) == count_k_difference(nums[::-1], k)
        assert count_k_difference(nums, k) == count_k_difference(sorted(nums), k)


def test_count_k_difference_over_all_k_counts_every_pair():
    nums = [1, 2, 2, 1, 5, 9, 3]
    total = sum(count_k_difference(nums, k) for k in range(max(nums) + 1))
    assert total == len(nums) * (len(nums) - 1) // 2


def test_find_disappeared_numbers_of_permutation_is_empty():
    assert find_disappeared_numbers([3, 1, 2, 5, 4]) == []


def test_find_disappeared_numbers_all_same():
    assert find_disappeared_numbers([1, 1, 1]) == [2, 3]


def test_find_disappeared_numbers_result_complements_input():
    nums = [4, 3, 2, 7, 8, 2, 3, 1]
    missing = find_disappeared_numbers(nums)
    assert missing == sorted(missing)
    assert set(missing).isdisjoint(nums)
    assert set(missing) | set(nums) == set(range(1, len(nums) + 1))


def test_find_disappeared_numbers_empty():
    assert find_disappeared_numbers([]) == []


@pytest.mark.parametrize("nums", [[0, 1], [1, 3], [-1, 2, 1]])
def test_find_disappeared_numbers_rejects_out_of_range(nums):
    with pytest.raises(ValueError):
        find_disappeared_numbers(nums)


def test_get_common_finds_smallest_shared_value():
    assert get_common([1, 2, 3], [2, 4]) == 2
    assert get_common([1, 2, 3, 6], [2, 3, 4, 5]) == 2


def test_get_common_unsorted_input():
    assert get_common([9, 7, 3, 5], [5, 8, 3]) == 3


def test_get_common_none_shared():
    assert get_common([1, 3, 5], [2, 4, 6]) == -1
    assert get_common([], [1]) == -1


def test_intersection_distinct_and_sorted():
    assert intersection([1, 2, 2, 1], [2, 2]) == [2]
    assert intersection([4, 9, 5], [9, 4, 9, 8, 4]) == [4, 9]


def test_intersection_with_itself_is_sorted_distinct_values():
    nums = [5, 3, 5, 1, 3]
    assert intersection(nums, nums) == [1, 3, 5]


def test_intersection_disjoint_is_empty():
    assert intersection([1, 2], [3, 4]) == []


def test_intersection_is_symmetric():
    a, b = [7, 1, 3, 3, 9], [3, 9, 9, 2, 7]
    assert intersection(a, b) == intersection(b, a)


def test_intersect_keeps_multiplicity():
    assert intersect([1, 2, 2, 1], [2, 2]) == [2, 2]


def test_intersect_follows_order_of_second_list():
    assert intersect([4, 9, 5], [9, 4, 9, 8, 4]) == [9, 4]


def test_intersect_is_sub_multiset_of_both():
    a = [1, 1, 2, 3, 3, 3, 5]
    b = [3, 1, 3, 4, 5, 5, 1, 1]
    result = Counter(intersect(a, b))
    assert not result - Counter(a)
    assert not result - Counter(b)
    assert set(result) == set(intersection(a, b))


def test_intersect_with_itself_returns_copy():
    nums = [2, 8, 2, 6]
    assert intersect(nums, nums) == nums


def test_intersect_empty():
    assert intersect([], [1, 2]) == []
    assert intersect([1, 2], []) == []