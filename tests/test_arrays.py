import pytest

from algorecipes.arrays import (
    majority_element,
    max_profit,
    maximum_count,
    maximum_strong_pair_xor,
    merge_sorted,
    missing_number,
    move_zeroes,
    third_max,
)


@pytest.mark.parametrize(
    "nums, expected",
    [([3, 2, 3], 3), ([2, 2, 1, 1, 1, 2, 2], 2), ([7], 7), ([5, 5, 5, 1], 5)],
)
def test_majority_element(nums, expected):
    assert majority_element(nums) == expected


def test_majority_element_empty_raises():
    with pytest.raises(ValueError):
        majority_element([])


def test_max_profit_increasing_is_span():
    prices = [1, 4, 9, 12]
    assert max_profit(prices) == prices[-1] - prices[0]


def test_max_profit_decreasing_is_zero():
    assert max_profit([9, 7, 4, 1]) == 0


def test_max_profit_short_inputs():
    assert max_profit([]) == 0
    assert max_profit([5]) == 0


def test_max_profit_worked_example():
    assert max_profit([7, 1, 5, 3, 6, 4]) == 5


def test_maximum_count_ignores_zeroes():
    assert maximum_count([0, 0, 0]) == 0
    assert maximum_count([-2, -1, 0, 0, 1]) == 2
    assert maximum_count([-1, 0, 1, 2, 3]) == 3


def test_maximum_strong_pair_xor_single_value_pairs_with_itself():
    assert maximum_strong_pair_xor([5]) == 0


def test_maximum_strong_pair_xor_far_apart_values_do_not_pair():
    # 1 and 100 are not a strong pair, so only self-pairs count.
    assert maximum_strong_pair_xor([1, 100]) == 0


def test_maximum_strong_pair_xor_worked_example():
    assert maximum_strong_pair_xor([1, 2, 3, 4, 5]) == 7


def test_maximum_strong_pair_xor_result_comes_from_a_strong_pair():
    nums = [10, 14, 20, 25, 30, 31]
    result = maximum_strong_pair_xor(nums)
    assert any(
        x ^ y == result
        for x in nums
        for y in nums
        if abs(x - y) <= min(x, y)
    )


def test_merge_sorted_example_from_source():
    nums1 = [1, 2, 3, 0, 0, 0]
    nums2 = [2, 5, 6]
    merge_sorted(nums1, 3, nums2, 3)
    assert nums1 == sorted([1, 2, 3] + nums2)


def test_merge_sorted_into_empty_prefix():
    nums1 = [0, 0]
    merge_sorted(nums1, 0, [4, 9], 2)
    assert nums1 == [4, 9]


def test_merge_sorted_nothing_to_add():
    nums1 = [1, 3]
    merge_sorted(nums1, 2, [], 0)
    assert nums1 == [1, 3]


def test_merge_sorted_rejects_missing_room():
    with pytest.raises(ValueError):
        merge_sorted([1, 2], 2, [3], 1)


def test_merge_sorted_rejects_short_second_list():
    with pytest.raises(ValueError):
        merge_sorted([1, 0, 0], 1, [3], 2)


@pytest.mark.parametrize("missing", [0, 3, 6])
def test_missing_number_finds_removed_value(missing):
    nums = [value for value in range(7) if value != missing]
    nums.reverse()
    assert missing_number(nums) == missing


def test_missing_number_empty():
    assert missing_number([]) == 0


def test_move_zeroes_keeps_order_and_length():
    nums = [0, 1, 0, 3, 12]
    original = list(nums)
    move_zeroes(nums)
    assert nums == [v for v in original if v != 0] + [0, 0]
    assert len(nums) == len(original)


def test_move_zeroes_all_zero():
    nums = [0, 0, 0]
    move_zeroes(nums)
    assert nums == [0, 0, 0]


@pytest.mark.parametrize(
    "nums, expected",
    [([3, 2, 1], 1), ([1, 2], 2), ([2, 2, 3, 1], 1), ([1, 1, 2], 2), ([4], 4)],
)
def test_third_max(nums, expected):
    assert third_max(nums) == expected


def test_third_max_handles_negative_extremes():
    nums = [-(2**31), 1, 2]
    assert third_max(nums) == -(2**31)


def test_third_max_empty_raises():
    with pytest.raises(ValueError):
        third_max([])