import pytest

from algopatterns.datastructures import (
    arrange_max_min,
    find_minimum,
    find_second_maximum,
    max_sum_sublist,
    max_sum_sublist_from_zero,
    merge_sorted,
    products_except_self,
    rearrange_array,
    rearrange_array_strict,
    remove_even,
    rotate_left,
    rotate_right,
    two_sum,
    two_sum_or_empty,
)


def test_remove_even():
    assert remove_even([1, 2, 3, 4, 5, 6]) == [1, 3, 5]


def test_remove_even_keeps_negative_odds():
    assert remove_even([-3, -2, 0, 7]) == [-3, 7]


def test_merge_sorted():
    assert merge_sorted([1, 2, 5, 6], [3, 4]) == [1, 2, 3, 4, 5, 6]


def test_merge_sorted_doc_example():
    assert merge_sorted([1, 2, 3, 4, 5], [1, 2, 6, 7]) == [1, 1, 2, 2, 3, 4, 5, 6, 7]


def test_merge_sorted_with_empty():
    assert merge_sorted([], [3, 4]) == [3, 4]
    assert merge_sorted([1, 2], []) == [1, 2]


def test_two_sum():
    assert two_sum([1, 2, 3, 4], 6) == (4, 2)


def test_two_sum_doc_example():
    assert two_sum([1, 2, 3, 4, 5], 5) == (3, 2)


def test_two_sum_not_found():
    with pytest.raises(ValueError, match="not found"):
        two_sum([1, 2], 10)


def test_two_sum_or_empty():
    assert two_sum_or_empty([1, 2, 3, 4], 6) == [4, 2]
    assert two_sum_or_empty([1, 2], 10) == []


def test_products_except_self():
    assert products_except_self([1, 2, 3, 4]) == [24, 12, 8, 6]
    assert products_except_self([0, 1, 2, 3]) == [6, 0, 0, 0]
    assert products_except_self([]) == []


def test_find_minimum():
    assert find_minimum([5, 2, 3]) == 2
    with pytest.raises(ValueError):
        find_minimum([])


def test_find_second_maximum():
    assert find_second_maximum([1, 2, 3, 4]) == 3
    with pytest.raises(ValueError):
        find_second_maximum([])


def test_rotate_right():
    assert rotate_right([1, 2, 3, 4], 1) == [4, 1, 2, 3]


def test_rotate_left():
    assert rotate_left([1, 2, 3, 4], 1) == [2, 3, 4, 1]


@pytest.mark.parametrize("k", [0, 1, 2, 3, 4, 7])
def test_rotations_are_inverse(k):
    data = [1, 2, 3, 4]
    assert rotate_left(rotate_right(data, k), k) == data


def test_rotate_full_cycle_is_identity():
    data = [1, 2, 3, 4, 5]
    assert rotate_right(data, len(data)) == data


def test_rotate_empty_raises():
    with pytest.raises(ValueError):
        rotate_right([], 1)
    with pytest.raises(ValueError):
        rotate_left([], 1)


def test_rearrange_array_puts_negatives_first():
    result = rearrange_array([1, -2, 3, 4])
    assert result[0] == -2
    assert sorted(result) == sorted([1, -2, 3, 4])
    assert result[1:] == [1, 3, 4]


def test_rearrange_array_zero_placement():
    assert rearrange_array([0, -1])[0] == -1
    assert rearrange_array_strict([5, 0])[0] == 0


def test_arrange_max_min():
    assert arrange_max_min([1, 2, 3, 4, 5]) == [5, 1, 4, 2, 3]
    assert arrange_max_min([]) == []


def test_max_sum_sublist():
    assert max_sum_sublist([-2, 10, 7, -5, 15, 6]) == ([10, 7, -5, 15, 6], 33)


def test_max_sum_sublist_empty():
    with pytest.raises(ValueError):
        max_sum_sublist([])


def test_max_sum_sublist_from_zero():
    assert max_sum_sublist_from_zero([-2, 10, 7, -5, 15, 6]) == ([10, 7, -5, 15, 6], 33)
    assert max_sum_sublist_from_zero([]) == ([], 0)