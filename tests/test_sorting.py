import pytest
from hypothesis import given
from hypothesis import strategies as st

from dsprimer.sorting import (
    bubble_sort,
    count_sort,
    insertion_sort,
    merge_sort,
    quick_sort,
    selection_sort,
)

SOURCE_ARRAYS = [
    [1, 2, 4, 5, 8],
    [12, 11, 13, 7, 5, 6, 7],
    [5, 1, 4, 2, 8],
    [5, 1, 4, 2, 8, 3, 6, 7],
    [8, 4, 7, 3, 10, 9],
]


@pytest.mark.parametrize("values", SOURCE_ARRAYS)
def test_source_arrays(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert count_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


def test_source_array_pinned_result():
    assert quick_sort([8, 4, 7, 3, 10, 9]) == [3, 4, 7, 8, 9, 10]
    assert count_sort([12, 11, 13, 7, 5, 6, 7]) == [5, 6, 7, 7, 11, 12, 13]


def test_empty_and_single():
    for result in (
        bubble_sort([]),
        count_sort([]),
        insertion_sort([]),
        merge_sort([]),
        quick_sort([]),
        selection_sort([]),
    ):
        assert result == []
    for result in (
        bubble_sort([3]),
        count_sort([3]),
        insertion_sort([3]),
        merge_sort([3]),
        quick_sort([3]),
        selection_sort([3]),
    ):
        assert result == [3]


def test_input_is_not_mutated():
    values = [12, 11, 13, 7, 5, 6, 7]
    copy = list(values)
    bubble_sort(values)
    count_sort(values)
    insertion_sort(values)
    merge_sort(values)
    quick_sort(values)
    selection_sort(values)
    assert values == copy


@given(values=st.lists(st.integers(min_value=-1000, max_value=1000)))
def test_comparison_sorts_match_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


def test_comparison_sorts_handle_strings():
    words = ["pear", "apple", "fig", "apple"]
    expected = ["apple", "apple", "fig", "pear"]
    assert bubble_sort(words) == expected
    assert insertion_sort(words) == expected
    assert merge_sort(words) == expected
    assert quick_sort(words) == expected
    assert selection_sort(words) == expected


def test_reverse_ordered_and_duplicates():
    values = [9, 9, 8, 7, 7, 7, 1, 0, 0]
    expected = [0, 0, 1, 7, 7, 7, 8, 9, 9]
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert merge_sort(values) == expected
    assert quick_sort(values) == expected
    assert selection_sort(values) == expected


@given(values=st.lists(st.integers(min_value=0, max_value=300)))
def test_count_sort_matches_sorted(values):
    assert count_sort(values) == sorted(values)


def test_count_sort_rejects_negative():
    with pytest.raises(ValueError):
        count_sort([3, -1, 2])


def test_sorts_accept_any_iterable():
    assert quick_sort(iter([3, 1, 2])) == [1, 2, 3]
    assert merge_sort((5, 4)) == [4, 5]