from hypothesis import given
from hypothesis import strategies as st

from dsakit.sorting import bubble_sort, insertion_sort, selection_sort

int_lists = st.lists(st.integers(min_value=-1000, max_value=1000), max_size=40)


@given(values=int_lists)
def test_matches_builtin_sorted(values):
    expected = sorted(values)
    assert bubble_sort(values) == expected
    assert insertion_sort(values) == expected
    assert selection_sort(values) == expected


@given(values=int_lists)
def test_input_not_mutated(values):
    original = list(values)
    bubble_sort(values)
    assert values == original
    insertion_sort(values)
    assert values == original
    selection_sort(values)
    assert values == original


def test_empty_and_single():
    assert bubble_sort([]) == []
    assert bubble_sort([7]) == [7]
    assert insertion_sort([]) == []
    assert insertion_sort([7]) == [7]
    assert selection_sort([]) == []
    assert selection_sort([7]) == [7]


def test_source_example_array():
    # The fixed array from the selection sort program (last slot zero-initialised).
    data = [5, 2, 6, 9, 7, 15, 12, 9, 10, 0]
    expected = [0, 2, 5, 6, 7, 9, 9, 10, 12, 15]
    assert bubble_sort(data) == expected
    assert insertion_sort(data) == expected
    assert selection_sort(data) == expected


def test_accepts_any_iterable():
    assert bubble_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert insertion_sort(iter((3, 1, 2))) == [1, 2, 3]
    assert selection_sort(iter((3, 1, 2))) == [1, 2, 3]


@given(values=int_lists)
def test_already_sorted_unchanged(values):
    ordered = sorted(values)
    assert bubble_sort(ordered) == ordered
    assert insertion_sort(ordered) == ordered
    assert selection_sort(ordered) == ordered