from hypothesis import given
from hypothesis import strategies as st

from dsakit.two_pointers import (
    pair_with_difference,
    pair_with_sum,
    segregate_binary,
    three_sum,
    three_sum_binary,
    three_sum_brute,
    trapped_water,
    trapped_water_peak,
)

small = st.integers(min_value=-50, max_value=50)


def _check_triple(found, values, target):
    assert found is not None
    assert sum(found) == target
    assert all(found.count(v) <= values.count(v) for v in found)


@given(values=st.lists(st.sampled_from([0, 1]), max_size=40))
def test_segregate_binary_sorts_bits(values):
    result = segregate_binary(values)
    assert result == sorted(values)
    assert result.count(0) == values.count(0)


@given(values=st.lists(st.sampled_from([0, 1]), max_size=40))
def test_segregate_binary_keeps_input(values):
    original = list(values)
    segregate_binary(values)
    assert values == original


@given(data=st.data(), values=st.lists(small, min_size=2, max_size=25))
def test_pair_with_sum_finds_existing(data, values):
    values.sort()
    i, j = sorted(data.draw(st.lists(st.integers(0, len(values) - 1), min_size=2, max_size=2, unique=True)))
    target = values[i] + values[j]
    found = pair_with_sum(values, target)
    assert found is not None
    assert sum(found) == target
    assert all(v in values for v in found)


@given(values=st.lists(small, max_size=25))
def test_pair_with_sum_missing(values):
    values.sort()
    assert pair_with_sum(values, 1000) is None


@given(data=st.data(), values=st.lists(small, min_size=2, max_size=25))
def test_pair_with_difference_finds_existing(data, values):
    values.sort()
    i, j = sorted(data.draw(st.lists(st.integers(0, len(values) - 1), min_size=2, max_size=2, unique=True)))
    target = values[j] - values[i]
    found = pair_with_difference(values, target)
    assert found is not None
    high, low = found
    assert high - low == target


def test_pair_with_difference_needs_two_elements():
    assert pair_with_difference([5], 0) is None
    assert pair_with_difference([1, 2, 3], 1000) is None


@given(data=st.data(), values=st.lists(small, min_size=3, max_size=15))
def test_three_sum_finds_existing(data, values):
    values.sort()
    idx = data.draw(st.lists(st.integers(0, len(values) - 1), min_size=3, max_size=3, unique=True))
    target = sum(values[k] for k in idx)
    _check_triple(three_sum_brute(values, target), values, target)
    _check_triple(three_sum_binary(values, target), values, target)
    _check_triple(three_sum(values, target), values, target)


@given(values=st.lists(small, min_size=3, max_size=15))
def test_three_sum_missing(values):
    values.sort()
    target = sum(values[-3:]) + 1
    assert three_sum_brute(values, target) is None
    assert three_sum_binary(values, target) is None
    assert three_sum(values, target) is None


def test_three_sum_too_short():
    assert three_sum_brute([1, 2], 3) is None
    assert three_sum_binary([1, 2], 3) is None
    assert three_sum([1, 2], 3) is None


@given(heights=st.lists(st.integers(min_value=0, max_value=30), max_size=30))
def test_water_methods_agree(heights):
    assert trapped_water(heights) == trapped_water_peak(heights)


@given(heights=st.lists(st.integers(min_value=0, max_value=30), max_size=30))
def test_monotonic_holds_no_water(heights):
    ascending = sorted(heights)
    descending = sorted(heights, reverse=True)
    assert trapped_water(ascending) == 0
    assert trapped_water(descending) == 0
    assert trapped_water_peak(ascending) == 0
    assert trapped_water_peak(descending) == 0


@given(heights=st.lists(st.integers(min_value=0, max_value=30), max_size=30))
def test_water_bounded(heights):
    top = max(heights, default=0)
    bound = sum(top - h for h in heights)
    assert 0 <= trapped_water(heights) <= bound
    assert 0 <= trapped_water_peak(heights) <= bound


def test_classic_example():
    heights = [0, 1, 0, 2, 1, 0, 1, 3, 2, 1, 2, 1]
    assert trapped_water(heights) == 6
    assert trapped_water_peak(heights) == 6


def test_empty_heights():
    assert trapped_water([]) == 0
    assert trapped_water_peak([]) == 0


@given(depth=st.integers(min_value=0, max_value=20), wall=st.integers(min_value=20, max_value=40))
def test_single_basin(depth, wall):
    assert trapped_water([wall, depth, wall]) == wall - depth
    assert trapped_water_peak([wall, depth, wall]) == wall - depth