import random

import pytest

from dsakit.knapsack import knapsack_memoized, knapsack_recursive, knapsack_tabulated


def test_source_example():
    weights = [10, 20, 30, 10]
    values = [10, 20, 30, 420]
    assert knapsack_recursive(weights, values, 40) == 450
    assert knapsack_memoized(weights, values, 40) == 450
    assert knapsack_tabulated(weights, values, 40) == 450


def test_zero_capacity_and_no_items():
    assert knapsack_recursive([3, 4], [5, 6], 0) == 0
    assert knapsack_memoized([3, 4], [5, 6], 0) == 0
    assert knapsack_tabulated([3, 4], [5, 6], 0) == 0
    assert knapsack_recursive([], [], 10) == 0
    assert knapsack_memoized([], [], 10) == 0
    assert knapsack_tabulated([], [], 10) == 0


def test_single_item():
    assert knapsack_recursive([5], [9], 4) == 0
    assert knapsack_memoized([5], [9], 4) == 0
    assert knapsack_tabulated([5], [9], 4) == 0
    assert knapsack_recursive([5], [9], 5) == 9
    assert knapsack_memoized([5], [9], 5) == 9
    assert knapsack_tabulated([5], [9], 5) == 9


def test_solvers_agree_on_random_inputs():
    rng = random.Random(3)
    for _ in range(50):
        count = rng.randint(0, 10)
        weights = [rng.randint(1, 15) for _ in range(count)]
        values = [rng.randint(0, 30) for _ in range(count)]
        capacity = rng.randint(0, 40)
        recursive = knapsack_recursive(weights, values, capacity)
        assert knapsack_memoized(weights, values, capacity) == recursive
        assert knapsack_tabulated(weights, values, capacity) == recursive
        assert recursive <= sum(values)


def test_monotonic_in_capacity():
    weights = [3, 4, 5, 9]
    values = [4, 5, 7, 12]
    memoized = [knapsack_memoized(weights, values, capacity) for capacity in range(25)]
    tabulated = [knapsack_tabulated(weights, values, capacity) for capacity in range(25)]
    assert memoized == sorted(memoized)
    assert tabulated == sorted(tabulated)
    assert memoized[-1] == sum(values)
    assert tabulated[-1] == sum(values)


def test_mismatched_lengths():
    with pytest.raises(ValueError):
        knapsack_recursive([1, 2], [3], 5)
    with pytest.raises(ValueError):
        knapsack_memoized([1, 2], [3], 5)
    with pytest.raises(ValueError):
        knapsack_tabulated([1, 2], [3], 5)


def test_negative_capacity():
    with pytest.raises(ValueError):
        knapsack_recursive([1], [1], -1)
    with pytest.raises(ValueError):
        knapsack_memoized([1], [1], -1)
    with pytest.raises(ValueError):
        knapsack_tabulated([1], [1], -1)


def test_non_positive_weight():
    with pytest.raises(ValueError):
        knapsack_recursive([0, 2], [1, 1], 3)
    with pytest.raises(ValueError):
        knapsack_memoized([0, 2], [1, 1], 3)
    with pytest.raises(ValueError):
        knapsack_tabulated([0, 2], [1, 1], 3)