import pytest

from dsakit.hashing_problems import (
    count_distinct,
    count_subarrays_with_sum,
    intersection,
    is_anagram,
    itinerary,
    longest_zero_sum_subarray,
    majority_elements,
    union,
)


def test_count_distinct_all_different():
    values = [1, 2, 3, 4, 5, 6, 7]
    assert count_distinct(values) == len(values)


def test_count_distinct_ignores_repeats():
    values = [4, 9, 4, 2, 9]
    assert count_distinct(values * 3) == count_distinct(values)


def test_itinerary_follows_tickets():
    tickets = {"Goa": "Mumbai", "Mumbai": "Pune", "Pune": "panji", "panji": "Virar"}
    assert itinerary(tickets) == ["Goa", "Mumbai", "Pune", "panji", "Virar"]


def test_itinerary_visits_every_city_once():
    tickets = {"B": "C", "A": "B", "C": "D"}
    route = itinerary(tickets)
    assert route[0] == "A"
    assert set(route) == set(tickets) | set(tickets.values())
    assert all(tickets[a] == b for a, b in zip(route, route[1:]))


def test_itinerary_loop_is_rejected():
    with pytest.raises(ValueError):
        itinerary({"A": "B", "B": "A"})


def test_itinerary_empty():
    assert itinerary({}) == []


def test_count_subarrays_example():
    assert count_subarrays_with_sum([1, 2, 3, 4, 5], 3) == 2


def test_count_subarrays_whole_positive_run_once():
    values = [3, 1, 4, 1, 5]
    assert count_subarrays_with_sum(values, sum(values)) == 1
    assert count_subarrays_with_sum(values, sum(values) + 1) == 0


def test_longest_zero_sum_whole_sequence():
    values = [3, -1, -2, 5, -5]
    assert longest_zero_sum_subarray(values) == len(values)


def test_longest_zero_sum_none():
    assert longest_zero_sum_subarray([1, 2, 3]) == 0
    assert longest_zero_sum_subarray([]) == 0


def test_longest_zero_sum_example():
    assert longest_zero_sum_subarray([-1, -2, 3, 5, 4, 4, 434, 45, 5, 4]) == 3


def test_majority_elements_example():
    nums = [1, 1, 1, 1, 1, 1, 2, 3, 4, 4, 4, 4, 4, 4, 4]
    assert majority_elements(nums) == [1, 4]


def test_majority_elements_empty_and_single():
    assert majority_elements([]) == []
    assert majority_elements([7]) == [7]


def test_union_and_intersection():
    a = [1, 2, 3, 4, 5]
    b = [4, 5, 6, 7, 8]
    assert union(a, b) == [1, 2, 3, 4, 5, 6, 7, 8]
    assert intersection(a, b) == [4, 5]


def test_union_has_no_repeats():
    result = union([1, 1, 2], [2, 3, 3])
    assert len(result) == len(set(result))
    assert set(result) == {1, 2, 3}


def test_anagrams():
    assert is_anagram("race", "care")
    assert not is_anagram("aab", "abb")
    assert not is_anagram("race", "races")
    assert is_anagram("", "")