import math

import pytest

from pocketgames.drills import (
    add,
    alternating_harmonic,
    binary_search,
    check_login,
    day_kind,
    is_prime,
    multiply_matrices,
    primes_between,
    sort_descending,
    string_length,
    weekday_name,
)

ITEMS = [1, 2, 3, 4, 5, 6, 7, 8, 9, 10]


@pytest.mark.parametrize("key", ITEMS)
def test_binary_search_finds_each(key):
    assert binary_search(ITEMS, key) == ITEMS.index(key)


@pytest.mark.parametrize("key", [0, 11, -5])
def test_binary_search_missing_raises(key):
    with pytest.raises(ValueError):
        binary_search(ITEMS, key)


def test_binary_search_empty_raises():
    with pytest.raises(ValueError):
        binary_search([], 1)


def test_is_prime_examples():
    assert is_prime(97) is True
    assert is_prime(91) is False
    assert is_prime(100) is False


def test_primes_between_invariants():
    primes = primes_between(100, 200)
    assert primes == sorted(primes)
    assert all(100 <= p <= 200 and is_prime(p) for p in primes)
    assert 101 in primes and 199 in primes
    assert len(primes) == 21


def test_primes_between_empty_range():
    assert primes_between(200, 100) == []


def test_sort_descending():
    values = [5, 1, 3]
    result = sort_descending(values)
    assert result == [5, 3, 1]
    assert values == [5, 1, 3]


def test_sort_descending_is_permutation():
    values = [4, -2, 9, 4, 0]
    result = sort_descending(values)
    assert sorted(result) == sorted(values)
    assert all(a >= b for a, b in zip(result, result[1:]))


def test_alternating_harmonic_zero_terms():
    assert alternating_harmonic(0) == 0.0


def test_alternating_harmonic_brackets_log2():
    even = alternating_harmonic(98)
    odd = alternating_harmonic(99)
    assert even < math.log(2) < odd
    assert abs(alternating_harmonic() - odd) == 0


def test_alternating_harmonic_converges():
    assert abs(alternating_harmonic(99) - math.log(2)) < 1 / 99


def test_string_length():
    assert string_length("abc") == 3
    assert string_length("ab\0cd") == 2
    assert string_length("") == 0


def test_multiply_by_identity():
    a = [[1, 2, 3], [4, 5, 6]]
    identity = [[1, 0, 0], [0, 1, 0], [0, 0, 1]]
    assert multiply_matrices(a, identity) == a


def test_multiply_small_example():
    assert multiply_matrices([[1, 2], [3, 4]], [[5, 6], [7, 8]]) == [[19, 22], [43, 50]]


def test_multiply_shape_mismatch():
    with pytest.raises(ValueError):
        multiply_matrices([[1, 2]], [[1, 2]])


def test_multiply_ragged_right():
    with pytest.raises(ValueError):
        multiply_matrices([[1, 2]], [[1, 2], [3]])


def test_add():
    assert add(-4, 4) == 0
    assert add(7, 11) == add(11, 7)


def test_check_login_third_attempt():
    password = "password"
    assert check_login(["a", "b", "password"], password) is True


def test_check_login_too_late():
    password = "password"
    assert check_login(["a", "b", "c", "password"], password) is False


def test_check_login_no_attempts():
    password = "password"
    assert check_login([], password) is False


def test_check_login_custom_limit():
    password = "password"
    attempts = ["x", "y", "z", "password"]
    assert check_login(attempts, password, limit=4) is True
    assert check_login(attempts, password, limit=1) is False


def test_weekday_name():
    assert weekday_name(1) == "星期一"
    assert weekday_name(7) == "星期日"


@pytest.mark.parametrize("day", [0, 8, -1])
def test_weekday_name_invalid(day):
    with pytest.raises(ValueError, match="输入错误"):
        weekday_name(day)


@pytest.mark.parametrize("day,kind", [(1, "工作日"), (5, "工作日"), (6, "休息日"), (7, "休息日")])
def test_day_kind(day, kind):
    assert day_kind(day) == kind


@pytest.mark.parametrize("day", [0, 8])
def test_day_kind_invalid(day):
    with pytest.raises(ValueError, match="输入错误"):
        day_kind(day)