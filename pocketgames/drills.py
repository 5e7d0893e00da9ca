"""Small numeric and text exercises: searching, primes, sorting and lookups."""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence
from itertools import islice

_WEEKDAYS = ("星期一", "星期二", "星期三", "星期四", "星期五", "星期六", "星期日")
_INPUT_ERROR = "输入错误"


def binary_search(items: Sequence[int], key: int) -> int:
    """Return an index of ``key`` in the sorted ``items``; raise ValueError if absent."""
    left, right = 0, len(items) - 1
    while left <= right:
        mid = (left + right) // 2
        if items[mid] < key:
            left = mid + 1
        elif items[mid] > key:
            right = mid - 1
        else:
            return mid
    raise ValueError(f"{key!r} not found")


def is_prime(n: int) -> bool:
    """Trial division by every integer from 2 up to the square root of ``n``.

    Values below 4 have no candidate divisor and are reported as prime.
    """
    if n < 4:
        return True
    return all(n % j for j in range(2, math.isqrt(n) + 1))


def primes_between(start: int, stop: int) -> list[int]:
    """Return the numbers in ``start..stop`` (inclusive) that pass ``is_prime``."""
    return [n for n in range(start, stop + 1) if is_prime(n)]


def sort_descending(values: Iterable[int]) -> list[int]:
    """Return the values ordered from largest to smallest."""
    return sorted(values, reverse=True)


def alternating_harmonic(terms: int = 99) -> float:
    """Sum ``1 - 1/2 + 1/3 - ...`` over the first ``terms`` terms."""
    total = 0.0
    sign = 1
    for i in range(1, terms + 1):
        total += sign * (1.0 / i)
        sign = -sign
    return total


def string_length(text: str) -> int:
    """Count characters up to the first NUL character."""
    return len(text.split("\0", 1)[0])


def multiply_matrices(
    a: Sequence[Sequence[int]], b: Sequence[Sequence[int]]
) -> list[list[int]]:
    """Return the matrix product ``a`` times ``b``."""
    inner = len(b)
    cols = len(b[0]) if b else 0
    if any(len(row) != cols for row in b):
        raise ValueError("right matrix is not rectangular")
    if any(len(row) != inner for row in a):
        raise ValueError("matrix shapes do not match")
    columns = list(zip(*b)) if cols else []
    return [[sum(x * y for x, y in zip(row, col)) for col in columns] for row in a]


def add(x: int, y: int) -> int:
    """Return ``x + y``."""
    return x + y


def check_login(attempts: Iterable[str], password: str, limit: int = 3) -> bool:
    """Return True if one of the first ``limit`` attempts equals ``password``."""
    return any(attempt == password for attempt in islice(attempts, limit))


def weekday_name(day: int) -> str:
    """Return the name of weekday ``day`` (1 is Monday, 7 is Sunday)."""
    if not 1 <= day <= 7:
        raise ValueError(_INPUT_ERROR)
    return _WEEKDAYS[day - 1]


def day_kind(day: int) -> str:
    """Return whether ``day`` (1..7) is a working day or a rest day."""
    if 1 <= day <= 5:
        return "工作日"
    if day in (6, 7):
        return "休息日"
    raise ValueError(_INPUT_ERROR)