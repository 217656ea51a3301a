"""Beer pyramids, zero shuffling and prime fourth powers."""

import math
from itertools import accumulate, count, takewhile


def _budget(bonus: int, price: float) -> int:
    return int(bonus / price)


def beeramid(bonus: int, price: float) -> int:
    """Number of complete square levels of cans the bonus can buy."""
    bank = _budget(bonus, price)
    if bank <= 0:
        return 0
    levels = 0
    while bank > 0:
        levels += 1
        bank -= levels * levels
    return levels - 1 if bank < 0 else levels


def beeramid_one_line(bonus: int, price: float) -> int:
    """Same as beeramid, counting the running totals of square levels."""
    budget = _budget(bonus, price)
    totals = accumulate(k * k for k in count(1))
    return sum(1 for _ in takewhile(lambda total: total <= budget, totals))


def move_zeros(arr):
    """Move zeros to the end, keeping the order of the other values (stable sort)."""
    return sorted(arr, key=lambda x: x == 0)


def move_zeros_smart(arr):
    """Move zeros to the end by filtering and padding."""
    values = list(arr)
    non_zero = [x for x in values if x != 0]
    return non_zero + [0] * (len(values) - len(non_zero))


def _is_prime(x: int) -> bool:
    # 0 and 1 have no divisor in the trial range and therefore pass.
    if x == 2:
        return True
    return not any(x % d == 0 for d in range(2, math.isqrt(x) + 1))


def solution(n: int, m: int) -> list[int]:
    """Fourth powers of primes lying between n and m."""
    start = math.ceil(math.sqrt(math.sqrt(n)))
    end = math.floor(math.sqrt(math.sqrt(m)))
    return [x**4 for x in range(start, end + 1) if _is_prime(x)]