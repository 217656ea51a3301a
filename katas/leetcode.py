"""Classic interview problems: two-sum, palindromes, division, permutations."""

from itertools import combinations, permutations

_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1


def two_sum1(nums, target) -> list[int]:
    """Indices [i, j], i < j, of the first pair summing to target."""
    for (i, a), (j, b) in combinations(enumerate(nums), 2):
        if a + b == target:
            return [i, j]
    raise ValueError(f"no pair sums to {target}")


def two_sum2(nums, target) -> list[int]:
    """Indices [later, earlier] of a pair summing to target, in one pass."""
    seen: dict[int, int] = {}
    for i, num in enumerate(nums):
        j = seen.get(target - num)
        if j is not None:
            return [i, j]
        seen[num] = i
    raise ValueError(f"no pair sums to {target}")


def is_palindrome_number(x: int) -> bool:
    """True when the decimal text of x reads the same both ways."""
    digits = str(x)
    half = len(digits) // 2
    return all(a == b for a, b in zip(digits[:half], reversed(digits)))


def is_palindrome_number_fastest(x: int) -> bool:
    """True when the decimal text of x equals its reverse."""
    digits = str(x)
    return digits == digits[::-1]


def divide(x1: int, x2: int) -> int:
    """32-bit integer division truncating toward zero, saturating on overflow."""
    if x1 == _I32_MIN and x2 == -1:
        return _I32_MAX
    quotient = abs(x1) // abs(x2)
    return quotient if (x1 >= 0) == (x2 >= 0) else -quotient


def permute(nums) -> list[list[int]]:
    """All orderings of nums, in positional lexicographic order."""
    return [list(p) for p in permutations(nums)]


def multiply(s1: str, s2: str) -> str:
    """Product of two non-negative decimal strings, as a decimal string."""
    for text in (s1, s2):
        if not text or not text.isascii() or not text.isdigit():
            raise ValueError(f"not a decimal number: {text!r}")
    return str(int(s1) * int(s2))