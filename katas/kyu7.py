"""Beginner-level string and number puzzles."""

import math
import re

_INT = re.compile(r"[+-]?[0-9]+")
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1

_NUMBERS = (
    "zero", "one", "two", "three", "four", "five", "six", "seven", "eight",
    "nine", "ten", "eleven", "twelve", "thirteen", "fourteen", "fifteen",
    "sixteen", "seventeen", "eighteen", "nineteen", "twenty",
)


def neutralise(s1: str, s2: str) -> str:
    """Keep matching characters, replace differing ones with '0'."""
    if len(s1.encode("utf-8")) != len(s2.encode("utf-8")):
        raise ValueError("strings must have equal length")
    return "".join(a if a == b else "0" for a, b in zip(s1, s2))


def square_digits(n: int) -> int:
    """Concatenate the squares of each digit."""
    return int("".join(str(int(d) ** 2) for d in str(n)))


def _parse_i32(text: str) -> int:
    if not _INT.fullmatch(text):
        raise ValueError(f"parse error: {text!r}")
    value = int(text)
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"parse error: {text!r}")
    return value


def high_and_low(nums: str) -> str:
    """'max min' of space-separated integers, bounded by ±10000 starting sentinels."""
    low, high = 10000, -10000
    for value in map(_parse_i32, nums.split(" ")):
        low = min(low, value)
        high = max(high, value)
    return f"{high} {low}"


def find_short(s: str) -> int:
    """Byte length of the shortest word, 10000 when there are none."""
    return min((len(w.encode("utf-8")) for w in s.split()), default=10000)


def row_sum_odd_numbers(n: int) -> int:
    """Sum of row n of the triangle of consecutive odd numbers."""
    return n**3


def open_or_senior(data) -> list[str]:
    """Classify (age, handicap) members as 'Senior' or 'Open'."""
    return ["Senior" if age >= 55 and handicap > 7 else "Open" for age, handicap in data]


def word_pattern(word: str) -> str:
    """Dot-separated first-appearance indices of each character."""
    order: dict[str, int] = {}
    return ".".join(str(order.setdefault(c, len(order))) for c in word.lower())


def wall_paper(l: float, w: float, h: float) -> str:
    """Rolls of wallpaper needed, in words, with 15% spare."""
    if l == 0.0 or w == 0.0 or h == 0.0:
        return _NUMBERS[0]
    p = 2.0 * l * h + 2.0 * w * h
    pp = p + p / 100.0 * 15.0
    rolls = pp / 5.2
    index = 0 if math.isnan(rolls) else max(0, math.ceil(rolls))
    if index >= len(_NUMBERS):
        raise ValueError(f"too many rolls: {index}")
    return _NUMBERS[index]


def get_sum(a: int, b: int) -> int:
    """Sum of all integers between a and b inclusive."""
    low, high = min(a, b), max(a, b)
    return (low + high) * (high - low + 1) // 2


def validate_pin(pin: str) -> bool:
    """A PIN is exactly 4 or 6 ASCII digits."""
    return len(pin.encode("utf-8")) in (4, 6) and all(c in "0123456789" for c in pin)


def is_leap_year(year: int) -> bool:
    """Gregorian leap-year rule."""
    return (year % 4 == 0 and year % 100 != 0) or year % 400 == 0


def descending_order(x: int) -> int:
    """Rearrange the digits in descending order."""
    return int("".join(sorted(str(x), reverse=True)))


def reverse_letters(s: str) -> str:
    """Letters of s in reverse order, everything else dropped."""
    return "".join(c for c in reversed(s) if c.isalpha())


def min_max(lst) -> tuple[int, int]:
    """(minimum, maximum) of a non-empty sequence."""
    return min(lst), max(lst)


def bingo(ticket, win: int) -> str:
    """'Winner!' when at least win entries lack their byte value in their string."""
    misses = sum(1 for text, code in ticket if code not in text.encode("utf-8"))
    return "Winner!" if misses >= win else "Loser!"


def max_rot(n: int) -> int:
    """Largest of the rotations of n by one, two and three digits."""
    digits = str(n)
    return max(int(digits[i:] + digits[:i]) for i in range(1, 4))


def my_languages(res: dict) -> list[str]:
    """Languages scoring at least 60, best first."""
    passed = [lang for lang, score in res.items() if score >= 60]
    return sorted(passed, key=lambda lang: -res[lang])


def is_triangle(a: int, b: int, c: int) -> bool:
    """True when the three positive sides form a triangle."""
    if a <= 0 or b <= 0 or c <= 0:
        return False
    return a + b > c and a + c > b and b + c > a