"""Entry-level string, number and list puzzles."""

import math
import re
import struct

_I8_MAX = 127
_I32_MIN = -(2**31)
_I32_MAX = 2**31 - 1
_U32_MAX = 2**32 - 1

_BINARY = re.compile(r"[+-]?[01]+")
_DECIMAL = re.compile(r"[+-]?[0-9]+")
_VOWELS = frozenset("aeiouAEIOU")
_PLAYER_ONE_WINS = {("scissors", "paper"), ("paper", "rock"), ("rock", "scissors")}


def _check_i32(value: int, text: str) -> int:
    if not _I32_MIN <= value <= _I32_MAX:
        raise ValueError(f"number out of 32-bit range: {text!r}")
    return value


def _trunc_div(a: int, b: int) -> int:
    quotient = abs(a) // abs(b)
    return quotient if (a >= 0) == (b >= 0) else -quotient


def _trunc_rem(a: int, b: int) -> int:
    return a - b * _trunc_div(a, b)


def _ascii_upper(c: str) -> str:
    return c.upper() if c.isascii() else c


def abbrev_name(name: str) -> str:
    """Initials of a two-word name, e.g. 'Sam Harris' -> 'S.H'."""
    parts = name.split(" ")
    if len(parts) < 2 or not parts[0] or not parts[1]:
        raise ValueError(f"expected two space-separated words: {name!r}")
    return f"{_ascii_upper(parts[0][0])}.{_ascii_upper(parts[1][0])}"


def slice_plus_slice(x, y) -> int:
    """Sum of all values of both sequences."""
    return sum(x) + sum(y)


def bin_to_decimal(text: str) -> int:
    """Parse a binary string into a 32-bit signed integer."""
    if not _BINARY.fullmatch(text):
        raise ValueError(f"invalid binary number: {text!r}")
    return _check_i32(int(text, 2), text)


def bonus_time(s: int, bonus: bool) -> str:
    """Salary in yen, ten times over when a bonus is due."""
    amount = s * 10 if bonus else s
    return "¥" + str(amount)


def bonus_time2(s: int, b: bool) -> str:
    """Same as bonus_time, written as a single format."""
    return f"¥{s * 10 if b else s}"


def contamination(text: str, character: str) -> str:
    """Replace the text by character repeated once per byte of text."""
    return character * len(text.encode("utf-8"))


def convert_to_i32(f: float) -> int:
    """Bit pattern of a 32-bit float read as a signed 32-bit integer."""
    (bits,) = struct.unpack("<i", struct.pack("<f", f))
    return bits


def correct_tail(body: str, tail: str) -> bool:
    """True when the character at the body's last byte position equals tail."""
    if not body:
        raise ValueError("body must not be empty")
    chars = list(body)
    index = len(body.encode("utf-8")) - 1
    if index >= len(chars):
        raise IndexError(f"index {index} out of range for {len(chars)} characters")
    return chars[index] == tail


def correct_tail_simplify(b: str, t: str) -> bool:
    """True when b ends with t."""
    return b.endswith(t)


def create_phone_number1(numbers) -> str:
    """Format digits as '(xxx) xxx-xxxx'."""
    parts = [str(n) for n in numbers]
    if len(parts) < 6:
        raise ValueError("at least six numbers are needed")
    return f"({''.join(parts[:3])}) {''.join(parts[3:6])}-{''.join(parts[6:])}"


def create_phone_number2(numbers) -> str:
    """Format digits as '(xxx) xxx-xxxx', slicing the joined text."""
    digits = "".join(str(n) for n in numbers)
    if len(digits) < 6:
        raise ValueError("at least six digits are needed")
    return f"({digits[:3]}) {digits[3:6]}-{digits[6:]}"


def digital_root(n: int) -> int:
    """Repeatedly sum decimal digits until a single digit remains."""
    while n > 9:
        n = sum(int(d) for d in str(n))
    return n


def digital_root_pp(n: int) -> int:
    """Digital root through the modulo-nine identity (truncating remainder)."""
    return _trunc_rem(n - 1, 9) + 1


def disemvowel(s: str) -> str:
    """Drop all ASCII vowels."""
    return "".join(c for c in s if c not in _VOWELS)


def double_char(s: str) -> str:
    """Write every character twice."""
    return "".join(c + c for c in s)


def double_char2(s: str) -> str:
    """Write every character twice, by repetition."""
    return "".join(c * 2 for c in s)


def fake_bin1(s: str) -> str:
    """Digits below 5 become '0', the others '1'."""
    return "".join("0" if c < "5" else "1" for c in s)


def fake_bin2(s: str) -> str:
    """Digits above 4 become '1', the others '0'."""
    return "".join("1" if c > "4" else "0" for c in s)


def find_average1(values) -> float:
    """Arithmetic mean, 0.0 for no values."""
    items = list(values)
    if not items:
        return 0.0
    return sum(items) / len(items)


def find_average2(values) -> float:
    """Arithmetic mean, 0.0 for no values."""
    items = list(values)
    return sum(items) / len(items) if items else 0.0


def find_difference(a, b) -> int:
    """Absolute difference of the volumes of two cuboids."""
    if len(a) != 3 or len(b) != 3:
        raise ValueError("each cuboid needs exactly three dimensions")
    return abs(math.prod(a) - math.prod(b))


def find_multiples(n: int, limit: int) -> list[int]:
    """Multiples of n from 1 up to limit inclusive."""
    return [i for i in range(1, limit + 1) if i % n == 0]


def first_non_consecutive(arr):
    """First value that jumps more than one above its predecessor, or None."""
    values = list(arr)
    if not values:
        raise ValueError("sequence must not be empty")
    for prev, current in zip(values, values[1:]):
        if current - prev > 1:
            return current
    return None


def flick_switch(items) -> list[bool]:
    """State of a switch, starting on, toggled by every 'flick'."""
    states = []
    on = True
    for item in items:
        if item == "flick":
            on = not on
        states.append(on)
    return states


def flick_switch2(items) -> list[bool]:
    """Same as flick_switch, as a generator pipeline."""

    def states():
        on = True
        for item in items:
            if item == "flick":
                on = not on
            yield on

    return list(states())


def html_special_chars(html: str) -> str:
    """Escape &, <, > and double quotes."""
    return (
        html.replace("&", "&amp;")
        .replace("<", "&lt;")
        .replace(">", "&gt;")
        .replace('"', "&quot;")
    )


def merge_arrays1(a1, a2) -> list[int]:
    """Sorted distinct values of both sequences."""
    merged: list[int] = []
    for value in [*a1, *a2]:
        if value not in merged:
            merged.append(value)
    return sorted(merged)


def merge_arrays2(a1, a2) -> list[int]:
    """Sorted distinct values of both sequences, through a set."""
    return sorted({*a1, *a2})


def _rounded_root(n: int) -> int:
    return math.floor(math.sqrt(n) + 0.5)


def nearest_sq1(n: int) -> int:
    """Nearest perfect square, saturating at the 32-bit unsigned limit."""
    root = _rounded_root(n)
    return min(root * root, _U32_MAX)


def nearest_sq2(n: int) -> int:
    """Nearest perfect square; raises when it does not fit in 32 bits."""
    square = _rounded_root(n) ** 2
    if square > _U32_MAX:
        raise OverflowError(f"square {square} exceeds 32 bits")
    return square


def is_palindrome(x: int) -> bool:
    """Compare last and leading digits pairwise; negatives are never palindromes."""
    if x < 0:
        return False
    scale = 10 ** (len(str(x)) - 1)
    while scale > 1:
        if x % 10 != x // scale % 10:
            return False
        x //= 10
        scale //= 100
    return True


def rps2(p1: str, p2: str) -> str:
    """Outcome of a rock-paper-scissors round."""
    if p1 == p2:
        return "Draw!"
    return "Player 1 won!" if (p1, p2) in _PLAYER_ONE_WINS else "Player 2 won!"


def sum_mix(a) -> int:
    """Sum of integers and integer strings."""
    total = 0
    for item in a:
        if isinstance(item, str):
            if not _DECIMAL.fullmatch(item):
                raise ValueError(f"not an integer: {item!r}")
            item = _check_i32(int(item), item)
        total += item
    return total


def _i8_spread(low: int, high: int) -> int:
    spread = high - low
    if spread > _I8_MAX:
        raise OverflowError(f"difference {spread} exceeds 8 bits")
    return spread


def sum_of_differences1(arr):
    """Sum of differences between consecutive values sorted descending."""
    values = sorted(arr, reverse=True)
    if len(values) < 2:
        return None
    _i8_spread(values[-1], values[0])
    return sum(a - b for a, b in zip(values, values[1:]))


def sum_of_differences2(arr):
    """Sum of consecutive differences, which telescopes to max - min."""
    values = list(arr)
    if len(values) < 2:
        return None
    return _i8_spread(min(values), max(values))


def mt2(n: int) -> str:
    """Multiplication table of n from 1 to 10."""
    return "\n".join(f"{a} * {n} = {a * n}" for a in range(1, 11))


def points(games) -> int:
    """League points from 'x:y' results, comparing scores as text."""
    total = 0
    for game in games:
        ours, sep, theirs = game.partition(":")
        if not sep:
            raise ValueError(f"missing ':' in result {game!r}")
        if ours > theirs:
            total += 3
        elif ours == theirs:
            total += 1
    return total


def two_sort(arr) -> str:
    """Smallest string with '***' between its characters."""
    if not arr:
        raise ValueError("is_empty")
    smallest = min(arr)
    if not smallest.isascii():
        raise ValueError(f"cannot split non-ASCII text: {smallest!r}")
    return "***".join(smallest)


def get_average(marks) -> int:
    """Integer mean of marks, truncated toward zero."""
    values = list(marks)
    return _trunc_div(sum(values), len(values))


def next_id(ids) -> int:
    """Smallest non-negative id that is not in use."""
    used = set(ids)
    return next((i for i in range(len(ids)) if i not in used), len(ids))


def square_sum(values) -> int:
    """Sum of squares."""
    return sum(v * v for v in values)


def maps(values) -> list[int]:
    """Every value doubled."""
    return [v * 2 for v in values]