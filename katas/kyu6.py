"""Assorted string and number puzzles."""

import math
from collections import Counter
from functools import reduce
from itertools import zip_longest
from operator import xor

_MASK64 = (1 << 64) - 1
_U16_MAX = 0xFFFF

_MORSE = {
    ".-": "A", "-...": "B", "-.-.": "C", "-..": "D", ".": "E", "..-.": "F",
    "--.": "G", "....": "H", "..": "I", ".---": "J", "-.-": "K", ".-..": "L",
    "--": "M", "-.": "N", "---": "O", ".--.": "P", "--.-": "Q", ".-.": "R",
    "...": "S", "-": "T", "..-": "U", "...-": "V", ".--": "W", "-..-": "X",
    "-.--": "Y", "--..": "Z",
    "-----": "0", ".----": "1", "..---": "2", "...--": "3", "....-": "4",
    ".....": "5", "-....": "6", "--...": "7", "---..": "8", "----.": "9",
    ".-.-.-": ".", "--..--": ",", "..--..": "?", ".----.": "'", "-.-.--": "!",
    "-..-.": "/", "-.--.": "(", "-.--.-": ")", ".-...": "&", "---...": ":",
    "-.-.-.": ";", "-...-": "=", ".-.-.": "+", "-....-": "-", "..--.-": "_",
    ".-..-.": '"', "...-..-": "$", ".--.-.": "@", "...---...": "SOS",
}


def spin_words(words: str) -> str:
    """Reverse every space-separated word longer than four bytes."""
    return " ".join(
        word[::-1] if len(word.encode("utf-8")) > 4 else word
        for word in words.split(" ")
    )


def find_odd_set(arr) -> int:
    """Smallest value occurring an odd number of times."""
    odd = set()
    for value in arr:
        odd ^= {value}
    if not odd:
        raise ValueError("no value occurs an odd number of times")
    return min(odd)


def find_odd_xor(arr) -> int:
    """XOR of all values: the odd-occurring one when there is exactly one."""
    return reduce(xor, arr, 0)


def count_bits(n: int) -> int:
    """Number of set bits; negatives use 64-bit two's complement."""
    if n < 0:
        n &= _MASK64
    return bin(n).count("1")


def count_duplicates(text: str) -> int:
    """Count repeated pieces, where the pieces include an empty string at each end."""
    pieces = ["", *text.lower(), ""]
    return len(pieces) - len(set(pieces))


def count_duplicates_hashmap(text: str) -> int:
    """Number of distinct characters seen more than once, ignoring edge whitespace."""
    return sum(1 for n in Counter(text.strip().lower()).values() if n > 1)


def count_duplicates_one_line(text: str) -> int:
    """Number of distinct characters (case-insensitive) seen more than once."""
    return sum(1 for n in Counter(text.lower()).values() if n > 1)


_STEPS = {"n": (0, 1), "s": (0, -1), "w": (-1, 0), "e": (1, 0)}


def is_valid_walk(walk) -> bool:
    """A ten-step walk that ends where it started."""
    steps = list(walk)
    if len(steps) != 10:
        return False
    x = sum(_STEPS.get(step, (0, 0))[0] for step in steps)
    y = sum(_STEPS.get(step, (0, 0))[1] for step in steps)
    return x == 0 and y == 0


def alphabet_position(text: str) -> str:
    """Alphabet positions of the ASCII letters in text, space separated."""
    return " ".join(str(ord(c) - ord("a") + 1) for c in text.lower() if "a" <= c <= "z")


def persistence(num: int) -> int:
    """Multiplicative persistence: digit products needed to reach one digit."""
    steps = 0
    while num > 9:
        num = math.prod(int(d) for d in str(num))
        steps += 1
    return steps


def is_pangram(s: str) -> bool:
    """True when the text holds exactly 26 distinct letters."""
    return len({c for c in s.lower() if c.isalpha()}) == 26


def decode_morse(encoded: str) -> str:
    """Decode Morse code; letters split by spaces, words by two or more spaces."""
    words = []
    for word in encoded.split("  "):
        words.append("".join(_MORSE.get(code, "") for code in word.split()))
    return " ".join(words).strip()


def split_strings(s: str) -> list[str]:
    """Split into pairs of characters, padding the last pair with '_'."""
    chars = iter(s)
    return ["".join(pair) for pair in zip_longest(chars, chars, fillvalue="_")]


def find_number(start: int, stop: int, res: str) -> list[int]:
    """Numbers from start to stop (inclusive) whose decimal form occurs in res."""
    return [x for x in range(start, stop + 1) if str(x) in res]


def compute_depth(n: int) -> int:
    """One less than the number of multiples of n needed to see all ten digits."""
    if n < 1:
        raise ValueError("n must be positive")
    digits: set[str] = set()
    depth = 0
    while len(digits) < 10:
        depth += 1
        multiple = n * depth
        if multiple > _U16_MAX:
            raise OverflowError(f"{n} * {depth} exceeds 16 bits")
        digits.update(str(multiple))
    return depth - 1


def _is_prime(n: int) -> bool:
    if n < 2:
        return False
    if n == 2:
        return True
    if n % 2 == 0:
        return False
    return all(n % d for d in range(3, math.isqrt(n) + 1, 2))


def _sum_squares(n: int) -> int:
    return sum(int(d) ** 2 for d in str(n))


def _is_happy(n: int) -> bool:
    seen = set()
    while n != 1 and n not in seen:
        seen.add(n)
        n = _sum_squares(n)
    return n == 1


def prime_reduction(a: int, b: int) -> int:
    """Count primes in [a, b) whose digit-square chain reaches 1."""
    return sum(1 for x in range(a, b) if _is_prime(x) and _is_happy(x))