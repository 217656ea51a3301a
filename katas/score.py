"""Score of a string: sum of absolute differences of adjacent byte values."""


def score_of_string(s: str) -> int:
    """Sum of |a - b| over adjacent characters, each taken as its low byte."""
    if not s:
        raise ValueError("string must not be empty")
    codes = [ord(c) & 0xFF for c in s]
    return sum(abs(a - b) for a, b in zip(codes, codes[1:]))