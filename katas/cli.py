"""Command line entry point: prints the prime fourth powers up to 2**64 - 1."""

import argparse

from katas.kyu5 import solution

_U64_MAX = 2**64 - 1


def main(argv=None) -> int:
    """Print the fourth powers of primes between 0 and the 64-bit limit."""
    parser = argparse.ArgumentParser(
        prog="katas",
        description="Print the fourth powers of primes up to 2**64 - 1.",
    )
    parser.parse_args(argv)
    print(solution(0, _U64_MAX))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())