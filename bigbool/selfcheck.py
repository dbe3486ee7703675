"""Self-checks of the boolean vector operations, runnable as a command."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

from bigbool.vector import BigBool, equalize

_RESET = "\033[0m"
_RED = "\033[31m"
_GREEN = "\033[32m"

_LONG = "10101111010101110011111111011010101011101011010"


def _expect(failures: list[str], result: object, expected: str, what: str) -> None:
    got = str(result)
    if got != expected:
        failures.append(f"{what} - does not work correctly: {got} != {expected}")


def check_conversion() -> list[str]:
    """Check that strings survive a trip through a vector unchanged."""
    failures: list[str] = []
    for text in ("10110111", "1011", _LONG):
        _expect(failures, BigBool.from_string(text), text, "from_string")
    return failures


def check_logic() -> list[str]:
    """Check inversion, xor, or and and against known results."""
    failures: list[str] = []
    vec1 = BigBool.from_string(_LONG)
    vec2 = BigBool.from_string("10111010001")
    vec3 = BigBool.from_string("1011")
    vec4 = BigBool.from_string("00001110110")
    vec5 = BigBool.from_string("10110111")

    inversions = [
        (vec1, "01010000101010001100000000100101010100010100101"),
        (vec2, "01000101110"),
        (vec3, "0100"),
        (vec4, "11110001001"),
        (vec5, "01001000"),
    ]
    for vector, expected in inversions:
        _expect(failures, ~vector, expected, "not")

    pairs = [(vec1, vec2), (vec2, vec3), (vec2, vec4), (vec4, vec5)]
    expectations = {
        "xor": (
            lambda a, b: a ^ b,
            [
                "10101111010101110011111111011010101001010001011",
                "10111011010",
                "10110100111",
                "00011000001",
            ],
        ),
        "or": (
            lambda a, b: a | b,
            [
                "10101111010101110011111111011010101011111011011",
                "10111011011",
                "10111110111",
                "00011110111",
            ],
        ),
        "and": (
            lambda a, b: a & b,
            [
                "00000000000000000000000000000000000010101010000",
                "00000000001",
                "00001010000",
                "00000110110",
            ],
        ),
    }
    for name, (operation, results) in expectations.items():
        for (first, second), expected in zip(pairs, results):
            _expect(failures, operation(first, second), expected, name)
    return failures


def check_from_int() -> list[str]:
    """Check conversion of unsigned integers into vectors."""
    failures: list[str] = []
    cases = [
        (8192, "10000000000000"),
        (0b101111011111001000100010110100101, "101111011111001000100010110100101"),
        (0, "0"),
    ]
    for number, expected in cases:
        _expect(failures, BigBool.from_int(number), expected, "from_int")
    return failures


def check_shifts() -> list[str]:
    """Check growing and shrinking shifts, including negative counts."""
    failures: list[str] = []
    _expect(failures, BigBool.from_string("10111010001") << 7,
            "101110100010000000", "left shift")
    _expect(failures, BigBool.from_string("10100110000111") >> 4,
            "1010011000", "right shift")

    vector = BigBool.from_string("101011011111110101011")
    _expect(failures, vector << -3, "101011011111110101", "left shift")
    _expect(failures, vector >> -3, "101011011111110101011000", "right shift")

    _expect(failures, BigBool.from_string("10111010001") >> 11, "0", "right shift")
    return failures


def check_rotations() -> list[str]:
    """Check rotations by arbitrary, negative and whole-byte counts."""
    failures: list[str] = []
    vector = BigBool.from_string(_LONG)
    _expect(failures, vector.rotate_left(14),
            "11001111111101101010101110101101010101111010101", "left rotation")
    _expect(failures, vector.rotate_right(14),
            "01011101011010101011110101011100111111110110101", "right rotation")

    vector = BigBool.from_string("10101111010101110011111111011000")
    _expect(failures, vector.rotate_left(-12),
            "11111101100010101111010101110011", "left rotation")
    _expect(failures, vector.rotate_right(-5),
            "11101010111001111111101100010101", "right rotation")

    vector = BigBool.from_string("101011110101011100111111110100001001100000000100")
    _expect(failures, vector.rotate_left(16),
            "001111111101000010011000000001001010111101010111", "left rotation")
    _expect(failures, vector.rotate_right(16),
            "100110000000010010101111010101110011111111010000", "right rotation")
    return failures


def check_public() -> list[str]:
    """Check vector length and construction of an all-zero vector."""
    failures: list[str] = []
    vector = BigBool.from_string("101100101101010101010111111101001100101111111111")
    if len(vector) != 48:
        failures.append(f"len - does not work correctly: {len(vector)} != 48")
    _expect(failures, BigBool.empty(len(vector)), "0" * 48, "empty")
    return failures


def check_xor_identity(rng: random.Random) -> list[str]:
    """Check a ^ b == (~a & b) | (a & ~b) for two random vectors of equal length."""
    first, second = equalize(
        BigBool.from_int(rng.randrange(1 << 31)),
        BigBool.from_int(rng.randrange(1 << 31)),
    )
    direct = first ^ second
    composed = (~first & second) | (first & ~second)
    if direct != composed:
        return [f"xor - does not work correctly: {direct} != {composed}"]
    return []


def run_checks(rounds: int = 10000) -> list[str]:
    """Run every fixed check and the xor identity for the given number of rounds."""
    if rounds < 0:
        raise ValueError(f"rounds must not be negative, got {rounds}")
    failures: list[str] = []
    for check in (check_conversion, check_logic, check_from_int,
                  check_shifts, check_rotations, check_public):
        failures.extend(check())
    rng = random.Random()
    for _ in range(rounds):
        failures.extend(check_xor_identity(rng))
    return failures


def main(argv: Sequence[str] | None = None) -> int:
    """Run the self-checks and report the outcome on standard output."""
    parser = argparse.ArgumentParser(description="Check the boolean vector operations.")
    parser.add_argument("--rounds", type=int, default=10000,
                        help="number of random xor identity rounds (default: 10000)")
    args = parser.parse_args(argv)
    if args.rounds < 0:
        parser.error("--rounds must not be negative")

    failures = run_checks(args.rounds)
    for message in failures:
        print(f"{_RED}[ERR] {message}{_RESET}")
    if failures:
        print()
        print(f"Number of failed tests: {len(failures)}")
    else:
        print(f"{_GREEN}[OK] All is ok!{_RESET}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())