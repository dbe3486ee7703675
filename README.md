# bigbool

Fixed-length boolean vectors with bitwise logic, shifts and rotations.

A `BigBool` is an immutable sequence of bits of a fixed length. It is
written and read as a string of `0` and `1`, with the most significant bit
first (bit 0 is printed rightmost).

## Installation

```
pip install .
```

For the test suite:

```
pip install ".[test]"
pytest
```

## Usage

```python
from bigbool.vector import BigBool, equalize

a = BigBool.from_string("10111010001")
b = BigBool.from_string("1011")

str(~a)          # '01000101110'
str(a ^ b)       # '10111011010'
str(a | b)       # '10111011011'
str(a & b)       # '00000000001'

str(a << 7)      # '101110100010000000'  (grows the vector)
str(a >> 4)      # '1011101'             (shrinks the vector)

v = BigBool.from_string("10101111010101110011111111011000")
str(v.rotate_left(-12))   # '11111101100010101111010101110011'

str(BigBool.from_int(8192))   # '10000000000000'
len(BigBool.empty(48))        # 48
```

Construction:

- `BigBool(length)` and `BigBool.empty(length)` give an all-zero vector.
- `BigBool.from_string(text)` parses a bit string.
- `BigBool.from_int(number)` takes an unsigned 64-bit integer and gives the
  shortest vector that holds it, at least one bit long (`0` gives `"0"`).

Operations:

- `~`, `^`, `|` and `&` return new vectors. A binary operation's result has
  the length of the longer operand; the shorter one counts as zero-padded.
- `<<` grows the vector by the count; `>>` shrinks it. Negative counts go
  the other way. Shifting right by the whole length or more gives the
  one-bit vector `0`.
- `rotate_left(count)` and `rotate_right(count)` keep the length and wrap
  bits around; negative counts rotate the other way.
- `resized(length)` zero-extends or truncates to the given length.
- `len()`, `str()`, `repr()`, `==` and hashing work as expected; two
  vectors are equal only if both length and bits match.

Helpers in `bigbool.vector`:

- `equalize(first, second)` returns both vectors zero-extended to the
  longer of the two lengths.
- `check_bits(text)` raises unless the text is a non-empty run of `0`/`1`.
- `read_bits(stream=None)` reads one line from a text stream (standard
  input by default) without its newline, and raises `EOFError` at end of
  input.

Errors: a malformed bit string raises `InvalidBitStringError`, a subclass of
`BigBoolError` (itself a `ValueError`). Invalid lengths and integers outside
the unsigned 64-bit range raise `BigBoolError`.

## Self-check

`bigbool.selfcheck` runs fixed cases for every operation and a randomized
check of the identity `a ^ b == (~a & b) | (a & ~b)`:

```
bigbool-selfcheck
bigbool-selfcheck --rounds 100
```

`--rounds` sets the number of random identity rounds (default 10000). The
command prints each failing check and the number of failures, or a success
line, and exits with status 0 either way. The same checks are available as
functions (`check_conversion`, `check_logic`, `check_from_int`,
`check_shifts`, `check_rotations`, `check_public`, `check_xor_identity`,
`run_checks`), each returning a list of failure messages.