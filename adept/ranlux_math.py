"""Arithmetic on 576-bit numbers for the RANLUX++ generator.

Numbers are sequences of 64-bit words, least significant word first: nine
words for a 576-bit value and eighteen for a full product.  Reductions are
taken modulo ``m = 2**576 - 2**240 + 1``, the modulus of the LCG equivalent
to RANLUX.
"""

from __future__ import annotations

from collections.abc import Sequence

WORDS = 9
WORD_BITS = 64
WORD_MASK = (1 << WORD_BITS) - 1
BITS = WORDS * WORD_BITS
MASK = (1 << BITS) - 1
MODULUS = (1 << BITS) - (1 << 240) + 1

_UPPER_SHIFT = 336  # t2 starts at this bit; t3 is everything below it
_LOWER_MASK = (1 << _UPPER_SHIFT) - 1
_CARRY_LIMIT = 1 << 32


def _to_int(words: Sequence[int], count: int, name: str) -> int:
    """Join ``count`` little-endian 64-bit words into one integer."""
    words = list(words)
    if len(words) != count:
        raise ValueError(f"{name} must have {count} words, got {len(words)}")
    value = 0
    for position, word in enumerate(words):
        if not 0 <= word <= WORD_MASK:
            raise ValueError(f"{name} word {position} is not a 64-bit unsigned value: {word}")
        value |= word << (WORD_BITS * position)
    return value


def _to_words(value: int, count: int = WORDS) -> list[int]:
    """Split a non-negative integer into ``count`` little-endian 64-bit words."""
    return [(value >> (WORD_BITS * position)) & WORD_MASK for position in range(count)]


def _compute_r(upper: int, r: int) -> tuple[int, int]:
    t2 = upper >> _UPPER_SHIFT
    t3 = upper & _LOWER_MASK
    total = r - upper - t2 + ((t3 + t2) << 240)
    carry = total >> BITS
    reduced = total & MASK
    if carry == 0 and reduced >= MODULUS:
        carry = 1
    return carry, reduced


def _mod_m(product: int) -> int:
    carry, reduced = _compute_r(product >> BITS, product & MASK)
    return (reduced - carry * MODULUS) & MASK


def compute_r(upper: Sequence[int], r: Sequence[int]) -> tuple[int, list[int]]:
    """Update ``r = r - (t1 + t2) + (t3 + t2) * 2**240`` for the given upper words.

    Returns ``(cbar, r)`` where ``cbar = floor(r / m)`` of the updated value
    (it may be -1) and ``r`` holds the updated value modulo ``2**576``.
    """
    carry, reduced = _compute_r(_to_int(upper, WORDS, "upper"), _to_int(r, WORDS, "r"))
    return carry, _to_words(reduced)


def multiply9x9(in1: Sequence[int], in2: Sequence[int]) -> list[int]:
    """Multiply two 576-bit numbers, giving the full product in 18 words."""
    product = _to_int(in1, WORDS, "in1") * _to_int(in2, WORDS, "in2")
    return _to_words(product, 2 * WORDS)


def mod_m(mul: Sequence[int]) -> list[int]:
    """Reduce an 18-word product to a value congruent modulo m and below m."""
    return _to_words(_mod_m(_to_int(mul, 2 * WORDS, "mul")))


def mulmod(in1: Sequence[int], in2: Sequence[int]) -> list[int]:
    """Multiply two 576-bit numbers modulo m."""
    product = _to_int(in1, WORDS, "in1") * _to_int(in2, WORDS, "in2")
    return _to_words(_mod_m(product))


def powermod(base: Sequence[int], n: int) -> list[int]:
    """Raise ``base`` to the unsigned 64-bit power ``n`` modulo m."""
    if not 0 <= n <= WORD_MASK:
        raise ValueError(f"exponent must be a 64-bit unsigned value: {n}")
    factor = _to_int(base, WORDS, "base")
    result = 1
    while n:
        if n & 1:
            result = _mod_m(result * factor)
        n >>= 1
        if not n:
            break
        factor = _mod_m(factor * factor)
    return _to_words(result)


def to_lcg(ranlux: Sequence[int], c: int) -> list[int]:
    """Convert RANLUX numbers and their carry bit into an LCG state."""
    if not 0 <= c < _CARRY_LIMIT:
        raise ValueError(f"carry must be a 32-bit unsigned value: {c}")
    value = _to_int(ranlux, WORDS, "ranlux")
    return _to_words((value - (value >> _UPPER_SHIFT) + c) & MASK)


def to_ranlux(lcg: Sequence[int]) -> tuple[list[int], int]:
    """Convert an LCG state (below m) into RANLUX numbers and a carry bit.

    Only the lowest word receives the correction ``floor(lcg / m)``; the
    higher words contribute to the returned carry without being changed.
    """
    value = _to_int(lcg, WORDS, "lcg")
    correction, _ = _compute_r(value, 0)
    words = _to_words((value + (value >> _UPPER_SHIFT)) & MASK)

    first = words[0] + (correction & WORD_MASK)
    words[0] = first & WORD_MASK
    carry = first >> WORD_BITS

    fill = (correction >> 1) & WORD_MASK
    for word in words[1:]:
        partial = word + carry
        carry = (partial >> WORD_BITS) + (((partial & WORD_MASK) + fill) >> WORD_BITS)
    return words, carry