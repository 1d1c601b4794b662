"""RANLUX++ pseudo-random number generator.

The generator keeps 576 bits of RANLUX state and hands them out in chunks of
``width`` bits.  A fresh block is produced by one multiplication in the
equivalent linear congruential generator, which also allows skipping ahead
cheaply.
"""

from __future__ import annotations

import copy

from adept.ranlux_math import BITS, WORD_BITS, WORDS, mulmod, powermod, to_lcg, to_ranlux

# Multiplier of the LCG equivalent to RANLUX with luxury level p = 2048.
_A_2048 = (
    0xED7FAA90747AAAD9,
    0x4CEC2C78AF55C101,
    0xE64DCB31C48228EC,
    0x6D8A15A13BEE7CB0,
    0x20B2CA60CB78C509,
    0x256C3D3C662EA36C,
    0xFF74E54107684ED2,
    0x492EDFCC0CC8E753,
    0xB48C187CF5B22097,
)

_MAX_POS = BITS
DEFAULT_SEED = 314159265


class RanluxppEngine:
    """RANLUX++ engine returning ``width`` random bits per draw."""

    def __init__(self, width: int, seed: int = DEFAULT_SEED) -> None:
        if not 1 <= width <= WORD_BITS:
            raise ValueError(f"width must be between 1 and {WORD_BITS} bits: {width}")
        self._width = width
        self._state = [0] * WORDS
        self._carry = 0
        self._position = 0
        self.set_seed(seed)

    @property
    def width(self) -> int:
        """Number of random bits returned per draw."""
        return self._width

    def _clone(self):
        twin = copy.copy(self)
        twin._state = list(self._state)
        return twin

    def _xor_state(self, other: list[int]) -> None:
        self._state = [mine ^ theirs for mine, theirs in zip(self._state, other)]

    def _apply(self, multiplier) -> None:
        lcg = to_lcg(self._state, self._carry)
        lcg = mulmod(multiplier, lcg)
        self._state, self._carry = to_ranlux(lcg)

    def advance(self) -> None:
        """Produce the next block of random bits."""
        self._apply(_A_2048)
        self._position = 0

    def next_random_bits(self) -> int:
        """Return the next ``width`` random bits, advancing to a new block if needed."""
        width = self._width
        if self._position + width > _MAX_POS:
            self.advance()

        index, offset = divmod(self._position, WORD_BITS)
        available = WORD_BITS - offset

        bits = self._state[index] >> offset
        if available < width:
            bits |= self._state[index + 1] << available
        bits &= (1 << width) - 1

        self._position += width
        return bits

    def next_random_float(self) -> float:
        """Return a float in [0, 1) built from the next random bits."""
        return self.next_random_bits() * (1.0 / (1 << self._width))

    def set_seed(self, seed: int) -> None:
        """Initialise the state from an unsigned 64-bit seed."""
        lcg = [1] + [0] * (WORDS - 1)
        # Skip 2**96 states, then another `seed` states.
        a_seed = powermod(_A_2048, 1 << 48)
        a_seed = powermod(a_seed, 1 << 48)
        a_seed = powermod(a_seed, seed)
        lcg = mulmod(a_seed, lcg)
        self._state, self._carry = to_ranlux(lcg)
        self._position = 0

    def skip(self, n: int) -> None:
        """Skip ``n`` random numbers without generating them."""
        if n < 0:
            raise ValueError(f"cannot skip a negative count: {n}")
        width = self._width
        left = (_MAX_POS - self._position) // width
        if n < left:
            self._position += n * width
            return

        n -= left
        per_state = _MAX_POS // width
        blocks = n // per_state

        self._apply(powermod(_A_2048, blocks + 1))
        self._position = (n - blocks * per_state) * width


class RanluxppDouble(RanluxppEngine):
    """RANLUX++ generator of doubles with 48 bits of randomness."""

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        super().__init__(48, seed)

    def rndm(self) -> float:
        """Return a double in [0, 1)."""
        return self.next_random_float()

    def __call__(self) -> float:
        return self.next_random_float()

    def int_rndm(self) -> int:
        """Return a random 48-bit integer."""
        return self.next_random_bits()

    def int_rndm64(self) -> int:
        """Return a 64-bit integer made from the low 32 bits of two draws."""
        low = self.next_random_bits() & 0xFFFFFFFF
        high = self.next_random_bits() & 0xFFFFFFFF
        return (low << 32) | high

    def branch_no_advance(self) -> "RanluxppDouble":
        """Branch a new generator, advancing this one.

        The caller must advance the returned generator to decorrelate it.
        """
        old_state = list(self._state)
        self.advance()
        branched = self._clone()
        branched._xor_state(old_state)
        return branched

    def branch(self) -> "RanluxppDouble":
        """Branch a new, decorrelated generator, advancing this one."""
        branched = self.branch_no_advance()
        branched.advance()
        return branched