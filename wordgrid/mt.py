"""32-bit Mersenne Twister (MT19937) pseudo-random generator."""

from __future__ import annotations

_N = 624
_M = 397
_MASK = 0xFFFFFFFF
_MATRIX_A = 0x9908B0DF
_UPPER = 0x80000000
_LOWER = 0x7FFFFFFF

DEFAULT_SEED = 5489


class MersenneTwister:
    """MT19937 generator seeded from a single integer.

    The seed is reduced to 32 bits, so negative seeds wrap around the
    same way an unsigned conversion would.  Calling the instance returns
    the next 32-bit output.
    """

    def __init__(self, seed: int = DEFAULT_SEED) -> None:
        state = [seed & _MASK]
        for i in range(1, _N):
            prev = state[-1]
            state.append((1812433253 * (prev ^ (prev >> 30)) + i) & _MASK)
        self._state = state
        self._index = _N

    def _twist(self) -> None:
        state = self._state
        for i in range(_N):
            y = (state[i] & _UPPER) | (state[(i + 1) % _N] & _LOWER)
            value = state[(i + _M) % _N] ^ (y >> 1)
            if y & 1:
                value ^= _MATRIX_A
            state[i] = value
        self._index = 0

    def __call__(self) -> int:
        if self._index >= _N:
            self._twist()
        y = self._state[self._index]
        self._index += 1
        y ^= y >> 11
        y ^= (y << 7) & 0x9D2C5680
        y ^= (y << 15) & 0xEFC60000
        y ^= y >> 18
        return y & _MASK

    def __iter__(self):
        return self

    def __next__(self) -> int:
        return self()