"""Polynomial string hash over base-36 blocks of letters and digits."""

from __future__ import annotations

import sys
import time

from .mt import MersenneTwister

BLOCK_COUNT = 5
BLOCK_SIZE = 6
DEBUG_R_VALUES = (983132572, 1468777056, 552714139, 984953261, 261934300)
_MASK64 = (1 << 64) - 1


def letter_digit_to_number(letter: str) -> int:
    """Map a-z (either case) to 0-25 and 0-9 to 26-35; anything else to 0."""
    if "0" <= letter <= "9":
        return ord(letter) - ord("0") + 26
    if "A" <= letter <= "Z":
        letter = letter.lower()
    if "a" <= letter <= "z":
        return ord(letter) - ord("a")
    return 0


class StringHash:
    """Hash a string of up to 30 significant characters to a 64-bit value.

    The string is split from its end into five blocks of six characters,
    each read as a base-36 number, and the blocks are combined with five
    multipliers.  In debug mode the multipliers are fixed; otherwise they
    are drawn from a generator seeded from the clock.
    """

    def __init__(self, debug: bool = True) -> None:
        self.r_values = list(DEBUG_R_VALUES)
        if not debug:
            self.generate_r_values()

    def __call__(self, key: str) -> int:
        n = len(key)
        blocks = [0] * BLOCK_COUNT
        for block in range(BLOCK_COUNT):
            start = n - BLOCK_SIZE * (block + 1)
            value = 0
            for idx in range(start, start + BLOCK_SIZE):
                digit = letter_digit_to_number(key[idx]) if 0 <= idx < n else 0
                value = value * 36 + digit
            blocks[BLOCK_COUNT - 1 - block] = value
        total = sum(r * w for r, w in zip(self.r_values, blocks))
        return total & _MASK64

    def generate_r_values(self, seed: int | None = None) -> None:
        """Replace the multipliers with five generator outputs."""
        if seed is None:
            seed = time.time_ns() & 0xFFFFFFFF
        generator = MersenneTwister(seed)
        self.r_values = [generator() for _ in range(BLOCK_COUNT)]


def main(argv: list[str] | None = None) -> int:
    """Print the debug-mode hash of the first argument."""
    args = sys.argv[1:] if argv is None else list(argv)
    if not args:
        print("Please provide a string to hash")
        return 1
    key = args[0]
    print(f"h({key})={StringHash(True)(key)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())