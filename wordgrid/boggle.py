"""Straight-line word search on a square letter grid."""

from __future__ import annotations

import re
import string
import sys
from collections.abc import Iterable, Sequence

from .mt import MersenneTwister

# Scrabble tile counts for A..Z.
_FREQUENCIES = (9, 2, 2, 4, 12, 2, 3, 2, 9, 1, 1, 4, 2, 6, 8, 2, 1, 6, 4, 6, 4, 2, 2, 1, 2, 1)
_LETTERS = "".join(
    letter * count for letter, count in zip(string.ascii_uppercase, _FREQUENCIES)
)

# Directions searched: right, down, down-right.
_DIRECTIONS = ((0, 1), (1, 0), (1, 1))

Board = list[list[str]]


def gen_board(n: int, seed: int) -> Board:
    """Build an n x n board of letters drawn with Scrabble frequencies."""
    rng = MersenneTwister(seed)
    return [[_LETTERS[rng() % len(_LETTERS)] for _ in range(n)] for _ in range(n)]


def format_board(board: Sequence[Sequence[str]]) -> str:
    """Render the board with each letter right-aligned in two columns."""
    return "".join("".join(f"{cell:>2}" for cell in row) + "\n" for row in board)


def print_board(board: Sequence[Sequence[str]]) -> None:
    """Write the board to standard output."""
    sys.stdout.write(format_board(board))


def parse_dict(path) -> tuple[set[str], set[str]]:
    """Read whitespace-separated words; return (words, proper prefixes plus "")."""
    try:
        with open(path, encoding="utf-8") as stream:
            text = stream.read()
    except OSError as exc:
        raise ValueError("unable to open dictionary file") from exc
    words: set[str] = set()
    prefixes: set[str] = {""}
    for word in text.split():
        words.add(word)
        prefixes.update(word[:i] for i in range(1, len(word)))
    return words, prefixes


def _longest_word(
    dictionary: set[str],
    prefixes: set[str],
    board: Sequence[Sequence[str]],
    row: int,
    col: int,
    drow: int,
    dcol: int,
) -> str | None:
    n = len(board)
    word = ""
    longest = None
    while row < n and col < n:
        word += board[row][col]
        is_word = word in dictionary
        is_prefix = word in prefixes
        if is_word:
            longest = word
        if not is_prefix:
            break
        row += drow
        col += dcol
    return longest


def boggle(
    dictionary: Iterable[str] | set[str],
    prefixes: Iterable[str] | set[str],
    board: Sequence[Sequence[str]],
) -> set[str]:
    """Find the longest dictionary word starting at each cell in each direction."""
    words = dictionary if isinstance(dictionary, (set, frozenset)) else set(dictionary)
    starts = prefixes if isinstance(prefixes, (set, frozenset)) else set(prefixes)
    n = len(board)
    found: set[str] = set()
    for row in range(n):
        for col in range(n):
            for drow, dcol in _DIRECTIONS:
                word = _longest_word(words, starts, board, row, col, drow, dcol)
                if word is not None:
                    found.add(word)
    return found


def _atoi(text: str) -> int:
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def main(argv: list[str] | None = None) -> int:
    """Generate a board, solve it against a dictionary file and print the words."""
    args = sys.argv[1:] if argv is None else list(argv)
    if len(args) < 3:
        print("Usage: boggle-driver <size> <seed> <dictionary file>")
        return 1
    size = max(_atoi(args[0]), 0)
    seed = _atoi(args[1])
    board = gen_board(size, seed)
    print_board(board)
    dictionary, prefixes = parse_dict(args[2])
    found = boggle(dictionary, prefixes, board)
    print(f"Found {len(found)} words:")
    print(", ".join(sorted(found)))
    return 0


if __name__ == "__main__":
    sys.exit(main())