# wordgrid

A small toolkit around word puzzles and hashing:

- `wordgrid.boggle` builds a random square letter grid, weighted by Scrabble
  letter frequencies, and finds dictionary words that read in a straight line
  rightwards, downwards or diagonally down-right.
- `wordgrid.strhash` provides `StringHash`, a polynomial hash for strings of
  letters and digits. Letters are case-insensitive, and only the last 30
  characters of a key count.
- `wordgrid.hashtable` provides `HashTable`, an open-addressing map with
  `LinearProber` and `DoubleHashProber` probing strategies, tombstone deletion
  and growth through a fixed list of prime sizes.
- `wordgrid.mt` provides `MersenneTwister`, a 32-bit Mersenne Twister
  (MT19937), so that a given seed always produces the same board.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Commands

Solve a random board:

```
wordgrid-boggle <size> <seed> <dictionary file>
```

The board is printed first, each letter right-aligned in two columns. The
number of words found follows, then the words themselves in sorted order,
separated by commas. The dictionary file holds words separated by whitespace;
the board is in upper case, so the words should be too. With fewer than three
arguments the command prints a usage line and exits with status 1. A
dictionary file that cannot be opened raises `ValueError`.

Hash a string with the fixed debug coefficients:

```
wordgrid-strhash abc
```

prints `h(abc)=9953503400`. Without an argument it prints a message and exits
with status 1.

Run a short demonstration of the hash table (inserts, an update, lookups and
removals on a double-hashed table, with the results printed):

```
wordgrid-ht-demo
```

## Library use

```python
from wordgrid.boggle import gen_board, format_board, parse_dict, boggle
from wordgrid.strhash import StringHash
from wordgrid.hashtable import HashTable, DoubleHashProber

board = gen_board(5, 42)
print(format_board(board))
dictionary, prefixes = parse_dict("words.txt")
print(sorted(boggle(dictionary, prefixes, board)))

h = StringHash(debug=True)
assert h("abc") == h("ABC")

table = HashTable(0.7, DoubleHashProber(StringHash(True)))
table.insert("hi1", 1)
table["hi1"] += 1
assert table.at("hi1") == 2
table.remove("hi1")
assert "hi1" not in table
```

### Word search

`parse_dict(path)` returns a pair of sets: the words, and every proper prefix
of every word together with the empty string. `boggle(dictionary, prefixes,
board)` starts at every cell in each of the three directions and follows the
line while the letters read so far are a prefix. Only the longest dictionary
word on that line from that start is reported.

### String hash

`StringHash(debug=True)` uses five fixed multipliers, so results repeat from
run to run. `StringHash(debug=False)` draws the multipliers from a
`MersenneTwister` seeded from the clock; `generate_r_values(seed)` does the
same with a chosen seed. `letter_digit_to_number` maps `a`-`z` (either case)
to 0-25, `0`-`9` to 26-35 and anything else to 0. Results are reduced to
64 bits.

### Hash table

`HashTable(resize_alpha=0.4, prober=None, hasher=None, key_equal=None)`
defaults to linear probing, the built-in `hash` and `==`. Before each insert
the table grows when live entries plus tombstones reach `resize_alpha` of the
capacity; growth beyond the largest listed size, or a probe that finds no free
slot, raises `HashTableFullError`. `find(key)` returns the `(key, value)` pair
or `None`; `at(key)` and `table[key]` raise `KeyError` for a missing key.
`remove(key)` leaves a tombstone and does nothing for a missing key.
`capacity()`, `total_probes()`, `clear_total_probes()` and `report_all(out)`
expose the table's size and probe counts, and list its occupied slots.

## What it does not do

The word search is not an interactive game: there is no play against a timer,
no scoring, and words are only read along straight lines in three directions,
not along paths that turn.