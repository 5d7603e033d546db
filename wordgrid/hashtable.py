"""Open-addressing hash table with pluggable probing strategies."""

from __future__ import annotations

import operator
import sys
from abc import ABC, abstractmethod
from collections.abc import Callable, Hashable, Iterator
from dataclasses import dataclass
from typing import Any, TextIO

from .strhash import StringHash

# Prime table sizes used as the table grows.
CAPACITIES = (
    11, 23, 47, 97, 197, 397, 797, 1597, 3203, 6421, 12853, 25717, 51437, 102877,
    205759, 411527, 823117, 1646237, 3292489, 6584983, 13169977, 26339969, 52679969,
    105359969, 210719881, 421439783, 842879579, 1685759167,
)

# Moduli for the double-hash step size, one just below each table size.
DOUBLE_HASH_MOD_VALUES = (
    7, 19, 43, 89, 193, 389, 787, 1583, 3191, 6397, 12841, 25703, 51431, 102871,
    205721, 411503, 823051, 1646221, 3292463, 6584957, 13169963, 26339921, 52679927,
    105359939, 210719881, 421439749, 842879563, 1685759113,
)


class HashTableFullError(RuntimeError):
    """Raised when no slot can be found or the table cannot grow further."""


class Prober(ABC):
    """Strategy producing the sequence of slots to visit for a key."""

    @abstractmethod
    def probe(self, start: int, m: int, key: Any) -> Iterator[int]:
        """Yield at most ``m`` slot indices, beginning at ``start``."""


class LinearProber(Prober):
    """Visit consecutive slots, wrapping around the table."""

    def probe(self, start: int, m: int, key: Any) -> Iterator[int]:
        for i in range(m):
            yield (start + i) % m


class DoubleHashProber(Prober):
    """Step through the table by an amount derived from a second hash."""

    def __init__(self, h2: Callable[[Any], int] | None = None) -> None:
        self.h2 = h2 if h2 is not None else StringHash()

    def modulus_for(self, table_size: int) -> int:
        """Return the largest step modulus below ``table_size``."""
        modulus = DOUBLE_HASH_MOD_VALUES[0]
        for value in DOUBLE_HASH_MOD_VALUES:
            if value >= table_size:
                break
            modulus = value
        return modulus

    def probe(self, start: int, m: int, key: Any) -> Iterator[int]:
        modulus = self.modulus_for(m)
        step = modulus - self.h2(key) % modulus
        for i in range(m):
            yield (start + i * step) % m


@dataclass
class _Entry:
    key: Any
    value: Any
    deleted: bool = False


class HashTable:
    """Map with open addressing, tombstone deletion and prime-sized growth."""

    def __init__(
        self,
        resize_alpha: float = 0.4,
        prober: Prober | None = None,
        hasher: Callable[[Any], int] | None = None,
        key_equal: Callable[[Any, Any], bool] | None = None,
    ) -> None:
        self._resize_alpha = resize_alpha
        self._prober = prober if prober is not None else LinearProber()
        self._hasher = hasher if hasher is not None else hash
        self._key_equal = key_equal if key_equal is not None else operator.eq
        self._m_index = 0
        self._slots: list[_Entry | None] = [None] * CAPACITIES[0]
        self._count = 0
        self._deleted = 0
        self._total_probes = 0

    def __len__(self) -> int:
        return self._count

    def __bool__(self) -> bool:
        return self._count != 0

    def __contains__(self, key: Hashable) -> bool:
        return self.find(key) is not None

    def __getitem__(self, key: Hashable) -> Any:
        return self.at(key)

    def __setitem__(self, key: Hashable, value: Any) -> None:
        self.insert(key, value)

    def capacity(self) -> int:
        """Current number of slots."""
        return CAPACITIES[self._m_index]

    def total_probes(self) -> int:
        """Number of probe steps taken since the last reset."""
        return self._total_probes

    def clear_total_probes(self) -> None:
        self._total_probes = 0

    def _probe(self, key: Any) -> int | None:
        m = self.capacity()
        start = self._hasher(key) % m
        for loc in self._prober.probe(start, m, key):
            self._total_probes += 1
            entry = self._slots[loc]
            if entry is None:
                return loc
            if not entry.deleted and self._key_equal(entry.key, key):
                return loc
        self._total_probes += 1
        return None

    def _find_entry(self, key: Any) -> _Entry | None:
        loc = self._probe(key)
        if loc is None:
            return None
        return self._slots[loc]

    def insert(self, key: Hashable, value: Any) -> None:
        """Add ``key`` or update its value, growing the table when loaded."""
        load = (self._count + self._deleted) / self.capacity()
        if load >= self._resize_alpha:
            self._resize()
        loc = self._probe(key)
        if loc is None:
            raise HashTableFullError("HashTable full, cannot insert")
        entry = self._slots[loc]
        if entry is None:
            self._slots[loc] = _Entry(key, value)
            self._count += 1
        else:
            entry.value = value

    def remove(self, key: Hashable) -> None:
        """Mark the entry for ``key`` deleted; do nothing if it is absent."""
        entry = self._find_entry(key)
        if entry is not None and not entry.deleted:
            entry.deleted = True
            self._count -= 1
            self._deleted += 1

    def find(self, key: Hashable) -> tuple[Any, Any] | None:
        """Return the stored ``(key, value)`` pair, or None."""
        entry = self._find_entry(key)
        if entry is None:
            return None
        return entry.key, entry.value

    def at(self, key: Hashable) -> Any:
        """Return the value for ``key``; raise KeyError if it is absent."""
        entry = self._find_entry(key)
        if entry is None:
            raise KeyError("Bad key")
        return entry.value

    def _resize(self) -> None:
        if self._m_index + 1 >= len(CAPACITIES):
            raise HashTableFullError("No more capacities")
        old = self._slots
        self._m_index += 1
        self._slots = [None] * CAPACITIES[self._m_index]
        self._count = 0
        self._deleted = 0
        for entry in old:
            if entry is not None and not entry.deleted:
                self.insert(entry.key, entry.value)

    def report_all(self, out: TextIO | None = None) -> None:
        """Write every occupied slot, tombstones included, one per line."""
        stream = sys.stdout if out is None else out
        for index, entry in enumerate(self._slots):
            if entry is not None:
                stream.write(f"Bucket {index}: {entry.key} {entry.value}\n")


def main(argv: list[str] | None = None) -> int:
    """Exercise a double-hashed table and print what happens."""
    table = HashTable(0.7, DoubleHashProber(StringHash()))
    for i in range(10):
        table.insert(f"hi{i}", i)
    if "hi1" in table:
        print("Found hi1")
        table["hi1"] += 1
        print(f"Incremented hi1's value to: {table['hi1']}")
    if "doesnotexist" not in table:
        print("Did not find: doesnotexist")
    print(f"HT size: {len(table)}")
    table.remove("hi7")
    table.remove("hi9")
    print(f"HT size: {len(table)}")
    if "hi9" in table:
        print("Found hi9")
    else:
        print("Did not find hi9")
    table.insert("hi7", 17)
    print(f"size: {len(table)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())