"""Frequency sketches used for cache admission: a 4-bit count-min sketch and a Bloom-filter doorkeeper."""

from __future__ import annotations

import math

_U32 = 0xFFFFFFFF
DEPTH = 4


def next_power_of_two(i: int) -> int:
    """Return the smallest power of two >= i, in 32-bit unsigned arithmetic."""
    n = (i - 1) & _U32
    n |= n >> 1
    n |= n >> 2
    n |= n >> 4
    n |= n >> 8
    n |= n >> 16
    return (n + 1) & _U32


def _split_hash(keyh: int) -> tuple[int, int]:
    return keyh & _U32, (keyh >> 32) & _U32


class NibbleVector:
    """A vector of saturating 4-bit counters, two per byte."""

    def __init__(self, width: int) -> None:
        self._data = bytearray(width // 2)

    def __len__(self) -> int:
        return len(self._data) * 2

    def byte_at(self, index: int) -> int:
        """Return the raw byte holding counters 2*index and 2*index+1."""
        return self._data[index]

    def get(self, i: int) -> int:
        return (self._data[i // 2] >> ((i & 1) * 4)) & 0x0F

    def inc(self, i: int) -> None:
        """Increment counter i, saturating at 15."""
        idx = i // 2
        shift = (i & 1) * 4
        if (self._data[idx] >> shift) & 0x0F < 15:
            self._data[idx] += 1 << shift

    def reset(self) -> None:
        """Halve every counter."""
        self._data = bytearray((b >> 1) & 0x77 for b in self._data)


class CountMinSketch:
    """A conservative count-min sketch with 4-bit counters and four rows."""

    def __init__(self, width: int) -> None:
        if width < 1:
            raise ValueError("count-min sketch: bad width")
        # Four counters per item per row: 16 counters, 8 bytes per item.
        w32 = next_power_of_two((width * 4) & _U32)
        self._mask = (w32 - 1) & _U32
        self._rows = [NibbleVector(w32) for _ in range(DEPTH)]

    def _offset(self, keyh: int, level: int) -> int:
        h1, h2 = _split_hash(keyh)
        return ((h1 + level * h2) & _U32) & self._mask

    def add(self, keyh: int) -> None:
        for level in reversed(range(DEPTH)):
            self._rows[level].inc(self._offset(keyh, level))

    def estimate(self, keyh: int) -> int:
        return min(
            self._rows[level].get(self._offset(keyh, level))
            for level in reversed(range(DEPTH))
        )

    def reset(self) -> None:
        """Halve all counters, ageing the recorded frequencies."""
        for row in self._rows:
            row.reset()


class Doorkeeper:
    """A Bloom filter that admits keys on their second appearance."""

    def __init__(self, capacity: int, false_positive_rate: float) -> None:
        bits = capacity * -math.log(false_positive_rate) / (math.log(2.0) * math.log(2.0))
        size = next_power_of_two(int(bits) & _U32)
        if size < 1024:
            size = 1024
        hashes = int(0.7 * size / capacity) & _U32
        if hashes < 2:
            hashes = 2
        self.size = size
        self.hashes = hashes
        self._filter = bytearray((size + 7) // 8)

    def _getset(self, bit: int) -> int:
        idx, shift = bit >> 3, bit & 7
        mask = 1 << shift
        previous = (self._filter[idx] & mask) >> shift
        self._filter[idx] |= mask
        return previous

    def allow(self, keyh: int) -> bool:
        """Record keyh and report whether it had been seen before."""
        return self.insert(keyh)

    def insert(self, keyh: int) -> bool:
        """Insert keyh; return True if it was already considered present."""
        h1, h2 = _split_hash(keyh)
        present = 1
        for i in range(self.hashes):
            present &= self._getset(((h1 + i * h2) & _U32) & (self.size - 1))
        return present == 1

    def reset(self) -> None:
        """Clear the filter."""
        self._filter = bytearray(len(self._filter))