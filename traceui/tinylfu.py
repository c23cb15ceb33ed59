"""A TinyLFU cache: a small LRU admission window in front of a segmented LRU main cache."""

from __future__ import annotations

import random
from dataclasses import dataclass
from typing import Any, Generic, Hashable, Optional, TypeVar

from traceui.linkedlist import Element, LinkedList
from traceui.sketch import CountMinSketch, Doorkeeper

K = TypeVar("K", bound=Hashable)
V = TypeVar("V")

_U64 = 0xFFFFFFFFFFFFFFFF

# Segment identifiers for cached items.
_WINDOW = 0
_PROBATION = 1
_PROTECTED = 2


@dataclass
class _Item:
    listid: int
    key: Any
    value: Any
    keyh: int


class _LRU:
    """The admission window: a plain LRU that hands back what it evicts."""

    def __init__(self, capacity: int, data: dict) -> None:
        self._data = data
        self._capacity = capacity
        self._list: LinkedList[_Item] = LinkedList()

    def touch(self, element: Element) -> None:
        self._list.move_to_front(element)

    def add(self, item: _Item) -> Optional[_Item]:
        """Insert item; return the evicted item, if any."""
        if len(self._list) < self._capacity:
            self._data[item.key] = self._list.push_front(item)
            return None

        # Reuse the tail element for the new item.
        element = self._list.back()
        evicted = element.value
        del self._data[evicted.key]
        element.value = item
        self._data[item.key] = element
        self._list.move_to_front(element)
        return evicted


class _SLRU:
    """A segmented LRU with a probation and a protected segment."""

    def __init__(self, probation_cap: int, protected_cap: int, data: dict) -> None:
        self._data = data
        self._one_cap = probation_cap
        self._two_cap = protected_cap
        self._one: LinkedList[_Item] = LinkedList()
        self._two: LinkedList[_Item] = LinkedList()

    def __len__(self) -> int:
        return len(self._one) + len(self._two)

    def touch(self, element: Element) -> None:
        item = element.value

        if item.listid == _PROTECTED:
            self._two.move_to_front(element)
            return

        if len(self._two) < self._two_cap:
            self._one.remove(element)
            item.listid = _PROTECTED
            self._data[item.key] = self._two.push_front(item)
            return

        # Swap the item with the least recent protected one.
        back = self._two.back()
        demoted = back.value
        element.value, back.value = demoted, item
        item.listid = _PROTECTED
        demoted.listid = _PROBATION
        self._data[demoted.key] = element
        self._data[item.key] = back
        self._one.move_to_front(element)
        self._two.move_to_front(back)

    def add(self, item: _Item) -> None:
        item.listid = _PROBATION

        if len(self._one) < self._one_cap or len(self) < self._one_cap + self._two_cap:
            self._data[item.key] = self._one.push_front(item)
            return

        # Reuse the tail of the probation segment.
        element = self._one.back()
        del self._data[element.value.key]
        element.value = item
        self._data[item.key] = element
        self._one.move_to_front(element)

    def victim(self) -> Optional[_Item]:
        """Return the item that the next add would evict, or None if there is room."""
        if len(self) < self._one_cap + self._two_cap:
            return None
        return self._one.back().value


class TinyLFU(Generic[K, V]):
    """A fixed-size cache that admits new entries by estimated access frequency.

    Not safe for concurrent access.
    """

    def __init__(self, size: int, samples: int) -> None:
        window_size = max(1, size // 100)
        main_size = max(1, size - window_size)
        probation_size = max(1, main_size // 5)

        self._sketch = CountMinSketch(size)
        self._bouncer = Doorkeeper(samples, 0.01)
        self._samples = samples
        self._accesses = 0
        self._data: dict = {}
        self._window = _LRU(window_size, self._data)
        self._main = _SLRU(probation_size, main_size - probation_size, self._data)
        self._seed = random.getrandbits(64)

    def _hash(self, key: Hashable) -> int:
        return hash((self._seed, key)) & _U64

    def _touch(self, element: Element) -> None:
        if element.value.listid == _WINDOW:
            self._window.touch(element)
        else:
            self._main.touch(element)

    def __len__(self) -> int:
        return len(self._data)

    def __contains__(self, key: object) -> bool:
        return key in self._data

    def get(self, key: K) -> tuple[Optional[V], bool]:
        """Return (value, True) if key is cached, else (None, False)."""
        self._accesses += 1
        if self._accesses == self._samples:
            self._sketch.reset()
            self._bouncer.reset()
            self._accesses = 0

        element = self._data.get(key)
        if element is None:
            self._sketch.add(self._hash(key))
            return None, False

        item = element.value
        self._sketch.add(item.keyh)
        value = item.value
        self._touch(element)
        return value, True

    def add(self, key: K, value: V) -> None:
        """Store value under key, subject to the admission policy."""
        element = self._data.get(key)
        if element is not None:
            # Updating an existing key counts as an access.
            item = element.value
            item.value = value
            self._sketch.add(item.keyh)
            self._touch(element)
            return

        evicted = self._window.add(_Item(_WINDOW, key, value, self._hash(key)))
        if evicted is None:
            return

        victim = self._main.victim()
        if victim is None:
            self._main.add(evicted)
            return

        if not self._bouncer.allow(evicted.keyh):
            return

        if self._sketch.estimate(evicted.keyh) < self._sketch.estimate(victim.keyh):
            return

        self._main.add(evicted)