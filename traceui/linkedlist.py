"""A doubly linked list with stable element handles."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any, Generic, Optional, TypeVar

T = TypeVar("T")


class Element(Generic[T]):
    """A node of a :class:`LinkedList` holding one value."""

    __slots__ = ("value", "_next", "_prev", "_list")

    def __init__(self, value: Any = None) -> None:
        self.value = value
        self._next: Optional[Element[T]] = None
        self._prev: Optional[Element[T]] = None
        self._list: Optional[LinkedList[T]] = None

    def next(self) -> Optional[Element[T]]:
        """Return the following element, or None at the end of the list."""
        p = self._next
        if self._list is not None and p is not self._list._root:
            return p
        return None

    def prev(self) -> Optional[Element[T]]:
        """Return the preceding element, or None at the start of the list."""
        p = self._prev
        if self._list is not None and p is not self._list._root:
            return p
        return None

    def __repr__(self) -> str:
        return f"Element({self.value!r})"


class LinkedList(Generic[T]):
    """A ring-based doubly linked list; iteration yields the stored values."""

    def __init__(self, values: Iterable[T] = ()) -> None:
        self._root: Element[T] = Element()
        self._len = 0
        self.clear()
        for value in values:
            self.push_back(value)

    def clear(self) -> None:
        """Empty the list."""
        self._root._next = self._root
        self._root._prev = self._root
        self._len = 0

    def __len__(self) -> int:
        return self._len

    def __iter__(self) -> Iterator[T]:
        element = self.front()
        while element is not None:
            yield element.value
            element = element.next()

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def front(self) -> Optional[Element[T]]:
        """Return the first element, or None if the list is empty."""
        return self._root._next if self._len else None

    def back(self) -> Optional[Element[T]]:
        """Return the last element, or None if the list is empty."""
        return self._root._prev if self._len else None

    def _insert(self, element: Element[T], at: Element[T]) -> Element[T]:
        element._prev = at
        element._next = at._next
        element._prev._next = element
        element._next._prev = element
        element._list = self
        self._len += 1
        return element

    def _insert_value(self, value: T, at: Element[T]) -> Element[T]:
        return self._insert(Element(value), at)

    def _unlink(self, element: Element[T]) -> None:
        element._prev._next = element._next
        element._next._prev = element._prev
        element._next = None
        element._prev = None
        element._list = None
        self._len -= 1

    def _move(self, element: Element[T], at: Element[T]) -> None:
        if element is at:
            return
        element._prev._next = element._next
        element._next._prev = element._prev

        element._prev = at
        element._next = at._next
        element._prev._next = element
        element._next._prev = element

    def remove(self, element: Element[T]) -> T:
        """Remove element if it belongs to this list and return its value."""
        if element._list is self:
            self._unlink(element)
        return element.value

    def push_front(self, value: T) -> Element[T]:
        """Insert value at the front and return its element."""
        return self._insert_value(value, self._root)

    def push_back(self, value: T) -> Element[T]:
        """Insert value at the back and return its element."""
        return self._insert_value(value, self._root._prev)

    def insert_before(self, value: T, mark: Element[T]) -> Element[T]:
        """Insert value immediately before mark.

        Raises ValueError if mark does not belong to this list.
        """
        if mark._list is not self:
            raise ValueError("mark is not an element of this list")
        return self._insert_value(value, mark._prev)

    def insert_after(self, value: T, mark: Element[T]) -> Element[T]:
        """Insert value immediately after mark.

        Raises ValueError if mark does not belong to this list.
        """
        if mark._list is not self:
            raise ValueError("mark is not an element of this list")
        return self._insert_value(value, mark)

    def move_to_front(self, element: Element[T]) -> None:
        """Move element to the front; foreign elements are ignored."""
        if element._list is not self or self._root._next is element:
            return
        self._move(element, self._root)

    def move_to_back(self, element: Element[T]) -> None:
        """Move element to the back; foreign elements are ignored."""
        if element._list is not self or self._root._prev is element:
            return
        self._move(element, self._root._prev)

    def move_before(self, element: Element[T], mark: Element[T]) -> None:
        """Move element just before mark; ignored if either is foreign or they are equal."""
        if element._list is not self or element is mark or mark._list is not self:
            return
        self._move(element, mark._prev)

    def move_after(self, element: Element[T], mark: Element[T]) -> None:
        """Move element just after mark; ignored if either is foreign or they are equal."""
        if element._list is not self or element is mark or mark._list is not self:
            return
        self._move(element, mark)

    def push_back_list(self, other: LinkedList[T]) -> None:
        """Append a copy of other's values; other may be this list."""
        for value in list(other):
            self._insert_value(value, self._root._prev)

    def push_front_list(self, other: LinkedList[T]) -> None:
        """Prepend a copy of other's values; other may be this list."""
        for value in reversed(list(other)):
            self._insert_value(value, self._root)