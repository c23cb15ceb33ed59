import pytest

from traceui.linkedlist import LinkedList


def test_empty_list_has_no_front_or_back():
    lst = LinkedList()
    assert len(lst) == 0
    assert lst.front() is None
    assert lst.back() is None
    assert list(lst) == []


def test_push_front_and_back_order():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_back(3)
    lst.push_front(1)
    assert list(lst) == [1, 2, 3]
    assert len(lst) == 3
    assert lst.front().value == 1
    assert lst.back().value == 3


def test_constructor_values():
    lst = LinkedList(["a", "b", "c"])
    assert list(lst) == ["a", "b", "c"]


def test_next_and_prev_stop_at_ends():
    lst = LinkedList()
    a = lst.push_back("a")
    b = lst.push_back("b")
    assert a.prev() is None
    assert a.next() is b
    assert b.prev() is a
    assert b.next() is None


def test_remove_returns_value_and_detaches():
    lst = LinkedList()
    a = lst.push_back("a")
    b = lst.push_back("b")
    c = lst.push_back("c")
    assert lst.remove(b) == "b"
    assert list(lst) == ["a", "c"]
    assert len(lst) == 2
    assert b.next() is None
    assert b.prev() is None
    assert a.next() is c


def test_remove_foreign_element_leaves_list_unchanged():
    lst = LinkedList(["x", "y"])
    other = LinkedList()
    foreign = other.push_back("z")
    assert lst.remove(foreign) == "z"
    assert list(lst) == ["x", "y"]
    assert list(other) == ["z"]


def test_insert_before_and_after():
    lst = LinkedList()
    mid = lst.push_back("m")
    lst.insert_before("b", mid)
    lst.insert_after("a", mid)
    assert list(lst) == ["b", "m", "a"]


def test_insert_with_foreign_mark_raises():
    lst = LinkedList(["x"])
    other = LinkedList()
    mark = other.push_back("y")
    with pytest.raises(ValueError):
        lst.insert_before("z", mark)
    with pytest.raises(ValueError):
        lst.insert_after("z", mark)
    assert list(lst) == ["x"]


def test_move_to_front_and_back():
    lst = LinkedList()
    a = lst.push_back(1)
    lst.push_back(2)
    c = lst.push_back(3)
    lst.move_to_front(c)
    assert list(lst) == [3, 1, 2]
    lst.move_to_back(a)
    assert list(lst) == [3, 2, 1]
    lst.move_to_front(c)
    assert list(lst) == [3, 2, 1]
    assert len(lst) == 3


def test_move_before_and_after():
    lst = LinkedList()
    a = lst.push_back(1)
    b = lst.push_back(2)
    c = lst.push_back(3)
    lst.move_before(c, a)
    assert list(lst) == [3, 1, 2]
    lst.move_after(c, b)
    assert list(lst) == [1, 2, 3]
    lst.move_after(a, a)
    assert list(lst) == [1, 2, 3]


def test_move_foreign_element_is_ignored():
    lst = LinkedList([1, 2])
    other = LinkedList()
    foreign = other.push_back(9)
    lst.move_to_front(foreign)
    lst.move_before(foreign, lst.front())
    assert list(lst) == [1, 2]
    assert list(other) == [9]


def test_push_back_list_with_self():
    lst = LinkedList([1, 2])
    lst.push_back_list(lst)
    assert list(lst) == [1, 2, 1, 2]
    assert len(lst) == 4


def test_push_front_list():
    lst = LinkedList([3, 4])
    other = LinkedList([1, 2])
    lst.push_front_list(other)
    assert list(lst) == [1, 2, 3, 4]
    assert list(other) == [1, 2]


def test_clear_empties_list():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert len(lst) == 0
    assert lst.front() is None
    lst.push_back(7)
    assert list(lst) == [7]