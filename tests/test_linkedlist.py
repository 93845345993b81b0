import pytest

from bankqueue.linkedlist import LinkedList, Node


def test_new_list_is_empty():
    lst = LinkedList()
    assert lst.is_empty()
    assert len(lst) == 0
    assert list(lst) == []


def test_init_keeps_order():
    lst = LinkedList([3, 1, 2])
    assert list(lst) == [3, 1, 2]
    assert len(lst) == 3
    assert not lst.is_empty()


def test_push_front_and_back():
    lst = LinkedList()
    lst.push_back(2)
    lst.push_front(1)
    lst.push_back(3)
    assert list(lst) == [1, 2, 3]


def test_contains_and_find():
    lst = LinkedList([5, 6, 7])
    assert 6 in lst
    assert 9 not in lst
    node = lst.find(6)
    assert node.value == 6
    assert node.next.value == 7
    assert lst.find(9) is None


def test_find_previous():
    lst = LinkedList([5, 6, 7])
    assert lst.find_previous(5) is None
    assert lst.find_previous(7).value == 6
    assert lst.find_previous(42) is None


def test_has_node_uses_identity():
    lst = LinkedList([1, 2])
    assert lst.has_node(lst.find(2))
    assert not lst.has_node(Node(2))


def test_pop_front_returns_first():
    lst = LinkedList([4, 5])
    assert lst.pop_front() == 4
    assert list(lst) == [5]


def test_pop_back_returns_last():
    lst = LinkedList([4, 5, 6])
    assert lst.pop_back() == 6
    assert list(lst) == [4, 5]


def test_pop_back_single_element_empties_list():
    lst = LinkedList([8])
    assert lst.pop_back() == 8
    assert lst.is_empty()


@pytest.mark.parametrize("method", ["pop_front", "pop_back"])
def test_pop_from_empty_raises(method):
    with pytest.raises(IndexError):
        getattr(LinkedList(), method)()


def test_insert_node_first_and_last():
    lst = LinkedList([2])
    first = Node(1)
    last = Node(3)
    lst.insert_node_first(first)
    lst.insert_node_last(last)
    assert list(lst) == [1, 2, 3]
    assert lst.first is first
    assert lst.has_node(last)


def test_insert_node_last_on_empty_list():
    lst = LinkedList()
    node = Node(9)
    lst.insert_node_last(node)
    assert lst.first is node
    assert list(lst) == [9]


def test_insert_node_after():
    lst = LinkedList([1, 3])
    lst.insert_node_after(Node(2), lst.find(1))
    assert list(lst) == [1, 2, 3]


def test_insert_node_after_foreign_node_raises():
    lst = LinkedList([1, 3])
    with pytest.raises(ValueError):
        lst.insert_node_after(Node(2), Node(1))
    assert list(lst) == [1, 3]


def test_remove_first_middle_and_missing():
    lst = LinkedList([1, 2, 3, 2])
    assert lst.remove(1) is True
    assert list(lst) == [2, 3, 2]
    assert lst.remove(3) is True
    assert list(lst) == [2, 2]
    assert lst.remove(7) is False
    assert list(lst) == [2, 2]


def test_remove_after():
    lst = LinkedList([1, 2, 3])
    removed = lst.remove_after(lst.first)
    assert removed.value == 2
    assert removed.next is None
    assert list(lst) == [1, 3]


def test_remove_after_last_raises():
    lst = LinkedList([1, 2])
    with pytest.raises(ValueError, match="Tidak ada element berikutnya"):
        lst.remove_after(lst.find(2))
    assert list(lst) == [1, 2]


def test_clear():
    lst = LinkedList([1, 2, 3])
    lst.clear()
    assert lst.is_empty()
    assert len(lst) == 0


def test_format_non_empty():
    assert LinkedList([1, 2]).format() == "Isi List: 1 -> 2 -> NULL\n================== "


def test_format_empty():
    assert LinkedList().format() == "List ini kosong\n================== "


def test_round_trip_push_back_pop_front_preserves_order():
    values = [10, 20, 30, 40]
    lst = LinkedList()
    for value in values:
        lst.push_back(value)
    assert [lst.pop_front() for _ in values] == values
    assert lst.is_empty()