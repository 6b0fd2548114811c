import pytest

from solong.linkedlist import LinkedList, Node


def test_push_back_keeps_insertion_order():
    lst = LinkedList()
    for n in (10, 20, 5):
        lst.push_back(n)
    assert list(lst) == [10, 20, 5]


def test_push_front_reverses_insertion_order():
    lst = LinkedList()
    for n in (10, 20, 5):
        lst.push_front(n)
    assert list(lst) == [5, 20, 10]


def test_size_counts_nodes():
    lst = LinkedList()
    assert len(lst) == 0
    for n in (10, 20, 5):
        lst.push_front(n)
    assert len(lst) == 3


def test_last_of_empty_list_is_none():
    assert LinkedList().last() is None


def test_last_returns_tail_node():
    lst = LinkedList([10, 20, 5])
    tail = lst.last()
    assert isinstance(tail, Node)
    assert tail.content == 5
    assert tail.next is None


def test_push_returns_linked_node():
    lst = LinkedList()
    first = lst.push_back("a")
    second = lst.push_back("b")
    assert first.next is second
    assert lst.head is first


def test_iterate_visits_every_content_in_order():
    seen = []
    LinkedList(["Bonjour", "Tout", "Le Monde"]).iterate(seen.append)
    assert seen == ["Bonjour", "Tout", "Le Monde"]


def test_map_builds_new_list_and_keeps_original():
    lst = LinkedList([1, 2, 3])
    mapped = lst.map(lambda n: n * 2, lambda _: None)
    assert list(mapped) == [n * 2 for n in lst]
    assert list(lst) == [1, 2, 3]


def test_map_of_empty_list_is_empty():
    mapped = LinkedList().map(str, lambda _: None)
    assert list(mapped) == []


def test_map_failure_deletes_partial_results():
    deleted = []

    def func(n):
        if n == 3:
            raise RuntimeError("boom")
        return n * 10

    lst = LinkedList([1, 2, 3])
    with pytest.raises(RuntimeError):
        lst.map(func, deleted.append)
    assert sorted(deleted) == [10, 20]
    assert list(lst) == [1, 2, 3]


def test_clear_deletes_tail_first_and_empties():
    deleted = []
    lst = LinkedList(["a", "b", "c"])
    lst.clear(deleted.append)
    assert deleted == ["c", "b", "a"]
    assert len(lst) == 0
    assert lst.head is None


def test_clear_without_delete_empties():
    lst = LinkedList([1, 2])
    lst.clear()
    assert list(lst) == []