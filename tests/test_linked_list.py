import pytest

from dsakit.linked_list import LinkedList, Node, has_loop, intersection_node


def _node_at(lst, index):
    p = lst.head
    for _ in range(index):
        p = p.next
    return p


def test_build_and_iterate():
    lst = LinkedList([3, 5, 6, 7, 9, 1])
    assert list(lst) == [3, 5, 6, 7, 9, 1]


def test_empty_list():
    lst = LinkedList()
    assert list(lst) == []
    assert len(lst) == 0
    assert lst.head is None


def test_reversed_values():
    lst = LinkedList([3, 7, 4, 3, 8, 9])
    assert lst.reversed_values() == [9, 8, 3, 4, 7, 3]
    assert list(lst) == [3, 7, 4, 3, 8, 9]


def test_count_and_sum():
    lst = LinkedList([3, 4, 5, 6, 7, 8, 9, 10])
    assert len(lst) == 8
    assert lst.recursive_count() == 8
    assert lst.total() == 52
    assert lst.recursive_total() == 52


def test_empty_sums_are_zero():
    lst = LinkedList()
    assert lst.total() == 0
    assert lst.recursive_total() == 0
    assert lst.recursive_count() == 0


def test_maximum():
    lst = LinkedList([7, 3, 6, 9, 1, 51])
    assert lst.maximum() == 51
    assert lst.recursive_maximum() == 51


def test_maximum_of_empty_raises():
    with pytest.raises(ValueError):
        LinkedList().maximum()
    with pytest.raises(ValueError):
        LinkedList().recursive_maximum()


def test_search_returns_node():
    lst = LinkedList([3, 6, 1, 7, 8, 5])
    node = lst.search(1)
    assert node is _node_at(lst, 2)
    assert node.data == 1
    assert lst.recursive_search(1) is node
    assert lst.search(42) is None
    assert lst.recursive_search(42) is None


def test_move_to_front_search():
    lst = LinkedList([3, 6, 1, 7, 8, 5])
    node = lst.move_to_front_search(5)
    assert node.data == 5
    assert lst.head is node
    lst.move_to_front_search(1)
    assert list(lst) == [1, 5, 3, 6, 7, 8]


def test_move_to_front_of_head_keeps_order():
    lst = LinkedList([3, 6, 1])
    assert lst.move_to_front_search(3) is lst.head
    assert list(lst) == [3, 6, 1]
    assert lst.move_to_front_search(99) is None
    assert list(lst) == [3, 6, 1]


def test_insert_at_end():
    lst = LinkedList([3, 6, 8, 5, 1, 2])
    lst.insert(6, 9)
    assert list(lst) == [3, 6, 8, 5, 1, 2, 9]


def test_insert_at_head_and_middle():
    lst = LinkedList([3, 6, 8])
    lst.insert(0, 1)
    lst.insert(2, 4)
    assert list(lst) == [1, 3, 4, 6, 8]


@pytest.mark.parametrize("position", [-1, 4])
def test_insert_out_of_range(position):
    lst = LinkedList([3, 6, 8])
    with pytest.raises(IndexError):
        lst.insert(position, 0)
    assert list(lst) == [3, 6, 8]


def test_insert_sorted_keeps_order():
    lst = LinkedList([3, 5, 7, 9])
    for value in (10, 45, 1, 6):
        lst.insert_sorted(value)
    assert lst.is_sorted()
    assert sorted(lst) == list(lst)
    assert len(lst) == 8


def test_insert_sorted_into_empty():
    lst = LinkedList()
    lst.insert_sorted(4)
    assert list(lst) == [4]


def test_delete():
    lst = LinkedList([3, 5, 7, 9, 0, 1])
    assert lst.delete(5) == 0
    assert list(lst) == [3, 5, 7, 9, 1]
    assert lst.delete(1) == 3
    assert list(lst) == [5, 7, 9, 1]


@pytest.mark.parametrize("position", [0, 7, -2])
def test_delete_out_of_range(position):
    lst = LinkedList([3, 5, 7, 9, 0, 1])
    with pytest.raises(IndexError):
        lst.delete(position)
    assert len(lst) == 6


def test_is_sorted():
    assert LinkedList([3, 5, 7, 9]).is_sorted() is True
    assert LinkedList([3, 7, 5]).is_sorted() is False
    assert LinkedList().is_sorted() is True


def test_remove_duplicates():
    lst = LinkedList([3, 5, 5, 8, 8])
    lst.remove_duplicates()
    assert list(lst) == [3, 5, 8]


def test_remove_duplicates_on_empty():
    lst = LinkedList()
    lst.remove_duplicates()
    assert list(lst) == []


@pytest.mark.parametrize("method", ["reverse_by_copy", "reverse", "recursive_reverse"])
def test_reversals(method):
    values = [3, 5, 7, 9, 1, 0]
    lst = LinkedList(values)
    getattr(lst, method)()
    assert list(lst) == values[::-1]


def test_reverse_relinks_nodes():
    lst = LinkedList([3, 5, 7])
    last = _node_at(lst, 2)
    lst.reverse()
    assert lst.head is last


def test_concatenate():
    first = LinkedList([3, 5, 7, 9])
    second = LinkedList([2, 4, 6, 8])
    first.concatenate(second)
    assert list(first) == [3, 5, 7, 9, 2, 4, 6, 8]
    assert list(second) == []


def test_concatenate_onto_empty():
    first = LinkedList()
    second = LinkedList([2, 4])
    first.concatenate(second)
    assert list(first) == [2, 4]


def test_merge():
    first = LinkedList([3, 5, 7, 9])
    second = LinkedList([2, 4, 6, 8])
    first.merge(second)
    assert list(first) == [2, 3, 4, 5, 6, 7, 8, 9]
    assert list(second) == []


def test_merge_with_empty():
    first = LinkedList()
    second = LinkedList([1, 2])
    first.merge(second)
    assert list(first) == [1, 2]


def test_middle():
    assert LinkedList([3, 5, 7, 9, 1]).middle() == 7
    assert LinkedList([1, 2, 3, 4]).middle() == 2
    with pytest.raises(ValueError):
        LinkedList().middle()


def test_has_loop():
    lst = LinkedList([3, 5, 7, 9, 10])
    assert has_loop(lst.head) is False
    _node_at(lst, 4).next = _node_at(lst, 2)
    assert has_loop(lst.head) is True


def test_has_loop_small_chains():
    assert has_loop(None) is False
    single = Node(1)
    assert has_loop(single) is False
    single.next = single
    assert has_loop(single) is True


def test_intersection_node():
    first = LinkedList([1, 3, 5, 7, 9, 11, 13, 15, 17, 19, 21])
    joint = _node_at(first, 5)
    second = LinkedList([2, 4, 6, 8, 10])
    _node_at(second, 4).next = joint
    found = intersection_node(first.head, second.head)
    assert found is joint
    assert found.data == 11


def test_intersection_of_disjoint_chains():
    first = LinkedList([1, 2, 3])
    second = LinkedList([1, 2, 3])
    assert intersection_node(first.head, second.head) is None