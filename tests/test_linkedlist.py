import pytest

from pocketgames.linkedlist import LinkedList, main


def test_values_keep_given_order():
    assert list(LinkedList([5, 3, 9])) == [5, 3, 9]


def test_add_prepends():
    items = LinkedList([1])
    items.add(2)
    assert list(items) == [2, 1]
    assert len(items) == 2


def test_empty_list():
    items = LinkedList()
    assert list(items) == []
    assert len(items) == 0
    assert items.render() == "NULL"


def test_delete_first_occurrence_only():
    items = LinkedList([3, 1, 3])
    items.delete(3)
    assert list(items) == [1, 3]
    assert len(items) == 2


def test_delete_middle_and_tail():
    items = LinkedList([4, 5, 6])
    items.delete(5)
    assert list(items) == [4, 6]
    items.delete(6)
    assert list(items) == [4]


def test_delete_missing_is_noop():
    items = LinkedList([4, 5])
    items.delete(42)
    assert list(items) == [4, 5]
    assert len(items) == 2


@pytest.mark.parametrize("values", [[], [7], [5, 3, 9, 1], [2, 2, -1, 0, 8, 2]])
def test_sort_orders_ascending(values):
    items = LinkedList(values)
    items.sort()
    assert list(items) == sorted(values)
    assert len(items) == len(values)


def test_render_format():
    assert LinkedList([1, 2]).render() == "1 -> 2 -> NULL"


def test_main_prints_stages(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "Original List:"
    assert lines[2] == "Sorted List:"
    assert lines[3] == "1 -> 3 -> 5 -> 9 -> NULL"
    assert lines[4] == "After deleting 3:"
    assert lines[5] == "1 -> 5 -> 9 -> NULL"