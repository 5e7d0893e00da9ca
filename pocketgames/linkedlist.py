"""A singly linked list of integers with insertion at the head."""

from __future__ import annotations

import sys
from collections.abc import Iterable, Iterator
from dataclasses import dataclass


@dataclass
class _Node:
    data: int
    next: _Node | None = None


class LinkedList:
    """Singly linked list; new values are pushed onto the head."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self._head: _Node | None = None
        self._size = 0
        for value in reversed(list(values)):
            self.add(value)

    def add(self, value: int) -> None:
        """Insert ``value`` in front of the current head."""
        self._head = _Node(value, self._head)
        self._size += 1

    def delete(self, value: int) -> None:
        """Remove the first node holding ``value``; do nothing if absent."""
        previous: _Node | None = None
        current = self._head
        while current is not None and current.data != value:
            previous, current = current, current.next
        if current is None:
            return
        if previous is None:
            self._head = current.next
        else:
            previous.next = current.next
        self._size -= 1

    def sort(self) -> None:
        """Sort the values in ascending order, keeping the nodes in place."""
        for node, value in zip(self._nodes(), sorted(self)):
            node.data = value

    def _nodes(self) -> Iterator[_Node]:
        node = self._head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def render(self) -> str:
        """Return the list as ``a -> b -> NULL``."""
        return "".join(f"{value} -> " for value in self) + "NULL"


def main(argv: list[str] | None = None) -> int:
    """Build a small list, sort it, delete a value and print each stage."""
    del argv
    items = LinkedList()
    for value in (5, 3, 9, 1):
        items.add(value)

    out = sys.stdout
    print("Original List:", file=out)
    print(items.render(), file=out)

    items.sort()
    print("Sorted List:", file=out)
    print(items.render(), file=out)

    items.delete(3)
    print("After deleting 3:", file=out)
    print(items.render(), file=out)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())