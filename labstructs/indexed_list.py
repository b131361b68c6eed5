"""A positional list whose nodes remember the index they were given."""

from __future__ import annotations

from bisect import bisect_left
from dataclasses import dataclass
from operator import attrgetter
from typing import Any, Iterator

_by_index = attrgetter("index")


@dataclass(slots=True)
class _Node:
    index: int
    value: Any


def _bad_index(i: int) -> IndexError:
    return IndexError(f"invalid index {i}")


class IndexedList:
    """List of values in which every node carries a stored position.

    Appending gives a node the index after the last one, and inserting
    shifts the indices of the nodes that follow. Removing a node leaves the
    indices of the others untouched, so lookups by position go by the
    stored indices rather than by counting nodes.
    """

    def __init__(self) -> None:
        self._nodes: list[_Node] = []

    def __len__(self) -> int:
        return len(self._nodes)

    def is_empty(self) -> bool:
        """Return True when the list holds no values."""
        return not self._nodes

    def _next_index(self) -> int:
        return self._nodes[-1].index + 1 if self._nodes else 0

    def _slot(self, i: int) -> int:
        return bisect_left(self._nodes, i, key=_by_index)

    def _exact_slot(self, i: int) -> int:
        """Return the slot of the node stored at index ``i``."""
        slot = self._slot(i)
        if slot == len(self._nodes) or self._nodes[slot].index != i:
            raise _bad_index(i)
        return slot

    def _locate(self, i: int) -> _Node:
        """Return the first node whose index is at least ``i``."""
        if not self._nodes:
            raise IndexError("the list is empty")
        if i < 0 or i > self._next_index():
            raise _bad_index(i)
        slot = self._slot(i)
        if slot == len(self._nodes):
            raise _bad_index(i)
        return self._nodes[slot]

    def get(self, i: int) -> Any:
        """Return the value at position ``i``; raise IndexError if ``i`` is invalid."""
        return self._locate(i).value

    def set(self, i: int, elem: Any) -> Any:
        """Replace the value at position ``i`` and return the old one."""
        node = self._locate(i)
        old, node.value = node.value, elem
        return old

    def append(self, elem: Any) -> None:
        """Add ``elem`` after the last node."""
        self._nodes.append(_Node(self._next_index(), elem))

    def insert(self, i: int, elem: Any) -> None:
        """Insert ``elem`` at position ``i``, shifting the nodes from there on."""
        if i < 0 or i > self._next_index():
            raise _bad_index(i)
        if i == self._next_index():
            self.append(elem)
            return
        slot = self._exact_slot(i)
        for node in self._nodes[slot:]:
            node.index += 1
        self._nodes.insert(slot, _Node(i, elem))

    def pop(self, i: int) -> Any:
        """Remove the node stored at index ``i`` and return its value."""
        return self._nodes.pop(self._exact_slot(i)).value

    def find(self, elem: Any) -> int:
        """Return the stored index of the first node holding ``elem``, or -1."""
        return next((node.index for node in self._nodes if node.value == elem), -1)

    def remove_all(self, other: "IndexedList") -> int:
        """Remove every value that also occurs in ``other``; return how many were removed."""
        kept = [node for node in self._nodes if other.find(node.value) == -1]
        removed = len(self._nodes) - len(kept)
        self._nodes = kept
        return removed

    def iterator(self) -> "IndexedListIterator":
        """Return a cursor over the list, placed on its first node."""
        return IndexedListIterator(self)

    def __iter__(self) -> Iterator[Any]:
        return (node.value for node in list(self._nodes))


class IndexedListIterator:
    """Cursor over an indexed list, from the first node to the last."""

    def __init__(self, lst: IndexedList) -> None:
        self._list = lst
        self.first()

    def first(self) -> None:
        """Go back to the head of the list."""
        self._pos = 0

    def valid(self) -> bool:
        """Tell whether a node lies under the cursor."""
        return self._pos < len(self._list._nodes)

    def _current(self) -> _Node:
        if not self.valid():
            raise ValueError("iterator is not valid")
        return self._list._nodes[self._pos]

    def element(self) -> Any:
        """Return the value under the cursor; ValueError past the end."""
        return self._current().value

    def advance(self) -> None:
        """Step to the following node; ValueError past the end."""
        self._current()
        self._pos += 1