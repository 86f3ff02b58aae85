"""A singly linked list of arbitrary items."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One link of a LinkedList."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """Singly linked list with front and back insertion."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        for item in items or ():
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def _last_node(self) -> Optional[Node]:
        last = None
        for last in self._nodes():
            pass
        return last

    def add_front(self, item: Any) -> None:
        """Insert item at the start of the list."""
        self.head = Node(item, self.head)

    def add_back(self, item: Any) -> None:
        """Append item at the end of the list."""
        node = Node(item)
        last = self._last_node()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Any:
        """Return the last item; raise IndexError if the list is empty."""
        node = self._last_node()
        if node is None:
            raise IndexError("last of an empty list")
        return node.content

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        for node in self._nodes():
            yield node.content

    def for_each(self, func: Callable[[Any], Any]) -> None:
        """Call func on every item, front to back."""
        for item in self:
            func(item)

    def map(self, func: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding func applied to every item."""
        return LinkedList(func(item) for item in self)

    def clear(self, release: Optional[Callable[[Any], Any]] = None) -> None:
        """Empty the list, passing each item to release first when it is given."""
        node = self.head
        self.head = None
        while node is not None:
            following = node.next
            if release is not None:
                release(node.content)
            node.next = None
            node = following