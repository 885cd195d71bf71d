"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass
class Node:
    """One list element: its content and the following node."""

    content: Any
    next: Optional["Node"] = None


class LinkedList:
    """A singly linked list addressed through its head node."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for item in items:
            self.add_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def add_front(self, content: Any) -> Node:
        """Insert ``content`` before the head and return its node."""
        node = Node(content, self.head)
        self.head = node
        return node

    def add_back(self, content: Any) -> Node:
        """Append ``content`` after the last node and return its node."""
        node = Node(content)
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node
        return node

    def last(self) -> Optional[Node]:
        """Return the last node, or ``None`` for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def iter(self, f: Callable[[Any], Any]) -> None:
        """Call ``f`` on every content, front to back."""
        for content in self:
            f(content)

    def map(self, f: Callable[[Any], Any]) -> "LinkedList":
        """Return a new list holding ``f`` applied to every content."""
        return LinkedList(f(content) for content in self)

    def clear(self, delete: Optional[Callable[[Any], Any]] = None) -> None:
        """Remove every node, passing each content to ``delete`` first."""
        node = self.head
        while node is not None:
            following = node.next
            if delete is not None:
                delete(node.content)
            node.next = None
            node = following
        self.head = None

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"