"""A singly linked list."""

from __future__ import annotations

from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any


@dataclass
class Node:
    """One link of a LinkedList."""

    content: Any = None
    next: Node | None = None


class LinkedList:
    """Singly linked list of arbitrary contents."""

    def __init__(self, items: Iterable[Any] | None = None) -> None:
        self.head: Node | None = None
        self._tail: Node | None = None
        for item in items or ():
            self.push_back(item)

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def push_front(self, content: Any) -> Node:
        """Insert content at the front; return the new node."""
        node = Node(content, self.head)
        self.head = node
        if self._tail is None:
            self._tail = node
        return node

    def push_back(self, content: Any) -> Node:
        """Append content at the end; return the new node."""
        node = Node(content)
        if self._tail is None:
            self.head = node
        else:
            self._tail.next = node
        self._tail = node
        return node

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def each(self, func: Callable[[Node], Any]) -> None:
        """Call func on every node in order."""
        for node in self._nodes():
            func(node)

    def map(self, func: Callable[[Any], Any]) -> LinkedList:
        """Return a new list holding func applied to each content."""
        return LinkedList(func(content) for content in self)

    def clear(self, release: Callable[[Any], Any] | None = None) -> None:
        """Empty the list, passing each content to release from last to first."""
        if release is not None:
            for content in reversed(list(self)):
                release(content)
        self.head = None
        self._tail = None