"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], Any]]


class Node:
    """One element of a linked list: a piece of content and a link to the next node."""

    __slots__ = ("content", "next")

    def __init__(self, content: Any = None) -> None:
        self.content = content
        self.next: Optional[Node] = None

    def discard(self, delete: Deleter = None) -> None:
        """Release this node, passing its content to ``delete`` first when one is given."""
        if delete is not None:
            delete(self.content)
        self.content = None
        self.next = None

    def __repr__(self) -> str:
        return f"Node({self.content!r})"


class LinkedList:
    """A chain of :class:`Node` objects starting at ``head``."""

    def __init__(self, items: Optional[Iterable[Any]] = None) -> None:
        self.head: Optional[Node] = None
        if items is not None:
            tail: Optional[Node] = None
            for item in items:
                node = Node(item)
                if tail is None:
                    self.head = node
                else:
                    tail.next = node
                tail = node

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            following = node.next
            yield node
            node = following

    def push_front(self, node: Optional[Node]) -> None:
        """Make ``node`` the new head; a missing node is ignored."""
        if node is None:
            return
        if self.head is not None:
            node.next = self.head
        self.head = node

    def push_back(self, node: Optional[Node]) -> None:
        """Append ``node`` after the last node; a missing node is ignored."""
        if node is None:
            return
        last = self.last()
        if last is None:
            self.head = node
        else:
            last.next = node

    def last(self) -> Optional[Node]:
        """Return the final node, or None for an empty list."""
        last = None
        for last in self._nodes():
            pass
        return last

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def clear(self, delete: Deleter = None) -> None:
        """Discard every node, passing each content to ``delete`` when one is given."""
        for node in self._nodes():
            node.discard(delete)
        self.head = None

    def for_each(self, func: Optional[Callable[[Any], Any]]) -> None:
        """Call ``func`` on every content in order; a missing function does nothing."""
        if func is None:
            return
        for content in self:
            func(content)

    def map(
        self,
        func: Optional[Callable[[Any], Any]],
        delete: Deleter = None,
    ) -> Optional[LinkedList]:
        """Return a new list holding ``func(content)`` for every content.

        Returns None when ``func`` is missing. If ``func`` raises, the nodes
        built so far are cleared with ``delete`` and the error propagates.
        """
        if func is None:
            return None
        result = LinkedList()
        tail: Optional[Node] = None
        try:
            for content in self:
                node = Node(func(content))
                if tail is None:
                    result.head = node
                else:
                    tail.next = node
                tail = node
        except BaseException:
            result.clear(delete)
            raise
        return result