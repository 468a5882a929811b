"""A singly linked list of arbitrary contents."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional


@dataclass(eq=False)
class Node:
    """One link of a list."""

    content: Any
    next: Optional["Node"] = None


def delete_node(node: Optional[Node], delete: Optional[Callable[[Any], None]]) -> None:
    """Release a node's content with ``delete``; does nothing without both."""
    if node is None or delete is None:
        return
    delete(node.content)
    node.next = None


class LinkedList:
    """A list of :class:`Node` links starting at ``head``."""

    def __init__(self, contents: Iterable[Any] = ()) -> None:
        self.head: Optional[Node] = None
        for content in contents:
            self.add_back(Node(content))

    def _nodes(self) -> Iterator[Node]:
        node = self.head
        while node is not None:
            yield node
            node = node.next

    def __iter__(self) -> Iterator[Any]:
        return (node.content for node in self._nodes())

    def __len__(self) -> int:
        return sum(1 for _ in self._nodes())

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def add_front(self, node: Node) -> None:
        """Make ``node`` the new head."""
        node.next = self.head
        self.head = node

    def add_back(self, node: Optional[Node]) -> None:
        """Append ``node`` after the last link; None is ignored."""
        if node is None:
            return
        tail = self.last()
        if tail is None:
            self.head = node
        else:
            tail.next = node

    def last(self) -> Optional[Node]:
        """Return the last link, or None for an empty list."""
        tail = None
        for tail in self._nodes():
            pass
        return tail

    def clear(self, delete: Optional[Callable[[Any], None]]) -> None:
        """Delete every link's content with ``delete`` and empty the list.

        Without ``delete`` the list is left as it is.
        """
        if delete is None:
            return
        node = self.head
        while node is not None:
            following = node.next
            delete_node(node, delete)
            node = following
        self.head = None

    def iterate(self, func: Callable[[Any], Any]) -> None:
        """Call ``func`` on every content in order."""
        for content in self:
            func(content)

    def map(
        self,
        func: Callable[[Any], Any],
        delete: Optional[Callable[[Any], None]] = None,
    ) -> "LinkedList":
        """Return a new list of ``func`` applied to every content.

        If ``func`` raises, contents already built are released with
        ``delete`` before the error propagates.
        """
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
        except Exception:
            result.clear(delete)
            raise
        return result