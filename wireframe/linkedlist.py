"""A singly linked list holding arbitrary content."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Callable, Iterable, Iterator, Optional

Deleter = Optional[Callable[[Any], None]]


@dataclass
class _Node:
    content: Any
    next: Optional["_Node"] = None


class LinkedList:
    """A singly linked list with constant-time insertion at both ends."""

    def __init__(self, items: Iterable[Any] = ()) -> None:
        self._head: Optional[_Node] = None
        self._tail: Optional[_Node] = None
        self._size = 0
        for item in items:
            self.push_back(item)

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._head is not None

    def __iter__(self) -> Iterator[Any]:
        node = self._head
        while node is not None:
            yield node.content
            node = node.next

    def __repr__(self) -> str:
        return f"LinkedList({list(self)!r})"

    def push_front(self, content: Any) -> None:
        """Insert ``content`` before the first element."""
        node = _Node(content, self._head)
        self._head = node
        if self._tail is None:
            self._tail = node
        self._size += 1

    def push_back(self, content: Any) -> None:
        """Append ``content`` after the last element."""
        node = _Node(content)
        if self._tail is None:
            self._head = node
        else:
            self._tail.next = node
        self._tail = node
        self._size += 1

    def last(self) -> Any:
        """Return the content of the last element."""
        if self._tail is None:
            raise IndexError("last() on an empty list")
        return self._tail.content

    def pop_front(self, delete: Deleter = None) -> Any:
        """Remove the first element and return its content.

        ``delete`` is called on the content when both are present.
        """
        if self._head is None:
            raise IndexError("pop_front() on an empty list")
        node = self._head
        self._head = node.next
        if self._head is None:
            self._tail = None
        self._size -= 1
        if delete is not None and node.content is not None:
            delete(node.content)
        return node.content

    def clear(self, delete: Deleter = None) -> None:
        """Remove every element, calling ``delete`` on each content in order."""
        node = self._head
        self._head = self._tail = None
        self._size = 0
        while node is not None:
            if delete is not None:
                delete(node.content)
            node = node.next

    def for_each(self, func: Optional[Callable[[Any], None]]) -> None:
        """Call ``func`` on every content that is not None."""
        if func is None:
            return
        for content in self:
            if content is not None:
                func(content)

    def map(self, func: Callable[[Any], Any], delete: Deleter = None) -> "LinkedList":
        """Return a new list of ``func`` applied to every content.

        If ``func`` yields None, the partial result is cleared with
        ``delete`` and ValueError is raised.
        """
        result = LinkedList()
        for content in self:
            mapped = func(content)
            if mapped is None:
                result.clear(delete)
                raise ValueError("mapping function returned None")
            result.push_back(mapped)
        return result