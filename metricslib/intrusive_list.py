"""Circular doubly-linked intrusive list."""

from __future__ import annotations

from typing import Generic, Iterator, Optional, TypeVar

N = TypeVar("N", bound="IntrusiveListNode")


class IntrusiveListNode:
    """A node that can be linked into exactly one intrusive list at a time.

    Subclass it and call ``super().__init__()`` to make items listable.
    """

    def __init__(self) -> None:
        self.prev: Optional[IntrusiveListNode] = None
        self.next: Optional[IntrusiveListNode] = None

    def link_before(self, that: IntrusiveListNode) -> None:
        """Link this node into the list immediately before ``that``."""
        if self.is_linked():
            raise ValueError("node is already linked into a list")
        self.prev = that.prev
        self.prev.next = self
        self.next = that
        that.prev = self

    def is_linked(self) -> bool:
        return self.next is not None

    def unlink(self) -> None:
        """Remove this node from the list it is linked into."""
        if not self.is_linked():
            raise ValueError("node is not linked into a list")
        self.next.prev = self.prev
        self.prev.next = self.next
        self.next = None
        self.prev = None


class IntrusiveList(Generic[N]):
    """A list whose items carry their own links."""

    def __init__(self) -> None:
        self._enter = IntrusiveListNode()
        self._enter.next = self._enter
        self._enter.prev = self._enter

    def push_back(self, node: N) -> None:
        node.link_before(self._enter)

    def push_front(self, node: N) -> None:
        node.link_before(self._enter.next)

    def pop_front_non_empty(self) -> N:
        """Remove and return the first item; raise IndexError if empty."""
        front = self.front_non_empty()
        front.unlink()
        return front

    def try_pop_front(self) -> Optional[N]:
        if self.is_empty():
            return None
        return self.pop_front_non_empty()

    def pop_back_non_empty(self) -> N:
        """Remove and return the last item; raise IndexError if empty."""
        back = self.back_non_empty()
        back.unlink()
        return back

    def try_pop_back(self) -> Optional[N]:
        if self.is_empty():
            return None
        return self.pop_back_non_empty()

    def is_empty(self) -> bool:
        return self._enter.next is self._enter

    def non_empty(self) -> bool:
        return not self.is_empty()

    def __bool__(self) -> bool:
        return self.non_empty()

    def front_non_empty(self) -> N:
        if self.is_empty():
            raise IndexError("front of an empty list")
        return self._enter.next  # type: ignore[return-value]

    def try_front(self) -> Optional[N]:
        if self.is_empty():
            return None
        return self.front_non_empty()

    def back_non_empty(self) -> N:
        if self.is_empty():
            raise IndexError("back of an empty list")
        return self._enter.prev  # type: ignore[return-value]

    def try_back(self) -> Optional[N]:
        if self.is_empty():
            return None
        return self.back_non_empty()

    def append(self, that: IntrusiveList[N]) -> None:
        """Move every node of ``that`` to the end of this list, leaving it empty."""
        if that.is_empty():
            return
        that_front = that._enter.next
        that_back = that._enter.prev
        back = self._enter.prev

        that_back.next = self._enter
        that_front.prev = back
        self._enter.prev = that_back
        back.next = that_front

        that._enter.next = that._enter
        that._enter.prev = that._enter

    def swap(self, that: IntrusiveList[N]) -> None:
        """Exchange the contents of two lists in constant time."""
        self._enter, that._enter = that._enter, self._enter

    def __iter__(self) -> Iterator[N]:
        node = self._enter.next
        while node is not self._enter:
            following = node.next
            yield node  # type: ignore[misc]
            node = following