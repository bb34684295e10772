"""Singly and doubly linked lists with reversal, cycle handling, sorting and reordering."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from itertools import islice
from typing import Optional


@dataclass(eq=False)
class ListNode:
    """A node of a singly linked list."""

    data: int
    next: Optional["ListNode"] = None


def _split(head: ListNode) -> Optional[ListNode]:
    """Cut the chain in two and return the head of the second half."""
    slow: Optional[ListNode] = head
    fast: Optional[ListNode] = head
    prev: Optional[ListNode] = None
    while fast is not None and fast.next is not None:
        prev = slow
        slow = slow.next  # type: ignore[union-attr]
        fast = fast.next.next
    if prev is not None:
        prev.next = None
    return slow


def _merge(left: Optional[ListNode], right: Optional[ListNode]) -> Optional[ListNode]:
    dummy = ListNode(0)
    last = dummy
    while left is not None and right is not None:
        if left.data <= right.data:
            last.next = left
            left = left.next
        else:
            last.next = right
            right = right.next
        last = last.next
    last.next = left if left is not None else right
    return dummy.next


def _merge_sort(head: Optional[ListNode]) -> Optional[ListNode]:
    if head is None or head.next is None:
        return head
    second = _split(head)
    return _merge(_merge_sort(head), _merge_sort(second))


def _reverse(head: Optional[ListNode]) -> Optional[ListNode]:
    prev: Optional[ListNode] = None
    current = head
    while current is not None:
        current.next, prev, current = prev, current, current.next
    return prev


def _last(head: Optional[ListNode]) -> Optional[ListNode]:
    node = head
    while node is not None and node.next is not None:
        node = node.next
    return node


class LinkedList:
    """A singly linked list that keeps its head, tail and length."""

    def __init__(self, values: Iterable[int] = ()) -> None:
        self.head: Optional[ListNode] = None
        self.tail: Optional[ListNode] = None
        self._size = 0
        for value in values:
            self.push_back(value)

    def _nodes(self) -> Iterator[ListNode]:
        node = self.head
        while node is not None:
            yield node
            if node is self.tail:
                return
            node = node.next

    def _node_at(self, index: int) -> ListNode:
        return next(islice(self._nodes(), index, None))

    def _ensure_acyclic(self) -> None:
        if self.tail is not None and self.tail.next is not None:
            raise ValueError("the list has a cycle")

    def __iter__(self) -> Iterator[int]:
        return (node.data for node in self._nodes())

    def __len__(self) -> int:
        return self._size

    def push_front(self, value: int) -> None:
        """Add value before the first element."""
        self._ensure_acyclic()
        node = ListNode(value, self.head)
        self.head = node
        if self.tail is None:
            self.tail = node
        self._size += 1

    def push_back(self, value: int) -> None:
        """Add value after the last element."""
        self._ensure_acyclic()
        node = ListNode(value)
        if self.tail is None:
            self.head = self.tail = node
        else:
            self.tail.next = node
            self.tail = node
        self._size += 1

    def pop_front(self) -> int:
        """Remove and return the first element."""
        self._ensure_acyclic()
        if self.head is None:
            raise IndexError("pop from an empty list")
        node = self.head
        if node is self.tail:
            self.head = self.tail = None
        else:
            self.head = node.next
        node.next = None
        self._size -= 1
        return node.data

    def pop_back(self) -> int:
        """Remove and return the last element."""
        self._ensure_acyclic()
        if self.tail is None:
            raise IndexError("pop from an empty list")
        node = self.tail
        if node is self.head:
            self.head = self.tail = None
        else:
            prev = self._node_at(self._size - 2)
            prev.next = None
            self.tail = prev
        self._size -= 1
        return node.data

    def insert(self, value: int, position: int) -> None:
        """Insert value so that it ends up at the given index."""
        self._ensure_acyclic()
        if not 0 <= position <= self._size:
            raise IndexError("position out of bounds")
        if position == 0:
            self.push_front(value)
        elif position == self._size:
            self.push_back(value)
        else:
            prev = self._node_at(position - 1)
            prev.next = ListNode(value, prev.next)
            self._size += 1

    def find(self, key: int) -> Optional[int]:
        """Index of the first element equal to key, or None."""
        for index, value in enumerate(self):
            if value == key:
                return index
        return None

    def remove_nth_from_end(self, n: int) -> int:
        """Remove and return the n-th element counted from the end, starting at 1."""
        self._ensure_acyclic()
        if not 1 <= n <= self._size:
            raise IndexError("invalid position to remove")
        if n == self._size:
            return self.pop_front()
        prev = self._node_at(self._size - n - 1)
        node = prev.next
        assert node is not None
        prev.next = node.next
        if node is self.tail:
            self.tail = prev
        node.next = None
        self._size -= 1
        return node.data

    def reverse(self) -> None:
        """Reverse the order of the elements in place."""
        self._ensure_acyclic()
        self.tail = self.head
        self.head = _reverse(self.head)

    def has_cycle(self) -> bool:
        """True when following the links from the head never reaches an end."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[union-attr]
            fast = fast.next.next
            if slow is fast:
                return True
        return False

    def make_cycle(self, position: int) -> None:
        """Link the last node back to the node at the given index."""
        self._ensure_acyclic()
        if not 0 <= position < self._size:
            raise IndexError("position out of bounds")
        assert self.tail is not None
        self.tail.next = self._node_at(position)

    def remove_cycle(self) -> bool:
        """Break a cycle if there is one; True when one was removed."""
        slow = fast = self.head
        while fast is not None and fast.next is not None:
            slow = slow.next  # type: ignore[union-attr]
            fast = fast.next.next
            if slow is fast:
                break
        else:
            return False
        slow = self.head
        while slow is not fast:
            slow = slow.next  # type: ignore[union-attr]
            fast = fast.next  # type: ignore[union-attr]
        last = slow
        while last.next is not slow:  # type: ignore[union-attr]
            last = last.next  # type: ignore[union-attr]
        last.next = None  # type: ignore[union-attr]
        self.tail = last
        return True

    def sort(self) -> None:
        """Sort the elements in ascending order by merge sort on the nodes."""
        self._ensure_acyclic()
        self.head = _merge_sort(self.head)
        self.tail = _last(self.head)

    def zigzag(self) -> None:
        """Reorder as first, last, second, second to last, and so on."""
        self._ensure_acyclic()
        if self._size < 3 or self.head is None:
            return
        right = _reverse(_split(self.head))
        left: Optional[ListNode] = self.head
        last: Optional[ListNode] = None
        while left is not None and right is not None:
            left_next, right_next = left.next, right.next
            left.next = right
            right.next = left_next
            last = right
            left, right = left_next, right_next
        if right is not None and last is not None:
            last.next = right
        self.tail = _last(self.head)


@dataclass(eq=False)
class _DoubleNode:
    data: int
    prev: Optional["_DoubleNode"] = None
    next: Optional["_DoubleNode"] = None


class DoublyLinkedList:
    """A linked list whose nodes point both forward and backward."""

    def __init__(self) -> None:
        self._head: Optional[_DoubleNode] = None
        self._tail: Optional[_DoubleNode] = None

    def push_front(self, value: int) -> None:
        """Add value before the first element."""
        node = _DoubleNode(value, None, self._head)
        if self._head is None:
            self._tail = node
        else:
            self._head.prev = node
        self._head = node

    def pop_front(self) -> int:
        """Remove and return the first element."""
        node = self._head
        if node is None:
            raise IndexError("pop from an empty list")
        self._head = node.next
        if self._head is None:
            self._tail = None
        else:
            self._head.prev = None
        node.next = None
        return node.data

    def __iter__(self) -> Iterator[int]:
        node = self._head
        while node is not None:
            yield node.data
            node = node.next

    def __reversed__(self) -> Iterator[int]:
        node = self._tail
        while node is not None:
            yield node.data
            node = node.prev