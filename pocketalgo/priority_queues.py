"""Four string priority queues that each return the smallest value first.

They share one interface and differ only in how they store their values:
an unsorted list, a sorted singly linked list, an unsorted doubly linked
list and a binary heap.
"""

from __future__ import annotations

from typing import Optional

__all__ = [
    "EmptyQueueError",
    "VectorPriorityQueue",
    "LinkedListPriorityQueue",
    "DoublyLinkedListPriorityQueue",
    "HeapPriorityQueue",
]

_PEEK_EMPTY = "peek called on empty priority queue"
_DEQUEUE_EMPTY = "dequeue_min called on empty priority queue"


class EmptyQueueError(IndexError):
    """Raised when a value is requested from an empty priority queue."""


class VectorPriorityQueue:
    """Priority queue backed by an unsorted list."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def __len__(self) -> int:
        return len(self._items)

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return not self._items

    def enqueue(self, value: str) -> None:
        """Add ``value`` to the queue."""
        self._items.append(value)

    def peek(self) -> str:
        """Return the smallest value without removing it."""
        if not self._items:
            raise EmptyQueueError(_PEEK_EMPTY)
        return min(self._items)

    def dequeue_min(self) -> str:
        """Remove and return the smallest value."""
        if not self._items:
            raise EmptyQueueError(_DEQUEUE_EMPTY)
        index = min(range(len(self._items)), key=self._items.__getitem__)
        return self._items.pop(index)


class _SinglyLinkedNode:
    __slots__ = ("value", "next")

    def __init__(self, value: str = "", next_node: Optional["_SinglyLinkedNode"] = None) -> None:
        self.value = value
        self.next = next_node


class LinkedListPriorityQueue:
    """Priority queue backed by a sorted singly linked list."""

    def __init__(self) -> None:
        self._head = _SinglyLinkedNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return self._size == 0

    def enqueue(self, value: str) -> None:
        """Insert ``value`` in its sorted place."""
        cursor = self._head
        while cursor.next is not None and cursor.next.value < value:
            cursor = cursor.next
        cursor.next = _SinglyLinkedNode(value, cursor.next)
        self._size += 1

    def peek(self) -> str:
        """Return the smallest value without removing it."""
        if self._head.next is None:
            raise EmptyQueueError(_PEEK_EMPTY)
        return self._head.next.value

    def dequeue_min(self) -> str:
        """Remove and return the smallest value."""
        first = self._head.next
        if first is None:
            raise EmptyQueueError(_DEQUEUE_EMPTY)
        self._head.next = first.next
        self._size -= 1
        return first.value


class _DoublyLinkedNode:
    __slots__ = ("value", "next", "prev")

    def __init__(self, value: str = "") -> None:
        self.value = value
        self.next: Optional[_DoublyLinkedNode] = None
        self.prev: Optional[_DoublyLinkedNode] = None


class DoublyLinkedListPriorityQueue:
    """Priority queue backed by an unsorted doubly linked list."""

    def __init__(self) -> None:
        self._head = _DoublyLinkedNode()
        self._size = 0

    def __len__(self) -> int:
        return self._size

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return self._size == 0

    def enqueue(self, value: str) -> None:
        """Add ``value`` at the front of the list."""
        node = _DoublyLinkedNode(value)
        node.next = self._head.next
        node.prev = self._head
        self._head.next = node
        if node.next is not None:
            node.next.prev = node
        self._size += 1

    def _min_node(self) -> _DoublyLinkedNode:
        best = self._head.next
        assert best is not None
        cursor = best.next
        while cursor is not None:
            if cursor.value < best.value:
                best = cursor
            cursor = cursor.next
        return best

    def peek(self) -> str:
        """Return the smallest value without removing it."""
        if self._size == 0:
            raise EmptyQueueError(_PEEK_EMPTY)
        return self._min_node().value

    def dequeue_min(self) -> str:
        """Remove and return the smallest value."""
        if self._size == 0:
            raise EmptyQueueError(_DEQUEUE_EMPTY)
        node = self._min_node()
        if node.prev is not None:
            node.prev.next = node.next
        if node.next is not None:
            node.next.prev = node.prev
        self._size -= 1
        return node.value


class HeapPriorityQueue:
    """Priority queue backed by a binary min-heap stored in a list."""

    def __init__(self) -> None:
        self._heap: list[str] = []

    def __len__(self) -> int:
        return len(self._heap)

    def is_empty(self) -> bool:
        """Return whether the queue holds no values."""
        return not self._heap

    def _bubble_up(self, index: int) -> None:
        heap = self._heap
        while index > 0:
            parent = (index - 1) // 2
            if not heap[parent] > heap[index]:
                break
            heap[parent], heap[index] = heap[index], heap[parent]
            index = parent

    def _bubble_down(self, index: int) -> None:
        heap = self._heap
        size = len(heap)
        while True:
            child = 2 * index + 1
            if child >= size:
                return
            right = child + 1
            if right < size and heap[right] < heap[child]:
                child = right
            if not heap[index] > heap[child]:
                return
            heap[index], heap[child] = heap[child], heap[index]
            index = child

    def enqueue(self, value: str) -> None:
        """Add ``value`` to the heap."""
        self._heap.append(value)
        self._bubble_up(len(self._heap) - 1)

    def peek(self) -> str:
        """Return the smallest value without removing it."""
        if not self._heap:
            raise EmptyQueueError(_PEEK_EMPTY)
        return self._heap[0]

    def dequeue_min(self) -> str:
        """Remove and return the smallest value."""
        if not self._heap:
            raise EmptyQueueError(_DEQUEUE_EMPTY)
        top = self._heap[0]
        last = self._heap.pop()
        if self._heap:
            self._heap[0] = last
            self._bubble_down(0)
        return top