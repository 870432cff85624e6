"""Circular queue on a forward-only cyclic linked list.

The queue has no fixed beginning or end. The front is whatever node the
cursor currently sits on and the end is the node just before it, so
enqueue inserts directly behind the cursor and dequeue removes at it.
A beginning marker can be set to count revolutions of the cursor.

Not thread-safe. Lock ``sync_root`` around multi-step use across threads.
"""

import logging
import threading

logger = logging.getLogger(__name__)

_sync_root_guard = threading.Lock()


class CircularQueue:
    class Node:
        def __init__(self, value):
            self.value = value
            self.next = None

    def __init__(self):
        self._current = None
        self._previous = None
        self._beginning = None
        self._size = 0
        self._sync_root = None

    @staticmethod
    def from_iterable(source):
        """Build a queue from ``source``; its first element becomes current."""
        if source is None:
            raise TypeError("CircularQueue.from_iterable: source is None")
        if not hasattr(source, "__len__"):
            source = list(source)
        if len(source) == 0:
            raise ValueError("CircularQueue.from_iterable: source has no elements")
        queue = CircularQueue()
        for value in source:
            queue.enqueue(value)
        return queue

    def enqueue(self, value):
        node = self.Node(value)
        if self._size == 0:
            node.next = node
            self._current = node
            self._previous = node
        elif self._size == 1:
            node.next = self._current
            self._current.next = node
            self._previous = node
        else:
            node.next = self._current
            self._previous.next = node
            self._previous = node
        self._size += 1

    def dequeue(self):
        if self._size == 0:
            raise IndexError("dequeue from empty queue")
        removed = self._current
        if self._size == 1:
            self._current = None
            self._previous = None
            self.clear_beginning()
        else:
            self._current = removed.next
            self._previous.next = self._current
            if self._beginning is not None:
                # The marker follows the cursor whenever it is set, not only
                # when the marked node itself is removed.
                logger.debug("CircularQueue.dequeue: beginning moved to new current")
                self.mark_beginning()
        removed.next = None
        self._size -= 1
        return removed.value

    def next(self):
        if self._size == 0:
            raise IndexError("next on empty queue")
        self._previous = self._current
        self._current = self._current.next
        return self._current.value

    def peek(self):
        if self._size == 0:
            raise IndexError("peek from empty queue")
        return self._current.value

    @property
    def current(self):
        return self.peek()

    def mark_beginning(self):
        """Mark the current node as the beginning.

        The queue has no real beginning, but marking one makes it possible
        to tell when the cursor has gone all the way around. If the marked
        node is dequeued the marker moves to the node that becomes current.
        """
        self._beginning = self._current

    def clear_beginning(self):
        self._beginning = None

    @property
    def is_beginning(self):
        if self._beginning is None:
            raise RuntimeError("is_beginning checked before mark_beginning()")
        return self._current is self._beginning

    def size(self):
        return self._size

    def is_empty(self):
        return self._size == 0

    def clear(self):
        node = self._current
        for _ in range(self._size):
            following = node.next
            node.next = None
            node = following
        self._current = None
        self._previous = None
        self._beginning = None
        self._size = 0

    def copy(self):
        """Return a shallow copy with the same cursor and beginning marker."""
        clone = CircularQueue()
        marked_offset = None
        for offset, node in enumerate(self._nodes(self._current)):
            if node is self._beginning:
                marked_offset = offset
            clone.enqueue(node.value)
        if marked_offset is not None:
            clone._beginning = clone._current
            for _ in range(marked_offset):
                clone._beginning = clone._beginning.next
        return clone

    def copy_to(self, array, index=0):
        if array is None:
            raise TypeError("CircularQueue.copy_to: array is None")
        if index < 0 or index > len(array):
            raise IndexError("CircularQueue.copy_to: index out of range")
        if self._size > len(array) - index:
            raise ValueError("CircularQueue.copy_to: array too small for queue contents")
        for offset, value in enumerate(self):
            array[index + offset] = value

    def to_array(self):
        return list(self)

    @property
    def sync_root(self):
        if self._sync_root is None:
            with _sync_root_guard:
                if self._sync_root is None:
                    self._sync_root = threading.RLock()
        return self._sync_root

    @property
    def is_synchronized(self):
        return False

    def _nodes(self, start):
        if start is None:
            return
        node = start
        while True:
            yield node
            node = node.next
            if node is start:
                break

    def __iter__(self):
        # Bind the start node now; a bare generator would read it lazily.
        start = self._current
        return (node.value for node in self._nodes(start))

    def __contains__(self, value):
        for item in self:
            if item == value:
                return True
        return False

    def __len__(self):
        return self._size

    def __bool__(self):
        return self._size > 0

    def __repr__(self):
        return f"CircularQueue({self.to_array()})"

    def __str__(self):
        return f"CircularQueue(size={self._size})"
