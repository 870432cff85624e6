"""Fixed-capacity stack whose oldest element drops out when it overflows.

Pushing onto a full DropoutStack evicts the bottom element and shifts the
rest down by one to make room, so the stack never grows past its capacity.
Useful for bounded histories such as undo buffers.

    >>> stack = DropoutStack(3)
    >>> for i in range(1, 6):
    ...     stack.push(i)
    >>> [stack.pop() for _ in range(len(stack))]
    [5, 4, 3]
"""

import logging
import threading
from typing import TypeVar, Generic, Iterable, Iterator, List, MutableSequence, Optional

logger = logging.getLogger(__name__)

T = TypeVar('T')

DEFAULT_CAPACITY = 4

_sync_root_guard = threading.Lock()


class DropoutStack(Generic[T]):
    def __init__(self, capacity: int = DEFAULT_CAPACITY) -> None:
        self._check_capacity(capacity)
        self._capacity = capacity
        self._data: List[Optional[T]] = [None] * capacity
        self._size = 0
        self._sync_root = None

    @staticmethod
    def from_iterable(source: Iterable[T]) -> 'DropoutStack[T]':
        """Build a stack sized to fit ``source`` exactly.

        The first element of ``source`` ends up at the bottom. Sources that
        don't report a length are materialized first.
        """
        if source is None:
            raise TypeError("DropoutStack.from_iterable: source is None")
        items = list(source)
        if not items:
            raise ValueError("DropoutStack.from_iterable: source has no elements")
        stack: DropoutStack[T] = DropoutStack(len(items))
        stack._data = items
        stack._size = len(items)
        return stack

    @staticmethod
    def _check_capacity(capacity: int) -> None:
        if not isinstance(capacity, int) or capacity <= 0:
            raise ValueError(f"capacity must be a positive integer, got {capacity!r}")

    def push(self, value: T) -> None:
        if self._size == self._capacity:
            logger.debug("DropoutStack.push: evicting %r", self._data[0])
            for i in range(1, self._capacity):
                self._data[i - 1] = self._data[i]
        else:
            self._size += 1
        self._data[self._size - 1] = value

    def pop(self) -> T:
        if self._size == 0:
            raise IndexError("DropoutStack.pop: stack is empty")
        self._size -= 1
        return self._data[self._size]

    def peek(self) -> T:
        if self._size == 0:
            raise IndexError("DropoutStack.peek: stack is empty")
        return self._data[self._size - 1]

    def resize(self, new_capacity: int) -> None:
        """Change the capacity, dropping the oldest elements that no longer fit."""
        self._check_capacity(new_capacity)
        new_size = min(self._size, new_capacity)
        dropped = self._size - new_size
        if dropped:
            logger.debug("DropoutStack.resize: dropping %d oldest element(s)", dropped)
        new_data: List[Optional[T]] = [None] * new_capacity
        for i in range(new_size):
            new_data[i] = self._data[dropped + i]
        self._data = new_data
        self._capacity = new_capacity
        self._size = new_size

    def clear(self) -> None:
        for i in range(self._size):
            self._data[i] = None
        self._size = 0

    def contains(self, value: T) -> bool:
        for i in range(self._size):
            if self._data[i] == value:
                return True
        return False

    def copy_to(self, array: MutableSequence[T], index: int = 0) -> None:
        """Copy the elements bottom to top into ``array`` starting at ``index``.

        Raises:
            TypeError: ``array`` is None.
            IndexError: ``index`` is negative or past the end of ``array``.
            ValueError: the elements would run past the end of ``array``.
        """
        if array is None:
            raise TypeError("DropoutStack.copy_to: array is None")
        if index < 0 or index > len(array):
            raise IndexError("DropoutStack.copy_to: index out of range")
        if self._size > len(array) - index:
            raise ValueError("DropoutStack.copy_to: array too small for stack contents")
        for i in range(self._size):
            array[index + i] = self._data[i]

    def to_array(self) -> List[T]:
        result: List[T] = [None] * self._size
        self.copy_to(result, 0)
        return result

    def size(self) -> int:
        return self._size

    def capacity(self) -> int:
        return self._capacity

    def is_empty(self) -> bool:
        return self._size == 0

    def is_full(self) -> bool:
        return self._size == self._capacity

    def copy(self) -> 'DropoutStack[T]':
        clone: DropoutStack[T] = DropoutStack(self._capacity)
        for i in range(self._size):
            clone._data[i] = self._data[i]
        clone._size = self._size
        return clone

    @property
    def sync_root(self) -> threading.RLock:
        if self._sync_root is None:
            with _sync_root_guard:
                if self._sync_root is None:
                    self._sync_root = threading.RLock()
        return self._sync_root

    @property
    def is_synchronized(self) -> bool:
        return False

    def __len__(self) -> int:
        return self._size

    def __bool__(self) -> bool:
        return self._size > 0

    def __contains__(self, value: T) -> bool:
        return self.contains(value)

    def __iter__(self) -> Iterator[T]:
        i = 0
        while i < self._size:
            yield self._data[i]
            i += 1

    def __repr__(self) -> str:
        return f"DropoutStack({self.to_array()}, capacity={self._capacity})"

    def __str__(self) -> str:
        return f"DropoutStack(size={self._size}, capacity={self._capacity})"
