"""A bounded stack that drops its oldest element when full."""

from __future__ import annotations

from collections import deque
from typing import Any


class Stack:
    """A last-in first-out stack holding at most ``max_size`` items.

    Pushing onto a full stack discards the bottom element first.
    """

    def __init__(self, max_size: int) -> None:
        self.max_size = max_size
        self._items: deque[Any] = deque()

    def __len__(self) -> int:
        return len(self._items)

    def push(self, value: Any) -> None:
        """Put ``value`` on top, dropping the bottom item if the stack is full."""
        if len(self._items) + 1 > self.max_size:
            try:
                self.pop_last()
            except IndexError:
                raise OverflowError("stack is full and has no bottom element to drop") from None
        self._items.append(value)

    def pop(self) -> Any:
        """Remove and return the top item."""
        if not self._items:
            raise IndexError("pop from empty stack")
        return self._items.pop()

    def pop_last(self) -> Any:
        """Remove and return the bottom item.

        The bottom is only removed while another item sits above it.
        """
        if len(self._items) < 2:
            raise IndexError("stack has no bottom element below the top")
        return self._items.popleft()

    def peek(self) -> Any:
        """Return the top item without removing it."""
        if not self._items:
            raise IndexError("peek at empty stack")
        return self._items[-1]