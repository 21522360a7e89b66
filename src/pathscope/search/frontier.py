# search/frontier.py
import heapq
from typing import Generic, TypeVar

T = TypeVar("T")


class PriorityQueue(Generic[T]):
    """
    Min-heap keyed by priority, FIFO among equal priorities.

    There is no decrease-key: enqueueing an item again adds a second entry and
    the caller skips stale ones when they come out.
    """

    def __init__(self):
        self._q: list[tuple[float, int, T]] = []
        self._seq = 0

    def __len__(self) -> int:
        return len(self._q)

    def is_empty(self) -> bool:
        return not self._q

    def enqueue(self, item: T, priority: float) -> None:
        self._seq += 1
        heapq.heappush(self._q, (priority, self._seq, item))

    def dequeue(self) -> T:
        return self.pop()[1]

    def pop(self) -> tuple[float, T]:
        """Lowest (priority, item); raises IndexError when empty."""
        priority, _, item = heapq.heappop(self._q)
        return priority, item
