"""
Fixed-capacity ranked list used for the switcher views.
"""
from typing import Callable, Generic, Iterator, List, TypeVar

T = TypeVar('T')


class InvalidCapacityError(ValueError):
    """Raised when a ranked list is configured with a non-positive limit."""


class BoundedRankedList(Generic[T]):
    """
    Ordered sequence holding at most `limit` entries, best first.

    Entries are placed by insertion sort with a strict comparison, so an
    entry never displaces an incumbent it only ties with. When the list
    overflows, the tail entry is evicted.

    Example:
        ranked = BoundedRankedList(2, lambda a, b: a > b)
        for n in (1, 3, 2):
            ranked.insert(n)
        list(ranked)  # [3, 2]
    """

    def __init__(self, limit: int, outranks: Callable[[T, T], bool]) -> None:
        """
        Args:
            limit: Maximum number of entries
            outranks: outranks(a, b) is True when a must be placed before b
        """
        if limit <= 0:
            raise InvalidCapacityError(f"Ranked list limit must be positive, got {limit}")
        self._limit = limit
        self._outranks = outranks
        self._items: List[T] = []

    @property
    def limit(self) -> int:
        return self._limit

    def insert(self, entry: T) -> bool:
        """
        Insert an entry at its ranked position.

        Returns:
            True if the entry is in the list afterwards, False if dropped
        """
        for idx, current in enumerate(self._items):
            if self._outranks(entry, current):
                self._items.insert(idx, entry)
                # Evict the lowest-ranked entry
                while len(self._items) > self._limit:
                    self._items.pop()
                return True

        if len(self._items) < self._limit:
            self._items.append(entry)
            return True
        return False

    def clear(self) -> None:
        self._items.clear()

    def __contains__(self, entry: object) -> bool:
        return any(item is entry for item in self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __getitem__(self, index: int) -> T:
        return self._items[index]

    def __iter__(self) -> Iterator[T]:
        return iter(self._items)

    def __repr__(self) -> str:
        return f"BoundedRankedList(limit={self._limit}, items={self._items!r})"
