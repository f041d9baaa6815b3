"""A bucketed hash set that keeps one entry per equivalence class."""

from __future__ import annotations

from typing import Any, Callable, Iterator


class HashSet:
    """Hash set with a fixed number of buckets chosen at initialisation.

    ``key`` maps an item to an integer hash key; equality of items is decided
    by ``==``.
    """

    def __init__(self, num_buckets: int = 0, key: Callable[[Any], int] = hash) -> None:
        self._key = key
        self._buckets: list[list[Any]] = []
        if num_buckets:
            self.init(num_buckets)

    def init(self, num_buckets: int) -> None:
        """Allocate ``num_buckets`` empty buckets."""
        self._buckets = [[] for _ in range(num_buckets)]

    def reset(self) -> None:
        """Drop all buckets."""
        self._buckets = []

    def clear(self) -> None:
        """Empty every bucket, keeping the bucket count."""
        for bucket in self._buckets:
            bucket.clear()

    def num_buckets(self) -> int:
        return len(self._buckets)

    def __getitem__(self, index: int) -> list[Any]:
        return self._buckets[index]

    def __iter__(self) -> Iterator[Any]:
        for bucket in self._buckets:
            yield from bucket

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def __contains__(self, item: Any) -> bool:
        return self.check(item)

    def _bucket(self, item: Any) -> list[Any]:
        if not self._buckets:
            raise ValueError("hash set has no buckets")
        return self._buckets[self._key(item) % len(self._buckets)]

    def _find(self, bucket: list[Any], item: Any) -> int | None:
        return next((pos for pos, stored in enumerate(bucket) if stored == item), None)

    def check(self, item: Any) -> bool:
        """Tell whether an item equal to ``item`` is stored."""
        return self._find(self._bucket(item), item) is not None

    def query(self, item: Any) -> Any | None:
        """Return the stored item equal to ``item``, or ``None``."""
        bucket = self._bucket(item)
        pos = self._find(bucket, item)
        return None if pos is None else bucket[pos]

    def update(self, item: Any) -> bool:
        """Replace the equal entry with ``item`` (True) or insert it (False)."""
        bucket = self._bucket(item)
        pos = self._find(bucket, item)
        if pos is None:
            bucket.append(item)
            return False
        bucket[pos] = item
        return True

    def insert(self, item: Any) -> bool:
        """Insert ``item`` unless an equal one exists; return whether inserted."""
        bucket = self._bucket(item)
        if self._find(bucket, item) is not None:
            return False
        bucket.append(item)
        return True

    def remove(self, item: Any) -> bool:
        """Remove the entry equal to ``item``; return whether one was removed.

        The last entry of the bucket takes the removed entry's place.
        """
        bucket = self._bucket(item)
        pos = self._find(bucket, item)
        if pos is None:
            return False
        bucket[pos] = bucket[-1]
        bucket.pop()
        return True