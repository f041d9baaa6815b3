"""Array-backed binary min-heap ordered by ``<``."""

from __future__ import annotations

from typing import Any, Iterator


class MinHeap:
    """Binary min-heap whose items need only support ``<``."""

    def __init__(self) -> None:
        self._data: list[Any] = []

    def clear(self) -> None:
        self._data.clear()

    def __getitem__(self, index: int) -> Any:
        return self._data[index]

    def __len__(self) -> int:
        return len(self._data)

    def __iter__(self) -> Iterator[Any]:
        return iter(self._data)

    def min(self) -> Any:
        """Return the smallest item."""
        if not self._data:
            raise IndexError("min of empty heap")
        return self._data[0]

    def _sift_up(self, pos: int) -> None:
        data = self._data
        item = data[pos]
        while pos > 0:
            parent = (pos - 1) // 2
            if not item < data[parent]:
                break
            data[pos] = data[parent]
            pos = parent
        data[pos] = item

    def _sift_down(self, pos: int) -> None:
        data = self._data
        size = len(data)
        child = 2 * pos + 1
        while child < size:
            if child + 1 < size and data[child + 1] < data[child]:
                child += 1
            if not data[child] < data[pos]:
                break
            data[pos], data[child] = data[child], data[pos]
            pos = child
            child = 2 * pos + 1

    def insert(self, item: Any) -> None:
        self._data.append(item)
        self._sift_up(len(self._data) - 1)

    def del_min(self) -> None:
        self.del_data(0)

    def del_data(self, index: int) -> None:
        """Remove the item stored at position ``index``."""
        if not 0 <= index < len(self._data):
            raise IndexError("heap index out of range")
        last = self._data.pop()
        if index == len(self._data):
            return
        self._data[index] = last
        self._sift_down(index)
        self._sift_up(index)