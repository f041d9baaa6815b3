"""Task nodes and a manager that balances load over them."""

from __future__ import annotations

import sys
from typing import TextIO

from .hashset import HashSet
from .minheap import MinHeap
from .util import RandomNumGen, get_hash_size

NAME_LEN = 6
LOAD_RN = 20000


class TaskNode:
    """A named machine carrying a load; equal by name, ordered by load."""

    def __init__(self, name: str, load: int) -> None:
        self.name = name
        self.load = load

    @classmethod
    def random(cls, rng: RandomNumGen) -> "TaskNode":
        """Create a node with a random lower-case name and a random load."""
        name = "".join(chr(ord("a") + rng(26)) for _ in range(NAME_LEN))
        return cls(name, rng(LOAD_RN))

    def hash_key(self) -> int:
        """Hash key built from at most the first five characters of the name."""
        key = 0
        for shift, ch in enumerate(self.name[:5]):
            key ^= ord(ch) << (shift * 6)
        return key

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, TaskNode):
            return NotImplemented
        return self.name == other.name

    def __hash__(self) -> int:
        return self.hash_key()

    def __lt__(self, other: "TaskNode") -> bool:
        return self.load < other.load

    def __str__(self) -> str:
        return f"({self.name}, {self.load})"

    def __repr__(self) -> str:
        return f"TaskNode({self.name!r}, {self.load!r})"


class TaskMgr:
    """Keeps task nodes in a min-heap by load and in a hash set by name."""

    def __init__(
        self,
        n_machines: int,
        rng: RandomNumGen | None = None,
        out: TextIO | None = None,
    ) -> None:
        self._rng = RandomNumGen(0) if rng is None else rng
        self._out = out
        self._heap = MinHeap()
        self._hash = HashSet(get_hash_size(n_machines), key=TaskNode.hash_key)

    def _write(self, line: str) -> None:
        out = sys.stdout if self._out is None else self._out
        out.write(line + "\n")

    def clear(self) -> None:
        """Remove every node, reporting each one."""
        for node in self._heap:
            self._write(f"Task node removed: {node}")
        self._heap.clear()
        self._hash.clear()

    def __len__(self) -> int:
        return len(self._heap)

    def empty(self) -> bool:
        return len(self._heap) == 0

    def min(self) -> TaskNode:
        """Return the node with the smallest load."""
        return self._heap.min()

    def add_random(self, n_machines: int) -> None:
        """Add exactly ``n_machines`` randomly generated, distinct nodes."""
        added = 0
        while added < n_machines:
            node = TaskNode.random(self._rng)
            if self._hash.insert(node):
                self._heap.insert(node)
                self._write(f"Task node inserted: {node}")
                added += 1

    def add(self, name: str, load: int) -> bool:
        """Add a named node; return False if one with that name exists."""
        node = TaskNode(name, load)
        if not self._hash.insert(node):
            return False
        self._heap.insert(node)
        self._write(f"Task node inserted: {node}")
        return True

    def remove_random(self, n_machines: int) -> None:
        """Remove ``n_machines`` nodes picked at random."""
        for _ in range(n_machines):
            pos = self._rng(len(self._heap))
            node = self._heap[pos]
            self._hash.remove(node)
            self._write(f"Task node removed: {node}")
            self._heap.del_data(pos)

    def remove(self, name: str) -> bool:
        """Remove the node called ``name``; return False if there is none."""
        probe = TaskNode(name, 0)
        if not self._hash.remove(probe):
            return False
        for pos, node in enumerate(self._heap):
            if node == probe:
                self._write(f"Task node removed: {node}")
                self._heap.del_data(pos)
                break
        return True

    def assign(self, load: int) -> bool:
        """Add ``load`` to the least loaded node; False if there are no nodes."""
        if self.empty():
            return False
        current = self._heap.min()
        updated = TaskNode(current.name, current.load + load)
        self._heap.del_min()
        self._heap.insert(updated)
        self._hash.update(updated)
        return True

    def query(self, name: str) -> TaskNode | None:
        """Return the stored node called ``name``, or None."""
        return self._hash.query(TaskNode(name, 0))

    def print_all_hash(self) -> None:
        for node in self._hash:
            self._write(str(node))

    def print_all_heap(self) -> None:
        for node in self._heap:
            self._write(str(node))