"""General utilities: hash sizing, directory listing, random numbers, usage."""

from __future__ import annotations

import os
import sys
from collections import deque

try:
    import resource
except ImportError:  # not available on every platform
    resource = None

_INT_MAX = 2147483647

_HASH_SIZES = (
    (8, 7),
    (16, 13),
    (32, 31),
    (64, 61),
    (128, 127),
    (512, 509),
    (2048, 1499),
    (8192, 4999),
    (32768, 13999),
    (131072, 59999),
    (524288, 100019),
    (2097152, 300007),
    (8388608, 900001),
    (33554432, 1000003),
    (134217728, 3000017),
    (536870912, 5000011),
)


def get_hash_size(size: int) -> int:
    """Return a bucket count suited to ``size`` entries."""
    for limit, buckets in _HASH_SIZES:
        if size < limit:
            return buckets
    return 7000003


def list_dir(prefix: str = "", directory: str = ".") -> list[str]:
    """Return the sorted names in ``directory`` that start with ``prefix``."""
    return sorted(name for name in os.listdir(directory) if name.startswith(prefix))


def _trunc_div(a: int, b: int) -> int:
    q = abs(a) // b
    return q if a >= 0 else -q


class RandomNumGen:
    """Additive-feedback pseudo random generator (the classic ``random()``)."""

    def __init__(self, seed: int | None = None) -> None:
        self._reseed(os.getpid() if seed is None else seed)

    def _reseed(self, seed: int) -> None:
        seed &= 0xFFFFFFFF
        if seed == 0:
            seed = 1
        word = seed - (1 << 32) if seed >= 1 << 31 else seed
        state = [seed]
        for _ in range(30):
            hi = _trunc_div(word, 127773)
            lo = word - hi * 127773
            word = 16807 * lo - 2836 * hi
            if word < 0:
                word += _INT_MAX
            state.append(word & 0xFFFFFFFF)
        state.extend(state[:3])
        self._window = deque(state[3:], maxlen=31)
        for _ in range(310):
            self.random()

    def random(self) -> int:
        """Return the next number in ``[0, 2**31)``."""
        value = (self._window[0] + self._window[-3]) & 0xFFFFFFFF
        self._window.append(value)
        return value >> 1

    def __call__(self, upper: int) -> int:
        """Return a number scaled into ``[0, upper)``."""
        return int(upper * (float(self.random()) / _INT_MAX))


def _check_mem() -> float:
    if resource is None:
        return 0.0
    rss = resource.getrusage(resource.RUSAGE_SELF).ru_maxrss
    if sys.platform == "darwin":
        return rss / float(1 << 20)
    return rss / float(1 << 10)


def _check_tick() -> float:
    return os.times().user


class Usage:
    """Tracks CPU time and memory used since the last reset."""

    def __init__(self) -> None:
        self.reset()

    def reset(self) -> None:
        """Start measuring from now."""
        self._init_mem = _check_mem()
        self._current_mem = 0.0
        self._current_tick = _check_tick()
        self._period_used_time = 0.0
        self._total_used_time = 0.0

    def report(self, rep_time: bool = True, rep_mem: bool = True, out=None) -> None:
        """Write time and/or memory usage to ``out`` (stdout by default)."""
        out = sys.stdout if out is None else out
        if rep_time:
            this_tick = _check_tick()
            self._period_used_time = this_tick - self._current_tick
            self._total_used_time += self._period_used_time
            self._current_tick = this_tick
            out.write(f"Period time used : {self._period_used_time:.4g} seconds\n")
            out.write(f"Total time used  : {self._total_used_time:.4g} seconds\n")
        if rep_mem:
            self._current_mem = _check_mem() - self._init_mem
            out.write(f"Total memory used: {self._current_mem:.4g} M Bytes\n")