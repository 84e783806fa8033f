"""Integer hash tables: separate chaining and three open-addressing schemes."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterator

_EMPTY_MARK = -1


class HashTableFullError(Exception):
    """Raised when a key cannot be placed because no free slot is reachable."""


class ChainedHashTable:
    """Hash table that resolves collisions by chaining keys in buckets.

    Duplicate keys are kept; each bucket holds keys in insertion order.
    """

    def __init__(self, size: int) -> None:
        if size <= 0:
            raise ValueError("size must be positive")
        self._size = size
        self._buckets: list[list[int]] = [[] for _ in range(size)]

    def _index(self, key: int) -> int:
        return key % self._size

    def insert(self, key: int) -> None:
        """Append ``key`` to the end of its bucket."""
        self._buckets[self._index(key)].append(key)

    def remove(self, key: int) -> None:
        """Remove the first occurrence of ``key``; absent keys are ignored."""
        bucket = self._buckets[self._index(key)]
        if key in bucket:
            bucket.remove(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        return key in self._buckets[self._index(key)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def buckets(self) -> tuple[tuple[int, ...], ...]:
        """Return the contents of every bucket, in index order."""
        return tuple(tuple(bucket) for bucket in self._buckets)

    def render(self) -> str:
        """Return one line per bucket, each chain ending in ``NULL``."""
        lines = []
        for index, bucket in enumerate(self._buckets):
            chain = "".join(f"{key} -> " for key in bucket)
            lines.append(f"Index {index}: {chain}NULL")
        return "\n".join(lines)


class _OpenAddressingTable(ABC):
    """Shared storage and operations for open-addressing tables."""

    def _setup(self, capacity: int) -> None:
        if capacity <= 0:
            raise ValueError("capacity must be positive")
        self._capacity = capacity
        self._slots: list[int | None] = [None] * capacity
        self._count = 0

    @abstractmethod
    def _probe(self, key: int) -> Iterator[int]:
        """Yield the slot indexes to try for ``key``, in order."""

    @property
    def _probe_limit(self) -> int:
        return self._capacity

    def _insert(self, key: int) -> None:
        if self._count == self._capacity:
            raise HashTableFullError("Hash table is full")
        for attempt, index in enumerate(self._probe(key)):
            if attempt > self._probe_limit:
                break
            if self._slots[index] is None:
                self._slots[index] = key
                self._count += 1
                return
        raise HashTableFullError(f"no free slot reachable for key {key}")

    def _remove(self, key: int) -> None:
        probes = self._probe(key)
        index = next(probes)
        steps = 0
        while self._slots[index] != key:
            index = next(probes)
            steps += 1
            if self._slots[index] is None or steps > self._probe_limit:
                raise KeyError(key)
        self._slots[index] = None
        self._count -= 1

    def _contains(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        for attempt, index in enumerate(self._probe(key)):
            if attempt >= self._probe_limit:
                break
            slot = self._slots[index]
            if slot is None:
                return False
            if slot == key:
                return True
        return False

    def _render(self) -> str:
        return "\n".join(
            f"{index}: {_EMPTY_MARK if slot is None else slot}"
            for index, slot in enumerate(self._slots)
        )


class LinearProbingTable(_OpenAddressingTable):
    """Open addressing that steps one slot at a time."""

    def __init__(self, capacity: int) -> None:
        self._setup(capacity)

    def _probe(self, key: int) -> Iterator[int]:
        index = key % self._capacity
        while True:
            yield index
            index = (index + 1) % self._capacity

    def insert(self, key: int) -> None:
        """Place ``key`` in the first free slot along its probe sequence."""
        self._insert(key)

    def remove(self, key: int) -> None:
        """Empty the slot holding ``key``; raise KeyError when it is not found."""
        self._remove(key)

    def __contains__(self, key: object) -> bool:
        return self._contains(key)

    def __len__(self) -> int:
        return self._count

    def slots(self) -> tuple[int | None, ...]:
        """Return every slot in index order; ``None`` marks an empty slot."""
        return tuple(self._slots)

    def render(self) -> str:
        """Return ``index: key`` lines, with ``-1`` for empty slots."""
        return self._render()


class QuadraticProbingTable(_OpenAddressingTable):
    """Open addressing whose step grows as 1, 4, 9, ... after each collision."""

    def __init__(self, capacity: int) -> None:
        self._setup(capacity)

    def _probe(self, key: int) -> Iterator[int]:
        index = key % self._capacity
        step = 1
        while True:
            yield index
            index = (index + step * step) % self._capacity
            step += 1

    @property
    def _probe_limit(self) -> int:
        # The probe sequence repeats with a period dividing six times the capacity.
        return 6 * self._capacity

    def insert(self, key: int) -> None:
        """Place ``key`` in the first free slot along its probe sequence."""
        self._insert(key)

    def remove(self, key: int) -> None:
        """Empty the slot holding ``key``; raise KeyError when it is not found."""
        self._remove(key)

    def __contains__(self, key: object) -> bool:
        if not isinstance(key, int):
            return False
        probes = self._probe(key)
        index = next(probes)
        step = 1
        while self._slots[index] != key:
            index = next(probes)
            step += 1
            if self._slots[index] is None or step > self._capacity:
                return False
        return True

    def __len__(self) -> int:
        return self._count

    def slots(self) -> tuple[int | None, ...]:
        """Return every slot in index order; ``None`` marks an empty slot."""
        return tuple(self._slots)

    def render(self) -> str:
        """Return ``index: key`` lines, with ``-1`` for empty slots."""
        return self._render()


class DoubleHashingTable(_OpenAddressingTable):
    """Open addressing whose step size is ``7 - key % 7``."""

    def __init__(self, capacity: int) -> None:
        self._setup(capacity)

    def _probe(self, key: int) -> Iterator[int]:
        index = key % self._capacity
        step = 7 - key % 7
        while True:
            yield index
            index = (index + step) % self._capacity

    def insert(self, key: int) -> None:
        """Place ``key`` in the first free slot along its probe sequence."""
        self._insert(key)

    def remove(self, key: int) -> None:
        """Empty the slot holding ``key``; raise KeyError when it is not found."""
        self._remove(key)

    def __contains__(self, key: object) -> bool:
        return self._contains(key)

    def __len__(self) -> int:
        return self._count

    def slots(self) -> tuple[int | None, ...]:
        """Return every slot in index order; ``None`` marks an empty slot."""
        return tuple(self._slots)

    def render(self) -> str:
        """Return ``index: key`` lines, with ``-1`` for empty slots."""
        return self._render()