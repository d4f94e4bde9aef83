"""CPU affinity bit masks."""

from __future__ import annotations

import os
from functools import cache
from typing import Iterable


@cache
def nprocs_online() -> int:
    """Number of processors currently online."""
    try:
        count = os.sysconf("SC_NPROCESSORS_ONLN")
    except (AttributeError, ValueError, OSError):
        count = -1
    if count is None or count < 1:
        count = os.cpu_count() or 1
    return int(count)


class AffinityMask:
    """Fixed-size bit set with one bit per CPU."""

    __slots__ = ("_size", "_bits")

    def __init__(self, size: int | None = None) -> None:
        if size is None:
            size = nprocs_online()
        if size < 0:
            raise ValueError("mask size must not be negative")
        self._size = size
        self._bits = 0

    @classmethod
    def from_cpus(cls, cpus: Iterable[int], size: int | None = None) -> AffinityMask:
        """Build a mask from CPU numbers; CPUs beyond the mask size are ignored."""
        mask = cls(size)
        for cpu in cpus:
            if 0 <= cpu < mask._size:
                mask._bits |= 1 << cpu
        return mask

    def to_cpus(self) -> list[int]:
        """CPU numbers whose bit is set, ascending."""
        return [cpu for cpu in range(self._size) if self._bits >> cpu & 1]

    def any(self) -> bool:
        return self._bits != 0

    def count(self) -> int:
        return bin(self._bits).count("1")

    def is_contained_in(self, other: AffinityMask) -> bool:
        return (other & self) == self

    def is_containing(self, other: AffinityMask) -> bool:
        return other.is_contained_in(self)

    def _check_index(self, cpu: int) -> None:
        if not 0 <= cpu < self._size:
            raise IndexError(f"cpu {cpu} out of range for mask of size {self._size}")

    def __getitem__(self, cpu: int) -> bool:
        self._check_index(cpu)
        return bool(self._bits >> cpu & 1)

    def __setitem__(self, cpu: int, value: bool) -> None:
        self._check_index(cpu)
        if value:
            self._bits |= 1 << cpu
        else:
            self._bits &= ~(1 << cpu)

    def __len__(self) -> int:
        return self._size

    def __and__(self, other: AffinityMask) -> AffinityMask:
        if not isinstance(other, AffinityMask):
            return NotImplemented
        if other._size != self._size:
            raise ValueError("affinity masks differ in size")
        result = AffinityMask(self._size)
        result._bits = self._bits & other._bits
        return result

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AffinityMask):
            return NotImplemented
        return self._size == other._size and self._bits == other._bits

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"AffinityMask(size={self._size}, cpus={self.to_cpus()})"