from __future__ import annotations
import ctypes
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar

T = TypeVar("T")

logger = logging.getLogger(__name__)


class DynamicArray(Generic[T]):
    """A dense, zero-indexed dynamic array used as heap storage.

    Implementation notes
    --------------------
    • Storage is a ctypes array of `py_object` (not Python's built-in list).
    • Capacity grows geometrically (x2) when full and never shrinks on its own.
    • Indices must lie in [0, len); there is no negative indexing.
    """

    __slots__ = ("_buf", "_size", "_capacity")

    def __init__(self, capacity: int = 4, it: Optional[Iterable[T]] = None) -> None:
        if capacity < 1:
            raise ValueError("capacity must be a positive integer")
        self._capacity = capacity
        self._buf = self._make_array(self._capacity)
        self._size = 0

        if it is not None:
            for v in it:
                self.append(v)

    # ------------------------------- internals -------------------------------

    @staticmethod
    def _make_array(capacity: int):
        """Allocate a raw ctypes array of length `capacity` to hold py_object."""
        return (capacity * ctypes.py_object)()

    def _resize(self, new_capacity: int) -> None:
        """Move the live prefix into a fresh buffer of `new_capacity` slots."""
        if new_capacity < self._size:
            raise ValueError("new capacity must be >= size")

        new_buf = self._make_array(new_capacity)
        for i in range(self._size):
            new_buf[i] = self._buf[i]

        logger.debug("storage resized %d -> %d (size=%d)", self._capacity, new_capacity, self._size)
        self._buf = new_buf
        self._capacity = new_capacity

    def _check_index(self, idx: int) -> int:
        if idx < 0 or idx >= self._size:
            raise IndexError("array index out of range")
        return idx

    # --------------------------------- API -----------------------------------

    @property
    def capacity(self) -> int:
        """Number of allocated slots (always >= len)."""
        return self._capacity

    def reserve(self, capacity: int) -> None:
        """Grow the buffer to at least `capacity` slots. Never shrinks."""
        if capacity > self._capacity:
            self._resize(capacity)

    def append(self, value: T) -> None:
        """Append `value` to the end, doubling capacity when full. Amortized O(1)."""
        if self._size >= self._capacity:
            self._resize(self._capacity * 2)
        self._buf[self._size] = value
        self._size += 1

    def pop(self) -> T:
        """Remove and return the last item. O(1).

        Raises:
            IndexError: if the array is empty.
        """
        if self._size == 0:
            raise IndexError("pop from empty array")
        self._size -= 1
        val = self._buf[self._size]
        # Drop the reference so the slot does not keep the object alive.
        self._buf[self._size] = None
        return val  # type: ignore[return-value]

    def swap(self, i: int, j: int) -> None:
        """Exchange the items at `i` and `j`."""
        self._check_index(i)
        self._check_index(j)
        self._buf[i], self._buf[j] = self._buf[j], self._buf[i]

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[T]:
        for i in range(self._size):
            yield self._buf[i]  # type: ignore[misc]

    def __getitem__(self, idx: int) -> T:
        return self._buf[self._check_index(idx)]  # type: ignore[return-value]

    def __setitem__(self, idx: int, value: T) -> None:
        self._buf[self._check_index(idx)] = value

    def to_list(self) -> List[T]:
        """Copy the live prefix into a plain Python list."""
        return [self._buf[i] for i in range(self._size)]

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return self._size != 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"DynamicArray({self.to_list()!r}, capacity={self._capacity})"
