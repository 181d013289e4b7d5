from __future__ import annotations
import logging
from typing import Generic, Iterable, Iterator, List, Optional, TypeVar, Union

from ..config import default_capacity, default_polarity, validate_capacity
from .dynamic_array import DynamicArray
from .errors import ElementNotFoundError, EmptyHeapError, StaleHandleError
from .polarity import Polarity

T = TypeVar("T")

logger = logging.getLogger(__name__)


class Handle(Generic[T]):
    """Stable reference to one element stored in a :class:`PolarityHeap`.

    The owning heap rewrites ``_index`` on every swap, so a handle keeps
    pointing at its element across reordering and storage growth. Once the
    element leaves the heap the index becomes -1 and the handle is stale.
    """

    __slots__ = ("_element", "_index")

    def __init__(self, element: T, index: int) -> None:
        self._element = element
        self._index = index

    @property
    def element(self) -> T:
        return self._element

    @property
    def valid(self) -> bool:
        return self._index >= 0

    def __repr__(self) -> str:  # pragma: no cover - trivial
        state = f"index={self._index}" if self._index >= 0 else "stale"
        return f"Handle({self._element!r}, {state})"


class PolarityHeap(Generic[T]):
    """A binary heap whose ordering can flip between min-first and max-first.

    Elements live in a :class:`DynamicArray` in heap array order. The active
    polarity supplies a single order predicate that every sift routine uses,
    so switching polarity is a predicate swap followed by an O(n) rebuild.

    Lookups by value (:meth:`remove`, :meth:`replace_key`,
    :meth:`replace_value`) scan the array and act on the first element that
    compares equal. Use the :class:`Handle` returned by :meth:`insert` for
    identity-based O(log n) removal and update.
    """

    __slots__ = ("_slots", "_polarity", "_before")

    def __init__(
        self,
        it: Optional[Iterable[T]] = None,
        *,
        capacity: Optional[int] = None,
        polarity: Union[Polarity, str, None] = None,
    ) -> None:
        cap = default_capacity() if capacity is None else validate_capacity(capacity)
        if polarity is None:
            polarity = default_polarity()
        elif isinstance(polarity, str):
            polarity = Polarity.parse(polarity)
        self._polarity: Polarity = polarity
        self._before = polarity.before
        self._slots: DynamicArray[Handle[T]] = DynamicArray(cap)
        if it is not None:
            for element in it:
                self._slots.append(Handle(element, len(self._slots)))
            self._heapify()  # Bulk build in O(n) instead of repeated inserts

    # -----------------------------
    # Internal helpers
    # -----------------------------
    def _outranks(self, i: int, j: int) -> bool:
        return self._before(self._slots[i]._element, self._slots[j]._element)

    def _swap(self, i: int, j: int) -> None:
        slots = self._slots
        slots.swap(i, j)
        slots[i]._index = i
        slots[j]._index = j

    def _sift_up(self, idx: int) -> int:
        """Move the element at `idx` toward the root; return where it stopped."""
        while idx > 0:
            parent = (idx - 1) // 2
            if not self._outranks(idx, parent):
                break
            self._swap(idx, parent)
            idx = parent
        return idx

    def _sift_down(self, idx: int) -> int:
        """Move the element at `idx` toward the leaves; return where it stopped."""
        n = len(self._slots)
        while True:
            left = 2 * idx + 1
            right = 2 * idx + 2
            dominant = idx
            if left < n and self._outranks(left, dominant):
                dominant = left
            # strict test: the left child wins ties
            if right < n and self._outranks(right, dominant):
                dominant = right
            if dominant == idx:
                return idx
            self._swap(idx, dominant)
            idx = dominant

    def _restore(self, idx: int) -> None:
        # The element at idx may be out of place in either direction.
        if self._sift_up(idx) == idx:
            self._sift_down(idx)

    def _heapify(self) -> None:
        """Rebuild the heap property over the whole array in O(n) time."""
        for i in reversed(range(len(self._slots) // 2)):
            self._sift_down(i)

    def _find(self, target: T) -> int:
        for i, handle in enumerate(self._slots):
            if handle._element == target:
                return i
        return -1

    def _detach(self, idx: int) -> Handle[T]:
        """Take the slot at `idx` out of the heap and refill it with the last element."""
        slots = self._slots
        last = slots.pop()
        if idx < len(slots):
            removed = slots[idx]
            slots[idx] = last
            last._index = idx
            self._restore(idx)
        else:
            removed = last
        removed._index = -1
        return removed

    def _require_items(self, op: str) -> None:
        if not self._slots:
            raise EmptyHeapError(f"{op} on empty heap")

    def _require_live(self, handle: Handle[T]) -> int:
        idx = handle._index
        if idx < 0 or idx >= len(self._slots) or self._slots[idx] is not handle:
            raise StaleHandleError(f"{handle!r} does not refer to an element of this heap")
        return idx

    def _reposition(self, idx: int, old: T, new: T) -> None:
        if self._before(new, old):
            self._sift_up(idx)
        else:
            self._sift_down(idx)

    # -----------------------------
    # Public API
    # -----------------------------
    def insert(self, element: T) -> Handle[T]:
        """Add `element` and return a handle to it (O(log n), amortized growth)."""
        handle = Handle(element, len(self._slots))
        self._slots.append(handle)
        self._sift_up(handle._index)
        return handle

    def peek(self) -> T:
        """Return the highest-priority element without removing it (O(1))."""
        self._require_items("peek")
        return self._slots[0]._element

    def pop(self) -> T:
        """Remove and return the highest-priority element (O(log n))."""
        self._require_items("pop")
        return self._detach(0)._element

    def remove(self, target: T) -> T:
        """Remove the first element equal to `target` and return it (O(n)).

        Raises:
            EmptyHeapError: if the heap is empty.
            ElementNotFoundError: if no stored element equals `target`.
        """
        self._require_items("remove")
        idx = self._find(target)
        if idx < 0:
            logger.debug("remove: %r not found among %d elements", target, len(self._slots))
            raise ElementNotFoundError(f"{target!r} not in heap")
        return self._detach(idx)._element

    def replace_key(self, old: T, new: T) -> T:
        """Overwrite the first element equal to `old` with `new`.

        A miss leaves the heap untouched. Either way `old` is returned.
        """
        self._require_items("replace_key")
        idx = self._find(old)
        if idx < 0:
            logger.debug("replace_key: %r not found, nothing replaced", old)
            return old
        self._slots[idx]._element = new
        self._reposition(idx, old, new)
        return old

    def replace_value(self, old: T, new: T) -> T:
        """Swap the first element equal to `old` for `new`, typically an
        :class:`~smartpq.datastructures.entry.Entry` carrying a new payload
        under the same key. Order is restored in case the key changed too.
        """
        self._require_items("replace_value")
        idx = self._find(old)
        if idx < 0:
            logger.debug("replace_value: %r not found, nothing replaced", old)
            return old
        self._slots[idx]._element = new
        self._restore(idx)
        return old

    def remove_handle(self, handle: Handle[T]) -> T:
        """Remove the element `handle` refers to (O(log n))."""
        return self._detach(self._require_live(handle))._element

    def update(self, handle: Handle[T], new: T) -> T:
        """Replace the element behind `handle` with `new`; return the old element."""
        idx = self._require_live(handle)
        old = handle._element
        handle._element = new
        self._reposition(idx, old, new)
        return old

    def toggle(self) -> None:
        """Flip between min-first and max-first and rebuild in O(n)."""
        self._polarity = self._polarity.toggled()
        self._before = self._polarity.before
        self._heapify()
        logger.debug("polarity toggled to %s (size=%d)", self._polarity.label, len(self._slots))

    @property
    def polarity(self) -> Polarity:
        return self._polarity

    def status(self) -> str:
        """``"Min"`` or ``"Max"``."""
        return self._polarity.label

    @property
    def capacity(self) -> int:
        return self._slots.capacity

    def size(self) -> int:
        return len(self._slots)

    def is_empty(self) -> bool:
        return len(self._slots) == 0

    def to_list(self) -> List[T]:
        """Copy of the stored elements in heap array order (not sorted)."""
        return [handle._element for handle in self._slots]

    def __len__(self) -> int:
        return len(self._slots)

    def __bool__(self) -> bool:  # pragma: no cover - trivial
        return len(self._slots) != 0

    def __contains__(self, element: object) -> bool:
        return self._find(element) >= 0  # type: ignore[arg-type]

    def __iter__(self) -> Iterator[T]:  # pragma: no cover - simple
        # Iterate over the internal array (heap order, not sorted order)
        for handle in self._slots:
            yield handle._element

    def __repr__(self) -> str:  # pragma: no cover - trivial
        return f"PolarityHeap({self.to_list()!r}, polarity={self._polarity.label})"
