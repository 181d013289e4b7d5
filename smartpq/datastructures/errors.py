"""Exceptions raised by :class:`~smartpq.datastructures.heap.PolarityHeap`."""


class HeapError(Exception):
    """Base class for every error the heap raises."""


class EmptyHeapError(HeapError, IndexError):
    """peek/pop/remove/replace was called on a heap with no elements."""


class ElementNotFoundError(HeapError, ValueError):
    """No stored element compares equal to the requested one."""


class StaleHandleError(ElementNotFoundError):
    """The handle's element has already left the heap, or belongs to another heap."""
