from .polarity import Polarity
from .errors import HeapError, EmptyHeapError, ElementNotFoundError, StaleHandleError
from .dynamic_array import DynamicArray
from .entry import Entry
from .heap import Handle, PolarityHeap

__all__ = [
    "Polarity",
    "HeapError",
    "EmptyHeapError",
    "ElementNotFoundError",
    "StaleHandleError",
    "DynamicArray",
    "Entry",
    "Handle",
    "PolarityHeap",
]
