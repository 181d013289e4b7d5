"""A priority queue that can switch between min-first and max-first ordering."""

import logging

from .datastructures import (
    DynamicArray,
    ElementNotFoundError,
    EmptyHeapError,
    Entry,
    Handle,
    HeapError,
    Polarity,
    PolarityHeap,
    StaleHandleError,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

__all__ = [
    "DynamicArray",
    "ElementNotFoundError",
    "EmptyHeapError",
    "Entry",
    "Handle",
    "HeapError",
    "Polarity",
    "PolarityHeap",
    "StaleHandleError",
]
