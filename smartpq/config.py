"""
Construction defaults for :class:`~smartpq.datastructures.heap.PolarityHeap`.

Values can be overridden through the environment:
- ``SMARTPQ_CAPACITY``: initial storage capacity (positive integer)
- ``SMARTPQ_POLARITY``: initial polarity (``min`` or ``max``)

The environment is read when a heap is constructed, not at import time.
"""

import os

from .datastructures.polarity import Polarity

DEFAULT_CAPACITY = 16
DEFAULT_POLARITY = Polarity.MIN_FIRST

CAPACITY_ENV = "SMARTPQ_CAPACITY"
POLARITY_ENV = "SMARTPQ_POLARITY"


def validate_capacity(capacity: int) -> int:
    """Return `capacity` if it is a positive int, else raise ValueError."""
    if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity < 1:
        raise ValueError(f"capacity must be a positive integer, got {capacity!r}")
    return capacity


def default_capacity() -> int:
    raw = os.environ.get(CAPACITY_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_CAPACITY
    try:
        value = int(raw)
    except ValueError:
        raise ValueError(f"{CAPACITY_ENV} must be an integer, got {raw!r}") from None
    return validate_capacity(value)


def default_polarity() -> Polarity:
    raw = os.environ.get(POLARITY_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_POLARITY
    return Polarity.parse(raw)
