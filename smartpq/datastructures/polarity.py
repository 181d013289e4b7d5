from __future__ import annotations
import enum
from operator import gt, lt
from typing import Any, Callable


class Polarity(enum.Enum):
    """Which end of the order a heap surfaces first."""

    MIN_FIRST = "min"
    MAX_FIRST = "max"

    @property
    def before(self) -> Callable[[Any, Any], bool]:
        """Order predicate: ``before(a, b)`` is True when `a` outranks `b`."""
        return lt if self is Polarity.MIN_FIRST else gt

    def toggled(self) -> "Polarity":
        return Polarity.MAX_FIRST if self is Polarity.MIN_FIRST else Polarity.MIN_FIRST

    @property
    def label(self) -> str:
        return "Min" if self is Polarity.MIN_FIRST else "Max"

    @classmethod
    def parse(cls, text: str) -> "Polarity":
        """Accept ``min``/``max`` and the ``MinFirst``/``MAX_FIRST`` spellings.

        Raises:
            ValueError: for anything else.
        """
        norm = text.strip().lower().replace("_", "").replace("-", "")
        if norm in ("min", "minfirst"):
            return cls.MIN_FIRST
        if norm in ("max", "maxfirst"):
            return cls.MAX_FIRST
        raise ValueError(f"unknown polarity {text!r}; expected 'min' or 'max'")
