from __future__ import annotations
from typing import Iterable, Set
from cardinal.lib.abstractsketch import AbstractSketch


class ExactCounter(AbstractSketch):
    """Exact distinct counter backed by a set.

    Memory grows with the number of distinct strings; used as ground truth
    when measuring HyperLogLog error.
    """

    def __init__(self):
        """Initialize exact counter."""
        super().__init__()
        self.elements: Set[str] = set()

    def add_string(self, s: str) -> None:
        """Add a string to the counter."""
        self.elements.add(s)

    def add_batch(self, strings: Iterable[str]) -> None:
        """Add multiple strings to the counter.

        Args:
            strings: Strings to add to the counter
        """
        self.elements.update(strings)

    def estimate_cardinality(self) -> int:
        """Return exact cardinality."""
        return len(self.elements)
