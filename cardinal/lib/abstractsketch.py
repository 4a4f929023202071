from __future__ import annotations
from abc import ABC, abstractmethod
from typing import Iterable


class AbstractSketch(ABC):
    """Base class for all distinct counters."""

    @abstractmethod
    def add_string(self, s: str) -> None:
        """Add a string to the sketch."""
        pass

    @abstractmethod
    def add_batch(self, strings: Iterable[str]) -> None:
        """Add multiple strings to the sketch.

        Args:
            strings: Strings to add to the sketch
        """
        pass

    @abstractmethod
    def estimate_cardinality(self) -> int:
        """Estimate the number of distinct strings added so far."""
        pass

    def add(self, s: str) -> None:
        """Alias for add_string."""
        self.add_string(s)

    def __len__(self) -> int:
        return int(self.estimate_cardinality())
