"""HyperLogLog guarded by a single lock for use from several threads.

A bare HyperLogLog does no locking; reading it while another thread adds
values is undefined. This wrapper serializes every add and, by default,
every estimate.
"""
from __future__ import annotations

import threading
from typing import Iterable, Optional

from cardinal.lib.abstractsketch import AbstractSketch
from cardinal.lib.hyperloglog import HyperLogLog


class LockedHyperLogLog(AbstractSketch):
    """HyperLogLog wrapped in one coarse threading.Lock."""

    def __init__(self, sketch: Optional[HyperLogLog] = None, **kwargs) -> None:
        """Wrap an existing sketch, or build one from HyperLogLog kwargs."""
        self._sketch = sketch if sketch is not None else HyperLogLog(**kwargs)
        self._lock = threading.Lock()

    def add_string(self, s: str) -> None:
        with self._lock:
            self._sketch.add_string(s)

    def add_batch(self, strings: Iterable[str]) -> None:
        # Consume the iterable before taking the lock
        strings = list(strings)
        with self._lock:
            self._sketch.add_batch(strings)

    def estimate_cardinality(self, best_effort: bool = False) -> int:
        """Estimate cardinality.

        Args:
            best_effort: Read without taking the lock. The estimate may then
                reflect a batch that is only partly applied.
        """
        if best_effort:
            return self._sketch.estimate_cardinality()
        with self._lock:
            return self._sketch.estimate_cardinality()

    @property
    def sketch(self) -> HyperLogLog:
        return self._sketch
