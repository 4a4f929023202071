from __future__ import annotations
import numpy as np # type: ignore


class RegisterArray:
    """Fixed-size array of HyperLogLog registers.

    Each register holds the maximum rank observed for its bucket. Registers
    start at 0 and only ever grow.
    """

    def __init__(self, size: int):
        """Initialize a zero-filled register array.

        Args:
            size: Number of registers (2^precision)
        """
        self._registers = np.zeros(size, dtype=np.uint8)

    def __len__(self) -> int:
        return len(self._registers)

    def __getitem__(self, index: int) -> int:
        return int(self._registers[index])

    def update(self, index: int, rank: int) -> None:
        """Raise register `index` to `rank` if `rank` is larger."""
        if rank > self._registers[index]:
            self._registers[index] = rank

    def update_many(self, indices: np.ndarray, ranks: np.ndarray) -> None:
        """Apply update for every (index, rank) pair.

        Repeated indices are handled correctly: each register ends up at the
        maximum of its current value and all ranks mapped to it.
        """
        np.maximum.at(self._registers, indices, np.asarray(ranks, dtype=np.uint8))

    def count_zero_registers(self) -> int:
        """Number of registers never updated."""
        return int(np.count_nonzero(self._registers == 0))

    def harmonic_sum(self) -> float:
        """Sum of 2^-register over all registers."""
        return float(np.sum(np.exp2(-self._registers.astype(np.float64))))

    def is_empty(self) -> bool:
        return not self._registers.any()

    def values(self) -> np.ndarray:
        """Copy of the current register values."""
        return self._registers.copy()

    def max_value(self) -> int:
        return int(self._registers.max())

    def nbytes(self) -> int:
        return int(self._registers.nbytes)
