from __future__ import annotations
import math
import operator
import warnings
from typing import Iterable, Optional, Union
import numpy as np # type: ignore

from cardinal.lib.abstractsketch import AbstractSketch
from cardinal.lib.bits import rank, ranks, split_hash, split_hashes
from cardinal.lib.hashing import HASH_BITS, HASH_MASK, Hasher, get_hasher
from cardinal.lib.registers import RegisterArray

MIN_PRECISION = 4
MAX_PRECISION = 16

# Above this raw estimate hash collisions in the 32-bit space bias the
# estimate low; no large range correction is applied.
LARGE_RANGE_THRESHOLD = (1 << HASH_BITS) / 30.0


class InvalidPrecisionError(ValueError):
    """Raised when a HyperLogLog is built with precision outside [4, 16]."""

    def __init__(self, precision,
                 minimum: int = MIN_PRECISION,
                 maximum: int = MAX_PRECISION):
        self.precision = precision
        self.minimum = minimum
        self.maximum = maximum
        super().__init__(
            f"Invalid precision {precision!r}: precision must be an integer "
            f"between {minimum} and {maximum} inclusive")


def get_alpha(precision: int) -> float:
    """Bias correction constant alpha_m for m = 2^precision registers.

    Values for 16, 32 and 64 registers come from the original HyperLogLog
    paper; larger arrays use the asymptotic formula.
    """
    if precision == 4:
        return 0.673
    elif precision == 5:
        return 0.697
    elif precision == 6:
        return 0.709
    m = float(1 << precision)
    return 0.7213 / (1.0 + 1.079 / m)


class HyperLogLog(AbstractSketch):
    def __init__(self,
                 precision: int = 14,
                 hasher: Optional[Union[Hasher, str]] = None,
                 seed: int = 42,
                 debug: bool = False):
        """Initialize HyperLogLog sketch.

        Args:
            precision: Number of bits for register indexing (4-16).
                      Uses 2^precision one-byte registers; standard error
                      is about 1.04 / sqrt(2^precision)
            hasher: Function mapping a string to a 32-bit unsigned integer,
                    or the name of a built-in hasher ('xxh32', 'fnv1a').
                    Defaults to seeded xxh32
            seed: Seed for the default hasher
            debug: Whether to print debug information

        Raises:
            InvalidPrecisionError: If precision is not an integer in [4, 16]
        """
        super().__init__()

        # Accepts any integer type (including numpy integers) but not bool
        if isinstance(precision, (bool, np.bool_)):
            raise InvalidPrecisionError(precision)
        try:
            precision = operator.index(precision)
        except TypeError:
            raise InvalidPrecisionError(precision) from None
        if precision < MIN_PRECISION or precision > MAX_PRECISION:
            raise InvalidPrecisionError(precision)

        self.precision = precision
        self.num_registers = 1 << precision
        self.alpha_mm = get_alpha(precision)
        self.registers = RegisterArray(self.num_registers)
        self.seed = seed
        self.debug = debug

        if hasher is None or isinstance(hasher, str):
            self._hasher = get_hasher(hasher or 'xxh32', seed)
        else:
            self._hasher = hasher

        # Width of the remainder left after taking the index bits
        self._width = HASH_BITS - precision
        self._large_range_warned = False

    def __repr__(self) -> str:
        return (f"HyperLogLog(precision={self.precision}, "
                f"num_registers={self.num_registers})")

    def add_string(self, s: str) -> None:
        """Add a string to the sketch.

        Adding the same string again never changes the sketch.

        Args:
            s: String to add
        """
        hash_val = self._hasher(s) & HASH_MASK
        idx, remainder = split_hash(hash_val, self.precision)
        self.registers.update(idx, rank(remainder, self._width))

    def add_batch(self, strings: Iterable[str]) -> None:
        """Add multiple strings to the sketch.

        Hashing is done per string; splitting, ranking and the register
        update are vectorized. The result is identical to calling
        add_string for each string.

        Args:
            strings: Strings to add to the sketch
        """
        hashes = np.fromiter((self._hasher(s) & HASH_MASK for s in strings),
                             dtype=np.uint64)
        if hashes.size == 0:
            return
        indices, remainders = split_hashes(hashes, self.precision)
        self.registers.update_many(indices, ranks(remainders, self._width))

    def raw_estimate(self) -> float:
        """Calculate the raw cardinality estimate before corrections.

        Returns:
            alpha_m * m^2 / sum(2^-register)
        """
        m = float(self.num_registers)
        return self.alpha_mm * m * m / self.registers.harmonic_sum()

    def estimate_cardinality(self) -> int:
        """Estimate the number of distinct strings added.

        Uses linear counting over the empty registers when the raw estimate
        is at most 2.5 * m, and the raw estimate otherwise. An empty sketch
        estimates exactly 0.

        Returns:
            Estimated cardinality, truncated to an integer
        """
        m = float(self.num_registers)
        raw_estimate = self.raw_estimate()

        # Small range correction
        if raw_estimate <= 2.5 * m:
            v = self.registers.count_zero_registers()
            if v > 0:
                estimate = m * math.log(m / float(v))
                if self.debug:
                    print(f"DEBUG: raw={raw_estimate:.1f}, zero registers={v}, "
                          f"linear counting={estimate:.1f}")
                return int(estimate)

        if raw_estimate > LARGE_RANGE_THRESHOLD and not self._large_range_warned:
            warnings.warn(
                f"Raw estimate {raw_estimate:.0f} exceeds 2^32/30; 32-bit hash "
                "collisions make the estimate increasingly low.",
                RuntimeWarning)
            self._large_range_warned = True

        if self.debug:
            print(f"DEBUG: raw={raw_estimate:.1f}, no correction applied")
        return int(raw_estimate)

    def get_alpha(self) -> float:
        """Get alpha correction factor for this sketch's register count."""
        return self.alpha_mm

    def is_empty(self) -> bool:
        """Check if sketch is empty."""
        return self.registers.is_empty()

    def standard_error(self) -> float:
        """Theoretical relative standard error, 1.04 / sqrt(m)."""
        return 1.04 / math.sqrt(self.num_registers)

    def memory_bytes(self) -> int:
        """Bytes used by the register array."""
        return self.registers.nbytes()
