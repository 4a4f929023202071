"""
Bit arithmetic for HyperLogLog: splitting a 32-bit hash into a register
index and a remainder, and ranking the remainder by its lowest set bit.

The index is taken from the low `precision` bits of the hash and the rank
from the remaining high bits, so the two never share a bit.
"""
from __future__ import annotations
from typing import Tuple
import numpy as np # type: ignore

from cardinal.lib.hashing import HASH_BITS


def index_mask(precision: int) -> int:
    """Mask selecting the low `precision` bits, e.g. 0b1111 for 4."""
    return (1 << precision) - 1


def split_hash(hash_val: int, precision: int) -> Tuple[int, int]:
    """Split a 32-bit hash into (index, remainder).

    Args:
        hash_val: 32-bit hash value
        precision: Number of index bits

    Returns:
        Tuple of the register index (low bits) and the remaining
        HASH_BITS - precision high bits, right-aligned
    """
    return hash_val & index_mask(precision), hash_val >> precision


def rank(remainder: int, width: int = HASH_BITS) -> int:
    """1-based position of the lowest set bit of `remainder`.

    Equal to the number of trailing zero bits plus one. A remainder with no
    set bit gets width + 1, one more than any observable rank.

    Args:
        remainder: Unsigned integer of at most `width` bits
        width: Number of meaningful bits in the remainder

    Returns:
        Rank in [1, width + 1]
    """
    if remainder == 0:
        return width + 1
    return (remainder & -remainder).bit_length()


def split_hashes(hashes: np.ndarray, precision: int) -> Tuple[np.ndarray, np.ndarray]:
    """Vectorized split_hash over an array of 32-bit hashes."""
    hashes = np.asarray(hashes, dtype=np.uint64)
    indices = hashes & np.uint64(index_mask(precision))
    remainders = hashes >> np.uint64(precision)
    return indices.astype(np.intp), remainders


def ranks(remainders: np.ndarray, width: int = HASH_BITS) -> np.ndarray:
    """Vectorized rank over an array of remainders.

    Args:
        remainders: Array of unsigned remainders
        width: Number of meaningful bits in each remainder

    Returns:
        Array of ranks as uint8
    """
    remainders = np.asarray(remainders, dtype=np.uint64)
    # Isolate the lowest set bit (two's complement trick on unsigned ints)
    lowest = remainders & (np.invert(remainders) + np.uint64(1))
    # frexp gives lowest == 0.5 * 2**exp, so exp is trailing zeros + 1
    _, exponents = np.frexp(lowest.astype(np.float64))
    result = np.where(remainders == 0, width + 1, exponents)
    return result.astype(np.uint8)
