from __future__ import annotations
from typing import Callable, Tuple
import xxhash # type: ignore

# A hasher maps a value to an unsigned 32-bit integer, deterministically.
Hasher = Callable[[str], int]

HASH_BITS = 32
HASH_MASK = (1 << HASH_BITS) - 1

FNV32_OFFSET_BASIS = 2166136261
FNV32_PRIME = 16777619

HASHERS: Tuple[str, ...] = ('xxh32', 'fnv1a')


def xxh32_hasher(seed: int = 42) -> Hasher:
    """Build a 32-bit xxhash hasher bound to a seed.

    Args:
        seed: Seed passed to xxhash.xxh32

    Returns:
        Function mapping a string to its 32-bit hash value
    """
    def _hash(value: str) -> int:
        hasher = xxhash.xxh32(seed=seed)
        hasher.update(value.encode('utf-8'))
        return hasher.intdigest()
    return _hash


def fnv1a_32(value: str) -> int:
    """32-bit FNV-1a hash of the UTF-8 bytes of a string.

    Args:
        value: String to hash

    Returns:
        32-bit hash value as integer
    """
    h = FNV32_OFFSET_BASIS
    for byte in value.encode('utf-8'):
        h ^= byte
        h = (h * FNV32_PRIME) & HASH_MASK
    return h


def get_hasher(name: str = 'xxh32', seed: int = 42) -> Hasher:
    """Resolve a hasher by name.

    Args:
        name: One of HASHERS
        seed: Seed for seeded hashers (ignored by fnv1a)

    Returns:
        The hasher function

    Raises:
        ValueError: If the name is not a known hasher
    """
    if name == 'xxh32':
        return xxh32_hasher(seed)
    if name == 'fnv1a':
        return fnv1a_32
    raise ValueError(f"Unknown hasher '{name}', expected one of: {', '.join(HASHERS)}")
