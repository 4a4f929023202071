
from .hyperloglog import HyperLogLog, InvalidPrecisionError, get_alpha
from .exact import ExactCounter
from .concurrent import LockedHyperLogLog
from .hashing import fnv1a_32, get_hasher, xxh32_hasher

__all__ = [
    'HyperLogLog',
    'InvalidPrecisionError',
    'get_alpha',
    'ExactCounter',
    'LockedHyperLogLog',
    'fnv1a_32',
    'get_hasher',
    'xxh32_hasher',
]
