"""
cardinal - Python Library for HyperLogLog Cardinality Estimation
"""

from cardinal.lib.hyperloglog import HyperLogLog, InvalidPrecisionError
from cardinal.lib.exact import ExactCounter
from cardinal.lib.concurrent import LockedHyperLogLog

__version__ = '0.1.0'

__all__ = [
    'HyperLogLog',
    'InvalidPrecisionError',
    'ExactCounter',
    'LockedHyperLogLog',
]
