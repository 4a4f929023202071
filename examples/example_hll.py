#!/usr/bin/env python3
"""
Example usage of HyperLogLog for cardinality estimation.
"""
import threading
from cardinal import HyperLogLog, InvalidPrecisionError, LockedHyperLogLog


def main():
    """Demonstrate basic usage of HyperLogLog."""
    # Create a new sketch with precision 12 (2^12 = 4096 registers)
    sketch = HyperLogLog(precision=12)
    print(f"Registers: {sketch.num_registers}, standard error: {sketch.standard_error():.2%}")

    print("\nAdding items to sketch...")
    for i in range(10000):
        sketch.add_string(f"visitor_{i}")

    # Duplicates do not change the estimate
    for i in range(2000):
        sketch.add_string(f"visitor_{i}")

    print(f"Estimate: {sketch.estimate_cardinality()}")
    print("Truth:    10000")

    print("\nBatch insertion with the FNV-1a hasher...")
    batch_sketch = HyperLogLog(precision=12, hasher='fnv1a')
    batch_sketch.add_batch(f"visitor_{i}" for i in range(20000))
    print(f"Estimate: {batch_sketch.estimate_cardinality()} (truth 20000)")

    print("\nCustom hasher: any function returning a 32-bit integer")
    custom = HyperLogLog(precision=8, hasher=lambda value: hash(value) & 0xFFFFFFFF)
    custom.add_batch(str(i) for i in range(500))
    print(f"Estimate: {custom.estimate_cardinality()} (truth 500)")

    print("\nSharing a sketch between threads...")
    shared = LockedHyperLogLog(precision=12)
    threads = [
        threading.Thread(target=shared.add_batch, args=([f"t{t}_{i}" for i in range(5000)],))
        for t in range(4)
    ]
    for t in threads:
        t.start()
    for t in threads:
        t.join()
    print(f"Estimate: {shared.estimate_cardinality()} (truth 20000)")

    try:
        HyperLogLog(precision=20)
    except InvalidPrecisionError as e:
        print(f"\nRejected: {e}")


if __name__ == "__main__":
    main()
