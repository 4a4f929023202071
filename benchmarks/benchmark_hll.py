#!/usr/bin/env python3
import time
import math
import numpy as np  # type: ignore
import matplotlib  # type: ignore
matplotlib.use("Agg")
import matplotlib.pyplot as plt  # type: ignore
import os
from cardinal.lib.hyperloglog import HyperLogLog
from cardinal.lib.exact import ExactCounter

# Create results directory if it doesn't exist
RESULTS_DIR = os.path.join(os.path.dirname(__file__), 'results')
os.makedirs(RESULTS_DIR, exist_ok=True)

# Constants
PRECISION_VALUES = [4, 8, 10, 12, 14, 16]
NUM_ITEMS = [100, 1000, 10000, 100000, 1000000]
NUM_RUNS = 5
HASHERS = ['xxh32', 'fnv1a']


def generate_data(size, run):
    """Generate `size` distinct items, different for each run."""
    return [f"run{run}_item_{i}" for i in range(size)]


def benchmark_add(precision=14, hasher='xxh32'):
    """Time add_string against add_batch."""
    results = {}
    for num in NUM_ITEMS:
        items = generate_data(num, 0)

        sketch = HyperLogLog(precision=precision, hasher=hasher)
        start_time = time.time()
        for item in items:
            sketch.add_string(item)
        single_time = time.time() - start_time

        sketch = HyperLogLog(precision=precision, hasher=hasher)
        start_time = time.time()
        sketch.add_batch(items)
        batch_time = time.time() - start_time

        results[num] = {
            'single_items_per_second': num / single_time if single_time > 0 else float('inf'),
            'batch_items_per_second': num / batch_time if batch_time > 0 else float('inf'),
        }
    return results


def benchmark_accuracy(hasher='xxh32'):
    """Relative error of the estimate per precision and cardinality."""
    results = {}
    for precision in PRECISION_VALUES:
        results[precision] = {}
        for num in NUM_ITEMS:
            errors = []
            for run in range(NUM_RUNS):
                items = generate_data(num, run)
                sketch = HyperLogLog(precision=precision, hasher=hasher, seed=run)
                exact = ExactCounter()
                sketch.add_batch(items)
                exact.add_batch(items)
                truth = exact.estimate_cardinality()
                errors.append((sketch.estimate_cardinality() - truth) / truth)
            results[precision][num] = {
                'mean_error': float(np.mean(errors)),
                'rmse': float(np.sqrt(np.mean(np.square(errors)))),
            }
    return results


def plot_accuracy(results, hasher):
    """Plot RMSE against the theoretical 1.04/sqrt(m) standard error."""
    fig, ax = plt.subplots(figsize=(8, 5))
    for precision, by_num in results.items():
        nums = sorted(by_num)
        line, = ax.plot(nums, [by_num[n]['rmse'] for n in nums], marker='o', label=f"p={precision}")
        ax.axhline(1.04 / math.sqrt(1 << precision), color=line.get_color(), linestyle='--', linewidth=0.8)
    ax.set_xscale('log')
    ax.set_xlabel('distinct items')
    ax.set_ylabel('relative RMSE')
    ax.set_title(f'HyperLogLog accuracy ({hasher})')
    ax.legend()
    output = os.path.join(RESULTS_DIR, f'accuracy_{hasher}.png')
    fig.savefig(output, dpi=150, bbox_inches='tight')
    plt.close(fig)
    return output


def main():
    for hasher in HASHERS:
        print(f"\n=== {hasher} ===")
        for num, r in benchmark_add(hasher=hasher).items():
            print(f"add {num:>8}: {r['single_items_per_second']:>12.0f} items/s single, "
                  f"{r['batch_items_per_second']:>12.0f} items/s batch")

        accuracy = benchmark_accuracy(hasher)
        for precision, by_num in accuracy.items():
            for num, r in by_num.items():
                print(f"p={precision:<2} n={num:>8}: mean error {r['mean_error']:+.4f}, rmse {r['rmse']:.4f}")
        print(f"Plot written to {plot_accuracy(accuracy, hasher)}")


if __name__ == "__main__":
    main()
