#!/usr/bin/env python
from __future__ import annotations
import sys
import os
import argparse
from typing import Optional, Dict, List, Any
from cardinal.lib.hyperloglog import HyperLogLog, InvalidPrecisionError, MIN_PRECISION, MAX_PRECISION
from cardinal.lib.exact import ExactCounter
from cardinal.lib.hashing import HASHERS
from cardinal.lib.utils import read_values


def count_file(filepath: str, precision: int = 14, hasher: str = 'xxh32',
               seed: int = 42, exact: bool = False, debug: bool = False,
               chunk_size: int = 10000) -> Dict[str, Any]:
    """Count distinct lines of a file.

    Args:
        filepath: Text file (optionally gzipped) with one value per line, or "-"
        precision: Precision for HyperLogLog sketching
        hasher: Name of the hash function
        seed: Seed for the hash function
        exact: Also count exactly and report the relative error
        debug: Print debug information
        chunk_size: Number of lines hashed per batch

    Returns:
        Dictionary with 'file', 'estimate' and, when exact is set,
        'exact' and 'relative_error'
    """
    sketch = HyperLogLog(precision=precision, hasher=hasher, seed=seed, debug=debug)
    counter = ExactCounter() if exact else None

    for chunk in read_values(filepath, chunk_size=chunk_size):
        sketch.add_batch(chunk)
        if counter is not None:
            counter.add_batch(chunk)

    result: Dict[str, Any] = {'file': filepath, 'estimate': sketch.estimate_cardinality()}
    if debug:
        print(f"DEBUG: {filepath}: {sketch.num_registers - sketch.registers.count_zero_registers()}"
              f"/{sketch.num_registers} registers occupied")
    if counter is not None:
        truth = counter.estimate_cardinality()
        result['exact'] = truth
        result['relative_error'] = abs(result['estimate'] - truth) / truth if truth else 0.0
    return result


def parse_args(argv: Optional[List[str]] = None):
    """Parse command line arguments."""
    arg_parser = argparse.ArgumentParser(
        description="""Estimate the number of distinct lines in each input file with HyperLogLog.

        Input files hold one UTF-8 value per line; only the line ending is removed,
        so surrounding whitespace is part of the value and empty lines are skipped.
        Files ending in .gz are decompressed and "-" reads standard input.
        """,
        formatter_class=argparse.RawDescriptionHelpFormatter
    )

    arg_parser.add_argument('filepaths', nargs='+', help='Files to count')
    arg_parser.add_argument('--outprefix', '-o', '--out', type=str, default="cardinal", help='The output file prefix')
    arg_parser.add_argument("--precision", "-p", type=int, default=14,
                            help=f"Precision for HyperLogLog sketching ({MIN_PRECISION}-{MAX_PRECISION})")
    arg_parser.add_argument("--hasher", choices=HASHERS, default='xxh32', help="Hash function")
    arg_parser.add_argument("--seed", type=int, default=42, help="Random seed for hashing")
    arg_parser.add_argument("--exact", action="store_true", help="Also count exactly and report the error")
    arg_parser.add_argument("--chunk_size", type=int, default=10000, help="Lines hashed per batch")
    arg_parser.add_argument("--debug", action="store_true", help="Enable debug mode")

    return arg_parser.parse_args(argv)


def get_new_prefix(outprefix: str, precision: int, hasher: str, exact: bool) -> str:
    """Get output prefix with a suffix describing the sketch settings."""
    outprefix = f"{outprefix}_hll_p{precision}"
    if hasher != 'xxh32':
        outprefix = f"{outprefix}_{hasher}"
    if exact:
        outprefix = f"{outprefix}_exact"
    return outprefix


def write_results(results: List[Dict[str, Any]], output: str) -> None:
    """Write count results to a tab-separated file.

    Args:
        results: List of dictionaries returned by count_file
        output: Output file path
    """
    columns = ['file', 'estimate']
    if results and 'exact' in results[0]:
        columns.extend(['exact', 'relative_error'])

    with open(output, 'w') as f:
        f.write('\t'.join(columns) + '\n')
        for result in results:
            f.write('\t'.join(str(result[col]) for col in columns) + '\n')


def main(argv: Optional[List[str]] = None) -> None:
    """Main entry point for cardinal."""
    args = parse_args(argv)

    # Validate up front so a bad precision fails before any file is read
    try:
        HyperLogLog(precision=args.precision)
    except InvalidPrecisionError as e:
        print(f"Error: {e}", file=sys.stderr)
        sys.exit(2)

    for filepath in args.filepaths:
        if filepath != "-" and not os.path.isfile(filepath):
            print(f"Error: File {filepath} does not exist or is not a regular file", file=sys.stderr)
            sys.exit(2)

    results = []
    for filepath in args.filepaths:
        try:
            result = count_file(filepath,
                                precision=args.precision,
                                hasher=args.hasher,
                                seed=args.seed,
                                exact=args.exact,
                                debug=args.debug,
                                chunk_size=args.chunk_size)
        except UnicodeDecodeError as e:
            print(f"Error: File {filepath} is not valid UTF-8 text: {e}", file=sys.stderr)
            sys.exit(2)
        except OSError as e:
            print(f"Error: Could not read {filepath}: {e}", file=sys.stderr)
            sys.exit(2)
        if args.exact:
            print(f"{filepath}\t{result['estimate']}\t{result['exact']}\t{result['relative_error']:.4f}")
        else:
            print(f"{filepath}\t{result['estimate']}")
        results.append(result)

    output = f"{get_new_prefix(args.outprefix, args.precision, args.hasher, args.exact)}.tsv"
    write_results(results, output)
    if args.debug:
        print(f"DEBUG: wrote {len(results)} rows to {output}")


if __name__ == "__main__":
    main()
