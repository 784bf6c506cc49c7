#!/usr/bin/env python3
"""
Benchmark Script for Assoc-Array

Times each AssociativeArray operation on a store filled with --operations
pairs. Every lookup is a linear scan, so throughput falls as the store
grows; run with a few different -n values to see it.

Usage:
    python scripts/benchmark.py                    # Run all benchmarks
    python scripts/benchmark.py --operations 5000  # Custom operation count
    python scripts/benchmark.py --debug            # Log every expand/clone
"""

import argparse
import logging
import os
import random
import string
import sys
import time
from typing import Any, Callable, Dict, List, Tuple

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from assoc_array.config.settings import settings
from assoc_array.store import AssociativeArray

logger = logging.getLogger("assoc_array.benchmark")

CLONE_ROUNDS = 10


class Benchmark:
    """Pre-generated keys and values plus one timing method per operation."""

    def __init__(self, operations: int = 2000, key_size: int = 16, value_size: int = 64):
        self.operations = operations
        alphabet = string.ascii_letters + string.digits
        self.keys = ["".join(random.choices(alphabet, k=key_size)) for _ in range(operations)]
        self.values = ["".join(random.choices(alphabet, k=value_size)) for _ in range(operations)]
        # One character longer than any stored key, so never found
        self.missing = ["".join(random.choices(alphabet, k=key_size + 1)) for _ in range(operations)]

    def filled(self) -> AssociativeArray:
        pairs = AssociativeArray()
        for key, value in zip(self.keys, self.values):
            pairs.set(key, value)
        return pairs

    def _get_miss(self, pairs: AssociativeArray) -> None:
        for key in self.missing:
            try:
                pairs.get(key)
            except KeyError:
                pass

    def _mixed(self, pairs: AssociativeArray) -> None:
        # 50% get, 30% set, 20% remove
        ops = random.choices("gsr", weights=[50, 30, 20], k=self.operations)
        for op, key, value in zip(ops, self.keys, self.values):
            if op == "g":
                if pairs.has_key(key):
                    pairs.get(key)
            elif op == "s":
                pairs.set(key, value)
            else:
                pairs.remove(key)

    def cases(self) -> List[Tuple[str, Callable[[], Any], Callable[[Any], None], int]]:
        """(name, setup, run, count) for every benchmark."""
        n = self.operations
        return [
            ("SET (insert)", AssociativeArray,
             lambda p: [p.set(k, v) for k, v in zip(self.keys, self.values)], n),
            ("SET (update)", self.filled,
             lambda p: [p.set(k, v) for k, v in zip(self.keys, reversed(self.values))], n),
            ("GET (hit)", self.filled, lambda p: [p.get(k) for k in self.keys], n),
            ("GET (miss)", self.filled, self._get_miss, n),
            ("HAS_KEY (hit)", self.filled, lambda p: [p.has_key(k) for k in self.keys], n),
            ("HAS_KEY (miss)", self.filled, lambda p: [p.has_key(k) for k in self.missing], n),
            ("REMOVE", self.filled, lambda p: [p.remove(k) for k in self.keys], n),
            ("CLONE", self.filled, lambda p: [p.clone() for _ in range(CLONE_ROUNDS)], CLONE_ROUNDS),
            ("Mixed workload", self.filled, self._mixed, n),
        ]

    def run_all(self) -> List[Dict[str, Any]]:
        """Run every case once and collect its timing."""
        results = []
        for name, setup, run, count in self.cases():
            logger.debug("Starting benchmark %s", name)
            pairs = setup()
            start = time.perf_counter()
            run(pairs)
            elapsed = time.perf_counter() - start
            results.append({
                "operation": name,
                "count": count,
                "total_ms": elapsed * 1000,
                "ops_per_second": count / elapsed if elapsed > 0 else float("inf"),
            })
            print(f"Running: {name}... {results[-1]['ops_per_second']:,.0f} ops/sec")
        return results


def print_results(results: List[Dict[str, Any]]) -> None:
    print()
    print(f"{'Operation':<20} {'Count':>8} {'Ops/sec':>14} {'Total (ms)':>12}")
    print("-" * 57)
    for r in results:
        print(f"{r['operation']:<20} {r['count']:>8,} "
              f"{r['ops_per_second']:>14,.0f} {r['total_ms']:>12.1f}")


def setup_logging(debug: bool = False) -> None:
    """Configure logging based on debug flag."""
    level = logging.DEBUG if debug or settings.DEBUG else settings.LOG_LEVEL

    logging.basicConfig(
        level=level,
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        handlers=[
            logging.StreamHandler(sys.stdout),
        ]
    )


def main() -> None:
    parser = argparse.ArgumentParser(
        description="Benchmark the Assoc-Array container",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    parser.add_argument("--operations", "-n", type=int, default=2000,
                        help="Number of pairs stored and operations per benchmark")
    parser.add_argument("--key-size", type=int, default=16, help="Length of generated keys")
    parser.add_argument("--value-size", type=int, default=64, help="Length of generated values")
    parser.add_argument("--debug", action="store_true", help="Enable debug logging")
    args = parser.parse_args()

    setup_logging(debug=args.debug)
    logger.info("Benchmarking %d operations, default capacity %d",
                args.operations, settings.DEFAULT_CAPACITY)

    benchmark = Benchmark(args.operations, args.key_size, args.value_size)
    print_results(benchmark.run_all())


if __name__ == "__main__":
    main()
