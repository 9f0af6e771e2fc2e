#!/usr/bin/env python3
"""
Vigil Performance Benchmarks

Measures how notification cost scales for the observable containers and the
bulk list algorithms, and prints the results as rich tables.

Usage:
    python scripts/benchmark.py            # Run all benchmarks
    python scripts/benchmark.py --config   # Show current benchmark configuration
    python scripts/benchmark.py --quiet    # Only show the final table

Configuration:
    Adjust the constants at the top of the file to change benchmark parameters.
"""

import argparse
import gc
import time
import tracemalloc
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import numpy as np
from rich.align import Align
from rich.console import Console
from rich.panel import Panel
from rich.table import Table, box

from vigil import (
    WeakListener,
    algorithms,
    observable_array_list,
    observable_list,
    observable_map,
    unmodifiable_observable_list,
)

# Configuration constants - adjust these to change benchmark behavior
TIME_LIMIT_SECONDS = 0.5  # Stop scaling once one run takes this long
STARTING_N = 10
SCALE_FACTOR = 2.0


class CountingObserver:
    """Observer that only counts list and map notifications."""

    def __init__(self):
        self.count = 0

    def list_elements_added(self, source, index, count):
        self.count += 1

    def list_elements_removed(self, source, index, removed_elements):
        self.count += 1

    def list_element_replaced(self, source, index, old_element):
        self.count += 1

    def map_key_added(self, source, key):
        self.count += 1

    def map_key_value_changed(self, source, key, old_value):
        self.count += 1


@dataclass
class BenchmarkResult:
    max_n: int
    operation_time: float
    operations_per_second: float
    notifications: int
    peak_memory_kb: int = 0


# ============================================================================
# WORKLOADS
# Each takes a size and returns (operations performed, notifications received)
# ============================================================================


def _fanout(n: int):
    """One append delivered to ``n`` observers."""
    lst = observable_array_list()
    observers = [CountingObserver() for _ in range(n)]
    for observer in observers:
        lst.add_observer(observer)
    lst.append(0)
    return n, sum(observer.count for observer in observers)


def _appends(n: int):
    """``n`` appends with one observer attached."""
    lst = observable_array_list()
    observer = CountingObserver()
    lst.add_observer(observer)
    for i in range(n):
        lst.append(i)
    return n, observer.count


def _weak_fanout(n: int):
    """One append delivered through ``n`` weak subscriptions."""
    lst = observable_array_list()
    observers = [CountingObserver() for _ in range(n)]
    for observer in observers:
        lst.add_observer(WeakListener(observer))
    lst.append(0)
    return n, sum(observer.count for observer in observers)


def _view_relay(n: int):
    """``n`` appends relayed through an unmodifiable view."""
    inner = observable_array_list()
    view = unmodifiable_observable_list(inner)
    observer = CountingObserver()
    view.add_observer(observer)
    for i in range(n):
        inner.append(i)
    return n, observer.count


def _sort(n: int):
    """Full-replace sort of ``n`` random elements."""
    rng = np.random.default_rng(0)
    lst = observable_list(rng.integers(0, n, size=n).tolist())
    observer = CountingObserver()
    lst.add_observer(observer)
    algorithms.sort(lst)
    return n, observer.count


def _shuffle(n: int):
    """Positional shuffle of ``n`` elements."""
    lst = observable_list(list(range(n)))
    observer = CountingObserver()
    lst.add_observer(observer)
    algorithms.shuffle(lst, np.random.default_rng(0))
    return n, observer.count


def _map_puts(n: int):
    """``n`` inserts followed by ``n`` rebinds on an observable map."""
    m = observable_map({})
    observer = CountingObserver()
    m.add_observer(observer)
    for i in range(n):
        m[i] = i
    for i in range(n):
        m[i] = -i
    return 2 * n, observer.count


BENCHMARKS: Dict[str, Callable[[int], tuple]] = {
    "Observer fan-out": _fanout,
    "Weak fan-out": _weak_fanout,
    "Appends": _appends,
    "View relay": _view_relay,
    "Sort (full replace)": _sort,
    "Shuffle (positional)": _shuffle,
    "Map puts": _map_puts,
}


def scale_benchmark(workload: Callable[[int], tuple]) -> BenchmarkResult:
    """Grow ``n`` until one run of ``workload`` reaches the time limit."""
    n = STARTING_N
    best: Optional[BenchmarkResult] = None
    while True:
        gc.collect()
        start_time = time.perf_counter()
        operations, notifications = workload(n)
        operation_time = time.perf_counter() - start_time

        best = BenchmarkResult(
            max_n=n,
            operation_time=operation_time,
            operations_per_second=operations / operation_time if operation_time else 0.0,
            notifications=notifications,
        )
        if operation_time >= TIME_LIMIT_SECONDS:
            return best
        n = int(n * SCALE_FACTOR)


def measure_peak_memory(workload: Callable[[int], tuple], n: int) -> int:
    """Peak traced memory in KiB for one run of ``workload``."""
    gc.collect()
    tracemalloc.start()
    try:
        workload(n)
        _, peak = tracemalloc.get_traced_memory()
    finally:
        tracemalloc.stop()
    return peak // 1024


class VigilBenchmark:
    """Rich-formatted display for Vigil benchmarks."""

    def __init__(self, quiet: bool = False):
        self.console = Console()
        self.quiet = quiet
        self.results: Dict[str, BenchmarkResult] = {}

    def run_benchmarks(self):
        start_time = time.time()
        self._display_header()

        for name, workload in BENCHMARKS.items():
            if not self.quiet:
                self.console.print(f"[yellow]Running {name}...[/yellow]")
            result = scale_benchmark(workload)
            result.peak_memory_kb = measure_peak_memory(workload, result.max_n)
            self.results[name] = result
            if not self.quiet:
                self.console.print(
                    f"[green]✓[/green] {name}: {result.operations_per_second:,.0f} ops/sec "
                    f"({result.max_n} items)"
                )

        self._display_final_results(start_time)

    def _display_header(self):
        header = Panel(
            Align.center("Vigil Observable Containers Benchmark"),
            title="Vigil Benchmarks",
            border_style="blue",
        )
        self.console.print(header)
        self.console.print()

    def _display_final_results(self, start_time: float):
        elapsed = time.time() - start_time

        table = Table(
            title="Final Benchmark Results",
            box=box.DOUBLE,
            show_header=True,
            header_style="bold cyan",
        )
        table.add_column("Benchmark", style="cyan", no_wrap=True)
        table.add_column("Max Workload", style="magenta", justify="right")
        table.add_column("Performance", style="green", justify="right")
        table.add_column("Notifications", style="yellow", justify="right")
        table.add_column("Peak Memory", style="white", justify="right")

        for name, result in self.results.items():
            table.add_row(
                name,
                f"{result.max_n:,}",
                f"{result.operations_per_second / 1000:.1f}K ops/sec",
                f"{result.notifications:,}",
                f"{result.peak_memory_kb:,} KiB",
            )

        self.console.print()
        self.console.print(table)
        self.console.print()
        self.console.print(f"[dim]Benchmark completed in {elapsed:.2f} seconds[/dim]")


def print_config():
    """Print the current benchmark configuration."""
    print("Vigil Benchmark Configuration:")
    print(f"  TIME_LIMIT_SECONDS: {TIME_LIMIT_SECONDS}")
    print(f"  STARTING_N: {STARTING_N}")
    print(f"  SCALE_FACTOR: {SCALE_FACTOR}")


def main():
    parser = argparse.ArgumentParser(description="Vigil Performance Benchmarks")
    parser.add_argument(
        "--config", action="store_true", help="Show current benchmark configuration"
    )
    parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress progress output, show only final results",
    )
    args = parser.parse_args()

    if args.config:
        print_config()
        return

    if not args.quiet:
        print_config()
        print()

    VigilBenchmark(quiet=args.quiet).run_benchmarks()


if __name__ == "__main__":
    main()
