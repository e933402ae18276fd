#!/usr/bin/env python3
"""
Timing and Accuracy Benchmark for the Transform Kernels

This script measures, for every configured transform kind:
  1. Time per call (ms) for 1-D sequences and square 2-D matrices
  2. Max absolute error against scipy.fft

Usage:
    python experiments/benchmark/run_benchmark.py [--config CONFIG_PATH] [--output OUTPUT_DIR]
"""

import sys
import json
import argparse
import time
from pathlib import Path
from datetime import datetime
from typing import Callable, Dict, List
from dataclasses import dataclass, asdict
import yaml
import numpy as np
import scipy.fft

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

# Rich imports
from rich.console import Console
from rich.progress import (
    Progress,
    SpinnerColumn,
    TextColumn,
    BarColumn,
    TaskProgressColumn,
    TimeElapsedColumn,
)
from rich.table import Table
from rich.panel import Panel
from rich import box

# Project imports
from freqtrans.transforms import TransformKind, transform, transform2d
from freqtrans.transforms.config import DEFAULT_TOLERANCE
from freqtrans.utils.logging import BenchmarkLogger

console = Console()


@dataclass
class BenchmarkResult:
    """Timing and accuracy for one kind at one size."""
    kind: str
    shape: List[int]
    time_ms: float
    time_std_ms: float
    max_error: float
    passed: bool

    def to_dict(self) -> Dict:
        return asdict(self)


def hartley_reference(x: np.ndarray, axis: int = -1) -> np.ndarray:
    """Orthonormal DHT via FFT: (Re - Im) / sqrt(N)."""
    X = scipy.fft.fft(x, axis=axis)
    return (X.real - X.imag) / np.sqrt(x.shape[axis])


REFERENCES_1D: Dict[TransformKind, Callable] = {
    TransformKind.DFT: scipy.fft.fft,
    TransformKind.IDFT: scipy.fft.ifft,
    TransformKind.FFT: scipy.fft.fft,
    TransformKind.IFFT: scipy.fft.ifft,
    TransformKind.DHT: hartley_reference,
    TransformKind.FHT: hartley_reference,
}


def reference_2d(kind: TransformKind, m: np.ndarray) -> np.ndarray:
    """Conventional-layout 2-D reference: rows (axis 1) then columns (axis 0)."""
    if kind.is_hartley:
        return hartley_reference(hartley_reference(m, axis=1), axis=0)
    if kind.is_inverse:
        return scipy.fft.ifft2(m)
    return scipy.fft.fft2(m)


def random_input(rng: np.random.Generator, shape, kind: TransformKind) -> np.ndarray:
    """Real input for Hartley kinds, complex input otherwise."""
    x = rng.standard_normal(shape)
    if not kind.is_hartley:
        x = x + 1j * rng.standard_normal(shape)
    return x


def time_call(fn: Callable, repeats: int):
    """Mean and std of wall time (ms) over ``repeats`` calls, after one warm-up."""
    fn()
    times = []
    for _ in range(repeats):
        start = time.perf_counter()
        fn()
        times.append((time.perf_counter() - start) * 1000)
    return float(np.mean(times)), float(np.std(times))


def measure_1d(kind: TransformKind, n: int, rng, repeats: int, tolerance: float) -> BenchmarkResult:
    x = random_input(rng, n, kind)
    ours = transform(x, kind)
    error = float(np.abs(ours - REFERENCES_1D[kind](x)).max())
    mean_ms, std_ms = time_call(lambda: transform(x, kind), repeats)
    return BenchmarkResult(kind.value, [n], mean_ms, std_ms, error, error < tolerance)


def measure_2d(kind: TransformKind, n: int, rng, repeats: int, tolerance: float) -> BenchmarkResult:
    m = random_input(rng, (n, n), kind)
    ours = transform2d(m, kind, restore_layout=True)
    error = float(np.abs(ours - reference_2d(kind, m)).max())
    mean_ms, std_ms = time_call(lambda: transform2d(m, kind), repeats)
    return BenchmarkResult(f"{kind.value}2d", [n, n], mean_ms, std_ms, error, error < tolerance)


def load_config(config_path: str) -> Dict:
    """Load configuration."""
    with open(config_path, 'r') as f:
        return yaml.safe_load(f)


def display_results_table(results: List[BenchmarkResult]):
    """Display benchmark results."""
    table = Table(title="Transform Benchmark Results", box=box.ROUNDED)
    table.add_column("Kind", style="bold")
    table.add_column("Shape", justify="right")
    table.add_column("Time (ms)", justify="right")
    table.add_column("Max Error", justify="right")
    table.add_column("Status", justify="center")

    for r in results:
        status = "[green]✓[/green]" if r.passed else "[red]✗[/red]"
        table.add_row(
            r.kind,
            "x".join(str(s) for s in r.shape),
            f"{r.time_ms:.4f}±{r.time_std_ms:.4f}",
            f"{r.max_error:.2e}",
            status,
        )

    console.print(table)


def run_benchmark(config_path: str, output_dir: Path) -> List[BenchmarkResult]:
    """Run the benchmark described by a YAML config."""
    config = load_config(config_path)

    output_dir.mkdir(parents=True, exist_ok=True)
    logger = BenchmarkLogger('benchmark', log_dir=str(output_dir))
    logger.log_config(config)

    rng = np.random.default_rng(config.get('seed', 0))
    repeats = config.get('repeats', 20)
    tolerance = config.get('tolerance', DEFAULT_TOLERANCE)
    max_direct = config.get('max_direct_size', 1024)
    kinds = [TransformKind.parse(k) for k in config.get('kinds', [k.value for k in TransformKind])]

    jobs = []
    for kind in kinds:
        direct = kind in (TransformKind.DFT, TransformKind.IDFT, TransformKind.DHT)
        for n in config.get('sizes', []):
            if direct and n > max_direct:
                logger.info(f"Skipping {kind.value} N={n} (direct kernel above {max_direct})")
                continue
            jobs.append((measure_1d, kind, n))
        for n in config.get('matrix_sizes', []):
            jobs.append((measure_2d, kind, n))

    console.print(Panel.fit(
        "[bold blue]Transform Benchmark[/bold blue]\n"
        f"Kinds: {', '.join(k.value for k in kinds)}",
        border_style="blue"
    ))

    results = []
    with Progress(
        SpinnerColumn(),
        TextColumn("[bold blue]{task.description}"),
        BarColumn(bar_width=30),
        TaskProgressColumn(),
        TimeElapsedColumn(),
        console=console,
    ) as progress:
        task = progress.add_task("[cyan]Measuring", total=len(jobs))

        for measure, kind, n in jobs:
            progress.update(task, description=f"[cyan]Measuring {kind.value} N={n}")
            result = measure(kind, n, rng, repeats, tolerance)
            logger.log_result(result.kind, tuple(result.shape), result.time_ms, result.max_error, result.passed)
            results.append(result)
            progress.update(task, advance=1)

    console.print("\n")
    display_results_table(results)

    results_dict = {
        'timestamp': datetime.now().isoformat(),
        'tolerance': tolerance,
        'repeats': repeats,
        'results': [r.to_dict() for r in results],
    }
    with open(output_dir / 'timing.json', 'w') as f:
        json.dump(results_dict, f, indent=2)

    console.print(f"\n[green]✓[/green] Results saved to {output_dir}")
    return results


def main():
    parser = argparse.ArgumentParser(description="Transform Benchmark")
    parser.add_argument(
        '--config',
        type=str,
        default=str(PROJECT_ROOT / 'experiments' / 'benchmark' / 'configs' / 'default.yaml'),
        help='Path to configuration file'
    )
    parser.add_argument(
        '--output',
        type=str,
        default=None,
        help='Output directory'
    )
    args = parser.parse_args()

    if args.output:
        output_dir = Path(args.output)
    else:
        timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
        output_dir = PROJECT_ROOT / 'experiments' / 'benchmark' / 'results' / timestamp

    results = run_benchmark(args.config, output_dir)
    failed = [r for r in results if not r.passed]
    if failed:
        console.print(f"[bold red]{len(failed)} measurement(s) exceeded tolerance[/bold red]")
        sys.exit(1)
    console.print(Panel.fit(
        "[bold green]Benchmark completed![/bold green]",
        border_style="green"
    ))


if __name__ == '__main__':
    main()
