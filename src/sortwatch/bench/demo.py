"""
Staged demo: time every algorithm on a freshly shuffled sequence.

Usage:
    python -m sortwatch.bench.demo --size 50 --show --delay 0.01

Stages:
    1. optional countdown while the ascending sequence 1..size is shown
    2. for each algorithm: show the sequence, shuffle it (seeded), sort it
       under `benchmark`, report the elapsed time in seconds and minutes

With --show every notification is drawn by a BarRenderer, so the sort runs at
the renderer's pace; without it the algorithms run with the no-op observer.
"""

from __future__ import annotations

import argparse
import logging
import time
from dataclasses import dataclass
from typing import List, Optional

import numpy as np
from rich.console import Console

from sortwatch.algorithms import ALGORITHMS, get_algorithm
from sortwatch.bench.measure import benchmark
from sortwatch.datasets import ascending, shuffled
from sortwatch.handle import Range
from sortwatch.log import configure_logging
from sortwatch.observe import BarRenderer, CountingObserver, broadcast, every_nth

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StageResult:
    algo: str
    size: int
    elapsed_ns: int
    notifications: int

    @property
    def seconds(self) -> float:
        return self.elapsed_ns / 1e9

    @property
    def minutes(self) -> float:
        return self.seconds / 60.0


def run_demo(
    algorithms: List[str],
    *,
    size: int,
    seed: Optional[int],
    console: Console,
    show: bool = False,
    delay: float = 0.0,
    frame_every: int = 1,
    countdown: int = 0,
    pause: float = 0.0,
) -> List[StageResult]:
    """Run each named algorithm once on a shuffled 1..size sequence."""
    if size < 1:
        raise ValueError("size must be >= 1")
    sorts = [(name, get_algorithm(name)) for name in algorithms]

    rng = np.random.default_rng(seed)
    data = ascending(size)
    renderer = BarRenderer(console, max_value=size, delay=delay) if show else None

    def _show() -> None:
        if renderer is not None:
            renderer(data, Range(0, len(data)))

    if countdown > 0:
        console.print("starting in ", end="")
        for remaining in range(countdown, 0, -1):
            console.print(f"{remaining} ", end="")
            _show()
            time.sleep(pause)
        console.print("now")

    results: List[StageResult] = []
    for name, sort_fn in sorts:
        console.print(f"\n[bold]performing {name} on {size} elements...[/bold]")
        _show()
        time.sleep(pause)
        data = shuffled(data, rng)
        time.sleep(pause)

        counter = CountingObserver()
        observer = counter
        if renderer is not None:
            observer = broadcast(counter, every_nth(renderer, frame_every))

        elapsed_ns = benchmark(lambda: sort_fn(data, observer))
        result = StageResult(name, size, elapsed_ns, counter.count)
        results.append(result)
        logger.debug("%s: %d notifications, %d ns", name, counter.count, elapsed_ns)

        console.print(
            f"finished {name} in {result.seconds:.6f} seconds or {result.minutes:.6f} minutes"
        )
        time.sleep(pause)

    return results


def _parse_args(argv: Optional[List[str]] = None) -> argparse.Namespace:
    p = argparse.ArgumentParser(description="Shuffle, sort and time each algorithm in turn.")
    p.add_argument("--size", type=int, default=50, help="Number of elements (default: 50)")
    p.add_argument("--seed", type=int, default=None, help="Shuffle seed (default: fresh entropy)")
    p.add_argument(
        "--algorithms",
        nargs="+",
        default=list(ALGORITHMS),
        choices=list(ALGORITHMS),
        help="Algorithms to run, in order (default: all)",
    )
    p.add_argument("--show", action="store_true", help="Draw every observed state as terminal bars")
    p.add_argument("--delay", type=float, default=0.0, help="Seconds to hold each drawn frame")
    p.add_argument("--frame-every", type=int, default=1, help="Draw only every n-th notification")
    p.add_argument("--countdown", type=int, default=3, help="Countdown seconds before the first stage")
    p.add_argument("--pause", type=float, default=1.0, help="Seconds to pause between stage steps")
    p.add_argument("--log-level", default="WARNING", help="Logging level (default: WARNING)")
    return p.parse_args(argv)


def main(argv: Optional[List[str]] = None) -> None:
    args = _parse_args(argv)
    console = Console()
    configure_logging(args.log_level, console=console)
    run_demo(
        args.algorithms,
        size=args.size,
        seed=args.seed,
        console=console,
        show=args.show,
        delay=args.delay,
        frame_every=args.frame_every,
        countdown=args.countdown,
        pause=args.pause,
    )


if __name__ == "__main__":
    main()
