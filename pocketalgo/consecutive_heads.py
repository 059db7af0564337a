"""Flip a coin until three heads come up in a row."""

from __future__ import annotations

import itertools
import random
import sys
from collections import Counter
from typing import Iterable, Iterator, Protocol, Sequence

MAX_FLIPS = 0xFFFF
BENCHMARK_MAX_FLIPS = 0xFFFFFFFF
BENCH_LIMIT = 1 << 25
_RANDOM_BITS = 16
_STREAK = 3


class _BitSource(Protocol):
    def getrandbits(self, k: int) -> int: ...


def flips(rng: _BitSource | None = None) -> Iterator[bool]:
    """Yield coin flips forever, True for heads.

    Sixteen random bits are drawn at a time and used lowest bit first.
    """
    source = random if rng is None else rng
    while True:
        bits = source.getrandbits(_RANDOM_BITS)
        for _ in range(_RANDOM_BITS):
            yield bool(bits & 1)
            bits >>= 1


def _first_streak(outcomes: Iterable[bool], limit: int) -> int | None:
    streak = 0
    for count, heads in enumerate(itertools.islice(outcomes, limit), 1):
        streak = streak + 1 if heads else 0
        if streak == _STREAK:
            return count
    return None


def count_flips(rng: _BitSource | None = None) -> int | None:
    """Return how many flips it took to get three heads in a row.

    Returns None when 65535 flips were not enough.
    """
    return _first_streak(flips(rng), MAX_FLIPS)


def benchmark(rng: _BitSource | None = None, runs: int = BENCH_LIMIT) -> Counter[int]:
    """Tally how many flips each of ``runs`` experiments needed.

    An experiment that gives up after the flip limit is tallied under 0.
    """
    return Counter(
        _first_streak(flips(rng), BENCHMARK_MAX_FLIPS) or 0 for _ in range(runs)
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Run one experiment, or ``--benchmark [RUNS]`` to tally many."""
    args = list(sys.argv[1:] if argv is None else argv)
    rng = random.Random()
    out = sys.stdout

    if args and args[0] == "--benchmark":
        runs = int(args[1]) if len(args) > 1 else BENCH_LIMIT
        for needed, times in sorted(benchmark(rng, runs).items()):
            out.write(f"{needed} {times}\n")
        out.write(f"{runs} simulated\n")
        return 0

    def echoed() -> Iterator[bool]:
        for heads in flips(rng):
            out.write("heads\n" if heads else "tails\n")
            yield heads

    count = _first_streak(echoed(), MAX_FLIPS)
    if count is None:
        out.write(f"Fascinating, {MAX_FLIPS} flips was not enough!\n")
    else:
        out.write(f"It took {count} flips to get 3 consecutive heads.\n")
    return 0


if __name__ == "__main__":
    sys.exit(main())