"""Staircase step-counting solvers with profiling helpers.

A child is running up a staircase with ``n`` steps and can hop 1, 2 or 3 steps
at a time.  The module counts how many distinct ways the child can reach the
top using two strategies:

* ``stair_combinations_brute`` – plain recursion, roughly ``O(3^n)``.
* ``stair_combinations_memoized`` – the same recurrence backed by a list cache
  seeded with the known small cases, ``O(n)``.
* ``profile_algorithms`` – runs both solvers, asserts result parity and captures
  their runtime.
* ``main`` – CLI entry point printing the comparison.
"""

from __future__ import annotations

from dataclasses import dataclass
import argparse
import logging
import time
from typing import Callable, List, Sequence, Tuple

logger = logging.getLogger(__name__)

# Ways to climb 0, 1, 2 and 3 steps.
_BASE_CASES: Tuple[int, ...] = (0, 1, 2, 4)


class StaircaseInputError(ValueError):
    """Raised when the requested step count is invalid."""


@dataclass(frozen=True)
class AlgorithmProfile:
    """Profiling information captured for a staircase solver run."""

    name: str
    steps: int
    result: int
    time_seconds: float

    def describe(self) -> str:
        return (
            f"{self.name}: steps={self.steps} ways={self.result} "
            f"time={self.time_seconds:.6f}s"
        )


def _validate_steps(steps: int) -> None:
    if not isinstance(steps, int) or isinstance(steps, bool):
        raise TypeError("steps must be an integer")
    if steps < 0:
        raise StaircaseInputError("steps must be non-negative")


def stair_combinations_brute(steps: int) -> int:
    """Count the hop combinations for *steps* using exhaustive recursion."""

    _validate_steps(steps)
    return _count_brute(steps)


def _count_brute(remaining: int) -> int:
    if remaining < len(_BASE_CASES):
        return _BASE_CASES[remaining]
    return (
        _count_brute(remaining - 3)
        + _count_brute(remaining - 2)
        + _count_brute(remaining - 1)
    )


def stair_combinations_memoized(steps: int) -> int:
    """Count the hop combinations for *steps* reusing previously solved counts."""

    _validate_steps(steps)
    memo: List[int] = [0] * max(steps + 1, len(_BASE_CASES))
    memo[: len(_BASE_CASES)] = _BASE_CASES
    return _count_memoized(steps, memo)


def _count_memoized(remaining: int, memo: List[int]) -> int:
    if remaining == 0:
        return 0
    if memo[remaining] == 0:
        memo[remaining] = (
            _count_memoized(remaining - 3, memo)
            + _count_memoized(remaining - 2, memo)
            + _count_memoized(remaining - 1, memo)
        )
    return memo[remaining]


def profile_algorithms(steps: int) -> Tuple[AlgorithmProfile, AlgorithmProfile]:
    """Run both solvers for *steps* and return their metrics.

    Raises
    ------
    AssertionError
        If the solvers disagree.
    """

    _validate_steps(steps)

    def _run(name: str, func: Callable[[int], int]) -> AlgorithmProfile:
        start = time.perf_counter()
        result = func(steps)
        elapsed = time.perf_counter() - start
        logger.debug("%s solved %d steps in %.6fs", name, steps, elapsed)
        return AlgorithmProfile(
            name=name, steps=steps, result=result, time_seconds=elapsed
        )

    brute = _run("brute", stair_combinations_brute)
    memoized = _run("memoized", stair_combinations_memoized)
    if brute.result != memoized.result:
        raise AssertionError(
            "Staircase implementations produced divergent results: "
            f"brute={brute.result}, memoized={memoized.result}"
        )
    return brute, memoized


def main(argv: Sequence[str] | None = None) -> int:
    """CLI entry point comparing the brute-force and memoised solvers."""

    parser = argparse.ArgumentParser(description=__doc__)
    parser.add_argument(
        "--steps",
        type=int,
        default=20,
        help="Number of stairs to climb (default: 20)",
    )
    parser.add_argument(
        "--log-level",
        default="WARNING",
        choices=["CRITICAL", "ERROR", "WARNING", "INFO", "DEBUG"],
        help="Logging verbosity for diagnostic output.",
    )
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level))

    try:
        profiles = profile_algorithms(args.steps)
    except (StaircaseInputError, AssertionError) as exc:
        logger.error("Failed to profile staircase solvers: %s", exc)
        return 1

    for profile in profiles:
        print(profile.describe())
    return 0


__all__ = [
    "AlgorithmProfile",
    "StaircaseInputError",
    "main",
    "profile_algorithms",
    "stair_combinations_brute",
    "stair_combinations_memoized",
]


if __name__ == "__main__":  # pragma: no cover - CLI entry
    raise SystemExit(main())
