"""Hill climbing over a vector of integers whose score is the sum of its elements."""

from __future__ import annotations

import argparse
import random
from collections.abc import Sequence

SIZE = 100
VALUE_LIMIT = 100


def evaluate(solution: Sequence[int]) -> int:
    """Score a solution: the larger the sum of its elements, the better."""
    return sum(solution)


def random_solution(size: int = SIZE, rng: random.Random | None = None) -> list[int]:
    """Build a solution of ``size`` values drawn from ``0..VALUE_LIMIT-1``."""
    if size < 0:
        raise ValueError("size must not be negative")
    rng = rng or random.Random()
    return [rng.randrange(VALUE_LIMIT) for _ in range(size)]


def neighbor(solution: Sequence[int], rng: random.Random | None = None) -> list[int]:
    """Return a copy of ``solution`` with one random position given a new random value."""
    if not solution:
        raise ValueError("cannot build a neighbor of an empty solution")
    rng = rng or random.Random()
    candidate = list(solution)
    candidate[rng.randrange(len(candidate))] = rng.randrange(VALUE_LIMIT)
    return candidate


def hill_climb(
    solution: Sequence[int], rng: random.Random | None = None
) -> tuple[list[int], int]:
    """Climb from ``solution`` until a generated neighbor fails to improve it.

    Returns the final solution and its score.
    """
    rng = rng or random.Random()
    current = list(solution)
    current_value = evaluate(current)
    while True:
        candidate = neighbor(current, rng)
        candidate_value = evaluate(candidate)
        if candidate_value <= current_value:
            return current, current_value
        current, current_value = candidate, candidate_value


def main(argv: Sequence[str] | None = None) -> int:
    """Run hill climbing from a random start and print the final score."""
    parser = argparse.ArgumentParser(description="Hill climbing on the sum of a vector.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--size", type=int, default=SIZE, help="length of the vector")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    start = random_solution(args.size, rng)
    _, value = hill_climb(start, rng)
    print(f"Final value (sum of elements): {value}")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())