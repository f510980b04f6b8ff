"""Simulated annealing over a vector of integers whose energy is its sum."""

from __future__ import annotations

import argparse
import math
import random
from collections.abc import Sequence

from searchlab.hillclimbing import SIZE, evaluate, neighbor, random_solution

INITIAL_TEMPERATURE = 1000.0
MIN_TEMPERATURE = 0.01
COOLING_RATE = 0.95


def simulated_annealing(
    solution: Sequence[int],
    rng: random.Random | None = None,
    initial_temperature: float = INITIAL_TEMPERATURE,
    min_temperature: float = MIN_TEMPERATURE,
    cooling_rate: float = COOLING_RATE,
) -> tuple[list[int], float]:
    """Anneal ``solution`` towards a larger sum.

    A better neighbor is always taken; a worse or equal one is taken with
    probability ``exp(delta / temperature)``. The temperature is multiplied
    by ``cooling_rate`` each step until it falls to ``min_temperature``.
    Returns the final solution and its energy.
    """
    if not 0 < cooling_rate < 1:
        raise ValueError("cooling_rate must lie strictly between 0 and 1")
    if min_temperature <= 0:
        raise ValueError("min_temperature must be positive")
    rng = rng or random.Random()

    current = list(solution)
    energy = float(evaluate(current))
    temperature = initial_temperature

    while temperature > min_temperature:
        candidate = neighbor(current, rng)
        candidate_energy = float(evaluate(candidate))
        if candidate_energy > energy:
            current, energy = candidate, candidate_energy
        else:
            probability = math.exp((candidate_energy - energy) / temperature)
            if rng.random() < probability:
                current, energy = candidate, candidate_energy
        temperature *= cooling_rate

    return current, energy


def main(argv: Sequence[str] | None = None) -> int:
    """Anneal a random vector and print its final energy and contents."""
    parser = argparse.ArgumentParser(description="Simulated annealing on the sum of a vector.")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--size", type=int, default=SIZE, help="length of the vector")
    args = parser.parse_args(argv)

    rng = random.Random(args.seed)
    start = random_solution(args.size, rng)
    result, energy = simulated_annealing(start, rng)
    print(f"Final energy (sum): {energy:.2f}")
    print("Final solution: " + "".join(f"{value} " for value in result))
    return 0


if __name__ == "__main__":
    raise SystemExit(main())