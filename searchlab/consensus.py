"""Consensus of DNA sequences by column majority and by hill climbing."""

from __future__ import annotations

import argparse
import random
from collections import Counter
from collections.abc import Sequence

BASES = "ACGT"
ITERATIONS = 1000
SEQUENCES = (
    "ACGTACGT",
    "ACTTACGG",
    "ATGTACCT",
)


def hamming(a: str, b: str) -> int:
    """Number of positions at which two equal-length sequences differ."""
    if len(a) != len(b):
        raise ValueError("sequences must have the same length")
    return sum(x != y for x, y in zip(a, b))


def score(candidate: str, sequences: Sequence[str] = SEQUENCES) -> int:
    """Total Hamming distance from ``candidate`` to every sequence."""
    return sum(hamming(candidate, sequence) for sequence in sequences)


def _length(sequences: Sequence[str]) -> int:
    if not sequences:
        raise ValueError("at least one sequence is required")
    length = len(sequences[0])
    if any(len(sequence) != length for sequence in sequences):
        raise ValueError("sequences must have the same length")
    return length


def majority_consensus(sequences: Sequence[str] = SEQUENCES) -> str:
    """Pick the most common base in each column; ties go to the earlier of ACGT."""
    _length(sequences)
    result = []
    for column in zip(*sequences):
        counts = Counter(column)
        result.append(max(BASES, key=lambda base: counts[base]))
    return "".join(result)


def neighbor(sequence: str, rng: random.Random | None = None) -> str:
    """Change one random position of ``sequence`` to a different base."""
    if not sequence:
        raise ValueError("cannot build a neighbor of an empty sequence")
    rng = rng or random.Random()
    position = rng.randrange(len(sequence))
    choices = [base for base in BASES if base != sequence[position]]
    return sequence[:position] + rng.choice(choices) + sequence[position + 1 :]


def hill_climb_consensus(
    sequences: Sequence[str] = SEQUENCES,
    rng: random.Random | None = None,
    iterations: int = ITERATIONS,
) -> str:
    """Improve a random sequence by single-base changes for ``iterations`` steps."""
    length = _length(sequences)
    if length == 0:
        raise ValueError("sequences must not be empty")
    if iterations < 0:
        raise ValueError("iterations must not be negative")
    rng = rng or random.Random()

    current = "".join(rng.choice(BASES) for _ in range(length))
    current_score = score(current, sequences)
    for _ in range(iterations):
        candidate = neighbor(current, rng)
        candidate_score = score(candidate, sequences)
        if candidate_score < current_score:
            current, current_score = candidate, candidate_score
    return current


def main(argv: Sequence[str] | None = None) -> int:
    """Print the sequences and both consensus results with their scores."""
    parser = argparse.ArgumentParser(description="Consensus of DNA sequences.")
    parser.add_argument("sequences", nargs="*", help="sequences of equal length")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    parser.add_argument("--iterations", type=int, default=ITERATIONS)
    args = parser.parse_args(argv)

    sequences = [s.upper() for s in args.sequences] or list(SEQUENCES)
    rng = random.Random(args.seed)
    try:
        majority = majority_consensus(sequences)
        climbed = hill_climb_consensus(sequences, rng, args.iterations)
    except ValueError as error:
        parser.error(str(error))

    print("Sequences:")
    for sequence in sequences:
        print(sequence)
    print()
    print(f"Majority consensus:    {majority} (score: {score(majority, sequences)})")
    print(f"Hill climb consensus:  {climbed} (score: {score(climbed, sequences)})")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())