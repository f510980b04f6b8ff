import random

import pytest

from searchlab.annealing import simulated_annealing, main
from searchlab.hillclimbing import SIZE, VALUE_LIMIT, evaluate, random_solution


@pytest.mark.parametrize("seed", [0, 1, 2, 99])
def test_energy_matches_returned_solution(seed):
    rng = random.Random(seed)
    start = random_solution(SIZE, rng)
    result, energy = simulated_annealing(start, rng)
    assert energy == float(evaluate(result))
    assert len(result) == SIZE
    assert all(0 <= value < VALUE_LIMIT for value in result)


def test_input_is_not_mutated():
    start = [10] * 20
    simulated_annealing(start, random.Random(4))
    assert start == [10] * 20


def test_deterministic_for_a_seed():
    start = random_solution(SIZE, random.Random(8))
    first = simulated_annealing(start, random.Random(21))
    second = simulated_annealing(start, random.Random(21))
    assert first == second


def test_cold_start_returns_input_unchanged():
    start = [1, 2, 3, 4]
    result, energy = simulated_annealing(
        start, random.Random(0), initial_temperature=0.01, min_temperature=0.01
    )
    assert result == start
    assert energy == float(evaluate(start))


@pytest.mark.parametrize("rate", [0.0, 1.0, 1.5, -0.2])
def test_invalid_cooling_rate_raises(rate):
    with pytest.raises(ValueError):
        simulated_annealing([1, 2, 3], random.Random(0), cooling_rate=rate)


def test_non_positive_min_temperature_raises():
    with pytest.raises(ValueError):
        simulated_annealing([1, 2, 3], random.Random(0), min_temperature=0.0)


def test_main_prints_energy_and_solution(capsys):
    assert main(["--seed", "3", "--size", "10"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Final energy (sum): ")
    values = [int(token) for token in lines[1].removeprefix("Final solution: ").split()]
    assert len(values) == 10
    assert float(lines[0].rsplit(" ", 1)[1]) == float(sum(values))