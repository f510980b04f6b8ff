import random

import pytest

from searchlab.hillclimbing import (
    SIZE,
    VALUE_LIMIT,
    evaluate,
    hill_climb,
    main,
    neighbor,
    random_solution,
)


def test_evaluate_is_sum():
    assert evaluate([1, 2, 3]) == 6
    assert evaluate([]) == 0


def test_random_solution_shape_and_range():
    solution = random_solution(SIZE, random.Random(1))
    assert len(solution) == SIZE
    assert all(0 <= value < VALUE_LIMIT for value in solution)


def test_random_solution_rejects_negative_size():
    with pytest.raises(ValueError):
        random_solution(-1, random.Random(0))


def test_neighbor_changes_at_most_one_position():
    rng = random.Random(7)
    original = random_solution(SIZE, rng)
    snapshot = list(original)
    for _ in range(50):
        candidate = neighbor(original, rng)
        assert len(candidate) == len(original)
        differences = [a != b for a, b in zip(candidate, original)]
        assert sum(differences) <= 1
        assert all(0 <= value < VALUE_LIMIT for value in candidate)
    assert original == snapshot


def test_neighbor_of_empty_solution_raises():
    with pytest.raises(ValueError):
        neighbor([], random.Random(0))


@pytest.mark.parametrize("seed", [0, 1, 2, 3, 42])
def test_hill_climb_never_gets_worse(seed):
    rng = random.Random(seed)
    start = random_solution(SIZE, rng)
    result, value = hill_climb(start, rng)
    assert value >= evaluate(start)
    assert value == evaluate(result)
    assert len(result) == len(start)


def test_hill_climb_does_not_mutate_input():
    start = [5] * 10
    hill_climb(start, random.Random(3))
    assert start == [5] * 10


def test_hill_climb_is_deterministic_for_a_seed():
    start = random_solution(SIZE, random.Random(9))
    first = hill_climb(start, random.Random(11))
    second = hill_climb(start, random.Random(11))
    assert first == second


def test_main_prints_final_value(capsys):
    assert main(["--seed", "5"]) == 0
    out = capsys.readouterr().out
    assert out.startswith("Final value (sum of elements): ")
    value = int(out.strip().rsplit(" ", 1)[1])
    assert 0 <= value <= SIZE * (VALUE_LIMIT - 1)