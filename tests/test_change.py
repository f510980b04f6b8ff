import pytest

from searchlab.change import (
    BRAZILIAN_COINS,
    COUNTEREXAMPLE_COINS,
    compare,
    greedy_change,
    main,
    optimal_change,
)


def test_counterexample_greedy_is_worse():
    assert greedy_change(COUNTEREXAMPLE_COINS, 6) == 3
    assert optimal_change(COUNTEREXAMPLE_COINS, 6) == 2


def test_brazilian_coins_greedy_is_optimal_for_370():
    greedy = greedy_change(BRAZILIAN_COINS, 370)
    assert greedy is not None
    assert greedy == optimal_change(BRAZILIAN_COINS, 370)


def test_greedy_ignores_input_order():
    assert greedy_change([1, 3, 4], 6) == greedy_change([4, 3, 1], 6)


def test_zero_amount_needs_no_coins():
    assert greedy_change(BRAZILIAN_COINS, 0) == 0
    assert optimal_change(BRAZILIAN_COINS, 0) == 0


def test_impossible_amount_gives_none():
    assert greedy_change([5], 3) is None
    assert optimal_change([5], 3) is None
    assert optimal_change(BRAZILIAN_COINS, 372) is None


@pytest.mark.parametrize("amount", range(0, 60))
def test_optimal_never_exceeds_greedy(amount):
    greedy = greedy_change(COUNTEREXAMPLE_COINS, amount)
    optimal = optimal_change(COUNTEREXAMPLE_COINS, amount)
    assert greedy is not None and optimal is not None
    assert optimal <= greedy
    assert optimal * max(COUNTEREXAMPLE_COINS) >= amount


@pytest.mark.parametrize(
    "coins, amount", [([0, 1], 5), ([-1, 2], 4), ([1, 2], -1)]
)
def test_invalid_input_raises(coins, amount):
    with pytest.raises(ValueError):
        greedy_change(coins, amount)
    with pytest.raises(ValueError):
        optimal_change(coins, amount)


def test_compare_report():
    report = compare([1, 3, 4], 6).splitlines()
    assert report == [
        "Coins: 4 3 1",
        "Amount: 6",
        "Greedy: 3 coins.",
        "Dynamic (optimal): 2 coins.",
    ]


def test_compare_reports_missing_solution():
    report = compare([5], 3)
    assert "Greedy: no exact solution found." in report
    assert "Dynamic (optimal): no exact solution found." in report


def test_main_runs_built_in_examples(capsys):
    assert main([]) == 0
    out = capsys.readouterr().out
    assert "Amount: 370" in out
    assert "Amount: 6" in out
    assert "Dynamic (optimal): 2 coins." in out


def test_main_with_arguments(capsys):
    assert main(["6", "4", "3", "1"]) == 0
    assert "Greedy: 3 coins." in capsys.readouterr().out


def test_main_rejects_amount_without_coins():
    with pytest.raises(SystemExit):
        main(["6"])