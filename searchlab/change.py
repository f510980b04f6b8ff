"""Coin change: the greedy method against the exact dynamic-programming one."""

from __future__ import annotations

import argparse
from collections.abc import Sequence

BRAZILIAN_COINS = (100, 50, 25, 10, 5)
COUNTEREXAMPLE_COINS = (4, 3, 1)


def _check(coins: Sequence[int], amount: int) -> None:
    if any(coin <= 0 for coin in coins):
        raise ValueError("coin values must be positive")
    if amount < 0:
        raise ValueError("amount must not be negative")


def greedy_change(coins: Sequence[int], amount: int) -> int | None:
    """Count coins taken largest first; ``None`` when no exact change results."""
    _check(coins, amount)
    count = 0
    for coin in sorted(coins, reverse=True):
        taken, amount = divmod(amount, coin)
        count += taken
    return count if amount == 0 else None


def optimal_change(coins: Sequence[int], amount: int) -> int | None:
    """Fewest coins summing to ``amount``; ``None`` when it cannot be made."""
    _check(coins, amount)
    best: list[int | None] = [0] + [None] * amount
    for value in range(1, amount + 1):
        options = [
            best[value - coin] + 1
            for coin in coins
            if coin <= value and best[value - coin] is not None
        ]
        best[value] = min(options, default=None)
    return best[amount]


def compare(coins: Sequence[int], amount: int) -> str:
    """Describe the greedy and optimal results for one amount."""
    ordered = sorted(coins, reverse=True)
    greedy = greedy_change(ordered, amount)
    optimal = optimal_change(ordered, amount)
    greedy_text = "no exact solution found." if greedy is None else f"{greedy} coins."
    optimal_text = "no exact solution found." if optimal is None else f"{optimal} coins."
    return "\n".join(
        [
            "Coins: " + " ".join(str(coin) for coin in ordered),
            f"Amount: {amount}",
            f"Greedy: {greedy_text}",
            f"Dynamic (optimal): {optimal_text}",
        ]
    )


def main(argv: Sequence[str] | None = None) -> int:
    """Compare both methods on the given coins, or on the built-in examples."""
    parser = argparse.ArgumentParser(description="Compare greedy and optimal coin change.")
    parser.add_argument("amount", type=int, nargs="?", help="amount to change")
    parser.add_argument("coins", type=int, nargs="*", help="coin values")
    args = parser.parse_args(argv)

    if args.amount is None:
        cases = [(BRAZILIAN_COINS, 370), (COUNTEREXAMPLE_COINS, 6)]
    else:
        if not args.coins:
            parser.error("coin values are required when an amount is given")
        cases = [(args.coins, args.amount)]

    for coins, amount in cases:
        try:
            report = compare(coins, amount)
        except ValueError as error:
            parser.error(str(error))
        print()
        print(report)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())