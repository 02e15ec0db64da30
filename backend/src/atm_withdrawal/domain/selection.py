"""
Note selection algorithms over integer units.

Both functions work on denominations already scaled to integers (see
DenominationSet.units) and sorted largest first. They return the picked
coins largest first, or None when the amount has no exact decomposition.

Greedy is only guaranteed to use the fewest notes for canonical sets
such as {100, 50, 20, 10}. For a set like {4, 3, 1} greedy turns 6 into
4 + 1 + 1 while 3 + 3 is shorter, so non-canonical sets must go through
minimal_units instead.
"""


def greedy_units(amount: int, coins: list[int]) -> list[int] | None:
    """Take as many of each coin as fit, largest coin first."""
    picked: list[int] = []
    remaining = amount
    for coin in coins:
        count, remaining = divmod(remaining, coin)
        picked.extend([coin] * count)
    return picked if remaining == 0 else None


def minimal_counts(limit: int, coins: list[int]) -> tuple[list[int | None], list[int]]:
    """
    Fewest coins needed for every amount from 0 to limit.

    Returns:
        (counts, last) where counts[x] is the minimum number of coins summing
        to x (None if unreachable) and last[x] is a coin used in one such
        minimal decomposition.
    """
    counts: list[int | None] = [None] * (limit + 1)
    last = [0] * (limit + 1)
    counts[0] = 0
    for x in range(1, limit + 1):
        best: int | None = None
        for coin in coins:
            if coin > x:
                continue
            previous = counts[x - coin]
            if previous is not None and (best is None or previous + 1 < best):
                best = previous + 1
                last[x] = coin
        counts[x] = best
    return counts, last


def minimal_units(amount: int, coins: list[int]) -> list[int] | None:
    """Dynamic-programming search for the fewest coins summing to amount."""
    counts, last = minimal_counts(amount, coins)
    if counts[amount] is None:
        return None
    picked: list[int] = []
    remaining = amount
    while remaining:
        picked.append(last[remaining])
        remaining -= last[remaining]
    return sorted(picked, reverse=True)
