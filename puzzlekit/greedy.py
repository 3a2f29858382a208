"""Greedy solutions to allocation, covering and scheduling puzzles."""

from __future__ import annotations

import math
from collections.abc import Iterable


def _rising_runs(ratings: list[int]) -> list[int]:
    """Length of the strictly rising run that ends at each position."""
    runs: list[int] = []
    previous = None
    for rating in ratings:
        runs.append(runs[-1] + 1 if runs and rating > previous else 1)
        previous = rating
    return runs


def candies(ratings: Iterable[int]) -> int:
    """Fewest candies so every child gets one and outranks lower-rated neighbours."""
    ratings = list(ratings)
    from_left = _rising_runs(ratings)
    from_right = _rising_runs(ratings[::-1])[::-1]
    return sum(map(max, from_left, from_right))


def fair_rations(loaves: Iterable[int]) -> int | None:
    """Loaves to hand out so everyone holds an even number, or None if impossible.

    Loaves are always given in pairs to two people standing next to each other.
    """
    given = 0
    carry = 0
    for count in loaves:
        if (count + carry) % 2:
            carry = 1
            given += 2
        else:
            carry = 0
    return None if carry else given


def goodland_electricity(k: int, towns: Iterable[int]) -> int | None:
    """Fewest power plants (towns marked 1) lighting every town, or None.

    A plant lights every town less than ``k`` positions away from it.
    """
    towns = list(towns)
    n = len(towns)

    # Distance from each town to the nearest plant strictly after it.
    next_plant = [math.inf] * n
    distance = math.inf
    for i in reversed(range(n)):
        next_plant[i] = distance
        distance = 1 if towns[i] == 1 else distance + 1

    plants = 0
    skipped = 0
    for i, (town, reach) in enumerate(zip(towns, next_plant)):
        if reach == math.inf:
            if skipped >= k or n - i > k:
                return None
            plants += 1
            break
        if town == 0:
            skipped += 1
            continue
        if skipped + reach < k:
            skipped += 1
            continue
        if skipped >= k:
            return None
        plants += 1
        skipped = 1 - k
    return plants


def greedy_florist(k: int, prices: Iterable[int]) -> int:
    """Least total cost for ``k`` friends to buy every flower.

    A friend's n-th purchase costs ``n`` times the flower's base price.
    """
    if k < 1:
        raise ValueError("there must be at least one buyer")
    ordered = sorted(prices, reverse=True)
    return sum((1 + i // k) * price for i, price in enumerate(ordered))


def luck_balance(k: int, contests: Iterable[tuple[int, int]]) -> int:
    """Most luck left after losing at most ``k`` important contests.

    Each contest is a ``(luck, important)`` pair; losing adds its luck,
    winning subtracts it.
    """
    total = 0
    important: list[int] = []
    for luck, is_important in contests:
        if is_important:
            important.append(luck)
        else:
            total += luck
    important.sort(reverse=True)
    lost = max(k, 0)
    return total + sum(important[:lost]) - sum(important[lost:])


def truck_tour(pumps: Iterable[tuple[int, int]]) -> int:
    """Index of the first pump from which a full circle can be driven.

    Each pump is a ``(petrol, distance_to_next)`` pair.
    """
    start = 0
    tank = 0
    for i, (petrol, distance) in enumerate(pumps):
        tank += petrol - distance
        if tank < 0:
            start = i + 1
            tank = 0
    return start