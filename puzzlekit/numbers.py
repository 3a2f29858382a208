"""Number-theoretic and counting puzzles."""

from __future__ import annotations

import operator
from collections import Counter
from collections.abc import Iterable, Sequence
from functools import reduce
from itertools import combinations, count, takewhile


def acm_team(topics: Iterable[str]) -> tuple[int, int]:
    """Most topics any two-person team knows, and how many teams know that many.

    Each topic string holds one '0' or '1' per topic.
    """
    masks = [int(topic, 2) for topic in topics]
    best = teams = 0
    for first, second in combinations(masks, 2):
        known = (first | second).bit_count()
        if known > best:
            best, teams = known, 1
        elif known == best:
            teams += 1
    return best, teams


def count_divisible_subarrays(numbers: Iterable[int], k: int) -> int:
    """Number of contiguous runs whose sum is divisible by ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    remainders = Counter({0: 1})
    total = 0
    for number in numbers:
        total = (total + number) % k
        remainders[total] += 1
    return sum(c * (c - 1) // 2 for c in remainders.values())


def manasa_stones(n: int, a: int, b: int) -> list[int]:
    """Possible values of the last of ``n`` stones, in ascending order."""
    if a == b:
        return [(n - 1) * a]
    return sorted((n - i) * a + (i - 1) * b for i in range(1, n + 1))


def non_divisible_subset(numbers: Iterable[int], k: int) -> int:
    """Size of the largest subset in which no pair sums to a multiple of ``k``."""
    if k < 1:
        raise ValueError("k must be positive")
    remainders = Counter(number % k for number in numbers)
    size = 1 if remainders[0] else 0
    if k % 2 == 0:
        remainders[k // 2] = min(remainders[k // 2], 1)
    for r in range(1, k // 2 + 1):
        size += max(remainders[r], remainders[k - r])
    return size


def sansa_xor(values: Sequence[int]) -> int:
    """XOR of the XORs of every contiguous subarray."""
    if len(values) % 2 == 0:
        return 0
    return reduce(operator.xor, values[::2], 0)


def special_multiple(n: int) -> int:
    """Smallest positive multiple of ``n`` written only with nines and zeros."""
    if n < 1:
        raise ValueError("n must be positive")
    for i in count(1):
        candidate = int(format(i, "b").replace("1", "9"))
        if candidate % n == 0:
            return candidate
    raise AssertionError("unreachable")


def primes(count: int) -> list[int]:
    """The first ``count`` prime numbers."""
    found: list[int] = []
    candidate = 2
    while len(found) < count:
        divisors = takewhile(lambda p: p * p <= candidate, found)
        if all(candidate % p for p in divisors):
            found.append(candidate)
        candidate += 1
    return found


def waiter(plates: Iterable[int], q: int) -> list[int]:
    """Order in which plates are served after ``q`` rounds of sorting.

    Plates form a stack whose last element is on top. In round ``i`` plates
    divisible by the i-th prime are set aside and served from the top; the
    rest form the next stack. Whatever remains is served from the top.
    """
    stack = list(plates)
    served: list[int] = []
    for prime in primes(q):
        divisible: list[int] = []
        rest: list[int] = []
        for plate in reversed(stack):
            (divisible if plate % prime == 0 else rest).append(plate)
        served.extend(reversed(divisible))
        stack = rest
        if not stack:
            break
    served.extend(reversed(stack))
    return served