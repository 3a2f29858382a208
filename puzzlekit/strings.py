"""Puzzles over strings of decimal digits."""

from __future__ import annotations

MODULUS = 1_000_000_007


def highest_value_palindrome(s: str, k: int) -> str | None:
    """Largest palindrome reachable by changing at most ``k`` digits of ``s``.

    Returns None when ``s`` cannot be made a palindrome within ``k`` changes.
    """
    digits = list(s)
    n = len(digits)
    mismatched = [i for i in range(n // 2) if digits[i] != digits[n - 1 - i]]
    if len(mismatched) > k:
        return None

    # Cheapest repair first: each mismatched pair takes the larger digit.
    for i in mismatched:
        j = n - 1 - i
        digits[i] = digits[j] = max(digits[i], digits[j])

    left = k - len(mismatched)
    repaired = set(mismatched)
    for i in range(n):
        if left <= 0:
            break
        if digits[i] == "9":
            continue
        if i in repaired:
            # One change was already spent on this pair.
            left -= 1
        elif left < 2:
            break
        else:
            left -= 2
        digits[i] = digits[n - 1 - i] = "9"

    middle = n // 2
    if k % 2 == 1 and left >= 1 and n and digits[middle] != "9":
        digits[middle] = "9"

    return "".join(digits)


def substring_sum(digits: str) -> int:
    """Sum of every substring of ``digits`` read as a number, modulo 10**9 + 7."""
    if not digits:
        raise ValueError("digits must not be empty")
    total = 0
    ending_here = 0
    for position, char in enumerate(digits, start=1):
        ending_here = (position * int(char) + 10 * ending_here) % MODULUS
        total = (total + ending_here) % MODULUS
    return total