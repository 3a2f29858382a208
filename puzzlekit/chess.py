"""Chess board puzzles."""

from __future__ import annotations

from collections.abc import Iterable

_DIRECTIONS = (
    (-1, 0), (1, 0), (0, -1), (0, 1),
    (-1, -1), (-1, 1), (1, -1), (1, 1),
)


def queens_attack(
    n: int, row: int, col: int, obstacles: Iterable[Iterable[int]]
) -> int:
    """Squares a queen at ``(row, col)`` attacks on an ``n`` by ``n`` board.

    Rows and columns count from 1; obstacles block the queen's line of sight.
    """
    blocked = {tuple(square) for square in obstacles}
    attacked = 0
    for dr, dc in _DIRECTIONS:
        r, c = row + dr, col + dc
        while 1 <= r <= n and 1 <= c <= n and (r, c) not in blocked:
            attacked += 1
            r += dr
            c += dc
    return attacked