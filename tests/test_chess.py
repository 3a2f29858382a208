import pytest

from puzzlekit.chess import queens_attack


def test_corner_without_obstacles():
    assert queens_attack(4, 4, 4, []) == 9


def test_with_obstacles():
    assert queens_attack(5, 4, 3, [(5, 5), (4, 2), (2, 3)]) == 10


def test_surrounded_queen_attacks_nothing():
    around = [(r, c) for r in (3, 4, 5) for c in (3, 4, 5) if (r, c) != (4, 4)]
    assert queens_attack(8, 4, 4, around) == 0


def test_accepts_lists_as_obstacles():
    assert queens_attack(5, 4, 3, [[5, 5], [4, 2], [2, 3]]) == queens_attack(
        5, 4, 3, [(5, 5), (4, 2), (2, 3)]
    )


@pytest.mark.parametrize("row, col", [(1, 1), (3, 5), (8, 2), (4, 4)])
def test_mirror_symmetry(row, col):
    n = 8
    base = queens_attack(n, row, col, [])
    assert queens_attack(n, n + 1 - row, col, []) == base
    assert queens_attack(n, row, n + 1 - col, []) == base
    assert queens_attack(n, col, row, []) == base


def test_obstacle_never_adds_squares():
    free = queens_attack(8, 4, 5, [])
    for obstacle in [(4, 7), (1, 2), (6, 7), (8, 5), (2, 2)]:
        assert queens_attack(8, 4, 5, [obstacle]) <= free


def test_obstacle_out_of_sight_changes_nothing():
    assert queens_attack(8, 4, 5, [(1, 1)]) == queens_attack(8, 4, 5, [])


def test_obstacle_in_line_blocks_rest_of_ray():
    free = queens_attack(8, 1, 1, [])
    blocked = queens_attack(8, 1, 1, [(1, 3)])
    assert free - blocked == 8 - 2