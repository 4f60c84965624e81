from collections import deque

import numpy as np
import pytest

from mazebfs.generator import generate
from mazebfs.grid import DIRECTIONS, Grid


def reachable(grid, origin):
    seen = {origin}
    queue = deque([origin])
    while queue:
        pos = queue.popleft()
        for nxt in grid.open_neighbors(pos):
            if nxt not in seen:
                seen.add(nxt)
                queue.append(nxt)
    return seen


@pytest.mark.parametrize("rows, cols, seed", [(10, 5, 0), (7, 7, 1), (1, 9, 2), (12, 3, 3)])
def test_generates_a_perfect_maze(rows, cols, seed):
    grid = Grid(rows, cols)
    carves = generate(grid, (0, 0), (0, 0), (rows - 1, cols - 1), rng=seed)

    assert carves == rows * cols - 1
    assert grid.visited.all()
    # a connected graph with n - 1 edges is a spanning tree
    assert grid.passage_count() == rows * cols - 1
    assert len(reachable(grid, (0, 0))) == rows * cols


def test_walls_are_symmetric():
    grid = Grid(8, 6)
    generate(grid, (3, 2), (0, 0), (7, 5), rng=42)
    for row in range(grid.rows):
        for col in range(grid.cols):
            for direction in DIRECTIONS:
                if grid.has_passage((row, col), direction):
                    nxt = grid.neighbor((row, col), direction)
                    assert grid.in_bounds(nxt)
                    assert grid.has_passage(nxt, direction.opposite)


def test_single_cell_grid_carves_nothing():
    grid = Grid(1, 1)
    calls = []
    carves = generate(grid, (0, 0), (0, 0), (0, 0), on_carve=lambda *args: calls.append(args))
    assert carves == 0
    assert calls == []
    assert grid.visited[0, 0]
    assert grid.walls[0, 0] == 0


def test_hook_runs_after_each_carve():
    grid = Grid(4, 4)
    counts = []

    def on_carve(g, start, end):
        assert g is grid
        assert (start, end) == ((0, 0), (3, 3))
        counts.append(g.passage_count())

    generate(grid, (0, 0), (0, 0), (3, 3), on_carve=on_carve, rng=5)
    assert counts == list(range(1, 16))


def test_same_seed_same_maze():
    first = Grid(9, 9)
    second = Grid(9, 9)
    generate(first, (0, 0), (0, 0), (8, 8), rng=1234)
    generate(second, (0, 0), (0, 0), (8, 8), rng=np.random.default_rng(1234))
    assert np.array_equal(first.walls, second.walls)


def test_large_grid_does_not_exhaust_the_stack():
    grid = Grid(80, 80)
    carves = generate(grid, (0, 0), (0, 0), (79, 79), rng=7)
    assert carves == 80 * 80 - 1
    assert grid.passage_count() == carves


@pytest.mark.parametrize("current", [(-1, 0), (-1, -1), (0, 3), (3, 3)])
def test_rejects_off_grid_starting_cell(current):
    grid = Grid(3, 3)
    calls = []
    with pytest.raises(ValueError):
        generate(grid, current, (0, 0), (2, 2), on_carve=lambda *args: calls.append(args), rng=0)
    assert not grid.visited.any()
    assert not grid.walls.any()
    assert calls == []
