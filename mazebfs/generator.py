import numpy as np

from mazebfs.grid import DIRECTIONS


def _shuffled_directions(rng):
    directions = list(DIRECTIONS)
    rng.shuffle(directions)
    return iter(directions)


def generate(grid, current, start, end, on_carve=None, rng=None):
    """Carve a perfect maze depth-first from ``current``.

    Every cell gets its own fresh shuffle of the four directions on entry.
    After each carve ``on_carve(grid, start, end)`` is called before moving
    into the new cell, so observers see every intermediate state.

    The traversal keeps (cell, remaining directions) frames on an explicit
    stack instead of recursing, which visits cells in the same order as the
    recursive form without hitting the interpreter recursion limit.

    Returns the number of passages carved.
    """
    rng = np.random.default_rng(rng)
    current = tuple(current)
    if not grid.in_bounds(current):
        raise ValueError(f"Starting cell {current} is out of bounds.")

    grid.visited[current] = True
    stack = [(current, _shuffled_directions(rng))]
    carved = 0

    while stack:
        cell, directions = stack[-1]
        direction = next(directions, None)
        if direction is None:
            stack.pop()
            continue

        nxt = grid.neighbor(cell, direction)
        if not grid.in_bounds(nxt) or grid.visited[nxt]:
            continue

        grid.carve(cell, direction)
        carved += 1
        if on_carve is not None:
            on_carve(grid, start, end)

        grid.visited[nxt] = True
        stack.append((nxt, _shuffled_directions(rng)))

    return carved
