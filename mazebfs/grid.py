import enum
import numbers

import numpy as np


class Direction(enum.IntFlag):
    N = 1
    S = 2
    E = 4
    W = 8

    @property
    def offset(self):
        return OFFSETS[self]

    @property
    def opposite(self):
        return OPPOSITES[self]


# IntFlag iteration order is definition order: N, S, E, W
DIRECTIONS = (Direction.N, Direction.S, Direction.E, Direction.W)

OFFSETS = {
    Direction.N: (-1, 0),
    Direction.S: (1, 0),
    Direction.E: (0, 1),
    Direction.W: (0, -1),
}

OPPOSITES = {
    Direction.N: Direction.S,
    Direction.S: Direction.N,
    Direction.E: Direction.W,
    Direction.W: Direction.E,
}


class Grid:
    """Rectangular maze grid addressed by (row, col).

    ``walls`` holds, per cell, the mask of directions with an open passage.
    A missing bit means the wall on that side is still standing.
    """

    def __init__(self, rows, cols):
        for size in (rows, cols):
            if not isinstance(size, numbers.Integral) or isinstance(size, bool) or size <= 0:
                raise ValueError(f"Invalid maze dimensions ({rows}x{cols}).")
        self.rows = int(rows)
        self.cols = int(cols)
        self.visited = np.zeros((self.rows, self.cols), dtype=bool)
        self.walls = np.zeros((self.rows, self.cols), dtype=np.uint8)

    @property
    def shape(self):
        return self.rows, self.cols

    def __repr__(self):
        return f"Grid({self.rows}, {self.cols})"

    def in_bounds(self, coord):
        row, col = coord
        return 0 <= row < self.rows and 0 <= col < self.cols

    def neighbor(self, coord, direction):
        dr, dc = direction.offset
        return coord[0] + dr, coord[1] + dc

    def has_passage(self, coord, direction):
        return bool(int(self.walls[coord]) & direction)

    def carve(self, coord, direction):
        """Open the passage from ``coord`` towards ``direction`` on both sides."""
        nxt = self.neighbor(coord, direction)
        if not self.in_bounds(coord) or not self.in_bounds(nxt):
            raise IndexError(f"Cannot carve {direction.name} from {coord} on a {self.rows}x{self.cols} grid.")
        self.walls[coord] |= int(direction)
        self.walls[nxt] |= int(direction.opposite)
        return nxt

    def open_neighbors(self, coord):
        mask = int(self.walls[coord])
        for direction in DIRECTIONS:
            if mask & direction:
                nxt = self.neighbor(coord, direction)
                if self.in_bounds(nxt):
                    yield nxt

    def passage_count(self):
        # every open passage sets one bit on each of its two cells
        bits = np.unpackbits(self.walls[..., np.newaxis], axis=-1)
        return int(bits.sum()) // 2
