import sys
import time

from mazebfs.generator import generate
from mazebfs.grid import Grid
from mazebfs.pathfinder import find_path
from mazebfs.plot import plot_maze
from mazebfs.renderer import CLEAR_SCREEN, draw

MAZE_ROWS = 10
MAZE_COLS = 5

FRAME_DELAY = 0.05

MAZE_SEED = None
OUTPUT_FILE = None


def run(rows=MAZE_ROWS, cols=MAZE_COLS, delay=FRAME_DELAY, seed=MAZE_SEED, stream=None, output_file=OUTPUT_FILE):
    """Generate a maze, redrawing it with the current shortest route after every carve.

    Returns ``(grid, path, carves)`` where ``path`` is the final start-to-end
    route and ``carves`` the number of passages opened.
    """
    stream = stream or sys.stdout
    grid = Grid(rows, cols)
    start = (0, 0)  # Top-left
    end = (grid.rows - 1, grid.cols - 1)  # Bottom-right

    def show_frame(grid, start, end):
        path = find_path(grid, start, end)
        stream.write(CLEAR_SCREEN)
        draw(grid, start, end, path, stream=stream)
        stream.flush()
        time.sleep(delay)

    carves = generate(grid, start, start, end, on_carve=show_frame, rng=seed)
    path = find_path(grid, start, end)

    if output_file:
        plot_maze(grid, start, end, path, output_file)

    return grid, path, carves


def main():
    grid, path, carves = run()

    print("≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈")
    print(f"🧩 Generated {grid.rows}x{grid.cols} maze (Recursive Backtracker + BFS)")
    print("≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈≈")
    print(f"✅ Carved {carves} passages across {grid.rows * grid.cols} cells")
    if path:
        print(f"🔍 Shortest path from {path[0]} to {path[-1]}: {len(path) - 1} steps")
    if OUTPUT_FILE:
        print(f"💾 Saved final maze to {OUTPUT_FILE}")


if __name__ == "__main__":
    main()
