import matplotlib.pyplot as plt
import matplotlib.patches as patches

from mazebfs.grid import Direction

CELL_SIZE = 0.6
DPI = 200

BG_COLOR = '#0A0A15'
WALL_COLOR = '#FFFFFF'
VISITED_COLOR = '#3A1C71'
PATH_COLOR = '#FF3333'
START_COLOR = '#00FF7F'
END_COLOR = '#FF4500'


def plot_maze(grid, start, end, path=None, output_file='maze.png'):
    """Save a still image of the maze and the overlaid route to ``output_file``."""
    start, end = tuple(start), tuple(end)
    path_cells = set(path) if path else set()

    fig, axes = plt.subplots(figsize=(grid.cols * CELL_SIZE + 1, grid.rows * CELL_SIZE + 1), dpi=DPI)
    fig.patch.set_facecolor(BG_COLOR)
    axes.set_xlim(-0.5, grid.cols + 0.5)
    axes.set_ylim(-0.5, grid.rows + 0.5)
    axes.set_aspect('equal')
    axes.set_facecolor(BG_COLOR)
    axes.axis('off')

    for row in range(grid.rows):
        for col in range(grid.cols):
            pos = (row, col)
            # row 0 is the top of the picture
            x, y = col, grid.rows - 1 - row

            if pos == start:
                cell_color, alpha = START_COLOR, 1.0
            elif pos == end:
                cell_color, alpha = END_COLOR, 1.0
            elif pos in path_cells:
                cell_color, alpha = PATH_COLOR, 0.8
            elif grid.visited[pos]:
                cell_color, alpha = VISITED_COLOR, 0.7
            else:
                cell_color, alpha = 'white', 0.05

            axes.add_patch(patches.Rectangle(
                (x, y), 1, 1,
                fill=True, color=cell_color, alpha=alpha,
                linewidth=0, zorder=1
            ))

            if not grid.has_passage(pos, Direction.N):
                axes.plot([x, x + 1], [y + 1, y + 1], WALL_COLOR, linewidth=1.0, zorder=30)
            if not grid.has_passage(pos, Direction.S):
                axes.plot([x, x + 1], [y, y], WALL_COLOR, linewidth=1.0, zorder=30)
            if not grid.has_passage(pos, Direction.E):
                axes.plot([x + 1, x + 1], [y, y + 1], WALL_COLOR, linewidth=1.0, zorder=30)
            if not grid.has_passage(pos, Direction.W):
                axes.plot([x, x], [y, y + 1], WALL_COLOR, linewidth=1.0, zorder=30)

    fig.savefig(output_file, facecolor=BG_COLOR)
    plt.close(fig)
    return output_file
