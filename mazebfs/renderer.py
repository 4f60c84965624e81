import sys

from mazebfs.grid import Direction

PATH_COLOR = '\x1b[33m'
RESET_COLOR = '\x1b[0m'
CLEAR_SCREEN = '\x1b[2J\x1b[1;1H'

START_MARK = ' S '
END_MARK = ' E '
PATH_MARK = f'{PATH_COLOR} * {RESET_COLOR}'
VISITED_MARK = ' · '
BLANK_MARK = '   '


def cell_body(grid, pos, start, end, path_cells):
    if pos == start:
        return START_MARK
    if pos == end:
        return END_MARK
    if pos in path_cells:
        return PATH_MARK
    if grid.visited[pos]:
        return VISITED_MARK
    return BLANK_MARK


def render(grid, start, end, path=None):
    """Return the maze as text: top border, then a content and a wall line per row."""
    start, end = tuple(start), tuple(end)
    path_cells = set(path) if path else set()

    lines = ['+' + '---+' * grid.cols]
    for row in range(grid.rows):
        top = '|'
        bottom = '+'
        for col in range(grid.cols):
            pos = (row, col)
            top += cell_body(grid, pos, start, end, path_cells)

            # outer boundary is always closed on the right
            if not grid.has_passage(pos, Direction.E) or col == grid.cols - 1:
                top += '|'
            else:
                top += ' '

            bottom += '   +' if grid.has_passage(pos, Direction.S) else '---+'
        lines.append(top)
        lines.append(bottom)

    return '\n'.join(lines) + '\n'


def draw(grid, start, end, path=None, stream=None):
    stream = stream or sys.stdout
    stream.write(render(grid, start, end, path))
