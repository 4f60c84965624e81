from collections import deque


def find_path(grid, start, end):
    start, end = tuple(start), tuple(end)
    if not grid.in_bounds(start):
        raise ValueError(f"Start position {start} is out of bounds.")
    if not grid.in_bounds(end):
        raise ValueError(f"End position {end} is out of bounds.")

    queue = deque([start])
    visited = {start}
    came_from = {}

    while queue:
        current_pos = queue.popleft()
        if current_pos == end:
            path = []
            at = current_pos
            while at != start:
                path.append(at)
                at = came_from[at]
            path.append(start)
            path.reverse()
            return path

        for next_pos in grid.open_neighbors(current_pos):
            if next_pos not in visited:
                visited.add(next_pos)
                came_from[next_pos] = current_pos
                queue.append(next_pos)

    return None
