"""A* search on a grid of obstacles, with unit moves in four directions."""

from __future__ import annotations

from collections.abc import Sequence

Point = tuple[int, int]

# Up, down, left, right as (x, y) offsets.
_MOVES = ((0, -1), (0, 1), (-1, 0), (1, 0))


def _heuristic(a: Point, b: Point) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def a_star(
    start: Point, goal: Point, obstacles: Sequence[Sequence[bool]]
) -> list[Point] | None:
    """Find a path from ``start`` to ``goal`` as a list of ``(x, y)`` points.

    ``obstacles[y][x]`` is true where a cell is blocked. Returns ``None``
    when the goal cannot be reached.
    """
    height = len(obstacles)
    width = len(obstacles[0]) if height else 0
    if width == 0 or any(len(row) != width for row in obstacles):
        raise ValueError("obstacle grid must be non-empty and rectangular")
    for name, (x, y) in (("start", start), ("goal", goal)):
        if not (0 <= x < width and 0 <= y < height):
            raise ValueError(f"{name} {(x, y)} lies outside the grid")

    g = {start: 0}
    f = {start: _heuristic(start, goal)}
    parent: dict[Point, Point] = {}
    open_set = {start}
    closed: set[Point] = set()

    while open_set:
        # The first minimal cell in row-major order.
        current = min(open_set, key=lambda p: (f[p], p[1], p[0]))
        if current == goal:
            path = [current]
            while current in parent:
                current = parent[current]
                path.append(current)
            path.reverse()
            return path

        open_set.discard(current)
        closed.add(current)

        for dx, dy in _MOVES:
            nx, ny = current[0] + dx, current[1] + dy
            if not (0 <= nx < width and 0 <= ny < height):
                continue
            if obstacles[ny][nx]:
                continue
            nxt = (nx, ny)
            if nxt in closed:
                continue
            tentative = g[current] + 1
            if nxt not in open_set or tentative < g[nxt]:
                parent[nxt] = current
                g[nxt] = tentative
                f[nxt] = tentative + _heuristic(nxt, goal)
                open_set.add(nxt)

    return None


def format_path(path: Sequence[Point] | None) -> str:
    """Describe a path from the goal back to the start, or report failure."""
    if path is None:
        return "Failure: path not found."
    steps = "".join(f"({x},{y}) <- " for x, y in reversed(path[1:]))
    return f"Path: {steps}START"