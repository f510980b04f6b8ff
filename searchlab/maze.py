"""Weighted A* search on a character grid maze, with a picture of what was explored."""

from __future__ import annotations

import argparse
import math
from collections.abc import Callable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

Point = tuple[int, int]
Heuristic = Callable[[Point, Point], int]

FREE = "."
WALL = "#"
OPEN_MARK = "O"
CLOSED_MARK = "X"
START = "S"
GOAL = "G"
PATH_MARK = "*"

# Up, down, left, right as (row, column) offsets.
_MOVES = ((-1, 0), (1, 0), (0, -1), (0, 1))

_DEFAULT_ROWS = (
    "S........#",
    "######...#",
    "#......#.#",
    "#.######.#",
    "#........#",
    "#.########",
    "#........#",
    "########.#",
    "#.......G#",
    "##########",
)


def manhattan(a: Point, b: Point) -> int:
    """Manhattan distance between two cells."""
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def euclidean(a: Point, b: Point) -> int:
    """Euclidean distance between two cells, truncated to an integer."""
    return int(math.sqrt((a[0] - b[0]) ** 2 + (a[1] - b[1]) ** 2))


def custom_heuristic(a: Point, b: Point) -> int:
    """Manhattan distance plus a penalty for diagonal displacement."""
    return manhattan(a, b) + abs((a[0] - b[0]) - (a[1] - b[1]))


class CellState(Enum):
    """How far a cell got in the search."""

    OPEN = 1
    CLOSED = 2


@dataclass(frozen=True)
class SearchResult:
    """Outcome of one search: the path found, if any, and the cells touched."""

    maze: Maze
    path: tuple[Point, ...] | None
    explored: int
    states: dict[Point, CellState] = field(default_factory=dict)

    @property
    def found(self) -> bool:
        return self.path is not None

    def render(self) -> str:
        """Draw the maze with the path, open cells and closed cells marked."""
        on_path = set()
        if self.path is not None:
            on_path = {
                cell for cell in self.path if self.maze.at(cell) not in (START, GOAL)
            }
        lines = []
        for r, row in enumerate(self.maze.rows):
            chars = []
            for c, symbol in enumerate(row):
                cell = (r, c)
                state = self.states.get(cell)
                if cell in on_path:
                    chars.append(PATH_MARK)
                elif symbol == FREE and state is CellState.OPEN:
                    chars.append(OPEN_MARK)
                elif symbol == FREE and state is CellState.CLOSED:
                    chars.append(CLOSED_MARK)
                else:
                    chars.append(symbol)
            lines.append("".join(chars))
        return "\n".join(lines)


class Maze:
    """A rectangular maze of characters with one start and one goal cell."""

    def __init__(self, rows: Sequence[str]) -> None:
        if not rows:
            raise ValueError("a maze needs at least one row")
        width = len(rows[0])
        if width == 0 or any(len(row) != width for row in rows):
            raise ValueError("maze rows must be non-empty and of equal length")
        self.rows: tuple[str, ...] = tuple(rows)

    @property
    def height(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        return len(self.rows[0])

    def at(self, cell: Point) -> str:
        return self.rows[cell[0]][cell[1]]

    def _inside(self, cell: Point) -> bool:
        return 0 <= cell[0] < self.height and 0 <= cell[1] < self.width

    def _neighbors(self, cell: Point) -> Iterator[Point]:
        for dr, dc in _MOVES:
            nxt = (cell[0] + dr, cell[1] + dc)
            if self._inside(nxt) and self.at(nxt) != WALL:
                yield nxt

    def find(self, symbol: str) -> Point:
        """Position of the first cell holding ``symbol``, scanning row by row."""
        for r, row in enumerate(self.rows):
            c = row.find(symbol)
            if c >= 0:
                return (r, c)
        raise ValueError(f"symbol {symbol!r} not found in maze")

    def search(self, heuristic: Heuristic = manhattan, weight: float = 1.0) -> SearchResult:
        """Run weighted A* from the start cell to the goal cell."""
        start = self.find(START)
        goal = self.find(GOAL)

        g: dict[Point, int] = {start: 0}
        f: dict[Point, int] = {start: int(weight * heuristic(start, goal))}
        parent: dict[Point, Point] = {}
        states: dict[Point, CellState] = {}
        queue = [start]
        explored = 0

        while queue:
            index, current = min(enumerate(queue), key=lambda item: f[item[1]])
            queue[index] = queue[0]
            del queue[0]

            states[current] = CellState.CLOSED
            explored += 1

            if current == goal:
                path = [current]
                while current != start:
                    current = parent[current]
                    path.append(current)
                path.reverse()
                return SearchResult(self, tuple(path), explored, states)

            for nxt in self._neighbors(current):
                cost = g[current] + 1
                if cost < g.get(nxt, math.inf):
                    g[nxt] = cost
                    f[nxt] = int(cost + weight * heuristic(nxt, goal))
                    parent[nxt] = current
                    if states.get(nxt) is not CellState.OPEN:
                        queue.append(nxt)
                        states[nxt] = CellState.OPEN

        return SearchResult(self, None, explored, states)


def default_maze() -> Maze:
    """The built-in 10x10 example maze."""
    return Maze(_DEFAULT_ROWS)


def main(argv: Sequence[str] | None = None) -> int:
    """Search the built-in maze with several heuristics and print each result."""
    parser = argparse.ArgumentParser(description="A* search on a grid maze.")
    parser.parse_args(argv)

    maze = default_maze()
    runs = [
        ("Search with Manhattan heuristic (w = 1.0)", manhattan, 1.0),
        ("Search with Euclidean heuristic (w = 1.0)", euclidean, 1.0),
        ("Search with custom heuristic (w = 1.0)", custom_heuristic, 1.0),
        ("Search with Manhattan (w = 2.0)", manhattan, 2.0),
    ]
    for title, heuristic, weight in runs:
        print(title)
        result = maze.search(heuristic, weight)
        if result.found:
            print(f"Path found! Nodes explored: {result.explored}")
        else:
            print(f"Path not found. Nodes explored: {result.explored}")
        print(result.render())
        print()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())