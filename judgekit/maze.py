"""Walking a square maze by keeping a wall on the left hand."""

from __future__ import annotations

from collections.abc import Sequence

STEP_LIMIT = 10000
OUT_OF_ENERGY = "Edison ran out of energy."
OPEN = "."
WALL = "#"
# Headings in clockwise order: each entry is (row step, column step, letter).
_HEADINGS = ((0, 1, "E"), (1, 0, "S"), (0, -1, "W"), (-1, 0, "N"))
_LEFT = 3


def walk_maze(
    grid: Sequence[str], start: tuple[int, int], end: tuple[int, int]
) -> str | None:
    """Return the moves from `start` to `end`, or None when the walk fails.

    Positions are 1-based (row, column). The walk gives up after
    STEP_LIMIT moves or when the start has no open neighbour.
    """
    rows = list(grid)
    size = len(rows)
    if size == 0 or any(len(row) != size for row in rows):
        raise ValueError("the maze must be a non-empty square")

    def inside(y: int, x: int) -> bool:
        return 0 <= y < size and 0 <= x < size

    def is_open(cell: tuple[int, int]) -> bool:
        return inside(*cell) and rows[cell[0]][cell[1]] == OPEN

    def is_wall(cell: tuple[int, int]) -> bool:
        return not inside(*cell) or rows[cell[0]][cell[1]] == WALL

    def step(y: int, x: int, heading: int) -> tuple[int, int]:
        dy, dx, _ = _HEADINGS[heading % 4]
        return y + dy, x + dx

    y, x = start[0] - 1, start[1] - 1
    target = (end[0] - 1, end[1] - 1)
    if not inside(y, x) or not inside(*target):
        raise ValueError("start and end must lie inside the maze")

    direction = 0
    wall_seen = False
    for turn in range(4):
        cell = step(y, x, turn)
        if not wall_seen and is_wall(cell):
            wall_seen = True
        if wall_seen and is_open(cell):
            direction = turn
            break

    path: list[str] = []
    left_wall = False
    for _ in range(STEP_LIMIT):
        if left_wall and is_open(step(y, x, direction + _LEFT)):
            direction = (direction + _LEFT) % 4
        left_wall = False
        for turn in range(4):
            heading = (direction + turn) % 4
            cell = step(y, x, heading)
            if is_open(cell):
                left_wall = is_wall(step(y, x, direction + _LEFT))
                direction = heading
                break
        else:
            return None
        y, x = cell
        path.append(_HEADINGS[direction][2])
        if (y, x) == target:
            return "".join(path)
    return None


def solve(text: str) -> str:
    """Answer every case: a size, the maze rows, then start and end positions."""
    tokens = iter(text.split())
    cases = int(next(tokens))
    lines = []
    for case in range(1, cases + 1):
        size = int(next(tokens))
        grid = [next(tokens) for _ in range(size)]
        sy, sx, ey, ex = (int(next(tokens)) for _ in range(4))
        path = walk_maze(grid, (sy, sx), (ey, ex))
        if path is None:
            lines.append(f"Case #{case}: {OUT_OF_ENERGY}")
        else:
            lines.append(f"Case #{case}: {len(path)}")
            lines.append(path)
    return "".join(line + "\n" for line in lines)