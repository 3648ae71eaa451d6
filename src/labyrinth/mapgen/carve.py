# src/labyrinth/mapgen/carve.py
# Recursive-backtracking carver over a column-major field (field[x][y]).
# Passages sit on odd coordinates starting at (1,1) and step by 2; the cell
# between two of them is the connector. Walked with an explicit stack so
# large dimensions never hit the interpreter's recursion limit.

from typing import List, Tuple

from ..grid import PASSAGE, WALL
from ..rng import SeededEngine

START = (1, 1)

def empty_field(dimension: int) -> List[List[bool]]:
    """Return a fresh dimension×dimension field, every cell a wall."""
    return [[WALL for _ in range(dimension)] for _ in range(dimension)]

def eligible_directions(field: List[List[bool]], x: int, y: int) -> List[Tuple[int, int]]:
    # Fixed order: -x, +x, -y, +y. Draw indices refer to this order, so
    # changing it changes every maze.
    n = len(field)
    dirs = []
    if x > 1 and field[x - 2][y]:
        dirs.append((-1, 0))
    if x < n - 2 and field[x + 2][y]:
        dirs.append((1, 0))
    if y > 1 and field[x][y - 2]:
        dirs.append((0, -1))
    if y < n - 2 and field[x][y + 2]:
        dirs.append((0, 1))
    return dirs

def carve_maze(field: List[List[bool]], engine: SeededEngine) -> int:
    """
    Carve a perfect maze into `field` in place, starting at (1,1).

    The top of the stack is the cell being worked on. Each pass re-enumerates
    its unvisited two-away neighbours, so a cell keeps spawning branches until
    none remain, then pops (backtracks). One engine draw per branch, and
    none for a dead end.

    Returns the number of engine draws made.
    """
    n = len(field)
    sx, sy = START
    if sx >= n or sy >= n:
        # dimension 1: the start cell does not exist
        return 0

    field[sx][sy] = PASSAGE
    stack = [START]
    draws = 0
    while stack:
        x, y = stack[-1]
        dirs = eligible_directions(field, x, y)
        if not dirs:
            stack.pop()
            continue
        dx, dy = dirs[engine.next_int(0, len(dirs) - 1)]
        draws += 1
        field[x + dx][y + dy] = PASSAGE
        nx, ny = x + 2 * dx, y + 2 * dy
        field[nx][ny] = PASSAGE
        stack.append((nx, ny))
    return draws
