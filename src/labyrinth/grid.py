from dataclasses import dataclass
from typing import Iterator, List, Sequence, Tuple

WALL, PASSAGE = True, False
DIRECTIONS = ((-1, 0), (1, 0), (0, -1), (0, 1))

Cell = Tuple[int, int]

@dataclass(frozen=True)
class Grid:
    """
    Generated maze: cells[x][y] is True for wall, False for passage.
    Column-major, the same indexing the carver writes with.
    """
    cells: Tuple[Tuple[bool, ...], ...]
    seed: int

    @classmethod
    def from_field(cls, field: Sequence[Sequence[bool]], seed: int) -> "Grid":
        # Snapshot into tuples; the carver's lists are not shared.
        return cls(cells=tuple(tuple(col) for col in field), seed=seed)

    @property
    def dimension(self) -> int:
        return len(self.cells)

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.dimension and 0 <= y < self.dimension

    def get(self, x: int, y: int) -> bool:
        # No negative-index wraparound onto the opposite edge.
        if not self.in_bounds(x, y):
            raise IndexError(f"cell ({x}, {y}) outside {self.dimension}x{self.dimension} grid")
        return self.cells[x][y]

    def is_open(self, x: int, y: int) -> bool:
        return self.in_bounds(x, y) and not self.cells[x][y]

    def open_cells(self) -> Iterator[Cell]:
        for x, col in enumerate(self.cells):
            for y, wall in enumerate(col):
                if not wall:
                    yield (x, y)

    def open_neighbors(self, x: int, y: int) -> List[Cell]:
        """Orthogonally adjacent passages (distance 1)."""
        return [(x + dx, y + dy) for dx, dy in DIRECTIONS if self.is_open(x + dx, y + dy)]

    def as_columns(self) -> List[List[bool]]:
        return [list(col) for col in self.cells]

    def as_rows(self) -> List[List[bool]]:
        """Row-major copy (rows are y), the layout TSV fixtures use."""
        n = self.dimension
        return [[self.cells[x][y] for x in range(n)] for y in range(n)]

    def __str__(self) -> str:
        return "\n".join("".join("#" if c else "." for c in row) for row in self.as_rows())
