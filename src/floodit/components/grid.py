from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterator, List, Sequence, Tuple

from floodit.components.cell import Cell
from floodit.constants import DEFAULT_PALETTE, MIN_BOARD_SIZE, MIN_NUM_COLORS
from floodit.errors import InvalidConfiguration, OutOfBounds

Position = Tuple[int, int]
ColorSampler = Callable[[Sequence[str]], str]

# Neighbour offsets in lookup order: left, top, right, bottom.
_OFFSETS: Tuple[Position, ...] = ((0, -1), (-1, 0), (0, 1), (1, 0))


def validate_configuration(board_size: int, num_colors: int, palette_size: int) -> None:
    if board_size < MIN_BOARD_SIZE:
        raise InvalidConfiguration(f"Board size must be at least {MIN_BOARD_SIZE}.")
    if num_colors < MIN_NUM_COLORS or num_colors > palette_size:
        raise InvalidConfiguration(
            f"Number of colors must be between {MIN_NUM_COLORS} and {palette_size} inclusive."
        )


@dataclass(slots=True)
class Grid:
    """Square board owning every Cell, indexed by (row, col).

    Row 0 / column 0 is the origin corner. The shape never changes after
    creation; only cell colors and flooded flags mutate.
    """
    size: int
    cells: List[List[Cell]]

    @classmethod
    def create(
        cls,
        board_size: int,
        num_colors: int,
        sampler: ColorSampler,
        palette: Sequence[str] | None = None,
    ) -> Grid:
        names = list(palette) if palette is not None else list(DEFAULT_PALETTE)
        validate_configuration(board_size, num_colors, len(names))
        choices = names[:num_colors]
        cells = [
            [Cell(color=sampler(choices)) for _ in range(board_size)]
            for _ in range(board_size)
        ]
        return cls(size=board_size, cells=cells)

    def in_bounds(self, pos: Position) -> bool:
        row, col = pos
        return 0 <= row < self.size and 0 <= col < self.size

    def cell_at(self, pos: Position) -> Cell:
        if not self.in_bounds(pos):
            raise OutOfBounds(pos, self.size)
        row, col = pos
        return self.cells[row][col]

    def neighbors(self, pos: Position) -> List[Position]:
        row, col = pos
        found: List[Position] = []
        for dr, dc in _OFFSETS:
            candidate = (row + dr, col + dc)
            if self.in_bounds(candidate):
                found.append(candidate)
        return found

    def positions(self) -> Iterator[Position]:
        for row in range(self.size):
            for col in range(self.size):
                yield (row, col)

    def is_uniform(self, color: str) -> bool:
        return all(cell.color == color for line in self.cells for cell in line)

    def colors(self) -> Tuple[Tuple[str, ...], ...]:
        return tuple(tuple(cell.color for cell in line) for line in self.cells)
