"""
A cell on the board

(placed in its own module as multiple other modules need to import it)
"""

from __future__ import annotations

from dataclasses import dataclass

# Chess board is always 8x8. Just in case we want to try some funky stuff, make it adjustable
BOARD_DIMENSIONS = (8, 8)


def _sign(value: int) -> int:
    return (value > 0) - (value < 0)


@dataclass(frozen=True)
class Cell:
    """(0, 0) is the bottom left corner seen from white's side. White advances towards increasing y."""

    x: int
    y: int

    def __str__(self) -> str:
        return f"({self.x}, {self.y})"

    def is_within_bounds(self) -> bool:
        return (0 <= self.x < BOARD_DIMENSIONS[0]) and (
            0 <= self.y < BOARD_DIMENSIONS[1]
        )

    def distance_x(self, to: Cell) -> int:
        return abs(self.x - to.x)

    def distance_y(self, to: Cell) -> int:
        return abs(self.y - to.y)

    def direction_x(self, to: Cell) -> int:
        """1 if `to` lies to the right, -1 to the left, 0 in the same column"""
        return _sign(to.x - self.x)

    def direction_y(self, to: Cell) -> int:
        """1 if `to` lies above, -1 below, 0 on the same row"""
        return _sign(to.y - self.y)

    def offset(self, dx: int, dy: int) -> Cell:
        return Cell(self.x + dx, self.y + dy)

    def cells_between(self, to: Cell) -> list[Cell]:
        """
        Cells strictly in between two cells that share a row, a column, or a diagonal.

        Anything else (a knight jump for instance) has nothing "in between", so returns an empty list.
        """
        dx = self.distance_x(to)
        dy = self.distance_y(to)
        if not (dx == 0 or dy == 0 or dx == dy):
            return []

        step_x = self.direction_x(to)
        step_y = self.direction_y(to)
        return [self.offset(i * step_x, i * step_y) for i in range(1, max(dx, dy))]
