"""Helpers for implementing Castling rules. Need to be imported by multiple sources"""

from dataclasses import dataclass
from enum import Enum
from typing import Self

from src.chess.cell import BOARD_DIMENSIONS, Cell


class CastlingSide(Enum):
    """The two castling directions. Values are the column the rook has to start from."""

    QUEEN_SIDE = 0
    KING_SIDE = BOARD_DIMENSIONS[0] - 1

    @property
    def direction(self) -> int:
        """Which way the king travels along its row"""
        return 1 if self == CastlingSide.KING_SIDE else -1


@dataclass(frozen=True)
class CastlingSquares:
    """
    Store the cells where the king ends up and the rook starts from/ends up in by castling.
    NOTE: the king always travels two cells towards the rook, the rook lands on the cell the king crossed.
    """

    king_to: Cell
    rook_from: Cell
    rook_to: Cell

    @classmethod
    def for_side(cls, king_cell: Cell, side: CastlingSide) -> Self:
        direction = side.direction
        return cls(
            king_to=king_cell.offset(2 * direction, 0),
            rook_from=Cell(side.value, king_cell.y),
            rook_to=king_cell.offset(direction, 0),
        )


def castling_side(king_cell: Cell, to: Cell) -> CastlingSide:
    """A king moving two columns to the right castles king side, to the left queen side."""
    return CastlingSide.KING_SIDE if to.x > king_cell.x else CastlingSide.QUEEN_SIDE
