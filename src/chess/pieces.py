"""Defines the types of chess pieces"""

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Self

from src.chess.cell import Cell


class PieceType(Enum):
    PAWN = auto()
    KNIGHT = auto()
    BISHOP = auto()
    ROOK = auto()
    QUEEN = auto()
    KING = auto()


class Color(Enum):
    WHITE = auto()
    BLACK = auto()

    def opponent(self) -> Self:
        return Color.BLACK if self == Color.WHITE else Color.WHITE


# Order in which the choices are offered to whoever answers a promotion request
PROMOTION_OPTIONS: tuple[PieceType, ...] = (
    PieceType.QUEEN,
    PieceType.KNIGHT,
    PieceType.ROOK,
    PieceType.BISHOP,
)

# Order of the pieces on the back rank, from column 0 to column 7
BACK_RANK: tuple[PieceType, ...] = (
    PieceType.ROOK,
    PieceType.KNIGHT,
    PieceType.BISHOP,
    PieceType.QUEEN,
    PieceType.KING,
    PieceType.BISHOP,
    PieceType.KNIGHT,
    PieceType.ROOK,
)


@dataclass
class Piece:
    type: PieceType
    color: Color
    cell: Cell
    # NOTE: only flipped by the Board once a move is committed (never while a move is being checked)
    has_moved: bool = field(default=False, compare=False)
    is_en_passant_target: bool = field(default=False, compare=False)

    def __str__(self) -> str:
        return f"{self.color.name.lower()} {self.type.name.lower()} at {self.cell}"

    def relocate(self, cell: Cell) -> None:
        """The cell object itself is never changed, the piece simply points to a new one"""
        self.cell = cell

    def promoted_to(self, new_type: PieceType) -> "Piece":
        """The piece replacing this one after a promotion: same color, same cell."""
        return Piece(new_type, self.color, self.cell, has_moved=True)
