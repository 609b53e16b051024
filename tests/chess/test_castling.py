"""unit tests for src/chess/castling.py"""

import pytest

from src.chess.castling import CastlingSide, CastlingSquares, castling_side
from src.chess.cell import Cell


@pytest.mark.parametrize("row", [0, 7])
def test_king_side_castling_squares(row: int) -> None:
    """King from e to g, rook from h to f"""
    squares = CastlingSquares.for_side(Cell(4, row), CastlingSide.KING_SIDE)
    assert squares.king_to == Cell(6, row)
    assert squares.rook_from == Cell(7, row)
    assert squares.rook_to == Cell(5, row)


@pytest.mark.parametrize("row", [0, 7])
def test_queen_side_castling_squares(row: int) -> None:
    """King from e to c, rook from a to d"""
    squares = CastlingSquares.for_side(Cell(4, row), CastlingSide.QUEEN_SIDE)
    assert squares.king_to == Cell(2, row)
    assert squares.rook_from == Cell(0, row)
    assert squares.rook_to == Cell(3, row)


def test_castling_side_from_destination() -> None:
    assert castling_side(Cell(4, 0), Cell(6, 0)) == CastlingSide.KING_SIDE
    assert castling_side(Cell(4, 0), Cell(2, 0)) == CastlingSide.QUEEN_SIDE


def test_castling_direction() -> None:
    assert CastlingSide.KING_SIDE.direction == 1
    assert CastlingSide.QUEEN_SIDE.direction == -1
