"""
Shared fixtures: a recording observer standing in for the controller, and boards built from a handful of pieces.
"""

from typing import Any, Callable

import pytest

from src.chess.board import Board
from src.chess.cell import Cell
from src.chess.pieces import Color, Piece, PieceType


class RecordingObserver:
    """Stand-in for the controller: records every notification, answers promotions with a preset choice."""

    def __init__(self, promotion_choice: Any = PieceType.QUEEN) -> None:
        self.promotion_choice = promotion_choice
        self.added: list[tuple[PieceType, Color, int, int]] = []
        self.removed: list[tuple[int, int]] = []
        self.promotion_requests: list[tuple[Color, int, int, tuple[PieceType, ...]]] = []
        self.checks: list[Color] = []
        self.turns = 0

    def piece_added(self, kind: PieceType, color: Color, x: int, y: int) -> None:
        self.added.append((kind, color, x, y))

    def piece_removed(self, x: int, y: int) -> None:
        self.removed.append((x, y))

    def turn_advanced(self) -> None:
        self.turns += 1

    def promotion_requested(
        self, color: Color, x: int, y: int, candidates: tuple[PieceType, ...]
    ) -> PieceType:
        self.promotion_requests.append((color, x, y, candidates))
        return self.promotion_choice

    def king_in_check(self, color: Color) -> None:
        self.checks.append(color)

    def reset(self) -> None:
        """Forget what happened while setting up the board"""
        self.added.clear()
        self.removed.clear()
        self.promotion_requests.clear()
        self.checks.clear()
        self.turns = 0


@pytest.fixture
def observer() -> RecordingObserver:
    return RecordingObserver()


@pytest.fixture
def board(observer: RecordingObserver) -> Board:
    """An empty board, with the recording observer attached"""
    return Board(observer)


@pytest.fixture
def board_with(
    board: Board, observer: RecordingObserver
) -> Callable[..., Board]:
    """Call the inner function with the pieces to place, given as (piece type, color, x, y)"""

    def _create_board(*pieces: tuple[PieceType, Color, int, int]) -> Board:
        for piece_type, color, x, y in pieces:
            board.place_piece(Piece(piece_type, color, Cell(x, y)))
        observer.reset()
        return board

    return _create_board


@pytest.fixture
def make_observer() -> Callable[..., RecordingObserver]:
    """For tests that need more than one observer, or a different promotion answer"""
    return RecordingObserver
