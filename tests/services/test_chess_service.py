"""Unit tests for src/services/chess_service.py"""

import pytest

from src.api.models import MoveRequest
from src.chess.cell import Cell
from src.chess.game import Game
from src.chess.pieces import Color as DomainColor
from src.chess.pieces import Piece
from src.chess.pieces import PieceType as DomainPieceType
from src.core.exceptions import GameStateError
from src.core.shared_types import Color, PieceType
from src.services.chess_service import ChessService


@pytest.fixture
def service() -> ChessService:
    return ChessService()


@pytest.fixture
def started_service(service: ChessService) -> ChessService:
    service.new_game()
    return service


def move(from_x: int, from_y: int, to_x: int, to_y: int) -> MoveRequest:
    return MoveRequest(from_x=from_x, from_y=from_y, to_x=to_x, to_y=to_y)


def test_new_game(service: ChessService) -> None:
    response = service.new_game()

    assert response.color_to_move == Color.WHITE
    assert response.turn == 0
    assert response.checked_color is None
    assert len(response.pieces) == 32
    white_king = [
        piece
        for piece in response.pieces
        if piece.type == PieceType.KING and piece.color == Color.WHITE
    ]
    assert len(white_king) == 1
    assert (white_king[0].x, white_king[0].y) == (4, 0)


def test_not_started(service: ChessService) -> None:
    with pytest.raises(GameStateError):
        service.get_game_state()
    with pytest.raises(GameStateError):
        service.make_move(move(4, 1, 4, 3))


def test_make_move(started_service: ChessService) -> None:
    response = started_service.make_move(move(4, 1, 4, 3))

    assert response.accepted
    assert response.color_to_move == Color.BLACK
    assert response.checked_color is None

    state = started_service.get_game_state()
    assert state.turn == 1
    cells = {(piece.x, piece.y) for piece in state.pieces}
    assert (4, 3) in cells
    assert (4, 1) not in cells


def test_rejected_move(started_service: ChessService) -> None:
    response = started_service.make_move(move(4, 1, 4, 4))

    assert not response.accepted
    assert response.color_to_move == Color.WHITE
    assert started_service.get_game_state().turn == 0


def test_check_is_reported() -> None:
    game = Game()
    service = ChessService(game)
    service.new_game()
    game.board.clear()
    for piece_type, color, x, y in [
        (DomainPieceType.KING, DomainColor.WHITE, 4, 0),
        (DomainPieceType.ROOK, DomainColor.WHITE, 0, 3),
        (DomainPieceType.KING, DomainColor.BLACK, 4, 7),
    ]:
        game.board.place_piece(Piece(piece_type, color, Cell(x, y)))

    response = service.make_move(move(0, 3, 4, 3))

    assert response.accepted
    assert response.checked_color == Color.BLACK
    assert service.get_game_state().checked_color == Color.BLACK
