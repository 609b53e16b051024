"""Orchestration of communication from the request models to the chess engine (and the reverse direction)."""

from typing import Optional

from src.api.models import GameResponse, MoveRequest, MoveResponse, PieceModel
from src.chess.game import Game, Status
from src.chess.pieces import Color as DomainColor
from src.core.exceptions import GameStateError
from src.core.shared_types import Color, PieceType


class ChessService:
    """Orchestration of layers for chess game."""

    def __init__(self, game: Optional[Game] = None) -> None:
        self.game = game if game is not None else Game()

    # -- Request handling logic ---
    def new_game(self) -> GameResponse:
        """Set up the pieces and hand the turn to white."""
        self.game.new_game()
        return self._create_game_response()

    def make_move(self, request: MoveRequest) -> MoveResponse:
        """Make a move attempt for the player whose turn it is."""
        self._assert_in_progress()

        accepted = self.game.request_move(
            request.from_x, request.from_y, request.to_x, request.to_y
        )
        return MoveResponse(
            accepted=accepted,
            color_to_move=self._to_color(self.game.color_to_move),
            checked_color=self._to_optional_color(self.game.checked_color),
        )

    def get_game_state(self) -> GameResponse:
        """
        Retrieve current game state.
        ----
        Used by a frontend to redraw the whole board, or to check whose turn it is.
        """
        self._assert_in_progress()
        return self._create_game_response()

    # -- Internal helpers --
    def _assert_in_progress(self) -> None:
        if self.game.status != Status.IN_PROGRESS:
            raise GameStateError(
                f"No game in progress (status: {self.game.status}). Start a new game first."
            )

    def _create_game_response(self) -> GameResponse:
        """Convert the domain objects into a GameResponse"""
        pieces = [
            PieceModel(
                type=PieceType[piece.type.name],
                color=self._to_color(piece.color),
                x=piece.cell.x,
                y=piece.cell.y,
            )
            for piece in self.game.board.pieces()
        ]
        return GameResponse(
            color_to_move=self._to_color(self.game.color_to_move),
            turn=self.game.turn,
            checked_color=self._to_optional_color(self.game.checked_color),
            pieces=pieces,
        )

    def _to_color(self, color: DomainColor) -> Color:
        return Color[color.name]

    def _to_optional_color(self, color: Optional[DomainColor]) -> Optional[Color]:
        return Color[color.name] if color is not None else None
