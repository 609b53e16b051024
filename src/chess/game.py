"""
The Game class will be the entrypoint into the domain layer for the service layer (and for any view).
It keeps track of whose turn it is and forwards move requests to the Board.
In the other direction, it listens to the Board and passes what changed on to the view.
"""

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Optional, Protocol

from src.chess.board import Board
from src.chess.pieces import Color, PieceType
from src.core.exceptions import GameStateError

_LOGGER = logging.getLogger(__name__)


class Status(Enum):
    NOT_STARTED = auto()
    IN_PROGRESS = auto()


class ChessView(Protocol):
    """Whatever displays the game. Rendering is none of the engine's business, this is all it needs."""

    def put_piece(self, kind: PieceType, color: Color, x: int, y: int) -> None: ...
    def remove_piece(self, x: int, y: int) -> None: ...
    def display_message(self, message: str) -> None: ...
    def ask_promotion(
        self, title: str, question: str, choices: tuple[PieceType, ...]
    ) -> PieceType: ...


@dataclass
class Game:
    # --- DOMAIN LAYER API CALLED BY SERVICE / VIEW ---

    view: Optional[ChessView] = None
    turn: int = 0
    status: Status = Status.NOT_STARTED
    checked_color: Optional[Color] = None
    board: Board = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self.board = Board(observer=self)

    @property
    def color_to_move(self) -> Color:
        """White plays the even turns"""
        return Color.WHITE if self.turn % 2 == 0 else Color.BLACK

    def start(self, view: ChessView) -> None:
        """Connect a view. Replaces the previous one, if any."""
        self.view = view

    def new_game(self) -> None:
        """
        (Re)start from the standard starting position.
        ----

        The board tells the view about every piece it removes and places, so the view is in sync afterwards.
        """
        self.board.clear()
        self.turn = 0
        self.checked_color = None
        self.board.initialize_standard_position()
        self._change_status(Status.IN_PROGRESS)
        _LOGGER.info("New game started")
        self._display_turn()

    def request_move(self, from_x: int, from_y: int, to_x: int, to_y: int) -> bool:
        """
        Attempt a move for the player whose turn it is
        -----

        True: the move was legal and is applied (the turn then already advanced).
        False: nothing changed, same player to move.
        """
        if self.status != Status.IN_PROGRESS:
            raise GameStateError(f"Game is not in progress. status: {self.status}")

        # a rejected (or aborted) move changes nothing, so whoever was in check still is
        previous_check = self.checked_color
        self.checked_color = None
        accepted = False
        try:
            accepted = self.board.request_move(
                from_x, from_y, to_x, to_y, moving_color=self.color_to_move
            )
        finally:
            if not accepted:
                self.checked_color = previous_check
        return accepted

    # -- BOARD OBSERVER ---
    def piece_added(self, kind: PieceType, color: Color, x: int, y: int) -> None:
        if self.view is not None:
            self.view.put_piece(kind, color, x, y)

    def piece_removed(self, x: int, y: int) -> None:
        if self.view is not None:
            self.view.remove_piece(x, y)

    def turn_advanced(self) -> None:
        """Castling also counts as a single turn: the board only reports it once."""
        self.turn += 1
        self._display_turn()

    def promotion_requested(
        self, color: Color, x: int, y: int, candidates: tuple[PieceType, ...]
    ) -> PieceType:
        """
        Ask the view which piece the pawn becomes. Without a view: a queen, what else.

        The board swaps the pieces without telling the view, so the view gets updated here.
        """
        if self.view is None:
            return PieceType.QUEEN

        choice = self.view.ask_promotion(
            "Promotion", "Choose a piece to promote", candidates
        )
        if choice in candidates:
            self.view.put_piece(choice, color, x, y)
        return choice

    def king_in_check(self, color: Color) -> None:
        self.checked_color = color
        self._display(f"{color.name.lower()} king is in check")

    # -- PRIVATE HELPERS ---
    def _change_status(self, new_status: Status) -> None:
        self.status = new_status

    def _display_turn(self) -> None:
        self._display(f"{self.color_to_move.name.lower()} turn")

    def _display(self, message: str) -> None:
        _LOGGER.debug("display: %s", message)
        if self.view is not None:
            self.view.display_message(message)
