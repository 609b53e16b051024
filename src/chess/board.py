"""
The Game board implements all rules that effect the `position` (in chess: the configuration of pieces on the board)

It is the only owner of the position: every change goes through one of its methods, and every change is told to the observer.
"""

import logging
from dataclasses import dataclass
from typing import Optional

from src.chess.castling import CastlingSquares
from src.chess.cell import BOARD_DIMENSIONS, Cell
from src.chess.events import EngineObserver, EventChannel
from src.chess.moves import Move, candidate_move, is_attacking, path_to
from src.chess.pieces import BACK_RANK, PROMOTION_OPTIONS, Color, Piece, PieceType
from src.core.exceptions import BoardStateError, PromotionError

_LOGGER = logging.getLogger(__name__)


@dataclass
class MoveSnapshot:
    """
    Everything needed to put the board back the way it was before a tentative move.
    ---

    Restoring the snapshot (rather than playing the inverse move) guarantees the position is identical afterwards.
    """

    piece: Piece
    from_cell: Cell
    to_cell: Cell
    captured: Optional[Piece] = None
    rook: Optional[Piece] = None
    rook_from: Optional[Cell] = None
    promoted: Optional[Piece] = None


class Board:
    """
    Owns the mapping cell -> piece, and the two kings.
    ---

    * at most one piece per cell, and every piece's `cell` equals its key in `position`
    * the kings are also tracked separately (O(1) check detection). They get repositioned, never captured.
    * `attacked` is the sticky "was already in check" flag per king
    """

    def __init__(self, observer: Optional[EngineObserver] = None) -> None:
        self.position: dict[Cell, Piece] = {}
        self.kings: dict[Color, Piece] = {}
        self.attacked: dict[Color, bool] = {color: False for color in Color}
        self.events = EventChannel()
        self._move_in_progress = False
        if observer is not None:
            self.events.attach(observer)

    def attach(self, observer: EngineObserver) -> None:
        """Replace whoever is currently listening"""
        if self.events.observer is not None:
            _LOGGER.debug("Replacing observer %r", self.events.observer)
        self.events.attach(observer)

    # -- SETTING UP --
    def initialize_standard_position(self) -> None:
        """Clear the board and put the 32 pieces on their starting cells"""
        self.clear()
        top_row = BOARD_DIMENSIONS[1] - 1
        for color in Color:
            back_row = 0 if color == Color.WHITE else top_row
            pawn_row = 1 if color == Color.WHITE else top_row - 1
            for x, piece_type in enumerate(BACK_RANK):
                self.place_piece(Piece(piece_type, color, Cell(x, back_row)))
            for x in range(BOARD_DIMENSIONS[0]):
                self.place_piece(Piece(PieceType.PAWN, color, Cell(x, pawn_row)))
        _LOGGER.info("Board set up in the standard starting position")

    def init(self) -> None:
        """Alias: the controller calls it this way when starting a new game"""
        self.initialize_standard_position()

    def clear(self) -> None:
        """Remove every piece (the observer is told about each one) and forget the kings."""
        for cell in list(self.position):
            self._take(cell)
        self.kings.clear()
        self.attacked = {color: False for color in Color}

    def place_piece(self, piece: Piece) -> None:
        """
        Put a piece on its cell.

        A king placed this way becomes THE king of its color. Placing a second one is a mistake of the caller.
        """
        if piece.cell is None:
            raise BoardStateError(f"Cannot place {piece.type.name} without a cell")
        if not piece.cell.is_within_bounds():
            raise BoardStateError(f"Cannot place {piece}: outside of the board")
        if piece.cell in self.position:
            raise BoardStateError(
                f"Cannot place {piece}: occupied by {self.position[piece.cell]}"
            )
        if piece.type == PieceType.KING and piece.color in self.kings:
            raise BoardStateError(f"Cannot place {piece}: already have a king")

        self._put(piece, piece.cell)
        if piece.type == PieceType.KING:
            self.kings[piece.color] = piece

    def remove_piece(self, cell: Cell) -> Piece:
        """Take the piece off the board, and return it."""
        piece = self._take(cell)
        if self.kings.get(piece.color) is piece:
            del self.kings[piece.color]
        return piece

    # -- QUERIES --
    def piece(self, cell: Cell) -> Optional[Piece]:
        return self.position.get(cell)

    def pieces(self) -> list[Piece]:
        return list(self.position.values())

    def locate_color(self, color: Color) -> list[Cell]:
        return [
            cell for cell, piece in self.position.items() if piece.color == color
        ]

    def king(self, color: Color) -> Optional[Piece]:
        return self.kings.get(color)

    def is_square_attacked(self, cell: Cell, by_color: Color) -> bool:
        """Is there any piece of the given color that has the cell in its line-of-sight?"""
        return any(
            is_attacking(piece, cell, self)
            for piece in self.pieces()
            if piece.color == by_color
        )

    def is_check(self, color: Color) -> bool:
        """The king of the given color is attacked by an opponent's piece. No king, no check."""
        king = self.kings.get(color)
        if king is None:
            return False
        return self.is_square_attacked(king.cell, color.opponent())

    # -- MOVING --
    def request_move(
        self, from_x: int, from_y: int, to_x: int, to_y: int, moving_color: Color
    ) -> bool:
        """Controller entry point (plain coordinates). True: the move was legal and is now on the board."""
        return self.move(Cell(from_x, from_y), Cell(to_x, to_y), moving_color)

    def castle(self, color: Color, to: Cell) -> bool:
        """Castle the king of the given color towards `to` (the cell the king ends up on)."""
        king = self.kings.get(color)
        if king is None:
            return False
        return self.move(king.cell, to, color)

    def move(self, from_cell: Cell, to_cell: Cell, moving_color: Color) -> bool:
        """
        Attempt to make a move
        -----

        An illegal move returns False and leaves the board exactly as it was.
        Note the board does not know whose turn it is: that is the controller's business.
        """
        if from_cell is None or to_cell is None:
            raise BoardStateError("The from/to cell of a move cannot be None")
        if self._move_in_progress:
            raise BoardStateError(
                "A move was requested while another one is still being processed"
            )

        self._move_in_progress = True
        try:
            return self._move(from_cell, to_cell, moving_color)
        finally:
            self._move_in_progress = False

    def _move(self, from_cell: Cell, to_cell: Cell, moving_color: Color) -> bool:
        """
        1. basic checks: is there a piece of yours, is the destination not yours, not a king
        2. does the shape of the piece allow it, is nothing in the way
        3. make the move tentatively
        4. did you put (or leave) yourself in check? --> undo
        5. promote the pawn if needed
        6. did you give check to a king that was already in check? --> undo
        7. commit
        """
        piece = self.piece(from_cell)
        if piece is None:
            return self._reject(from_cell, to_cell, "no piece to move")

        target = self.piece(to_cell)
        if target is not None and target.color == moving_color:
            return self._reject(from_cell, to_cell, "cannot capture your own piece")
        if piece.color != moving_color:
            return self._reject(from_cell, to_cell, f"{piece} is not yours")
        if target is not None and target.type == PieceType.KING:
            return self._reject(from_cell, to_cell, "a king cannot be captured")

        move = candidate_move(piece, to_cell, self)
        if move is None:
            return self._reject(from_cell, to_cell, f"{piece} cannot move that way")
        if not self._is_path_clear(path_to(piece, to_cell)):
            return self._reject(from_cell, to_cell, "path is obstructed")

        snapshot = self._apply(piece, move)

        if self.is_check(moving_color):
            self._revert(snapshot)
            return self._reject(from_cell, to_cell, "would leave your king in check")

        if move.is_promotion:
            try:
                self._promote(snapshot)
            except Exception:
                # whatever the observer raised, the board must not stay half-moved
                self._revert(snapshot)
                raise

        if not self._resolve_check(moving_color):
            self._revert(snapshot)
            return self._reject(
                from_cell, to_cell, "opponent's king was already in check"
            )

        self._commit(snapshot, move)
        return True

    def _reject(self, from_cell: Cell, to_cell: Cell, reason: str) -> bool:
        _LOGGER.debug("Move %s -> %s rejected: %s", from_cell, to_cell, reason)
        return False

    def _is_path_clear(self, path: list[Cell]) -> bool:
        return all(self.piece(cell) is None for cell in path)

    def _apply(self, piece: Piece, move: Move) -> MoveSnapshot:
        """Make the move on the board (captures, castling rook incl.) and remember how to undo it."""
        snapshot = MoveSnapshot(
            piece=piece, from_cell=piece.cell, to_cell=move.to_cell
        )

        capture_cell = move.en_passant_capture or move.to_cell
        if self.piece(capture_cell) is not None:
            snapshot.captured = self._take(capture_cell)

        if move.castling is not None:
            squares = CastlingSquares.for_side(piece.cell, move.castling)
            rook = self.piece(squares.rook_from)
            if rook is None:
                raise BoardStateError(
                    f"No rook to castle with on {squares.rook_from}"
                )
            snapshot.rook = rook
            snapshot.rook_from = squares.rook_from
            self._relocate(piece, squares.king_to)
            self._relocate(rook, squares.rook_to)
        else:
            self._relocate(piece, move.to_cell)
        return snapshot

    def _revert(self, snapshot: MoveSnapshot) -> None:
        """Restore the board from the snapshot, in the reverse order of `_apply`"""
        if snapshot.promoted is not None:
            # the promoted piece was swapped in silently, swap the pawn back the same way
            self.position[snapshot.to_cell] = snapshot.piece

        if snapshot.rook is not None and snapshot.rook_from is not None:
            self._relocate(snapshot.rook, snapshot.rook_from)
        self._relocate(snapshot.piece, snapshot.from_cell)

        if snapshot.captured is not None:
            self._put(snapshot.captured, snapshot.captured.cell)

    def _promote(self, snapshot: MoveSnapshot) -> None:
        """
        Replace the pawn by the piece the observer chose.
        ---

        NOTE: no add/remove notification. The replacement is the same occupant as far as the observer is concerned
        (it was the one choosing it after all).
        """
        pawn = snapshot.piece
        choice = self.events.request_promotion(pawn, PROMOTION_OPTIONS)
        if choice not in PROMOTION_OPTIONS:
            raise PromotionError(
                f"Cannot promote {pawn} to {choice!r}. Pick one from {', '.join(pt.name for pt in PROMOTION_OPTIONS)}"
            )

        promoted = pawn.promoted_to(choice)
        self.position[pawn.cell] = promoted
        snapshot.promoted = promoted
        _LOGGER.info("Promoted %s to %s", pawn, choice.name.lower())

    def _resolve_check(self, moving_color: Color) -> bool:
        """
        After the move: is the opponent's king in check?
        ---

        * No: nobody is attacked anymore.
        * Yes, and it already was before this move: the move is illegal.
        * Yes, newly: flag it and tell the observer.

        (The mover's own king was already verified to be safe.)
        """
        opponent_color = moving_color.opponent()
        if not self.is_check(opponent_color):
            self.attacked = {color: False for color in Color}
            return True

        if self.attacked[opponent_color]:
            return False

        self.attacked[opponent_color] = True
        self.attacked[moving_color] = False
        _LOGGER.info("%s king is in check", opponent_color.name.lower())
        self.events.king_in_check(opponent_color)
        return True

    def _commit(self, snapshot: MoveSnapshot, move: Move) -> None:
        """
        The move stays on the board: only now do the pieces remember they moved.
        ---

        The en passant window of the opponent's pawns closes (they had exactly one reply to use it).
        """
        moved = snapshot.promoted or snapshot.piece
        moved.has_moved = True
        moved.is_en_passant_target = move.is_double_step
        if snapshot.rook is not None:
            snapshot.rook.has_moved = True

        opponent_color = snapshot.piece.color.opponent()
        for cell in self.locate_color(opponent_color):
            self.position[cell].is_en_passant_target = False

        if move.castling is not None:
            _LOGGER.info("%s castled (%s)", moved, move.castling.name.lower())
        else:
            _LOGGER.info("Moved %s from %s", moved, snapshot.from_cell)
        self.events.turn_advanced()

    # -- LOW LEVEL POSITION UPDATES (always notified) --
    def _take(self, cell: Cell) -> Piece:
        piece = self.position.pop(cell, None)
        if piece is None:
            raise BoardStateError(f"Couldn't find the piece to remove on {cell}")
        self.events.piece_removed(piece)
        return piece

    def _put(self, piece: Piece, cell: Cell) -> None:
        piece.relocate(cell)
        self.position[cell] = piece
        self.events.piece_added(piece)

    def _relocate(self, piece: Piece, to: Cell) -> None:
        if self.position.get(piece.cell) is not piece:
            raise BoardStateError(f"{piece} is not on the board where it claims to be")
        self._take(piece.cell)
        self._put(piece, to)
