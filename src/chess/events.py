"""
Notifications from the Board to whoever drives the game (the controller, a view, a test...)

Single subscriber: attaching an observer replaces the previous one. No queue, no retry:
every notification is a plain synchronous call into the observer.
"""

import logging
from typing import Optional, Protocol

from src.chess.pieces import Color, Piece, PieceType
from src.core.exceptions import PromotionError

_LOGGER = logging.getLogger(__name__)


class EngineObserver(Protocol):
    """What the Board tells the outside world"""

    def piece_added(self, kind: PieceType, color: Color, x: int, y: int) -> None: ...
    def piece_removed(self, x: int, y: int) -> None: ...
    def turn_advanced(self) -> None: ...
    def promotion_requested(
        self, color: Color, x: int, y: int, candidates: tuple[PieceType, ...]
    ) -> PieceType:
        """Blocking: must answer with one of the candidates"""
        ...

    def king_in_check(self, color: Color) -> None: ...


class EventChannel:
    """Relay between the Board and its (at most one) observer."""

    def __init__(self) -> None:
        self._observer: Optional[EngineObserver] = None

    @property
    def observer(self) -> Optional[EngineObserver]:
        return self._observer

    def attach(self, observer: EngineObserver) -> None:
        self._observer = observer

    def detach(self) -> None:
        self._observer = None

    # -- ONE-WAY NOTIFICATIONS --
    # NOTE: nobody listening is fine, the board state is authoritative anyway.
    def piece_added(self, piece: Piece) -> None:
        _LOGGER.debug("notify piece added: %s", piece)
        if self._observer is not None:
            self._observer.piece_added(
                piece.type, piece.color, piece.cell.x, piece.cell.y
            )

    def piece_removed(self, piece: Piece) -> None:
        _LOGGER.debug("notify piece removed: %s", piece)
        if self._observer is not None:
            self._observer.piece_removed(piece.cell.x, piece.cell.y)

    def turn_advanced(self) -> None:
        _LOGGER.debug("notify turn advanced")
        if self._observer is not None:
            self._observer.turn_advanced()

    def king_in_check(self, color: Color) -> None:
        _LOGGER.debug("notify %s king in check", color.name.lower())
        if self._observer is not None:
            self._observer.king_in_check(color)

    # -- REQUEST / RESPONSE --
    def request_promotion(
        self, pawn: Piece, candidates: tuple[PieceType, ...]
    ) -> PieceType:
        """Ask the observer which piece replaces the pawn. This one needs an answer, so an observer is mandatory."""
        if self._observer is None:
            raise PromotionError(
                f"No observer attached to answer the promotion of {pawn}"
            )

        _LOGGER.debug("request promotion for %s", pawn)
        return self._observer.promotion_requested(
            pawn.color, pawn.cell.x, pawn.cell.y, candidates
        )
