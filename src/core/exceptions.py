"""
Exceptions raised across layers.

Illegal moves are NOT exceptions: the Board answers them with `False`.
What ends up here are requests that cannot be interpreted, or states the engine should never be in.
"""


class GameError(Exception):
    """Base class for everything the chess application raises on purpose."""


class InvalidRequestError(GameError):
    """Input at the boundary (request models) could not be interpreted."""


class GameStateError(GameError):
    """The controller was asked to do something its current state does not allow."""


class BoardStateError(GameError):
    """
    Invariant violation inside the Board.

    A piece missing from the mapping, an occupied square when placing, a `None` cell, a move started while another is still running...
    These point at a bug in the caller or in the Board itself, so the operation is aborted instead of continuing on a corrupted board.
    """


class PromotionError(BoardStateError):
    """The promotion callout was unanswered, or answered with a piece type that was not offered."""
