"""
Type definitions used across layers
"""

from enum import StrEnum


# --- NOTE The domain (src/chess/pieces.py) has its own Color and PieceType. These are the string versions used at the boundary
# --- (request/response models). The service converts between the two by member name.


class Color(StrEnum):
    WHITE = "white"
    BLACK = "black"


class PieceType(StrEnum):
    PAWN = "pawn"
    KNIGHT = "knight"
    BISHOP = "bishop"
    ROOK = "rook"
    QUEEN = "queen"
    KING = "king"
