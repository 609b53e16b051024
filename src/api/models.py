"""Requests and Response models"""

from typing import Optional

from pydantic import BaseModel, ValidationInfo, field_validator

from src.chess.cell import BOARD_DIMENSIONS
from src.core.exceptions import InvalidRequestError
from src.core.shared_types import Color, PieceType


# --- REQUEST MODELS ---
class MoveRequest(BaseModel):
    """Cells are given as plain coordinates, (0, 0) being the bottom left corner seen from white's side."""

    from_x: int
    from_y: int
    to_x: int
    to_y: int

    @field_validator(*["from_x", "from_y", "to_x", "to_y"])
    @classmethod
    def validate_coordinate(cls, value: int, info: ValidationInfo) -> int:
        axis_size = (
            BOARD_DIMENSIONS[0]
            if str(info.field_name).endswith("_x")
            else BOARD_DIMENSIONS[1]
        )
        if not 0 <= value < axis_size:
            raise InvalidRequestError(
                f"Cannot interpret {info.field_name}: {value!r} as a cell on the board (0 - {axis_size - 1})."
            )
        return value


# --- RESPONSE MODELS ---
class PieceModel(BaseModel):
    type: PieceType
    color: Color
    x: int
    y: int


class GameResponse(BaseModel):
    color_to_move: Color
    turn: int
    checked_color: Optional[Color]
    pieces: list[PieceModel]


class MoveResponse(BaseModel):
    accepted: bool
    color_to_move: Color
    checked_color: Optional[Color]
