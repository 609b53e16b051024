"""
Geometry/Base movement and capturing/attacking rules

Key idea: Use strategy pattern to define the movement rules for each piece type.
The set of piece types is closed (see PieceType), every table below has exactly one entry per type.

Everything in here is a pure query: no function changes a piece or the board.
Whether a move leaves your own king in check is decided later by the Board.
"""

from dataclasses import dataclass
from typing import Callable, Optional, Protocol

from src.chess.castling import CastlingSide, CastlingSquares, castling_side
from src.chess.cell import BOARD_DIMENSIONS, Cell
from src.chess.pieces import Color, Piece, PieceType


class Board(Protocol):
    """Just the parts the movement strategies need (read-only)"""

    def piece(self, cell: Cell) -> Optional[Piece]: ...
    def is_square_attacked(self, cell: Cell, by_color: Color) -> bool: ...


@dataclass
class Move:
    """
    A move that is legal as far as the shape of the piece is concerned.

    Carries what the Board needs to know to execute it:
    * castling: the king moves two cells and the rook has to follow
    * en_passant_capture: the cell of the pawn taken "in passing" (it is not on the destination cell)
    * is_promotion: the pawn reaches the last row and must be replaced
    """

    from_cell: Cell
    to_cell: Cell
    is_double_step: bool = False
    en_passant_capture: Optional[Cell] = None
    castling: Optional[CastlingSide] = None
    is_promotion: bool = False


# --- SHAPES ---
def is_diagonal(from_cell: Cell, to: Cell) -> bool:
    """Bishops move diagonally: |delta_x| = |delta_y|"""
    return from_cell.distance_x(to) == from_cell.distance_y(to)


def is_straight(from_cell: Cell, to: Cell) -> bool:
    """Rooks move either horizontally or vertically (never both at once)"""
    return (from_cell.distance_x(to) == 0) != (from_cell.distance_y(to) == 0)


def is_knight_jump(from_cell: Cell, to: Cell) -> bool:
    """Knights always move such that |delta_x| * |delta_y| = 2"""
    return from_cell.distance_x(to) * from_cell.distance_y(to) == 2


def is_single_step(from_cell: Cell, to: Cell) -> bool:
    """One cell in any of the 8 directions"""
    return max(from_cell.distance_x(to), from_cell.distance_y(to)) == 1


def is_valid_destination(piece: Piece, to: Cell) -> bool:
    """Shared precondition of every piece type: stay on the board, and actually go somewhere"""
    return to.is_within_bounds() and to != piece.cell


def forward_direction(color: Color) -> int:
    """White moves UP the board, black moves DOWN"""
    return 1 if color == Color.WHITE else -1


def is_last_row(cell: Cell) -> bool:
    """Pawns can only move forward, so no need to check which color reached which row"""
    return cell.y in (0, BOARD_DIMENSIONS[1] - 1)


# --- MOVEMENT RULES ---
def bishop_move(piece: Piece, to: Cell, board: Board) -> Optional[Move]:
    if is_diagonal(piece.cell, to):
        return Move(piece.cell, to)
    return None


def rook_move(piece: Piece, to: Cell, board: Board) -> Optional[Move]:
    if is_straight(piece.cell, to):
        return Move(piece.cell, to)
    return None


def queen_move(piece: Piece, to: Cell, board: Board) -> Optional[Move]:
    """
    The Queen combines the rook moves (horizontal + vertical movements) and bishop moves (diagonal movement)
    """
    if is_diagonal(piece.cell, to) or is_straight(piece.cell, to):
        return Move(piece.cell, to)
    return None


def knight_move(piece: Piece, to: Cell, board: Board) -> Optional[Move]:
    if is_knight_jump(piece.cell, to):
        return Move(piece.cell, to)
    return None


def king_move(piece: Piece, to: Cell, board: Board) -> Optional[Move]:
    """
    The king can move by a single square at the time.

    Castling is modelled as a special king move: two columns along its own row.
    """
    if is_single_step(piece.cell, to):
        return Move(piece.cell, to)

    is_two_columns = piece.cell.distance_x(to) == 2 and piece.cell.distance_y(to) == 0
    if is_two_columns and can_castle(piece, to, board):
        return Move(piece.cell, to, castling=castling_side(piece.cell, to))
    return None


def pawn_move(piece: Piece, to: Cell, board: Board) -> Optional[Move]:
    """
    A pawn:
    - moves by a single square forward, onto an empty square.
    - It can move by two in its first move (both squares need to be empty)
    - takes diagonally
    - takes en passant: diagonally onto an empty square, behind which an opponent pawn just made its double step

    NOTE: distances are counted such that "forward" is positive for both colors.
    """
    forward = forward_direction(piece.color)
    distance_forward = (to.y - piece.cell.y) * forward
    distance_side = piece.cell.distance_x(to)
    target = board.piece(to)

    # pawn pushes
    if distance_side == 0 and distance_forward in (1, 2):
        if target is not None:
            return None
        if distance_forward == 1:
            return _pawn_move(piece, to, target)

        skipped = piece.cell.offset(0, forward)
        if piece.has_moved or board.piece(skipped) is not None:
            return None
        return _pawn_move(piece, to, target, is_double_step=True)

    if not (distance_side == 1 and distance_forward == 1):
        return None

    # pawns take diagonally
    if target is not None:
        if target.color == piece.color:
            return None
        return _pawn_move(piece, to, target)

    # en passant: the pawn to take stands right behind the destination (seen from the moving pawn)
    behind = to.offset(0, -forward)
    passed = board.piece(behind)
    if (
        passed is not None
        and passed.type == PieceType.PAWN
        and passed.color != piece.color
        and passed.is_en_passant_target
    ):
        return Move(piece.cell, to, en_passant_capture=behind)
    return None


def _pawn_move(
    piece: Piece, to: Cell, target: Optional[Piece], is_double_step: bool = False
) -> Move:
    """Pawn move incl. the promotion flag. A king on the destination never triggers a promotion."""
    is_promotion = is_last_row(to) and (
        target is None or target.type != PieceType.KING
    )
    return Move(
        piece.cell, to, is_double_step=is_double_step, is_promotion=is_promotion
    )


# -- STRATEGY PATTERN: MOVEMENT RULES ---
MoveRuleFn = Callable[[Piece, Cell, Board], Optional[Move]]
MOVEMENT_RULES: dict[PieceType, MoveRuleFn] = {
    PieceType.PAWN: pawn_move,
    PieceType.KNIGHT: knight_move,
    PieceType.BISHOP: bishop_move,
    PieceType.ROOK: rook_move,
    PieceType.QUEEN: queen_move,
    PieceType.KING: king_move,
}


def candidate_move(piece: Piece, to: Cell, board: Board) -> Optional[Move]:
    """The move the piece would make to reach `to`, or None if its shape does not allow it."""
    if not is_valid_destination(piece, to):
        return None
    movement_rule = MOVEMENT_RULES[piece.type]
    return movement_rule(piece, to, board)


def can_move(piece: Piece, to: Cell, board: Board) -> bool:
    return candidate_move(piece, to, board) is not None


# --- PATHS ---
def sliding_path(piece: Piece, to: Cell) -> list[Cell]:
    """Every cell the bishop/rook/queen slides over, excluding start and destination"""
    return piece.cell.cells_between(to)


def no_path(piece: Piece, to: Cell) -> list[Cell]:
    """Knights jump, nothing can block them"""
    return []


def king_path(piece: Piece, to: Cell) -> list[Cell]:
    """Only the castling move crosses a cell"""
    if piece.cell.distance_x(to) == 2:
        return [piece.cell.offset(piece.cell.direction_x(to), 0)]
    return []


def pawn_path(piece: Piece, to: Cell) -> list[Cell]:
    """A collision is only possible when the pawn moves forward by two cells"""
    if piece.cell.distance_x(to) == 0 and piece.cell.distance_y(to) == 2:
        return [piece.cell.offset(0, piece.cell.direction_y(to))]
    return []


# --- STRATEGY PATTERN: PATHS ---
PathFn = Callable[[Piece, Cell], list[Cell]]
PATH_RULES: dict[PieceType, PathFn] = {
    PieceType.PAWN: pawn_path,
    PieceType.KNIGHT: no_path,
    PieceType.BISHOP: sliding_path,
    PieceType.ROOK: sliding_path,
    PieceType.QUEEN: sliding_path,
    PieceType.KING: king_path,
}


def path_to(piece: Piece, to: Cell) -> list[Cell]:
    path_rule = PATH_RULES[piece.type]
    return path_rule(piece, to)


# --- CAPTURING RULES / ATTACKING RULES ---
def pawn_attack(piece: Piece, target: Cell) -> bool:
    """
    Pawns take diagonally forward. Whether the target cell is occupied does not matter:
    the cell is under attack either way (relevant for cells a castling king passes over).
    """
    distance_forward = (target.y - piece.cell.y) * forward_direction(piece.color)
    return piece.cell.distance_x(target) == 1 and distance_forward == 1


def knight_attack(piece: Piece, target: Cell) -> bool:
    return is_knight_jump(piece.cell, target)


def bishop_attack(piece: Piece, target: Cell) -> bool:
    return is_diagonal(piece.cell, target)


def rook_attack(piece: Piece, target: Cell) -> bool:
    return is_straight(piece.cell, target)


def queen_attack(piece: Piece, target: Cell) -> bool:
    return is_diagonal(piece.cell, target) or is_straight(piece.cell, target)


def king_attack(piece: Piece, target: Cell) -> bool:
    """A king never attacks by castling"""
    return is_single_step(piece.cell, target)


# --- STRATEGY PATTERN: ATTACKING RULES ---
AttackFn = Callable[[Piece, Cell], bool]
ATTACK_RULES: dict[PieceType, AttackFn] = {
    PieceType.PAWN: pawn_attack,
    PieceType.KNIGHT: knight_attack,
    PieceType.BISHOP: bishop_attack,
    PieceType.ROOK: rook_attack,
    PieceType.QUEEN: queen_attack,
    PieceType.KING: king_attack,
}


def is_attacking(piece: Piece, target: Cell, board: Board) -> bool:
    """
    Is `target` in the line-of-sight of the piece?
    ---

    The shape of the piece must reach the target, and none of the cells in between may be occupied.
    """
    if not is_valid_destination(piece, target):
        return False
    attack_rule = ATTACK_RULES[piece.type]
    if not attack_rule(piece, target):
        return False
    return all(board.piece(cell) is None for cell in path_to(piece, target))


# -- CASTLING MOVES ---
def can_castle(king: Piece, to: Cell, board: Board) -> bool:
    """
    Find out if the king may castle towards `to`
    ---

    **you are allowed to castle if**

    * Your king has not moved yet.
    * On the same row, in the corner on the side of `to`, stands a rook of your color that has not moved yet.
    * You are not currently put in check (you cannot castle out of check).
    * Every cell in between the king and the rook is empty, and none of them is under attack.
    """
    if king.has_moved:
        return False

    squares = CastlingSquares.for_side(king.cell, castling_side(king.cell, to))
    if squares.king_to != to:
        return False

    rook = board.piece(squares.rook_from)
    if rook is None or rook.type != PieceType.ROOK or rook.color != king.color:
        return False
    if rook.has_moved:
        return False

    opponent_color = king.color.opponent()
    if board.is_square_attacked(king.cell, opponent_color):
        return False

    for cell in king.cell.cells_between(squares.rook_from):
        if board.piece(cell) is not None:
            return False
        # probe the cell as if the king was standing on it
        if board.is_square_attacked(cell, opponent_color):
            return False
    return True
