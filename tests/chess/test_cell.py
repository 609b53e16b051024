"""Unit tests for /src/chess/cell.py"""

import pytest

from src.chess.cell import BOARD_DIMENSIONS, Cell


def test_cells_are_values() -> None:
    """Equality and hashing by coordinates: a new Cell(1, 2) finds the piece stored under another Cell(1, 2)"""
    assert Cell(1, 2) == Cell(1, 2)
    assert Cell(1, 2) != Cell(2, 1)
    assert {Cell(1, 2): "piece"}[Cell(1, 2)] == "piece"


def test_cells_are_immutable() -> None:
    cell = Cell(3, 3)
    with pytest.raises(AttributeError):
        cell.x = 4  # type: ignore[misc]


def test_cell_within_bounds() -> None:
    """happy case: cells within the dimensions of the board"""
    for x in range(BOARD_DIMENSIONS[0]):
        for y in range(BOARD_DIMENSIONS[1]):
            assert Cell(x, y).is_within_bounds()


@pytest.mark.parametrize(
    "x, y", [(-1, 0), (0, -1), (BOARD_DIMENSIONS[0], 0), (0, BOARD_DIMENSIONS[1])]
)
def test_cell_out_of_bounds(x: int, y: int) -> None:
    assert not Cell(x, y).is_within_bounds()


@pytest.mark.parametrize(
    "to, distance_x, distance_y",
    [
        (Cell(3, 3), 0, 0),
        (Cell(5, 3), 2, 0),
        (Cell(0, 3), 3, 0),
        (Cell(3, 7), 0, 4),
        (Cell(1, 6), 2, 3),
    ],
)
def test_distances(to: Cell, distance_x: int, distance_y: int) -> None:
    """Distances are absolute, so the same in both directions"""
    cell = Cell(3, 3)
    assert cell.distance_x(to) == distance_x
    assert cell.distance_y(to) == distance_y
    assert to.distance_x(cell) == distance_x
    assert to.distance_y(cell) == distance_y


@pytest.mark.parametrize(
    "to, direction_x, direction_y",
    [
        (Cell(3, 3), 0, 0),
        (Cell(7, 3), 1, 0),
        (Cell(0, 3), -1, 0),
        (Cell(3, 5), 0, 1),
        (Cell(1, 0), -1, -1),
    ],
)
def test_directions(to: Cell, direction_x: int, direction_y: int) -> None:
    cell = Cell(3, 3)
    assert cell.direction_x(to) == direction_x
    assert cell.direction_y(to) == direction_y


def test_offset() -> None:
    assert Cell(3, 3).offset(2, -1) == Cell(5, 2)


@pytest.mark.parametrize(
    "from_cell, to, expected",
    [
        (Cell(0, 0), Cell(0, 3), [Cell(0, 1), Cell(0, 2)]),
        (Cell(5, 2), Cell(2, 2), [Cell(4, 2), Cell(3, 2)]),
        (Cell(1, 1), Cell(4, 4), [Cell(2, 2), Cell(3, 3)]),
        (Cell(4, 1), Cell(1, 4), [Cell(3, 2), Cell(2, 3)]),
        (Cell(1, 1), Cell(2, 2), []),
        (Cell(1, 1), Cell(2, 3), []),  # not on a line
    ],
)
def test_cells_between(from_cell: Cell, to: Cell, expected: list[Cell]) -> None:
    """Ordered from start to destination, endpoints excluded"""
    assert from_cell.cells_between(to) == expected
