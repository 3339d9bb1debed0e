"""
Cell module for Othello.
Defines the two piece colors and a single board slot.
"""
from enum import IntEnum
from typing import Optional


class Piece(IntEnum):
    """Piece colors. Values match the numpy board state encoding."""
    BLACK = 1
    WHITE = 2

    @property
    def opponent(self) -> 'Piece':
        return Piece.WHITE if self is Piece.BLACK else Piece.BLACK

    @property
    def symbol(self) -> str:
        return '●' if self is Piece.BLACK else '○'

    def __str__(self) -> str:
        return self.symbol


class Cell:
    """
    A single slot on the board.

    A cell is empty until its first piece is put on it. Later puts only
    replace the occupant (a flip); a cell never becomes empty again.
    """

    __slots__ = ('_occupant',)

    def __init__(self, occupant: Optional[Piece] = None):
        self._occupant = occupant

    @property
    def empty(self) -> bool:
        return self._occupant is None

    @property
    def occupant(self) -> Optional[Piece]:
        return self._occupant

    def put_piece(self, piece: Piece) -> None:
        self._occupant = piece

    def is_same_color(self, piece: Piece) -> bool:
        """True if the cell holds ``piece``. Always False for an empty cell."""
        return self._occupant is not None and self._occupant == piece

    def copy(self) -> 'Cell':
        return Cell(self._occupant)

    def __eq__(self, other) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return self._occupant == other._occupant

    def __repr__(self) -> str:
        return f"Cell({self._occupant!r})"

    def __str__(self) -> str:
        return ' ' if self.empty else str(self._occupant)
