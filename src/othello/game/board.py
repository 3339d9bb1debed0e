"""
Board module for Othello.
Handles the board state, move validation, capture flips and end of game detection.
"""
import logging
from typing import Iterator, List, Sequence, Tuple

import numpy as np

from .cell import Cell, Piece

logger = logging.getLogger(__name__)


class Board:
    """
    Represents the Othello game board as an 8x8 grid of cells.
    Cells are addressed by zero-based (row, col) pairs.
    """

    # Board dimensions
    SIZE = 8

    # Directions as (d_row, d_col): N, S, W, E, NW, NE, SW, SE
    DIRECTIONS = (
        (-1, 0),
        (1, 0),
        (0, -1),
        (0, 1),
        (-1, -1),
        (-1, 1),
        (1, -1),
        (1, 1),
    )

    _SYMBOLS = {'.': None, 'B': Piece.BLACK, 'W': Piece.WHITE}

    def __init__(self):
        """Initialize a board with the standard start position."""
        self._cells = [[Cell() for _ in range(self.SIZE)] for _ in range(self.SIZE)]
        self._cells[3][3].put_piece(Piece.WHITE)
        self._cells[4][4].put_piece(Piece.WHITE)
        self._cells[3][4].put_piece(Piece.BLACK)
        self._cells[4][3].put_piece(Piece.BLACK)

    @classmethod
    def from_rows(cls, rows: Sequence[str]) -> 'Board':
        """
        Build a board from an explicit layout.

        Args:
            rows: Eight strings of eight characters each, 'B' for black,
                'W' for white and '.' for an empty cell. Spaces are ignored.

        Returns:
            A new board holding exactly that layout
        """
        rows = [row.replace(' ', '') for row in rows]
        if len(rows) != cls.SIZE or any(len(row) != cls.SIZE for row in rows):
            raise ValueError(f"Layout must be {cls.SIZE} rows of {cls.SIZE} cells")

        board = cls()
        for i, row in enumerate(rows):
            for j, char in enumerate(row):
                if char not in cls._SYMBOLS:
                    raise ValueError(f"Unknown cell symbol {char!r} at ({i}, {j})")
                board._cells[i][j] = Cell(cls._SYMBOLS[char])
        return board

    def copy(self) -> 'Board':
        """Create a deep copy of the board."""
        new_board = Board.__new__(Board)
        new_board._cells = [[cell.copy() for cell in row] for row in self._cells]
        return new_board

    def _check_bounds(self, row: int, col: int) -> None:
        if not (0 <= row < self.SIZE and 0 <= col < self.SIZE):
            raise ValueError(f"Coordinates ({row}, {col}) are outside the {self.SIZE}x{self.SIZE} board")

    def cell(self, row: int, col: int) -> Cell:
        """Get a copy of the cell at (row, col). The board keeps its own cells."""
        self._check_bounds(row, col)
        return self._cells[row][col].copy()

    def _captures_in_direction(self, piece: Piece, row: int, col: int,
                               d_row: int, d_col: int) -> List[Tuple[int, int]]:
        """
        Walk from (row, col) in one direction and collect the bracketed run.

        Returns the opponent cells that a piece placed at (row, col) would
        flip in this direction, or an empty list if the run is not closed by
        one of the mover's own pieces.
        """
        run = []
        r, c = row + d_row, col + d_col
        while 0 <= r < self.SIZE and 0 <= c < self.SIZE:
            cell = self._cells[r][c]
            if cell.empty:
                return []
            if cell.is_same_color(piece):
                return run
            run.append((r, c))
            r += d_row
            c += d_col
        # Ran off the edge without an anchor
        return []

    def _captures(self, piece: Piece, row: int, col: int) -> List[Tuple[int, int]]:
        """All cells flipped by placing ``piece`` at (row, col), empty if illegal."""
        if not self._cells[row][col].empty:
            return []
        flipped = []
        for d_row, d_col in self.DIRECTIONS:
            flipped.extend(self._captures_in_direction(piece, row, col, d_row, d_col))
        return flipped

    def is_valid_move(self, piece: Piece, row: int, col: int) -> bool:
        """
        Check if placing ``piece`` at (row, col) is legal.

        A move is legal when the target cell is empty and, in at least one of
        the eight directions, a run of opponent pieces is closed by one of the
        mover's own pieces.
        """
        self._check_bounds(row, col)
        if not self._cells[row][col].empty:
            return False
        for d_row, d_col in self.DIRECTIONS:
            if self._captures_in_direction(piece, row, col, d_row, d_col):
                return True
        return False

    def place_piece(self, piece: Piece, row: int, col: int) -> bool:
        """
        Place a piece and flip every bracketed opponent run.

        Illegal moves are ignored and leave the board untouched.

        Args:
            piece: Color of the piece to place
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the piece was placed, False if the move was illegal
        """
        self._check_bounds(row, col)
        # All runs are measured before any of them is flipped
        flipped = self._captures(piece, row, col)
        if not flipped:
            return False

        self._cells[row][col].put_piece(piece)
        for r, c in flipped:
            self._cells[r][c].put_piece(piece)

        logger.debug("%s placed at (%d, %d), flipped %d", piece.name, row, col, len(flipped))
        return True

    def earned_pieces_count(self, piece: Piece, row: int, col: int) -> int:
        """
        Count the opponent pieces a move would flip, without making it.

        Returns:
            int: Number of flipped pieces, 0 if the move is illegal
        """
        self._check_bounds(row, col)
        return len(self._captures(piece, row, col))

    def legal_moves(self, piece: Piece) -> List[Tuple[int, int]]:
        """
        Get all legal moves for the given piece.

        Returns:
            List of (row, col) tuples in row-major order
        """
        return [(i, j)
                for i in range(self.SIZE)
                for j in range(self.SIZE)
                if self.is_valid_move(piece, i, j)]

    def has_no_legal_moves(self, piece: Piece) -> bool:
        """Check if the piece has no legal move, i.e. must pass."""
        return not self.legal_moves(piece)

    def _all_single_color(self) -> bool:
        colors = {cell.occupant for cell in self._iter_cells() if not cell.empty}
        return len(colors) == 1

    def _empty_exists(self) -> bool:
        return any(cell.empty for cell in self._iter_cells())

    def is_game_finished(self) -> bool:
        """
        Check if the game is over.

        The game ends when every piece on the board has the same color, when
        no empty cell remains, or when neither color has a legal move.
        Only occupied cells take part in the single color check.
        """
        if self._all_single_color():
            return True
        if not self._empty_exists():
            return True
        if self.has_no_legal_moves(Piece.BLACK) and self.has_no_legal_moves(Piece.WHITE):
            return True
        return False

    def color_count(self, piece: Piece) -> int:
        """Count the cells occupied by ``piece``."""
        return sum(1 for cell in self._iter_cells() if cell.is_same_color(piece))

    def empty_count(self) -> int:
        return sum(1 for cell in self._iter_cells() if cell.empty)

    def occupied_count(self) -> int:
        return self.SIZE * self.SIZE - self.empty_count()

    def get_score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.color_count(Piece.BLACK), self.color_count(Piece.WHITE)

    def get_board_state(self) -> np.ndarray:
        """
        Get the current board state as a numpy array.

        Returns:
            2D int8 numpy array, 0 for empty, 1 for black and 2 for white
        """
        state = np.zeros((self.SIZE, self.SIZE), dtype=np.int8)
        for i, row in enumerate(self._cells):
            for j, cell in enumerate(row):
                if not cell.empty:
                    state[i, j] = int(cell.occupant)
        return state

    def _iter_cells(self) -> Iterator[Cell]:
        for row in self._cells:
            yield from row

    def __iter__(self) -> Iterator[Cell]:
        """Iterate over copies of all cells in row-major order."""
        for cell in self._iter_cells():
            yield cell.copy()

    def __eq__(self, other) -> bool:
        if not isinstance(other, Board):
            return NotImplemented
        return self._cells == other._cells

    def __str__(self) -> str:
        """Return the console rendering of the board."""
        border = "  " + "-" * (self.SIZE * 4 + 1)
        lines = ["    " + "   ".join(chr(ord('A') + j) for j in range(self.SIZE))]
        for i, row in enumerate(self._cells):
            lines.append(border)
            lines.append(f"{i + 1} | " + " | ".join(str(cell) for cell in row) + " |")
        lines.append(border)
        return "\n".join(lines)
