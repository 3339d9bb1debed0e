"""
Players for Othello.
A player chooses the next move; legality is enforced by the game.
"""
from abc import ABC, abstractmethod
from typing import Callable, Optional, Tuple

from ..game.board import Board
from ..game.cell import Piece
from ..game.notation import InvalidMoveNotation, parse_move
from ..policy import ZonePolicy


class Player(ABC):
    """Base class for a player holding one piece color."""

    def __init__(self, name: str, piece: Piece):
        self.name = name
        self.piece = piece

    @abstractmethod
    def next_move(self, board: Board) -> Optional[Tuple[int, int]]:
        """
        Choose the next move.

        Args:
            board: Current board. Players must not mutate it.

        Returns:
            Zero-based (row, col), or None to pass
        """

    def __str__(self) -> str:
        return f"{self.name} ({self.piece.symbol})"

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.name!r}, {self.piece.name})"


class HumanPlayer(Player):
    """Player that reads moves in "I C" notation, by default from stdin."""

    def __init__(self, name: str, piece: Piece,
                 read: Callable[[], str] = input,
                 on_error: Callable[[str], None] = print):
        super().__init__(name, piece)
        self._read = read
        self._on_error = on_error

    def next_move(self, board: Board) -> Tuple[int, int]:
        # Keep asking until the input is well formed
        while True:
            try:
                return parse_move(self._read())
            except InvalidMoveNotation as e:
                self._on_error(str(e))


class ComputerPlayer(Player):
    """Player driven by a move policy."""

    def __init__(self, piece: Piece, policy=None, name: str = 'Computer'):
        super().__init__(name, piece)
        self.policy = policy if policy is not None else ZonePolicy()

    def next_move(self, board: Board) -> Optional[Tuple[int, int]]:
        return self.policy.select_move(board, self.piece)
