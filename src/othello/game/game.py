"""
Othello game module.
Handles turn order, passes and the end of the game.
"""
import logging
from typing import List, Optional, Sequence, Tuple

from .board import Board
from .cell import Piece

logger = logging.getLogger(__name__)


class OthelloGame:
    """
    Main game class for Othello that manages the turn flow around a board.

    ``players[0]`` plays black and moves first, ``players[1]`` plays white.
    Players only need a ``piece`` attribute and a ``next_move(board)`` method.
    """

    def __init__(self, players: Sequence):
        """
        Initialize a new Othello game.

        Args:
            players: The black player followed by the white player
        """
        if len(players) != 2:
            raise ValueError("Othello needs exactly two players")
        if players[0].piece != Piece.BLACK or players[1].piece != Piece.WHITE:
            raise ValueError("First player must play black and second player white")

        self._players = tuple(players)
        self.board = Board()
        self._turn = 0
        self.finished = False
        self.passes: List = []

    def reset(self) -> None:
        """Reset the game to its initial state."""
        self.board = Board()
        self._turn = 0
        self.finished = False
        self.passes = []

    @property
    def players(self) -> Tuple:
        return self._players

    @property
    def current_player(self):
        return self._players[self._turn]

    def is_valid_move(self, row: int, col: int) -> bool:
        """Check if the current player may play at (row, col)."""
        return not self.finished and self.board.is_valid_move(self.current_player.piece, row, col)

    def play_move(self, row: int, col: int) -> bool:
        """
        Play a move for the current player.

        Args:
            row: Row of the move (0-based)
            col: Column of the move (0-based)

        Returns:
            bool: True if the move was valid and made, False otherwise
        """
        if self.finished:
            return False

        player = self.current_player
        if not self.board.place_piece(player.piece, row, col):
            return False

        logger.debug("%s plays (%d, %d)", player, row, col)

        if self.board.is_game_finished():
            self.finished = True
            black, white = self.score()
            logger.info("Game over. Black: %d, White: %d", black, white)
        else:
            self._change_turn()
        return True

    def play_turn(self) -> Optional[Tuple[int, int]]:
        """
        Ask the current player for a move and play it.

        Returns:
            The move played, or None if the player passed

        Raises:
            ValueError: If the player proposes an illegal move
        """
        if self.finished:
            raise ValueError("Game is already finished")

        player = self.current_player
        move = player.next_move(self.board)
        if move is None:
            if not self.pass_turn():
                raise ValueError(f"{player} passed while holding a legal move")
            return None

        row, col = move
        if not self.play_move(row, col):
            raise ValueError(f"{player} proposed an illegal move ({row}, {col})")
        return move

    def pass_turn(self) -> bool:
        """
        Pass the turn of the current player.

        Returns:
            bool: True if the pass was allowed (no legal move), False otherwise
        """
        player = self.current_player
        if self.finished or not self.board.has_no_legal_moves(player.piece):
            return False
        self._pass(player)
        self._turn = 1 - self._turn
        return True

    def _pass(self, player) -> None:
        self.passes.append(player)
        logger.info("%s passes", player)

    def _change_turn(self) -> None:
        """Give the turn to the other player, who passes if they cannot move."""
        self._turn = 1 - self._turn
        player = self.current_player
        if self.board.has_no_legal_moves(player.piece):
            self._pass(player)
            self._turn = 1 - self._turn

    def score(self) -> Tuple[int, int]:
        """
        Get the current score (black, white).

        Returns:
            Tuple of (black_score, white_score)
        """
        return self.board.get_score()

    def winner(self):
        """
        Get the winner of the game.

        Returns:
            The player with more pieces, None for a draw or while the game runs
        """
        if not self.finished:
            return None
        black, white = self.score()
        if black > white:
            return self._players[0]
        if white > black:
            return self._players[1]
        return None

    def result_for_black(self) -> float:
        """1.0 if black won, 0.0 if white won, 0.5 for a draw."""
        black, white = self.score()
        if black > white:
            return 1.0
        if white > black:
            return 0.0
        return 0.5

    def __str__(self) -> str:
        """String representation of the game state."""
        black, white = self.score()
        lines = [str(self.board)]
        lines.append(f"{self._players[0]}: {black}, {self._players[1]}: {white}")
        if self.finished:
            winner = self.winner()
            lines.append(f"{winner} Wins" if winner is not None else "Draw!!")
        else:
            lines.append(f"{self.current_player}:")
        return "\n".join(lines)
