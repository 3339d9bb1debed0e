"""
Move policies for the automated opponent.
"""
import logging
import random
from typing import List, Optional, Tuple

from ..game.board import Board
from ..game.cell import Piece
from .zones import Zone, partition

logger = logging.getLogger(__name__)

Move = Tuple[int, int]


class ZonePolicy:
    """
    Static heuristic that prefers moves by board zone.

    Legal moves are grouped into six priority zones (corners first, cells
    diagonally next to corners last). Within the best non-empty zone the
    move flipping the most pieces is chosen, and ties are broken at random.
    """

    name = 'zone'

    def __init__(self, rng: Optional[random.Random] = None):
        """
        Args:
            rng: Random source for tie-breaks. Pass a seeded instance for
                reproducible games.
        """
        self.rng = rng if rng is not None else random.Random()

    def select_move(self, board: Board, piece: Piece) -> Optional[Move]:
        """
        Pick a move for ``piece``.

        Returns:
            (row, col) of the chosen move, or None if the piece must pass
        """
        moves = board.legal_moves(piece)
        if not moves:
            return None
        if len(moves) == 1:
            return moves[0]

        groups = partition(moves)
        zone = min(z for z in Zone if groups[z])
        return self._most_earned(board, piece, groups[zone])

    def _most_earned(self, board: Board, piece: Piece, moves: List[Move]) -> Move:
        if len(moves) == 1:
            return moves[0]

        earned = [board.earned_pieces_count(piece, row, col) for row, col in moves]
        best = max(earned)
        candidates = [move for move, count in zip(moves, earned) if count == best]
        if len(candidates) == 1:
            return candidates[0]

        logger.debug("Breaking tie between %s (%d earned each)", candidates, best)
        return self.rng.choice(candidates)


class RandomPolicy:
    """Uniform random choice among legal moves. Used as an arena baseline."""

    name = 'random'

    def __init__(self, rng: Optional[random.Random] = None):
        self.rng = rng if rng is not None else random.Random()

    def select_move(self, board: Board, piece: Piece) -> Optional[Move]:
        moves = board.legal_moves(piece)
        return self.rng.choice(moves) if moves else None
