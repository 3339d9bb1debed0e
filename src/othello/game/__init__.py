"""
Othello game module.
This package contains the board engine and the turn flow for Othello.
"""

from .cell import Cell, Piece
from .board import Board
from .game import OthelloGame
from .notation import InvalidMoveNotation, format_move, parse_move

__all__ = ['Piece', 'Cell', 'Board', 'OthelloGame',
           'InvalidMoveNotation', 'parse_move', 'format_move']
