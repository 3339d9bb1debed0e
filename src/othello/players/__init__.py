"""
Player implementations for Othello.
"""

from .player import ComputerPlayer, HumanPlayer, Player

__all__ = ['Player', 'HumanPlayer', 'ComputerPlayer']
