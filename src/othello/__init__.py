"""
Othello: board engine, zone heuristic opponent and console game.
"""

__version__ = '0.1'
