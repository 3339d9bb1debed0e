"""
Move policies for the automated Othello opponent.
"""

from .policy import RandomPolicy, ZonePolicy
from .zones import Zone, classify, partition

__all__ = ['ZonePolicy', 'RandomPolicy', 'Zone', 'classify', 'partition']
