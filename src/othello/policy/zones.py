"""
Priority zones used by the zone policy.
"""
from enum import IntEnum
from typing import Dict, Iterable, List, Tuple

CORNERS = frozenset([(0, 0), (0, 7), (7, 0), (7, 7)])
EDGES_NEAR_CORNERS = frozenset([(0, 1), (0, 6), (1, 0), (1, 7),
                                (6, 0), (6, 7), (7, 1), (7, 6)])
DIAGONALS_NEAR_CORNERS = frozenset([(1, 1), (1, 6), (6, 1), (6, 6)])


class Zone(IntEnum):
    """Board zones, lower value means higher priority."""
    CORNER = 1
    CENTER = 2
    EDGE = 3
    INNER_EDGE = 4
    EDGE_NEAR_CORNER = 5
    DIAGONAL_NEAR_CORNER = 6


def _middle(x: int) -> bool:
    return 2 <= x <= 5


def classify(row: int, col: int) -> Zone:
    """
    Get the zone of a board coordinate.

    Zones are tested from highest to lowest priority and the first match
    wins, so every one of the 64 cells falls into exactly one zone.
    """
    move = (row, col)
    if move in CORNERS:
        return Zone.CORNER
    if _middle(row) and _middle(col):
        return Zone.CENTER
    if (row in (0, 7) and _middle(col)) or (col in (0, 7) and _middle(row)):
        return Zone.EDGE
    if (row in (1, 6) and _middle(col)) or (col in (1, 6) and _middle(row)):
        return Zone.INNER_EDGE
    if move in EDGES_NEAR_CORNERS:
        return Zone.EDGE_NEAR_CORNER
    if move in DIAGONALS_NEAR_CORNERS:
        return Zone.DIAGONAL_NEAR_CORNER
    raise ValueError(f"Coordinates ({row}, {col}) are outside the board")


def partition(moves: Iterable[Tuple[int, int]]) -> Dict[Zone, List[Tuple[int, int]]]:
    """Group moves by zone, keeping their order inside each zone."""
    groups: Dict[Zone, List[Tuple[int, int]]] = {zone: [] for zone in Zone}
    for row, col in moves:
        groups[classify(row, col)].append((row, col))
    return groups
