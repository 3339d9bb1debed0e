"""
Move notation for Othello.
Translates between human notation ("I C") and zero-based board coordinates.
"""
from typing import Tuple

ROWS = '12345678'
COLUMNS = 'ABCDEFGH'

NOTATION_HINT = ('Input format must be like "I C", I is a number in range [1-8] '
                 'and C is a character in range [A-H].')


class InvalidMoveNotation(ValueError):
    """Raised when a move string is not in "I C" format."""

    def __init__(self, text: str):
        super().__init__(f"Invalid move {text!r}. {NOTATION_HINT}")
        self.text = text


def is_valid_notation(text: str) -> bool:
    """Check if ``text`` is a row digit, a single space and a column letter."""
    text = text.strip()
    return (len(text) == 3
            and text[0] in ROWS
            and text[1] == ' '
            and text[2] in COLUMNS)


def parse_move(text: str) -> Tuple[int, int]:
    """
    Parse a move in "I C" notation.

    Args:
        text: Move string such as "3 D". Surrounding whitespace is ignored.

    Returns:
        Zero-based (row, col) tuple, e.g. (2, 3) for "3 D"
    """
    if not is_valid_notation(text):
        raise InvalidMoveNotation(text)
    text = text.strip()
    return ROWS.index(text[0]), COLUMNS.index(text[2])


def format_move(row: int, col: int) -> str:
    """Format zero-based coordinates as "I C" notation."""
    if not (0 <= row < len(ROWS) and 0 <= col < len(COLUMNS)):
        raise ValueError(f"Coordinates ({row}, {col}) are outside the board")
    return f"{ROWS[row]} {COLUMNS[col]}"
