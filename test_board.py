"""
Tests for the Othello board engine.
"""
import random

import numpy as np
import pytest

from othello.game import Board, Piece

BLACK, WHITE = Piece.BLACK, Piece.WHITE

EMPTY_ROW = "........"


def board_from(*rows):
    """Build a board from the given top rows, padding the rest with empty rows."""
    rows = list(rows) + [EMPTY_ROW] * (Board.SIZE - len(rows))
    return Board.from_rows(rows)


def test_initial_board():
    """Test the initial board setup."""
    board = Board()
    state = board.get_board_state()

    assert state.shape == (8, 8), "Board should be 8x8"
    assert state[3][3] == 2      # White
    assert state[4][4] == 2      # White
    assert state[3][4] == 1      # Black
    assert state[4][3] == 1      # Black
    assert np.sum(state == 0) == 60, "Should have 60 empty squares initially"

    assert board.color_count(BLACK) == 2
    assert board.color_count(WHITE) == 2
    assert board.empty_count() == 60
    assert not board.is_game_finished()


def test_legal_moves_on_start_position():
    board = Board()
    assert board.legal_moves(BLACK) == [(2, 3), (3, 2), (4, 5), (5, 4)]
    assert board.legal_moves(WHITE) == [(2, 4), (3, 5), (4, 2), (5, 3)]
    assert not board.has_no_legal_moves(BLACK)


def test_occupied_cells_are_never_valid():
    board = Board()
    for row in range(8):
        for col in range(8):
            if not board.cell(row, col).empty:
                assert not board.is_valid_move(BLACK, row, col)
                assert not board.is_valid_move(WHITE, row, col)


def test_opening_move_flips():
    board = Board()
    assert board.is_valid_move(BLACK, 2, 3)
    assert board.earned_pieces_count(BLACK, 2, 3) == 1

    assert board.place_piece(BLACK, 2, 3)

    assert board.cell(2, 3).occupant == BLACK
    assert board.cell(3, 3).occupant == BLACK, "Should capture white piece"
    assert board.color_count(BLACK) == 4
    assert board.color_count(WHITE) == 1
    assert board.occupied_count() == 5


def test_illegal_placement_is_ignored():
    board = Board()
    before = board.copy()

    assert not board.place_piece(BLACK, 0, 0)
    assert board == before
    assert not board.place_piece(BLACK, 0, 0)
    assert board == before

    # Occupied cell
    assert not board.place_piece(WHITE, 3, 4)
    assert board == before


def test_flips_in_several_directions():
    board = board_from(
        ".WB.....",
        "WW......",
        "W.B.....",
        "B.......",
    )
    assert board.earned_pieces_count(BLACK, 0, 0) == 4

    board.place_piece(BLACK, 0, 0)

    assert board.color_count(BLACK) == 8
    assert board.color_count(WHITE) == 0
    assert board.is_game_finished()


def test_anchor_stops_the_flip():
    board = board_from(".WBWB...")
    board.place_piece(BLACK, 0, 0)
    assert board.cell(0, 1).occupant == BLACK
    assert board.cell(0, 2).occupant == BLACK
    assert board.cell(0, 3).occupant == WHITE, "Cells past the anchor must not flip"


def test_run_without_anchor_is_not_bracketed():
    # Run of opponents reaching the edge
    board = board_from(".WWWWWWW")
    assert not board.is_valid_move(BLACK, 0, 0)
    assert board.earned_pieces_count(BLACK, 0, 0) == 0

    # Empty cell inside the run
    board = board_from(".W.B....")
    assert not board.is_valid_move(BLACK, 0, 0)

    # Own piece right next to the target
    board = board_from(".BW.....")
    assert not board.is_valid_move(BLACK, 0, 0)


def test_out_of_range_coordinates_fail_fast():
    board = Board()
    with pytest.raises(ValueError):
        board.is_valid_move(BLACK, 8, 0)
    with pytest.raises(ValueError):
        board.place_piece(BLACK, 0, -1)
    with pytest.raises(ValueError):
        board.earned_pieces_count(WHITE, -1, 3)


def test_earned_count_matches_placement():
    """Simulated captures agree with the flips of a real placement over a whole game."""
    rng = random.Random(7)
    board = Board()
    piece = BLACK

    for _ in range(60):
        moves = board.legal_moves(piece)
        if not moves:
            piece = piece.opponent
            if board.has_no_legal_moves(piece):
                break
            continue

        row, col = rng.choice(moves)
        earned = board.earned_pieces_count(piece, row, col)
        own, other = board.color_count(piece), board.color_count(piece.opponent)
        occupied = board.occupied_count()

        assert board.place_piece(piece, row, col)

        assert earned > 0
        assert board.occupied_count() == occupied + 1
        assert board.color_count(piece) == own + earned + 1
        assert board.color_count(piece.opponent) == other - earned
        piece = piece.opponent


def test_finished_when_board_is_full():
    board = Board.from_rows(["BBBBBBBB"] * 8)
    assert board.is_game_finished()

    board = Board.from_rows(["BWBWBWBW"] * 8)
    assert board.empty_count() == 0
    assert board.is_game_finished()


def test_finished_when_only_one_color_remains():
    # Empty cells left, but every piece is black
    board = board_from("..BB....")
    assert board.is_game_finished()


def test_finished_when_nobody_can_move():
    board = board_from("B.W.....")
    assert board.color_count(BLACK) == 1 and board.color_count(WHITE) == 1
    assert board.empty_count() > 0
    assert board.has_no_legal_moves(BLACK)
    assert board.has_no_legal_moves(WHITE)
    assert board.is_game_finished()


def test_from_rows_rejects_bad_layouts():
    with pytest.raises(ValueError):
        Board.from_rows([EMPTY_ROW] * 7)
    with pytest.raises(ValueError):
        Board.from_rows(["X......."] + [EMPTY_ROW] * 7)


def test_copy_is_independent():
    board = Board()
    clone = board.copy()
    clone.place_piece(BLACK, 2, 3)
    assert board.color_count(BLACK) == 2
    assert clone.color_count(BLACK) == 4


def test_board_rendering():
    lines = str(Board()).splitlines()
    assert lines[0].split() == list("ABCDEFGH")
    assert lines[8].startswith("4 ")
    assert "○" in lines[8] and "●" in lines[8]


def test_cells_handed_out_do_not_alias_the_board():
    board = Board()
    board.cell(0, 0).put_piece(BLACK)
    for cell in board:
        cell.put_piece(WHITE)

    assert board.cell(0, 0).empty
    assert board.occupied_count() == 4
    assert board.get_score() == (2, 2)
