"""
Tests for the console game loop.
"""
import random

from othello.cli import build_game, play_game, write_result
from othello.config import get_default_config
from othello.game import Board, OthelloGame, Piece
from othello.players import ComputerPlayer, HumanPlayer
from othello.policy import RandomPolicy, ZonePolicy
from test_game import PASS_POSITION


def test_build_game_modes():
    config = get_default_config()

    game = build_game("1", config)
    black, white = game.players
    assert isinstance(black, HumanPlayer) and black.name == "Player1"
    assert isinstance(white, ComputerPlayer) and white.name == "Computer"

    game = build_game("2", config)
    assert all(isinstance(player, HumanPlayer) for player in game.players)
    assert game.players[1].name == "Player2"

    assert build_game("7", config) is None


def test_human_game_with_illegal_move_and_pass():
    lines = iter(["8 H", "bad", "4 F", "1 A"])
    output = []
    game = OthelloGame([
        HumanPlayer("Player1", Piece.BLACK, read=lambda: next(lines), on_error=output.append),
        HumanPlayer("Player2", Piece.WHITE, read=lambda: next(lines), on_error=output.append),
    ])
    game.board = Board.from_rows(PASS_POSITION)

    play_game(game, write=output.append)

    assert 'Player1 (●) can\'t have "8 H" move, please choose a valid move.' in output
    assert any("Input format must be like" in line for line in output)
    assert "Pass" in output
    assert output[output.index("Pass") - 1] == "Player2 (○):"
    assert output[-2] == "Player1 (●): 11, Player2 (○): 0"
    assert output[-1] == "Player1 (●) Wins"


def test_computer_game_prints_moves_and_result():
    output = []
    game = OthelloGame([
        ComputerPlayer(Piece.BLACK, ZonePolicy(random.Random(1)), name="Zone"),
        ComputerPlayer(Piece.WHITE, RandomPolicy(random.Random(1)), name="Random"),
    ])

    play_game(game, write=output.append)

    assert game.finished
    assert output[-1].endswith("Wins") or output[-1] == "Draw!!"
    assert output[-2].startswith("Zone (●): ")


def test_write_result_draw():
    output = []
    game = OthelloGame([
        HumanPlayer("Player1", Piece.BLACK),
        HumanPlayer("Player2", Piece.WHITE),
    ])
    game.board = Board.from_rows(["BWBWBWBW"] * 8)
    game.finished = True

    write_result(game, write=output.append)

    assert output == ["Player1 (●): 32, Player2 (○): 32", "Draw!!"]


def test_pass_names_the_right_seat_when_names_clash():
    lines = iter(["4 F", "1 A"])
    output = []
    game = OthelloGame([
        HumanPlayer("Ann", Piece.BLACK, read=lambda: next(lines)),
        HumanPlayer("Ann", Piece.WHITE, read=lambda: next(lines)),
    ])
    game.board = Board.from_rows(PASS_POSITION)

    play_game(game, write=output.append)

    assert output[output.index("Pass") - 1] == "Ann (○):"
    assert game.passes == [game.players[1]]
