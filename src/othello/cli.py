"""
Console game for Othello.
"""
import argparse
import logging
import os
import random
from typing import Callable, Optional

from .config import Config, get_default_config
from .game import OthelloGame, Piece, format_move
from .players import ComputerPlayer, HumanPlayer
from .policy import ZonePolicy

logger = logging.getLogger(__name__)

MENU = (
    "Please select game mode,\n"
    "0. Exit\n"
    "1. One player (play with computer)\n"
    "2. Two player (play with opponent)"
)


def build_game(mode: str, config: Config,
               read: Callable[[], str] = input,
               write: Callable[[str], None] = print) -> Optional[OthelloGame]:
    """
    Create the players for a game mode.

    Args:
        mode: "1" for human against computer, "2" for two humans
        config: Configuration object

    Returns:
        A new game, or None if the mode is unknown
    """
    names = config.game
    black = HumanPlayer(names.player1_name, Piece.BLACK, read=read, on_error=write)
    if mode == "1":
        rng = random.Random(config.policy.seed)
        white = ComputerPlayer(Piece.WHITE, ZonePolicy(rng), name=names.computer_name)
    elif mode == "2":
        white = HumanPlayer(names.player2_name, Piece.WHITE, read=read, on_error=write)
    else:
        return None
    return OthelloGame([black, white])


def play_game(game: OthelloGame, write: Callable[[str], None] = print) -> None:
    """Run the turn loop of one game until it is finished."""
    while not game.finished:
        write(str(game.board))
        player = game.current_player
        write(f"{player}:")

        move = player.next_move(game.board)
        if move is None:
            write("Pass")
            game.pass_turn()
            continue
        if isinstance(player, ComputerPlayer):
            write(format_move(*move))

        while not game.is_valid_move(*move):
            write(f"{player} can't have \"{format_move(*move)}\" move, please choose a valid move.")
            move = player.next_move(game.board)

        passes = len(game.passes)
        game.play_move(*move)
        for passed in game.passes[passes:]:
            write(str(game.board))
            write(f"{passed}:")
            write("Pass")

    write(str(game.board))
    write_result(game, write)


def write_result(game: OthelloGame, write: Callable[[str], None] = print) -> None:
    """Announce the final score and the winner."""
    black_player, white_player = game.players
    black, white = game.score()
    write(f"{black_player}: {black}, {white_player}: {white}")
    winner = game.winner()
    write(f"{winner} Wins" if winner is not None else "Draw!!")


def main(argv=None):
    parser = argparse.ArgumentParser(description='Play Othello in the console')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--seed', type=int, default=None,
                        help='Seed for the computer player tie-breaks')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (e.g. DEBUG, INFO)')
    args = parser.parse_args(argv)

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.seed is not None:
        config.policy.seed = args.seed
    # The game itself prints to stdout
    level = args.log_level or "WARNING"
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.WARNING),
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s'
    )

    try:
        print(MENU)
        mode = input().strip()
        while mode != "0":
            game = build_game(mode, config)
            if game is None:
                print("Invalid game mode, try again")
            else:
                play_game(game)
            print()
            print(MENU)
            mode = input().strip()
    except (EOFError, KeyboardInterrupt):
        print()
        logger.info("Input closed, exiting")


if __name__ == '__main__':
    main()
