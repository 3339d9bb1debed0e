"""
Arena for running matches between computer players with ELO rating.
"""
import logging
import os
import time
import json
from datetime import datetime
from typing import Dict, List, Optional

from tqdm import tqdm

from ..game import OthelloGame, Piece
from ..players import ComputerPlayer

logger = logging.getLogger(__name__)


class ELORatingSystem:
    """
    ELO ratings of the policies entered in the arena.

    Each game is recorded from black's point of view, so the history keeps
    which policy moved first.
    """

    def __init__(self, k: float = 32, initial_rating: float = 1500.0):
        """
        Args:
            k: K-factor, the largest rating change a single game can cause
            initial_rating: Rating given to a policy on its first game
        """
        self.k = k
        self.initial_rating = initial_rating
        self.ratings: Dict[str, float] = {}
        self.games_played: Dict[str, int] = {}
        self.history: List[Dict] = []

    def add_player(self, player_id: str, rating: Optional[float] = None):
        if player_id not in self.ratings:
            self.ratings[player_id] = rating if rating is not None else self.initial_rating
            self.games_played[player_id] = 0

    def get_rating(self, player_id: str) -> float:
        return self.ratings.get(player_id, self.initial_rating)

    @staticmethod
    def get_expected_score(rating: float, opponent_rating: float) -> float:
        """Expected score of a player rated ``rating`` against ``opponent_rating``."""
        return 1.0 / (1.0 + 10.0 ** ((opponent_rating - rating) / 400.0))

    def update_ratings(self, black_id: str, white_id: str, black_score: float) -> Dict:
        """
        Update ratings after a game.

        Args:
            black_id: ID of the policy that played black
            white_id: ID of the policy that played white
            black_score: 1.0 if black won, 0.5 for a draw, 0.0 if white won

        Returns:
            The history record of the game
        """
        self.add_player(black_id)
        self.add_player(white_id)

        before = {black_id: self.ratings[black_id], white_id: self.ratings[white_id]}
        expected_black = self.get_expected_score(before[black_id], before[white_id])
        change = self.k * (black_score - expected_black)

        self.ratings[black_id] += change
        self.ratings[white_id] -= change
        self.games_played[black_id] += 1
        self.games_played[white_id] += 1

        record = {
            'timestamp': time.time(),
            'black': black_id,
            'white': white_id,
            'result': black_score,
            'rating_change': change,
            'ratings_before': before,
            'ratings_after': {black_id: self.ratings[black_id], white_id: self.ratings[white_id]},
        }
        self.history.append(record)
        return record

    def get_leaderboard(self) -> List[Dict]:
        """Policies sorted by rating, best first."""
        return sorted(
            ({'player_id': player_id, 'rating': rating, 'games_played': self.games_played[player_id]}
             for player_id, rating in self.ratings.items()),
            key=lambda entry: entry['rating'],
            reverse=True,
        )

    def save_ratings(self, filepath: str):
        data = {
            'k': self.k,
            'initial_rating': self.initial_rating,
            'ratings': self.ratings,
            'games_played': self.games_played,
            'history': self.history,
            'last_updated': datetime.now().isoformat()
        }
        with open(filepath, 'w') as f:
            json.dump(data, f, indent=2)

    @classmethod
    def load_ratings(cls, filepath: str) -> 'ELORatingSystem':
        with open(filepath, 'r') as f:
            data = json.load(f)

        elo = cls(k=data['k'], initial_rating=data['initial_rating'])
        elo.ratings = {name: float(rating) for name, rating in data['ratings'].items()}
        elo.games_played = {name: int(games) for name, games in data['games_played'].items()}
        elo.history = data.get('history', [])
        return elo


class Arena:
    """Arena for running round-robin tournaments between move policies."""

    def __init__(self, elo_system: Optional[ELORatingSystem] = None, metrics_logger=None):
        """
        Initialize the arena.

        Args:
            elo_system: Optional ELO rating system to use
            metrics_logger: Optional othello.logger.Logger receiving per-round ratings
        """
        self.elo = elo_system if elo_system is not None else ELORatingSystem()
        self.policies: Dict[str, object] = {}
        self.metrics_logger = metrics_logger

    def add_player(self, player_id: str, policy):
        """
        Register a policy under ``player_id``.

        The policy is wrapped in a ComputerPlayer of the right color for
        every game it plays.
        """
        self.policies[player_id] = policy
        self.elo.add_player(player_id)

    def play_game(self, black_id: str, white_id: str) -> float:
        """
        Play a single game between two registered policies.

        Args:
            black_id: ID of the player taking black (moves first)
            white_id: ID of the player taking white

        Returns:
            1.0 if black wins, 0.5 for a draw, 0.0 if white wins
        """
        if black_id not in self.policies or white_id not in self.policies:
            raise ValueError(f"One or both players not found: {black_id}, {white_id}")

        game = OthelloGame([
            ComputerPlayer(Piece.BLACK, self.policies[black_id], name=black_id),
            ComputerPlayer(Piece.WHITE, self.policies[white_id], name=white_id),
        ])
        while not game.finished:
            game.play_turn()

        black_count, white_count = game.score()
        logger.debug("%s (black) %d - %d %s (white)", black_id, black_count, white_count, white_id)
        return game.result_for_black()

    def run_tournament(self, rounds: int = 10, show_progress: bool = True,
                       verbose: bool = False) -> Dict:
        """
        Run a round-robin tournament between all players.

        Args:
            rounds: Number of rounds (each pair meets once per round)
            show_progress: Whether to display a progress bar
            verbose: Whether to log the leaderboard after every round

        Returns:
            Dictionary with tournament results
        """
        player_ids = list(self.policies.keys())
        num_players = len(player_ids)

        if num_players < 2:
            raise ValueError("Need at least 2 players for a tournament")

        results = {
            'games_played': 0,
            'matchups': {},
            'start_time': time.time(),
            'end_time': None,
            'rounds': []
        }

        for i in range(num_players):
            for j in range(i + 1, num_players):
                p1, p2 = player_ids[i], player_ids[j]
                results['matchups'][f"{p1}_vs_{p2}"] = {
                    'player1': p1,
                    'player2': p2,
                    'games_played': 0,
                    'wins1': 0,
                    'wins2': 0,
                    'draws': 0
                }

        total_games = rounds * len(results['matchups'])
        with tqdm(total=total_games, desc="Tournament", disable=not show_progress) as pbar:
            for round_num in range(rounds):
                round_results = {'round': round_num + 1, 'games': []}

                for i in range(num_players):
                    for j in range(i + 1, num_players):
                        match_key = f"{player_ids[i]}_vs_{player_ids[j]}"
                        black, white = player_ids[i], player_ids[j]

                        # Alternate who goes first
                        if (i + j + round_num) % 2 == 0:
                            black, white = white, black

                        result = self.play_game(black, white)
                        record = self.elo.update_ratings(black, white, result)

                        matchup = results['matchups'][match_key]
                        matchup['games_played'] += 1
                        results['games_played'] += 1

                        if result == 0.5:
                            matchup['draws'] += 1
                        elif (result == 1.0) == (black == matchup['player1']):
                            matchup['wins1'] += 1
                        else:
                            matchup['wins2'] += 1

                        round_results['games'].append(record)
                        pbar.update(1)

                results['rounds'].append(round_results)

                if verbose:
                    logger.info("After round %d:\n%s", round_num + 1, self.format_leaderboard())

                if self.metrics_logger is not None:
                    self.metrics_logger.log_metrics(dict(self.elo.ratings), round_num + 1, prefix='elo/')

        results['end_time'] = time.time()
        results['duration'] = results['end_time'] - results['start_time']
        results['leaderboard'] = self.elo.get_leaderboard()

        logger.info("Tournament finished: %d games in %.2fs", results['games_played'], results['duration'])
        return results

    def format_leaderboard(self) -> str:
        """Format the current leaderboard as a table."""
        lines = [
            "Rank  Player ID               Rating  Games Played",
            "----  ---------------------  -------  ------------",
        ]
        for i, player in enumerate(self.elo.get_leaderboard(), 1):
            lines.append(f"{i:4d}  {player['player_id']:22s}  {player['rating']:7.1f}  {player['games_played']:12d}")
        return "\n".join(lines)

    def save_results(self, results: Dict, filepath: str):
        """Save tournament results and the ELO ratings next to them."""
        elo_file = os.path.splitext(filepath)[0] + '_elo.json'
        self.elo.save_ratings(elo_file)

        with open(filepath, 'w') as f:
            json.dump(results, f, indent=2)
