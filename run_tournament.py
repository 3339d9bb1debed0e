"""
Script for running tournaments between Othello move policies.
"""
import os
import argparse
import random
from datetime import datetime

from othello.arena import Arena, ELORatingSystem
from othello.config import Config, get_default_config
from othello.logger import setup_logger
from othello.policy import RandomPolicy, ZonePolicy


def main():
    parser = argparse.ArgumentParser(description='Run a tournament between Othello policies')

    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--rounds', type=int, default=None,
                        help='Number of rounds to play')
    parser.add_argument('--output-dir', type=str, default=None,
                        help='Directory to save tournament results')
    parser.add_argument('--no-tensorboard', action='store_true',
                        help='Disable TensorBoard logging')

    args = parser.parse_args()

    if os.path.exists(args.config):
        config = Config.load(args.config)
    else:
        config = get_default_config()
    if args.rounds is not None:
        config.arena.rounds = args.rounds
    if args.output_dir is not None:
        config.arena.output_dir = args.output_dir
    if args.no_tensorboard:
        config.logging.use_tensorboard = False

    os.makedirs(config.arena.output_dir, exist_ok=True)
    metrics = setup_logger(config)

    # Initialize ELO rating system
    elo_file = os.path.join(config.arena.output_dir, config.arena.elo_file)
    if os.path.exists(elo_file):
        metrics.logger.info(f"Loading ELO ratings from {elo_file}")
        elo = ELORatingSystem.load_ratings(elo_file)
    else:
        metrics.logger.info("Starting new ELO rating system")
        elo = ELORatingSystem(k=config.arena.k, initial_rating=config.arena.initial_rating)

    arena = Arena(elo, metrics_logger=metrics)
    arena.add_player('zone', ZonePolicy(random.Random(config.seed)))
    arena.add_player('zone_alt', ZonePolicy(random.Random(config.seed + 1)))
    arena.add_player('random', RandomPolicy(random.Random(config.seed + 2)))

    try:
        results = arena.run_tournament(rounds=config.arena.rounds, verbose=config.logging.verbose)
    finally:
        metrics.close()

    print("\nFinal Leaderboard:")
    print(arena.format_leaderboard())

    elo.save_ratings(elo_file)
    timestamp = datetime.now().strftime('%Y%m%d_%H%M%S')
    results_file = os.path.join(config.arena.output_dir, f"tournament_{timestamp}.json")
    arena.save_results(results, results_file)
    print(f"\nResults saved to {results_file}")


if __name__ == "__main__":
    main()
