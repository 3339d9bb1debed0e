"""
Configuration parameters for Othello.
"""
import os
from dataclasses import dataclass, asdict, field
from typing import Dict, Any, Optional
import json


@dataclass
class GameConfig:
    """Configuration for console games."""
    player1_name: str = "Player1"
    player2_name: str = "Player2"
    computer_name: str = "Computer"


@dataclass
class PolicyConfig:
    """Configuration for the zone policy."""
    seed: Optional[int] = None  # Tie-break seed, None for a fresh random source


@dataclass
class ArenaConfig:
    """Configuration for automated matches."""
    rounds: int = 10
    k: float = 32.0
    initial_rating: float = 1500.0
    output_dir: str = "tournament_results"
    elo_file: str = "elo_ratings.json"


@dataclass
class LoggingConfig:
    """Configuration for logging and visualization."""
    log_dir: str = "logs"
    log_level: str = "INFO"
    use_tensorboard: bool = True
    verbose: bool = False


@dataclass
class Config:
    """Main configuration class."""
    project_name: str = "Othello"
    seed: int = 42
    game: GameConfig = field(default_factory=GameConfig)
    policy: PolicyConfig = field(default_factory=PolicyConfig)
    arena: ArenaConfig = field(default_factory=ArenaConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to dictionary."""
        return asdict(self)

    def save(self, filepath: str):
        """Save config to JSON file."""
        os.makedirs(os.path.dirname(os.path.abspath(filepath)), exist_ok=True)
        with open(filepath, 'w') as f:
            json.dump(self.to_dict(), f, indent=2)

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any]) -> 'Config':
        """Create config from dictionary."""
        return cls(
            project_name=config_dict.get('project_name', 'Othello'),
            seed=config_dict.get('seed', 42),
            game=GameConfig(**config_dict.get('game', {})),
            policy=PolicyConfig(**config_dict.get('policy', {})),
            arena=ArenaConfig(**config_dict.get('arena', {})),
            logging=LoggingConfig(**config_dict.get('logging', {}))
        )

    @classmethod
    def load(cls, filepath: str) -> 'Config':
        """Load config from JSON file."""
        with open(filepath, 'r') as f:
            config_dict = json.load(f)
        return cls.from_dict(config_dict)


def get_default_config() -> Config:
    """Get default configuration."""
    return Config()
