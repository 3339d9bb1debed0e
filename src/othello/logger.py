"""
Logging utilities for Othello matches.
"""
import os
import logging
from datetime import datetime
from typing import Dict, Any, Optional
from torch.utils.tensorboard import SummaryWriter

from .config import Config


class Logger:
    """Logger for match results and ratings."""

    def __init__(self, config: Config, log_dir: Optional[str] = None):
        """
        Initialize the logger.

        Args:
            config: Configuration object
            log_dir: Directory to save logs (default: config.logging.log_dir)
        """
        self.config = config
        self.log_dir = log_dir or config.logging.log_dir
        self.run_name = f"{config.project_name}_{datetime.now().strftime('%Y%m%d_%H%M%S')}"
        self.run_dir = os.path.join(self.log_dir, self.run_name)

        # Create log directory
        os.makedirs(self.run_dir, exist_ok=True)

        level = getattr(logging, config.logging.log_level.upper(), logging.INFO)
        formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

        # Set up console logging
        self.console = logging.StreamHandler()
        self.console.setLevel(level)
        self.console.setFormatter(formatter)

        # Set up file logging
        log_file = os.path.join(self.run_dir, 'othello.log')
        self.file_handler = logging.FileHandler(log_file)
        self.file_handler.setLevel(level)
        self.file_handler.setFormatter(formatter)

        # Configure the package logger
        self.logger = logging.getLogger('othello')
        self.logger.setLevel(level)
        self.logger.addHandler(self.console)
        self.logger.addHandler(self.file_handler)

        # Initialize TensorBoard
        self.writer = None
        if config.logging.use_tensorboard:
            self.writer = SummaryWriter(log_dir=os.path.join(self.run_dir, 'tensorboard'))

        # Save config
        self.save_config()

    def save_config(self):
        """Save the configuration to a JSON file."""
        self.config.save(os.path.join(self.run_dir, 'config.json'))

    def log_metrics(self, metrics: Dict[str, Any], step: int, prefix: str = ''):
        """
        Log metrics to console and TensorBoard.

        Args:
            metrics: Dictionary of metrics to log
            step: Current step (e.g. tournament round)
            prefix: Prefix for metric names (e.g., 'elo/')
        """
        log_str = f"Step {step}:"
        for name, value in metrics.items():
            if isinstance(value, float):
                log_str += f" {name}={value:.4f}"
            else:
                log_str += f" {name}={value}"
        self.logger.info(log_str)

        if self.writer is not None:
            for name, value in metrics.items():
                if isinstance(value, (int, float)):
                    self.writer.add_scalar(f"{prefix}{name}", value, step)

    def log_text(self, tag: str, text: str, step: int = 0):
        """Log text to TensorBoard."""
        if self.writer is not None:
            self.writer.add_text(tag, text, step)

    def close(self):
        """Close the logger and flush all pending logs."""
        if self.writer is not None:
            self.writer.flush()
            self.writer.close()
            self.writer = None

        # Remove our handlers to prevent duplicate logging
        for handler in (self.console, self.file_handler):
            self.logger.removeHandler(handler)
            handler.close()


def setup_logger(config: Config) -> Logger:
    """
    Set up and return a logger instance.

    Args:
        config: Configuration object

    Returns:
        Logger instance
    """
    return Logger(config)
