"""
Main script to play Othello in the terminal.
"""
import os
import sys
from pathlib import Path

# Add src directory to path
sys.path.append(str(Path(__file__).parent.absolute() / "src"))

from othello.config import Config, get_default_config
from othello.console import Console
from othello.game import Board
from othello.logger import setup_logger


def build_config(args) -> Config:
    """Load the config file and apply command line overrides."""
    if os.path.exists(args.config):
        print(f"Loading configuration from {args.config}")
        config = Config.load(args.config)
    else:
        print(f"Config file {args.config} not found, using default configuration")
        config = get_default_config()

    if args.width is not None:
        config.game.width = args.width
    if args.height is not None:
        config.game.height = args.height
    if args.players:
        config.game.players = [p.strip() for p in args.players.split(",")]
    if args.no_captures:
        config.game.captures = False
    if args.log_level:
        config.logging.log_level = args.log_level
    if args.log_to_file:
        config.logging.log_to_file = True
    return config


def main(argv=None):
    """Start a console game with the specified configuration."""
    import argparse

    parser = argparse.ArgumentParser(description='Play Othello in the terminal')
    parser.add_argument('--config', type=str, default='configs/default_config.json',
                        help='Path to config file')
    parser.add_argument('--width', type=int, default=None, help='Number of columns')
    parser.add_argument('--height', type=int, default=None, help='Number of rows')
    parser.add_argument('--players', type=str, default=None,
                        help='Comma separated player ids in turn order, e.g. B,W')
    parser.add_argument('--no-captures', action='store_true',
                        help='Play the reduced variant without captures')
    parser.add_argument('--log-level', type=str, default=None,
                        help='Logging level (DEBUG, INFO, ...)')
    parser.add_argument('--log-to-file', action='store_true',
                        help='Also write logs to a run directory')
    args = parser.parse_args(argv)

    config = build_config(args)
    session_logger = setup_logger(config)
    try:
        board = Board.from_config(config.game)
        console = Console(board, session_logger=session_logger)
        console.run()
    except KeyboardInterrupt:
        print("\nGame interrupted.")
    finally:
        session_logger.close()


if __name__ == "__main__":
    main()
