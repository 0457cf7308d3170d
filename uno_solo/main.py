"""Main entry point for uno-solo."""

import argparse
import logging
import random
import sys
from pathlib import Path

from pydantic import ValidationError

from uno_solo.config import GameLogConfig, load_config
from uno_solo.game.engine import GameLoop
from uno_solo.logging import GameLogger, generate_log_filename
from uno_solo.models.game_state import new_session
from uno_solo.strategy import get_strategy
from uno_solo.utils.logger import GameDisplay, setup_logging

logger = logging.getLogger(__name__)


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Simplified UNO against a scripted computer opponent"
    )
    parser.add_argument(
        "-c",
        "--config",
        type=Path,
        help="Path to config file (YAML)",
    )
    parser.add_argument(
        "-s",
        "--seed",
        type=int,
        help="Shuffle seed for a reproducible game (overrides config)",
    )
    parser.add_argument(
        "--hand-size",
        type=int,
        help="Cards dealt to each hand (overrides config)",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Enable verbose output",
    )
    parser.add_argument(
        "--game-log",
        type=Path,
        help="Directory for game log files (filename auto-generated)",
    )
    return parser.parse_args(argv)


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Returns:
        Exit code (0 for success)
    """
    args = parse_args(argv)

    # Load config and apply command-line overrides (validated on assignment)
    try:
        config = load_config(args.config)
        if args.seed is not None:
            config.game.seed = args.seed
        if args.hand_size is not None:
            config.game.hand_size = args.hand_size
    except ValidationError as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 2

    if args.verbose:
        config.logging.level = "DEBUG"

    game_log_enabled = args.game_log is not None or config.game_log.enabled
    game_log_dir = str(args.game_log) if args.game_log else config.game_log.output_path

    setup_logging(config.logging.level)

    display = GameDisplay()

    try:
        strategy = get_strategy(config.opponent.strategy)
        session = new_session(
            random.Random(config.game.seed),
            hand_size=config.game.hand_size,
            seed=config.game.seed,
        )
        logger.info(f"New game (seed={config.game.seed}, opponent={strategy.name}): {session}")

        if game_log_enabled:
            log_path = generate_log_filename(game_log_dir, config.game.seed)
            game_log_config = GameLogConfig(enabled=True, output_path=log_path)
            logger.info(f"Game log: {log_path}")
        else:
            game_log_config = GameLogConfig(enabled=False)

        with GameLogger(game_log_config) as game_logger:
            loop = GameLoop(session, strategy, display, game_logger=game_logger)
            loop.run()

        return 0

    except KeyboardInterrupt:
        print("\nGame interrupted by user")
        return 1
    except Exception as e:
        logger.exception(f"Game error: {e}")
        return 1


if __name__ == "__main__":
    sys.exit(main())
