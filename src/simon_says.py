#!/usr/bin/env python3
"""
Simon Says - terminal sequence-memory game

Watch the sequence, then repeat it with the keyboard:
  • Digit keys 1-9, 0 select buttons (4-button board: arrows / WASD too)
  • n / Enter / Space starts a game, r resets, m toggles sound, q quits
"""

import argparse
import logging
import sys
from typing import Optional

from audio_system import PygameToneEmitter, MockToneEmitter
from button_system import InputReader, KeyboardSampler
from game_system import GameManager, GameSnapshot, get_symbol_set, seeded_generator
from game_system.config import GameConfig, AudioConfig, ScoreConfig
from game_system.game_types import Difficulty
from score_system import CsvScoreStore
from utils import HybridLogger


class ConsoleDisplay:
    """Logs status changes and highlighted buttons as the game runs"""

    def __init__(self, button_count: int, logger):
        self.symbols = get_symbol_set(button_count)
        self.logger = logger
        self._last_message: Optional[str] = None
        self._last_active: Optional[int] = None

    def __call__(self, snapshot: GameSnapshot) -> None:
        if snapshot.active_symbol != self._last_active:
            self._last_active = snapshot.active_symbol
            if snapshot.active_symbol is not None:
                symbol = self.symbols[snapshot.active_symbol]
                self.logger.info(f"● {symbol.label} [{symbol.key_binding}]")

        message = snapshot.status_message
        if message != self._last_message:
            self._last_message = message
            best = "-" if snapshot.best_score is None else snapshot.best_score
            self.logger.info(f"{message}   (round {snapshot.round}, score {snapshot.score}, best {best})")


def parse_args(argv=None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description="Simon Says sequence-memory game",
        formatter_class=argparse.RawDescriptionHelpFormatter
    )
    parser.add_argument(
        '--buttons',
        type=int,
        choices=[4, 7, 10],
        default=4,
        help='Number of buttons (4 easy, 7 medium, 10 hard)'
    )
    parser.add_argument(
        '--difficulty',
        choices=[d.value for d in Difficulty],
        default=Difficulty.NORMAL.value,
        help='normal: replay on mistake, strict: game over on mistake'
    )
    parser.add_argument(
        '--scores-file',
        default=ScoreConfig().scores_path,
        help='CSV file holding best scores'
    )
    parser.add_argument(
        '--mock-audio',
        action='store_true',
        help='Do not open the audio device'
    )
    parser.add_argument(
        '--no-sound',
        action='store_true',
        help='Start with sound muted (toggle with m)'
    )
    parser.add_argument(
        '--seed',
        type=int,
        help='Seed the sequence generator for a reproducible game'
    )
    parser.add_argument(
        '--log-dir',
        default='logs',
        help='Directory for log files'
    )
    parser.add_argument(
        '--debug',
        action='store_true',
        help='Verbose logging'
    )
    return parser.parse_args(argv)


def create_config(args: argparse.Namespace) -> GameConfig:
    return GameConfig(
        button_count=args.buttons,
        difficulty=Difficulty(args.difficulty),
        audio=AudioConfig(sound_enabled=not args.no_sound),
        scores=ScoreConfig(scores_path=args.scores_file)
    )


def create_game_system(config: GameConfig, args: argparse.Namespace, app_logger) -> GameManager:
    """
    Create and configure the complete game system.

    Args:
        config: GameConfig instance with session configuration
        args: Parsed command line arguments
        app_logger: ClassLogger instance for logging initialization steps

    Returns:
        GameManager: Configured game manager ready to run
    """
    config.validate()

    level = logging.DEBUG if args.debug else logging.INFO
    game_manager_logger = app_logger.create_class_logger("GameManager", level)
    input_logger = app_logger.create_class_logger("InputReader", level)
    audio_logger = app_logger.create_class_logger("ToneEmitter", level)
    score_logger = app_logger.create_class_logger("ScoreStore", level)
    display_logger = app_logger.create_class_logger("Display", logging.INFO)

    input_reader = None
    try:
        input_reader = InputReader(
            sampler=KeyboardSampler(logger=input_logger),
            button_count=config.button_count,
            logger=input_logger
        )

        if args.mock_audio:
            app_logger.info("🔇 Using MockToneEmitter (audio hardware disabled)")
            tone_emitter = MockToneEmitter(logger=audio_logger)
        else:
            tone_emitter = PygameToneEmitter(audio_config=config.audio, logger=audio_logger)

        score_store = CsvScoreStore(scores_path=config.scores.scores_path, logger=score_logger)

        generator = seeded_generator(args.seed) if args.seed is not None else None

        game_manager = GameManager(
            config=config,
            tone_emitter=tone_emitter,
            score_store=score_store,
            logger=game_manager_logger,
            input_reader=input_reader,
            generator=generator
        )
        game_manager.add_listener(ConsoleDisplay(config.button_count, display_logger))

        app_logger.info("Game system initialized successfully")
        return game_manager

    except Exception as e:
        app_logger.error(f"Failed to initialize game system: {e}", exception=e)
        if input_reader is not None:
            input_reader.cleanup()
        raise


def main(argv=None) -> int:
    """
    Main function - sets up and runs the game.
    """
    args = parse_args(argv)

    # Raw terminal mode needs explicit carriage returns
    main_logger = HybridLogger("SimonSays", log_dir=args.log_dir, console_terminator="\r\n")
    app_logger = main_logger.get_class_logger("SimonSays")

    config = create_config(args)
    app_logger.info("🎮 SIMON SAYS")
    app_logger.info(f"Board: {config.button_count} buttons, {config.difficulty.value} mode")
    app_logger.info(f"Best scores: {config.scores.scores_path}")

    try:
        game_manager = create_game_system(config, args, app_logger)
        app_logger.info("Press n to start, q to quit")
        game_manager.run_game_loop()

    except KeyboardInterrupt:
        app_logger.info("⏹️  Simon Says stopped by user")
    except Exception as e:
        app_logger.error(f"Simon Says error: {e}", exception=e)
        return 1
    finally:
        app_logger.info("✅ Simon Says shut down")
        main_logger.cleanup()

    return 0


if __name__ == "__main__":
    sys.exit(main())
