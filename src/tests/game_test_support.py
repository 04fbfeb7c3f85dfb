"""
Shared fakes for the game system tests
"""

import logging
from typing import Iterable, List, Optional

from audio_system import MockToneEmitter
from game_system import Difficulty, GameConfig, GameManager, GameStatus
from score_system import MemoryScoreStore
from utils import HybridLogger


def make_logger(name: str = "Test"):
    """Silent DEBUG-level ClassLogger (no console, no file)"""
    main_logger = HybridLogger(f"SimonSaysTest.{name}", log_dir=None, console=False)
    return main_logger.get_class_logger(name, logging.DEBUG)


class FakeClock:
    """Millisecond clock advanced by hand"""

    def __init__(self, start_ms: float = 0):
        self.now = start_ms

    def __call__(self) -> float:
        return self.now

    def advance(self, ms: float) -> None:
        self.now += ms


class ScriptedGenerator:
    """Returns scripted symbol ids in order, then repeats the last one"""

    def __init__(self, draws: Iterable[int]):
        self.draws: List[int] = list(draws)
        self.calls = 0

    def __call__(self, size: int) -> int:
        index = min(self.calls, len(self.draws) - 1)
        self.calls += 1
        return self.draws[index]


class RecordingListener:
    def __init__(self):
        self.snapshots = []

    def __call__(self, snapshot) -> None:
        self.snapshots.append(snapshot)

    @property
    def highlights(self) -> List[int]:
        """Symbol ids in the order they lit up"""
        lit = []
        previous = None
        for snapshot in self.snapshots:
            if snapshot.active_symbol is not None and snapshot.active_symbol != previous:
                lit.append(snapshot.active_symbol)
            previous = snapshot.active_symbol
        return lit


def make_manager(button_count: int = 4,
                 difficulty: Difficulty = Difficulty.NORMAL,
                 draws: Optional[Iterable[int]] = None,
                 score_store=None,
                 tone_emitter=None,
                 input_reader=None,
                 clock: Optional[FakeClock] = None) -> GameManager:
    """Build a GameManager wired to fakes; the clock is exposed as manager.clock"""
    logger = make_logger("GameManager")
    config = GameConfig(button_count=button_count, difficulty=difficulty, usage_log_interval_ms=0)
    return GameManager(
        config=config,
        tone_emitter=tone_emitter or MockToneEmitter(logger),
        score_store=score_store if score_store is not None else MemoryScoreStore(),
        logger=logger,
        input_reader=input_reader,
        generator=ScriptedGenerator(draws if draws is not None else [0]),
        clock=clock or FakeClock()
    )


def finish_playback(manager: GameManager) -> None:
    """Advance the fake clock past the whole playback and let the manager react"""
    duration = manager.config.timing.playback_duration_ms(len(manager.session.sequence))
    manager.clock.advance(duration)
    manager.update()
    assert manager.status is GameStatus.WAITING, f"still {manager.status}"


def play_round(manager: GameManager) -> None:
    """Watch the playback and repeat the sequence correctly"""
    finish_playback(manager)
    for symbol_id in list(manager.session.sequence):
        manager.submit(symbol_id)
