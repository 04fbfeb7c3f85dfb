"""
Main game manager - orchestrates state machine, player input, playback and scoring
"""

import time
from typing import Callable, List, Optional, TYPE_CHECKING

import psutil

from .config import GameConfig
from .game_session import GameSession
from .game_types import GameSnapshot, GameStatus, Verdict
from .playback_scheduler import PlaybackScheduler
from .sequence_generator import SequenceGenerator, next_symbol
from .states import GameState, IdleState
from .symbols import get_symbol_set
from button_system.input_event import InputKind
from utils import OnceInMs

if TYPE_CHECKING:
    from audio_system.tone_emitter import IToneEmitter
    from button_system.interfaces import IInputReader
    from score_system.score_store import IScoreStore
    from utils import ClassLogger


class GameManager:
    """
    Main game manager that owns one game configuration for its lifetime.

    Responsibilities:
    - Hold the current GameState and apply transitions
    - Own the GameSession (sequence, progress, round, score)
    - Drive playback and input feedback timers from the game loop
    - Read the best score once, write it on every game over
    - Publish a GameSnapshot to listeners after every observable change

    Everything runs on the caller's thread: start(), submit(), reset() and
    update() each run to completion before the next event is processed.
    """

    def __init__(self,
                 config: GameConfig,
                 tone_emitter: 'IToneEmitter',
                 score_store: 'IScoreStore',
                 logger: 'ClassLogger',
                 input_reader: Optional['IInputReader'] = None,
                 generator: Optional[SequenceGenerator] = None,
                 clock: Optional[Callable[[], float]] = None):
        """
        Initialize the game manager.

        Args:
            config: Validated session configuration (board size, difficulty, timing)
            tone_emitter: IToneEmitter for cue and feedback tones
            score_store: IScoreStore holding best scores
            logger: Logger for debugging and monitoring
            input_reader: Optional IInputReader polled on every update()
            generator: Symbol generator taking the board size (defaults to uniform random)
            clock: Millisecond clock shared by all timers (defaults to wall clock)
        """
        config.validate()

        self.config = config
        self.tone_emitter = tone_emitter
        self.score_store = score_store
        self.logger = logger
        self.input_reader = input_reader
        self.generator: SequenceGenerator = generator or next_symbol
        self.clock = clock or (lambda: time.time() * 1000)
        self.symbols = get_symbol_set(config.button_count)
        self.target_frame_duration = config.frame_duration_ms / 1000.0
        self.running = True

        self.session = GameSession()
        self.active_symbol: Optional[int] = None
        self.last_verdict: Optional[Verdict] = None
        self.sound_enabled = config.audio.sound_enabled
        self._listeners: List[Callable[[GameSnapshot], None]] = []

        self.playback_scheduler = PlaybackScheduler(
            config.timing, logger.create_class_logger("PlaybackScheduler"), self.clock
        )
        self.feedback_scheduler = PlaybackScheduler(
            config.timing, logger.create_class_logger("FeedbackScheduler"), self.clock
        )

        self.best_score: Optional[int] = self._read_best_score()

        # Usage monitoring using OnceInMs
        self._usage_monitor = OnceInMs(config.usage_log_interval_ms, self.clock)
        self._process = psutil.Process()

        # State management - create initial IdleState
        self.current_state: GameState = IdleState(self)
        self.current_state.on_enter()

        best = "none" if self.best_score is None else self.best_score
        self.logger.info(
            f"GameManager initialized: {config.button_count} buttons, "
            f"{config.difficulty.value} mode, best score {best}"
        )

    # ------------------------------------------------------------------
    # External events
    # ------------------------------------------------------------------

    @property
    def status(self) -> GameStatus:
        return self.current_state.status

    def start(self) -> bool:
        """
        Start a new game. Accepted only while idle or after a game over.

        Returns:
            True if a new game started, False if the command was ignored
        """
        new_state = self.current_state.handle_start()
        if new_state is None:
            self.logger.debug(f"Start ignored while {self.status.value}")
            return False
        self._transition_to_state(new_state)
        return True

    def submit(self, symbol_id: int) -> Optional[Verdict]:
        """
        Submit one player selection.

        Input is only evaluated while waiting; anything else, including
        ids outside the board, is dropped without touching the session.

        Args:
            symbol_id: Selected symbol id

        Returns:
            The verdict, or None if the input was dropped
        """
        if not (0 <= symbol_id < self.config.button_count):
            self.logger.debug(f"Dropping out-of-range symbol {symbol_id}")
            return None
        if not self.status.accepts_input:
            self.logger.debug(f"Dropping symbol {symbol_id} while {self.status.value}")
            return None

        self.last_verdict = None
        new_state = self.current_state.handle_input(symbol_id)
        verdict = self.last_verdict

        if new_state:
            self._transition_to_state(new_state)
        else:
            self._notify()
        return verdict

    def reset(self) -> None:
        """Abandon any game in progress and return to idle"""
        self.feedback_scheduler.cancel()
        self.active_symbol = None
        self._transition_to_state(IdleState(self))

    def set_sound_enabled(self, enabled: bool) -> None:
        self.sound_enabled = enabled
        self.logger.info(f"Sound {'enabled' if enabled else 'disabled'}")

    # ------------------------------------------------------------------
    # Game loop
    # ------------------------------------------------------------------

    def run_game_loop(self) -> None:
        """
        Run the game loop with automatic frame duration limiting.

        Call this from your main() function for automatic frame management.
        """
        self.logger.info(f"Starting game loop with {int(self.target_frame_duration*1000)}ms frame duration")

        try:
            while self.running:
                frame_start = time.time()

                self.update()

                # Frame duration limiting
                frame_duration = time.time() - frame_start
                sleep_time = self.target_frame_duration - frame_duration

                if sleep_time > 0:
                    time.sleep(sleep_time)

        except KeyboardInterrupt:
            self.logger.info("Game stopped by user (Ctrl+C)")
            self.logger.flush()
        except Exception as e:
            self.logger.error(f"Game loop error: {e}", exception=e)
            raise
        finally:
            self.stop()

    def update(self) -> None:
        """
        Main update - call this repeatedly in your main loop.

        Handles pending input, feedback timers, and timer-driven transitions.
        """
        # 0. Log resource usage (throttled)
        if self.config.usage_log_interval_ms > 0 and self._usage_monitor.should_execute():
            self._log_usage()

        # 1. Dispatch pending input
        if self.input_reader is not None:
            for event in self.input_reader.read_events():
                self._dispatch(event)

        # 2. Input feedback timers
        self.feedback_scheduler.update()

        # 3. Let state handle timers and check for state transitions
        new_state = self.current_state.state_update()
        if new_state:
            self._transition_to_state(new_state)

    def stop(self) -> None:
        """Stop the game and clean up resources."""
        self.running = False
        self.playback_scheduler.cancel()
        self.feedback_scheduler.cancel()
        self.active_symbol = None

        self.tone_emitter.cleanup()
        if self.input_reader is not None:
            self.input_reader.cleanup()

        self.logger.info("Game stopped")

    def _dispatch(self, event) -> None:
        if event.kind is InputKind.SYMBOL:
            self.submit(event.symbol_id)
        elif event.kind is InputKind.START:
            self.start()
        elif event.kind is InputKind.RESET:
            self.reset()
        elif event.kind is InputKind.TOGGLE_SOUND:
            self.set_sound_enabled(not self.sound_enabled)
        elif event.kind is InputKind.QUIT:
            self.logger.info("Quit requested")
            self.running = False

    # ------------------------------------------------------------------
    # Session operations used by the states
    # ------------------------------------------------------------------

    def new_session(self) -> None:
        """Replace the session with a fresh one seeded with one symbol"""
        self.session = GameSession()
        self.session.extend(self._generate())
        self.last_verdict = None

    def discard_session(self) -> None:
        self.session = GameSession()

    def advance_round(self) -> None:
        """Credit the completed round and extend the sequence by one symbol"""
        session = self.session
        session.score = session.round
        session.extend(self._generate())
        self.logger.info(f"Round {session.score} complete, starting round {session.round}")

    def record_score(self) -> None:
        """
        Write the session score to the store, at most once per session.

        Best effort: a failing store is logged and never affects the game.
        """
        session = self.session
        if session.score_recorded:
            self.logger.warning("Score already recorded for this game, skipping")
            return
        session.score_recorded = True

        if self.best_score is None or session.score > self.best_score:
            self.best_score = session.score

        try:
            self.score_store.write(self.config.button_count, self.config.difficulty, session.score)
        except Exception as e:
            self.logger.warning(f"Unable to save best score: {e}")

    def activate_symbol(self, symbol_id: int) -> None:
        """Light a symbol and play its cue tone"""
        self.active_symbol = symbol_id
        self._play_tone(symbol_id, self.config.timing.tone_on_ms)
        self._notify()

    def deactivate_symbol(self, symbol_id: int) -> None:
        if self.active_symbol == symbol_id:
            self.active_symbol = None
            self._notify()

    def flash_input(self, symbol_id: int) -> None:
        """Short light and tone confirming a player press"""
        self.feedback_scheduler.cancel()
        self.active_symbol = symbol_id
        self._play_tone(symbol_id, self.config.timing.input_tone_ms)
        self.feedback_scheduler.schedule(
            self.config.timing.input_tone_ms,
            lambda: self.deactivate_symbol(symbol_id)
        )

    # ------------------------------------------------------------------
    # Observers
    # ------------------------------------------------------------------

    def add_listener(self, listener: Callable[[GameSnapshot], None]) -> None:
        """Register a callback receiving a GameSnapshot after every change"""
        self._listeners.append(listener)

    def snapshot(self) -> GameSnapshot:
        session = self.session
        return GameSnapshot(
            status=self.status,
            difficulty=self.config.difficulty,
            button_count=self.config.button_count,
            round=session.round,
            score=session.score,
            best_score=self.best_score,
            active_symbol=self.active_symbol,
            progress_length=len(session.progress),
            sequence_length=len(session.sequence)
        )

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _generate(self) -> int:
        symbol_id = self.generator(self.config.button_count)
        if not (0 <= symbol_id < self.config.button_count):
            raise ValueError(f"Generator produced {symbol_id}, outside 0-{self.config.button_count - 1}")
        return symbol_id

    def _read_best_score(self) -> Optional[int]:
        try:
            return self.score_store.read(self.config.button_count, self.config.difficulty)
        except Exception as e:
            self.logger.warning(f"Unable to load best score: {e}")
            return None

    def _play_tone(self, symbol_id: int, duration_ms: int) -> None:
        if not self.sound_enabled:
            return
        try:
            self.tone_emitter.play(self.symbols[symbol_id].tone, duration_ms)
        except Exception as e:
            self.logger.warning(f"Tone playback failed: {e}")

    def _notify(self) -> None:
        if not self._listeners:
            return
        snapshot = self.snapshot()
        for listener in self._listeners:
            listener(snapshot)

    def _log_usage(self) -> None:
        """Log current process memory and CPU usage"""
        try:
            process_mb = self._process.memory_info().rss / 1024 / 1024
            process_cpu_percent = self._process.cpu_percent(interval=None)
            self.logger.info(f"💾 Memory: {process_mb:.1f}MB | ⚙️  CPU: {process_cpu_percent:.1f}%")
        except psutil.Error as e:
            self.logger.warning(f"Failed to log system usage: {e}")

    def _transition_to_state(self, new_state: GameState) -> None:
        """
        Handle transition to a new game state.

        Args:
            new_state: The new state to transition to
        """
        self.current_state.on_exit()

        old_state_name = self.current_state.__class__.__name__
        new_state_name = new_state.__class__.__name__
        self.logger.info(f"State transition: {old_state_name} → {new_state_name}")

        self.current_state = new_state
        self.current_state.on_enter()

        self._notify()
