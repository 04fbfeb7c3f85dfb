"""
Game state base class and concrete implementations
"""

from abc import ABC
from typing import Optional, TYPE_CHECKING

from .game_types import Difficulty, GameStatus, Verdict

if TYPE_CHECKING:
    from game_system.game_manager import GameManager


class GameState(ABC):
    """
    Abstract base class for all game states.

    Each state decides which external events it accepts:
    - handle_start(): the start command
    - handle_input(): one player symbol
    - state_update(): once per frame, for timer-driven transitions

    Every handler returns a new GameState instance if a transition is
    needed, or None to stay. The GameManager performs the transition and
    calls on_exit/on_enter, so a handler never switches state itself.
    """

    status: GameStatus

    def __init__(self, game_manager: 'GameManager'):
        self.game_manager: 'GameManager' = game_manager
        self.logger = game_manager.logger.create_class_logger(self.__class__.__name__)

    def handle_start(self) -> Optional['GameState']:
        """Start command (ignored unless overridden)"""
        return None

    def handle_input(self, symbol_id: int) -> Optional['GameState']:
        """Player input (ignored unless overridden)"""
        return None

    def state_update(self) -> Optional['GameState']:
        """Per-frame update (nothing to do unless overridden)"""
        return None

    def on_enter(self) -> None:
        """Called when entering this state - calls custom enter"""
        self.custom_on_enter()

    def on_exit(self) -> None:
        """Called when exiting this state - calls custom exit"""
        self.custom_on_exit()

    def custom_on_enter(self) -> None:
        """Custom enter logic (override if needed)"""
        pass

    def custom_on_exit(self) -> None:
        """Custom exit logic (override if needed)"""
        pass


class IdleState(GameState):
    """
    No game in progress.

    Transitions:
    - start → ShowingState (fresh session)
    """

    status = GameStatus.IDLE

    def custom_on_enter(self) -> None:
        self.game_manager.discard_session()

    def handle_start(self) -> Optional[GameState]:
        self.game_manager.new_session()
        return ShowingState(self.game_manager)


class ShowingState(GameState):
    """
    Replaying the round sequence; player input is ignored.

    Entering always restarts playback from the first cue. Leaving for any
    reason cancels whatever playback is still pending.

    Transitions:
    - playback complete → WaitingState
    """

    status = GameStatus.SHOWING

    def __init__(self, game_manager: 'GameManager'):
        super().__init__(game_manager)
        self._playback_complete = False

    def custom_on_enter(self) -> None:
        session = self.game_manager.session
        self.logger.debug(f"Round {session.round}: showing {len(session.sequence)} cues")
        self.game_manager.playback_scheduler.play_sequence(
            session.sequence,
            on_activate=self.game_manager.activate_symbol,
            on_deactivate=self.game_manager.deactivate_symbol,
            on_complete=self._on_playback_complete
        )

    def custom_on_exit(self) -> None:
        self.game_manager.playback_scheduler.cancel()

    def _on_playback_complete(self) -> None:
        self._playback_complete = True

    def state_update(self) -> Optional[GameState]:
        self.game_manager.playback_scheduler.update()
        if self._playback_complete:
            return WaitingState(self.game_manager)
        return None


class WaitingState(GameState):
    """
    Player's turn: every input is matched against the sequence immediately.

    Transitions:
    - round complete → ShowingState (sequence extended by one)
    - mismatch, normal → ShowingState (same sequence again)
    - mismatch, strict → FailureState
    """

    status = GameStatus.WAITING

    def custom_on_enter(self) -> None:
        self.game_manager.session.matcher.reset()

    def handle_input(self, symbol_id: int) -> Optional[GameState]:
        game_manager = self.game_manager
        session = game_manager.session

        game_manager.flash_input(symbol_id)
        verdict = session.matcher.submit(symbol_id)
        game_manager.last_verdict = verdict

        if verdict is Verdict.ACCEPTED_CONTINUE:
            return None

        if verdict is Verdict.ACCEPTED_ROUND_COMPLETE:
            game_manager.advance_round()
            return ShowingState(game_manager)

        self.logger.info(
            f"Wrong symbol {symbol_id} at step {len(session.progress) + 1}/{len(session.sequence)}"
        )
        if game_manager.config.difficulty is Difficulty.STRICT:
            return FailureState(game_manager)

        session.matcher.reset()
        return ShowingState(game_manager)


class FailureState(GameState):
    """
    Game over (strict mode). Stays here until the next start command.

    Entering records the score exactly once per session.

    Transitions:
    - start → ShowingState (fresh session)
    """

    status = GameStatus.FAILURE

    def custom_on_enter(self) -> None:
        session = self.game_manager.session
        session.score = session.round - 1
        self.logger.info(f"Game over at round {session.round}, score {session.score}")
        self.game_manager.record_score()

    def handle_start(self) -> Optional[GameState]:
        self.game_manager.new_session()
        return ShowingState(self.game_manager)
