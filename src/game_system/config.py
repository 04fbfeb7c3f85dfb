"""
Game system configuration
"""

from dataclasses import dataclass, field

from .game_types import Difficulty
from .symbols import SUPPORTED_SIZES


@dataclass(frozen=True)
class TimingConfig:
    """Playback and feedback timing, all in milliseconds"""
    pre_roll_ms: int = 800        # Silence before the first cue
    step_interval_ms: int = 500   # Start-to-start spacing between cues
    tone_on_ms: int = 400         # How long each cue stays lit
    ready_delay_ms: int = 500     # Pause after the last cue before input opens
    input_tone_ms: int = 300      # Feedback flash for player presses

    def playback_duration_ms(self, sequence_length: int) -> int:
        """Total time from playback start until input opens"""
        if sequence_length <= 0:
            return 0
        last_activate = self.pre_roll_ms + (sequence_length - 1) * self.step_interval_ms
        return last_activate + self.tone_on_ms + self.ready_delay_ms


@dataclass(frozen=True)
class AudioConfig:
    """Tone synthesis settings"""
    sound_enabled: bool = True
    sample_rate_hz: int = 44100
    start_gain: float = 0.3
    end_gain: float = 0.01


@dataclass(frozen=True)
class ScoreConfig:
    """Best score persistence"""
    scores_path: str = "SimonSaysScores.csv"


@dataclass(frozen=True)
class GameConfig:
    """Session configuration, fixed once a game manager is created"""

    button_count: int = 4
    difficulty: Difficulty = Difficulty.NORMAL

    timing: TimingConfig = field(default_factory=TimingConfig)
    audio: AudioConfig = field(default_factory=AudioConfig)
    scores: ScoreConfig = field(default_factory=ScoreConfig)

    # Game loop frame duration
    frame_duration_ms: float = 20

    # Resource usage log interval
    usage_log_interval_ms: int = 60000

    @property
    def target_fps(self) -> float:
        """Target FPS derived from frame duration"""
        return 1000.0 / self.frame_duration_ms

    def validate(self) -> None:
        """Basic validation of configuration"""
        if self.button_count not in SUPPORTED_SIZES:
            raise ValueError(f"Button count must be one of {SUPPORTED_SIZES}, got {self.button_count}")

        if not isinstance(self.difficulty, Difficulty):
            raise ValueError(f"Difficulty must be a Difficulty, got {self.difficulty!r}")

        if self.frame_duration_ms <= 0:
            raise ValueError("Frame duration must be positive")

        timing = self.timing
        for name in ("pre_roll_ms", "step_interval_ms", "tone_on_ms", "ready_delay_ms", "input_tone_ms"):
            if getattr(timing, name) < 0:
                raise ValueError(f"Timing value {name} must not be negative")
        if timing.tone_on_ms <= 0:
            raise ValueError("Cue duration must be positive")
        if timing.input_tone_ms <= 0:
            raise ValueError("Input feedback duration must be positive")
        if timing.step_interval_ms < timing.tone_on_ms:
            raise ValueError(
                f"Step interval ({timing.step_interval_ms}ms) must not be shorter than "
                f"cue duration ({timing.tone_on_ms}ms)"
            )

        if self.audio.sample_rate_hz <= 0:
            raise ValueError("Sample rate must be positive")
        if not (0.0 < self.audio.end_gain <= self.audio.start_gain <= 1.0):
            raise ValueError("Gain ramp must satisfy 0 < end_gain <= start_gain <= 1")

        if not self.scores.scores_path:
            raise ValueError("Scores path must not be empty")
