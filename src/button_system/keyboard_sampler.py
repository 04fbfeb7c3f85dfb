"""
Terminal keyboard sampler and a scripted sampler for headless runs
"""

import sys
import select
import termios
import time
import tty
from collections import deque
from typing import Callable, Deque, Iterable, List, Optional

from .interfaces import IKeySampler

# Escape sequences sent by terminals for the arrow keys
ARROW_SEQUENCES = {
    "[A": "up",
    "[B": "down",
    "[C": "right",
    "[D": "left",
    "OA": "up",
    "OB": "down",
    "OC": "right",
    "OD": "left",
}

SPECIAL_CHARS = {
    "\r": "enter",
    "\n": "enter",
    " ": "space",
    "\x03": "ctrl+c",
}

# How long a lone ESC waits for the rest of a sequence before it counts as a key
ESCAPE_TIMEOUT_MS = 50


class KeyboardSampler(IKeySampler):
    """
    Raw-mode terminal sampler.

    Reads stdin without blocking (select), so it works over SSH. Digits and
    letters come through as themselves, arrow escape sequences as
    "up"/"down"/"left"/"right", Enter as "enter" and Ctrl+C as "ctrl+c"
    (raw mode swallows SIGINT, so quitting is an input event).

    Escape sequences may arrive split across reads, so a partial sequence is
    kept between calls. A bare ESC is reported as "escape" only after
    ESCAPE_TIMEOUT_MS without a follow-up character.

    Example:
        sampler = KeyboardSampler(logger=logger)
        sampler.setup()
        keys = sampler.read_keys()  # e.g. ["1", "up"]
    """

    def __init__(self, logger, clock: Optional[Callable[[], float]] = None):
        """
        Args:
            logger: ClassLogger instance for logging
            clock: Millisecond clock for the escape timeout (defaults to wall clock)
        """
        self._logger = logger
        self._clock = clock or (lambda: time.time() * 1000)
        self._pending_escape = ""
        self._escape_started_ms = 0.0
        self._stdin_available = False
        self._original_terminal_settings = None
        self._raw_mode_enabled = False

    def _check_stdin_available(self) -> bool:
        """Check if stdin is an interactive terminal"""
        try:
            if not sys.stdin.isatty():
                return False
            select.select([sys.stdin], [], [], 0)
            return True
        except (OSError, ValueError):
            return False

    def _enable_raw_mode(self) -> bool:
        """
        Enable raw terminal mode for immediate key capture.

        Returns:
            True if raw mode enabled successfully, False otherwise
        """
        try:
            self._original_terminal_settings = termios.tcgetattr(sys.stdin)
            tty.setraw(sys.stdin.fileno())
            self._raw_mode_enabled = True
            return True
        except (termios.error, OSError) as e:
            self._logger.warning(f"Could not enable raw terminal mode: {e}")
            return False

    def _disable_raw_mode(self) -> None:
        """Restore original terminal settings"""
        if self._raw_mode_enabled and self._original_terminal_settings:
            try:
                termios.tcsetattr(
                    sys.stdin.fileno(),
                    termios.TCSADRAIN,
                    self._original_terminal_settings
                )
            except (termios.error, OSError) as e:
                self._logger.warning(f"Could not restore terminal settings: {e}")
            self._raw_mode_enabled = False

    def setup(self) -> None:
        """Initialize keyboard input"""
        self._stdin_available = self._check_stdin_available()

        if not self._stdin_available:
            self._logger.error("❌ Keyboard input not available (stdin not accessible or not a TTY)")
            raise RuntimeError("Keyboard input not available")

        if not self._enable_raw_mode():
            self._logger.error("❌ Could not enable raw terminal mode")
            raise RuntimeError("Failed to enable raw terminal mode")

        self._logger.info("🎮 Keyboard sampler initialized")

    def _stdin_ready(self) -> bool:
        return select.select([sys.stdin], [], [], 0) == ([sys.stdin], [], [])

    def _decode_char(self, char: str) -> List[str]:
        """
        Feed one character through the escape decoder.

        Returns:
            Keys completed by this character (usually zero or one)
        """
        pending = self._pending_escape
        if pending == "\x1b":
            if char in ("[", "O"):
                self._pending_escape += char
                return []
            # ESC followed by an ordinary character
            self._pending_escape = ""
            return ["escape"] + self._decode_char(char)

        if pending:
            # SS3 ("ESC O") takes one final char; CSI ("ESC [") ends at a final byte
            if pending == "\x1bO" or "@" <= char <= "~":
                self._pending_escape = ""
                key = ARROW_SEQUENCES.get(pending[1:] + char)
                if key is None:
                    self._logger.debug(f"Ignoring unknown escape sequence {pending[1:] + char!r}")
                    return []
                return [key]
            self._pending_escape += char
            return []

        if char == "\x1b":
            self._pending_escape = char
            self._escape_started_ms = self._clock()
            return []
        if char in SPECIAL_CHARS:
            return [SPECIAL_CHARS[char]]
        return [char.lower()]

    def _flush_stale_escape(self) -> List[str]:
        """Resolve a partial sequence that has waited longer than ESCAPE_TIMEOUT_MS"""
        if not self._pending_escape:
            return []
        if self._clock() - self._escape_started_ms < ESCAPE_TIMEOUT_MS:
            return []

        pending = self._pending_escape
        self._pending_escape = ""
        if pending == "\x1b":
            return ["escape"]
        self._logger.debug(f"Dropping incomplete escape sequence {pending[1:]!r}")
        return []

    def read_keys(self) -> List[str]:
        if not self._stdin_available:
            return []

        keys: List[str] = []
        try:
            while self._stdin_ready():
                char = sys.stdin.read(1)
                if not char:
                    break
                keys.extend(self._decode_char(char))
        except (OSError, ValueError) as e:
            # Keep the game loop running on flaky terminals
            self._logger.warning(f"Keyboard input error: {e}")

        keys.extend(self._flush_stale_escape())
        return keys

    def cleanup(self) -> None:
        """Restore the terminal"""
        self._disable_raw_mode()
        self._pending_escape = ""
        self._logger.info("Keyboard sampler cleaned up")


class ScriptedKeySampler(IKeySampler):
    """
    Sampler fed programmatically, one batch of keys per read.

    Useful for tests, demos and driving the game from another event source
    (e.g. pointer clicks already translated to key names).
    """

    def __init__(self, batches: Optional[Iterable[Iterable[str]]] = None):
        self._batches: Deque[List[str]] = deque(list(batch) for batch in (batches or []))
        self.is_setup = False

    def feed(self, *keys: str) -> None:
        """Queue keys to be returned together by the next read"""
        self._batches.append(list(keys))

    def read_keys(self) -> List[str]:
        if not self._batches:
            return []
        return self._batches.popleft()

    def setup(self) -> None:
        self.is_setup = True

    def cleanup(self) -> None:
        self._batches.clear()
        self.is_setup = False
