"""
Input reader implementation - raw keys to normalized events
"""

from typing import List

from .interfaces import IInputReader, IKeySampler
from .input_event import InputEvent
from .key_mapping import key_to_event

class InputReader(IInputReader):
    """
    Input reader that normalizes sampled keys into InputEvents.

    Uses IKeySampler for device abstraction (terminal, scripted, etc.).
    Unbound keys and digits beyond the active board are dropped here.

    Example:
        main_logger = HybridLogger("input")
        logger = main_logger.get_class_logger("InputReader", logging.INFO)
        sampler = KeyboardSampler(logger)
        reader = InputReader(sampler, button_count=4, logger=logger)

        while True:
            for event in reader.read_events():
                logger.info(f"Got {event}")
    """

    def __init__(self,
                 sampler: IKeySampler,
                 button_count: int,
                 logger):
        """
        Initialize input reader with injected sampler.

        Args:
            sampler: IKeySampler instance for reading keys
            button_count: Active board size, bounds the digit bindings
            logger: ClassLogger instance from HybridLogger.get_class_logger()
        """
        self._sampler = sampler
        self._button_count = button_count
        self._logger = logger

        self._sampler.setup()

        self._logger.info(f"InputReader initialized for {button_count} buttons")

    def read_events(self) -> List[InputEvent]:
        events: List[InputEvent] = []
        for key in self._sampler.read_keys():
            event = key_to_event(key, self._button_count)
            if event is None:
                self._logger.debug(f"Ignoring unbound key '{key}'")
                continue
            self._logger.debug(f"Key '{key}' → {event}")
            events.append(event)
        return events

    def cleanup(self) -> None:
        """Cleanup input reader and sampler resources."""
        self._sampler.cleanup()
        self._logger.info("InputReader cleaned up")
