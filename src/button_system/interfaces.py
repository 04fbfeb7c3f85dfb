"""
Abstract interfaces for player input
"""

from abc import ABC, abstractmethod
from typing import List

from .input_event import InputEvent


class IKeySampler(ABC):
    """
    Abstract interface for collecting raw key presses.

    Separates reading the device from interpreting keys.
    Allows different implementations: terminal, scripted, network, etc.
    """

    @abstractmethod
    def read_keys(self) -> List[str]:
        """
        Collect every key pressed since the previous call, without blocking.

        Returns:
            Key names in press order (e.g. ["1", "up", "enter"])
        """
        pass

    @abstractmethod
    def setup(self) -> None:
        """Initialize the sampler resources"""
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Cleanup sampler resources"""
        pass


class IInputReader(ABC):
    """
    Abstract interface for input reading systems.

    Turns raw device input into normalized InputEvents so the game never
    knows which modality produced an action.
    """

    @abstractmethod
    def read_events(self) -> List[InputEvent]:
        """
        Read and normalize all pending input.

        Returns:
            InputEvents in arrival order
        """
        pass

    @abstractmethod
    def cleanup(self) -> None:
        """Release any resources held by the reader"""
        pass
