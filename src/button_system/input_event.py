"""
InputEvent - One normalized player action
"""

import enum
from dataclasses import dataclass
from typing import Optional


class InputKind(enum.Enum):
    SYMBOL = "symbol"
    START = "start"
    RESET = "reset"
    TOGGLE_SOUND = "toggle_sound"
    QUIT = "quit"


@dataclass(frozen=True)
class InputEvent:
    """
    Immutable player action, independent of where it came from.

    Usage:
        event = InputEvent(InputKind.SYMBOL, key="3", symbol_id=2)
        if event.kind is InputKind.SYMBOL:
            game_manager.submit(event.symbol_id)
    """
    kind: InputKind
    key: str = ""                     # Raw key name that produced the event
    symbol_id: Optional[int] = None   # Set only for SYMBOL events

    def __post_init__(self):
        if self.kind is InputKind.SYMBOL and self.symbol_id is None:
            raise ValueError("SYMBOL events require a symbol_id")
        if self.kind is not InputKind.SYMBOL and self.symbol_id is not None:
            raise ValueError(f"{self.kind.name} events must not carry a symbol_id")

    def __str__(self) -> str:
        if self.kind is InputKind.SYMBOL:
            return f"InputEvent(symbol={self.symbol_id}, key='{self.key}')"
        return f"InputEvent({self.kind.name}, key='{self.key}')"
