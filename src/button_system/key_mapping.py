"""
Keyboard normalization - raw key names to symbol ids and commands
"""

from typing import Dict, Optional

from .input_event import InputEvent, InputKind

# Rotational layout for the 4-button board: up, right, down, left
DIRECTION_KEYS: Dict[str, int] = {
    "arrowup": 0, "up": 0, "w": 0,
    "arrowright": 1, "right": 1, "d": 1,
    "arrowdown": 2, "down": 2, "s": 2,
    "arrowleft": 3, "left": 3, "a": 3,
}

COMMAND_KEYS: Dict[str, InputKind] = {
    "n": InputKind.START,
    "enter": InputKind.START,
    "return": InputKind.START,
    "space": InputKind.START,
    "r": InputKind.RESET,
    "m": InputKind.TOGGLE_SOUND,
    "q": InputKind.QUIT,
    "escape": InputKind.QUIT,
    "ctrl+c": InputKind.QUIT,
}


def key_to_symbol(key: str, button_count: int) -> Optional[int]:
    """
    Map a key name to a symbol id for the active board.

    Digits 1-9 map to ids 0-8 and 0 maps to id 9. On the 4-button board,
    arrow keys and WASD also map to ids 0-3 (up, right, down, left).
    Accepts browser style ("ArrowUp") and terminal/pygame style ("up") names.

    Args:
        key: Key name, case-insensitive
        button_count: Active board size

    Returns:
        Symbol id, or None if the key is unbound or outside the board

    Example:
        key_to_symbol("0", 10)  # 9
        key_to_symbol("0", 4)   # None
        key_to_symbol("ArrowLeft", 4)  # 3
    """
    key = key.lower()
    symbol_id: Optional[int] = None

    if len(key) == 1 and key.isdigit():
        symbol_id = 9 if key == "0" else int(key) - 1
    elif button_count == 4:
        symbol_id = DIRECTION_KEYS.get(key)

    if symbol_id is None or symbol_id >= button_count:
        return None
    return symbol_id


def key_to_event(key: str, button_count: int) -> Optional[InputEvent]:
    """
    Translate one key name into a game input event.

    Symbol bindings win over command bindings, so WASD on the 4-button
    board never triggers a command.

    Returns:
        InputEvent, or None if the key means nothing on this board
    """
    symbol_id = key_to_symbol(key, button_count)
    if symbol_id is not None:
        return InputEvent(InputKind.SYMBOL, key, symbol_id)

    kind = COMMAND_KEYS.get(key.lower())
    if kind is not None:
        return InputEvent(kind, key)
    return None
