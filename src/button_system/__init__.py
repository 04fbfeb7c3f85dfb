"""
Button System Package

Player input for the game board: key samplers, normalization of keys to
symbol ids and commands, and the reader that ties them together.
"""

from .input_event import InputEvent, InputKind
from .interfaces import IInputReader, IKeySampler
from .input_reader import InputReader
from .key_mapping import key_to_symbol, key_to_event
from .keyboard_sampler import KeyboardSampler, ScriptedKeySampler

__all__ = [
    "InputEvent",
    "InputKind",
    "IInputReader",
    "IKeySampler",
    "InputReader",
    "key_to_symbol",
    "key_to_event",
    "KeyboardSampler",
    "ScriptedKeySampler"
]
