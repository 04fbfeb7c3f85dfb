"""
Symbol sets - the fixed buttons a player can choose from
"""

from dataclasses import dataclass
from typing import Dict, List, Optional, Tuple

SUPPORTED_SIZES: Tuple[int, ...] = (4, 7, 10)


@dataclass(frozen=True)
class Symbol:
    """One selectable button: identity, accent color, tone and key binding"""
    id: int
    color: str         # Hex accent, e.g. "#FF4444"
    tone: float        # Frequency in Hz
    label: str
    key_binding: Optional[str] = None


# Full palette in identity order; smaller sets are prefixes of it
_PALETTE: List[Symbol] = [
    Symbol(0, "#FF4444", 261.63, "Red", "1"),
    Symbol(1, "#4444FF", 329.63, "Blue", "2"),
    Symbol(2, "#44FF44", 392.00, "Green", "3"),
    Symbol(3, "#FFFF44", 523.25, "Yellow", "4"),
    Symbol(4, "#FF8800", 349.23, "Orange", "5"),
    Symbol(5, "#8800FF", 440.00, "Purple", "6"),
    Symbol(6, "#00FFFF", 493.88, "Cyan", "7"),
    Symbol(7, "#FF00FF", 587.33, "Magenta", "8"),
    Symbol(8, "#888888", 659.25, "Gray", "9"),
    Symbol(9, "#8B4513", 698.46, "Brown", "0"),
]

SYMBOL_SETS: Dict[int, Tuple[Symbol, ...]] = {
    size: tuple(_PALETTE[:size]) for size in SUPPORTED_SIZES
}


def get_symbol_set(size: int) -> Tuple[Symbol, ...]:
    """
    Get the symbol set for a board size.

    Args:
        size: Number of buttons (4, 7 or 10)

    Returns:
        Tuple of symbols, index == symbol id

    Raises:
        ValueError: If size is not a supported board size
    """
    if size not in SYMBOL_SETS:
        raise ValueError(f"Unsupported button count {size} (expected one of {SUPPORTED_SIZES})")
    return SYMBOL_SETS[size]
