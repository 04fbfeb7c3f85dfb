"""
Random symbol generation for growing the round sequence
"""

import random
from typing import Callable, Optional

# Signature shared by next_symbol and any scripted replacement used in tests
SequenceGenerator = Callable[[int], int]


def next_symbol(size: int, rng: Optional[random.Random] = None) -> int:
    """
    Draw the next symbol id uniformly from [0, size), with replacement.

    Args:
        size: Number of symbols in the active set
        rng: Optional random source (module-level random when omitted)

    Returns:
        Symbol id to append to the round sequence
    """
    if size <= 0:
        raise ValueError(f"Symbol set size must be positive, got {size}")
    source = rng if rng is not None else random
    return source.randrange(size)


def seeded_generator(seed: int) -> SequenceGenerator:
    """Build a reproducible generator backed by its own random.Random"""
    rng = random.Random(seed)
    return lambda size: next_symbol(size, rng)
