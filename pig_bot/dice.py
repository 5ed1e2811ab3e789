# dice.py
# Randomness source for die rolls made without Telegram's dice animation

import random
from typing import Optional

from config import DIE_FACES


def roll_die(rng: Optional[random.Random] = None) -> int:
    """
    Roll a single die with uniform range sampling.

    Args:
        rng: Optional RNG instance, the module RNG is used when omitted

    Returns:
        Die face (1-6)
    """
    return (rng or random).randint(1, DIE_FACES)


def die_from_draw(draw: int) -> int:
    """
    Map a wide random draw onto a die face with the legacy modulo mapping.

    Slightly biased towards low faces when the draw range is not a multiple
    of six. Kept for replaying recorded draws.

    Args:
        draw: Non-negative random integer

    Returns:
        Die face (1-6)
    """
    if draw < 0:
        raise ValueError(f"Draw must be non-negative, got {draw}")
    return draw % DIE_FACES + 1
