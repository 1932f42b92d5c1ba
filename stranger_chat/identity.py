"""Display-name generation for freshly opened connections."""
from __future__ import annotations

import random
from typing import Optional

from .constants import ADJECTIVES, NICKNAME_NUMBER_RANGE, NOUNS


def generate_nickname(rng: Optional[random.Random] = None) -> str:
    """Return a name like ``NeonFox512``.

    Names are display labels only; two live connections may share one.
    """
    rng = rng or random
    low, high = NICKNAME_NUMBER_RANGE
    return f"{rng.choice(ADJECTIVES)}{rng.choice(NOUNS)}{rng.randint(low, high)}"

__all__ = ["generate_nickname"]
