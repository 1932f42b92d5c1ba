"""In-memory runtime state for one chat server instance.

Everything that is shared between connections lives on a single
:class:`ChatState`. The FastAPI app keeps its instance on
``app.state.chat``; tests create their own.
"""
from __future__ import annotations

import random
from typing import Optional

from .matchmaker import Matchmaker
from .registry import Registry


class ChatState:
    def __init__(self, rng: Optional[random.Random] = None):
        self.registry = Registry(rng=rng)
        self.matchmaker = Matchmaker(self.registry)

__all__ = ["ChatState"]
