from __future__ import annotations

import random
from typing import Dict, Iterator, Optional

from .connection import Channel, Connection
from .identity import generate_nickname


class Registry:
    """All currently open connections, keyed by connection id."""

    def __init__(self, rng: Optional[random.Random] = None):
        self._connections: Dict[str, Connection] = {}
        self._rng = rng

    def register(self, conn_id: str, channel: Channel) -> Connection:
        """Create and store a ``menu``-mode connection with a generated nickname.

        The caller is responsible for telling the client its identity.
        """
        conn = Connection(conn_id, generate_nickname(self._rng), channel)
        self._connections[conn_id] = conn
        return conn

    def deregister(self, conn_id: str) -> Optional[Connection]:
        return self._connections.pop(conn_id, None)

    def get(self, conn_id: str) -> Optional[Connection]:
        return self._connections.get(conn_id)

    def in_mode(self, mode: str) -> Iterator[Connection]:
        """Yield every connection currently in *mode* (linear scan)."""
        for conn in list(self._connections.values()):
            if conn.mode == mode:
                yield conn

    def count(self) -> int:
        return len(self._connections)

    def __iter__(self) -> Iterator[Connection]:
        # Snapshot so visitors may deregister while iterating.
        return iter(list(self._connections.values()))

    def __contains__(self, conn_id: object) -> bool:
        return conn_id in self._connections

__all__ = ["Registry"]
