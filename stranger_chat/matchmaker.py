"""Random-stranger pairing.

The matchmaker keeps a single waiting slot and a symmetric pairing table.
It only stores connection ids; the registry remains the owner of the
:class:`~stranger_chat.connection.Connection` records and is consulted to
deliver notifications.
"""
from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from .constants import CONNECTED_TEXT, DISCONNECTED_TEXT, WAITING_TEXT
from .registry import Registry

logger = logging.getLogger(__name__)


class Matchmaker:
    def __init__(self, registry: Registry):
        self._registry = registry
        self._waiting: Optional[str] = None
        self._pairs: Dict[str, str] = {}

    # ------------------------------------------------------------------
    # Introspection
    # ------------------------------------------------------------------

    @property
    def waiting(self) -> Optional[str]:
        """Id of the connection waiting for a partner, if any."""
        return self._waiting

    def partner_of(self, conn_id: str) -> Optional[str]:
        return self._pairs.get(conn_id)

    def pairs(self) -> Dict[str, str]:
        """Copy of the pairing table (both directions of every pair)."""
        return dict(self._pairs)

    def is_involved(self, conn_id: str) -> bool:
        return conn_id in self._pairs or self._waiting == conn_id

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------

    def find_partner(self, conn_id: str) -> None:
        """Match *conn_id* with the waiting connection, or make it wait.

        Repeated requests from a connection that is already paired or
        already waiting change nothing.
        """
        if self.is_involved(conn_id):
            return

        waiting = self._waiting
        if waiting is not None and self._registry.get(waiting) is None:
            logger.warning("Dropping stale waiting connection %s", waiting)
            self._waiting = waiting = None

        if waiting is not None:
            self._pairs[conn_id] = waiting
            self._pairs[waiting] = conn_id
            self._waiting = None
            self._notify(conn_id, {"status": "connected", "msg": CONNECTED_TEXT})
            self._notify(waiting, {"status": "connected", "msg": CONNECTED_TEXT})
        else:
            self._waiting = conn_id
            self._notify(conn_id, {"status": "waiting", "msg": WAITING_TEXT})

    def send_to_partner(self, conn_id: str, payload: Dict[str, Any]) -> bool:
        """Deliver *payload* to the partner of *conn_id*.

        Returns ``False`` (and sends nothing) when *conn_id* is unpaired.
        """
        partner = self.partner_of(conn_id)
        if partner is None:
            return False
        self._notify(partner, payload)
        return True

    def cleanup(self, conn_id: str) -> None:
        """Break any pair involving *conn_id* and release its waiting slot."""
        partner = self._pairs.pop(conn_id, None)
        if partner is not None:
            self._pairs.pop(partner, None)
            self._notify(partner, {"status": "disconnected", "msg": DISCONNECTED_TEXT})

        if self._waiting == conn_id:
            self._waiting = None

    def next(self, conn_id: str) -> None:
        """Drop the current partner (if any) and look for a new one."""
        self.cleanup(conn_id)
        self.find_partner(conn_id)

    def _notify(self, conn_id: str, payload: Dict[str, Any]) -> None:
        conn = self._registry.get(conn_id)
        if conn is not None:
            conn.send(payload)

__all__ = ["Matchmaker"]
