"""Connection open/close handling and population-count broadcasts."""
from __future__ import annotations

import logging
from typing import Optional

from .connection import Channel, Connection
from .state import ChatState

logger = logging.getLogger(__name__)


def broadcast_user_count(state: ChatState) -> None:
    """Push the number of open connections to every open connection."""
    payload = {"status": "stats", "count": state.registry.count()}
    for conn in state.registry:
        conn.send(payload)


def on_open(state: ChatState, conn_id: str, channel: Channel) -> Connection:
    conn = state.registry.register(conn_id, channel)
    logger.info("New connection! (%s) assigned name: %s", conn_id, conn.nickname)
    conn.send({"status": "identity", "nickname": conn.nickname})
    broadcast_user_count(state)
    return conn


def on_close(state: ChatState, conn_id: str) -> None:
    """Release matchmaking state, forget the connection, tell everyone else.

    Safe to call more than once for the same id.
    """
    if conn_id not in state.registry:
        return
    state.matchmaker.cleanup(conn_id)
    state.registry.deregister(conn_id)
    logger.info("Connection %s has disconnected", conn_id)
    broadcast_user_count(state)


def on_error(state: ChatState, conn_id: str, exc: Optional[BaseException] = None) -> None:
    """A transport error is terminal: close the socket and clean up."""
    logger.warning("An error has occurred on connection %s: %s", conn_id, exc, exc_info=exc)
    conn = state.registry.get(conn_id)
    if conn is not None:
        conn.channel.close()
    on_close(state, conn_id)

__all__ = ["broadcast_user_count", "on_open", "on_close", "on_error"]
