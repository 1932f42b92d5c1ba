"""Inbound action handling.

This module turns raw client frames into state changes on a
:class:`~stranger_chat.state.ChatState` and the outbound payloads that
follow from them. It knows nothing about websockets; the router in
``stranger_chat.routers.websockets`` feeds it text and the connections'
channels carry the replies.

Every handler runs to completion without awaiting, so actions from
different connections never interleave.
"""
from __future__ import annotations

import logging

from pydantic import ValidationError

from .connection import Connection
from .constants import JOINABLE_ROOMS, MODE_PUBLIC, MODE_RANDOM, ROOM_JOINED_TEXT
from .schemas import ClientAction
from .state import ChatState

logger = logging.getLogger(__name__)

# ---------------------------------------------------------------------------
# Room selection
# ---------------------------------------------------------------------------

def handle_join_room(state: ChatState, conn: Connection, room: str) -> None:
    if room not in JOINABLE_ROOMS:
        logger.debug("Ignoring join_room for unknown room %r from %s", room, conn.id)
        return

    # Leaving (or re-entering) random chat releases any partner first.
    if conn.mode == MODE_RANDOM:
        state.matchmaker.cleanup(conn.id)

    conn.mode = room
    conn.send({"status": "room_joined", "room": room, "msg": ROOM_JOINED_TEXT[room]})

# ---------------------------------------------------------------------------
# Random chat
# ---------------------------------------------------------------------------

def handle_find_partner(state: ChatState, conn: Connection) -> None:
    conn.mode = MODE_RANDOM
    state.matchmaker.find_partner(conn.id)


def handle_next(state: ChatState, conn: Connection) -> None:
    # Mode is left alone; only find_partner and join_room change it.
    state.matchmaker.next(conn.id)


def handle_private_message(state: ChatState, conn: Connection, content: str) -> None:
    state.matchmaker.send_to_partner(conn.id, {"status": "message", "msg": content})


def handle_typing(state: ChatState, conn: Connection) -> None:
    state.matchmaker.send_to_partner(conn.id, {"status": "typing"})

# ---------------------------------------------------------------------------
# Public room
# ---------------------------------------------------------------------------

def handle_public_message(state: ChatState, conn: Connection, content: str) -> None:
    """Relay *content* to everyone else in the public room.

    Recipients always get ``is_me=False``; the sender echoes locally.
    """
    payload = {"status": "public_msg", "name": conn.nickname, "msg": content, "is_me": False}
    for client in state.registry.in_mode(MODE_PUBLIC):
        if client is not conn:
            client.send(payload)

# ---------------------------------------------------------------------------
# Primary dispatcher used by websocket endpoint
# ---------------------------------------------------------------------------

def parse_action(raw: str) -> ClientAction | None:
    try:
        return ClientAction.model_validate_json(raw)
    except ValidationError:
        return None


def handle_ws_message(state: ChatState, conn_id: str, raw: str) -> None:
    conn = state.registry.get(conn_id)
    if conn is None:
        return

    data = parse_action(raw)
    if data is None:
        logger.debug("Dropping malformed payload from %s", conn_id)
        return

    action = data.action
    if action == "join_room":
        if data.room is not None:
            handle_join_room(state, conn, data.room)
    elif action == "find_partner":
        handle_find_partner(state, conn)
    elif action == "message":
        content = data.content or ""
        if conn.mode == MODE_RANDOM:
            handle_private_message(state, conn, content)
        elif conn.mode == MODE_PUBLIC:
            handle_public_message(state, conn, content)
    elif action == "typing":
        handle_typing(state, conn)
    elif action == "next":
        handle_next(state, conn)
    else:
        logger.debug("Ignoring unknown action %r from %s", action, conn_id)

__all__ = [
    "handle_ws_message",
    "handle_join_room",
    "handle_find_partner",
    "handle_next",
    "handle_private_message",
    "handle_public_message",
    "handle_typing",
    "parse_action",
]
