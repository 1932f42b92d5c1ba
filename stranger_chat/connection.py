from __future__ import annotations

import json
from typing import Any, Dict, Protocol

from .constants import MODE_MENU


class Channel(Protocol):
    """What the core needs from the transport: fire-and-forget text sends."""

    def send(self, payload: str) -> None: ...

    def close(self) -> None: ...


class Connection:
    """One live client session as seen by the routing engine.

    Created whole by :class:`stranger_chat.registry.Registry` and owned by it.
    ``nickname`` is fixed for the lifetime of the connection; ``mode`` only
    changes through the dispatcher.
    """

    __slots__ = ("id", "nickname", "mode", "channel")

    def __init__(self, conn_id: str, nickname: str, channel: Channel):
        self.id = conn_id
        self.nickname = nickname
        self.mode: str = MODE_MENU
        self.channel = channel

    def send(self, payload: Dict[str, Any]) -> None:
        """Serialise *payload* and hand it to the transport without waiting."""
        self.channel.send(json.dumps(payload))

    def __repr__(self) -> str:
        return f"Connection(id={self.id!r}, nickname={self.nickname!r}, mode={self.mode!r})"

__all__ = ["Channel", "Connection"]
