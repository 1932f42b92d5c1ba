"""Pydantic models for the wire protocol."""
from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict

# -----------------------------
# Inbound
# -----------------------------

class ClientAction(BaseModel):
    """One JSON object sent by a client, e.g. ``{"action": "join_room", "room": "public"}``."""

    model_config = ConfigDict(extra="ignore")

    action: str
    room: Optional[str] = None
    content: Optional[str] = None


# -----------------------------
# Outbound (HTTP)
# -----------------------------

class StatsResponse(BaseModel):
    status: str = "stats"
    count: int


__all__ = [
    "ClientAction",
    "StatsResponse",
]
