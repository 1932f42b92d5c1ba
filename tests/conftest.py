"""
pytest configuration and fixtures.
"""

import json
import random
from typing import Any, Dict, List

import pytest
from fastapi.testclient import TestClient

from stranger_chat.app import create_app
from stranger_chat.chat_logic import handle_ws_message
from stranger_chat.lifecycle import on_open
from stranger_chat.settings import Settings
from stranger_chat.state import ChatState


class RecordingChannel:
    """In-memory channel that keeps every payload the core sends."""

    def __init__(self):
        self.sent: List[Dict[str, Any]] = []
        self.closed = False

    def send(self, payload: str) -> None:
        self.sent.append(json.loads(payload))

    def close(self) -> None:
        self.closed = True

    def statuses(self) -> List[str]:
        return [m["status"] for m in self.sent]

    def of_status(self, status: str) -> List[Dict[str, Any]]:
        return [m for m in self.sent if m["status"] == status]

    def clear(self) -> None:
        self.sent.clear()


@pytest.fixture
def state() -> ChatState:
    """Fresh chat state with a deterministic nickname source."""
    return ChatState(rng=random.Random(1234))


@pytest.fixture
def connect(state):
    """Open a connection on ``state`` and return its recording channel."""

    def _connect(conn_id: str) -> RecordingChannel:
        channel = RecordingChannel()
        on_open(state, conn_id, channel)
        return channel

    return _connect


def send(state: ChatState, conn_id: str, **action: Any) -> None:
    handle_ws_message(state, conn_id, json.dumps(action))


def assert_matchmaker_consistent(state: ChatState) -> None:
    """Pairing table symmetric, no self pairs, waiting id never paired, all ids registered."""
    pairs = state.matchmaker.pairs()
    for a, b in pairs.items():
        assert a != b
        assert pairs.get(b) == a
        assert a in state.registry
    waiting = state.matchmaker.waiting
    if waiting is not None:
        assert waiting not in pairs
        assert waiting in state.registry


@pytest.fixture
def client() -> TestClient:
    app = create_app(settings=Settings(cors_origins="*"))
    with TestClient(app) as test_client:
        yield test_client
