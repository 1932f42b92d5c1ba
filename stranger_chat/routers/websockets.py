from __future__ import annotations

import asyncio
import logging
import uuid
from typing import Optional

from fastapi import APIRouter, WebSocket, WebSocketDisconnect

from ..chat_logic import handle_ws_message
from ..lifecycle import on_close, on_error, on_open
from ..state import ChatState

logger = logging.getLogger(__name__)

router = APIRouter(prefix="", tags=["ws"])


class SocketChannel:
    """Adapts a Starlette ``WebSocket`` to the core's fire-and-forget channel.

    ``send`` only enqueues; :meth:`pump` is the single writer for the socket.
    """

    def __init__(self, ws: WebSocket):
        self._ws = ws
        self._outbox: asyncio.Queue[Optional[str]] = asyncio.Queue()
        self.closed = False

    def send(self, payload: str) -> None:
        if not self.closed:
            self._outbox.put_nowait(payload)

    def close(self) -> None:
        if not self.closed:
            self.closed = True
            self._outbox.put_nowait(None)

    async def pump(self) -> None:
        while True:
            payload = await self._outbox.get()
            if payload is None:
                break
            try:
                await self._ws.send_text(payload)
            except Exception as e:
                logger.warning("Send failed, closing socket: %s", e)
                self.closed = True
                break
        try:
            await self._ws.close()
        except Exception:
            pass  # already closed by the peer


@router.websocket("/")
@router.websocket("/ws")
async def chat_endpoint(ws: WebSocket):
    await ws.accept()
    state: ChatState = ws.app.state.chat
    channel = SocketChannel(ws)
    conn_id = uuid.uuid4().hex
    writer = asyncio.create_task(channel.pump())
    on_open(state, conn_id, channel)
    try:
        while True:
            text = await ws.receive_text()
            handle_ws_message(state, conn_id, text)
    except WebSocketDisconnect:
        pass
    except Exception as e:
        on_error(state, conn_id, e)
    finally:
        on_close(state, conn_id)
        channel.close()
        await writer
