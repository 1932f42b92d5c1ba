from __future__ import annotations

from typing import Optional

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from .routers import stats as stats_router
from .routers import websockets as ws_router
from .settings import Settings, get_settings
from .state import ChatState

# -----------------------------
# FastAPI app factory
# -----------------------------

def create_app(settings: Optional[Settings] = None, state: Optional[ChatState] = None) -> FastAPI:
    settings = settings or get_settings()

    app = FastAPI(title="Stranger Chat")

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origin_list,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # One registry + matchmaker per app instance
    app.state.chat = state or ChatState()

    app.include_router(stats_router.router)
    app.include_router(ws_router.router)
    return app


app = create_app()

__all__ = ["app", "create_app"]
