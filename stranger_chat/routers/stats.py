from __future__ import annotations

from fastapi import APIRouter, Request

from ..schemas import StatsResponse
from ..state import ChatState

router = APIRouter(prefix="", tags=["stats"])


@router.get("/stats", response_model=StatsResponse)
async def get_stats(request: Request):
    state: ChatState = request.app.state.chat
    return StatsResponse(count=state.registry.count())
