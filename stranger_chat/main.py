"""Run the chat server: ``python -m stranger_chat.main``."""
from __future__ import annotations

import logging

import uvicorn

from .settings import get_settings

logger = logging.getLogger(__name__)


def main() -> None:
    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper(),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
    )
    logger.info("Server started on port %d...", settings.port)
    uvicorn.run(
        "stranger_chat.app:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
