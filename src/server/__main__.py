"""Run the archive API with ``python -m server``."""

from __future__ import annotations

import os

import uvicorn

from canvas2kanban.config import CANVAS2KANBAN_ROOT
from canvas2kanban.utils.logging_config import configure_logging, get_logger

logger = get_logger("server")


def main() -> None:
    """Start uvicorn on ``HOST``/``PORT`` with the package log handlers."""
    # Handlers go on before uvicorn starts; log_config=None keeps uvicorn from replacing them
    configure_logging()

    host = os.getenv("HOST", "127.0.0.1")
    port = int(os.getenv("PORT", "8000"))
    reload = os.getenv("RELOAD", "false").lower() == "true"

    logger.info("Serving canvases under %s on %s:%d", CANVAS2KANBAN_ROOT, host, port)
    uvicorn.run("server.main:app", host=host, port=port, reload=reload, log_config=None)


if __name__ == "__main__":
    main()
