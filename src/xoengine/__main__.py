"""Entry point for running xoengine via ``python -m xoengine``."""

from __future__ import annotations

import logging
import os

import uvicorn


def main() -> None:
    """Start the FastAPI-powered engine server."""

    host = os.environ.get("XOENGINE_HOST", "0.0.0.0")
    port = int(os.environ.get("XOENGINE_PORT", "8000"))
    log_level = os.environ.get("XOENGINE_LOG_LEVEL", "info").lower()

    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )
    uvicorn.run("xoengine.ui:app", host=host, port=port, log_level=log_level, reload=False)


if __name__ == "__main__":
    main()
