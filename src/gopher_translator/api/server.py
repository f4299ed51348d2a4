"""
FastAPI server for the Gopher translator.

This module builds the FastAPI application and starts it under uvicorn.
It sets up:
- The history store shared by all requests (the log file is the only
  state that outlives a request)
- All API route endpoints (translation, history, health)

The server listens on port 8080 by default.
"""

import logging
from pathlib import Path

from fastapi import FastAPI

from gopher_translator import __version__
from gopher_translator.api.routes import register_routes
from gopher_translator.config import config
from gopher_translator.history import HistoryStore

logger = logging.getLogger(__name__)


def create_app(history_path: Path | str | None = None, strict: bool | None = None) -> FastAPI:
    """
    Build a FastAPI app bound to a history log.

    Args:
        history_path: Location of the history log.  Defaults to
            ``config.history.absolute_path``.
        strict: Whether malformed stored lines fail reads.  Defaults to
            ``config.history.strict_records``.

    Returns:
        A fully routed FastAPI application.
    """
    if history_path is None:
        history_path = config.history.absolute_path
    if strict is None:
        strict = config.history.strict_records

    store = HistoryStore(history_path, strict=strict)

    application = FastAPI(title="Gopher Translator", version=__version__)
    application.state.history_store = store
    register_routes(application, store)

    logger.debug("Gopher Translator app created with history log %s", store.path)
    return application


app = create_app()


def start_server(host: str | None = None, port: int | None = None) -> None:
    """
    Run the API server under uvicorn.

    A fresh app is built so that configuration changes made after import
    (CLI flags, reloaded config) apply to the served history log.

    Args:
        host: Interface to bind.  Defaults to ``config.server.host``.
        port: TCP port.  Defaults to ``config.server.port``.
    """
    import uvicorn

    from gopher_translator.logging_setup import configure_logging

    configure_logging()

    host = host or config.server.host
    port = port or config.server.port

    application = create_app()
    logger.info(
        "Starting Gopher Translator on %s:%d (history: %s)",
        host,
        port,
        config.history.absolute_path,
    )
    uvicorn.run(application, host=host, port=port, log_config=None)


if __name__ == "__main__":
    start_server()
