"""API route registration."""

from fastapi import FastAPI

from gopher_translator.api.routes import health, history, translate
from gopher_translator.history import HistoryStore


def register_routes(app: FastAPI, store: HistoryStore) -> None:
    """Register all API routers with the FastAPI app."""
    app.include_router(health.router(store))
    app.include_router(translate.router(store))
    app.include_router(history.router(store))
