"""Health and root endpoints.

Provides the root ``/`` endpoint (API identity and version) and the
``/health`` endpoint (liveness check plus whether the history log exists).
"""

from fastapi import APIRouter

from gopher_translator import __version__
from gopher_translator.history import HistoryStore


def router(store: HistoryStore) -> APIRouter:
    """Build the health router bound to a history store."""
    api = APIRouter()

    @api.get("/")
    async def root():
        """Root endpoint showing API identity and current version."""
        return {"message": "Gopher Translator API", "version": __version__}

    @api.get("/health")
    async def health_check():
        """Health check endpoint."""
        return {"status": "ok", "history_file_exists": store.exists()}

    return api
