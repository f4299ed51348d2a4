"""History endpoint (``/history/``)."""

import logging

from fastapi import APIRouter, HTTPException, Query

from gopher_translator.api.models import HistoryEntry, HistoryFormat, HistoryResponse
from gopher_translator.history import HistoryReadError, HistoryStore, MalformedRecordError

logger = logging.getLogger(__name__)


def router(store: HistoryStore) -> APIRouter:
    """Build the history router bound to a history store."""
    api = APIRouter()

    @api.get("/history/", response_model=HistoryResponse)
    def get_history(output_format: HistoryFormat = Query("legacy", alias="format")):
        """
        Return every recorded translation.

        Records are ordered by a case-insensitive sort of the raw stored
        lines.  The default ``legacy`` format emits one single-key
        ``{original: translated}`` mapping per record; ``format=records``
        emits ``{"original": ..., "translated": ...}`` objects, which stay
        distinct when clients merge entries sharing an original.
        """
        try:
            records = store.read_all()
        except MalformedRecordError as exc:
            logger.error("History log contains a malformed line: %r", exc.line)
            raise HTTPException(status_code=500, detail="History log is corrupt") from exc
        except HistoryReadError as exc:
            logger.exception("Failed to read history log")
            raise HTTPException(status_code=500, detail="Failed to read history") from exc

        if output_format == "records":
            entries = [
                HistoryEntry(original=record.original, translated=record.translated)
                for record in records
            ]
            return HistoryResponse(history=entries)

        return HistoryResponse(history=[{record.original: record.translated} for record in records])

    return api
