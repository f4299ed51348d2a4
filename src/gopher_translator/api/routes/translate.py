"""Translation endpoints (``/word/`` and ``/sentence/``).

Each request is translated, then recorded in the history log before the
response is returned.  Bad input maps to 400, storage failures to 500; no
failure terminates the server process.
"""

import logging

from fastapi import APIRouter, HTTPException

from gopher_translator.api.models import (
    SentenceRequest,
    SentenceResponse,
    WordRequest,
    WordResponse,
)
from gopher_translator.history import HistoryStore, HistoryWriteError, InvalidRecordError
from gopher_translator.translation import (
    InvalidInputError,
    transform_sentence,
    transform_word,
)

logger = logging.getLogger(__name__)


def _record(store: HistoryStore, original: str, translated: str) -> None:
    """Append to history, translating storage errors into HTTP errors."""
    try:
        store.append(original, translated)
    except InvalidRecordError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    except HistoryWriteError as exc:
        logger.exception("Failed to record translation of %r", original)
        raise HTTPException(status_code=500, detail="Failed to record translation") from exc


def router(store: HistoryStore) -> APIRouter:
    """Build the translation router bound to a history store."""
    api = APIRouter()

    @api.post("/word/", response_model=WordResponse)
    def translate_word(request: WordRequest):
        """Translate a single English word."""
        try:
            gopher_word = transform_word(request.english_word)
        except InvalidInputError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        _record(store, request.english_word, gopher_word)
        return WordResponse(gopher_word=gopher_word)

    @api.post("/sentence/", response_model=SentenceResponse)
    def translate_sentence(request: SentenceRequest):
        """
        Translate an English sentence.

        The trimmed sentence (not the raw body) is what gets recorded.
        """
        sentence = request.english_sentence.strip()
        try:
            gopher_sentence = transform_sentence(sentence)
        except InvalidInputError as exc:
            raise HTTPException(status_code=400, detail=str(exc)) from exc

        _record(store, sentence, gopher_sentence)
        return SentenceResponse(gopher_sentence=gopher_sentence)

    return api
