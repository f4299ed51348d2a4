"""
Pydantic models for API requests and responses.

The public JSON keys are hyphenated (``english-word``, ``gopher-word``), so
each model declares a Python-friendly field name with an alias for the
wire name.  ``populate_by_name`` lets server code construct responses with
the Python names; FastAPI serialises them back out by alias.
"""

from typing import Literal

from pydantic import BaseModel, ConfigDict, Field

# ============================================================================
# REQUEST MODELS (Client → Server)
# ============================================================================


class WordRequest(BaseModel):
    """
    Request to translate a single word.

    Attributes:
        english_word: The English word (JSON key ``english-word``)
    """

    model_config = ConfigDict(populate_by_name=True)

    english_word: str = Field(alias="english-word")


class SentenceRequest(BaseModel):
    """
    Request to translate a sentence.

    Attributes:
        english_sentence: The English sentence including its end punctuation
            (JSON key ``english-sentence``)
    """

    model_config = ConfigDict(populate_by_name=True)

    english_sentence: str = Field(alias="english-sentence")


# ============================================================================
# RESPONSE MODELS (Server → Client)
# ============================================================================


class WordResponse(BaseModel):
    """Translated word (JSON key ``gopher-word``)."""

    model_config = ConfigDict(populate_by_name=True)

    gopher_word: str = Field(alias="gopher-word")


class SentenceResponse(BaseModel):
    """Translated sentence (JSON key ``gopher-sentence``)."""

    model_config = ConfigDict(populate_by_name=True)

    gopher_sentence: str = Field(alias="gopher-sentence")


class HistoryEntry(BaseModel):
    """Structured history entry returned by ``GET /history/?format=records``."""

    original: str
    translated: str


class HistoryResponse(BaseModel):
    """
    Full translation history.

    Attributes:
        history: Either single-key ``{original: translated}`` mappings (the
            default ``legacy`` format) or :class:`HistoryEntry` objects
            (``records`` format), in stored-line sort order.
    """

    history: list[dict[str, str]] | list[HistoryEntry]


HistoryFormat = Literal["legacy", "records"]
