"""History package: append-only log of translations.

Public surface
--------------
- :class:`HistoryStore`   - append one record, read all records sorted.
- :class:`HistoryRecord`  - an ``(original, translated)`` pair.
- :data:`HISTORY_DELIMITER` - the ``######`` field separator on disk.
- :exc:`HistoryError` and subclasses - typed failures for the API layer.

Usage example
-------------
::

    from gopher_translator.history import HistoryStore, HistoryWriteError

    store = HistoryStore("history.txt")
    try:
        store.append("apple", "gapple")
    except HistoryWriteError:
        logger.exception("History write failed.")
    for record in store.read_all():
        print(record.original, record.translated)
"""

from gopher_translator.history.errors import (
    HistoryError,
    HistoryOperationContext,
    HistoryOperationError,
    HistoryReadError,
    HistoryWriteError,
    InvalidRecordError,
    MalformedRecordError,
)
from gopher_translator.history.store import (
    DEFAULT_HISTORY_FILENAME,
    HISTORY_DELIMITER,
    HistoryRecord,
    HistoryStore,
)

__all__ = [
    "DEFAULT_HISTORY_FILENAME",
    "HISTORY_DELIMITER",
    "HistoryError",
    "HistoryOperationContext",
    "HistoryOperationError",
    "HistoryReadError",
    "HistoryRecord",
    "HistoryStore",
    "HistoryWriteError",
    "InvalidRecordError",
    "MalformedRecordError",
]
