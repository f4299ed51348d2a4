"""Typed exceptions for the history package.

Infrastructure failures (the log file cannot be read or written) and data
problems (a record that cannot be stored, a stored line that cannot be
parsed) raise distinct exception types so the API layer can map them to
deterministic HTTP 4xx/5xx responses instead of terminating the process.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class HistoryOperationContext:
    """Structured operation metadata carried by history exceptions.

    Attributes:
        operation: Stable operation identifier (for example
            ``"history.append"``).
        details: Optional human-readable context for logs and debugging.
    """

    operation: str
    details: str | None = None


class HistoryError(RuntimeError):
    """Base exception for history-layer failures."""


class HistoryOperationError(HistoryError):
    """Base exception for history operation failures.

    Args:
        context: Structured operation metadata.
        cause: Optional underlying exception.
    """

    def __init__(
        self,
        *,
        context: HistoryOperationContext,
        cause: Exception | None = None,
    ) -> None:
        message = context.operation
        if context.details:
            message = f"{message}: {context.details}"
        super().__init__(message)
        self.context = context
        self.cause = cause


class HistoryReadError(HistoryOperationError):
    """The history log exists but could not be read."""


class HistoryWriteError(HistoryOperationError):
    """The history log could not be created or appended to."""


class InvalidRecordError(HistoryOperationError):
    """A record was refused because it would corrupt the log format."""


class MalformedRecordError(HistoryOperationError):
    """A stored line has no delimiter and cannot be split into a record.

    Attributes:
        line: The offending raw line.
    """

    def __init__(self, line: str, *, context: HistoryOperationContext) -> None:
        super().__init__(context=context)
        self.line = line
