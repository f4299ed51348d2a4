"""Flat-file history log for translations.

Storage
-------
Every translation is stored as one line of a single text file::

    original######translated

Lines are separated by ``"\\n"`` with no trailing newline: the first record
is written as the file's sole content, and every later record is appended
as ``"\\n" + record``.  The file is created on the first write and never
compacted or rotated.

Ordering
--------
:meth:`HistoryStore.read_all` sorts the *raw lines* case-insensitively
before parsing them.  The sort key is the whole line, delimiter and
translation included, so records come back ordered by original text only
because ``#`` sorts before letters.  Insertion order is never returned.

Concurrency
-----------
``fcntl.flock(LOCK_EX)`` is held on the file handle for the duration of
each append.  This prevents torn writes between processes on the same host
and does not change the on-disk format.  Reads take no lock.

**Platform note:** ``fcntl`` is POSIX-only.  Windows is not supported.
"""

from __future__ import annotations

import fcntl
import logging
from dataclasses import dataclass
from pathlib import Path

from gopher_translator.history.errors import (
    HistoryOperationContext,
    HistoryReadError,
    HistoryWriteError,
    InvalidRecordError,
    MalformedRecordError,
)

logger = logging.getLogger(__name__)

HISTORY_DELIMITER = "######"
DEFAULT_HISTORY_FILENAME = "history.txt"


@dataclass(frozen=True)
class HistoryRecord:
    """One past translation.

    Attributes:
        original:   Text as submitted by the caller.
        translated: The Gopher translation returned for it.
    """

    original: str
    translated: str

    def serialize(self) -> str:
        """Return the on-disk line for this record (without newline)."""
        return f"{self.original}{HISTORY_DELIMITER}{self.translated}"

    @classmethod
    def parse(cls, line: str) -> HistoryRecord:
        """Split a stored line on the first delimiter.

        Raises:
            MalformedRecordError: If ``line`` contains no delimiter.
        """
        original, sep, translated = line.partition(HISTORY_DELIMITER)
        if not sep:
            raise MalformedRecordError(
                line,
                context=HistoryOperationContext(
                    operation="history.parse",
                    details=f"line has no {HISTORY_DELIMITER!r} delimiter: {line!r}",
                ),
            )
        return cls(original=original, translated=translated)


class HistoryStore:
    """Append-only translation history backed by a single text file.

    Attributes:
        _path:   Location of the log file.
        _strict: When ``True``, a stored line without a delimiter raises
                 :exc:`MalformedRecordError` from :meth:`read_all`; otherwise
                 it is skipped with a warning.
    """

    def __init__(self, path: Path | str, *, strict: bool = False) -> None:
        self._path = Path(path)
        self._strict = strict

    @property
    def path(self) -> Path:
        return self._path

    @property
    def strict(self) -> bool:
        return self._strict

    def exists(self) -> bool:
        """Return ``True`` if the log file is present."""
        return self._path.is_file()

    def append(self, original: str, translated: str) -> HistoryRecord:
        """Append one record to the log.

        The separator is decided from the file size while the lock is held:
        a non-empty log gets ``"\\n" + record``, while a missing log *or an
        existing but empty one* gets the bare record. An empty file therefore
        never starts with a blank line that would read back as malformed.

        Args:
            original:   Text as submitted by the caller.
            translated: Its translation.

        Returns:
            The stored :class:`HistoryRecord`.

        Raises:
            InvalidRecordError: If either field contains the delimiter or a
                                line break.
            HistoryWriteError:  If the file cannot be created or written.
        """
        _validate_field("original", original)
        _validate_field("translated", translated)
        if original.endswith(HISTORY_DELIMITER[0]):
            # A trailing "#" would merge into the delimiter and shift the
            # field boundary when the line is parsed back.
            raise InvalidRecordError(
                context=HistoryOperationContext(
                    operation="history.append",
                    details=f"original text must not end with {HISTORY_DELIMITER[0]!r}",
                )
            )

        record = HistoryRecord(original=original, translated=translated)
        try:
            _append_record_locked(self._path, record.serialize())
        except OSError as exc:
            raise HistoryWriteError(
                context=HistoryOperationContext(
                    operation="history.append",
                    details=f"failed to write to {self._path}: {exc}",
                ),
                cause=exc,
            ) from exc

        logger.debug("history: appended record for %r to %s", original, self._path.name)
        return record

    def read_all(self) -> list[HistoryRecord]:
        """Return every stored record, sorted case-insensitively by raw line.

        Returns:
            The parsed records.  An absent log yields an empty list.

        Raises:
            HistoryReadError:     If the log exists but cannot be read.
            MalformedRecordError: In strict mode, for the first line (in
                                  sorted order) that lacks the delimiter.
        """
        if not self.exists():
            return []

        try:
            body = self._path.read_text(encoding="utf-8")
        except (OSError, UnicodeDecodeError) as exc:
            raise HistoryReadError(
                context=HistoryOperationContext(
                    operation="history.read_all",
                    details=f"failed to read {self._path}: {exc}",
                ),
                cause=exc,
            ) from exc

        if not body:
            return []

        lines = sorted(body.split("\n"), key=str.lower)

        records: list[HistoryRecord] = []
        for line in lines:
            try:
                records.append(HistoryRecord.parse(line))
            except MalformedRecordError:
                if self._strict:
                    raise
                logger.warning("history: skipping malformed line in %s: %r", self._path, line)
        return records

    def clear(self) -> None:
        """Delete the log file if it exists."""
        try:
            self._path.unlink(missing_ok=True)
        except OSError as exc:
            raise HistoryWriteError(
                context=HistoryOperationContext(
                    operation="history.clear",
                    details=f"failed to remove {self._path}: {exc}",
                ),
                cause=exc,
            ) from exc


def _validate_field(name: str, value: str) -> None:
    """Refuse text that would break the one-record-per-line format."""
    if HISTORY_DELIMITER in value:
        raise InvalidRecordError(
            context=HistoryOperationContext(
                operation="history.append",
                details=f"{name} text must not contain {HISTORY_DELIMITER!r}",
            )
        )
    if "\n" in value or "\r" in value:
        raise InvalidRecordError(
            context=HistoryOperationContext(
                operation="history.append",
                details=f"{name} text must not contain line breaks",
            )
        )


def _append_record_locked(path: Path, line: str) -> None:
    """Append ``line`` to ``path`` under an exclusive lock.

    The separator is decided after the lock is taken: an empty (or new)
    file receives the bare line, anything else receives ``"\\n" + line``.

    Raises:
        OSError: If the directory creation, file open, or write fails.
    """
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("a", encoding="utf-8", newline="") as fh:
        fcntl.flock(fh, fcntl.LOCK_EX)
        try:
            fh.seek(0, 2)
            prefix = "\n" if fh.tell() > 0 else ""
            fh.write(prefix + line)
            fh.flush()
        finally:
            fcntl.flock(fh, fcntl.LOCK_UN)
