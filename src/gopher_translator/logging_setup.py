"""Root logger configuration driven by ``config.logging``.

Modules never configure logging themselves; they create a module logger
with ``logging.getLogger(__name__)`` and leave handler setup to
:func:`configure_logging`, which the server and CLI call once at startup.

The ``json`` format routes standard-library records through structlog's
``ProcessorFormatter`` so that level, timestamp, logger name, ``extra=``
fields, stack info and exceptions all land in the rendered object.
"""

from __future__ import annotations

import logging

import structlog

from gopher_translator.config import config

_FORMATS = {
    "simple": "%(levelname)s: %(message)s",
    "detailed": "%(asctime)s %(levelname)-8s %(name)s: %(message)s",
}

# Applied to every stdlib LogRecord before rendering.
_FOREIGN_PRE_CHAIN = [
    structlog.stdlib.add_log_level,
    structlog.stdlib.add_logger_name,
    structlog.stdlib.ExtraAdder(),
    structlog.processors.TimeStamper(fmt="iso"),
    structlog.processors.StackInfoRenderer(),
    structlog.processors.format_exc_info,
]


def json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Build the formatter used for ``format = json``."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_FOREIGN_PRE_CHAIN,
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(level: str | None = None, fmt: str | None = None) -> None:
    """Install a stream handler on the root logger.

    Args:
        level: Log level name. Defaults to ``config.logging.level``.
        fmt:   One of ``"simple"``, ``"detailed"`` or ``"json"``. Defaults to
               ``config.logging.format``.
    """
    level = (level or config.logging.level).upper()
    fmt = fmt or config.logging.format

    handler = logging.StreamHandler()
    if fmt == "json":
        handler.setFormatter(json_formatter())
    else:
        handler.setFormatter(logging.Formatter(_FORMATS.get(fmt, _FORMATS["detailed"])))

    root = logging.getLogger()
    # Replace handlers from a previous call so repeated startup is idempotent.
    for existing in list(root.handlers):
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(getattr(logging, level, logging.INFO))
