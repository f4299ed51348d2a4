"""Gopher Translator.

An HTTP service that transliterates English words and sentences into
Gopher and keeps an append-only history of every translation it performs.

Version Management
------------------
``__version__`` is read from the installed package metadata at import time.
The single source of truth is the ``version`` field in ``pyproject.toml``.
``api/server.py`` and ``api/routes/health.py`` import it from here.
"""

from __future__ import annotations

from importlib.metadata import PackageNotFoundError, version

# ---------------------------------------------------------------------------
# Package version, read from pyproject.toml via importlib.metadata.
#
# Falls back to the literal below when the package is imported from a
# source checkout without being installed.
# ---------------------------------------------------------------------------
try:
    __version__: str = version("gopher-translator")
except PackageNotFoundError:
    __version__ = "0.1.0"
