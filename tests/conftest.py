"""
Shared pytest fixtures for the Gopher translator test suite.

This module provides fixtures that are automatically available to all test files:
- Temporary history log paths and HistoryStore instances
- FastAPI TestClient instances bound to a temporary history log

Every fixture writes under pytest's ``tmp_path`` so no test touches the
working directory's ``history.txt``.
"""

from collections.abc import Generator
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from gopher_translator.config import use_test_history
from gopher_translator.history import HistoryStore

# ============================================================================
# HISTORY FIXTURES
# ============================================================================


@pytest.fixture(scope="function")
def history_path(tmp_path: Path) -> Generator[Path, None, None]:
    """
    Point the configured history log at a temporary file.

    The file itself is not created; tests that need an existing log
    append to it first.

    Yields:
        Path to the (not yet existing) temporary history file
    """
    with use_test_history(tmp_path / "history.txt") as path:
        yield path


@pytest.fixture(scope="function")
def history_store(history_path: Path) -> HistoryStore:
    """Create a lenient HistoryStore on the temporary log."""
    return HistoryStore(history_path)


@pytest.fixture(scope="function")
def strict_history_store(history_path: Path) -> HistoryStore:
    """Create a strict HistoryStore on the temporary log."""
    return HistoryStore(history_path, strict=True)


# ============================================================================
# FASTAPI TEST CLIENT FIXTURES
# ============================================================================


@pytest.fixture(scope="function")
def test_client(history_path: Path) -> TestClient:
    """
    Create a FastAPI TestClient bound to the temporary history log.

    Example:
        def test_word(test_client):
            response = test_client.post("/word/", json={"english-word": "apple"})
            assert response.json() == {"gopher-word": "gapple"}
    """
    from gopher_translator.api.server import create_app

    return TestClient(create_app(history_path=history_path, strict=False))


@pytest.fixture(scope="function")
def strict_test_client(history_path: Path) -> TestClient:
    """Create a TestClient whose history reads fail on malformed lines."""
    from gopher_translator.api.server import create_app

    return TestClient(create_app(history_path=history_path, strict=True))
