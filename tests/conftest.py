"""Pytest configuration for test isolation.

The CLI configures the package logger once per process and reads
``STATEMENT_INGEST_LOG_LEVEL`` from the environment (or a ``.env`` file). Both
would leak between tests: a handler bound to a previous test's captured
stream, or a level exported by the developer's shell. An autouse fixture
clears the variable and detaches handlers after each test.
"""

from __future__ import annotations

import os
from collections.abc import Iterator
from pathlib import Path

import pytest

from statement_ingest.logging_setup import reset_logging


@pytest.fixture(autouse=True)
def _isolate_logging(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Iterator[None]:
    monkeypatch.delenv("STATEMENT_INGEST_LOG_LEVEL", raising=False)
    # The CLI loads ``.env`` from the working directory; use an empty one.
    monkeypatch.chdir(tmp_path)
    yield
    # ``load_dotenv`` writes to os.environ directly, bypassing monkeypatch.
    os.environ.pop("STATEMENT_INGEST_LOG_LEVEL", None)
    reset_logging()
