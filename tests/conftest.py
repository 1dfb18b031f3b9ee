"""Shared fixtures for the art gallery test-suite.

The application reads its settings at import time, so the database location
is pointed at a throwaway directory before any ``artapp`` module is imported.
"""

from __future__ import annotations

import os
import tempfile
from contextlib import contextmanager
from pathlib import Path
from typing import Any, Callable, Iterator

_TMP_DIR = Path(tempfile.mkdtemp(prefix="artapp-tests-"))
os.environ.setdefault("ARTAPP_DATABASE_URL", f"sqlite:///{_TMP_DIR / 'artapp.db'}")

import pytest  # noqa: E402
from sqlalchemy.pool import StaticPool  # noqa: E402
from sqlmodel import Session, SQLModel, create_engine  # noqa: E402

import artapp.models.entities  # noqa: E402,F401  (register tables)


@pytest.fixture
def session_factory() -> Iterator[Callable[[], Any]]:
    """Session factory bound to a private in-memory SQLite database."""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    SQLModel.metadata.create_all(engine)

    @contextmanager
    def factory() -> Iterator[Session]:
        with Session(engine) as session:
            yield session

    yield factory
    engine.dispose()
