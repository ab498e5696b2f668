"""Shared pytest fixtures for the todo service tests."""

from __future__ import annotations

from collections.abc import Iterator

import pytest
from fastapi.testclient import TestClient

from app.main import create_app
from app.todo.store import TodoStore


@pytest.fixture
def store() -> TodoStore:
    """Empty in-memory store."""
    return TodoStore()


@pytest.fixture
def client(store: TodoStore) -> Iterator[TestClient]:
    """Test client over a fresh app that owns ``store``.

    Entering the client runs the lifespan, so startup/shutdown are exercised too.
    """
    with TestClient(create_app(store)) as c:
        yield c
