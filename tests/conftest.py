# tests/conftest.py

import asyncio
import os
from pathlib import Path

# Settings are read at import time, so configure before importing the app
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///:memory:"
os.environ["CREATE_TABLES_ON_STARTUP"] = "false"

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from taskez.database import build_sessionmaker, create_tables
from taskez.dependencies import get_sessionmaker
from taskez.main import app
from taskez.services.tasks import TaskStore
from taskez.services.users import UserStore


def _engine(tmp_path: Path):
    # NullPool: no connection outlives the event loop that opened it
    return create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'taskez.db'}", poolclass=NullPool)


@pytest.fixture()
async def sessionmaker(tmp_path: Path):
    engine = _engine(tmp_path)
    await create_tables(engine)
    yield build_sessionmaker(engine)
    await engine.dispose()


@pytest.fixture()
def task_store(sessionmaker) -> TaskStore:
    return TaskStore(sessionmaker)


@pytest.fixture()
def user_store(sessionmaker) -> UserStore:
    return UserStore(sessionmaker)


@pytest.fixture()
def client(tmp_path: Path):
    engine = _engine(tmp_path)
    asyncio.run(create_tables(engine))
    factory = build_sessionmaker(engine)

    app.dependency_overrides[get_sessionmaker] = lambda: factory
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()


@pytest.fixture()
def owner(client: TestClient) -> int:
    """Registers and logs in a user, returning its owner_id."""
    client.post("/api/register", json={"login_key": "u1", "password": "p", "name": "Alice"})
    response = client.post("/api/login", json={"login_key": "u1", "password": "p"})
    return response.json()["user_id"]
