"""
This file contains shared fixtures and configuration for the test suite.

Pytest will automatically discover and use the fixtures defined in this file.

The environment is configured before any ``gamehub`` import: the app runs
against a throwaway SQLite database and a fixed signing secret. Each test
starts from an empty database.
"""

import os
import tempfile
from collections.abc import Generator
from pathlib import Path

_TEST_DIR = Path(tempfile.mkdtemp(prefix="gamehub-tests-"))
TEST_DB_PATH = _TEST_DIR / "gamehub_test.db"

os.environ["GAMEHUB_DATABASE_URL"] = f"sqlite+aiosqlite:///{TEST_DB_PATH}"
os.environ["JWT_SECRET_KEY"] = "test-secret-key"
# Lowest bcrypt cost keeps the suite fast
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ["LOG_DIR"] = str(_TEST_DIR / "logs")

import pytest  # noqa: E402
import pytest_asyncio  # noqa: E402
from fastapi import FastAPI  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402


@pytest.fixture(autouse=True)
def fresh_database() -> Generator[None, None, None]:
    """Remove the SQLite file so every test sees empty tables."""
    TEST_DB_PATH.unlink(missing_ok=True)
    yield
    TEST_DB_PATH.unlink(missing_ok=True)


@pytest_asyncio.fixture
async def database():
    """Create the tables for tests that talk to the handlers directly."""
    from gamehub.db import init_db

    await init_db()
    yield


@pytest.fixture(scope="session")
def app() -> FastAPI:
    """
    Create a new application instance for the test session.
    """
    from main import create_app

    return create_app()


@pytest.fixture
def client(app: FastAPI) -> Generator[TestClient, None, None]:
    """
    Test client with the application's lifespan running, which creates the tables.
    """
    with TestClient(app) as c:
        yield c
