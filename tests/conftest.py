"""Shared pytest fixtures for Snowflake tests."""

import shutil
import tempfile
from pathlib import Path
from typing import Generator

import pytest

from snowflakes.core.config import SnowflakeConfig
from snowflakes.core.snowflake_db import SnowflakeDB


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Create a temporary directory for test files.

    Yields:
        Path to temporary directory

    Cleanup:
        Directory is removed after test completes
    """
    temp_path = Path(tempfile.mkdtemp())
    try:
        yield temp_path
    finally:
        shutil.rmtree(temp_path, ignore_errors=True)


@pytest.fixture
def test_config(temp_dir: Path) -> SnowflakeConfig:
    """Create a test configuration backed by a temporary database.

    Args:
        temp_dir: Temporary directory from fixture

    Returns:
        SnowflakeConfig instance for testing
    """
    return SnowflakeConfig(
        db_path=str(temp_dir / "data" / "snowflakes.db"),
        server_port=3000,
        _env_file=None,
    )


@pytest.fixture
def snowflake_db(temp_dir: Path) -> SnowflakeDB:
    """Create an empty snowflake store in the temporary directory."""
    return SnowflakeDB(temp_dir / "snowflakes.db")


@pytest.fixture
def test_client(monkeypatch, test_config: SnowflakeConfig):
    """FastAPI TestClient wired to a temporary database.

    The module-level ``config`` in ``snowflakes.api.main`` is swapped for
    ``test_config`` before the lifespan runs, so the store is created in the
    temporary directory.
    """
    from fastapi.testclient import TestClient

    from snowflakes.api import main

    monkeypatch.setattr(main, "config", test_config)

    with TestClient(main.app) as client:
        yield client


@pytest.fixture
def sample_snowflakes(test_client) -> list[dict]:
    """Create three snowflakes through the API.

    Returns:
        The create responses, in creation order
    """
    payloads = [
        {"seed": "alpha", "size": 5, "style": "classic"},
        {"seed": "beta", "size": 9, "style": "dense"},
        {"seed": "gamma", "size": 7, "style": "minimal"},
    ]
    created = []
    for payload in payloads:
        resp = test_client.post("/api/snowflakes", json=payload)
        assert resp.status_code == 201
        created.append(resp.json())
    return created
