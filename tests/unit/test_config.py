"""Tests for snowflakes.core.config — configuration management.

Tests cover:
- Default values for all configuration fields.
- Environment variable overrides via the SNOWFLAKES_ prefix.
- Automatic creation of the database directory.
- Pydantic validation constraints (port range, size range, log level).
"""

from __future__ import annotations

from pathlib import Path

import pytest

from snowflakes.core.config import SnowflakeConfig


class TestConfigDefaults:
    """Verify that SnowflakeConfig provides sensible defaults."""

    def test_default_server_port(self, monkeypatch, temp_dir: Path):
        """Default server port should be 3000."""
        monkeypatch.delenv("SNOWFLAKES_SERVER_PORT", raising=False)
        cfg = SnowflakeConfig(db_path=str(temp_dir / "flakes.db"), _env_file=None)
        assert cfg.server_port == 3000

    def test_default_db_path(self, monkeypatch, temp_dir: Path):
        monkeypatch.delenv("SNOWFLAKES_DB_PATH", raising=False)
        monkeypatch.chdir(temp_dir)
        cfg = SnowflakeConfig(_env_file=None)
        assert cfg.db_path == Path("data") / "snowflakes.db"

    def test_default_size_limits(self, test_config: SnowflakeConfig):
        assert test_config.max_size == 20
        assert test_config.random_size_min == 3
        assert test_config.random_size_max == 12

    def test_default_log_level(self, test_config: SnowflakeConfig):
        assert test_config.log_level == "INFO"


class TestConfigEnvironment:
    """Verify SNOWFLAKES_* environment overrides."""

    def test_env_overrides_port(self, monkeypatch, temp_dir: Path):
        monkeypatch.setenv("SNOWFLAKES_SERVER_PORT", "8080")
        cfg = SnowflakeConfig(db_path=str(temp_dir / "flakes.db"), _env_file=None)
        assert cfg.server_port == 8080

    def test_env_overrides_db_path(self, monkeypatch, temp_dir: Path):
        target = temp_dir / "env" / "flakes.db"
        monkeypatch.setenv("SNOWFLAKES_DB_PATH", str(target))
        cfg = SnowflakeConfig(_env_file=None)
        assert cfg.db_path == target


class TestConfigDirectoryCreation:
    """Verify that SnowflakeConfig creates the database directory."""

    def test_db_parent_created(self, test_config: SnowflakeConfig):
        assert test_config.db_path.parent.is_dir()

    def test_creates_nested_directories(self, temp_dir: Path):
        """Config should create deeply nested directories via parents=True."""
        deep = temp_dir / "a" / "b" / "c" / "flakes.db"
        cfg = SnowflakeConfig(db_path=str(deep), _env_file=None)
        assert cfg.db_path.parent.is_dir()
        assert isinstance(cfg.db_path, Path)


class TestConfigValidation:
    """Verify Pydantic validation constraints on config fields."""

    def test_invalid_port_too_low(self, temp_dir: Path):
        with pytest.raises(Exception):
            SnowflakeConfig(server_port=80, db_path=str(temp_dir / "f.db"), _env_file=None)

    def test_invalid_port_too_high(self, temp_dir: Path):
        with pytest.raises(Exception):
            SnowflakeConfig(server_port=70000, db_path=str(temp_dir / "f.db"), _env_file=None)

    def test_invalid_log_level(self, temp_dir: Path):
        with pytest.raises(Exception):
            SnowflakeConfig(log_level="LOUD", db_path=str(temp_dir / "f.db"), _env_file=None)

    def test_inverted_random_size_range(self, temp_dir: Path):
        with pytest.raises(Exception):
            SnowflakeConfig(
                random_size_min=10,
                random_size_max=4,
                db_path=str(temp_dir / "f.db"),
                _env_file=None,
            )

    def test_zero_max_size_rejected(self, temp_dir: Path):
        with pytest.raises(Exception):
            SnowflakeConfig(max_size=0, db_path=str(temp_dir / "f.db"), _env_file=None)
