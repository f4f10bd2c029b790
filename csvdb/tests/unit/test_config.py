"""Unit tests for configuration module."""

from __future__ import annotations

from pathlib import Path

import pytest

from csvdb.infrastructure.config import Config, ObservabilityConfig, StorageConfig, get_config


@pytest.mark.unit
class TestConfig:
    """Tests for Config class."""

    def test_default_config(self) -> None:
        """Test default configuration values."""
        config = Config()

        assert config.storage.root_dir == Path("./data")
        assert config.storage.create_if_missing is False
        assert config.storage.encoding == "utf-8"
        assert config.observability.log_level == "INFO"
        assert config.observability.log_format == "json"
        assert config.observability.metrics_port == 8001

    def test_custom_storage_config(self, temp_dir: Path) -> None:
        storage = StorageConfig(root_dir=temp_dir / "db", create_if_missing=True)

        assert storage.root_dir == temp_dir / "db"
        assert storage.create_if_missing is True

    def test_env_override(self, monkeypatch: pytest.MonkeyPatch, temp_dir: Path) -> None:
        """Nested settings are read from CSVDB_ prefixed variables."""
        monkeypatch.setenv("CSVDB_STORAGE__ROOT_DIR", str(temp_dir))
        monkeypatch.setenv("CSVDB_OBSERVABILITY__LOG_LEVEL", "DEBUG")

        config = Config()

        assert config.storage.root_dir == temp_dir
        assert config.observability.log_level == "DEBUG"

    def test_invalid_metrics_port(self) -> None:
        with pytest.raises(ValueError):
            ObservabilityConfig(metrics_port=0)

    def test_invalid_log_format(self) -> None:
        with pytest.raises(ValueError):
            ObservabilityConfig(log_format="xml")  # type: ignore[arg-type]

    def test_empty_encoding_rejected(self) -> None:
        with pytest.raises(ValueError):
            StorageConfig(encoding="")


@pytest.mark.unit
class TestConfigSingleton:
    """Tests for get_config singleton."""

    def test_get_config_returns_same_instance(self) -> None:
        config1 = get_config()
        config2 = get_config()
        assert config1 is config2
