"""Pytest configuration and fixtures for csvdb tests."""

from __future__ import annotations

import tempfile
from pathlib import Path
from typing import Generator

import pytest
from prometheus_client import CollectorRegistry

from csvdb.adapters.outbound import FileCSVStore
from csvdb.application import Database
from csvdb.domain import Column, Row, Table
from csvdb.infrastructure.config import Config, StorageConfig
from csvdb.infrastructure.metrics import MetricsRegistry


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """Provide a temporary directory for tests."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_config(temp_dir: Path) -> Config:
    """Provide a test configuration rooted in a temporary directory."""
    return Config(
        storage=StorageConfig(
            root_dir=temp_dir / "db",
            create_if_missing=True,
        ),
    )


@pytest.fixture
def metrics_registry() -> MetricsRegistry:
    """Provide a fresh metrics registry for each test."""
    # Use a separate registry to avoid conflicts between tests
    registry = CollectorRegistry(auto_describe=True)
    return MetricsRegistry(registry=registry)


@pytest.fixture
def store() -> FileCSVStore:
    """Provide a UTF-8 CSV store."""
    return FileCSVStore(encoding="utf-8")


@pytest.fixture
def people() -> Table:
    """A three-row table of people."""
    return Table(
        name="people",
        columns=[Column("id"), Column("name"), Column("city")],
        rows=[
            Row(["1", "Alice", "Paris"]),
            Row(["2", "Bob", "Berlin"]),
            Row(["3", "Chuck", "Paris"]),
        ],
    )


@pytest.fixture
def db_dir(temp_dir: Path) -> Path:
    """Lay out a database with two tables and a metadata type override."""
    root = temp_dir / "db"
    (root / ".csvdb" / "table1").mkdir(parents=True)
    (root / ".csvdb" / "table2").mkdir(parents=True)
    (root / "version.txt").write_text("1\n")
    (root / "metadata.csv").write_text(
        "table1,column1,int\ntable1,column2,string\ntable2,column1,string\n"
    )
    (root / ".csvdb" / "table1" / "data.csv").write_text(
        "column1,column2\n1,value1\n2,value2\n"
    )
    (root / ".csvdb" / "table2" / "data.csv").write_text("column1\nvalue3\nvalue4\n")
    return root


@pytest.fixture
def database(temp_dir: Path, metrics_registry: MetricsRegistry) -> Database:
    """An initialized, empty on-disk database."""
    return Database.initialize(temp_dir / "db", metrics=metrics_registry)


# Markers for test categories
def pytest_configure(config: pytest.Config) -> None:
    """Configure custom pytest markers."""
    config.addinivalue_line("markers", "unit: Unit tests (fast, isolated)")
    config.addinivalue_line("markers", "integration: Integration tests")
