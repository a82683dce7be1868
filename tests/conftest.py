# tests/conftest.py

from __future__ import annotations

from pathlib import Path
from types import SimpleNamespace

import pytest

from orion_tasks.tasks.task_list import TaskList
from orion_tasks.tasks.task_store import CsvTaskStore

from .fakes import InMemoryTaskStore


@pytest.fixture()
def settings(tmp_path: Path) -> SimpleNamespace:
    """
    Minimal settings object compatible with bootstrap.

    We intentionally use a SimpleNamespace rather than importing real config,
    so every test run gets its own storage file.
    """
    data_dir = tmp_path / "data"
    return SimpleNamespace(
        app_name="orion-test",
        log_level="DEBUG",
        data_dir=data_dir,
        tasks_path=data_dir / "tasks.csv",
        strict_writes=True,
    )


@pytest.fixture()
def csv_store(tmp_path: Path) -> CsvTaskStore:
    return CsvTaskStore(tmp_path / "data" / "tasks.csv")


@pytest.fixture()
def memory_store() -> InMemoryTaskStore:
    return InMemoryTaskStore()


@pytest.fixture()
def task_list(memory_store: InMemoryTaskStore) -> TaskList:
    """TaskList over the in-memory store (no disk I/O)."""
    return TaskList(memory_store)
